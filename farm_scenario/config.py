"""Project configuration: crop catalogue, cost rates, runtime settings."""
import os
from pathlib import Path
from dataclasses import dataclass, field

# ─────────────────────────────────────────────────────────────────────────────
# SCOPE
# ─────────────────────────────────────────────────────────────────────────────
CROPS = ["wheat", "rice", "corn", "soybean", "cotton", "sugarcane"]
SEASONS = {
    "rabi": "Rabi (Winter)",
    "kharif": "Kharif (Monsoon)",
    "zaid": "Zaid (Summer)",
}
LANGUAGES = ["en", "hi"]

# ─────────────────────────────────────────────────────────────────────────────
# PATHS
# ─────────────────────────────────────────────────────────────────────────────
BASE_DIR = Path(__file__).parent.parent
OUTPUTS_DIR = Path(os.getenv("FARM_SCENARIO_OUTPUT_DIR", BASE_DIR / "outputs"))

# ─────────────────────────────────────────────────────────────────────────────
# CROP PARAMETERS
# ─────────────────────────────────────────────────────────────────────────────
CROP_PARAMS = {
    "wheat": {
        "base_yield_t_ha": 3.5,
        "price_per_ton": 25000,
        "seasons": ["rabi"],
    },
    "rice": {
        "base_yield_t_ha": 4.2,
        "price_per_ton": 28000,
        "seasons": ["kharif"],
    },
    "corn": {
        "base_yield_t_ha": 5.8,
        "price_per_ton": 22000,
        "seasons": ["kharif", "rabi"],
    },
    "soybean": {
        "base_yield_t_ha": 2.1,
        "price_per_ton": 45000,
        "seasons": ["kharif"],
    },
    "cotton": {
        "base_yield_t_ha": 1.8,
        "price_per_ton": 55000,
        "seasons": ["kharif"],
    },
    "sugarcane": {
        "base_yield_t_ha": 75,
        "price_per_ton": 3200,
        "seasons": ["rabi", "zaid"],
    },
}

# ─────────────────────────────────────────────────────────────────────────────
# SCENARIO PRESETS
# ─────────────────────────────────────────────────────────────────────────────
DEFAULT_SCENARIO = {
    "irrigation_frequency": 3,
    "fertilizer_amount": 50,
    "crop_type": "wheat",
    "season": "rabi",
    "land_size": 2,
    "pesticides": 25,
    "labor_cost": 15000,
    "seed_cost": 5000,
    "machinery": 8000,
    "transportation": 3000,
}

# Hand-tuned "balanced" inputs; other fields are left as the user set them.
BALANCED_PRESET = {
    "irrigation_frequency": 3,
    "fertilizer_amount": 45,
    "pesticides": 20,
}

# ─────────────────────────────────────────────────────────────────────────────
# COST RATES (₹)
# ─────────────────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class CostRates:
    fertilizer_per_kg: float = 25.0
    pesticide_per_kg: float = 150.0
    irrigation_per_event: float = 500.0   # per watering per hectare
    water_liters_per_event: float = 1000.0  # per watering per hectare
    water_cost_per_liter: float = 0.02
    labor_hours_per_ha: float = 200.0

RATES = CostRates()

# ─────────────────────────────────────────────────────────────────────────────
# HISTORY
# ─────────────────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class HistoryConfig:
    capacity: int = 5
    label_prefix: str = "Scenario"

HISTORY = HistoryConfig()

# ─────────────────────────────────────────────────────────────────────────────
# OUTPUT FORMAT
# ─────────────────────────────────────────────────────────────────────────────
@dataclass
class OutputConfig:
    format: str = os.getenv("FARM_SCENARIO_OUTPUT_FORMAT", "csv")  # csv, parquet
    directory: Path = OUTPUTS_DIR
    supported: list = field(default_factory=lambda: ["csv", "parquet"])

OUTPUT = OutputConfig()

# ─────────────────────────────────────────────────────────────────────────────
# API CONFIG
# ─────────────────────────────────────────────────────────────────────────────
@dataclass
class APIConfig:
    host: str = os.getenv("FARM_SCENARIO_HOST", "0.0.0.0")
    port: int = int(os.getenv("FARM_SCENARIO_PORT", "8000"))
    # The comparison history lives in process memory, so one worker only.
    workers: int = 1
    reload: bool = False
    cors_origins: list = field(default_factory=lambda: ["*"])

API = APIConfig()

# ─────────────────────────────────────────────────────────────────────────────
# LOGGING
# ─────────────────────────────────────────────────────────────────────────────
LOG_LEVEL = os.getenv("FARM_SCENARIO_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"
