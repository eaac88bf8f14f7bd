"""Tabular export of simulation results and comparison history."""

import logging
from datetime import date
from pathlib import Path
from typing import Optional, Union

import pandas as pd

from .config import OUTPUT
from .history import ComparisonHistory
from .simulation import SimulationResult

log = logging.getLogger(__name__)

HEADERS = {
    "en": {
        "label": "Scenario",
        "crop": "Crop",
        "yield": "Yield (tons)",
        "profit": "Profit (₹)",
        "cost": "Cost (₹)",
        "risk_level": "Risk Level",
        "water_usage": "Water Usage (liters)",
        "environmental_impact": "Environmental Impact",
        "category": "Category",
        "amount": "Amount (₹)",
        "share_pct": "Share (%)",
    },
    "hi": {
        "label": "परिदृश्य",
        "crop": "फसल",
        "yield": "उत्पादन (टन)",
        "profit": "लाभ (₹)",
        "cost": "लागत (₹)",
        "risk_level": "जोखिम स्तर",
        "water_usage": "पानी का उपयोग (लीटर)",
        "environmental_impact": "पर्यावरणीय प्रभाव",
        "category": "श्रेणी",
        "amount": "राशि (₹)",
        "share_pct": "हिस्सा (%)",
    },
}


def _headers(language: str) -> dict:
    return HEADERS.get(language, HEADERS["en"])


def header(key: str, language: str = "en") -> str:
    """Localised column title for ``key``."""
    return _headers(language)[key]


def result_to_frame(result: SimulationResult, language: str = "en") -> pd.DataFrame:
    """Cost breakdown of one result, one row per category."""
    costs = result.cost_breakdown.to_dict()
    df = pd.DataFrame({"category": list(costs.keys()), "amount": list(costs.values())})
    total = result.total_cost
    df["share_pct"] = df["amount"] / total * 100 if total > 0 else 0.0
    return df.rename(columns=_headers(language))


def history_to_frame(history: ComparisonHistory, language: str = "en") -> pd.DataFrame:
    return history.to_frame().rename(columns=_headers(language))


def export_history(
    history: ComparisonHistory,
    path: Optional[Union[str, Path]] = None,
    fmt: Optional[str] = None,
    language: str = "en",
) -> Path:
    """
    Write the comparison history to csv or parquet.

    Without ``path`` the file goes to the configured output directory as
    ``scenario_comparison_<date>.<fmt>``.
    """
    fmt = (fmt or OUTPUT.format).lower()
    if fmt not in OUTPUT.supported:
        raise ValueError(f"Unsupported export format '{fmt}'; use one of {OUTPUT.supported}")

    if path is None:
        path = OUTPUT.directory / f"scenario_comparison_{date.today().isoformat()}.{fmt}"
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    df = history_to_frame(history, language)
    if fmt == "parquet":
        df.to_parquet(path, index=False)
    else:
        df.to_csv(path, index=False)

    log.info(f"Exported {len(df)} scenario(s) to {path}")
    return path
