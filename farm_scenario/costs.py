"""Per-category cultivation costs scaled by land area."""
from dataclasses import dataclass, asdict
from typing import Dict

from .config import CROP_PARAMS, RATES
from .params import CropType, SimulationParams


@dataclass(frozen=True)
class CostBreakdown:
    """Total cost per category in ₹ for the whole plot."""
    seeds: float
    fertilizer: float
    pesticides: float
    irrigation: float
    labor: float
    machinery: float
    transportation: float

    @property
    def total(self) -> float:
        # Literal sum in field order; callers compare against sum(to_dict().values()).
        return sum(self.to_dict().values())

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


def crop_price(crop) -> float:
    """Market price in ₹/ton."""
    return CROP_PARAMS[CropType(crop).value]["price_per_ton"]


def compute_costs(params: SimulationParams, rates=RATES) -> CostBreakdown:
    land = params.land_size
    return CostBreakdown(
        seeds=params.seed_cost * land,
        fertilizer=params.fertilizer_amount * land * rates.fertilizer_per_kg,
        pesticides=params.pesticides * land * rates.pesticide_per_kg,
        irrigation=params.irrigation_frequency * land * rates.irrigation_per_event,
        labor=params.labor_cost * land,
        machinery=params.machinery * land,
        transportation=params.transportation * land,
    )
