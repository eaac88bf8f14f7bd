"""
Heuristic risk classification and resource/environmental indicators.

The risk score is a small point tally used only to bucket a scenario into
low/medium/high; it is not a probability.
"""
from dataclasses import dataclass
from enum import Enum
from typing import List

from .config import RATES
from .params import SimulationParams

IMPACT_MIN = 0.0
IMPACT_MAX = 100.0


class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class RiskAssessment:
    score: int
    level: RiskLevel
    factors: List[str]


def risk_factors(params: SimulationParams) -> List[tuple]:
    """(points, description) for every risk condition that applies."""
    found = []
    if params.irrigation_frequency < 2:
        found.append((2, "under-irrigation"))
    if params.irrigation_frequency > 5:
        found.append((1, "over-irrigation"))
    if params.fertilizer_amount > 80:
        found.append((1, "heavy fertilizer use"))
    if params.pesticides > 40:
        found.append((1, "heavy pesticide use"))
    return found


def risk_score(params: SimulationParams) -> int:
    return sum(points for points, _ in risk_factors(params))


def classify_risk(score: int) -> RiskLevel:
    if score >= 3:
        return RiskLevel.HIGH
    if score >= 1:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def assess_risk(params: SimulationParams) -> RiskAssessment:
    found = risk_factors(params)
    score = sum(points for points, _ in found)
    return RiskAssessment(score=score, level=classify_risk(score), factors=[d for _, d in found])


def environmental_impact(params: SimulationParams) -> float:
    """Impact index in [0, 100] from fertilizer, pesticide and irrigation intensity."""
    raw = (
        params.fertilizer_amount * 0.8
        + params.pesticides * 1.2
        + params.irrigation_frequency * 5
    )
    return max(IMPACT_MIN, min(IMPACT_MAX, raw))


def water_usage(params: SimulationParams, rates=RATES) -> float:
    """Litres of irrigation water."""
    return params.irrigation_frequency * params.land_size * rates.water_liters_per_event


def water_cost(usage_liters: float, rates=RATES) -> float:
    return usage_liters * rates.water_cost_per_liter


def labor_hours(params: SimulationParams, rates=RATES) -> float:
    return params.land_size * rates.labor_hours_per_ha
