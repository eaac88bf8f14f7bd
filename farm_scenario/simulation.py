"""
Scenario simulation: one pass from inputs to a full economic result.

Usage:
    from farm_scenario.params import default_params
    from farm_scenario.simulation import run_simulation

    result = run_simulation(default_params())
    print(result.to_text())
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Tuple

from .advisory import generate_suggestions
from .costs import CostBreakdown, compute_costs, crop_price
from .economics import compute_economics
from .params import SimulationParams, ensure_valid
from .risk import (
    RiskLevel, assess_risk, environmental_impact,
    water_usage, water_cost, labor_hours,
)
from .yield_model import compute_yield

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulationResult:
    """Derived outcome of one scenario. Money in ₹, yield in tons, water in litres."""
    params: SimulationParams
    expected_yield: float
    total_cost: float
    revenue: float
    profit: float
    profit_margin: float
    risk_level: RiskLevel
    risk_score: int
    water_usage: float
    water_cost: float
    labor_hours: float
    labor_cost_total: float
    environmental_impact: float
    suggestions: Tuple[str, ...]
    cost_breakdown: CostBreakdown

    def to_dict(self) -> Dict[str, Any]:
        return {
            "params": self.params.to_dict(),
            "expected_yield": self.expected_yield,
            "total_cost": self.total_cost,
            "revenue": self.revenue,
            "profit": self.profit,
            "profit_margin": self.profit_margin,
            "risk_level": self.risk_level.value,
            "risk_score": self.risk_score,
            "water_usage": self.water_usage,
            "water_cost": self.water_cost,
            "labor_hours": self.labor_hours,
            "labor_cost_total": self.labor_cost_total,
            "environmental_impact": self.environmental_impact,
            "suggestions": list(self.suggestions),
            "cost_breakdown": self.cost_breakdown.to_dict(),
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    def to_text(self) -> str:
        """Human-readable summary."""
        p = self.params
        lines = [
            "=" * 60,
            "SCENARIO SIMULATION RESULT",
            "=" * 60,
            f"Crop: {p.crop_type.value} ({p.season.value}) on {p.land_size:g} ha",
            f"Irrigation: {p.irrigation_frequency}/week | Fertilizer: {p.fertilizer_amount:g} kg/ha"
            f" | Pesticides: {p.pesticides:g} kg/ha",
            "",
            "-" * 40,
            "ECONOMICS",
            "-" * 40,
            f"Expected Yield: {self.expected_yield:.2f} tons",
            f"Revenue: ₹{self.revenue:,.0f}",
            f"Total Cost: ₹{self.total_cost:,.0f}",
            f"Net Profit: ₹{self.profit:,.0f}",
            f"Profit Margin: {self.profit_margin:.1f}%",
            "",
            "-" * 40,
            "COST BREAKDOWN",
            "-" * 40,
        ]
        for category, amount in self.cost_breakdown.to_dict().items():
            lines.append(f"  {category.title():<15} ₹{amount:,.0f}")
        lines.extend([
            "",
            "-" * 40,
            "RESOURCES & RISK",
            "-" * 40,
            f"Risk Level: {self.risk_level.value.upper()} (score {self.risk_score})",
            f"Water Usage: {self.water_usage:,.0f} liters (₹{self.water_cost:,.0f})",
            f"Labor: {self.labor_hours:,.0f} hours (₹{self.labor_cost_total:,.0f})",
            f"Environmental Impact: {self.environmental_impact:.0f}/100",
            "",
            "-" * 40,
            "SUGGESTIONS",
            "-" * 40,
        ])
        lines.extend(f"  • {s}" for s in self.suggestions)
        lines.append("=" * 60)
        return "\n".join(lines)


def run_simulation(params: SimulationParams, language: str = "en") -> SimulationResult:
    """
    Compute the full result for one scenario.

    Raises ``ValidationError`` before any computation if an input is out of
    range. Deterministic: the same params always give an equal result.
    """
    ensure_valid(params)

    expected_yield = compute_yield(params)
    costs = compute_costs(params)
    total_cost = costs.total
    econ = compute_economics(expected_yield, crop_price(params.crop_type), total_cost)
    risk = assess_risk(params)
    usage = water_usage(params)

    result = SimulationResult(
        params=params,
        expected_yield=expected_yield,
        total_cost=total_cost,
        revenue=econ.revenue,
        profit=econ.profit,
        profit_margin=econ.profit_margin,
        risk_level=risk.level,
        risk_score=risk.score,
        water_usage=usage,
        water_cost=water_cost(usage),
        labor_hours=labor_hours(params),
        labor_cost_total=costs.labor,
        environmental_impact=environmental_impact(params),
        suggestions=tuple(generate_suggestions(params, language)),
        cost_breakdown=costs,
    )
    log.debug(
        f"Simulated {params.crop_type.value}: yield={expected_yield:.2f}t "
        f"profit=₹{econ.profit:,.0f} risk={risk.level.value}"
    )
    return result
