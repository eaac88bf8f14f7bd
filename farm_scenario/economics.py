"""Revenue, profit and profit margin."""
from dataclasses import dataclass


@dataclass(frozen=True)
class Economics:
    revenue: float
    profit: float
    profit_margin: float  # percent of revenue


def profit_margin(profit: float, revenue: float) -> float:
    """Profit as a percentage of revenue; 0 when there is no revenue."""
    if revenue > 0:
        return profit / revenue * 100
    return 0.0


def compute_economics(expected_yield: float, price_per_ton: float, total_cost: float) -> Economics:
    """
    Derive revenue and profit for a scenario.

    Profit is not clamped: a negative value is a loss and is reported as such.
    """
    revenue = expected_yield * price_per_ton
    profit = revenue - total_cost
    return Economics(
        revenue=revenue,
        profit=profit,
        profit_margin=profit_margin(profit, revenue),
    )
