"""Bounded FIFO of recent scenario summaries for trend comparison."""

import logging
import threading
from collections import deque
from dataclasses import dataclass
from typing import Any, Dict, Iterator, Optional, Tuple

import pandas as pd

from .config import HISTORY
from .simulation import SimulationResult

log = logging.getLogger(__name__)

COLUMNS = ["label", "yield", "profit", "cost", "risk_level", "water_usage", "environmental_impact"]


@dataclass(frozen=True)
class ComparisonRecord:
    """Lightweight summary of one simulation run."""
    label: str
    yield_: float
    profit: float
    cost: float
    risk_level: str
    water_usage: float
    environmental_impact: float

    @classmethod
    def from_result(cls, label: str, result: SimulationResult) -> "ComparisonRecord":
        return cls(
            label=label,
            yield_=result.expected_yield,
            profit=result.profit,
            cost=result.total_cost,
            risk_level=result.risk_level.value,
            water_usage=result.water_usage,
            environmental_impact=result.environmental_impact,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "label": self.label,
            "yield": self.yield_,
            "profit": self.profit,
            "cost": self.cost,
            "risk_level": self.risk_level,
            "water_usage": self.water_usage,
            "environmental_impact": self.environmental_impact,
        }


class ComparisonHistory:
    """
    Most recent simulation summaries, oldest first.

    Once ``capacity`` records are held, appending evicts the oldest one.
    Labels count every run recorded since the last ``clear()``, so they
    stay unique after eviction.
    """

    def __init__(self, capacity: Optional[int] = None):
        capacity = HISTORY.capacity if capacity is None else capacity
        if capacity < 1:
            raise ValueError(f"History capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._records = deque(maxlen=capacity)
        self._runs = 0
        self._lock = threading.Lock()

    def append(self, record: ComparisonRecord) -> None:
        with self._lock:
            self._append(record)

    def _append(self, record: ComparisonRecord) -> None:
        if len(self._records) == self.capacity:
            log.debug(f"History full, evicting {self._records[0].label}")
        self._records.append(record)
        self._runs += 1

    def record(self, result: SimulationResult) -> ComparisonRecord:
        """Summarise ``result`` under the next label and append it."""
        with self._lock:
            label = f"{HISTORY.label_prefix} {self._runs + 1}"
            rec = ComparisonRecord.from_result(label, result)
            self._append(rec)
        return rec

    def snapshot(self) -> Tuple[ComparisonRecord, ...]:
        with self._lock:
            return tuple(self._records)

    def clear(self) -> None:
        with self._lock:
            self._records.clear()
            self._runs = 0

    def to_frame(self) -> pd.DataFrame:
        """History as a DataFrame, one row per run, for charts and export."""
        return pd.DataFrame([r.to_dict() for r in self.snapshot()], columns=COLUMNS)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[ComparisonRecord]:
        return iter(self.snapshot())
