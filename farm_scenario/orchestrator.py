"""
Scenario Orchestrator

Coordinates one planning session: holds the current inputs, runs the
simulation, keeps the latest result and records every completed run in a
comparison history.

Lifecycle of a run:
    IDLE -> VALIDATING -> ERROR | COMPUTING -> COMPUTED

Usage:
    from farm_scenario.orchestrator import ScenarioOrchestrator

    orchestrator = ScenarioOrchestrator()
    orchestrator.update_params(crop_type="rice", irrigation_frequency=4)
    result = orchestrator.run()
    for record in orchestrator.get_history():
        print(record.label, record.profit)
"""

import logging
import threading
from enum import Enum
from typing import List, Optional, Tuple

from .history import ComparisonHistory, ComparisonRecord
from .params import (
    ParameterError, SimulationParams, ValidationError,
    default_params, optimized_params, validate,
)
from .simulation import SimulationResult, run_simulation

log = logging.getLogger(__name__)


class ScenarioState(Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    ERROR = "error"
    COMPUTING = "computing"
    COMPUTED = "computed"


class ScenarioOrchestrator:
    """
    Owns the active scenario and its comparison history.

    Runs are serialised with a lock: a run completes, history append
    included, before the next one starts.
    """

    def __init__(
        self,
        params: Optional[SimulationParams] = None,
        history: Optional[ComparisonHistory] = None,
        language: str = "en",
    ):
        self.params = params or default_params()
        self.history = history if history is not None else ComparisonHistory()
        self.language = language
        self.result: Optional[SimulationResult] = None
        self.state = ScenarioState.IDLE
        self.last_errors: List[ParameterError] = []
        self._lock = threading.Lock()

    def update_params(self, **changes) -> SimulationParams:
        """Replace some inputs. Validation happens on the next run."""
        with self._lock:
            self.params = self.params.with_changes(**changes)
            return self.params

    def run(
        self,
        params: Optional[SimulationParams] = None,
        language: Optional[str] = None,
    ) -> SimulationResult:
        """
        Simulate ``params`` (or the current inputs) and record the run.

        ``language`` overrides the session language for the suggestions.

        On invalid input the state becomes ERROR, ``last_errors`` lists the
        offending fields, the previous result and the current inputs are
        kept and ``ValidationError`` is raised.
        """
        with self._lock:
            params = self.params if params is None else params

            self.state = ScenarioState.VALIDATING
            errors = validate(params)
            if errors:
                self.state = ScenarioState.ERROR
                self.last_errors = errors
                log.warning(f"Simulation rejected: {', '.join(e.field for e in errors)}")
                raise ValidationError(errors)

            self.params = params
            self.last_errors = []
            self.state = ScenarioState.COMPUTING
            result = run_simulation(params, language or self.language)
            record = self.history.record(result)

            self.result = result
            self.state = ScenarioState.COMPUTED
            log.info(
                f"{record.label}: {params.crop_type.value} yield={result.expected_yield:.2f}t "
                f"profit=₹{result.profit:,.0f} risk={result.risk_level.value}"
            )
            return result

    def get_history(self) -> Tuple[ComparisonRecord, ...]:
        return self.history.snapshot()

    def clear_history(self) -> None:
        self.history.clear()
        log.info("Comparison history cleared")

    def optimize(self) -> SimulationParams:
        """Switch to the balanced input preset, keeping crop, land and costs."""
        with self._lock:
            self.params = optimized_params(self.params)
        return self.params

    def reset(self) -> SimulationParams:
        """Restore default inputs and drop the active result. History is kept."""
        with self._lock:
            self.params = default_params()
            self.result = None
            self.last_errors = []
            self.state = ScenarioState.IDLE
        return self.params
