"""Tests for the scenario orchestrator lifecycle."""
import threading

import pytest

from farm_scenario.history import ComparisonHistory
from farm_scenario import orchestrator as orchestrator_module
from farm_scenario.orchestrator import ScenarioOrchestrator, ScenarioState
from farm_scenario.params import ValidationError, default_params


class TestRun:
    def test_starts_idle_with_defaults(self, orchestrator):
        assert orchestrator.state is ScenarioState.IDLE
        assert orchestrator.params == default_params()
        assert orchestrator.result is None

    def test_successful_run(self, orchestrator):
        result = orchestrator.run()
        assert orchestrator.state is ScenarioState.COMPUTED
        assert orchestrator.result is result
        assert [r.label for r in orchestrator.get_history()] == ["Scenario 1"]

    def test_run_with_explicit_params(self, orchestrator, heavy_inputs):
        result = orchestrator.run(heavy_inputs)
        assert orchestrator.params == heavy_inputs
        assert result.risk_level.value == "high"

    def test_history_keeps_last_five(self, orchestrator, defaults):
        for land in [1, 2, 3, 4, 5, 6, 7]:
            orchestrator.run(defaults.with_changes(land_size=land))
        history = orchestrator.get_history()
        assert len(history) == 5
        assert [r.cost for r in history] == [75000 / 2 * land for land in [3, 4, 5, 6, 7]]

    def test_repeat_runs_identical(self, orchestrator):
        assert orchestrator.run() == orchestrator.run()
        assert len(orchestrator.get_history()) == 2

    def test_language_override(self, orchestrator):
        result = orchestrator.run(language="hi")
        assert result.suggestions[0].startswith("आपके")


class TestErrors:
    def test_invalid_run_keeps_previous_result(self, orchestrator, defaults):
        good = orchestrator.run()
        with pytest.raises(ValidationError):
            orchestrator.run(defaults.with_changes(pesticides=70))
        assert orchestrator.state is ScenarioState.ERROR
        assert orchestrator.result is good
        assert [e.field for e in orchestrator.last_errors] == ["pesticides"]
        assert len(orchestrator.get_history()) == 1

    def test_errors_cleared_on_next_success(self, orchestrator, defaults):
        with pytest.raises(ValidationError):
            orchestrator.run(defaults.with_changes(land_size=0))
        orchestrator.run(defaults)
        assert orchestrator.last_errors == []
        assert orchestrator.state is ScenarioState.COMPUTED

    def test_rejected_params_not_kept(self, orchestrator, defaults):
        orchestrator.run(defaults.with_changes(crop_type="rice"))
        with pytest.raises(ValidationError):
            orchestrator.run(defaults.with_changes(irrigation_frequency=0))
        assert orchestrator.params == defaults.with_changes(crop_type="rice")
        assert orchestrator.run().params.crop_type.value == "rice"

    def test_run_validates_the_params_it_computes(self, orchestrator, defaults, monkeypatch):
        # Swapping the session inputs mid-run must not change what was checked.
        seen = []
        real_validate = orchestrator_module.validate

        def validate_then_swap(params):
            seen.append(params)
            orchestrator.params = defaults.with_changes(land_size=0)
            return real_validate(params)

        monkeypatch.setattr(orchestrator_module, "validate", validate_then_swap)
        result = orchestrator.run()
        assert seen == [defaults]
        assert result.params == defaults
        assert orchestrator.state is ScenarioState.COMPUTED


class TestParams:
    def test_update_params(self, orchestrator):
        p = orchestrator.update_params(crop_type="rice", irrigation_frequency=5)
        assert p.crop_type.value == "rice"
        assert orchestrator.run().params.irrigation_frequency == 5

    def test_update_params_waits_for_running_scenario(self, orchestrator):
        with orchestrator._lock:
            worker = threading.Thread(target=orchestrator.update_params, kwargs={"land_size": 4})
            worker.start()
            worker.join(timeout=0.2)
            assert worker.is_alive()
            assert orchestrator.params.land_size == 2
        worker.join()
        assert orchestrator.params.land_size == 4

    def test_optimize(self, orchestrator):
        orchestrator.update_params(crop_type="cotton", irrigation_frequency=7, pesticides=50)
        p = orchestrator.optimize()
        assert (p.irrigation_frequency, p.fertilizer_amount, p.pesticides) == (3, 45, 20)
        assert p.crop_type.value == "cotton"
        assert orchestrator.params is p

    def test_reset_keeps_history(self, orchestrator):
        orchestrator.update_params(land_size=9)
        orchestrator.run()
        params = orchestrator.reset()
        assert params == default_params()
        assert orchestrator.result is None
        assert orchestrator.state is ScenarioState.IDLE
        assert len(orchestrator.get_history()) == 1

    def test_clear_history(self, orchestrator):
        orchestrator.run()
        orchestrator.clear_history()
        assert orchestrator.get_history() == ()

    def test_injected_history_is_shared(self):
        shared = ComparisonHistory(capacity=3)
        a = ScenarioOrchestrator(history=shared)
        b = ScenarioOrchestrator(history=shared)
        a.run()
        b.run()
        assert [r.label for r in shared] == ["Scenario 1", "Scenario 2"]
