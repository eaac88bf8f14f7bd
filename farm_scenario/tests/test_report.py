"""Tests for tabular export."""
import pandas as pd
import pytest

from farm_scenario.report import HEADERS, export_history, history_to_frame, result_to_frame
from farm_scenario.simulation import run_simulation


@pytest.fixture
def filled_history(orchestrator, defaults):
    for crop in ["wheat", "rice", "corn"]:
        orchestrator.run(defaults.with_changes(crop_type=crop))
    return orchestrator.history


class TestFrames:
    def test_result_breakdown(self, defaults):
        df = result_to_frame(run_simulation(defaults))
        en = HEADERS["en"]
        assert list(df.columns) == [en["category"], en["amount"], en["share_pct"]]
        assert len(df) == 7
        assert df[en["amount"]].sum() == 75000
        assert df[en["share_pct"]].sum() == pytest.approx(100)

    def test_history_headers_localised(self, filled_history):
        df = history_to_frame(filled_history, language="hi")
        assert df.columns[0] == HEADERS["hi"]["label"]
        assert len(df) == 3

    def test_unknown_language_uses_english(self, filled_history):
        df = history_to_frame(filled_history, language="xx")
        assert df.columns[0] == "Scenario"


class TestExport:
    def test_csv(self, filled_history, tmp_path):
        path = export_history(filled_history, tmp_path / "out" / "cmp.csv", fmt="csv")
        df = pd.read_csv(path)
        assert df["Scenario"].tolist() == ["Scenario 1", "Scenario 2", "Scenario 3"]

    def test_parquet(self, filled_history, tmp_path):
        path = export_history(filled_history, tmp_path / "cmp.parquet", fmt="parquet")
        df = pd.read_parquet(path)
        assert len(df) == 3
        assert "Risk Level" in df.columns

    def test_unsupported_format(self, filled_history, tmp_path):
        with pytest.raises(ValueError):
            export_history(filled_history, tmp_path / "cmp.xlsx", fmt="xlsx")
