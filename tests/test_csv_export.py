"""
Tests for CSV exports.
"""
from io import BytesIO

import pandas as pd

from lact8.calculations.lactate import ThresholdResult, detect_lactate_thresholds
from lact8.reporting import export_result_csv, export_steps_csv


class TestStepsCsv:

    def test_columns_and_rows(self, demo_steps):
        df = pd.read_csv(BytesIO(export_steps_csv(demo_steps)))

        assert list(df.columns) == ["step", "intensity", "heart_rate_bpm", "lactate_mmol_l"]
        assert len(df) == 11
        assert df["step"].tolist() == list(range(1, 12))

    def test_sorted_by_intensity(self, demo_steps):
        df = pd.read_csv(BytesIO(export_steps_csv(list(reversed(demo_steps)))))

        assert df["intensity"].is_monotonic_increasing
        assert df.iloc[0]["lactate_mmol_l"] == 1.0

    def test_empty(self):
        df = pd.read_csv(BytesIO(export_steps_csv([])))
        assert df.empty


class TestResultCsv:

    def test_demo_result(self, demo_steps):
        result = detect_lactate_thresholds(demo_steps)

        df = pd.read_csv(BytesIO(export_result_csv(result)))

        assert df["threshold"].tolist() == ["LT1", "LT2"]
        assert df.loc[0, "intensity"] == 260
        assert df.loc[1, "intensity"] == 340
        assert df.loc[1, "lactate_mmol_l"] == 4.1

    def test_missing_lt2_is_empty_row(self, demo_steps):
        result = ThresholdResult(lt1=demo_steps[3])

        df = pd.read_csv(BytesIO(export_result_csv(result)))

        assert len(df) == 2
        assert pd.isna(df.loc[1, "intensity"])
        assert pd.isna(df.loc[1, "lactate_mmol_l"])
