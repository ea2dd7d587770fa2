"""Tests for the drying summary and chart tables."""

import numpy as np
import pytest

from lyocalc.models.drying_step import DryingStep, SubTimePoint, new_step
from lyocalc.reporting.chart_data import BASE_COLUMNS, build_chart_frame, step_temperature_profile
from lyocalc.reporting.summary import summarize_drying
from lyocalc.simulation import DryingResult, simulate_drying
from lyocalc.terpenes.boiling import InvalidPressureError, boiling_point_at_mbar
from lyocalc.terpenes.library import get_terpene, get_terpenes


def _two_point_curve(pressure_end=1.0):
    return [
        SubTimePoint(time=0.0, progress=0.0, step=0, temperature=-10.0, pressure=1.0),
        SubTimePoint(time=1.0, progress=50.0, step=1, temperature=10.0, pressure=pressure_end),
    ]


class TestSummary:
    def test_empty_result(self):
        assert summarize_drying(DryingResult()) is None

    def test_over_dry_summary(self, long_single_step):
        summary = summarize_drying(simulate_drying(long_single_step))
        assert summary.total_time == pytest.approx(10.0)
        assert summary.completion_percent == 100.0
        assert summary.is_over_dry
        assert summary.status == "Over Dry"
        assert summary.over_dry_percent > 0
        assert summary.formatted_total_time == "10.0 hrs"
        assert summary.max_temperature == pytest.approx(-10.0)
        assert summary.min_pressure == pytest.approx(0.2)

    def test_under_dry_summary(self, short_single_step):
        summary = summarize_drying(simulate_drying(short_single_step), "F")
        assert summary.is_under_dry
        assert summary.status == "Under Dry"
        assert summary.formatted_total_time == "10 min"
        assert summary.max_temperature == pytest.approx(14.0)

    def test_extremes_across_steps(self, make_settings):
        steps = [new_step(-30, 200, 60), new_step(10, 0.5, 60)]
        summary = summarize_drying(simulate_drying(make_settings(steps, ice_weight=5.0)))
        assert summary.max_temperature == pytest.approx(10.0)
        assert summary.min_pressure == pytest.approx(0.5)

    def test_to_dict(self, long_single_step):
        d = summarize_drying(simulate_drying(long_single_step)).to_dict()
        assert d["status"] == "Over Dry"
        assert "formatted_total_time" in d
        assert "completion_time" in d


class TestChartFrame:
    def test_empty_curve(self):
        df = build_chart_frame([], get_terpenes(["Linalool"]))
        assert df.empty
        assert list(df.columns) == BASE_COLUMNS + ["Linalool"]

    def test_grid_resolution(self):
        df = build_chart_frame(_two_point_curve())
        # max(20, ceil(1 x 2)) intervals -> 21 instants including both curve times
        assert len(df) == 21
        assert df["time"].iloc[0] == 0.0
        assert df["time"].iloc[-1] == 1.0

    def test_linear_interpolation(self):
        df = build_chart_frame(_two_point_curve(), display_unit="F")
        mid = df[np.isclose(df["time"], 0.5)].iloc[0]
        assert mid["temperature"] == pytest.approx(0.0)
        assert mid["display_temp"] == pytest.approx(32.0)
        assert mid["progress"] == pytest.approx(25.0)

    def test_steps_carried(self):
        df = build_chart_frame(_two_point_curve())
        assert df["step"].iloc[0] == 0
        assert df["step"].iloc[-2] == 0
        assert df["step"].iloc[-1] == 1

    def test_simulated_curve(self, long_single_step):
        curve = simulate_drying(long_single_step).points
        terpenes = get_terpenes(["alpha-Pinene", "D-Limonene"])
        df = build_chart_frame(curve, terpenes)
        assert len(df) >= len(curve)
        assert df["time"].is_monotonic_increasing
        assert df["progress"].is_monotonic_increasing
        expected = boiling_point_at_mbar(get_terpene("D-Limonene"), 0.2)
        assert np.allclose(df["D-Limonene"], expected)

    def test_invalid_pressure_surfaces(self):
        with pytest.raises(InvalidPressureError):
            build_chart_frame(_two_point_curve(pressure_end=0.0), get_terpenes(["Linalool"]))


class TestStepProfile:
    def test_staircase(self):
        steps = [new_step(-30, 200, 180), new_step(-10, 150, 180), new_step(50, 100, 180, "F")]
        df = step_temperature_profile(steps)
        assert list(df["time"]) == pytest.approx([0.0, 3.0, 3.0, 6.0, 6.0, 9.0])
        assert list(df["temperature"]) == pytest.approx([-30.0, -30.0, -10.0, -10.0, 10.0, 10.0])

    def test_display_unit(self):
        df = step_temperature_profile([new_step(0, 1, 60)], "F")
        assert list(df["display_temp"]) == pytest.approx([32.0, 32.0])

    def test_empty(self):
        assert step_temperature_profile([]).empty

    def test_negative_duration_does_not_run_backwards(self):
        steps = [DryingStep(temperature=-10, pressure=1, duration=-60), new_step(10, 1, 60)]
        times = list(step_temperature_profile(steps)["time"])
        assert times == sorted(times)
        assert times[-1] == pytest.approx(1.0)
