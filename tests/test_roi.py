"""Tests for the ROI calculator."""

import pytest

from engines.roi import compute_roi


class TestComputeROI:
    def test_reference_projection(self):
        roi = compute_roi(10, 5, 60, 80)
        assert roi == {"baselineHrs": 215, "automationYield": 43, "hoursSaved": 93, "cashSaved": 5580}

    def test_numeric_strings_accepted(self):
        assert compute_roi("10", "5", "60", 80) == compute_roi(10, 5, 60, 80)

    @pytest.mark.parametrize("inputs", [
        (0, 5, 60), (10, 0, 60), (10, 5, 0),
        (None, 5, 60), (10, None, 60), (10, 5, None),
        ("", 5, 60), ("abc", 5, 60), (float("nan"), 5, 60),
        (-10, 5, 60),
    ])
    def test_unavailable(self, inputs):
        assert compute_roi(*inputs, 80) is None

    def test_zero_readiness_saves_nothing(self):
        roi = compute_roi(4, 10, 50, 0)
        assert roi["baselineHrs"] == 172
        assert roi["automationYield"] == 0
        assert roi["hoursSaved"] == 0
        assert roi["cashSaved"] == 0

    def test_full_readiness_caps_at_54_percent(self):
        roi = compute_roi(1, 10, 100, 100)
        assert roi["automationYield"] == 54
        assert roi["baselineHrs"] == 43
        assert roi["hoursSaved"] == 23  # 43 * 0.54 = 23.22
        assert roi["cashSaved"] == 2300

    def test_overall_out_of_range_is_clamped(self):
        assert compute_roi(1, 10, 100, 250) == compute_roi(1, 10, 100, 100)

    def test_results_non_negative_integers(self):
        roi = compute_roi(3, 2.5, 42.5, 61.3)
        for v in roi.values():
            assert isinstance(v, int)
            assert v >= 0
        assert 0 <= roi["automationYield"] <= 100
