"""
AI Readiness Finder - ROI Calculator
Monthly savings projection from team size, repetitive hours and hourly rate.
"""
import math

from engines.catalog import clamp, round_half_up

WEEKS_PER_MONTH = 4.3
# Even perfect readiness converts at most 54% of baseline hours
AUTOMATABLE_SHARE = 0.6
CAPTURE_RATE = 0.9


def _to_number(value):
    if value is None or value == '' or isinstance(value, bool):
        return None
    try:
        n = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(n) or math.isinf(n):
        return None
    return n


def compute_roi(team_size, hours_per_week, hourly_rate, overall):
    """
    Project monthly savings at the current overall readiness.
    Returns None (unavailable) unless all three inputs are present and positive.
    """
    ts = _to_number(team_size)
    hppw = _to_number(hours_per_week)
    rate = _to_number(hourly_rate)
    if not ts or not hppw or not rate or ts < 0 or hppw < 0 or rate < 0:
        return None

    baseline_hrs = ts * hppw * WEEKS_PER_MONTH
    automation_yield = (clamp(overall or 0, 0, 100) / 100) * AUTOMATABLE_SHARE * CAPTURE_RATE
    hours_saved = round_half_up(baseline_hrs * automation_yield)
    cash_saved = round_half_up(hours_saved * rate)
    return {
        'baselineHrs': round_half_up(baseline_hrs),
        'automationYield': round_half_up(clamp(automation_yield * 100, 0, 100)),
        'hoursSaved': hours_saved,
        'cashSaved': cash_saved,
    }
