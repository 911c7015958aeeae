"""
Salary range slider helpers.

The listing page filters on a two-handle slider over [0, 3,000,000] whose
handles can never be closer than PRICE_GAP. Labels use Indian notation
(lakhs and thousands).
"""

from typing import Tuple

SLIDER_MIN = 0
SLIDER_MAX = 3_000_000
PRICE_GAP = 10_000

LAKH = 100_000
THOUSAND = 1_000


def _compact(value: float) -> str:
    # One decimal place unless the value is whole
    return f"{value:.0f}" if value % 1 == 0 else f"{value:.1f}"


def format_currency(value: float) -> str:
    """
    Short rupee label for a salary value.

    Example:
        >>> format_currency(2_900_000)
        '₹29L'
        >>> format_currency(150_000)
        '₹1.5L'
        >>> format_currency(2_500)
        '₹2.5K'
    """
    if value >= LAKH:
        return f"₹{_compact(value / LAKH)}L"
    if value >= THOUSAND:
        return f"₹{_compact(value / THOUSAND)}K"
    return f"₹{value:g}"


def clamp_salary_range(min_value: float, max_value: float) -> Tuple[float, float]:
    """
    Keep both handles inside the slider and at least PRICE_GAP apart.

    The minimum handle yields when the two collide, mirroring dragging the
    lower handle into the upper one.
    """
    max_value = min(max(max_value, SLIDER_MIN + PRICE_GAP), SLIDER_MAX)
    min_value = max(min(min_value, SLIDER_MAX), SLIDER_MIN)

    if max_value - min_value < PRICE_GAP:
        min_value = max_value - PRICE_GAP

    return min_value, max_value


def range_label(min_value: float, max_value: float) -> str:
    return f"{format_currency(min_value)} - {format_currency(max_value)}"
