"""
Tests for the salary slider helpers (frontend/salary_range.py)
and listing parameter building (frontend/api_client.py).
"""

import pytest

from frontend.api_client import JobBoardClient, build_listing_params
from frontend.salary_range import (
    PRICE_GAP,
    SLIDER_MAX,
    SLIDER_MIN,
    clamp_salary_range,
    format_currency,
    range_label,
)


class TestFormatCurrency:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (2_900_000, "₹29L"),
            (150_000, "₹1.5L"),
            (100_000, "₹1L"),
            (2_500, "₹2.5K"),
            (10_000, "₹10K"),
            (999, "₹999"),
            (0, "₹0"),
        ],
    )
    def test_labels(self, value, expected):
        assert format_currency(value) == expected

    def test_range_label(self):
        assert range_label(0, 2_900_000) == "₹0 - ₹29L"


class TestClampSalaryRange:
    def test_valid_range_unchanged(self):
        assert clamp_salary_range(100_000, 900_000) == (100_000, 900_000)

    def test_handles_closer_than_gap(self):
        low, high = clamp_salary_range(600_000, 605_000)

        assert high == 605_000
        assert high - low == PRICE_GAP

    def test_crossed_handles(self):
        low, high = clamp_salary_range(800_000, 200_000)

        assert (low, high) == (190_000, 200_000)

    def test_bounds(self):
        low, high = clamp_salary_range(-50, 9_000_000)

        assert low == SLIDER_MIN
        assert high == SLIDER_MAX

    def test_max_at_bottom_keeps_gap(self):
        assert clamp_salary_range(0, 0) == (0, PRICE_GAP)


class TestBuildListingParams:
    def test_drops_empty_and_non_positive(self):
        params = build_listing_params({
            "searchQuery": "node",
            "location": "",
            "jobType": None,
            "minSalary": 0,
            "maxSalary": "-1",
        })

        assert params == {"searchQuery": "node"}

    def test_salaries_as_plain_numbers(self):
        params = build_listing_params({"minSalary": 250000.0, "maxSalary": "1500000"})

        assert params == {"minSalary": "250000", "maxSalary": "1500000"}


def test_client_strips_trailing_slash():
    assert JobBoardClient(base_url="http://api.test/api/").base_url == "http://api.test/api"
