#!/usr/bin/env python3
"""Tests for renewal display labels."""

import pytest

from subtrack.core.dates import parse_local_date
from subtrack.renewals.labels import (
    RenewalUrgency,
    days_label,
    next_renewal_label,
    renewal_label,
    urgency,
)


class TestDaysLabel:
    @pytest.mark.parametrize("days,expected", [(0, "Today"), (1, "Tomorrow"), (3, "3 days"), (12, "12 days")])
    def test_labels(self, days, expected):
        assert days_label(days) == expected

    def test_renewal_label(self, reference_today):
        assert renewal_label("2025-12-13", reference_today) == "3 days"
        assert renewal_label("2025-12-11", reference_today) == "Tomorrow"


class TestNextRenewalLabel:
    @pytest.mark.parametrize(
        "renewal_date,expected",
        [
            ("2025-12-10", "Today"),
            ("2025-12-11", "Tomorrow"),
            ("2025-12-13", "3 days"),
            ("2025-12-17", "7 days"),
            ("2025-12-18", "Dec 18"),
            ("2025-12-20", "Dec 20"),
            ("2026-01-05", "Jan 5"),
        ],
    )
    def test_labels(self, reference_today, renewal_date, expected):
        assert next_renewal_label(renewal_date, reference_today) == expected

    def test_none(self, reference_today):
        assert next_renewal_label(None, reference_today) == "None"

    def test_year_end(self):
        assert next_renewal_label("2026-01-01", parse_local_date("2025-12-31")) == "Tomorrow"


class TestUrgency:
    @pytest.mark.parametrize(
        "days,expected",
        [(0, RenewalUrgency.DUE), (1, RenewalUrgency.SOON), (3, RenewalUrgency.SOON), (4, RenewalUrgency.NORMAL)],
    )
    def test_levels(self, days, expected):
        assert urgency(days) == expected

    def test_past_renewal_is_due(self):
        assert urgency(-1) == RenewalUrgency.DUE
        assert urgency(-30) == RenewalUrgency.DUE
