#!/usr/bin/env python3
"""Tests for insight generation."""

from decimal import Decimal

import pytest

from subtrack.core.dates import InvalidDateFormat
from subtrack.core.models import InsightKind, InsightPriority
from subtrack.renewals.aggregator import AggregatorConfig
from subtrack.renewals.insights import generate_insights
from tests.fixtures.subscriptions import make_subscription


@pytest.mark.renewals
class TestGenerateInsights:
    """Test the insight rules and their order."""

    def test_empty_collection(self, reference_today):
        assert generate_insights([], reference_today) == []

    def test_sample_collection(self, sample_subscriptions, reference_today):
        insights = generate_insights(sample_subscriptions, reference_today)

        assert [insight.kind for insight in insights] == [
            InsightKind.SAVINGS,
            InsightKind.SPENDING,
            InsightKind.RENEWAL,
        ]
        assert insights[0].message == "Switch 3 subscriptions to yearly billing and save up to $52.15/year"
        assert insights[0].priority == InsightPriority.HIGH
        assert insights[1].message == "Entertainment accounts for 43% of your spending"
        assert insights[1].priority == InsightPriority.MEDIUM
        assert insights[2].message == "2 renewals coming up this week ($25.98)"
        assert insights[2].priority == InsightPriority.HIGH

    def test_singular_wording(self, reference_today):
        subs = [make_subscription("1", "Gym", "2025-12-12", cost="80.00", category="Fitness")]
        messages = [insight.message for insight in generate_insights(subs, reference_today)]

        assert "Switch 1 subscription to yearly billing and save up to $144.00/year" in messages
        assert "1 renewal coming up this week ($80.00)" in messages

    def test_small_savings_skipped(self, reference_today):
        # 4.99 * 12 * 0.15 = 8.98, under the threshold
        subs = [make_subscription("1", "Cheap", "2026-03-01", cost="4.99")]
        kinds = [insight.kind for insight in generate_insights(subs, reference_today)]
        assert InsightKind.SAVINGS not in kinds

    def test_yearly_only_has_no_savings(self, reference_today):
        subs = [make_subscription("1", "Annual", "2026-03-01", cost="500.00", billing_cycle="yearly")]
        kinds = [insight.kind for insight in generate_insights(subs, reference_today)]
        assert InsightKind.SAVINGS not in kinds

    def test_balanced_categories_have_no_spending_insight(self, reference_today):
        subs = [
            make_subscription(str(i), f"S{i}", "2026-03-01", cost="1.00", category=f"C{i}") for i in range(3)
        ]
        kinds = [insight.kind for insight in generate_insights(subs, reference_today)]
        assert InsightKind.SPENDING not in kinds

    def test_renewal_window_uses_day_counts(self, reference_today):
        subs = [
            make_subscription("1", "Day 7", "2025-12-17", cost="3.00", category="A"),
            make_subscription("2", "Day 8", "2025-12-18", cost="3.00", category="B"),
            make_subscription("3", "Past", "2025-12-09", cost="3.00", category="C"),
        ]
        renewal = [i for i in generate_insights(subs, reference_today) if i.kind == InsightKind.RENEWAL]
        assert renewal[0].message == "1 renewal coming up this week ($3.00)"

    def test_count_insight_and_limit(self, reference_today):
        subs = [
            make_subscription(str(i), f"S{i}", "2025-12-12", cost="10.00", category="Video" if i < 6 else f"C{i}")
            for i in range(11)
        ]
        insights = generate_insights(subs, reference_today)

        assert [insight.kind for insight in insights] == [
            InsightKind.SAVINGS,
            InsightKind.SPENDING,
            InsightKind.RENEWAL,
            InsightKind.COUNT,
        ]
        assert insights[3].message == "You have 11 active subscriptions - consider reviewing for unused services"
        assert insights[3].priority == InsightPriority.LOW

    def test_max_insights_from_config(self, sample_subscriptions, reference_today):
        config = AggregatorConfig(max_insights=1)
        insights = generate_insights(sample_subscriptions, reference_today, config)
        assert [insight.kind for insight in insights] == [InsightKind.SAVINGS]

    def test_thresholds_from_config(self, sample_subscriptions, reference_today):
        config = AggregatorConfig(savings_threshold=Decimal("100"), category_concentration_percent=Decimal("50"))
        kinds = [insight.kind for insight in generate_insights(sample_subscriptions, reference_today, config)]
        assert kinds == [InsightKind.RENEWAL]

    def test_invalid_date_propagates(self, reference_today):
        subs = [make_subscription("1", "Bad", "2025-02-29")]
        with pytest.raises(InvalidDateFormat):
            generate_insights(subs, reference_today)
