#!/usr/bin/env python3
"""
Subscription Insights

Short observations shown on the statistics screen. Rules are checked in a
fixed order and the list is capped at max_insights.
"""

from collections.abc import Sequence

from ..core.currency import ZERO, format_dollars, format_percentage
from ..core.dates import CalendarDate
from ..core.models import BillingCycle, Insight, InsightKind, InsightPriority, Subscription
from .aggregator import (
    AggregatorConfig,
    calculate_potential_savings,
    get_category_sorted,
    get_upcoming_renewals,
)


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}{'s' if count != 1 else ''}"


def savings_insight(subscriptions: Sequence[Subscription], config: AggregatorConfig) -> Insight | None:
    monthly_subs = [sub for sub in subscriptions if sub.billing_cycle == BillingCycle.MONTHLY]
    if not monthly_subs:
        return None

    savings = calculate_potential_savings(subscriptions, config.yearly_discount_rate)
    if savings <= config.savings_threshold:
        return None

    return Insight(
        kind=InsightKind.SAVINGS,
        message=(
            f"Switch {_plural(len(monthly_subs), 'subscription')} to yearly billing "
            f"and save up to {format_dollars(savings)}/year"
        ),
        priority=InsightPriority.HIGH,
    )


def spending_insight(subscriptions: Sequence[Subscription], config: AggregatorConfig) -> Insight | None:
    categories = get_category_sorted(subscriptions)
    if not categories or categories[0].percentage <= config.category_concentration_percent:
        return None

    top = categories[0]
    return Insight(
        kind=InsightKind.SPENDING,
        message=f"{top.category} accounts for {format_percentage(top.percentage)} of your spending",
        priority=InsightPriority.MEDIUM,
    )


def renewal_insight(
    subscriptions: Sequence[Subscription], today_date: CalendarDate, config: AggregatorConfig
) -> Insight | None:
    upcoming = get_upcoming_renewals(subscriptions, config.upcoming_days, today_date)
    if not upcoming:
        return None

    total = sum((sub.cost for sub in upcoming), ZERO)
    return Insight(
        kind=InsightKind.RENEWAL,
        message=f"{_plural(len(upcoming), 'renewal')} coming up this week ({format_dollars(total)})",
        priority=InsightPriority.HIGH,
    )


def count_insight(subscriptions: Sequence[Subscription], config: AggregatorConfig) -> Insight | None:
    if len(subscriptions) <= config.review_count_threshold:
        return None

    return Insight(
        kind=InsightKind.COUNT,
        message=(
            f"You have {len(subscriptions)} active subscriptions - "
            "consider reviewing for unused services"
        ),
        priority=InsightPriority.LOW,
    )


def generate_insights(
    subscriptions: Sequence[Subscription],
    today_date: CalendarDate,
    config: AggregatorConfig | None = None,
) -> list[Insight]:
    """
    Build insights for a subscription collection.

    Order: savings, category concentration, renewals this week, subscription count.

    Args:
        subscriptions: Subscriptions to inspect
        today_date: Reference date for the renewal window
        config: Thresholds (default: AggregatorConfig.default())

    Returns:
        At most config.max_insights insights; empty for an empty collection
    """
    if not subscriptions:
        return []

    config = config or AggregatorConfig.default()
    candidates = [
        savings_insight(subscriptions, config),
        spending_insight(subscriptions, config),
        renewal_insight(subscriptions, today_date, config),
        count_insight(subscriptions, config),
    ]
    insights = [insight for insight in candidates if insight is not None]
    return insights[: config.max_insights]
