#!/usr/bin/env python3
"""
Renewal Aggregator

Derives cost totals, category breakdowns, the next renewal and the renewal
timeline from a collection of subscriptions and a "today" date.

Every "how many days until X" question goes through get_days_until_renewal(),
which is the only place renewal dates are parsed. Keeping one date path is
what keeps the timeline and the next-renewal label in agreement.

Invalid renewal dates raise InvalidDateFormat from every operation; records
are never skipped silently.
"""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from decimal import Decimal

from ..core.currency import ZERO
from ..core.dates import CalendarDate, days_between, parse_local_date, today
from ..core.models import (
    BillingCycle,
    BillingCycleDistribution,
    CategoryBreakdown,
    Insight,
    RenewalTimeline,
    Subscription,
)

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12
THIS_WEEK_MAX_DAYS = 7
NEXT_WEEK_MAX_DAYS = 14
DEFAULT_HORIZON_DAYS = 30
DEFAULT_UPCOMING_DAYS = 7
DEFAULT_YEARLY_DISCOUNT = Decimal("0.15")


def _resolve_today(today_date: CalendarDate | None) -> CalendarDate:
    return today_date if today_date is not None else today()


def monthly_cost(subscription: Subscription) -> Decimal:
    """Monthly-equivalent cost: yearly plans are divided by 12."""
    if subscription.billing_cycle == BillingCycle.MONTHLY:
        return subscription.cost
    return subscription.cost / MONTHS_PER_YEAR


def yearly_cost(subscription: Subscription) -> Decimal:
    """Yearly-equivalent cost: monthly plans are multiplied by 12."""
    if subscription.billing_cycle == BillingCycle.YEARLY:
        return subscription.cost
    return subscription.cost * MONTHS_PER_YEAR


def get_total_monthly_cost(subscriptions: Iterable[Subscription]) -> Decimal:
    return sum((monthly_cost(sub) for sub in subscriptions), ZERO)


def get_total_yearly_cost(subscriptions: Iterable[Subscription]) -> Decimal:
    """
    Monthly-equivalent total x 12.

    Summed per subscription as yearly equivalents so a yearly plan's cost is
    not divided by 12 and multiplied back.
    """
    return sum((yearly_cost(sub) for sub in subscriptions), ZERO)


def get_average_monthly_cost(subscriptions: Sequence[Subscription]) -> Decimal:
    """Average monthly-equivalent cost; 0 for an empty collection."""
    if not subscriptions:
        return ZERO
    return get_total_monthly_cost(subscriptions) / len(subscriptions)


def get_billing_cycle_distribution(subscriptions: Iterable[Subscription]) -> BillingCycleDistribution:
    monthly = 0
    yearly = 0
    for sub in subscriptions:
        if sub.billing_cycle == BillingCycle.MONTHLY:
            monthly += 1
        else:
            yearly += 1
    return BillingCycleDistribution(monthly=monthly, yearly=yearly)


def get_category_breakdown(subscriptions: Iterable[Subscription]) -> dict[str, Decimal]:
    """Monthly-equivalent spend per category, in first-seen order."""
    breakdown: dict[str, Decimal] = {}
    for sub in subscriptions:
        breakdown[sub.category] = breakdown.get(sub.category, ZERO) + monthly_cost(sub)
    return breakdown


def get_category_sorted(subscriptions: Sequence[Subscription]) -> list[CategoryBreakdown]:
    """
    Categories sorted by monthly-equivalent spend, largest first.

    Percentages are unrounded shares of the grand total (0 when the total is 0).
    Ties keep first-seen order.
    """
    breakdown = get_category_breakdown(subscriptions)
    grand_total = get_total_monthly_cost(subscriptions)

    entries = [
        CategoryBreakdown(
            category=category,
            total=total,
            percentage=(total / grand_total * 100) if grand_total > 0 else ZERO,
        )
        for category, total in breakdown.items()
    ]
    return sorted(entries, key=lambda entry: entry.total, reverse=True)


def get_days_until_renewal(renewal_date: str, today_date: CalendarDate | None = None) -> int:
    """
    Whole days from today until the renewal date.

    Example:
        today 2025-12-10, renewal "2025-12-13" -> 3

    Raises:
        InvalidDateFormat: If the renewal date is malformed
    """
    return days_between(_resolve_today(today_date), parse_local_date(renewal_date))


def _with_days(
    subscriptions: Iterable[Subscription], today_date: CalendarDate
) -> list[tuple[Subscription, int]]:
    return [(sub, get_days_until_renewal(sub.renewal_date, today_date)) for sub in subscriptions]


def get_upcoming_renewals(
    subscriptions: Iterable[Subscription],
    days: int = DEFAULT_UPCOMING_DAYS,
    today_date: CalendarDate | None = None,
) -> list[Subscription]:
    """Subscriptions renewing within [0, days], soonest first (stable)."""
    today_date = _resolve_today(today_date)
    upcoming = [(sub, d) for sub, d in _with_days(subscriptions, today_date) if 0 <= d <= days]
    upcoming.sort(key=lambda pair: pair[1])
    return [sub for sub, _ in upcoming]


def get_next_renewal(
    subscriptions: Iterable[Subscription], today_date: CalendarDate | None = None
) -> Subscription | None:
    """
    The subscription with the nearest renewal on or after today.

    Ties go to the subscription that appears first in the input.
    """
    today_date = _resolve_today(today_date)
    nearest: tuple[Subscription, int] | None = None
    for sub, d in _with_days(subscriptions, today_date):
        if d < 0:
            continue
        if nearest is None or d < nearest[1]:
            nearest = (sub, d)
    return nearest[0] if nearest is not None else None


def get_next_renewal_date(
    subscriptions: Iterable[Subscription], today_date: CalendarDate | None = None
) -> str | None:
    """Renewal date string of get_next_renewal(), or None."""
    nearest = get_next_renewal(subscriptions, today_date)
    return nearest.renewal_date if nearest is not None else None


def get_renewal_timeline(
    subscriptions: Iterable[Subscription],
    horizon_days: int = DEFAULT_HORIZON_DAYS,
    today_date: CalendarDate | None = None,
) -> RenewalTimeline:
    """
    Group renewals in [0, horizon_days] into this week / next week / this month.

    Buckets: 0-7 days, 8-14 days, 15-horizon days. Past renewals and renewals
    beyond the horizon are left out. Each bucket keeps input order.

    Raises:
        ValueError: If horizon_days is negative
    """
    if horizon_days < 0:
        raise ValueError(f"horizon_days must be non-negative, got {horizon_days}")

    today_date = _resolve_today(today_date)
    timeline = RenewalTimeline()
    skipped = 0

    for sub, d in _with_days(subscriptions, today_date):
        if d < 0 or d > horizon_days:
            skipped += 1
            continue
        if d <= THIS_WEEK_MAX_DAYS:
            timeline.this_week.append(sub)
        elif d <= NEXT_WEEK_MAX_DAYS:
            timeline.next_week.append(sub)
        else:
            timeline.this_month.append(sub)

    logger.debug(
        f"Renewal timeline from {today_date} (+{horizon_days}d): "
        f"{len(timeline.this_week)}/{len(timeline.next_week)}/{len(timeline.this_month)}, "
        f"{skipped} outside window"
    )
    return timeline


def calculate_potential_savings(
    subscriptions: Iterable[Subscription], discount: Decimal = DEFAULT_YEARLY_DISCOUNT
) -> Decimal:
    """Yearly savings if every monthly plan moved to a yearly plan at the given discount."""
    yearly_cost_of_monthly = sum(
        (sub.cost * MONTHS_PER_YEAR for sub in subscriptions if sub.billing_cycle == BillingCycle.MONTHLY),
        ZERO,
    )
    return yearly_cost_of_monthly * discount


@dataclass
class AggregatorConfig:
    """Windows and thresholds for a RenewalAggregator."""

    horizon_days: int = DEFAULT_HORIZON_DAYS
    upcoming_days: int = DEFAULT_UPCOMING_DAYS
    max_insights: int = 4
    yearly_discount_rate: Decimal = DEFAULT_YEARLY_DISCOUNT
    savings_threshold: Decimal = Decimal("10")
    category_concentration_percent: Decimal = Decimal("40")
    review_count_threshold: int = 10

    @classmethod
    def default(cls) -> "AggregatorConfig":
        return cls()

    @classmethod
    def from_config(cls, config) -> "AggregatorConfig":
        """Build from the application Config."""
        return cls(
            horizon_days=config.renewals.timeline_horizon_days,
            upcoming_days=config.renewals.upcoming_window_days,
            max_insights=config.insights.max_insights,
            yearly_discount_rate=config.insights.yearly_discount_rate,
            savings_threshold=config.insights.savings_threshold,
            category_concentration_percent=config.insights.category_concentration_percent,
            review_count_threshold=config.insights.review_count_threshold,
        )


class RenewalAggregator:
    """
    Renewal and cost statistics for one subscription collection as of one day.

    The collection is copied on construction; all results are recomputed per
    call, so an aggregator is cheap to build for every screen refresh.
    """

    def __init__(
        self,
        subscriptions: Iterable[Subscription],
        today_date: CalendarDate | None = None,
        config: AggregatorConfig | None = None,
    ):
        self.subscriptions: list[Subscription] = list(subscriptions)
        self.today = _resolve_today(today_date)
        self.config = config or AggregatorConfig.default()

    def total_monthly_cost(self) -> Decimal:
        return get_total_monthly_cost(self.subscriptions)

    def total_yearly_cost(self) -> Decimal:
        return get_total_yearly_cost(self.subscriptions)

    def average_monthly_cost(self) -> Decimal:
        return get_average_monthly_cost(self.subscriptions)

    def billing_cycle_distribution(self) -> BillingCycleDistribution:
        return get_billing_cycle_distribution(self.subscriptions)

    def category_sorted(self) -> list[CategoryBreakdown]:
        return get_category_sorted(self.subscriptions)

    def days_until_renewal(self, renewal_date: str) -> int:
        return get_days_until_renewal(renewal_date, self.today)

    def upcoming_renewals(self, days: int | None = None) -> list[Subscription]:
        window = self.config.upcoming_days if days is None else days
        return get_upcoming_renewals(self.subscriptions, window, self.today)

    def next_renewal(self) -> Subscription | None:
        return get_next_renewal(self.subscriptions, self.today)

    def next_renewal_date(self) -> str | None:
        return get_next_renewal_date(self.subscriptions, self.today)

    def renewal_timeline(self, horizon_days: int | None = None) -> RenewalTimeline:
        horizon = self.config.horizon_days if horizon_days is None else horizon_days
        return get_renewal_timeline(self.subscriptions, horizon, self.today)

    def potential_savings(self) -> Decimal:
        return calculate_potential_savings(self.subscriptions, self.config.yearly_discount_rate)

    def insights(self) -> list[Insight]:
        from .insights import generate_insights

        return generate_insights(self.subscriptions, self.today, self.config)

    def summary(self) -> dict:
        """All derived view data in one dictionary, for reports."""
        timeline = self.renewal_timeline()
        return {
            "today": self.today.to_iso_string(),
            "subscription_count": len(self.subscriptions),
            "total_monthly_cost": self.total_monthly_cost(),
            "total_yearly_cost": self.total_yearly_cost(),
            "average_monthly_cost": self.average_monthly_cost(),
            "billing_cycles": self.billing_cycle_distribution().to_dict(),
            "next_renewal_date": self.next_renewal_date(),
            "categories": [entry.to_dict() for entry in self.category_sorted()],
            "timeline": timeline.to_dict(),
            "insights": [insight.to_dict() for insight in self.insights()],
        }
