"""
Renewals Package

Renewal timing, cost aggregation and insight generation for a subscription
collection as of a given day.

Example Usage:
    from subtrack.core.dates import parse_local_date
    from subtrack.renewals import RenewalAggregator

    aggregator = RenewalAggregator(subscriptions, parse_local_date("2025-12-10"))
    timeline = aggregator.renewal_timeline()
"""

from .aggregator import (
    AggregatorConfig,
    RenewalAggregator,
    calculate_potential_savings,
    get_average_monthly_cost,
    get_billing_cycle_distribution,
    get_category_breakdown,
    get_category_sorted,
    get_days_until_renewal,
    get_next_renewal,
    get_next_renewal_date,
    get_renewal_timeline,
    get_total_monthly_cost,
    get_total_yearly_cost,
    get_upcoming_renewals,
    monthly_cost,
    yearly_cost,
)
from .insights import generate_insights
from .labels import RenewalUrgency, days_label, next_renewal_label, renewal_label, urgency

__all__ = [
    "AggregatorConfig",
    "RenewalAggregator",
    "RenewalUrgency",
    "calculate_potential_savings",
    "days_label",
    "generate_insights",
    "get_average_monthly_cost",
    "get_billing_cycle_distribution",
    "get_category_breakdown",
    "get_category_sorted",
    "get_days_until_renewal",
    "get_next_renewal",
    "get_next_renewal_date",
    "get_renewal_timeline",
    "get_total_monthly_cost",
    "get_total_yearly_cost",
    "get_upcoming_renewals",
    "monthly_cost",
    "next_renewal_label",
    "renewal_label",
    "urgency",
    "yearly_cost",
]
