"""
SubTrack - Subscription Renewal Tracker

Date and cost calculations behind a subscription-tracking app: days until
renewal, renewal timelines, spend totals, category breakdowns and insights.

Domain Packages:
- core: Calendar dates, costs, data models, configuration
- renewals: Renewal aggregation, insights and display labels
- storage: JSON-file subscription loader
- cli: Command-line interface

Example Usage:
    from subtrack import RenewalAggregator, load_subscriptions, parse_local_date

    aggregator = RenewalAggregator(load_subscriptions("subs.json"), parse_local_date("2025-12-10"))
    print(aggregator.next_renewal_date())
"""

__version__ = "0.1.0"

from .core.config import Environment, get_config
from .core.dates import CalendarDate, InvalidDateFormat, days_between, format_short, parse_local_date, today
from .core.models import BillingCycle, Insight, RenewalTimeline, Subscription
from .renewals import RenewalAggregator
from .storage import load_subscriptions

__all__ = [
    "BillingCycle",
    "CalendarDate",
    "Environment",
    "Insight",
    "InvalidDateFormat",
    "RenewalAggregator",
    "RenewalTimeline",
    "Subscription",
    "days_between",
    "format_short",
    "get_config",
    "load_subscriptions",
    "parse_local_date",
    "today",
]
