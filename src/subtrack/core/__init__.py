"""
Core Utilities Package

Shared primitives used by the renewal aggregator, storage loader and CLI.

This package provides:
- Calendar date parsing and day arithmetic that never depends on timezones
- Decimal cost parsing and display formatting
- Subscription and view data models
- Configuration management for environment-specific settings
"""

from .config import (
    Config,
    Environment,
    get_config,
    get_subscriptions_file,
    reload_config,
)
from .currency import format_dollars, format_percentage, parse_cost
from .dates import (
    CalendarDate,
    InvalidDateFormat,
    advance_renewal_date,
    days_between,
    format_date,
    format_full_date,
    format_short,
    is_past,
    is_upcoming,
    parse_local_date,
    today,
)
from .models import (
    BillingCycle,
    BillingCycleDistribution,
    CategoryBreakdown,
    Insight,
    InsightKind,
    InsightPriority,
    RenewalTimeline,
    Subscription,
    TimelineBucket,
)

__all__ = [
    "BillingCycle",
    "BillingCycleDistribution",
    # Dates
    "CalendarDate",
    "CategoryBreakdown",
    # Configuration
    "Config",
    "Environment",
    "Insight",
    "InsightKind",
    "InsightPriority",
    "InvalidDateFormat",
    "RenewalTimeline",
    # Data models
    "Subscription",
    "TimelineBucket",
    "advance_renewal_date",
    "days_between",
    # Currency
    "format_dollars",
    "format_date",
    "format_full_date",
    "format_percentage",
    "format_short",
    "get_config",
    "get_subscriptions_file",
    "is_past",
    "is_upcoming",
    "parse_cost",
    "parse_local_date",
    "reload_config",
    "today",
]
