#!/usr/bin/env python3
"""Display labels for renewal dates ("Today", "Tomorrow", "3 days", "Dec 20")."""

from enum import Enum

from ..core.dates import CalendarDate, format_short, parse_local_date
from .aggregator import get_days_until_renewal

# Beyond this many days the next-renewal label shows the date itself
NEXT_RENEWAL_RELATIVE_DAYS = 7
SOON_DAYS = 3


class RenewalUrgency(Enum):
    DUE = "due"
    SOON = "soon"
    NORMAL = "normal"


def days_label(days: int) -> str:
    if days == 0:
        return "Today"
    if days == 1:
        return "Tomorrow"
    return f"{days} days"


def renewal_label(renewal_date: str, today_date: CalendarDate | None = None) -> str:
    """Relative label for a renewal item, e.g. "3 days"."""
    return days_label(get_days_until_renewal(renewal_date, today_date))


def next_renewal_label(renewal_date: str | None, today_date: CalendarDate | None = None) -> str:
    """
    Label for the "next renewal" stat.

    Relative within a week, otherwise the short date:
        today 2025-12-10, "2025-12-13" -> "3 days"
        today 2025-12-10, "2025-12-20" -> "Dec 20"
    """
    if renewal_date is None:
        return "None"

    days = get_days_until_renewal(renewal_date, today_date)
    if days <= NEXT_RENEWAL_RELATIVE_DAYS:
        return days_label(days)
    return format_short(parse_local_date(renewal_date))


def urgency(days: int) -> RenewalUrgency:
    """Urgency for a day count. Past renewals (negative counts) are DUE."""
    if days <= 0:
        return RenewalUrgency.DUE
    if days <= SOON_DAYS:
        return RenewalUrgency.SOON
    return RenewalUrgency.NORMAL
