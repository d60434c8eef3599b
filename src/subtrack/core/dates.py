#!/usr/bin/env python3
"""
CalendarDate Primitive Type

Immutable calendar date (year, month, day) with no time-of-day or timezone.
Every renewal computation in SubTrack parses dates and counts days through this
module, so a "2025-12-13" renewal means the 13th in every timezone.

Key Principles:
- Parse "YYYY-MM-DD" straight into calendar fields, never through an instant
- Count days with proleptic Gregorian day numbers, never with elapsed seconds
- "Today" is injectable so calculations are deterministic under test
"""

import re
from dataclasses import dataclass
from datetime import date, datetime

_DATE_PATTERN = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")

_MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)  # fmt: skip

_MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)  # fmt: skip


class InvalidDateFormat(ValueError):
    """Raised when a renewal date string is malformed or names a non-existent day."""

    def __init__(self, value: object, reason: str = "expected YYYY-MM-DD"):
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid date {value!r}: {reason}")


@dataclass(frozen=True)
class CalendarDate:
    """Immutable calendar date compared only by its year, month and day."""

    date: date

    @classmethod
    def from_string(cls, date_str: str) -> "CalendarDate":
        """
        Parse a "YYYY-MM-DD" string.

        Args:
            date_str: Date string in strict ISO calendar form

        Returns:
            CalendarDate object

        Raises:
            InvalidDateFormat: If the pattern does not match or the day does not exist
        """
        if not isinstance(date_str, str):
            raise InvalidDateFormat(date_str, "not a string")

        match = _DATE_PATTERN.fullmatch(date_str)
        if match is None:
            raise InvalidDateFormat(date_str)

        year, month, day = (int(part) for part in match.groups())
        try:
            return cls(date=date(year, month, day))
        except ValueError as e:
            raise InvalidDateFormat(date_str, str(e)) from e

    @classmethod
    def from_fields(cls, year: int, month: int, day: int) -> "CalendarDate":
        """Create from calendar fields."""
        return cls(date=date(year, month, day))

    @property
    def year(self) -> int:
        return self.date.year

    @property
    def month(self) -> int:
        return self.date.month

    @property
    def day(self) -> int:
        return self.date.day

    def day_number(self) -> int:
        """Proleptic Gregorian day number (0001-01-01 is day 1)."""
        return self.date.toordinal()

    def to_iso_string(self) -> str:
        """Format as YYYY-MM-DD."""
        return self.date.isoformat()

    def __str__(self) -> str:
        return self.to_iso_string()

    def __lt__(self, other: "CalendarDate") -> bool:
        return self.date < other.date

    def __le__(self, other: "CalendarDate") -> bool:
        return self.date <= other.date

    def __gt__(self, other: "CalendarDate") -> bool:
        return self.date > other.date

    def __ge__(self, other: "CalendarDate") -> bool:
        return self.date >= other.date

    def __repr__(self) -> str:
        return f"CalendarDate({self.to_iso_string()})"


def parse_local_date(date_str: str) -> CalendarDate:
    """
    Parse a renewal date string as a local calendar date.

    This is the single date-parsing entry point for the whole package.

    Example:
        parse_local_date("2025-12-13") -> CalendarDate(2025-12-13)
    """
    return CalendarDate.from_string(date_str)


def days_between(start: CalendarDate, end: CalendarDate) -> int:
    """
    Whole calendar days from start to end (end - start).

    Negative when end is before start. Adjacent dates are always 1 apart,
    including across DST transitions, month ends and leap days.
    """
    return end.day_number() - start.day_number()


def today(now: datetime | date | None = None) -> CalendarDate:
    """
    Get the current local calendar date.

    Args:
        now: Moment to read the date from (default: the real current local time).
             A datetime contributes its own wall-clock date, without conversion.

    Returns:
        CalendarDate for the given moment
    """
    if now is None:
        return CalendarDate(date=date.today())
    if isinstance(now, datetime):
        return CalendarDate(date=now.date())
    return CalendarDate(date=now)


def format_short(d: CalendarDate) -> str:
    """Format as "Mon D", e.g. "Dec 13"."""
    return f"{_MONTH_ABBREVIATIONS[d.month - 1]} {d.day}"


def format_date(d: CalendarDate) -> str:
    """Format as "Mon DD, YYYY", e.g. "Dec 05, 2025"."""
    return f"{_MONTH_ABBREVIATIONS[d.month - 1]} {d.day:02d}, {d.year}"


def format_full_date(d: CalendarDate) -> str:
    """Format as "Month D, YYYY", e.g. "December 5, 2025"."""
    return f"{_MONTH_NAMES[d.month - 1]} {d.day}, {d.year}"


def is_leap_year(year: int) -> bool:
    """Gregorian leap year rule."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    if month == 2:
        return 29 if is_leap_year(year) else 28
    if month in (4, 6, 9, 11):
        return 30
    return 31


def add_months(d: CalendarDate, months: int) -> CalendarDate:
    """
    Shift a date by whole months, clamping the day to the target month's length.

    Example:
        add_months(2025-01-31, 1) -> 2025-02-28
    """
    month_index = d.year * 12 + (d.month - 1) + months
    year, month = divmod(month_index, 12)
    month += 1
    return CalendarDate.from_fields(year, month, min(d.day, days_in_month(year, month)))


def advance_renewal_date(d: CalendarDate, billing_cycle: str) -> CalendarDate:
    """
    Next renewal after d for the given billing cycle ("monthly" or "yearly").

    Raises:
        ValueError: If the billing cycle is unknown
    """
    cycle = getattr(billing_cycle, "value", billing_cycle)
    if cycle == "monthly":
        return add_months(d, 1)
    if cycle == "yearly":
        return add_months(d, 12)
    raise ValueError(f"Unknown billing cycle: {billing_cycle!r}")


def is_upcoming(date_str: str, days: int = 7, today_date: CalendarDate | None = None) -> bool:
    """True if the date falls after today and no later than today + days."""
    if today_date is None:
        today_date = today()
    delta = days_between(today_date, parse_local_date(date_str))
    return 0 < delta <= days


def is_past(date_str: str, today_date: CalendarDate | None = None) -> bool:
    """True if the date is before today."""
    if today_date is None:
        today_date = today()
    return days_between(today_date, parse_local_date(date_str)) < 0
