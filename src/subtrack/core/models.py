#!/usr/bin/env python3
"""
Core Data Models for SubTrack

Subscription records as delivered by the storage layer, plus the view types
the renewal aggregator derives from them. Every derived value is recomputed
per call; nothing here holds state between calculations.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any

from .currency import ZERO, parse_cost, round_whole
from .dates import parse_local_date


class BillingCycle(Enum):
    """How often a subscription is charged."""

    MONTHLY = "monthly"
    YEARLY = "yearly"

    @classmethod
    def parse(cls, value: "str | BillingCycle") -> "BillingCycle":
        if isinstance(value, BillingCycle):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as e:
            raise ValueError(f"Unknown billing cycle: {value!r}") from e


class TimelineBucket(Enum):
    """Day-range groupings for upcoming renewals."""

    THIS_WEEK = "this_week"  # 0 - 7 days
    NEXT_WEEK = "next_week"  # 8 - 14 days
    THIS_MONTH = "this_month"  # 15 - horizon days


class InsightKind(Enum):
    """Closed set of insight types."""

    SAVINGS = "savings"
    SPENDING = "spending"
    RENEWAL = "renewal"
    COUNT = "count"


class InsightPriority(Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class Subscription:
    """
    A tracked subscription.

    Read-only to the core. The renewal date stays in its stored string form;
    calculations parse it through subtrack.core.dates on demand.
    """

    id: str
    name: str
    cost: Decimal
    billing_cycle: BillingCycle
    renewal_date: str
    category: str

    # Metadata, not used by calculations
    created_at: str | None = None
    updated_at: str | None = None

    def __post_init__(self) -> None:
        # Frozen dataclass: normalize via object.__setattr__
        if not isinstance(self.cost, Decimal) or self.cost < 0:
            object.__setattr__(self, "cost", parse_cost(self.cost))
        if not isinstance(self.billing_cycle, BillingCycle):
            object.__setattr__(self, "billing_cycle", BillingCycle.parse(self.billing_cycle))

    @property
    def is_monthly(self) -> bool:
        return self.billing_cycle == BillingCycle.MONTHLY

    def to_dict(self) -> dict[str, Any]:
        """Convert to the storage shape (camelCase keys, cost as string)."""
        return {
            "id": self.id,
            "name": self.name,
            "cost": str(self.cost),
            "billingCycle": self.billing_cycle.value,
            "renewalDate": self.renewal_date,
            "category": self.category,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Subscription":
        """
        Create Subscription from a storage record.

        Accepts camelCase (storage) or snake_case keys.

        Raises:
            InvalidDateFormat: If the renewal date is malformed
            ValueError: If the cost or billing cycle is invalid
            KeyError: If a required field is missing
        """
        renewal_date = data["renewalDate"] if "renewalDate" in data else data["renewal_date"]
        # Reject bad dates at the storage boundary
        parse_local_date(renewal_date)

        return cls(
            id=str(data["id"]),
            name=data["name"],
            cost=parse_cost(data["cost"]),
            billing_cycle=BillingCycle.parse(data.get("billingCycle", data.get("billing_cycle", "monthly"))),
            renewal_date=renewal_date,
            category=data.get("category") or "Other",
            created_at=data.get("createdAt", data.get("created_at")),
            updated_at=data.get("updatedAt", data.get("updated_at")),
        )


@dataclass(frozen=True)
class CategoryBreakdown:
    """
    Monthly-equivalent spend for one category.

    percentage is unrounded; entries are not adjusted to sum to exactly 100.
    """

    category: str
    total: Decimal
    percentage: Decimal

    @property
    def display_percentage(self) -> int:
        """Percentage rounded half-up to a whole number."""
        return round_whole(self.percentage)

    def to_dict(self) -> dict[str, Any]:
        return {
            "category": self.category,
            "total": self.total,
            "percentage": self.percentage,
        }


@dataclass(frozen=True)
class BillingCycleDistribution:
    monthly: int = 0
    yearly: int = 0

    def to_dict(self) -> dict[str, int]:
        return {"monthly": self.monthly, "yearly": self.yearly}


@dataclass
class RenewalTimeline:
    """Upcoming renewals grouped by bucket. Each bucket keeps input order."""

    this_week: list[Subscription] = field(default_factory=list)
    next_week: list[Subscription] = field(default_factory=list)
    this_month: list[Subscription] = field(default_factory=list)

    def bucket(self, which: TimelineBucket) -> list[Subscription]:
        if which == TimelineBucket.THIS_WEEK:
            return self.this_week
        if which == TimelineBucket.NEXT_WEEK:
            return self.next_week
        return self.this_month

    @property
    def total_count(self) -> int:
        return len(self.this_week) + len(self.next_week) + len(self.this_month)

    @property
    def is_empty(self) -> bool:
        """True when nothing renews within the horizon."""
        return self.total_count == 0

    def total_cost(self) -> Decimal:
        """Sum of raw costs across all buckets."""
        return sum(
            (sub.cost for sub in self.this_week + self.next_week + self.this_month),
            ZERO,
        )

    def to_dict(self) -> dict[str, list[dict[str, Any]]]:
        return {
            TimelineBucket.THIS_WEEK.value: [sub.to_dict() for sub in self.this_week],
            TimelineBucket.NEXT_WEEK.value: [sub.to_dict() for sub in self.next_week],
            TimelineBucket.THIS_MONTH.value: [sub.to_dict() for sub in self.this_month],
        }


@dataclass(frozen=True)
class Insight:
    """A derived observation about a subscription collection."""

    kind: InsightKind
    message: str
    priority: InsightPriority

    def to_dict(self) -> dict[str, str]:
        return {
            "type": self.kind.value,
            "message": self.message,
            "priority": self.priority.value,
        }
