"""Membership tenure in whole months.

Tenure uses a fixed average month of 30.44 days rather than calendar months:
elapsed days are divided by 30.44 and rounded half-up. Award thresholds are
defined against this same approximation, so dates near a month boundary may
land one month either side of a calendar-aware count. That is a known
limitation, not something to correct here.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Union

AVERAGE_MONTH_DAYS = 30.44

DateLike = Union[str, date, None]


@dataclass(frozen=True)
class TenureResult:
    total_months: int
    display_text: str


def parse_date(value: DateLike) -> Optional[date]:
    """Parse an ISO date (or datetime) string; ``None`` when empty or invalid."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = value.strip()
    if not text:
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


def months_between(start: date, end: date) -> int:
    days = abs((end - start).days)
    # Half-up, not Python's banker's rounding.
    return int(math.floor(days / AVERAGE_MONTH_DAYS + 0.5))


def format_tenure(total_months: int) -> str:
    """``14`` -> ``"1년 2개월"``, ``24`` -> ``"2년"``, ``0`` -> ``"1개월 미만"``."""
    if total_months == 0:
        return "1개월 미만"
    years, months = divmod(total_months, 12)
    parts = []
    if years > 0:
        parts.append(f"{years}년")
    if months > 0:
        parts.append(f"{months}개월")
    return " ".join(parts)


def compute_tenure(join_date: DateLike, reference_date: DateLike) -> TenureResult:
    """Tenure between ``join_date`` and ``reference_date``.

    Argument order does not matter. An empty or unparseable date yields
    ``TenureResult(0, "0")`` instead of raising.
    """
    start = parse_date(join_date)
    end = parse_date(reference_date)
    if start is None or end is None:
        return TenureResult(total_months=0, display_text="0")
    total = months_between(start, end)
    return TenureResult(total_months=total, display_text=format_tenure(total))
