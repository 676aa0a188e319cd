"""Meeting roster: static meeting records, loading and year filtering.

The roster is plain configuration data shipped as JSON. Each entry keeps the
field names of the form's meeting data (``date``, ``book``, ``exclude``) and is
parsed into an immutable :class:`MeetingRecord`. File order is roster order.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import date
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from ..exceptions import RosterError

logger = logging.getLogger(__name__)

DEFAULT_ROSTER_PATH = Path(__file__).resolve().parents[1] / "data" / "meetings.json"

# Sentinel filter value meaning "every meeting".
ALL_MEETINGS = "all"


@dataclass(frozen=True)
class MeetingRecord:
    date: str  # YYYY-MM-DD, unique across the roster
    description: str  # book title or session note
    excluded: bool = False  # cancelled sessions cannot be marked attended

    @property
    def display_date(self) -> str:
        return format_meeting_date(self.date)

    @property
    def selectable(self) -> bool:
        return not self.excluded


@dataclass(frozen=True)
class FilterOption:
    value: str
    label: str


def format_meeting_date(date_str: str) -> str:
    """Render ``2024-03-09`` as ``2024.03.09``."""
    year, month, day = date_str.split("-")
    return f"{year}.{month}.{day}"


def parse_roster(entries: Iterable[Dict[str, Any]]) -> Tuple[MeetingRecord, ...]:
    """Build roster records from raw ``{date, book, exclude}`` mappings.

    Raises:
        RosterError: on a missing field, a non-ISO date or a duplicate date.
    """
    records: List[MeetingRecord] = []
    seen: set[str] = set()
    for idx, raw in enumerate(entries):
        try:
            date_str = str(raw["date"]).strip()
        except (KeyError, TypeError) as e:
            raise RosterError(f"Roster entry {idx} has no date") from e
        try:
            date.fromisoformat(date_str)
        except ValueError as e:
            raise RosterError(f"Roster entry {idx} has invalid date {date_str!r}") from e
        if date_str in seen:
            raise RosterError(f"Duplicate roster date {date_str}")
        seen.add(date_str)
        records.append(
            MeetingRecord(
                date=date_str,
                description=str(raw.get("book", "")),
                excluded=bool(raw.get("exclude", False)),
            )
        )
    return tuple(records)


def load_roster(path: Optional[Path] = None) -> Tuple[MeetingRecord, ...]:
    """Load a roster JSON file (defaults to the packaged meeting list)."""
    roster_path = Path(path) if path is not None else DEFAULT_ROSTER_PATH
    try:
        with open(roster_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise RosterError(f"Roster file not found: {roster_path}") from e
    except json.JSONDecodeError as e:
        raise RosterError(f"Roster file is not valid JSON: {roster_path}: {e}") from e
    if not isinstance(data, list):
        raise RosterError(f"Roster file must contain a list: {roster_path}")
    records = parse_roster(data)
    logger.info(
        "Loaded %d meetings (%d excluded) from %s",
        len(records),
        sum(1 for r in records if r.excluded),
        roster_path,
    )
    return records


@lru_cache(maxsize=4)
def get_roster(path: Optional[Path] = None) -> Tuple[MeetingRecord, ...]:
    """Cached :func:`load_roster`; the roster never changes at runtime."""
    return load_roster(path)


def filter_meetings(
    roster: Sequence[MeetingRecord], year_filter: str = ALL_MEETINGS
) -> Tuple[MeetingRecord, ...]:
    """Return the meetings matching ``year_filter``, in roster order.

    ``"all"`` returns everything; any other value is matched as a prefix of
    the ISO date (normally a 4-digit year). No match yields an empty tuple.
    """
    if year_filter == ALL_MEETINGS:
        return tuple(roster)
    return tuple(m for m in roster if m.date.startswith(year_filter))


def filter_options(start: date, end: date) -> List[FilterOption]:
    """Year filter choices: ``all`` followed by each year from start to end."""
    options = [FilterOption(value=ALL_MEETINGS, label="전체")]
    for year in range(start.year, end.year + 1):
        options.append(FilterOption(value=str(year), label=f"{year}년"))
    return options


def selectable_dates(roster: Sequence[MeetingRecord]) -> frozenset[str]:
    return frozenset(m.date for m in roster if not m.excluded)
