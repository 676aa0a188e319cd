"""CLI tool to check a member's anniversary awards offline.

Examples:
  # Attended dates inline
  bookclub-awards --name 홍길동 --join-date 2020-01-04 2020-01-04 2020-01-18

  # Attended dates from a file (one YYYY-MM-DD per line)
  bookclub-awards --name 홍길동 --join-date 2020-01-04 --dates-file attended.txt --json

  # Show the roster for one year
  bookclub-awards --list-meetings 2022
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from .core.config import get_settings
from .core.logging import configure_logging
from .exceptions import BookClubAwardsError, EmptySelectionError, ValidationError
from .services.calculator import AwardCalculator, AwardResult
from .services.roster import ALL_MEETINGS, load_roster


EXIT_OK = 0
EXIT_USAGE = 2


def read_dates_file(path: Path) -> List[str]:
    """Read attended dates, one per line; blanks and ``#`` comments skipped."""
    dates: List[str] = []
    with path.open("r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            dates.append(line)
    return dates


def result_to_dict(result: AwardResult) -> dict:
    return {
        "name": result.name,
        "period_text": result.period_text,
        "total_months": result.total_months,
        "attendance_count": result.attendance_count,
        "awards": [
            {"name": a.name, "tier": a.tier.value, "description": a.description}
            for a in result.awards
        ],
    }


def print_meetings(calculator: AwardCalculator, year_filter: str) -> None:
    meetings = calculator.get_filtered_meetings(year_filter)
    for m in meetings:
        mark = "x" if m.excluded else " "
        print(f"[{mark}] {m.display_date}  {m.description}")
    print(f"{len(meetings)} meetings")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="bookclub-awards", description="Check book club anniversary awards."
    )
    ap.add_argument("dates", nargs="*", help="Attended meeting dates (YYYY-MM-DD)")
    ap.add_argument("--name", help="Member name")
    ap.add_argument("--join-date", help="Join date (YYYY-MM-DD)")
    ap.add_argument("--dates-file", type=Path, help="File with one attended date per line")
    ap.add_argument("--roster", type=Path, help="Override the meeting roster JSON file")
    ap.add_argument(
        "--list-meetings",
        nargs="?",
        const=ALL_MEETINGS,
        metavar="YEAR",
        help="List roster meetings ('all' or a year) and exit",
    )
    ap.add_argument("--json", action="store_true", help="Output raw JSON only")
    ap.add_argument("--log-level", default=None, help="Override the configured log level")
    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    settings = get_settings()
    configure_logging(args.log_level or settings.log_level)

    try:
        roster = load_roster(args.roster or settings.roster_path)
    except BookClubAwardsError as e:
        ap.error(str(e))
    calculator = AwardCalculator(
        roster=roster,
        reference_date=settings.reference_date,
        club_start_date=settings.club_start_date,
    )

    if args.list_meetings is not None:
        print_meetings(calculator, args.list_meetings)
        return EXIT_OK

    dates = list(args.dates)
    if args.dates_file:
        if not args.dates_file.exists():
            ap.error(f"Dates file not found: {args.dates_file}")
        dates.extend(read_dates_file(args.dates_file))

    try:
        result = calculator.calculate_awards(args.name, args.join_date, dates)
    except (ValidationError, EmptySelectionError) as e:
        print(str(e), file=sys.stderr)
        return EXIT_USAGE

    if args.json:
        print(json.dumps(result_to_dict(result), ensure_ascii=False, indent=2))
    else:
        print(result.render_text())
    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
