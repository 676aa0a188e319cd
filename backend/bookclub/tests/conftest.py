from datetime import date
from typing import Tuple

import pytest

from bookclub.services.calculator import AwardCalculator
from bookclub.services.roster import MeetingRecord, parse_roster

REFERENCE_DATE = date(2025, 11, 21)


@pytest.fixture
def small_roster() -> Tuple[MeetingRecord, ...]:
    return parse_roster(
        [
            {"date": "2021-12-04", "book": "데미안", "exclude": False},
            {"date": "2022-01-08", "book": "어린 왕자", "exclude": False},
            {"date": "2022-01-22", "book": "휴회", "exclude": True},
            {"date": "2022-02-05", "book": "1984", "exclude": False},
            {"date": "2023-03-04", "book": "채식주의자", "exclude": False},
        ]
    )


@pytest.fixture
def calculator(small_roster) -> AwardCalculator:
    return AwardCalculator(
        roster=small_roster,
        reference_date=REFERENCE_DATE,
        club_start_date=date(2021, 12, 4),
    )
