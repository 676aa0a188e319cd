import logging
from datetime import date

import pytest

from bookclub.core.config import Settings
from bookclub.exceptions import EmptySelectionError, ValidationError
from bookclub.services.calculator import NO_AWARD_MESSAGE, AwardResult, build_calculator
from bookclub.services.awards import Award, AwardTier


def test_calculate_awards_basic(calculator) -> None:
    result = calculator.calculate_awards("홍길동", "2024-09-21", ["2021-12-04", "2022-01-08"])
    assert result.name == "홍길동"
    assert result.period_text == "1년 2개월"
    assert result.total_months == 14
    assert result.attendance_count == 2
    assert result.awards == ()
    assert not result.has_awards


def test_duplicate_and_excluded_dates_are_not_counted(calculator) -> None:
    result = calculator.calculate_awards(
        "홍길동", "2022-01-01", ["2021-12-04", "2021-12-04", "2022-01-22", "2030-01-01"]
    )
    assert result.attendance_count == 1


@pytest.mark.parametrize(
    "name, join_date",
    [("", "2022-01-01"), ("홍길동", ""), (None, "2022-01-01"), ("홍길동", None), ("   ", "2022-01-01")],
)
def test_missing_name_or_join_date(calculator, name, join_date) -> None:
    with pytest.raises(ValidationError) as exc:
        calculator.calculate_awards(name, join_date, ["2021-12-04"])
    assert str(exc.value) == "이름과 가입 날짜를 입력해주세요!"


def test_unparseable_join_date_is_rejected(calculator) -> None:
    with pytest.raises(ValidationError):
        calculator.calculate_awards("홍길동", "2022-99-99", ["2021-12-04"])


def test_empty_selection(calculator) -> None:
    with pytest.raises(EmptySelectionError) as exc:
        calculator.calculate_awards("홍길동", "2022-01-01", [])
    assert str(exc.value) == "참석한 날짜를 선택해주세요!"


def test_only_excluded_dates_is_empty_selection(calculator) -> None:
    with pytest.raises(EmptySelectionError):
        calculator.calculate_awards("홍길동", "2022-01-01", ["2022-01-22"])


def test_validation_checked_before_selection(calculator) -> None:
    with pytest.raises(ValidationError):
        calculator.calculate_awards("", "", [])


def test_tenure_label_never_raises(calculator) -> None:
    assert calculator.compute_tenure_label("") == "0"
    assert calculator.compute_tenure_label("garbage") == "0"
    assert calculator.compute_tenure_label("2023-11-21") == "2년"


def test_filter_options_from_club_start(calculator) -> None:
    assert [o.value for o in calculator.get_filter_options()] == [
        "all",
        "2021",
        "2022",
        "2023",
        "2024",
        "2025",
    ]


def test_get_filtered_meetings(calculator) -> None:
    assert [m.date for m in calculator.get_filtered_meetings("2023")] == ["2023-03-04"]
    assert len(calculator.get_filtered_meetings()) == 5


def test_build_calculator_from_settings() -> None:
    settings = Settings(reference_date=date(2024, 1, 1))
    calc = build_calculator(settings)
    assert calc.reference_date == date(2024, 1, 1)
    assert calc.roster[0].date == "2019-11-16"


def test_render_text_with_awards() -> None:
    result = AwardResult(
        name="홍길동",
        period_text="5년",
        attendance_count=120,
        awards=(Award("King Award", AwardTier.GOLD, "5년 이상 + 100회 이상 참석"),),
        total_months=60,
    )
    text = result.render_text()
    assert "축하합니다" in text
    assert "King Award" in text
    assert "참석 횟수: 120회" in text


def test_render_text_without_awards() -> None:
    result = AwardResult(name="홍길동", period_text="3개월", attendance_count=2)
    text = result.render_text()
    assert NO_AWARD_MESSAGE in text
    assert "활동 기간: 3개월" in text


def test_normalize_attendance_keeps_only_selectable(calculator, caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="bookclub.services.calculator"):
        dates = calculator.normalize_attendance(
            ["2021-12-04", "2021-12-04", "2022-01-22", "2030-01-01"]
        )
    assert dates == {"2021-12-04"}
    assert "2022-01-22" in caplog.text
    assert "2030-01-01" in caplog.text
