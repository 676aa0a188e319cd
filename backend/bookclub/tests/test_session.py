import pytest

from bookclub.exceptions import EmptySelectionError, ValidationError
from bookclub.services.session import MemberSession


def test_session_flow(calculator) -> None:
    session = MemberSession(calculator)
    seen = []
    session.on_result(seen.append)

    session.name = "홍길동"
    session.join_date = "2024-09-21"
    assert session.tenure_label() == "1년 2개월"

    session.set_filter("2022")
    assert [m.date for m in session.visible_meetings()] == [
        "2022-01-08",
        "2022-01-22",
        "2022-02-05",
    ]

    session.set_attendance("2022-01-08", True)
    session.set_attendance("2022-01-22", True)  # excluded, ignored
    session.set_attendance("2022-02-05", True)
    assert session.get_attendance_count() == 2

    result = session.calculate()
    assert session.result is result
    assert seen == [result]
    assert result.attendance_count == 2


def test_failed_calculation_keeps_previous_result(calculator) -> None:
    session = MemberSession(calculator)
    session.name = "홍길동"
    session.join_date = "2022-01-01"
    session.set_attendance("2021-12-04", True)
    first = session.calculate()

    session.name = ""
    with pytest.raises(ValidationError):
        session.calculate()
    assert session.result is first
    assert session.get_attendance_count() == 1

    session.name = "홍길동"
    session.set_attendance("2021-12-04", False)
    with pytest.raises(EmptySelectionError):
        session.calculate()
    assert session.result is first
    assert session.join_date == "2022-01-01"


def test_new_calculation_replaces_result(calculator) -> None:
    session = MemberSession(calculator)
    session.name = "홍길동"
    session.join_date = "2022-01-01"
    session.set_attendance("2021-12-04", True)
    first = session.calculate()
    session.set_attendance("2023-03-04", True)
    second = session.calculate()
    assert session.result is second
    assert second is not first
    assert second.attendance_count == 2
    assert first.attendance_count == 1


def test_empty_session_label(calculator) -> None:
    assert MemberSession(calculator).tenure_label() == "0"
