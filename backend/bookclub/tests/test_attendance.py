from bookclub.services.attendance import AttendanceSelector, toggle_attendance


def test_toggle_returns_new_set() -> None:
    current = frozenset({"2022-01-08"})
    updated = toggle_attendance(current, "2022-02-05", True)
    assert updated == {"2022-01-08", "2022-02-05"}
    assert current == {"2022-01-08"}
    assert updated is not current


def test_toggle_on_then_off_round_trips() -> None:
    original = frozenset({"2021-12-04"})
    added = toggle_attendance(original, "2022-01-08", True)
    removed = toggle_attendance(added, "2022-01-08", False)
    assert removed == original


def test_removing_absent_date_is_noop() -> None:
    assert toggle_attendance(frozenset(), "2022-01-08", False) == frozenset()


def test_excluded_date_is_ignored(small_roster) -> None:
    current = frozenset({"2022-01-08"})
    assert toggle_attendance(current, "2022-01-22", True, small_roster) == current


def test_unknown_date_is_ignored(small_roster) -> None:
    assert toggle_attendance(frozenset(), "2030-01-01", True, small_roster) == frozenset()


def test_selector_counts_unique_dates(small_roster) -> None:
    selector = AttendanceSelector(small_roster)
    selector.set_attendance("2021-12-04", True)
    selector.set_attendance("2021-12-04", True)
    selector.set_attendance("2022-01-22", True)  # excluded
    selector.set_attendance("2022-02-05", True)
    assert selector.count() == 2
    assert selector.is_attended("2022-02-05")
    selector.set_attendance("2022-02-05", False)
    assert len(selector) == 1
    selector.clear()
    assert selector.dates == frozenset()


def test_selector_initial_dates_are_guarded(small_roster) -> None:
    selector = AttendanceSelector(small_roster, ["2021-12-04", "2022-01-22", "1999-01-01"])
    assert selector.dates == {"2021-12-04"}
