"""Custom exceptions for the book club awards application."""


class BookClubAwardsError(Exception):
    """Base exception for the book club awards application."""

    #: Short machine-readable kind, reported alongside the message by the API.
    kind = "error"


class ValidationError(BookClubAwardsError):
    """Raised when the member name or join date is missing."""

    kind = "validation_error"

    def __init__(self, message: str = "이름과 가입 날짜를 입력해주세요!") -> None:
        super().__init__(message)


class EmptySelectionError(BookClubAwardsError):
    """Raised when an award calculation is requested with no attended dates."""

    kind = "empty_selection"

    def __init__(self, message: str = "참석한 날짜를 선택해주세요!") -> None:
        super().__init__(message)


class RosterError(BookClubAwardsError):
    """Raised when the meeting roster data is missing or malformed."""

    kind = "roster_error"
