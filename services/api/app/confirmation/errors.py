from __future__ import annotations


class ConfirmationError(Exception):
    """Base class for confirmation workflow errors."""


class ConfirmationExpiredError(ConfirmationError):
    """The token is unknown, already used, or past its TTL.

    Callers cannot tell the three cases apart.
    """

    def __init__(self, message: str = "This confirmation has expired. Please try again.") -> None:
        super().__init__(message)


class WrongUserError(ConfirmationError):
    def __init__(self, message: str = "This confirmation belongs to a different user.") -> None:
        super().__init__(message)


class InvalidConfirmationCodeError(ConfirmationError):
    def __init__(self, expected_code: str) -> None:
        super().__init__(f'Invalid confirmation code. Please type "{expected_code}" to confirm.')
        self.expected_code = expected_code
