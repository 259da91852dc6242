"""Root of the pillcolor error hierarchy."""

from typing import Optional


class PillColorError(Exception):
    """
    Base exception for all pillcolor errors.

    ``str(error)`` is the message shown to users. ``technical_message`` goes
    to the log, and ``recovery_hint`` is printed under the message by the CLI.
    """

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message
