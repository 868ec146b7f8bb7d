"""Port for authentication and session tracking."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

SIGNED_IN = "SIGNED_IN"
SIGNED_OUT = "SIGNED_OUT"


@dataclass(frozen=True)
class UserSession:
    """Authenticated session.

    Attributes:
        user_id: Stable identifier used as the owner of customers.
        email: Email the user signed in with.
        signed_in_at: Time the session started.
    """

    user_id: str
    email: str
    signed_in_at: datetime


AuthListener = Callable[[str, UserSession | None], None]


class IdentityProviderPort(Protocol):
    """Port exposing sign-up, password sign-in, and change notifications."""

    def sign_up(self, email: str, password: str) -> UserSession:
        """Create an account and start a session."""

    def sign_in(self, email: str, password: str) -> UserSession:
        """Start a session for an existing account."""

    def sign_out(self) -> None:
        """End the current session."""

    def current_session(self) -> UserSession | None:
        """Return the active session, if any."""

    def subscribe(self, listener: AuthListener) -> Callable[[], None]:
        """Register a listener and return a function that removes it."""


__all__ = [
    "SIGNED_IN",
    "SIGNED_OUT",
    "UserSession",
    "AuthListener",
    "IdentityProviderPort",
]
