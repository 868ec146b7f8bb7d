"""Password identity provider backed by the ledger database and passlib."""

from collections.abc import Callable
from datetime import datetime, timezone
import uuid

from passlib.context import CryptContext
from passlib.exc import UnknownHashError
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.identity_provider import (
    SIGNED_IN,
    SIGNED_OUT,
    AuthListener,
    IdentityProviderPort,
    UserSession,
)
from src.domain.exceptions import AuthenticationError, RepositoryError
from src.infrastructure.logging.logger import get_usage_logger
from src.infrastructure.schema import user_account_table

MIN_PASSWORD_LENGTH = 6

pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")


class SqlAlchemyIdentityProvider(IdentityProviderPort):
    """Identity provider storing argon2 password hashes in ``user_account``.

    One provider instance holds one session, which matches one Streamlit
    browser session.
    """

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        crypt_context: CryptContext | None = None,
        logger=None,
    ) -> None:
        """Initialize the provider.

        Args:
            db_port: Port providing access to the ledger engine.
            crypt_context: Passlib context used to hash and verify passwords.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._crypt_context = crypt_context or pwd_context
        self._logger = logger or get_usage_logger()
        self._session: UserSession | None = None
        self._listeners: list[AuthListener] = []

    def sign_up(self, email: str, password: str) -> UserSession:
        """Create an account and start a session.

        Raises:
            AuthenticationError: If the email is invalid, the password is too
                short, or the email is already registered.
        """
        normalized = _normalize_email(email)
        if len(password or "") < MIN_PASSWORD_LENGTH:
            raise AuthenticationError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            )
        user_id = str(uuid.uuid4())
        statement = user_account_table.insert().values(
            id=user_id,
            email=normalized,
            password_hash=self._crypt_context.hash(password),
            created_at=_utcnow(),
        )
        try:
            with self._db_port.get_ledger_engine().begin() as conn:
                conn.execute(statement)
        except IntegrityError as exc:
            raise AuthenticationError("User already registered") from exc
        except SQLAlchemyError as exc:
            raise RepositoryError(f"Failed to create account: {exc}") from exc
        self._logger.info(f"Account created for {normalized}")
        return self._start_session(user_id, normalized)

    def sign_in(self, email: str, password: str) -> UserSession:
        """Start a session for an existing account.

        Raises:
            AuthenticationError: If the credentials do not match.
        """
        normalized = _normalize_email(email)
        query = select(
            user_account_table.c.id,
            user_account_table.c.password_hash,
        ).where(user_account_table.c.email == normalized)
        try:
            with self._db_port.get_ledger_engine().connect() as conn:
                row = conn.execute(query).first()
        except SQLAlchemyError as exc:
            raise RepositoryError(f"Failed to load account: {exc}") from exc
        if row is None or not self._verify(password, row.password_hash):
            self._logger.warning(f"Rejected sign-in for {normalized}")
            raise AuthenticationError("Invalid login credentials")
        return self._start_session(row.id, normalized)

    def sign_out(self) -> None:
        """End the current session and notify listeners."""
        if self._session is None:
            return
        email = self._session.email
        self._session = None
        self._logger.info(f"Signed out {email}")
        self._notify(SIGNED_OUT, None)

    def current_session(self) -> UserSession | None:
        """Return the active session, if any."""
        return self._session

    def subscribe(self, listener: AuthListener) -> Callable[[], None]:
        """Register a listener and return a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _start_session(self, user_id: str, email: str) -> UserSession:
        self._session = UserSession(
            user_id=user_id,
            email=email,
            signed_in_at=_utcnow(),
        )
        self._logger.info(f"Signed in {email}")
        self._notify(SIGNED_IN, self._session)
        return self._session

    def _notify(self, event: str, session: UserSession | None) -> None:
        for listener in list(self._listeners):
            listener(event, session)

    def _verify(self, password: str, password_hash: str) -> bool:
        if not password or not password_hash:
            return False
        try:
            return self._crypt_context.verify(password, password_hash)
        except (UnknownHashError, ValueError):
            self._logger.warning("Stored password hash could not be verified")
            return False


def _normalize_email(email: str | None) -> str:
    cleaned = (email or "").strip().lower()
    if not cleaned or "@" not in cleaned:
        raise AuthenticationError("A valid email is required")
    return cleaned


def _utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


__all__ = ["SqlAlchemyIdentityProvider", "MIN_PASSWORD_LENGTH", "pwd_context"]
