"""Composition root for wiring infrastructure adapters."""

from src.application.ports.customer_repository import CustomerRepositoryPort
from src.application.ports.database import DatabaseEnginePort
from src.application.ports.entry_repository import EntryRepositoryPort
from src.application.ports.identity_provider import (
    IdentityProviderPort,
    UserSession,
)
from src.application.ports.report_renderer import ReportRendererPort
from src.domain.policies.settlement import (
    SettlementRemovalPolicy,
    get_removal_policy,
)
from src.infrastructure.customer_repository import SqlAlchemyCustomerRepository
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.entry_repository import SqlAlchemyEntryRepository
from src.infrastructure.identity_provider import SqlAlchemyIdentityProvider
from src.infrastructure.logging.logger import get_usage_logger
from src.infrastructure.pdf_report_renderer import ReportLabReportRenderer
from src.infrastructure.settings import LedgerSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_customer_repository(
    db_port: DatabaseEnginePort | None = None,
) -> CustomerRepositoryPort:
    """Return the customer repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyCustomerRepository(resolved_db)


def build_entry_repository(
    db_port: DatabaseEnginePort | None = None,
) -> EntryRepositoryPort:
    """Return the entry repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyEntryRepository(resolved_db)


def build_identity_provider(
    db_port: DatabaseEnginePort | None = None,
) -> IdentityProviderPort:
    """Return an identity provider that records auth events in usage logs."""
    resolved_db = db_port or build_database_adapter()
    provider = SqlAlchemyIdentityProvider(resolved_db)
    usage_logger = get_usage_logger()

    def log_auth_event(event: str, session: UserSession | None) -> None:
        user = session.user_id if session is not None else "-"
        usage_logger.info(f"Auth event {event} user={user}")

    provider.subscribe(log_auth_event)
    return provider


def build_report_renderer() -> ReportRendererPort:
    """Return the PDF report renderer."""
    return ReportLabReportRenderer()


def build_removal_policy(
    settings: LedgerSettings | None = None,
) -> SettlementRemovalPolicy:
    """Return the configured settlement removal policy."""
    resolved = settings or LedgerSettings.from_env()
    return get_removal_policy(resolved.settlement_policy)


__all__ = [
    "build_database_adapter",
    "build_customer_repository",
    "build_entry_repository",
    "build_identity_provider",
    "build_report_renderer",
    "build_removal_policy",
]
