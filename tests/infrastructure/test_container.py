"""Tests for the composition root."""

from unittest.mock import MagicMock

from src.domain.policies.settlement import AllActiveRemoval, UnequalNetWeightRemoval
from src.infrastructure import container
from src.infrastructure.customer_repository import SqlAlchemyCustomerRepository
from src.infrastructure.entry_repository import SqlAlchemyEntryRepository
from src.infrastructure.pdf_report_renderer import ReportLabReportRenderer
from src.infrastructure.settings import LedgerSettings


def test_repositories_share_the_given_db_port() -> None:
    db_port = MagicMock()

    customers = container.build_customer_repository(db_port)
    entries = container.build_entry_repository(db_port)

    assert isinstance(customers, SqlAlchemyCustomerRepository)
    assert isinstance(entries, SqlAlchemyEntryRepository)
    assert customers._db_port is db_port
    assert entries._db_port is db_port


def test_repositories_default_to_the_database_adapter(monkeypatch) -> None:
    adapter = MagicMock()
    monkeypatch.setattr(container, "build_database_adapter", lambda: adapter)

    assert container.build_entry_repository()._db_port is adapter


def test_removal_policy_follows_settings() -> None:
    assert isinstance(
        container.build_removal_policy(LedgerSettings()),
        UnequalNetWeightRemoval,
    )
    assert isinstance(
        container.build_removal_policy(
            LedgerSettings(settlement_policy="all-active")
        ),
        AllActiveRemoval,
    )


def test_report_renderer() -> None:
    assert isinstance(container.build_report_renderer(), ReportLabReportRenderer)


def test_identity_provider_logs_auth_events(monkeypatch) -> None:
    usage_logger = MagicMock()
    monkeypatch.setattr(container, "get_usage_logger", lambda: usage_logger)
    provider = MagicMock()
    monkeypatch.setattr(
        container,
        "SqlAlchemyIdentityProvider",
        lambda db_port: provider,
    )

    assert container.build_identity_provider(MagicMock()) is provider

    listener = provider.subscribe.call_args.args[0]
    listener("SIGNED_OUT", None)
    usage_logger.info.assert_called_once_with("Auth event SIGNED_OUT user=-")
