"""Use cases to export ledger reports as documents."""

from dataclasses import dataclass
from datetime import date, datetime

from src.application.ports.customer_repository import CustomerRepositoryPort
from src.application.ports.entry_repository import EntryRepositoryPort
from src.application.ports.report_renderer import ReportRendererPort
from src.application.use_cases.customer_access import require_owned_customer
from src.domain.constants import DEFAULT_SINGLE_COLUMN_THRESHOLD
from src.domain.services.reporting import (
    archived_entries_filename,
    build_archived_entries_report,
    build_current_entries_report,
    current_entries_filename,
)
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class ExportedReport:
    """Rendered report ready for download."""

    filename: str
    content: bytes
    mime_type: str = "application/pdf"


class ExportCurrentEntriesUseCase:
    """Export the active credit and debit entries with the balance."""

    def __init__(
        self,
        customer_repository: CustomerRepositoryPort,
        entry_repository: EntryRepositoryPort,
        renderer: ReportRendererPort,
        logger=None,
        single_column_threshold: int = DEFAULT_SINGLE_COLUMN_THRESHOLD,
    ) -> None:
        """Initialize the use case.

        Args:
            customer_repository: Port used to check the customer's owner.
            entry_repository: Port used to read the ledger.
            renderer: Port turning report content into a document.
            logger: Optional logger compatible with logging.Logger-like API.
            single_column_threshold: Row count above which one column is used.
        """
        self._customer_repository = customer_repository
        self._entry_repository = entry_repository
        self._renderer = renderer
        self._logger = logger or get_app_logger()
        self._single_column_threshold = single_column_threshold

    def execute(
        self,
        customer_id: str,
        owner_id: str,
        now: datetime | None = None,
    ) -> ExportedReport:
        """Render the current entries report.

        Raises:
            InvalidInput: If the customer is not found for this owner.
            NothingToExport: If the ledger has no active entries.
        """
        customer = require_owned_customer(
            self._customer_repository,
            customer_id,
            owner_id,
        )
        generated_at = now or datetime.now()
        report = build_current_entries_report(
            customer.name,
            self._entry_repository.list_entries(customer.id),
            generated_at=generated_at,
            single_column_threshold=self._single_column_threshold,
        )
        content = self._renderer.render_current_entries(report)
        filename = current_entries_filename(customer.name, generated_at.date())
        self._logger.info(
            f"Exported current entries for customer={customer.id}: "
            f"{len(report.credit_rows)} credit, {len(report.debit_rows)} debit, "
            f"layout={report.layout}"
        )
        return ExportedReport(filename=filename, content=content)


class ExportArchivedEntriesUseCase:
    """Export archived entries dated within a range."""

    def __init__(
        self,
        customer_repository: CustomerRepositoryPort,
        entry_repository: EntryRepositoryPort,
        renderer: ReportRendererPort,
        logger=None,
    ) -> None:
        self._customer_repository = customer_repository
        self._entry_repository = entry_repository
        self._renderer = renderer
        self._logger = logger or get_app_logger()

    def execute(
        self,
        customer_id: str,
        owner_id: str,
        start_date: date | None,
        end_date: date | None,
        now: datetime | None = None,
    ) -> ExportedReport:
        """Render the archived entries report.

        Raises:
            InvalidInput: If the customer is not found for this owner, or
                the range is incomplete or reversed.
            NothingToExport: If no archived entry falls in the range.
        """
        customer = require_owned_customer(
            self._customer_repository,
            customer_id,
            owner_id,
        )
        generated_at = now or datetime.now()
        report = build_archived_entries_report(
            customer.name,
            self._entry_repository.list_entries(customer.id),
            start_date,
            end_date,
            generated_at=generated_at,
        )
        content = self._renderer.render_archived_entries(report)
        filename = archived_entries_filename(
            customer.name,
            report.start_date,
            report.end_date,
            generated_at.date(),
        )
        self._logger.info(
            f"Exported {len(report.rows)} archived entries for "
            f"customer={customer.id}"
        )
        return ExportedReport(filename=filename, content=content)


__all__ = [
    "ExportedReport",
    "ExportCurrentEntriesUseCase",
    "ExportArchivedEntriesUseCase",
]
