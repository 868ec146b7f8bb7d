"""Port for rendering report content into a document."""

from typing import Protocol

from src.domain.models.reports import ArchivedEntriesReport, CurrentEntriesReport


class ReportRendererPort(Protocol):
    """Port turning report content into a paginated document."""

    def render_current_entries(self, report: CurrentEntriesReport) -> bytes:
        """Return the current entries report as document bytes."""

    def render_archived_entries(self, report: ArchivedEntriesReport) -> bytes:
        """Return the archived entries report as document bytes."""


__all__ = ["ReportRendererPort"]
