"""ReportLab renderer for the ledger PDF reports.

Pages are drawn with the low-level ``canvas`` API. ``_NumberedCanvas``
defers each page until the document is saved so the footer can print
"Page i of n".
"""

import io

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4, landscape, portrait
from reportlab.lib.units import mm
from reportlab.pdfgen import canvas

from src.application.ports.report_renderer import ReportRendererPort
from src.domain.models.reports import (
    SINGLE_COLUMN,
    ArchivedEntriesReport,
    CurrentEntriesReport,
    ReportRow,
    format_report_date,
    format_weight,
)

FONT = "Helvetica"
FONT_BOLD = "Helvetica-Bold"
MARGIN = 15 * mm
ROW_HEIGHT = 6 * mm
FOOTER_HEIGHT = 12 * mm
FOOTER_TEXT = "Generated by Entry Management System"

HEADER_FILL = colors.HexColor("#1F2937")
CREDIT_FILL = colors.HexColor("#DCFCE7")
DEBIT_FILL = colors.HexColor("#FEE2E2")
STRIPE_FILL = colors.HexColor("#F3F4F6")

ENTRY_COLUMNS = ["Date", "Gross Weight", "Melting", "Net Weight"]
ARCHIVED_COLUMNS = ["Date", "Type", "Gross", "Melting", "Net"]


class _NumberedCanvas(canvas.Canvas):
    """Canvas adding "Page i of n" and the generator line to every page."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._saved_page_states = []

    def showPage(self):
        self._saved_page_states.append(dict(self.__dict__))
        self._startPage()

    def save(self):
        total = len(self._saved_page_states)
        for state in self._saved_page_states:
            self.__dict__.update(state)
            self._draw_footer(total)
            super().showPage()
        super().save()

    def _draw_footer(self, total: int) -> None:
        width, _ = self._pagesize
        self.saveState()
        self.setFont(FONT, 8)
        self.setFillColor(colors.grey)
        self.drawString(MARGIN, MARGIN / 2, FOOTER_TEXT)
        self.drawRightString(
            width - MARGIN,
            MARGIN / 2,
            f"Page {self._pageNumber} of {total}",
        )
        self.restoreState()


class _PageWriter:
    """Tracks the cursor and starts new pages when content overflows."""

    def __init__(self, buffer: io.BytesIO, pagesize, title: str) -> None:
        self.c = _NumberedCanvas(buffer, pagesize=pagesize)
        self.c.setTitle(title)
        self.width, self.height = pagesize
        self.y = self.height - MARGIN
        self._repeat_header = None

    @property
    def content_width(self) -> float:
        return self.width - 2 * MARGIN

    def ensure_space(self, needed: float) -> None:
        if self.y - needed >= MARGIN + FOOTER_HEIGHT:
            return
        self.c.showPage()
        self.y = self.height - MARGIN
        if self._repeat_header is not None:
            self._repeat_header()

    def text(self, x: float, value: str, font=FONT, size=10, align="left"):
        self.c.setFont(font, size)
        self.c.setFillColor(colors.black)
        if align == "right":
            self.c.drawRightString(x, self.y, value)
        elif align == "center":
            self.c.drawCentredString(x, self.y, value)
        else:
            self.c.drawString(x, self.y, value)

    def title_block(self, title: str, lines: list[str]) -> None:
        self.text(self.width / 2, title, font=FONT_BOLD, size=16, align="center")
        self.y -= 8 * mm
        for line in lines:
            self.text(self.width / 2, line, size=10, align="center")
            self.y -= 5 * mm
        self.y -= 3 * mm

    def repeat_on_new_page(self, callback) -> None:
        self._repeat_header = callback

    def row(
        self,
        x: float,
        width: float,
        cells: list[str],
        font=FONT,
        fill=None,
        text_color=colors.black,
    ) -> None:
        """Draw one table row at the cursor without moving it."""
        column_width = width / len(cells)
        bottom = self.y - ROW_HEIGHT
        if fill is not None:
            self.c.setFillColor(fill)
            self.c.rect(x, bottom, width, ROW_HEIGHT, stroke=0, fill=1)
        self.c.setStrokeColor(colors.lightgrey)
        self.c.line(x, bottom, x + width, bottom)
        self.c.setFont(font, 9)
        self.c.setFillColor(text_color)
        for index, cell in enumerate(cells):
            self.c.drawCentredString(
                x + column_width * (index + 0.5),
                bottom + ROW_HEIGHT / 2 - 3,
                cell,
            )

    def finish(self) -> None:
        self.c.showPage()
        self.c.save()


class ReportLabReportRenderer(ReportRendererPort):
    """Render ledger reports as A4 PDF documents."""

    def render_current_entries(self, report: CurrentEntriesReport) -> bytes:
        """Render active credit and debit tables with the final balance.

        Args:
            report: Current entries report content.

        Returns:
            bytes: PDF document in landscape A4.
        """
        buffer = io.BytesIO()
        writer = _PageWriter(
            buffer,
            landscape(A4),
            f"{report.customer_name} Entries Report",
        )
        writer.title_block(
            "ENTRIES REPORT",
            [
                f"Customer: {report.customer_name}",
                f"Generated: {report.generated_at:%d/%m/%Y %H:%M}",
            ],
        )
        if report.layout == SINGLE_COLUMN:
            self._draw_table(
                writer,
                "CREDIT ENTRIES",
                report.credit_rows,
                report.credit_total,
                "TOTAL CREDIT",
                CREDIT_FILL,
            )
            writer.y -= 6 * mm
            self._draw_table(
                writer,
                "DEBIT ENTRIES",
                report.debit_rows,
                report.debit_total,
                "TOTAL DEBIT",
                DEBIT_FILL,
            )
        else:
            self._draw_side_by_side(writer, report)
        writer.y -= 8 * mm
        self._draw_balance(writer, report)
        writer.finish()
        return buffer.getvalue()

    def render_archived_entries(self, report: ArchivedEntriesReport) -> bytes:
        """Render archived entries of a date range with a summary.

        Args:
            report: Archived entries report content.

        Returns:
            bytes: PDF document in portrait A4.
        """
        buffer = io.BytesIO()
        writer = _PageWriter(
            buffer,
            portrait(A4),
            f"{report.customer_name} Archived Entries",
        )
        writer.title_block(
            "ARCHIVED ENTRIES",
            [
                f"Customer: {report.customer_name}",
                "Period: "
                f"{format_report_date(report.start_date)} to "
                f"{format_report_date(report.end_date)}",
                f"Generated: {report.generated_at:%d/%m/%Y %H:%M}",
            ],
        )

        def header() -> None:
            writer.row(
                MARGIN,
                writer.content_width,
                ARCHIVED_COLUMNS,
                font=FONT_BOLD,
                fill=HEADER_FILL,
                text_color=colors.white,
            )
            writer.y -= ROW_HEIGHT

        header()
        writer.repeat_on_new_page(header)
        for index, row in enumerate(report.rows):
            writer.ensure_space(ROW_HEIGHT)
            writer.row(
                MARGIN,
                writer.content_width,
                row.cells(include_type=True),
                fill=STRIPE_FILL if index % 2 else None,
            )
            writer.y -= ROW_HEIGHT
        writer.repeat_on_new_page(None)

        writer.y -= 8 * mm
        writer.ensure_space(4 * ROW_HEIGHT)
        writer.text(MARGIN, "SUMMARY", font=FONT_BOLD, size=12)
        writer.y -= 7 * mm
        for label, value in (
            ("Total Credit", report.credit_total),
            ("Total Debit", report.debit_total),
            ("Net Balance", report.net_balance),
        ):
            writer.text(MARGIN, f"{label}:", font=FONT_BOLD)
            writer.text(MARGIN + 45 * mm, format_weight(value))
            writer.y -= 6 * mm
        writer.finish()
        return buffer.getvalue()

    def _draw_table(
        self,
        writer: _PageWriter,
        title: str,
        rows: list[ReportRow],
        total,
        total_label: str,
        fill,
    ) -> None:
        width = writer.content_width

        def header() -> None:
            writer.text(MARGIN, title, font=FONT_BOLD, size=12)
            writer.y -= 3 * mm
            writer.row(
                MARGIN,
                width,
                ENTRY_COLUMNS,
                font=FONT_BOLD,
                fill=HEADER_FILL,
                text_color=colors.white,
            )
            writer.y -= ROW_HEIGHT

        writer.ensure_space(3 * ROW_HEIGHT)
        header()
        writer.repeat_on_new_page(header)
        for row in rows:
            writer.ensure_space(ROW_HEIGHT)
            writer.row(MARGIN, width, row.cells())
            writer.y -= ROW_HEIGHT
        writer.repeat_on_new_page(None)
        writer.ensure_space(ROW_HEIGHT)
        writer.row(
            MARGIN,
            width,
            [total_label, "", "", format_weight(total)],
            font=FONT_BOLD,
            fill=fill,
        )
        writer.y -= ROW_HEIGHT

    def _draw_side_by_side(
        self,
        writer: _PageWriter,
        report: CurrentEntriesReport,
    ) -> None:
        gap = 8 * mm
        width = (writer.content_width - gap) / 2
        left = MARGIN
        right = MARGIN + width + gap

        writer.text(left, "CREDIT ENTRIES", font=FONT_BOLD, size=12)
        writer.text(right, "DEBIT ENTRIES", font=FONT_BOLD, size=12)
        writer.y -= 3 * mm
        for x in (left, right):
            writer.row(
                x,
                width,
                ENTRY_COLUMNS,
                font=FONT_BOLD,
                fill=HEADER_FILL,
                text_color=colors.white,
            )
        writer.y -= ROW_HEIGHT

        credit, debit = report.credit_rows, report.debit_rows
        for index in range(max(len(credit), len(debit))):
            writer.ensure_space(ROW_HEIGHT)
            if index < len(credit):
                writer.row(left, width, credit[index].cells())
            if index < len(debit):
                writer.row(right, width, debit[index].cells())
            writer.y -= ROW_HEIGHT

        writer.ensure_space(ROW_HEIGHT)
        writer.row(
            left,
            width,
            ["TOTAL CREDIT", "", "", format_weight(report.credit_total)],
            font=FONT_BOLD,
            fill=CREDIT_FILL,
        )
        writer.row(
            right,
            width,
            ["TOTAL DEBIT", "", "", format_weight(report.debit_total)],
            font=FONT_BOLD,
            fill=DEBIT_FILL,
        )
        writer.y -= ROW_HEIGHT

    def _draw_balance(
        self,
        writer: _PageWriter,
        report: CurrentEntriesReport,
    ) -> None:
        writer.ensure_space(3 * ROW_HEIGHT)
        center = writer.width / 2
        writer.text(
            center,
            f"FINAL BALANCE: {format_weight(report.final_balance)}",
            font=FONT_BOLD,
            size=14,
            align="center",
        )
        writer.y -= 7 * mm
        writer.text(
            center,
            f"STATUS: {report.balance_status}",
            font=FONT_BOLD,
            size=12,
            align="center",
        )
        writer.y -= 7 * mm


__all__ = ["ReportLabReportRenderer"]
