"""
Report export: turns a filtered log collection into a downloadable artifact.

Two formats are derived independently from the same logs:
- a tabular PDF document (title, period, summary lines, one row per log)
- delimited text with the fixed header ``Date,Tasks,Time Spent,Mood,Blockers``
"""

import enum
import logging
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import List, Optional, Sequence, Union

from fpdf import FPDF

from ..models.value_objects import Mood
from ..models.worklog import WorkLog
from ..utils.formatting import (
    NOT_APPLICABLE,
    format_display_date,
    format_mood,
    format_time,
    sanitize_name,
)
from ..utils.logging import log_export
from .aggregation import average_mood, total_log_time, total_tasks

logger = logging.getLogger(__name__)

CSV_HEADER = "Date,Tasks,Time Spent,Mood,Blockers"
TABLE_HEADINGS = ("Date", "Tasks", "Time Spent", "Mood", "Blockers")


class ExportFormat(str, enum.Enum):
    PDF = "pdf"
    CSV = "csv"

    @property
    def media_type(self) -> str:
        return _MEDIA_TYPES[self]


_MEDIA_TYPES = {
    ExportFormat.PDF: "application/pdf",
    ExportFormat.CSV: "text/csv;charset=utf-8",
}


# ---------------------------------------------------------------------------
# Tabular document
# ---------------------------------------------------------------------------


@dataclass
class ReportRow:
    day: date
    task_count: int
    minutes: int
    mood: Mood
    blockers: Optional[str]

    def cells(self, mood_as_symbol: bool = True) -> List[str]:
        return [
            format_display_date(self.day),
            str(self.task_count),
            format_time(self.minutes),
            self.mood.emoji if mood_as_symbol else self.mood.label,
            self.blockers or "None",
        ]


@dataclass
class ReportDocument:
    title: str
    period: str
    total_minutes: int
    task_total: int
    average_mood: Optional[float]
    rows: List[ReportRow] = field(default_factory=list)

    def summary_lines(self, mood_as_symbol: bool = True) -> List[str]:
        """Summary block; without symbols the average mood carries its label."""
        mood = format_mood(self.average_mood, with_symbol=mood_as_symbol)
        if not mood_as_symbol and self.average_mood is not None:
            mood = f"{mood} ({Mood.nearest(self.average_mood).label})"
        return [
            f"Total Time Logged: {format_time(self.total_minutes)}",
            f"Total Tasks Completed: {self.task_total}",
            f"Average Mood: {mood}",
        ]


def build_report_document(logs: Sequence[WorkLog], label: str) -> ReportDocument:
    """Compute the title, period, summary lines and table rows for *logs*."""
    if logs:
        first = min(log.date for log in logs)
        last = max(log.date for log in logs)
        period = f"Period: {format_display_date(first)} - {format_display_date(last)}"
    else:
        period = f"Period: {NOT_APPLICABLE}"

    rows = [
        ReportRow(
            day=log.date,
            task_count=log.task_count,
            minutes=log.total_time,
            mood=log.mood,
            blockers=log.blockers,
        )
        for log in logs
    ]
    return ReportDocument(
        title=f"Productivity Report: {label}",
        period=period,
        total_minutes=total_log_time(logs),
        task_total=total_tasks(logs),
        average_mood=average_mood(logs),
        rows=rows,
    )


def _latin1(text: str) -> str:
    # Core PDF fonts only cover latin-1
    return text.encode("latin-1", "replace").decode("latin-1")


def render_pdf(document: ReportDocument) -> bytes:
    """Render *document* with fpdf2 core fonts.

    Emoji are outside the core fonts, so the mood column carries the mood
    label and the average mood line carries the label after the number.
    """
    pdf = FPDF()
    pdf.set_title(_latin1(document.title))
    pdf.set_creator("teamlog")
    pdf.add_page()

    pdf.set_font("Helvetica", "B", 20)
    pdf.cell(0, 12, _latin1(document.title), new_x="LMARGIN", new_y="NEXT")

    pdf.set_font("Helvetica", "", 12)
    pdf.cell(0, 10, _latin1(document.period), new_x="LMARGIN", new_y="NEXT")
    for line in document.summary_lines(mood_as_symbol=False):
        pdf.cell(0, 8, _latin1(line), new_x="LMARGIN", new_y="NEXT")
    pdf.ln(6)

    pdf.set_font("Helvetica", "", 10)
    with pdf.table(col_widths=(28, 16, 26, 30, 90), text_align="LEFT") as table:
        heading = table.row()
        for title in TABLE_HEADINGS:
            heading.cell(title)
        for report_row in document.rows:
            row = table.row()
            for value in report_row.cells(mood_as_symbol=False):
                row.cell(_latin1(value))

    return bytes(pdf.output())


# ---------------------------------------------------------------------------
# Delimited text
# ---------------------------------------------------------------------------


def _quote_blockers(blockers: Optional[str]) -> str:
    if not blockers:
        return ""
    return '"' + blockers.replace('"', '""') + '"'


def render_csv(logs: Sequence[WorkLog]) -> str:
    """Header plus one row per log, newline-joined, no trailing newline."""
    lines = [CSV_HEADER]
    for log in logs:
        lines.append(
            ",".join(
                [
                    log.date.isoformat(),
                    str(log.task_count),
                    format_time(log.total_time),
                    str(int(log.mood)),
                    _quote_blockers(log.blockers),
                ]
            )
        )
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Artifacts
# ---------------------------------------------------------------------------


def report_filename(start: Union[date, str], end: Union[date, str], ext: str) -> str:
    return f"productivity_report_{start}_to_{end}.{ext}"


def single_log_filename(log: WorkLog, developer_name: str, ext: str) -> str:
    return f"worklog_{log.date.isoformat()}_{sanitize_name(developer_name)}.{ext}"


@dataclass
class ExportArtifact:
    filename: str
    content: bytes
    media_type: str

    def write_to(self, directory: Union[str, Path]) -> Path:
        directory = Path(directory)
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / self.filename
        path.write_bytes(self.content)
        logger.info("Wrote %s (%d bytes)", path, len(self.content))
        return path


class ReportExporter:
    """Builds PDF/CSV artifacts for a log collection.

    Exporting nothing is a no-op: ``export`` returns None for empty input.
    """

    def _render(self, logs: Sequence[WorkLog], label: str, fmt: ExportFormat) -> bytes:
        if fmt == ExportFormat.PDF:
            return render_pdf(build_report_document(logs, label))
        return render_csv(logs).encode("utf-8")

    def export(
        self,
        logs: Sequence[WorkLog],
        label: str,
        fmt: Union[ExportFormat, str],
        start: Optional[Union[date, str]] = None,
        end: Optional[Union[date, str]] = None,
    ) -> Optional[ExportArtifact]:
        """Export a multi-log report labelled *label* (e.g. "All Developers").

        *start* and *end* name the file; when unset they default to the
        earliest and latest log dates.
        """
        fmt = ExportFormat(fmt)
        logs = list(logs)
        if not logs:
            logger.info("No data to export; skipping %s report for %s", fmt.value, label)
            return None

        start = start or min(log.date for log in logs).isoformat()
        end = end or max(log.date for log in logs).isoformat()
        artifact = ExportArtifact(
            filename=report_filename(start, end, fmt.value),
            content=self._render(logs, label, fmt),
            media_type=fmt.media_type,
        )
        log_export(
            fmt.value,
            {"label": label, "logs": len(logs), "filename": artifact.filename},
        )
        return artifact

    def export_single(
        self, log: WorkLog, developer_name: str, fmt: Union[ExportFormat, str]
    ) -> ExportArtifact:
        """Export one log, named after its date and owner."""
        fmt = ExportFormat(fmt)
        artifact = ExportArtifact(
            filename=single_log_filename(log, developer_name, fmt.value),
            content=self._render([log], developer_name, fmt),
            media_type=fmt.media_type,
        )
        log_export(fmt.value, {"label": developer_name, "log_id": log.id})
        return artifact
