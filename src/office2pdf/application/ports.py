"""Application ports for the automation hosts driven during conversion.

Every method may raise ``HostCallError`` when the underlying host call fails.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol


class HostSession(Protocol):
    """One running host application instance."""

    def quit(self) -> None:
        """Shut the application down and release it."""


class AutomationHost[SessionT: HostSession](Protocol):
    """Factory for host sessions of one document family."""

    name: str

    def start(self) -> SessionT:
        """Launch the host application and return its session."""


class Workbook(Protocol):
    """Workbook opened in a spreadsheet host."""

    def sheet_count(self) -> int:
        """Return the number of worksheets."""

    def sheet_name(self, index: int) -> str:
        """Return the name of the worksheet at 1-based *index*."""

    def select_sheet(self, index: int, replace: bool) -> None:
        """Select the worksheet at 1-based *index*, extending the selection unless *replace*."""

    def export_workbook(self, pdf_path: Path) -> None:
        """Export every sheet of the workbook to *pdf_path*."""

    def export_selection(self, pdf_path: Path) -> None:
        """Export the currently selected sheets to *pdf_path*."""

    def mark_saved(self) -> None:
        """Flag the workbook as unmodified."""

    def close(self) -> None:
        """Close the workbook, discarding changes."""


class SpreadsheetSession(HostSession, Protocol):
    """Spreadsheet host session."""

    def open(self, path: Path) -> Workbook:
        """Open *path* as a workbook."""


class WordDocument(Protocol):
    """Document opened in a word-processor host."""

    def export_pdf(self, pdf_path: Path) -> None:
        """Export the document to *pdf_path*."""

    def close(self) -> None:
        """Close the document, discarding changes."""


class WordSession(HostSession, Protocol):
    """Word-processor host session."""

    def hide_window(self) -> None:
        """Keep the application window hidden for the whole session."""

    def open(self, path: Path) -> WordDocument:
        """Open *path* as a document."""


class Presentation(Protocol):
    """Presentation opened in a presentation host."""

    def slide_count(self) -> int:
        """Return the number of slides."""

    def first_slide_number(self) -> int:
        """Return the number assigned to the first slide."""

    def add_print_range(self, start: int, end: int) -> object:
        """Add and return an opaque print range covering slides *start*..*end*."""

    def export_range(self, pdf_path: Path, print_range: object) -> None:
        """Export the slides of *print_range* to *pdf_path*."""

    def mark_saved(self) -> None:
        """Flag the presentation as unmodified."""

    def close(self) -> None:
        """Close the presentation."""


class PresentationSession(HostSession, Protocol):
    """Presentation host session."""

    def open(self, path: Path) -> Presentation:
        """Open *path* read-only, without a window and without an untitled copy."""


@dataclass(frozen=True)
class FamilyHosts:
    """The three hosts used by a conversion run."""

    spreadsheet: AutomationHost[SpreadsheetSession]
    word: AutomationHost[WordSession]
    presentation: AutomationHost[PresentationSession]
