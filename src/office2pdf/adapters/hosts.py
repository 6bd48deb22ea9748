"""COM automation hosts (Excel, Word, PowerPoint) implementing application ports.

``pywin32`` is imported lazily so the rest of the package imports on any
platform; starting a host outside Windows raises ``HostCallError``.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from types import ModuleType
from typing import Any

from office2pdf.adapters.constants import (
    PROG_IDS,
    MsoTriState,
    PpFixedFormatIntent,
    PpFixedFormatType,
    PpPrintHandoutOrder,
    PpPrintOutputType,
    PpPrintRangeType,
    WdExportFormat,
    WdSaveOptions,
    XlFixedFormatQuality,
    XlFixedFormatType,
)
from office2pdf.application.ports import FamilyHosts
from office2pdf.errors import HostCallError
from office2pdf.types import DocumentFamily


def _com_modules() -> tuple[ModuleType, ModuleType]:
    """Return ``(pythoncom, win32com.client)``."""
    try:
        import pythoncom
        import win32com.client
    except ImportError as exc:
        raise HostCallError(
            "pywin32 is required to automate Office applications (Windows only)."
        ) from exc
    return pythoncom, win32com.client


def describe_com_error(exc: BaseException) -> str:
    """Render a ``pywintypes.com_error`` as ``description (hresult=...)``.

    ``com_error.args`` is ``(hresult, message, excepinfo, argerror)``; the
    application's own description, when present, sits at ``excepinfo[2]``.
    """
    args = tuple(exc.args) + (None,) * 4
    hresult, message, excepinfo = args[0], args[1], args[2]
    detail = None
    if isinstance(excepinfo, tuple) and len(excepinfo) > 2:
        detail = excepinfo[2]
    return f"{detail or message or exc} (hresult={hresult})"


@contextmanager
def _host_call(action: str) -> Iterator[None]:
    import pywintypes

    try:
        yield
    except pywintypes.com_error as exc:
        raise HostCallError(f"{action}: {describe_com_error(exc)}") from exc


# -----------------------------
# Excel
# -----------------------------
class ExcelWorkbook:
    """Workbook handle inside an Excel session."""

    def __init__(self, workbook: Any) -> None:
        self._workbook = workbook

    def sheet_count(self) -> int:
        with _host_call("Worksheets.Count"):
            return int(self._workbook.Worksheets.Count)

    def sheet_name(self, index: int) -> str:
        with _host_call(f"Worksheets({index}).Name"):
            return str(self._workbook.Worksheets(index).Name)

    def select_sheet(self, index: int, replace: bool) -> None:
        with _host_call(f"Worksheets({index}).Select"):
            self._workbook.Worksheets(index).Select(replace)

    def export_workbook(self, pdf_path: Path) -> None:
        with _host_call("Workbook.ExportAsFixedFormat"):
            self._workbook.ExportAsFixedFormat(
                XlFixedFormatType.PDF,
                str(pdf_path),
                XlFixedFormatQuality.STANDARD,
                False,
                False,
            )

    def export_selection(self, pdf_path: Path) -> None:
        # Exporting the active sheet of a multi-sheet selection exports the whole group.
        with _host_call("ActiveSheet.ExportAsFixedFormat"):
            self._workbook.ActiveSheet.ExportAsFixedFormat(
                XlFixedFormatType.PDF,
                str(pdf_path),
                XlFixedFormatQuality.STANDARD,
                False,
                False,
            )

    def mark_saved(self) -> None:
        with _host_call("Workbook.Saved"):
            self._workbook.Saved = True

    def close(self) -> None:
        with _host_call("Workbook.Close"):
            self._workbook.Close(False)


class ExcelSession:
    """Running Excel instance."""

    def __init__(self, app: Any, pythoncom: ModuleType) -> None:
        self._app = app
        self._pythoncom = pythoncom

    def open(self, path: Path) -> ExcelWorkbook:
        with _host_call(f"Workbooks.Open({path.name})"):
            return ExcelWorkbook(self._app.Workbooks.Open(str(path)))

    def quit(self) -> None:
        try:
            with _host_call("Excel.Quit"):
                self._app.DisplayAlerts = False
                self._app.Quit()
        finally:
            self._app = None
            self._pythoncom.CoUninitialize()


# -----------------------------
# Word
# -----------------------------
class WordDocumentHandle:
    """Document handle inside a Word session."""

    def __init__(self, document: Any) -> None:
        self._document = document

    def export_pdf(self, pdf_path: Path) -> None:
        with _host_call("Document.ExportAsFixedFormat"):
            self._document.ExportAsFixedFormat(str(pdf_path), WdExportFormat.PDF)

    def close(self) -> None:
        with _host_call("Document.Close"):
            self._document.Close(WdSaveOptions.DO_NOT_SAVE)


class WordSessionHandle:
    """Running Word instance."""

    def __init__(self, app: Any, pythoncom: ModuleType) -> None:
        self._app = app
        self._pythoncom = pythoncom

    def hide_window(self) -> None:
        with _host_call("Word.Visible"):
            self._app.Visible = False

    def open(self, path: Path) -> WordDocumentHandle:
        with _host_call(f"Documents.Open({path.name})"):
            return WordDocumentHandle(self._app.Documents.Open(str(path)))

    def quit(self) -> None:
        try:
            with _host_call("Word.Quit"):
                self._app.Quit(WdSaveOptions.DO_NOT_SAVE)
        finally:
            self._app = None
            self._pythoncom.CoUninitialize()


# -----------------------------
# PowerPoint
# -----------------------------
class PowerPointPresentation:
    """Presentation handle inside a PowerPoint session."""

    def __init__(self, presentation: Any) -> None:
        self._presentation = presentation

    def slide_count(self) -> int:
        with _host_call("Slides.Count"):
            return int(self._presentation.Slides.Count)

    def first_slide_number(self) -> int:
        with _host_call("PageSetup.FirstSlideNumber"):
            return int(self._presentation.PageSetup.FirstSlideNumber)

    def add_print_range(self, start: int, end: int) -> object:
        with _host_call(f"PrintOptions.Ranges.Add({start}, {end})"):
            return self._presentation.PrintOptions.Ranges.Add(start, end)

    def export_range(self, pdf_path: Path, print_range: object) -> None:
        with _host_call("Presentation.ExportAsFixedFormat"):
            self._presentation.ExportAsFixedFormat(
                str(pdf_path),
                PpFixedFormatType.PDF,
                PpFixedFormatIntent.PRINT,
                MsoTriState.FALSE,  # FrameSlides
                PpPrintHandoutOrder.VERTICAL_FIRST,
                PpPrintOutputType.SLIDES,
                MsoTriState.FALSE,  # PrintHiddenSlides
                print_range,
                PpPrintRangeType.SLIDE_RANGE,
                "",  # SlideShowName
                False,  # IncludeDocProperties
                False,  # KeepIRMSettings
                False,  # DocStructureTags
                False,  # BitmapMissingFonts
                False,  # UseISO19005_1
            )

    def mark_saved(self) -> None:
        with _host_call("Presentation.Saved"):
            self._presentation.Saved = MsoTriState.TRUE

    def close(self) -> None:
        with _host_call("Presentation.Close"):
            self._presentation.Close()


class PowerPointSession:
    """Running PowerPoint instance.

    PowerPoint refuses to hide its application window, so presentations are
    opened without a window instead.
    """

    def __init__(self, app: Any, pythoncom: ModuleType) -> None:
        self._app = app
        self._pythoncom = pythoncom

    def open(self, path: Path) -> PowerPointPresentation:
        with _host_call(f"Presentations.Open({path.name})"):
            presentation = self._app.Presentations.Open(
                str(path),
                MsoTriState.TRUE,  # ReadOnly
                MsoTriState.FALSE,  # Untitled
                MsoTriState.FALSE,  # WithWindow
            )
        return PowerPointPresentation(presentation)

    def quit(self) -> None:
        try:
            with _host_call("PowerPoint.Quit"):
                self._app.Quit()
        finally:
            self._app = None
            self._pythoncom.CoUninitialize()


# -----------------------------
# Host factories
# -----------------------------
class _ComApplication:
    """Launch one dedicated application instance per session.

    COM is initialised on the calling thread in ``start`` and released by
    the session's ``quit``, so both must run on the same thread.
    """

    family: DocumentFamily
    name: str

    def _create_session(self, app: Any, pythoncom: ModuleType) -> Any:
        raise NotImplementedError

    def _launch(self) -> Any:
        pythoncom, client = _com_modules()
        with _host_call("CoInitialize"):
            pythoncom.CoInitialize()
        try:
            with _host_call(f"create {PROG_IDS[self.family]}"):
                app = client.DispatchEx(PROG_IDS[self.family])
        except HostCallError:
            pythoncom.CoUninitialize()
            raise
        return self._create_session(app, pythoncom)


class ExcelApplication(_ComApplication):
    """Spreadsheet host backed by ``Excel.Application``."""

    family = DocumentFamily.SPREADSHEET
    name = "Excel"

    def _create_session(self, app: Any, pythoncom: ModuleType) -> ExcelSession:
        return ExcelSession(app, pythoncom)

    def start(self) -> ExcelSession:
        return self._launch()


class WordApplication(_ComApplication):
    """Word-processor host backed by ``Word.Application``."""

    family = DocumentFamily.WORD
    name = "Word"

    def _create_session(self, app: Any, pythoncom: ModuleType) -> WordSessionHandle:
        return WordSessionHandle(app, pythoncom)

    def start(self) -> WordSessionHandle:
        return self._launch()


class PowerPointApplication(_ComApplication):
    """Presentation host backed by ``PowerPoint.Application``."""

    family = DocumentFamily.PRESENTATION
    name = "PowerPoint"

    def _create_session(self, app: Any, pythoncom: ModuleType) -> PowerPointSession:
        return PowerPointSession(app, pythoncom)

    def start(self) -> PowerPointSession:
        return self._launch()


def default_hosts() -> FamilyHosts:
    """Return the COM-backed hosts used when callers do not inject their own."""
    return FamilyHosts(
        spreadsheet=ExcelApplication(),
        word=WordApplication(),
        presentation=PowerPointApplication(),
    )
