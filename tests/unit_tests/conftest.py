"""Fake automation hosts shared by unit tests."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from pathlib import Path

import pytest

from office2pdf.application.ports import FamilyHosts
from office2pdf.errors import HostCallError
from office2pdf.types import DocumentFamily


class _FakeDocument:
    def __init__(self, host: FakeHost, path: Path) -> None:
        self.host = host
        self.path = path
        self.saved = False
        self.closed = False

    def _write(self, pdf_path: Path, body: str) -> None:
        self.host.events.append(("export", self.path.name))
        if self.path.name in self.host.fail_export:
            raise HostCallError(f"export rejected for {self.path.name}")
        pdf_path.write_text(body, encoding="utf-8")
        self.host.exported.append(pdf_path)

    def mark_saved(self) -> None:
        self.saved = True
        self.host.events.append(("mark_saved", self.path.name))

    def close(self) -> None:
        self.closed = True
        self.host.open_count -= 1
        self.host.events.append(("close", self.path.name))


class FakeWorkbook(_FakeDocument):
    """Workbook whose sheet names come from ``host.sheets``."""

    def __init__(self, host: FakeHost, path: Path) -> None:
        super().__init__(host, path)
        self.sheets = list(host.sheets.get(path.name, ["Sheet1"]))
        # Excel starts with the first sheet selected.
        self.selected = self.sheets[:1]

    def sheet_count(self) -> int:
        return len(self.sheets)

    def sheet_name(self, index: int) -> str:
        return self.sheets[index - 1]

    def select_sheet(self, index: int, replace: bool) -> None:
        name = self.sheets[index - 1]
        if replace:
            self.selected = [name]
        elif name not in self.selected:
            self.selected.append(name)

    def export_workbook(self, pdf_path: Path) -> None:
        self.host.selections[self.path.name] = list(self.sheets)
        self._write(pdf_path, "\n".join(self.sheets))

    def export_selection(self, pdf_path: Path) -> None:
        self.host.selections[self.path.name] = list(self.selected)
        self._write(pdf_path, "\n".join(self.selected))


class FakeWordDocument(_FakeDocument):
    """Word document that writes a stub PDF."""

    def export_pdf(self, pdf_path: Path) -> None:
        self._write(pdf_path, "document")


class FakePresentation(_FakeDocument):
    """Presentation whose ``(slide_count, first_slide_number)`` comes from ``host.slides``."""

    def slide_count(self) -> int:
        return self.host.slides.get(self.path.name, (3, 1))[0]

    def first_slide_number(self) -> int:
        return self.host.slides.get(self.path.name, (3, 1))[1]

    def add_print_range(self, start: int, end: int) -> object:
        self.host.print_ranges[self.path.name] = (start, end)
        return ("range", start, end)

    def export_range(self, pdf_path: Path, print_range: object) -> None:
        assert print_range == ("range", *self.host.print_ranges[self.path.name])
        self._write(pdf_path, "slides")


class FakeSession:
    """Session that enforces one open document at a time."""

    def __init__(self, host: FakeHost) -> None:
        self.host = host

    def hide_window(self) -> None:
        self.host.events.append(("hide_window",))

    def open(self, path: Path) -> _FakeDocument:
        self.host.events.append(("open", path.name))
        assert self.host.open_count == 0, "previous document still open"
        if path.name in self.host.fail_open:
            raise HostCallError(f"cannot open {path.name}")
        if path.name in self.host.crash_open:
            raise AttributeError(f"<unknown>.Open of {path.name}")
        self.host.open_count += 1
        return self.host.document_type(self.host, path)

    def quit(self) -> None:
        self.host.events.append(("quit",))
        if self.host.fail_quit:
            raise HostCallError("application did not quit")


class FakeHost:
    """In-memory automation host recording every call it receives."""

    def __init__(
        self,
        name: str,
        document_type: type[_FakeDocument],
        *,
        fail_start: bool = False,
        fail_quit: bool = False,
        fail_open: Iterable[str] = (),
        fail_export: Iterable[str] = (),
        crash_open: Iterable[str] = (),
        sheets: Mapping[str, list[str]] | None = None,
        slides: Mapping[str, tuple[int, int]] | None = None,
    ) -> None:
        self.name = name
        self.document_type = document_type
        self.fail_start = fail_start
        self.fail_quit = fail_quit
        self.fail_open = set(fail_open)
        self.fail_export = set(fail_export)
        self.crash_open = set(crash_open)
        self.sheets = dict(sheets or {})
        self.slides = dict(slides or {})
        self.events: list[tuple[str, ...]] = []
        self.exported: list[Path] = []
        self.selections: dict[str, list[str]] = {}
        self.print_ranges: dict[str, tuple[int, int]] = {}
        self.open_count = 0
        self.starts = 0

    def start(self) -> FakeSession:
        self.events.append(("start",))
        if self.fail_start:
            raise HostCallError(f"{self.name} is not installed")
        self.starts += 1
        return FakeSession(self)

    def opened(self) -> list[str]:
        return [event[1] for event in self.events if event[0] == "open"]


_DOCUMENT_TYPES: dict[DocumentFamily, tuple[str, type[_FakeDocument]]] = {
    DocumentFamily.SPREADSHEET: ("FakeExcel", FakeWorkbook),
    DocumentFamily.WORD: ("FakeWord", FakeWordDocument),
    DocumentFamily.PRESENTATION: ("FakePowerPoint", FakePresentation),
}


@pytest.fixture
def make_host() -> Callable[..., FakeHost]:
    """Build a fake host for a document family."""

    def _make(family: DocumentFamily, **kwargs: object) -> FakeHost:
        name, document_type = _DOCUMENT_TYPES[family]
        return FakeHost(name, document_type, **kwargs)  # type: ignore[arg-type]

    return _make


@pytest.fixture
def make_hosts(
    make_host: Callable[..., FakeHost],
) -> Callable[..., FamilyHosts]:
    """Build a ``FamilyHosts`` of fakes, with per-family keyword overrides."""

    def _make(
        spreadsheet: Mapping[str, object] | None = None,
        word: Mapping[str, object] | None = None,
        presentation: Mapping[str, object] | None = None,
    ) -> FamilyHosts:
        return FamilyHosts(
            spreadsheet=make_host(DocumentFamily.SPREADSHEET, **(spreadsheet or {})),
            word=make_host(DocumentFamily.WORD, **(word or {})),
            presentation=make_host(DocumentFamily.PRESENTATION, **(presentation or {})),
        )

    return _make


def touch_files(root: Path, *names: str) -> list[Path]:
    """Create empty files under *root* and return their paths."""
    paths = []
    for name in names:
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"")
        paths.append(path)
    return paths


@pytest.fixture
def touch() -> Callable[..., list[Path]]:
    """Create empty source documents for a test."""
    return touch_files
