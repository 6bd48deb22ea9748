"""Application use-cases orchestrating PDF export per document family."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Sequence
from concurrent.futures import ThreadPoolExecutor
from contextlib import contextmanager
from functools import partial
from pathlib import Path

from pydantic import ValidationError

from office2pdf.adapters.hosts import (
    ExcelApplication,
    PowerPointApplication,
    WordApplication,
    default_hosts,
)
from office2pdf.application.options import DEFAULT_SHEET_IGNORE_PREFIX, ConversionOptions
from office2pdf.application.ports import (
    AutomationHost,
    FamilyHosts,
    HostSession,
    PresentationSession,
    SpreadsheetSession,
    Workbook,
    WordSession,
)
from office2pdf.application.results import (
    ConversionOutcome,
    FamilyReport,
    OutcomeStatus,
    RunReport,
)
from office2pdf.classify import FileBuckets, classify_files
from office2pdf.errors import (
    CombinedConversionError,
    ConversionError,
    ExportError,
    HostCallError,
    InvalidOptionsError,
    Office2PdfError,
    OpenFileError,
    SessionStartError,
    TeardownError,
    describe_error,
)
from office2pdf.paths import PdfTarget, absolute_path, derive_pdf_path
from office2pdf.schemas import DirectoryConversionConfig
from office2pdf.types import DocumentFamily, StrPath

logger = logging.getLogger(__name__)

type FileConverter[SessionT] = Callable[[SessionT, Path, PdfTarget], OutcomeStatus]


# -----------------------------
# Host session lifecycle
# -----------------------------
def _quit(host: AutomationHost[HostSession], session: HostSession) -> TeardownError | None:
    try:
        session.quit()
    except Exception as exc:
        logger.error("%s: quit failed: %s", host.name, describe_error(exc))
        return TeardownError(f"failed to quit {host.name}: {describe_error(exc)}")
    logger.info("%s: quit", host.name)
    return None


@contextmanager
def _running_session[SessionT: HostSession](
    host: AutomationHost[SessionT],
) -> Iterator[SessionT]:
    """Start *host* and quit it on every exit path.

    A quit failure never hides an earlier error: both are raised together
    as ``CombinedConversionError``.
    """
    try:
        session = host.start()
    except HostCallError as exc:
        raise SessionStartError(f"failed to start {host.name}: {exc}") from exc
    logger.info("%s: started", host.name)

    primary: Exception | None = None
    try:
        yield session
    except Exception as exc:
        primary = exc
        raise
    finally:
        teardown = _quit(host, session)
        if teardown is not None:
            if primary is None:
                raise teardown
            raise CombinedConversionError([primary, teardown]) from primary


# -----------------------------
# Host call wrappers
# -----------------------------
def _open[DocT](open_document: Callable[[Path], DocT], source: Path) -> DocT:
    try:
        return open_document(source)
    except HostCallError as exc:
        raise OpenFileError(source, str(exc)) from exc


@contextmanager
def _exporting(source: Path) -> Iterator[None]:
    try:
        yield
    except HostCallError as exc:
        raise ExportError(source, str(exc)) from exc


@contextmanager
def _host_step(source: Path, action: str) -> Iterator[None]:
    try:
        yield
    except HostCallError as exc:
        raise ConversionError(f"{source.name}: {action} failed: {exc}") from exc


# -----------------------------
# Per-file conversions
# -----------------------------
def _select_sheets(workbook: Workbook, source: Path, prefix: str) -> list[str]:
    """Select every sheet not starting with *prefix*; return the selected names."""
    selected: list[str] = []
    with _host_step(source, "sheet selection"):
        count = workbook.sheet_count()
        logger.info("%s: sheets=%s", source.name, count)
        for index in range(1, count + 1):
            name = workbook.sheet_name(index)
            if name.startswith(prefix):
                logger.info("%s: skipping sheet %r", source.name, name)
                continue
            workbook.select_sheet(index, replace=not selected)
            selected.append(name)
    return selected


def _export_workbook(
    session: SpreadsheetSession,
    source: Path,
    target: PdfTarget,
    *,
    sheet_ignore_prefix: str,
) -> OutcomeStatus:
    workbook = _open(session.open, source)
    status: OutcomeStatus = "success"
    if not sheet_ignore_prefix:
        with _exporting(source):
            workbook.export_workbook(target.absolute)
    elif _select_sheets(workbook, source, sheet_ignore_prefix):
        with _exporting(source):
            workbook.export_selection(target.absolute)
    else:
        logger.warning(
            "%s: every sheet starts with %r, nothing to export",
            source.name,
            sheet_ignore_prefix,
        )
        status = "skipped"

    with _host_step(source, "close"):
        workbook.mark_saved()
        workbook.close()
    return status


def _hide_word_window(session: WordSession) -> None:
    try:
        session.hide_window()
    except HostCallError as exc:
        raise ConversionError(f"failed to hide Word window: {exc}") from exc


def _export_word_document(
    session: WordSession,
    source: Path,
    target: PdfTarget,
) -> OutcomeStatus:
    document = _open(session.open, source)
    with _exporting(source):
        document.export_pdf(target.absolute)
    with _host_step(source, "close"):
        document.close()
    return "success"


def _export_presentation(
    session: PresentationSession,
    source: Path,
    target: PdfTarget,
) -> OutcomeStatus:
    presentation = _open(session.open, source)
    status: OutcomeStatus = "success"
    with _host_step(source, "print range"):
        count = presentation.slide_count()
        first = presentation.first_slide_number()
        logger.info("%s: slides=%s first_slide_number=%s", source.name, count, first)
        print_range = (
            presentation.add_print_range(first, first + count - 1) if count > 0 else None
        )

    if print_range is None:
        logger.warning("%s: presentation has no slides, nothing to export", source.name)
        status = "skipped"
    else:
        with _exporting(source):
            presentation.export_range(target.absolute, print_range)

    with _host_step(source, "close"):
        presentation.mark_saved()
        presentation.close()
    return status


# -----------------------------
# Family runs
# -----------------------------
def _run_family[SessionT: HostSession](
    family: DocumentFamily,
    paths: Sequence[Path],
    host: AutomationHost[SessionT],
    convert_file: FileConverter[SessionT],
    prepare: Callable[[SessionT], None] | None = None,
) -> FamilyReport:
    """Convert *paths* in order with one host session, stopping at the first failure."""
    if not paths:
        return FamilyReport(family=family)

    outcomes: list[ConversionOutcome] = []
    try:
        with _running_session(host) as session:
            if prepare is not None:
                prepare(session)
            for path in paths:
                source = absolute_path(path)
                target = derive_pdf_path(path)
                try:
                    status = convert_file(session, source, target)
                except Exception as exc:
                    outcomes.append(
                        ConversionOutcome(
                            source_path=path,
                            pdf_path=target.relative,
                            family=family,
                            status="error",
                            error=describe_error(exc),
                        )
                    )
                    logger.error(
                        "%s: conversion failed (pdf=%s): %s", path.name, target.relative, exc
                    )
                    raise
                outcomes.append(
                    ConversionOutcome(
                        source_path=path,
                        pdf_path=target.relative if status == "success" else None,
                        family=family,
                        status=status,
                    )
                )
                if status == "success":
                    logger.info("%s: converted (pdf=%s)", path.name, target.relative)
    except Office2PdfError as exc:
        return FamilyReport(family=family, outcomes=tuple(outcomes), error=exc)
    except Exception as exc:
        logger.exception("%s: unexpected failure", family)
        error = ConversionError(f"unexpected error in {family} run: {describe_error(exc)}")
        error.__cause__ = exc
        return FamilyReport(family=family, outcomes=tuple(outcomes), error=error)
    return FamilyReport(family=family, outcomes=tuple(outcomes))


def convert_spreadsheets(
    paths: Sequence[Path],
    *,
    host: AutomationHost[SpreadsheetSession] | None = None,
    sheet_ignore_prefix: str = DEFAULT_SHEET_IGNORE_PREFIX,
) -> FamilyReport:
    """Use-case: export every workbook in *paths* to PDF with one spreadsheet host."""
    return _run_family(
        DocumentFamily.SPREADSHEET,
        paths,
        host or ExcelApplication(),
        partial(_export_workbook, sheet_ignore_prefix=sheet_ignore_prefix),
    )


def convert_word_documents(
    paths: Sequence[Path],
    *,
    host: AutomationHost[WordSession] | None = None,
) -> FamilyReport:
    """Use-case: export every document in *paths* to PDF with one hidden word-processor host."""
    return _run_family(
        DocumentFamily.WORD,
        paths,
        host or WordApplication(),
        _export_word_document,
        prepare=_hide_word_window,
    )


def convert_presentations(
    paths: Sequence[Path],
    *,
    host: AutomationHost[PresentationSession] | None = None,
) -> FamilyReport:
    """Use-case: export every presentation in *paths* to PDF with one presentation host."""
    return _run_family(
        DocumentFamily.PRESENTATION,
        paths,
        host or PowerPointApplication(),
        _export_presentation,
    )


def convert_all(
    buckets: FileBuckets,
    *,
    options: ConversionOptions | None = None,
    hosts: FamilyHosts | None = None,
) -> RunReport:
    """Use-case: run the three family conversions concurrently and join them.

    Families share nothing, so a failure in one never stops the others.
    Every family error is logged and returned in the report.
    """
    options = options or ConversionOptions()
    hosts = hosts or default_hosts()
    jobs: dict[DocumentFamily, Callable[[], FamilyReport]] = {
        DocumentFamily.SPREADSHEET: partial(
            convert_spreadsheets,
            buckets.spreadsheets,
            host=hosts.spreadsheet,
            sheet_ignore_prefix=options.sheet_ignore_prefix,
        ),
        DocumentFamily.WORD: partial(
            convert_word_documents, buckets.word_documents, host=hosts.word
        ),
        DocumentFamily.PRESENTATION: partial(
            convert_presentations, buckets.presentations, host=hosts.presentation
        ),
    }
    with ThreadPoolExecutor(
        max_workers=len(jobs), thread_name_prefix="office2pdf"
    ) as executor:
        futures = {family: executor.submit(job) for family, job in jobs.items()}
    report = RunReport(families=tuple(futures[family].result() for family in DocumentFamily))

    if report.errors:
        logger.error("PDF conversion failed")
        for family_report in report.families:
            if family_report.error is not None:
                logger.error("%s: %s", family_report.family, family_report.error)
    return report


def convert_directory(
    *,
    target_dir: StrPath,
    options: ConversionOptions,
    hosts: FamilyHosts | None = None,
) -> RunReport:
    """Use-case: classify *target_dir* and convert everything found.

    Returns an empty report (no host started) when the directory does not
    exist or holds no supported documents.
    """
    try:
        config = DirectoryConversionConfig(
            target_dir=target_dir,
            sheet_ignore_prefix=options.sheet_ignore_prefix,
        )
    except ValidationError as exc:
        raise InvalidOptionsError(f"Invalid conversion parameters: {exc}") from exc

    if not config.target_dir.exists():
        logger.info("target directory not found: %s", config.target_dir)
        return RunReport()

    buckets = classify_files(config.target_dir)
    if buckets.is_empty:
        logger.info("no files to convert under %s", config.target_dir)
        return RunReport()

    logger.info(
        "found spreadsheets=%s word=%s presentations=%s under %s",
        len(buckets.spreadsheets),
        len(buckets.word_documents),
        len(buckets.presentations),
        config.target_dir,
    )
    return convert_all(
        buckets,
        options=ConversionOptions(sheet_ignore_prefix=config.sheet_ignore_prefix),
        hosts=hosts,
    )
