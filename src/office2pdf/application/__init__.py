"""Application-layer use-cases and option objects."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from office2pdf.application.options import DEFAULT_SHEET_IGNORE_PREFIX, ConversionOptions
from office2pdf.application.ports import FamilyHosts
from office2pdf.application.results import ConversionOutcome, FamilyReport, RunReport
from office2pdf.types import StrPath


def convert_directory(
    *,
    target_dir: StrPath,
    options: ConversionOptions,
    hosts: FamilyHosts | None = None,
) -> RunReport:
    """Convert every supported document under a directory via lazy use-case import."""
    from office2pdf.application.use_cases import convert_directory as _impl

    return _impl(target_dir=target_dir, options=options, hosts=hosts)


def convert_spreadsheets(
    paths: Sequence[Path],
    *,
    sheet_ignore_prefix: str = DEFAULT_SHEET_IGNORE_PREFIX,
) -> FamilyReport:
    """Convert spreadsheet files via lazy use-case import."""
    from office2pdf.application.use_cases import convert_spreadsheets as _impl

    return _impl(paths, sheet_ignore_prefix=sheet_ignore_prefix)


def convert_word_documents(paths: Sequence[Path]) -> FamilyReport:
    """Convert word-processor files via lazy use-case import."""
    from office2pdf.application.use_cases import convert_word_documents as _impl

    return _impl(paths)


def convert_presentations(paths: Sequence[Path]) -> FamilyReport:
    """Convert presentation files via lazy use-case import."""
    from office2pdf.application.use_cases import convert_presentations as _impl

    return _impl(paths)


__all__ = [
    "ConversionOptions",
    "ConversionOutcome",
    "FamilyHosts",
    "FamilyReport",
    "RunReport",
    "convert_directory",
    "convert_spreadsheets",
    "convert_word_documents",
    "convert_presentations",
]
