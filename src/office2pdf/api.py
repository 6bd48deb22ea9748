"""Public directory conversion API (delegates to application use-cases)."""

from __future__ import annotations

from typing import Optional

from office2pdf.application.options import DEFAULT_SHEET_IGNORE_PREFIX, ConversionOptions
from office2pdf.application.ports import FamilyHosts
from office2pdf.application.results import RunReport
from office2pdf.application.use_cases import convert_directory
from office2pdf.types import StrPath


def convert_directory_to_pdf(
    target_dir: StrPath,
    sheet_ignore_prefix: str = DEFAULT_SHEET_IGNORE_PREFIX,
    hosts: Optional[FamilyHosts] = None,
) -> RunReport:
    """Export every Office document under *target_dir* to a sibling PDF."""
    options = ConversionOptions(sheet_ignore_prefix=sheet_ignore_prefix)
    return convert_directory(target_dir=target_dir, options=options, hosts=hosts)
