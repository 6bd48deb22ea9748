"""Batch export of Office documents to PDF through their native applications."""

from __future__ import annotations

from office2pdf.classify import FileBuckets, classify_files
from office2pdf.paths import PdfTarget, derive_pdf_path
from office2pdf.types import DocumentFamily

__version__ = "0.1.0"

__all__ = [
    "DocumentFamily",
    "FileBuckets",
    "PdfTarget",
    "classify_files",
    "derive_pdf_path",
    "__version__",
]
