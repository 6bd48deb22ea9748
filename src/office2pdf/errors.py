"""Exception hierarchy shared by classification, conversion, and the CLI."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path


class Office2PdfError(Exception):
    """Base error for office2pdf failures."""

    exit_code: int = 1


class InvalidOptionsError(Office2PdfError):
    """Raised when run options fail validation."""

    exit_code = 2


class TraversalError(Office2PdfError):
    """Raised when the target tree cannot be walked or a path cannot be resolved."""


class HostCallError(Office2PdfError):
    """Raised by host adapters when a call into the automation host fails."""


class ConversionError(Office2PdfError):
    """Base error for failures inside one document family's run."""


class SessionStartError(ConversionError):
    """Raised when the host application for a family cannot be started."""


class _FileConversionError(ConversionError):
    marker = ""

    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"{self.marker}: {path.name}: {detail}")


class OpenFileError(_FileConversionError):
    """Raised when the host fails to open a source document."""

    marker = "failed to open file"


class ExportError(_FileConversionError):
    """Raised when the host fails to export a document to PDF."""

    marker = "failed to convert to PDF"


class TeardownError(ConversionError):
    """Raised when quitting a host application fails."""


class CombinedConversionError(ConversionError):
    """Joins a family's earlier failure with the failure to quit its host."""

    def __init__(self, errors: Sequence[Exception]) -> None:
        self.errors = tuple(errors)
        super().__init__("; ".join(describe_error(error) for error in self.errors))


def describe_error(error: BaseException) -> str:
    """Render *error* for reports; foreign exceptions are prefixed with their type."""
    if isinstance(error, Office2PdfError):
        return str(error)
    return f"{type(error).__name__}: {error}"
