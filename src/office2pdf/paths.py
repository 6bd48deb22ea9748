"""PDF output path derivation."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from office2pdf.errors import TraversalError
from office2pdf.types import StrPath

PDF_SUFFIX = ".pdf"


@dataclass(frozen=True)
class PdfTarget:
    """Sibling PDF path for a source document.

    Parameters
    ----------
    relative : Path
        Output path expressed the same way as the source path was.
    absolute : Path
        Absolute form of ``relative``; this is what the host writes to.
    """

    relative: Path
    absolute: Path


def absolute_path(path: StrPath) -> Path:
    """Resolve *path* against the working directory."""
    try:
        return Path(os.path.abspath(path))
    except OSError as exc:
        raise TraversalError(f"cannot resolve absolute path for {path}: {exc}") from exc


def derive_pdf_path(path: StrPath) -> PdfTarget:
    """Replace the extension of *path* with ``.pdf``.

    Parameters
    ----------
    path : str | PathLike
        Source document path, relative or absolute.

    Returns
    -------
    PdfTarget
        The relative and absolute output paths.

    Raises
    ------
    TraversalError
        If the working directory cannot be resolved.
    """
    stem, _ext = os.path.splitext(os.fspath(path))
    relative = Path(stem + PDF_SUFFIX)
    return PdfTarget(relative=relative, absolute=absolute_path(relative))
