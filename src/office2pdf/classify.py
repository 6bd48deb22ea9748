"""Directory walk that buckets Office documents by family."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from office2pdf.errors import TraversalError
from office2pdf.types import DocumentFamily, StrPath

logger = logging.getLogger(__name__)

TEMP_FILE_PREFIX = "~"

# "doc" has no leading dot, so legacy .doc files never match it.
EXTENSION_FAMILIES: dict[str, DocumentFamily] = {
    ".xlsx": DocumentFamily.SPREADSHEET,
    ".xls": DocumentFamily.SPREADSHEET,
    ".docx": DocumentFamily.WORD,
    "doc": DocumentFamily.WORD,
    ".pptx": DocumentFamily.PRESENTATION,
    ".ppt": DocumentFamily.PRESENTATION,
}


@dataclass(frozen=True)
class FileBuckets:
    """Source paths grouped per document family, in walk order."""

    spreadsheets: tuple[Path, ...] = ()
    word_documents: tuple[Path, ...] = ()
    presentations: tuple[Path, ...] = ()

    def for_family(self, family: DocumentFamily) -> tuple[Path, ...]:
        """Return the bucket for *family*."""
        if family is DocumentFamily.SPREADSHEET:
            return self.spreadsheets
        if family is DocumentFamily.WORD:
            return self.word_documents
        return self.presentations

    @property
    def total(self) -> int:
        return len(self.spreadsheets) + len(self.word_documents) + len(self.presentations)

    @property
    def is_empty(self) -> bool:
        return self.total == 0


def family_for(path: StrPath) -> DocumentFamily | None:
    """Classify *path* by its exact extension, or ``None`` if unsupported."""
    _stem, ext = os.path.splitext(os.fspath(path))
    return EXTENSION_FAMILIES.get(ext)


def _walk_files(root: str) -> Iterator[str]:
    """Yield files under *root* depth-first, entries of each directory in name order.

    A subdirectory is descended into at its sorted position among its
    siblings, so ``a/x.xlsx`` comes before ``b.xlsx``. Symlinked
    directories are not followed.
    """
    if os.path.isfile(root):
        yield root
        return
    with os.scandir(root) as entries:
        children = sorted(entries, key=lambda entry: entry.name)
    for entry in children:
        path = os.path.join(root, entry.name)
        if entry.is_dir(follow_symlinks=False):
            yield from _walk_files(path)
        else:
            yield path


def classify_files(root: StrPath) -> FileBuckets:
    """Walk *root* recursively and bucket supported files by family.

    Directories and files whose name starts with ``~`` (Office lock and
    temp files) are skipped; unsupported extensions are dropped silently.
    Paths keep the form of *root* (a relative root yields relative paths).

    Raises
    ------
    TraversalError
        If any directory of the tree cannot be read. No partial result is
        returned.
    """
    buckets: dict[DocumentFamily, list[Path]] = {family: [] for family in DocumentFamily}
    try:
        for file_path in _walk_files(os.fspath(root)):
            if os.path.basename(file_path).startswith(TEMP_FILE_PREFIX):
                continue
            family = family_for(file_path)
            if family is None:
                continue
            buckets[family].append(Path(file_path))
    except OSError as exc:
        raise TraversalError(f"failed to list files under {root}: {exc}") from exc

    result = FileBuckets(
        spreadsheets=tuple(buckets[DocumentFamily.SPREADSHEET]),
        word_documents=tuple(buckets[DocumentFamily.WORD]),
        presentations=tuple(buckets[DocumentFamily.PRESENTATION]),
    )
    logger.debug(
        "classified %s: spreadsheets=%s word=%s presentations=%s",
        root,
        len(result.spreadsheets),
        len(result.word_documents),
        len(result.presentations),
    )
    return result
