"""Shared enums and type aliases."""

from __future__ import annotations

from enum import StrEnum
from os import PathLike


class DocumentFamily(StrEnum):
    """Office document kinds, each converted by its own host application."""

    SPREADSHEET = "spreadsheet"
    WORD = "word"
    PRESENTATION = "presentation"


type StrPath = str | PathLike[str]
