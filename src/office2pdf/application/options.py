"""Typed option objects shared across conversion use-cases."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_SHEET_IGNORE_PREFIX = "_"


@dataclass(frozen=True)
class ConversionOptions:
    """Shared conversion options passed through use-cases.

    ``sheet_ignore_prefix`` excludes spreadsheet sheets whose name starts
    with it; an empty string exports whole workbooks.
    """

    sheet_ignore_prefix: str = DEFAULT_SHEET_IGNORE_PREFIX
