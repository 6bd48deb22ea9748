"""Named values for the numeric codes passed to the Office automation hosts."""

from __future__ import annotations

from enum import IntEnum

from office2pdf.types import DocumentFamily

PROG_IDS: dict[DocumentFamily, str] = {
    DocumentFamily.SPREADSHEET: "Excel.Application",
    DocumentFamily.WORD: "Word.Application",
    DocumentFamily.PRESENTATION: "PowerPoint.Application",
}


class MsoTriState(IntEnum):
    FALSE = 0
    TRUE = -1


class XlFixedFormatType(IntEnum):
    PDF = 0
    XPS = 1


class XlFixedFormatQuality(IntEnum):
    STANDARD = 0
    MINIMUM = 1


class WdExportFormat(IntEnum):
    PDF = 17
    XPS = 18


class WdSaveOptions(IntEnum):
    DO_NOT_SAVE = 0
    SAVE = -1
    PROMPT = -2


class PpFixedFormatType(IntEnum):
    XPS = 1
    PDF = 2


class PpFixedFormatIntent(IntEnum):
    SCREEN = 1
    PRINT = 2


class PpPrintHandoutOrder(IntEnum):
    VERTICAL_FIRST = 1
    HORIZONTAL_FIRST = 2


class PpPrintOutputType(IntEnum):
    SLIDES = 1
    TWO_SLIDE_HANDOUTS = 2
    THREE_SLIDE_HANDOUTS = 3
    SIX_SLIDE_HANDOUTS = 4
    NOTES_PAGES = 5
    OUTLINE = 6
    BUILD_SLIDES = 7
    FOUR_SLIDE_HANDOUTS = 8
    NINE_SLIDE_HANDOUTS = 9
    ONE_SLIDE_HANDOUTS = 10


class PpPrintRangeType(IntEnum):
    ALL = 1
    SELECTION = 2
    CURRENT = 3
    SLIDE_RANGE = 4
    NAMED_SLIDE_SHOW = 5
