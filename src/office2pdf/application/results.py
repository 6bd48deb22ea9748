"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from office2pdf.errors import Office2PdfError
from office2pdf.types import DocumentFamily

type OutcomeStatus = Literal["success", "skipped", "error"]


@dataclass(frozen=True)
class ConversionOutcome:
    """Result of converting one source document."""

    source_path: Path
    pdf_path: Path | None
    family: DocumentFamily
    status: OutcomeStatus
    error: str | None = None


@dataclass(frozen=True)
class FamilyReport:
    """Outcome of one family's run: processed files plus the error that stopped it."""

    family: DocumentFamily
    outcomes: tuple[ConversionOutcome, ...] = ()
    error: Office2PdfError | None = None

    @property
    def converted(self) -> tuple[Path, ...]:
        return tuple(
            outcome.pdf_path
            for outcome in self.outcomes
            if outcome.status == "success" and outcome.pdf_path is not None
        )


@dataclass(frozen=True)
class RunReport:
    """Aggregated result of a directory conversion run."""

    families: tuple[FamilyReport, ...] = ()

    @property
    def errors(self) -> tuple[Office2PdfError, ...]:
        return tuple(report.error for report in self.families if report.error is not None)

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def converted(self) -> tuple[Path, ...]:
        return tuple(path for report in self.families for path in report.converted)

    def for_family(self, family: DocumentFamily) -> FamilyReport:
        """Return the report for *family* (empty if the family never ran)."""
        for report in self.families:
            if report.family is family:
                return report
        return FamilyReport(family=family)
