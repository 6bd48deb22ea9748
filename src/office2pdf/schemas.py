"""Pydantic schemas for runtime validation of conversion inputs."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator


class DirectoryConversionConfig(BaseModel):
    """Validated input for a directory conversion run."""

    model_config = ConfigDict(extra="forbid")

    target_dir: Path
    sheet_ignore_prefix: str = "_"

    @field_validator("target_dir", mode="before")
    @classmethod
    def _reject_blank_target(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            raise ValueError("target_dir cannot be empty.")
        return value
