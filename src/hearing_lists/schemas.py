from __future__ import annotations

from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


Locale = Literal["en", "cy"]


class ValidationIssue(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: str = Field(min_length=1)
    message: str = Field(min_length=1)


class ValidationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    valid: bool
    errors: tuple[ValidationIssue, ...] = ()
    schema_name: str | None = None
    schema_version: str | None = None

    @model_validator(mode="after")
    def _validity_matches_errors(self) -> "ValidationResult":
        if self.valid == bool(self.errors):
            raise ValueError("valid must be true exactly when errors is empty")
        return self

    def describe_errors(self) -> list[str]:
        return [f"{issue.path}: {issue.message}" for issue in self.errors]


class SummaryField(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    value: str


class CaseSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    entries: tuple[SummaryField, ...]

    def as_lines(self) -> list[str]:
        return [f"{field.label} - {field.value}" for field in self.entries]


class PublicationMetadata(BaseModel):
    """Publication facts held by the ingestion side, not by the list JSON."""

    model_config = ConfigDict(frozen=True)

    content_date: date | None = None
    last_received_at: datetime | None = None
    location_name: str | None = None
    provenance: str | None = None
