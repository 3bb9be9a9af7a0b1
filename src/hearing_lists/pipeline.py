from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any

from hearing_lists.errors import ListValidationError, SpreadsheetConversionError
from hearing_lists.list_types import build_default_registry
from hearing_lists.registry import ListTypeRegistry, RegisteredListType
from hearing_lists.rendering.view import ListView
from hearing_lists.schemas import CaseSummary, PublicationMetadata, ValidationResult
from hearing_lists.services.email_summary import format_case_summary_for_email
from hearing_lists.services.pdf_generation import PdfArtifact, build_pdf_artifact
from hearing_lists.settings import Settings, load_settings

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class PreparedPublication:
    registration: RegisteredListType
    validation: ValidationResult
    document: Any | None

    @property
    def is_valid(self) -> bool:
        return self.validation.valid

    def require_document(self) -> Any:
        if self.document is None:
            raise ListValidationError(
                f"{self.registration.descriptor.name} document failed validation",
                issues=self.validation.errors,
            )
        return self.document


class PublicationPipeline:
    """Validates once, converts once, then serves every output from the canonical document."""

    def __init__(self, registry: ListTypeRegistry | None = None, *, settings: Settings | None = None) -> None:
        self.registry = registry or build_default_registry()
        self.settings = settings or load_settings()

    def prepare(self, list_type: object, raw: Any) -> PreparedPublication:
        return self._prepare(self.registry.require(list_type), raw)

    def prepare_spreadsheet(self, list_type: object, content: bytes) -> PreparedPublication:
        registration = self.registry.require(list_type)
        from_spreadsheet = registration.bundle.from_spreadsheet
        if from_spreadsheet is None:
            raise SpreadsheetConversionError(
                f"{registration.descriptor.name} does not accept spreadsheet uploads"
            )
        raw = from_spreadsheet(content)
        LOGGER.info("Converted %s spreadsheet upload", registration.descriptor.name)
        return self._prepare(registration, raw)

    def _prepare(self, registration: RegisteredListType, raw: Any) -> PreparedPublication:
        validation = registration.bundle.validate(raw)
        if not validation.valid:
            LOGGER.warning(
                "Rejected %s document: %d validation error(s)",
                registration.descriptor.name,
                len(validation.errors),
            )
            return PreparedPublication(registration=registration, validation=validation, document=None)

        document = registration.bundle.convert(raw)
        return PreparedPublication(registration=registration, validation=validation, document=document)

    def render(
        self,
        prepared: PreparedPublication,
        locale: str | None = None,
        metadata: PublicationMetadata | None = None,
    ) -> ListView:
        return prepared.registration.bundle.render(
            prepared.require_document(),
            locale or self.settings.default_locale,
            metadata,
        )

    def generate_pdf(self, prepared: PreparedPublication) -> PdfArtifact:
        content = prepared.registration.bundle.to_pdf(
            prepared.require_document(),
            page_format=self.settings.pdf_page_format,
        )
        artifact = build_pdf_artifact(content, max_size_bytes=self.settings.pdf_max_size_bytes)
        if artifact.exceeds_max_size:
            LOGGER.info(
                "%s PDF is %d bytes, above the %d byte digest limit",
                prepared.registration.descriptor.name,
                artifact.size_bytes,
                self.settings.pdf_max_size_bytes,
            )
        return artifact

    def summarize(self, prepared: PreparedPublication) -> tuple[CaseSummary, ...]:
        return prepared.registration.bundle.summarize(prepared.require_document())

    def build_email_summary(self, prepared: PreparedPublication) -> str:
        return format_case_summary_for_email(self.summarize(prepared))


__all__ = ["PreparedPublication", "PublicationPipeline"]
