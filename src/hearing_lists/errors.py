from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ListPipelineError(Exception):
    code: str
    message: str

    def __post_init__(self) -> None:
        Exception.__init__(self, self.message)


class UnknownListTypeError(ListPipelineError):
    def __init__(self, identifier: object) -> None:
        super().__init__(
            code="UNKNOWN_LIST_TYPE",
            message=f"Unsupported list type: {identifier!r}",
        )
        self.identifier = identifier


class DuplicateRegistrationError(ListPipelineError):
    def __init__(self, message: str) -> None:
        super().__init__(code="DUPLICATE_REGISTRATION", message=message)


class RegistrySealedError(ListPipelineError):
    def __init__(self, message: str = "List type registry is already built") -> None:
        super().__init__(code="REGISTRY_SEALED", message=message)


class SchemaDefinitionError(ListPipelineError):
    def __init__(self, message: str) -> None:
        super().__init__(code="SCHEMA_DEFINITION_INVALID", message=message)


class ListValidationError(ListPipelineError):
    def __init__(self, message: str, *, issues: tuple = ()) -> None:
        super().__init__(code="LIST_VALIDATION_FAILED", message=message)
        self.issues = issues


class ConversionContractError(ListPipelineError):
    def __init__(self, message: str) -> None:
        super().__init__(code="CONVERSION_CONTRACT_VIOLATED", message=message)


class ArtifactGenerationError(ListPipelineError):
    def __init__(self, message: str = "PDF generation failed") -> None:
        super().__init__(code="ARTIFACT_GENERATION_FAILED", message=message)


class NotificationConfigurationError(ListPipelineError):
    def __init__(self, message: str) -> None:
        super().__init__(code="NOTIFY_TEMPLATE_MISSING", message=message)


class SpreadsheetConversionError(ListPipelineError):
    def __init__(self, message: str, *, errors: tuple[str, ...] = ()) -> None:
        super().__init__(code="SPREADSHEET_CONVERSION_FAILED", message=message)
        self.errors = errors or (message,)
