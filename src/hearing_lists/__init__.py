from hearing_lists.errors import (
    ArtifactGenerationError,
    ConversionContractError,
    DuplicateRegistrationError,
    ListPipelineError,
    ListValidationError,
    SpreadsheetConversionError,
    UnknownListTypeError,
)
from hearing_lists.list_types import build_default_registry
from hearing_lists.pipeline import PreparedPublication, PublicationPipeline
from hearing_lists.registry import HandlerBundle, ListTypeDescriptor, ListTypeRegistry, ListTypeRegistryBuilder
from hearing_lists.schema_validation import validate_json
from hearing_lists.schemas import CaseSummary, PublicationMetadata, SummaryField, ValidationIssue, ValidationResult
from hearing_lists.services.email_summary import SPECIAL_CATEGORY_DATA_WARNING, format_case_summary_for_email

__all__ = [
    "ArtifactGenerationError",
    "CaseSummary",
    "ConversionContractError",
    "DuplicateRegistrationError",
    "HandlerBundle",
    "ListPipelineError",
    "ListTypeDescriptor",
    "ListTypeRegistry",
    "ListTypeRegistryBuilder",
    "ListValidationError",
    "PreparedPublication",
    "PublicationMetadata",
    "PublicationPipeline",
    "SPECIAL_CATEGORY_DATA_WARNING",
    "SpreadsheetConversionError",
    "SummaryField",
    "UnknownListTypeError",
    "ValidationIssue",
    "ValidationResult",
    "build_default_registry",
    "format_case_summary_for_email",
    "validate_json",
]
