from hearing_lists.services.digest_notifications import (
    build_digest_template_parameters,
    select_digest_template_id,
)
from hearing_lists.services.email_summary import (
    SPECIAL_CATEGORY_DATA_WARNING,
    SummaryFieldSpec,
    SummaryPolicy,
    build_case_summaries,
    format_case_summary_for_email,
)
from hearing_lists.services.pdf_generation import PdfArtifact, build_pdf_artifact, generate_list_pdf

__all__ = [
    "SPECIAL_CATEGORY_DATA_WARNING",
    "PdfArtifact",
    "SummaryFieldSpec",
    "SummaryPolicy",
    "build_case_summaries",
    "build_digest_template_parameters",
    "build_pdf_artifact",
    "format_case_summary_for_email",
    "generate_list_pdf",
    "select_digest_template_id",
]
