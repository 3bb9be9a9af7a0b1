from __future__ import annotations

from datetime import date
import logging
from typing import Sequence

from hearing_lists.errors import NotificationConfigurationError
from hearing_lists.registry import ListTypeDescriptor
from hearing_lists.rendering.dates import format_display_date
from hearing_lists.schemas import CaseSummary
from hearing_lists.services.email_summary import format_case_summary_for_email
from hearing_lists.services.pdf_generation import PdfArtifact
from hearing_lists.settings import Settings

LOGGER = logging.getLogger(__name__)


def select_digest_template_id(settings: Settings, *, pdf: PdfArtifact | None) -> str:
    base_template_id = settings.notify_template_id_subscription
    if not base_template_id:
        raise NotificationConfigurationError("NOTIFY_TEMPLATE_ID_SUBSCRIPTION is not configured")

    if pdf is not None and not pdf.exceeds_max_size:
        if settings.notify_template_id_subscription_with_pdf:
            return settings.notify_template_id_subscription_with_pdf
        LOGGER.warning("PDF digest template is not configured; falling back to the base template")
        return base_template_id

    if settings.notify_template_id_subscription_with_summary:
        return settings.notify_template_id_subscription_with_summary
    LOGGER.warning("Summary digest template is not configured; falling back to the base template")
    return base_template_id


def build_digest_template_parameters(
    *,
    descriptor: ListTypeDescriptor,
    content_date: date,
    location_name: str,
    summaries: Sequence[CaseSummary],
    settings: Settings,
) -> dict[str, str]:
    return {
        "ListType": descriptor.english_friendly_name,
        "content_date": format_display_date(content_date, "en"),
        "locations": location_name,
        "start_page_link": f"{settings.service_url}/",
        "subscription_page_link": f"{settings.service_url}/subscription-management",
        "display_summary": "yes" if summaries else "no",
        "summary_of_cases": format_case_summary_for_email(summaries),
    }


__all__ = ["build_digest_template_parameters", "select_digest_template_id"]
