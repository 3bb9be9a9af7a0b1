from __future__ import annotations

from datetime import date, datetime
from typing import Any, Callable, Iterable, Mapping

from hearing_lists.errors import ConversionContractError
from hearing_lists.locales import normalize_locale
from hearing_lists.registry import HandlerBundle, ListTypeDescriptor
from hearing_lists.rendering.dates import format_display_date, format_last_updated, to_display_timezone
from hearing_lists.schema_validation import JsonSchemaValidator, load_schema
from hearing_lists.schemas import CaseSummary, PublicationMetadata
from hearing_lists.services.email_summary import SummaryPolicy, build_case_summaries
from hearing_lists.services.pdf_generation import DEFAULT_PAGE_FORMAT, generate_list_pdf
from hearing_lists.spreadsheets import WorkbookLayout, convert_workbook

Converter = Callable[[Any, ListTypeDescriptor], Any]
Renderer = Callable[[Any, ListTypeDescriptor, str, PublicationMetadata], Any]
SummaryEntries = Callable[[Any], Iterable[Mapping[str, object]]]

_CONTRACT_ERRORS = (AttributeError, IndexError, KeyError, TypeError, ValueError)


def apply_text_default(value: object, default: str | None) -> str | None:
    """Returns the trimmed text, or the list type's declared default when blank."""
    if value is None:
        return default
    text = str(value).strip()
    return text or default


def build_header(
    descriptor: ListTypeDescriptor,
    locale: str,
    metadata: PublicationMetadata,
    *,
    publication_date: datetime | None = None,
    location_name: str | None = None,
) -> dict[str, str]:
    content_date: date | None = metadata.content_date
    if content_date is None and publication_date is not None:
        content_date = to_display_timezone(publication_date).date()
    last_updated = metadata.last_received_at or publication_date
    return {
        "listTitle": descriptor.friendly_name(locale),
        "locationName": metadata.location_name or location_name or "",
        "contentDate": format_display_date(content_date, locale) if content_date else "",
        "lastUpdated": format_last_updated(last_updated, locale) if last_updated else "",
        "provenance": metadata.provenance or "",
    }


def build_handler_bundle(
    descriptor: ListTypeDescriptor,
    *,
    convert: Converter,
    render: Renderer,
    summary_entries: SummaryEntries,
    summary_policy: SummaryPolicy,
    workbook_layout: WorkbookLayout | None = None,
) -> HandlerBundle:
    validator = JsonSchemaValidator(
        load_schema(descriptor.schema_name),
        schema_name=descriptor.schema_name,
        schema_version=descriptor.schema_version,
    )

    def _convert(raw: Any) -> Any:
        try:
            return convert(raw, descriptor)
        except _CONTRACT_ERRORS as exc:
            raise ConversionContractError(
                f"{descriptor.name} converter received a document that has not passed validation: {exc}"
            ) from exc

    def _render(document: Any, locale: str | None = None, metadata: PublicationMetadata | None = None) -> Any:
        return render(document, descriptor, normalize_locale(locale), metadata or PublicationMetadata())

    def _to_pdf(document: Any, *, page_format: str = DEFAULT_PAGE_FORMAT) -> bytes:
        return generate_list_pdf(_render(document, "en"), page_format=page_format)

    def _summarize(document: Any) -> tuple[CaseSummary, ...]:
        return build_case_summaries(summary_entries(document), summary_policy)

    def _from_spreadsheet(content: bytes) -> Any:
        return convert_workbook(content, workbook_layout)

    return HandlerBundle(
        validate=validator.validate,
        convert=_convert,
        render=_render,
        to_pdf=_to_pdf,
        summarize=_summarize,
        from_spreadsheet=_from_spreadsheet if workbook_layout is not None else None,
    )


__all__ = ["apply_text_default", "build_handler_bundle", "build_header"]
