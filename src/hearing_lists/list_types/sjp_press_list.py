from __future__ import annotations

from datetime import datetime
from typing import Any, Iterable

from hearing_lists.documents import SjpOffence, SjpPressCase, SjpPressList
from hearing_lists.list_types import sjp
from hearing_lists.list_types.base import build_handler_bundle, build_header
from hearing_lists.locales import copy_for
from hearing_lists.registry import ListTypeDescriptor, ListTypeRegistryBuilder
from hearing_lists.rendering.dates import (
    calculate_age,
    format_display_date,
    parse_date_of_birth,
    to_display_timezone,
)
from hearing_lists.rendering.view import ListView, ViewSection, build_columns, display_text
from hearing_lists.schemas import PublicationMetadata
from hearing_lists.services.email_summary import SummaryFieldSpec, SummaryPolicy

DESCRIPTOR = ListTypeDescriptor(
    list_type_id=24,
    name="SJP_PRESS_LIST",
    schema_name="sjp-press-list",
    schema_version="1.0",
    english_friendly_name="Single Justice Procedure Press List",
    welsh_friendly_name="Rhestr y Wasg y Weithdrefn Un Ynad",
    url_path="sjp-press-list",
)

COLUMNS = ("name", "dateOfBirth", "age", "reference", "address", "prosecutor", "offences")

# Press lists carry dates of birth, addresses and offence detail, so digests
# never show any of it.
SUMMARY_POLICY = SummaryPolicy(
    fields=(
        SummaryFieldSpec(label="Name", key="name"),
        SummaryFieldSpec(label="Date of birth", key="dateOfBirth"),
        SummaryFieldSpec(label="Reference", key="reference"),
        SummaryFieldSpec(label="Address", key="address"),
        SummaryFieldSpec(label="Prosecutor", key="prosecutor"),
        SummaryFieldSpec(label="Offences", key="offences"),
    ),
    special_category_data=True,
)


def _convert_case(hearing: Any, published_at: datetime) -> SjpPressCase:
    parts = sjp.split_hearing(hearing)
    accused = parts.accused or {}
    individual = accused.get("individualDetails") or {}
    date_of_birth = parse_date_of_birth(individual.get("dateOfBirth"))
    address = sjp.accused_address(parts.accused)
    return SjpPressCase(
        reference=parts.reference,
        name=sjp.accused_name(parts.accused),
        date_of_birth=date_of_birth,
        age=calculate_age(date_of_birth, to_display_timezone(published_at).date()) if date_of_birth else None,
        address=sjp.format_address(address),
        postcode=sjp.postcode_outward_code((address or {}).get("postCode")),
        prosecutor=parts.prosecutor,
        offences=parts.offences,
    )


def convert(raw: Any, descriptor: ListTypeDescriptor) -> SjpPressList:
    published_at = sjp.publication_date(raw)
    return SjpPressList(
        list_type=descriptor.name,
        publication_date=published_at,
        cases=tuple(_convert_case(hearing, published_at) for hearing in sjp.iter_hearings(raw)),
    )


def _format_offence(offence: SjpOffence) -> str:
    text = offence.title
    if offence.wording:
        text = f"{text}: {offence.wording}" if text else offence.wording
    return text


def render(
    document: SjpPressList,
    descriptor: ListTypeDescriptor,
    locale: str,
    metadata: PublicationMetadata,
) -> ListView:
    copy = copy_for(locale)
    rows = tuple(
        {
            "name": case.name,
            "dateOfBirth": format_display_date(case.date_of_birth, locale) if case.date_of_birth else "",
            "age": display_text(case.age),
            "reference": case.reference,
            "address": display_text(case.address),
            "prosecutor": display_text(case.prosecutor),
            "offences": "; ".join(_format_offence(offence) for offence in case.offences),
        }
        for case in document.cases
    )
    notices = [copy["importantInformation"][descriptor.name]]
    if any(offence.reporting_restriction for case in document.cases for offence in case.offences):
        notices.append(copy["reportingRestrictionNotice"])
    return ListView(
        list_type=document.list_type,
        locale=locale,
        title=descriptor.friendly_name(locale),
        header=build_header(descriptor, locale, metadata, publication_date=document.publication_date),
        sections=(
            ViewSection(
                section_id="cases",
                heading=copy["sections"]["cases"],
                columns=build_columns(COLUMNS, copy),
                rows=rows,
            ),
        ),
        copy=copy,
        notices=tuple(notices),
    )


def summary_entries(document: SjpPressList) -> Iterable[dict[str, object]]:
    return [
        {
            "name": case.name,
            "dateOfBirth": case.date_of_birth.strftime("%d/%m/%Y") if case.date_of_birth else None,
            "reference": case.reference,
            "address": case.address,
            "prosecutor": case.prosecutor,
            "offences": "; ".join(_format_offence(offence) for offence in case.offences),
        }
        for case in document.cases
    ]


def register(builder: ListTypeRegistryBuilder) -> None:
    builder.register(
        DESCRIPTOR,
        build_handler_bundle(
            DESCRIPTOR,
            convert=convert,
            render=render,
            summary_entries=summary_entries,
            summary_policy=SUMMARY_POLICY,
        ),
    )
