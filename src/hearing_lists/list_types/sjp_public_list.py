from __future__ import annotations

from typing import Any, Iterable

from hearing_lists.documents import SjpPublicCase, SjpPublicList
from hearing_lists.list_types import sjp
from hearing_lists.list_types.base import build_handler_bundle, build_header
from hearing_lists.locales import copy_for
from hearing_lists.registry import ListTypeDescriptor, ListTypeRegistryBuilder
from hearing_lists.rendering.view import ListView, ViewSection, build_columns, display_text
from hearing_lists.schemas import PublicationMetadata
from hearing_lists.services.email_summary import SummaryFieldSpec, SummaryPolicy

DESCRIPTOR = ListTypeDescriptor(
    list_type_id=25,
    name="SJP_PUBLIC_LIST",
    schema_name="sjp-public-list",
    schema_version="1.0",
    english_friendly_name="Single Justice Procedure Public List",
    welsh_friendly_name="Rhestr Gyhoeddus y Weithdrefn Un Ynad",
    url_path="sjp-public-list",
)

COLUMNS = ("name", "postcode", "offence", "prosecutor")

SUMMARY_POLICY = SummaryPolicy(
    fields=(
        SummaryFieldSpec(label="Name", key="name"),
        SummaryFieldSpec(label="Postcode", key="postcode"),
        SummaryFieldSpec(label="Offence", key="offence"),
        SummaryFieldSpec(label="Prosecutor", key="prosecutor"),
    ),
)


def _convert_case(hearing: Any) -> SjpPublicCase:
    parts = sjp.split_hearing(hearing)
    address = sjp.accused_address(parts.accused) or {}
    first_offence = parts.offences[0] if parts.offences else None
    offence = None
    if first_offence is not None:
        offence = first_offence.title or first_offence.wording
    return SjpPublicCase(
        reference=parts.reference,
        name=sjp.accused_name(parts.accused),
        postcode=sjp.postcode_outward_code(address.get("postCode")),
        offence=offence,
        prosecutor=parts.prosecutor,
    )


def convert(raw: Any, descriptor: ListTypeDescriptor) -> SjpPublicList:
    return SjpPublicList(
        list_type=descriptor.name,
        publication_date=sjp.publication_date(raw),
        cases=tuple(_convert_case(hearing) for hearing in sjp.iter_hearings(raw)),
    )


def render(
    document: SjpPublicList,
    descriptor: ListTypeDescriptor,
    locale: str,
    metadata: PublicationMetadata,
) -> ListView:
    copy = copy_for(locale)
    rows = tuple(
        {
            "name": case.name,
            "postcode": display_text(case.postcode),
            "offence": display_text(case.offence),
            "prosecutor": display_text(case.prosecutor),
        }
        for case in document.cases
    )
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
        notices=(copy["importantInformation"][descriptor.name],),
    )


def summary_entries(document: SjpPublicList) -> Iterable[dict[str, object]]:
    return [
        {
            "name": case.name,
            "postcode": case.postcode,
            "offence": case.offence,
            "prosecutor": case.prosecutor,
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
