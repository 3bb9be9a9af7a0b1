from __future__ import annotations

from typing import Any, Iterable, Mapping

from hearing_lists.documents import WeeklyHearing, WeeklyHearingList
from hearing_lists.list_types.base import apply_text_default, build_handler_bundle, build_header
from hearing_lists.locales import copy_for
from hearing_lists.registry import ListTypeDescriptor, ListTypeRegistryBuilder
from hearing_lists.rendering.dates import format_display_date, parse_day_month_year
from hearing_lists.rendering.view import ListView, ViewSection, build_columns, display_text
from hearing_lists.schemas import PublicationMetadata
from hearing_lists.services.email_summary import SummaryFieldSpec, SummaryPolicy
from hearing_lists.spreadsheets import (
    SheetLayout,
    SpreadsheetField,
    WorkbookLayout,
    no_html_tags,
    validate_day_month_year,
)

NOT_AVAILABLE = "N/A"

DESCRIPTOR = ListTypeDescriptor(
    list_type_id=9,
    name="CARE_STANDARDS_TRIBUNAL_WEEKLY_HEARING_LIST",
    schema_name="care-standards-tribunal-weekly-hearing-list",
    schema_version="1.0",
    english_friendly_name="Care Standards Tribunal Weekly Hearing List",
    welsh_friendly_name="Rhestr Gwrandawiadau Wythnosol y Tribiwnlys Safonau Gofal",
    url_path="care-standards-tribunal-weekly-hearing-list",
)

WEEKLY_HEARING_DEFAULTS: Mapping[str, str | None] = {
    "case_name": NOT_AVAILABLE,
    "hearing_length": NOT_AVAILABLE,
    "hearing_type": NOT_AVAILABLE,
    "venue": NOT_AVAILABLE,
    "additional_information": NOT_AVAILABLE,
}

COLUMNS = ("date", "caseName", "hearingLength", "hearingType", "venue", "additionalInformation")

SUMMARY_POLICY = SummaryPolicy(
    fields=(
        SummaryFieldSpec(label="Case name", key="caseName"),
        SummaryFieldSpec(label="Hearing date", key="hearingDate"),
        SummaryFieldSpec(label="Hearing type", key="hearingType"),
        SummaryFieldSpec(label="Venue", key="venue"),
    ),
    empty_value=NOT_AVAILABLE,
)

WORKBOOK_LAYOUT = WorkbookLayout.single(
    SheetLayout(
        fields=(
            SpreadsheetField("Date", "date", validators=(validate_day_month_year,)),
            SpreadsheetField("Case name", "caseName", validators=(no_html_tags("Case name"),)),
            SpreadsheetField("Hearing length", "hearingLength", validators=(no_html_tags("Hearing length"),)),
            SpreadsheetField("Hearing type", "hearingType", validators=(no_html_tags("Hearing type"),)),
            SpreadsheetField("Venue", "venue", validators=(no_html_tags("Venue"),)),
            SpreadsheetField(
                "Additional information",
                "additionalInformation",
                validators=(no_html_tags("Additional information"),),
            ),
        ),
    )
)


def _convert_hearing(item: Mapping[str, Any]) -> WeeklyHearing:
    return WeeklyHearing(
        hearing_date=parse_day_month_year(item["date"]),
        case_name=apply_text_default(item.get("caseName"), WEEKLY_HEARING_DEFAULTS["case_name"]),
        hearing_length=apply_text_default(item.get("hearingLength"), WEEKLY_HEARING_DEFAULTS["hearing_length"]),
        hearing_type=apply_text_default(item.get("hearingType"), WEEKLY_HEARING_DEFAULTS["hearing_type"]),
        venue=apply_text_default(item.get("venue"), WEEKLY_HEARING_DEFAULTS["venue"]),
        additional_information=apply_text_default(
            item.get("additionalInformation"),
            WEEKLY_HEARING_DEFAULTS["additional_information"],
        ),
    )


def convert(raw: Any, descriptor: ListTypeDescriptor) -> WeeklyHearingList:
    return WeeklyHearingList(
        list_type=descriptor.name,
        hearings=tuple(_convert_hearing(item) for item in raw),
    )


def render(
    document: WeeklyHearingList,
    descriptor: ListTypeDescriptor,
    locale: str,
    metadata: PublicationMetadata,
) -> ListView:
    copy = copy_for(locale)
    rows = tuple(
        {
            "date": format_display_date(hearing.hearing_date, locale),
            "caseName": display_text(hearing.case_name),
            "hearingLength": display_text(hearing.hearing_length),
            "hearingType": display_text(hearing.hearing_type),
            "venue": display_text(hearing.venue),
            "additionalInformation": display_text(hearing.additional_information),
        }
        for hearing in document.hearings
    )
    return ListView(
        list_type=document.list_type,
        locale=locale,
        title=descriptor.friendly_name(locale),
        header=build_header(descriptor, locale, metadata),
        sections=(
            ViewSection(
                section_id="hearings",
                heading=copy["sections"]["hearings"],
                columns=build_columns(COLUMNS, copy),
                rows=rows,
            ),
        ),
        copy=copy,
        notices=(copy["importantInformation"][descriptor.name],),
    )


def summary_entries(document: WeeklyHearingList) -> Iterable[dict[str, object]]:
    return [
        {
            "caseName": hearing.case_name,
            "hearingDate": format_display_date(hearing.hearing_date, "en"),
            "hearingType": hearing.hearing_type,
            "venue": hearing.venue,
        }
        for hearing in document.hearings
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
            workbook_layout=WORKBOOK_LAYOUT,
        ),
    )
