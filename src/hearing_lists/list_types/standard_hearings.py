"""Shared handling for the seven-field daily cause list row used by the
Royal Courts of Justice and administrative court lists."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from hearing_lists.documents import FutureJudgment, StandardDailyCauseList, StandardHearing
from hearing_lists.list_types.base import apply_text_default, build_header
from hearing_lists.locales import copy_for
from hearing_lists.registry import ListTypeDescriptor
from hearing_lists.rendering.dates import (
    format_clock_time,
    format_display_date,
    normalize_time_text,
    parse_clock_time,
    parse_day_month_year,
)
from hearing_lists.rendering.view import ListView, ViewSection, build_columns, display_text
from hearing_lists.schemas import PublicationMetadata
from hearing_lists.services.email_summary import SummaryFieldSpec, SummaryPolicy
from hearing_lists.spreadsheets import (
    CellValidator,
    SheetLayout,
    SpreadsheetField,
    WorkbookLayout,
    no_html_tags,
    validate_day_month_year,
    validate_simple_time,
    validate_twelve_hour_time,
)

NOT_AVAILABLE = "N/A"

# Placeholder text applied by the converter when a descriptive field is blank.
STANDARD_HEARING_DEFAULTS: Mapping[str, str | None] = {
    "venue": "",
    "judge": "",
    "case_number": NOT_AVAILABLE,
    "case_details": NOT_AVAILABLE,
    "hearing_type": NOT_AVAILABLE,
    "additional_information": NOT_AVAILABLE,
}

STANDARD_COLUMNS = (
    "venue",
    "judge",
    "time",
    "caseNumber",
    "caseDetails",
    "hearingType",
    "additionalInformation",
)
FUTURE_JUDGMENT_COLUMNS = ("date", *STANDARD_COLUMNS)

STANDARD_SUMMARY_POLICY = SummaryPolicy(
    fields=(
        SummaryFieldSpec(label="Case number", key="caseNumber"),
        SummaryFieldSpec(label="Case details", key="caseDetails"),
        SummaryFieldSpec(label="Hearing type", key="hearingType"),
    ),
    empty_value=NOT_AVAILABLE,
)


def standard_spreadsheet_fields(time_validator: CellValidator) -> tuple[SpreadsheetField, ...]:
    def _text(header: str, field_name: str, *, required: bool = True) -> SpreadsheetField:
        return SpreadsheetField(header, field_name, required=required, validators=(no_html_tags(header),))

    return (
        _text("Venue", "venue"),
        _text("Judge", "judge"),
        SpreadsheetField("Time", "time", validators=(time_validator,)),
        _text("Case Number", "caseNumber"),
        _text("Case Details", "caseDetails"),
        _text("Hearing Type", "hearingType"),
        _text("Additional Information", "additionalInformation", required=False),
    )


# Single-sheet uploads need a hearing; tabs of multi-sheet uploads may be empty.
STANDARD_SHEET = SheetLayout(fields=standard_spreadsheet_fields(validate_twelve_hour_time), min_rows=1)
STANDARD_TAB = SheetLayout(fields=standard_spreadsheet_fields(validate_simple_time), min_rows=0)
FUTURE_JUDGMENTS_TAB = SheetLayout(
    fields=(
        SpreadsheetField("Date", "date", validators=(validate_day_month_year,)),
        *standard_spreadsheet_fields(validate_simple_time),
    ),
    min_rows=0,
)
STANDARD_WORKBOOK = WorkbookLayout.single(STANDARD_SHEET)


def convert_standard_hearing(
    item: Mapping[str, Any],
    defaults: Mapping[str, str | None] = STANDARD_HEARING_DEFAULTS,
) -> StandardHearing:
    time_text = normalize_time_text(item.get("time"))
    return StandardHearing(
        venue=apply_text_default(item.get("venue"), defaults["venue"]),
        judge=apply_text_default(item.get("judge"), defaults["judge"]),
        start_time=parse_clock_time(time_text),
        time_text=time_text,
        case_number=apply_text_default(item.get("caseNumber"), defaults["case_number"]),
        case_details=apply_text_default(item.get("caseDetails"), defaults["case_details"]),
        hearing_type=apply_text_default(item.get("hearingType"), defaults["hearing_type"]),
        additional_information=apply_text_default(
            item.get("additionalInformation"),
            defaults["additional_information"],
        ),
    )


def convert_future_judgment(
    item: Mapping[str, Any],
    defaults: Mapping[str, str | None] = STANDARD_HEARING_DEFAULTS,
) -> FutureJudgment:
    hearing = convert_standard_hearing(item, defaults)
    return FutureJudgment(
        **hearing.model_dump(),
        judgment_date=parse_day_month_year(item["date"]),
    )


def convert_standard_daily_cause_list(raw: Any, descriptor: ListTypeDescriptor) -> StandardDailyCauseList:
    return StandardDailyCauseList(
        list_type=descriptor.name,
        hearings=tuple(convert_standard_hearing(item) for item in raw),
    )


def format_hearing_time(hearing: StandardHearing) -> str:
    if hearing.start_time is not None:
        return format_clock_time(hearing.start_time)
    return hearing.time_text


def standard_row(hearing: StandardHearing) -> dict[str, str]:
    return {
        "venue": display_text(hearing.venue),
        "judge": display_text(hearing.judge),
        "time": format_hearing_time(hearing),
        "caseNumber": display_text(hearing.case_number),
        "caseDetails": display_text(hearing.case_details),
        "hearingType": display_text(hearing.hearing_type),
        "additionalInformation": display_text(hearing.additional_information),
    }


def future_judgment_row(judgment: FutureJudgment, locale: str) -> dict[str, str]:
    return {"date": format_display_date(judgment.judgment_date, locale), **standard_row(judgment)}


def standard_section(
    section_id: str,
    hearings: Iterable[StandardHearing],
    copy: Mapping[str, Any],
) -> ViewSection:
    return ViewSection(
        section_id=section_id,
        heading=copy["sections"][section_id],
        columns=build_columns(STANDARD_COLUMNS, copy),
        rows=tuple(standard_row(hearing) for hearing in hearings),
    )


def render_standard_daily_cause_list(
    document: StandardDailyCauseList,
    descriptor: ListTypeDescriptor,
    locale: str,
    metadata: PublicationMetadata,
) -> ListView:
    copy = copy_for(locale)
    return ListView(
        list_type=document.list_type,
        locale=locale,
        title=descriptor.friendly_name(locale),
        header=build_header(descriptor, locale, metadata),
        sections=(standard_section("hearings", document.hearings, copy),),
        copy=copy,
    )


def standard_summary_entry(hearing: StandardHearing) -> dict[str, object]:
    return {
        "caseNumber": hearing.case_number,
        "caseDetails": hearing.case_details,
        "hearingType": hearing.hearing_type,
    }


def standard_list_summary_entries(document: StandardDailyCauseList) -> Iterable[dict[str, object]]:
    return [standard_summary_entry(hearing) for hearing in document.hearings]


__all__ = [
    "FUTURE_JUDGMENTS_TAB",
    "FUTURE_JUDGMENT_COLUMNS",
    "NOT_AVAILABLE",
    "STANDARD_COLUMNS",
    "STANDARD_HEARING_DEFAULTS",
    "STANDARD_SHEET",
    "STANDARD_SUMMARY_POLICY",
    "STANDARD_TAB",
    "STANDARD_WORKBOOK",
    "convert_future_judgment",
    "convert_standard_daily_cause_list",
    "convert_standard_hearing",
    "future_judgment_row",
    "render_standard_daily_cause_list",
    "standard_list_summary_entries",
    "standard_row",
    "standard_section",
    "standard_spreadsheet_fields",
    "standard_summary_entry",
]
