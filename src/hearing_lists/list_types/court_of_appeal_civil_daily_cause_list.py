from __future__ import annotations

from typing import Any, Iterable

from hearing_lists.documents import CourtOfAppealCivilDailyCauseList
from hearing_lists.list_types.base import build_handler_bundle, build_header
from hearing_lists.list_types.standard_hearings import (
    FUTURE_JUDGMENTS_TAB,
    FUTURE_JUDGMENT_COLUMNS,
    STANDARD_SUMMARY_POLICY,
    STANDARD_TAB,
    convert_future_judgment,
    convert_standard_hearing,
    future_judgment_row,
    standard_section,
    standard_summary_entry,
)
from hearing_lists.locales import copy_for
from hearing_lists.registry import ListTypeDescriptor, ListTypeRegistryBuilder
from hearing_lists.rendering.view import ListView, ViewSection, build_columns
from hearing_lists.schemas import PublicationMetadata
from hearing_lists.spreadsheets import WorkbookLayout, WorkbookSheet

DESCRIPTOR = ListTypeDescriptor(
    list_type_id=19,
    name="COURT_OF_APPEAL_CIVIL_DAILY_CAUSE_LIST",
    schema_name="court-of-appeal-civil-daily-cause-list",
    schema_version="1.0",
    english_friendly_name="Court of Appeal (Civil Division) Daily Cause List",
    welsh_friendly_name="Rhestr Achosion Dyddiol y Llys Apêl (Adran Sifil)",
    url_path="court-of-appeal-civil-daily-cause-list",
)

WORKBOOK_LAYOUT = WorkbookLayout(
    sheets=(
        WorkbookSheet(key="dailyHearings", layout=STANDARD_TAB, sheet_name="Daily hearings"),
        WorkbookSheet(key="futureJudgments", layout=FUTURE_JUDGMENTS_TAB, sheet_name="Notice for future judgments"),
    )
)


def convert(raw: Any, descriptor: ListTypeDescriptor) -> CourtOfAppealCivilDailyCauseList:
    return CourtOfAppealCivilDailyCauseList(
        list_type=descriptor.name,
        daily_hearings=tuple(convert_standard_hearing(item) for item in raw["dailyHearings"]),
        future_judgments=tuple(convert_future_judgment(item) for item in raw["futureJudgments"]),
    )


def render(
    document: CourtOfAppealCivilDailyCauseList,
    descriptor: ListTypeDescriptor,
    locale: str,
    metadata: PublicationMetadata,
) -> ListView:
    copy = copy_for(locale)
    future_judgments = ViewSection(
        section_id="futureJudgments",
        heading=copy["sections"]["futureJudgments"],
        columns=build_columns(FUTURE_JUDGMENT_COLUMNS, copy),
        rows=tuple(future_judgment_row(judgment, locale) for judgment in document.future_judgments),
    )
    return ListView(
        list_type=document.list_type,
        locale=locale,
        title=descriptor.friendly_name(locale),
        header=build_header(descriptor, locale, metadata),
        sections=(standard_section("dailyHearings", document.daily_hearings, copy), future_judgments),
        copy=copy,
    )


def summary_entries(document: CourtOfAppealCivilDailyCauseList) -> Iterable[dict[str, object]]:
    hearings = (*document.daily_hearings, *document.future_judgments)
    return [standard_summary_entry(hearing) for hearing in hearings]


def register(builder: ListTypeRegistryBuilder) -> None:
    builder.register(
        DESCRIPTOR,
        build_handler_bundle(
            DESCRIPTOR,
            convert=convert,
            render=render,
            summary_entries=summary_entries,
            summary_policy=STANDARD_SUMMARY_POLICY,
            workbook_layout=WORKBOOK_LAYOUT,
        ),
    )
