from __future__ import annotations

from typing import Any, Iterable

from hearing_lists.documents import LondonAdministrativeCourtDailyCauseList
from hearing_lists.list_types.base import build_handler_bundle, build_header
from hearing_lists.list_types.standard_hearings import (
    STANDARD_SUMMARY_POLICY,
    STANDARD_TAB,
    convert_standard_hearing,
    standard_section,
    standard_summary_entry,
)
from hearing_lists.locales import copy_for
from hearing_lists.registry import ListTypeDescriptor, ListTypeRegistryBuilder
from hearing_lists.rendering.view import ListView
from hearing_lists.schemas import PublicationMetadata
from hearing_lists.spreadsheets import WorkbookLayout, WorkbookSheet

DESCRIPTOR = ListTypeDescriptor(
    list_type_id=18,
    name="LONDON_ADMINISTRATIVE_COURT_DAILY_CAUSE_LIST",
    schema_name="london-administrative-court-daily-cause-list",
    schema_version="1.0",
    english_friendly_name="London Administrative Court Daily Cause List",
    welsh_friendly_name="Rhestr Achosion Dyddiol Llys Gweinyddol Llundain",
    url_path="london-administrative-court-daily-cause-list",
)

WORKBOOK_LAYOUT = WorkbookLayout(
    sheets=(
        WorkbookSheet(key="mainHearings", layout=STANDARD_TAB, sheet_name="Main hearings"),
        WorkbookSheet(key="planningCourt", layout=STANDARD_TAB, sheet_name="Planning Court"),
    )
)


def convert(raw: Any, descriptor: ListTypeDescriptor) -> LondonAdministrativeCourtDailyCauseList:
    return LondonAdministrativeCourtDailyCauseList(
        list_type=descriptor.name,
        main_hearings=tuple(convert_standard_hearing(item) for item in raw["mainHearings"]),
        planning_court=tuple(convert_standard_hearing(item) for item in raw["planningCourt"]),
    )


def render(
    document: LondonAdministrativeCourtDailyCauseList,
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
        sections=(
            standard_section("mainHearings", document.main_hearings, copy),
            standard_section("planningCourt", document.planning_court, copy),
        ),
        copy=copy,
    )


def summary_entries(document: LondonAdministrativeCourtDailyCauseList) -> Iterable[dict[str, object]]:
    hearings = (*document.main_hearings, *document.planning_court)
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
