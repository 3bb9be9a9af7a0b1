from __future__ import annotations

from hearing_lists.list_types.base import build_handler_bundle
from hearing_lists.list_types.standard_hearings import (
    STANDARD_SUMMARY_POLICY,
    STANDARD_WORKBOOK,
    convert_standard_daily_cause_list,
    render_standard_daily_cause_list,
    standard_list_summary_entries,
)
from hearing_lists.registry import ListTypeDescriptor, ListTypeRegistryBuilder

SCHEMA_NAME = "rcj-standard-daily-cause-list"
SCHEMA_VERSION = "1.0"

_LIST_TYPES = (
    (
        10,
        "CIVIL_COURTS_RCJ_DAILY_CAUSE_LIST",
        "Civil Courts at the Royal Courts of Justice Daily Cause List",
        "Rhestr Achosion Dyddiol Llys Sifil yn y Llysoedd Barn Brenhinol",
        "civil-courts-rcj-daily-cause-list",
    ),
    (
        11,
        "COUNTY_COURT_LONDON_CIVIL_DAILY_CAUSE_LIST",
        "County Court at Central London Civil Daily Cause List",
        "Rhestr Achosion Dyddiol Sifil yn y Llys Sirol yng Nghanol Llundain",
        "county-court-london-civil-daily-cause-list",
    ),
    (
        12,
        "COURT_OF_APPEAL_CRIMINAL_DAILY_CAUSE_LIST",
        "Court of Appeal (Criminal Division) Daily Cause List",
        "Rhestr Achosion Dyddiol y Llys Apêl (Adran Troseddol)",
        "court-of-appeal-criminal-daily-cause-list",
    ),
    (
        13,
        "FAMILY_DIVISION_HIGH_COURT_DAILY_CAUSE_LIST",
        "Family Division of the High Court Daily Cause List",
        "Rhestr Achosion Dyddiol Adran Deulu yr Uchel Lys",
        "family-division-high-court-daily-cause-list",
    ),
    (
        14,
        "KINGS_BENCH_DIVISION_DAILY_CAUSE_LIST",
        "King's Bench Division Daily Cause List",
        "Rhestr Achosion Dyddiol Adran Mainc y Brenin",
        "kings-bench-division-daily-cause-list",
    ),
    (
        15,
        "KINGS_BENCH_MASTERS_DAILY_CAUSE_LIST",
        "King's Bench Masters Daily Cause List",
        "Rhestr Achosion Dyddiol Meistri Mainc y Brenin",
        "kings-bench-masters-daily-cause-list",
    ),
    (
        16,
        "MAYOR_CITY_CIVIL_DAILY_CAUSE_LIST",
        "Civil Daily Cause List",
        "Rhestr Achosion Dyddiol y Llys Sifil",
        "mayor-city-civil-daily-cause-list",
    ),
    (
        17,
        "SENIOR_COURTS_COSTS_OFFICE_DAILY_CAUSE_LIST",
        "Senior Courts Costs Office Daily Cause List",
        "Rhestr Achosion Dyddiol Swyddfa Costau’r Uwchlysoedd",
        "senior-courts-costs-office-daily-cause-list",
    ),
)

DESCRIPTORS = tuple(
    ListTypeDescriptor(
        list_type_id=list_type_id,
        name=name,
        schema_name=SCHEMA_NAME,
        schema_version=SCHEMA_VERSION,
        english_friendly_name=english_name,
        welsh_friendly_name=welsh_name,
        url_path=url_path,
    )
    for list_type_id, name, english_name, welsh_name, url_path in _LIST_TYPES
)


def register(builder: ListTypeRegistryBuilder) -> None:
    for descriptor in DESCRIPTORS:
        builder.register(
            descriptor,
            build_handler_bundle(
                descriptor,
                convert=convert_standard_daily_cause_list,
                render=render_standard_daily_cause_list,
                summary_entries=standard_list_summary_entries,
                summary_policy=STANDARD_SUMMARY_POLICY,
                workbook_layout=STANDARD_WORKBOOK,
            ),
        )
