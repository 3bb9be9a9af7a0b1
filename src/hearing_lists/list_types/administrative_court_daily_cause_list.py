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

SCHEMA_NAME = "administrative-court-daily-cause-list"
SCHEMA_VERSION = "1.0"

# (id, list name prefix, English court name, Welsh court name)
_COURTS = (
    (20, "BIRMINGHAM", "Birmingham", "Birmingham"),
    (21, "LEEDS", "Leeds", "Leeds"),
    (22, "BRISTOL_AND_CARDIFF", "Bristol and Cardiff", "Bryste a Chaerdydd"),
    (23, "MANCHESTER", "Manchester", "Manceinion"),
)

DESCRIPTORS = tuple(
    ListTypeDescriptor(
        list_type_id=list_type_id,
        name=f"{prefix}_ADMINISTRATIVE_COURT_DAILY_CAUSE_LIST",
        schema_name=SCHEMA_NAME,
        schema_version=SCHEMA_VERSION,
        english_friendly_name=f"{english_court} Administrative Court Daily Cause List",
        welsh_friendly_name=f"Rhestr Achosion Dyddiol Llys Gweinyddol {welsh_court}",
        url_path=f"{prefix.lower().replace('_', '-')}-administrative-court-daily-cause-list",
    )
    for list_type_id, prefix, english_court, welsh_court in _COURTS
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
