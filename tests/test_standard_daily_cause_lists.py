from __future__ import annotations

from datetime import date, time

import pytest

from hearing_lists.errors import ConversionContractError
from hearing_lists.list_types import build_default_registry
from hearing_lists.schemas import CaseSummary, PublicationMetadata, SummaryField, ValidationIssue


def _hearing(**overrides: str) -> dict[str, str]:
    hearing = {
        "venue": "Court A",
        "judge": "J. Smith",
        "time": "10:00",
        "caseNumber": "CN1",
        "caseDetails": "Hearing",
        "hearingType": "Trial",
        "additionalInformation": "",
    }
    hearing.update(overrides)
    return hearing


def _bundle(list_type: object):
    return build_default_registry().resolve(list_type)


@pytest.mark.parametrize("list_type_id", [10, 11, 12, 13, 14, 15, 16, 17, 20, 21, 22, 23])
def test_single_hearing_validates_converts_and_summarizes(list_type_id: int) -> None:
    bundle = _bundle(list_type_id)
    raw = [_hearing()]

    assert bundle.validate(raw).valid is True
    document = bundle.convert(raw)

    assert len(document.hearings) == 1
    assert document.hearings[0].case_number == "CN1"
    assert document.hearings[0].additional_information == "N/A"
    assert bundle.summarize(document) == (
        CaseSummary(
            entries=(
                SummaryField(label="Case number", value="CN1"),
                SummaryField(label="Case details", value="Hearing"),
                SummaryField(label="Hearing type", value="Trial"),
            )
        ),
    )


def test_blank_descriptive_fields_use_not_available_placeholder() -> None:
    bundle = _bundle("CIVIL_COURTS_RCJ_DAILY_CAUSE_LIST")
    raw = [_hearing(caseNumber="", caseDetails="  ", hearingType="")]
    raw[0].pop("additionalInformation")

    document = bundle.convert(raw)
    hearing = document.hearings[0]

    assert hearing.case_number == "N/A"
    assert hearing.case_details == "N/A"
    assert hearing.hearing_type == "N/A"
    assert hearing.additional_information == "N/A"
    assert [field.value for field in bundle.summarize(document)[0].entries] == ["N/A", "N/A", "N/A"]


def test_render_formats_time_and_shows_placeholders() -> None:
    bundle = _bundle(10)
    document = bundle.convert([_hearing(), _hearing(time="2.30pm", caseNumber="CN2"), _hearing(time="TBC")])

    view = bundle.render(document, "en")

    assert view.title == "Civil Courts at the Royal Courts of Justice Daily Cause List"
    assert [column.key for column in view.sections[0].columns] == [
        "venue",
        "judge",
        "time",
        "caseNumber",
        "caseDetails",
        "hearingType",
        "additionalInformation",
    ]
    rows = view.sections[0].rows
    assert [row["time"] for row in rows] == ["10am", "2:30pm", "TBC"]
    assert rows[0]["additionalInformation"] == "N/A"
    assert view.entry_count == 3


def test_render_in_welsh_changes_labels_not_structure() -> None:
    bundle = _bundle(10)
    document = bundle.convert([_hearing()])

    english = bundle.render(document, "en")
    welsh = bundle.render(document, "cy")

    assert welsh.title == "Rhestr Achosion Dyddiol Llys Sifil yn y Llysoedd Barn Brenhinol"
    assert [column.label for column in welsh.sections[0].columns][:2] == ["Lleoliad", "Barnwr"]
    assert [column.key for column in welsh.sections[0].columns] == [column.key for column in english.sections[0].columns]
    assert welsh.sections[0].rows == english.sections[0].rows


def test_render_uses_publication_metadata_for_header() -> None:
    bundle = _bundle(14)
    document = bundle.convert([_hearing()])
    metadata = PublicationMetadata(content_date=date(2026, 1, 15), location_name="Royal Courts of Justice")

    view = bundle.render(document, "cy", metadata)

    assert view.header["contentDate"] == "15 Ionawr 2026"
    assert view.header["locationName"] == "Royal Courts of Justice"
    assert view.header["lastUpdated"] == ""


def test_unsupported_locale_renders_as_english() -> None:
    bundle = _bundle(10)
    document = bundle.convert([_hearing()])

    assert bundle.render(document, "fr") == bundle.render(document, "en")


def test_missing_required_field_is_reported_with_item_path() -> None:
    hearing = _hearing()
    hearing.pop("caseNumber")

    result = _bundle(10).validate([hearing])

    assert result.valid is False
    assert result.errors == (
        ValidationIssue(path="[0].caseNumber", message="must have required property 'caseNumber'"),
    )


def test_converter_rejects_input_that_skipped_validation() -> None:
    with pytest.raises(ConversionContractError):
        _bundle(10).convert({"not": "a list"})


@pytest.mark.parametrize(
    ("list_type_id", "name", "english", "welsh"),
    [
        (20, "BIRMINGHAM_ADMINISTRATIVE_COURT_DAILY_CAUSE_LIST", "Birmingham", "Birmingham"),
        (21, "LEEDS_ADMINISTRATIVE_COURT_DAILY_CAUSE_LIST", "Leeds", "Leeds"),
        (22, "BRISTOL_AND_CARDIFF_ADMINISTRATIVE_COURT_DAILY_CAUSE_LIST", "Bristol and Cardiff", "Bryste a Chaerdydd"),
        (23, "MANCHESTER_ADMINISTRATIVE_COURT_DAILY_CAUSE_LIST", "Manchester", "Manceinion"),
    ],
)
def test_administrative_court_descriptors(list_type_id: int, name: str, english: str, welsh: str) -> None:
    descriptor = build_default_registry().require(list_type_id).descriptor

    assert descriptor.name == name
    assert descriptor.english_friendly_name == f"{english} Administrative Court Daily Cause List"
    assert descriptor.welsh_friendly_name == f"Rhestr Achosion Dyddiol Llys Gweinyddol {welsh}"


def test_london_administrative_court_keeps_both_sections_in_order() -> None:
    bundle = _bundle("LONDON_ADMINISTRATIVE_COURT_DAILY_CAUSE_LIST")
    raw = {
        "mainHearings": [_hearing(caseNumber="AC-1"), _hearing(caseNumber="AC-2")],
        "planningCourt": [_hearing(caseNumber="PC-1")],
    }

    assert bundle.validate(raw).valid is True
    document = bundle.convert(raw)
    view = bundle.render(document, "en")

    assert [section.section_id for section in view.sections] == ["mainHearings", "planningCourt"]
    assert [section.heading for section in view.sections] == ["Main hearings", "Planning Court"]
    assert [summary.entries[0].value for summary in bundle.summarize(document)] == ["AC-1", "AC-2", "PC-1"]


def test_london_administrative_court_requires_planning_court_section() -> None:
    result = _bundle(18).validate({"mainHearings": []})

    assert result.errors == (
        ValidationIssue(path="planningCourt", message="must have required property 'planningCourt'"),
    )


def test_court_of_appeal_civil_future_judgments_carry_dates() -> None:
    bundle = _bundle(19)
    raw = {
        "dailyHearings": [_hearing(time="10.30")],
        "futureJudgments": [_hearing(caseNumber="CA-2026-000001", date="15/01/2026")],
    }

    assert bundle.validate(raw).valid is True
    document = bundle.convert(raw)

    assert document.daily_hearings[0].start_time == time(10, 30)
    assert document.daily_hearings[0].time_text == "10:30"
    assert document.future_judgments[0].judgment_date == date(2026, 1, 15)

    english = bundle.render(document, "en")
    welsh = bundle.render(document, "cy")
    assert english.sections[0].rows[0]["time"] == "10:30am"
    assert english.sections[1].rows[0]["date"] == "15 January 2026"
    assert welsh.sections[1].rows[0]["date"] == "15 Ionawr 2026"
    assert english.sections[1].columns[0].key == "date"
    assert len(bundle.summarize(document)) == 2


@pytest.mark.parametrize(
    ("judgment", "path", "message"),
    [
        ({}, "futureJudgments[0].date", "must have required property 'date'"),
        ({"date": "2026-01-15"}, "futureJudgments[0].date", 'must match format "dd/mm/yyyy"'),
    ],
)
def test_court_of_appeal_civil_rejects_bad_judgment_dates(judgment: dict[str, str], path: str, message: str) -> None:
    raw = {"dailyHearings": [], "futureJudgments": [_hearing(**judgment)]}

    result = _bundle(19).validate(raw)

    assert ValidationIssue(path=path, message=message) in result.errors
