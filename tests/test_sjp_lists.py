from __future__ import annotations

import copy
from datetime import date

import pytest

from hearing_lists.errors import ConversionContractError
from hearing_lists.list_types import build_default_registry
from hearing_lists.list_types.sjp import postcode_outward_code
from hearing_lists.services.email_summary import REDACTED_CASE_SUMMARY, SPECIAL_CATEGORY_DATA_WARNING
from hearing_lists.schemas import SummaryField

ACCUSED = {
    "partyRole": "ACCUSED",
    "individualDetails": {
        "individualForenames": "John",
        "individualSurname": "Smith",
        "dateOfBirth": "15/06/1990",
        "address": {"line": ["1 High Street"], "town": "London", "postCode": "SE23 6FH"},
    },
}
PROSECUTOR = {"partyRole": "PROSECUTOR", "organisationDetails": {"organisationName": "TV Licensing"}}
OFFENCE = {
    "offenceTitle": "Use a television set without a licence",
    "offenceWording": "Used a TV receiver without a licence",
    "reportingRestriction": False,
}


def _hearing(*, urn: str = "TVL12345", parties: list | None = None, offences: list | None = None) -> dict:
    return {
        "case": [{"caseUrn": urn}],
        "party": copy.deepcopy(parties if parties is not None else [ACCUSED, PROSECUTOR]),
        "offence": copy.deepcopy(offences if offences is not None else [OFFENCE]),
    }


def _payload(*hearings: dict) -> dict:
    return {
        "document": {"publicationDate": "2026-01-15T09:00:00Z"},
        "courtLists": [
            {
                "courtHouse": {
                    "courtRoom": [{"session": [{"sittings": [{"hearing": list(hearings or [_hearing()])}]}]}]
                }
            }
        ],
    }


def _bundle(name: str):
    return build_default_registry().resolve(name)


def test_public_list_converts_minimal_case_details() -> None:
    bundle = _bundle("SJP_PUBLIC_LIST")
    payload = _payload()

    assert bundle.validate(payload).valid is True
    document = bundle.convert(payload)

    case = document.cases[0]
    assert case.reference == "TVL12345"
    assert case.name == "John Smith"
    assert case.postcode == "SE23"
    assert case.offence == "Use a television set without a licence"
    assert case.prosecutor == "TV Licensing"
    assert bundle.summarize(document)[0].entries == (
        SummaryField(label="Name", value="John Smith"),
        SummaryField(label="Postcode", value="SE23"),
        SummaryField(label="Offence", value="Use a television set without a licence"),
        SummaryField(label="Prosecutor", value="TV Licensing"),
    )


def test_public_list_missing_case_reference_fails_validation_with_field_path() -> None:
    bundle = _bundle("SJP_PUBLIC_LIST")
    hearing = _hearing()
    hearing["case"] = [{}]
    payload = _payload(hearing)

    result = bundle.validate(payload)

    assert result.valid is False
    assert [issue.path for issue in result.errors] == [
        "courtLists[0].courtHouse.courtRoom[0].session[0].sittings[0].hearing[0].case[0].caseUrn"
    ]
    assert result.errors[0].message == "must have required property 'caseUrn'"
    with pytest.raises(ConversionContractError):
        bundle.convert(payload)


def test_accused_name_accepts_legacy_fields_and_defaults_to_unknown() -> None:
    bundle = _bundle("SJP_PUBLIC_LIST")
    legacy = {"partyRole": "ACCUSED", "individualDetails": {"forename": "Jane", "surname": "Doe"}}
    organisation = {"partyRole": "accused", "organisationDetails": {"organisationName": "Acme Ltd"}}
    payload = _payload(
        _hearing(urn="A1", parties=[legacy, PROSECUTOR]),
        _hearing(urn="A2", parties=[organisation]),
        _hearing(urn="A3", parties=[PROSECUTOR]),
    )

    document = bundle.convert(payload)

    assert [case.name for case in document.cases] == ["Jane Doe", "Acme Ltd", "Unknown"]
    assert document.cases[1].prosecutor is None
    assert document.cases[2].postcode is None


def test_press_list_carries_full_accused_details() -> None:
    bundle = _bundle("SJP_PRESS_LIST")
    payload = _payload()

    assert bundle.validate(payload).valid is True
    document = bundle.convert(payload)

    case = document.cases[0]
    assert case.date_of_birth == date(1990, 6, 15)
    assert case.age == 35
    assert case.address == "1 High Street, London, SE23 6FH"
    assert case.offences[0].wording == "Used a TV receiver without a licence"

    view = bundle.render(document, "en")
    row = view.sections[0].rows[0]
    assert row["dateOfBirth"] == "15 June 1990"
    assert row["age"] == "35"
    assert row["offences"] == "Use a television set without a licence: Used a TV receiver without a licence"
    assert bundle.render(document, "cy").sections[0].rows[0]["dateOfBirth"] == "15 Mehefin 1990"


def test_press_list_age_is_relative_to_publication_date() -> None:
    bundle = _bundle("SJP_PRESS_LIST")
    payload = _payload()

    first = bundle.convert(payload)
    payload["document"]["publicationDate"] = "2026-06-15T09:00:00Z"
    second = bundle.convert(payload)

    assert first.cases[0].age == 35
    assert second.cases[0].age == 36


def test_press_list_birth_date_after_publication_has_no_age() -> None:
    bundle = _bundle("SJP_PRESS_LIST")
    accused = copy.deepcopy(ACCUSED)
    accused["individualDetails"]["dateOfBirth"] = "20/01/2026"

    document = bundle.convert(_payload(_hearing(parties=[accused, PROSECUTOR])))

    assert document.cases[0].date_of_birth == date(2026, 1, 20)
    assert document.cases[0].age is None
    assert bundle.render(document, "en").sections[0].rows[0]["age"] == ""


def test_press_list_summaries_are_fully_redacted() -> None:
    bundle = _bundle("SJP_PRESS_LIST")
    document = bundle.convert(_payload(_hearing(urn="TVL1"), _hearing(urn="TVL2")))

    summaries = bundle.summarize(document)

    assert summaries == (REDACTED_CASE_SUMMARY, REDACTED_CASE_SUMMARY)
    text = " ".join(field.value for summary in summaries for field in summary.entries)
    for original in ("TVL1", "John Smith", "SE23", "1990", "TV Licensing", "television"):
        assert original not in text
    assert summaries[0].entries[0].value == SPECIAL_CATEGORY_DATA_WARNING


def test_press_list_flags_reporting_restrictions() -> None:
    bundle = _bundle("SJP_PRESS_LIST")
    restricted = dict(OFFENCE, reportingRestriction=True)

    plain = bundle.render(bundle.convert(_payload()), "en")
    flagged = bundle.render(bundle.convert(_payload(_hearing(offences=[restricted]))), "en")

    assert len(flagged.notices) == len(plain.notices) + 1
    assert flagged.notices[-1] == flagged.copy["reportingRestrictionNotice"]


@pytest.mark.parametrize(
    ("postcode", "expected"),
    [("SE23 6FH", "SE23"), ("m1 2aa", "M1"), ("EC1A", "EC1A"), ("AA", "AA"), ("", None), (None, None), ("123", None)],
)
def test_postcode_outward_code(postcode: str | None, expected: str | None) -> None:
    assert postcode_outward_code(postcode) == expected
