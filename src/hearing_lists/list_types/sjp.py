"""Single justice procedure list parsing shared by the press and public lists."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
import re
from typing import Any, Iterator, Mapping

from hearing_lists.documents import SjpOffence
from hearing_lists.rendering.dates import parse_iso_datetime

UNKNOWN_NAME = "Unknown"
PROSECUTOR_ROLES = frozenset({"PROSECUTOR", "PROSECUTER"})

_OUTWARD_CODE_PATTERN = re.compile(r"^[A-Z]{1,2}[0-9]{0,2}[A-Z]?$")


@dataclass(frozen=True)
class SjpHearingParts:
    reference: str
    accused: Mapping[str, Any] | None
    prosecutor: str | None
    offences: tuple[SjpOffence, ...]


def publication_date(raw: Mapping[str, Any]) -> datetime:
    return parse_iso_datetime(raw["document"]["publicationDate"])


def iter_hearings(raw: Mapping[str, Any]) -> Iterator[Mapping[str, Any]]:
    for court_list in raw["courtLists"]:
        for court_room in court_list["courtHouse"]["courtRoom"]:
            for session in court_room["session"]:
                for sitting in session["sittings"]:
                    yield from sitting["hearing"]


def _individual_field(details: Mapping[str, Any], current: str, legacy: str) -> str | None:
    value = details.get(current) or details.get(legacy)
    return value.strip() if value and value.strip() else None


def accused_name(accused: Mapping[str, Any] | None) -> str:
    if accused is None:
        return UNKNOWN_NAME
    individual = accused.get("individualDetails")
    if individual:
        parts = (
            individual.get("title"),
            _individual_field(individual, "individualForenames", "forename"),
            _individual_field(individual, "individualMiddleName", "middleName"),
            _individual_field(individual, "individualSurname", "surname"),
        )
        name = " ".join(part.strip() for part in parts if part and part.strip())
        return name or UNKNOWN_NAME
    organisation = accused.get("organisationDetails") or {}
    return (organisation.get("organisationName") or "").strip() or UNKNOWN_NAME


def accused_address(accused: Mapping[str, Any] | None) -> Mapping[str, Any] | None:
    if accused is None:
        return None
    individual = accused.get("individualDetails") or {}
    organisation = accused.get("organisationDetails") or {}
    return individual.get("address") or organisation.get("address")


def format_address(address: Mapping[str, Any] | None) -> str | None:
    if not address:
        return None
    parts = [*(address.get("line") or ()), address.get("town"), address.get("county"), address.get("postCode")]
    cleaned = [part.strip() for part in parts if part and part.strip()]
    return ", ".join(cleaned) or None


def postcode_outward_code(postcode: str | None) -> str | None:
    """Reduces "SE23 6FH" to "SE23"; an already shortened code is kept as it is."""
    if not postcode or not postcode.strip():
        return None
    trimmed = postcode.strip().upper()
    if " " in trimmed:
        return trimmed.split(" ", 1)[0]
    return trimmed if _OUTWARD_CODE_PATTERN.match(trimmed) else None


def split_hearing(hearing: Mapping[str, Any]) -> SjpHearingParts:
    parties = hearing["party"]
    accused = next((party for party in parties if party["partyRole"].strip().upper() == "ACCUSED"), None)
    prosecutor_party = next(
        (party for party in parties if party["partyRole"].strip().upper() in PROSECUTOR_ROLES),
        None,
    )
    prosecutor = None
    if prosecutor_party is not None:
        organisation = prosecutor_party.get("organisationDetails") or {}
        prosecutor = (organisation.get("organisationName") or "").strip() or None

    offences = tuple(
        SjpOffence(
            title=(offence.get("offenceTitle") or "").strip(),
            wording=(offence.get("offenceWording") or "").strip() or None,
            reporting_restriction=bool(offence.get("reportingRestriction", False)),
        )
        for offence in hearing["offence"]
    )
    return SjpHearingParts(
        reference=hearing["case"][0]["caseUrn"].strip(),
        accused=accused,
        prosecutor=prosecutor,
        offences=offences,
    )


__all__ = [
    "SjpHearingParts",
    "UNKNOWN_NAME",
    "accused_address",
    "accused_name",
    "format_address",
    "iter_hearings",
    "postcode_outward_code",
    "publication_date",
    "split_hearing",
]
