from __future__ import annotations

from typing import Any, Iterable, Mapping

from hearing_lists.documents import (
    CauseListCase,
    CauseListCourtHouse,
    CauseListCourtRoom,
    CauseListEntry,
    CauseListHearing,
    CauseListSession,
    CauseListSitting,
    CivilAndFamilyCauseList,
    Venue,
)
from hearing_lists.list_types.base import apply_text_default, build_handler_bundle, build_header
from hearing_lists.locales import copy_for
from hearing_lists.registry import ListTypeDescriptor, ListTypeRegistryBuilder
from hearing_lists.rendering.dates import format_clock_time, format_duration, parse_iso_datetime, to_display_timezone
from hearing_lists.rendering.view import ListView, ViewSection, build_columns, display_text
from hearing_lists.schemas import PublicationMetadata
from hearing_lists.services.email_summary import SummaryFieldSpec, SummaryPolicy

DESCRIPTOR = ListTypeDescriptor(
    list_type_id=8,
    name="CIVIL_AND_FAMILY_DAILY_CAUSE_LIST",
    schema_name="civil-and-family-daily-cause-list",
    schema_version="1.0",
    english_friendly_name="Civil and Family Daily Cause List",
    welsh_friendly_name="Rhestr Achosion Dyddiol Sifil a Theulu",
    url_path="civil-and-family-daily-cause-list",
)

# Blank case text is carried as None and shown as an empty cell.
CASE_DEFAULTS: Mapping[str, str | None] = {
    "case_number": None,
    "case_name": None,
    "case_type": None,
    "hearing_type": None,
}

PARTY_ROLES = {
    "APPLICANT_PETITIONER": "applicant",
    "APPLICANT/PETITIONER": "applicant",
    "APPLICANT_PETITIONER_REPRESENTATIVE": "applicant_representative",
    "APPLICANT/PETITIONER REPRESENTATIVE": "applicant_representative",
    "RESPONDENT": "respondent",
    "RESPONDENT_REPRESENTATIVE": "respondent_representative",
}

COLUMNS = (
    "time",
    "duration",
    "judiciary",
    "hearingChannel",
    "caseReference",
    "caseName",
    "caseType",
    "hearingType",
    "applicant",
    "respondent",
    "reportingRestrictions",
)

SUMMARY_POLICY = SummaryPolicy(
    fields=(
        SummaryFieldSpec(label="Applicant", key="applicant", omit_when_empty=True),
        SummaryFieldSpec(label="Case reference", key="caseReference"),
        SummaryFieldSpec(label="Case name", key="caseName"),
        SummaryFieldSpec(label="Case type", key="caseType"),
        SummaryFieldSpec(label="Hearing type", key="hearingType"),
    ),
)


def _party_name(party: Mapping[str, Any]) -> str:
    individual = party.get("individualDetails")
    if individual:
        parts = (
            individual.get("title"),
            individual.get("individualForenames"),
            individual.get("individualMiddleName"),
            individual.get("individualSurname"),
        )
        return " ".join(part.strip() for part in parts if part and part.strip())
    organisation = party.get("organisationDetails") or {}
    return (organisation.get("organisationName") or "").strip()


def _fold_parties(parties: Iterable[Mapping[str, Any]]) -> dict[str, str | None]:
    names: dict[str, list[str]] = {role: [] for role in set(PARTY_ROLES.values())}
    for party in parties:
        role = PARTY_ROLES.get(party["partyRole"].strip().upper())
        name = _party_name(party)
        if role and name:
            names[role].append(name)
    return {role: ", ".join(values) or None for role, values in names.items()}


def _ordered_judiciary(judiciary: Iterable[Mapping[str, Any]]) -> tuple[str, ...]:
    presiding: list[str] = []
    others: list[str] = []
    for member in judiciary:
        name = (member.get("johKnownAs") or "").strip()
        if not name:
            continue
        (presiding if member.get("isPresiding") else others).append(name)
    return (*presiding, *others)


def _convert_case(item: Mapping[str, Any], hearing_parties: list[Mapping[str, Any]]) -> CauseListCase:
    parties = _fold_parties(item.get("party") or hearing_parties)
    restrictions = tuple(
        text.strip() for text in item.get("reportingRestrictionDetail") or () if text.strip()
    )
    return CauseListCase(
        case_number=apply_text_default(item.get("caseNumber"), CASE_DEFAULTS["case_number"]),
        case_name=apply_text_default(item.get("caseName"), CASE_DEFAULTS["case_name"]),
        case_type=apply_text_default(item.get("caseType"), CASE_DEFAULTS["case_type"]),
        reporting_restrictions=restrictions,
        **parties,
    )


def _convert_hearing(item: Mapping[str, Any]) -> CauseListHearing:
    hearing_parties = item.get("party") or []
    return CauseListHearing(
        hearing_type=apply_text_default(item.get("hearingType"), CASE_DEFAULTS["hearing_type"]),
        cases=tuple(_convert_case(case, hearing_parties) for case in item["case"]),
    )


def _convert_sitting(item: Mapping[str, Any]) -> CauseListSitting:
    start = item.get("sittingStart")
    end = item.get("sittingEnd")
    return CauseListSitting(
        sitting_start=parse_iso_datetime(start) if start else None,
        sitting_end=parse_iso_datetime(end) if end else None,
        channels=tuple(item.get("channel") or ()),
        hearings=tuple(_convert_hearing(hearing) for hearing in item["hearing"]),
    )


def _convert_session(item: Mapping[str, Any]) -> CauseListSession:
    return CauseListSession(
        judiciary=_ordered_judiciary(item.get("judiciary") or ()),
        channels=tuple(item.get("sessionChannel") or ()),
        sittings=tuple(_convert_sitting(sitting) for sitting in item["sittings"]),
    )


def convert(raw: Any, descriptor: ListTypeDescriptor) -> CivilAndFamilyCauseList:
    venue = raw["venue"]
    address = venue["venueAddress"]
    contact = venue.get("venueContact") or {}
    court_houses = []
    for court_list in raw["courtLists"]:
        court_house = court_list["courtHouse"]
        court_rooms = tuple(
            CauseListCourtRoom(
                court_room_name=apply_text_default(room.get("courtRoomName"), None),
                sessions=tuple(_convert_session(session) for session in room["session"]),
            )
            for room in court_house["courtRoom"]
        )
        court_houses.append(
            CauseListCourtHouse(
                court_house_name=apply_text_default(court_house.get("courtHouseName"), None),
                court_rooms=court_rooms,
            )
        )

    document = raw["document"]
    return CivilAndFamilyCauseList(
        list_type=descriptor.name,
        publication_date=parse_iso_datetime(document["publicationDate"]),
        document_name=apply_text_default(document.get("documentName"), None),
        version=apply_text_default(document.get("version"), None),
        venue=Venue(
            venue_name=venue["venueName"].strip(),
            address_lines=tuple(line.strip() for line in address["line"] if line.strip()),
            town=apply_text_default(address.get("town"), None),
            postcode=apply_text_default(address.get("postCode"), None),
            email=apply_text_default(contact.get("venueEmail"), None),
            telephone=apply_text_default(contact.get("venueTelephone"), None),
        ),
        court_houses=tuple(court_houses),
    )


def _with_representative(party: str | None, representative: str | None) -> str:
    if party and representative:
        return f"{party} ({representative})"
    return party or representative or ""


def _row(entry: CauseListEntry, locale: str) -> dict[str, str]:
    sitting = entry.sitting
    channels = sitting.channels or entry.session.channels
    start = sitting.sitting_start
    return {
        "time": format_clock_time(to_display_timezone(start)) if start else "",
        "duration": format_duration(start, sitting.sitting_end, locale),
        "judiciary": ", ".join(entry.session.judiciary),
        "hearingChannel": ", ".join(channels),
        "caseReference": display_text(entry.case.case_number),
        "caseName": display_text(entry.case.case_name),
        "caseType": display_text(entry.case.case_type),
        "hearingType": display_text(entry.hearing.hearing_type),
        "applicant": _with_representative(entry.case.applicant, entry.case.applicant_representative),
        "respondent": _with_representative(entry.case.respondent, entry.case.respondent_representative),
        "reportingRestrictions": ", ".join(entry.case.reporting_restrictions),
    }


def render(
    document: CivilAndFamilyCauseList,
    descriptor: ListTypeDescriptor,
    locale: str,
    metadata: PublicationMetadata,
) -> ListView:
    copy = copy_for(locale)
    sections = []
    court_room_index = 0
    for court_house in document.court_houses:
        for court_room in court_house.court_rooms:
            rows = tuple(_row(entry, locale) for entry in court_room.iter_entries())
            sections.append(
                ViewSection(
                    section_id=f"courtRoom{court_room_index}",
                    heading=court_room.court_room_name or court_house.court_house_name or "",
                    columns=build_columns(COLUMNS, copy),
                    rows=rows,
                )
            )
            court_room_index += 1

    header = build_header(
        descriptor,
        locale,
        metadata,
        publication_date=document.publication_date,
        location_name=document.venue.venue_name,
    )
    header["addressLines"] = ", ".join(
        part for part in (*document.venue.address_lines, document.venue.town, document.venue.postcode) if part
    )
    return ListView(
        list_type=document.list_type,
        locale=locale,
        title=descriptor.friendly_name(locale),
        header=header,
        sections=tuple(sections),
        copy=copy,
        open_justice={
            "venueName": document.venue.venue_name,
            "email": document.venue.email or "",
            "telephone": document.venue.telephone or "",
        },
        notices=(copy["importantInformation"][descriptor.name],),
    )


def summary_entries(document: CivilAndFamilyCauseList) -> Iterable[dict[str, object]]:
    return [
        {
            "applicant": entry.case.applicant,
            "caseReference": entry.case.case_number,
            "caseName": entry.case.case_name,
            "caseType": entry.case.case_type,
            "hearingType": entry.hearing.hearing_type,
        }
        for entry in document.iter_entries()
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
