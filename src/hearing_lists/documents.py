"""Canonical, locale-neutral list documents produced by the converters.

Each list type family owns one tagged model; optional values are always
present on the model, either as ``None`` or as the list type's declared
placeholder text.
"""

from __future__ import annotations

from datetime import date, datetime, time
from typing import Iterator, Literal, Union

from pydantic import BaseModel, ConfigDict


class CanonicalModel(BaseModel):
    model_config = ConfigDict(frozen=True)


# Flat RCJ-style hearing rows


class StandardHearing(CanonicalModel):
    venue: str
    judge: str
    start_time: time | None
    time_text: str
    case_number: str | None
    case_details: str | None
    hearing_type: str | None
    additional_information: str | None


class FutureJudgment(StandardHearing):
    judgment_date: date


class StandardDailyCauseList(CanonicalModel):
    kind: Literal["standard_daily_cause_list"] = "standard_daily_cause_list"
    list_type: str
    hearings: tuple[StandardHearing, ...]


class LondonAdministrativeCourtDailyCauseList(CanonicalModel):
    kind: Literal["london_administrative_court_daily_cause_list"] = (
        "london_administrative_court_daily_cause_list"
    )
    list_type: str
    main_hearings: tuple[StandardHearing, ...]
    planning_court: tuple[StandardHearing, ...]


class CourtOfAppealCivilDailyCauseList(CanonicalModel):
    kind: Literal["court_of_appeal_civil_daily_cause_list"] = "court_of_appeal_civil_daily_cause_list"
    list_type: str
    daily_hearings: tuple[StandardHearing, ...]
    future_judgments: tuple[FutureJudgment, ...]


# Tribunal weekly list


class WeeklyHearing(CanonicalModel):
    hearing_date: date
    case_name: str | None
    hearing_length: str | None
    hearing_type: str | None
    venue: str | None
    additional_information: str | None


class WeeklyHearingList(CanonicalModel):
    kind: Literal["weekly_hearing_list"] = "weekly_hearing_list"
    list_type: str
    hearings: tuple[WeeklyHearing, ...]


# Civil and family cause list


class CauseListCase(CanonicalModel):
    case_number: str | None
    case_name: str | None
    case_type: str | None
    applicant: str | None
    applicant_representative: str | None
    respondent: str | None
    respondent_representative: str | None
    reporting_restrictions: tuple[str, ...]


class CauseListHearing(CanonicalModel):
    hearing_type: str | None
    cases: tuple[CauseListCase, ...]


class CauseListSitting(CanonicalModel):
    sitting_start: datetime | None
    sitting_end: datetime | None
    channels: tuple[str, ...]
    hearings: tuple[CauseListHearing, ...]


class CauseListSession(CanonicalModel):
    judiciary: tuple[str, ...]
    channels: tuple[str, ...]
    sittings: tuple[CauseListSitting, ...]


class CauseListCourtRoom(CanonicalModel):
    court_room_name: str | None
    sessions: tuple[CauseListSession, ...]

    def iter_entries(self) -> Iterator[CauseListEntry]:
        for session in self.sessions:
            for sitting in session.sittings:
                for hearing in sitting.hearings:
                    for case in hearing.cases:
                        yield CauseListEntry(
                            court_room=self,
                            session=session,
                            sitting=sitting,
                            hearing=hearing,
                            case=case,
                        )


class CauseListCourtHouse(CanonicalModel):
    court_house_name: str | None
    court_rooms: tuple[CauseListCourtRoom, ...]


class Venue(CanonicalModel):
    venue_name: str
    address_lines: tuple[str, ...]
    town: str | None
    postcode: str | None
    email: str | None
    telephone: str | None


class CauseListEntry(CanonicalModel):
    court_room: CauseListCourtRoom
    session: CauseListSession
    sitting: CauseListSitting
    hearing: CauseListHearing
    case: CauseListCase


class CivilAndFamilyCauseList(CanonicalModel):
    kind: Literal["civil_and_family_cause_list"] = "civil_and_family_cause_list"
    list_type: str
    publication_date: datetime
    document_name: str | None
    version: str | None
    venue: Venue
    court_houses: tuple[CauseListCourtHouse, ...]

    def iter_entries(self) -> Iterator[CauseListEntry]:
        for court_house in self.court_houses:
            for court_room in court_house.court_rooms:
                yield from court_room.iter_entries()


# Single justice procedure


class SjpOffence(CanonicalModel):
    title: str
    wording: str | None
    reporting_restriction: bool


class SjpPublicCase(CanonicalModel):
    reference: str
    name: str
    postcode: str | None
    offence: str | None
    prosecutor: str | None


class SjpPressCase(CanonicalModel):
    reference: str
    name: str
    date_of_birth: date | None
    age: int | None
    address: str | None
    postcode: str | None
    prosecutor: str | None
    offences: tuple[SjpOffence, ...]


class SjpPublicList(CanonicalModel):
    kind: Literal["sjp_public_list"] = "sjp_public_list"
    list_type: str
    publication_date: datetime
    cases: tuple[SjpPublicCase, ...]


class SjpPressList(CanonicalModel):
    kind: Literal["sjp_press_list"] = "sjp_press_list"
    list_type: str
    publication_date: datetime
    cases: tuple[SjpPressCase, ...]


CanonicalDocument = Union[
    StandardDailyCauseList,
    LondonAdministrativeCourtDailyCauseList,
    CourtOfAppealCivilDailyCauseList,
    WeeklyHearingList,
    CivilAndFamilyCauseList,
    SjpPublicList,
    SjpPressList,
]


__all__ = [
    "CanonicalDocument",
    "CauseListCase",
    "CauseListCourtHouse",
    "CauseListCourtRoom",
    "CauseListEntry",
    "CauseListHearing",
    "CauseListSession",
    "CauseListSitting",
    "CivilAndFamilyCauseList",
    "CourtOfAppealCivilDailyCauseList",
    "FutureJudgment",
    "LondonAdministrativeCourtDailyCauseList",
    "SjpOffence",
    "SjpPressCase",
    "SjpPressList",
    "SjpPublicCase",
    "SjpPublicList",
    "StandardDailyCauseList",
    "StandardHearing",
    "Venue",
    "WeeklyHearing",
    "WeeklyHearingList",
]
