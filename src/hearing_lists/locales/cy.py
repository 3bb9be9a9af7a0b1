from __future__ import annotations

CY = {
    "months": (
        "Ionawr",
        "Chwefror",
        "Mawrth",
        "Ebrill",
        "Mai",
        "Mehefin",
        "Gorffennaf",
        "Awst",
        "Medi",
        "Hydref",
        "Tachwedd",
        "Rhagfyr",
    ),
    "at": "am",
    "durationUnits": {"hour": "awr", "hours": "awr", "minute": "munud", "minutes": "munud"},
    "listFor": "Rhestr ar gyfer",
    "lastUpdated": "Diweddarwyd ddiwethaf",
    "dataSource": "Ffynhonnell data",
    "noCases": "Dim gwrandawiadau wedi'u trefnu.",
    "reportingRestrictionNotice": (
        "Gall cyfyngiadau adrodd fod yn berthnasol i achosion ar y rhestr hon. "
        "Gwiriwch gyda'r llys cyn cyhoeddi unrhyw fanylion."
    ),
    "columns": {
        "venue": "Lleoliad",
        "judge": "Barnwr",
        "time": "Amser",
        "caseNumber": "Rhif yr achos",
        "caseDetails": "Manylion yr achos",
        "hearingType": "Math o wrandawiad",
        "additionalInformation": "Gwybodaeth ychwanegol",
        "date": "Dyddiad",
        "caseName": "Enw'r achos",
        "hearingLength": "Hyd y gwrandawiad",
        "courtRoom": "Ystafell llys",
        "judiciary": "Barnwriaeth",
        "duration": "Hyd",
        "hearingChannel": "Sianel y gwrandawiad",
        "caseReference": "Cyfeirnod yr achos",
        "caseType": "Math o achos",
        "applicant": "Ceisydd/Deisebydd",
        "respondent": "Atebydd",
        "reportingRestrictions": "Cyfyngiadau adrodd",
        "name": "Enw",
        "postcode": "Cod post",
        "offence": "Trosedd",
        "prosecutor": "Erlynydd",
        "dateOfBirth": "Dyddiad geni",
        "age": "Oed",
        "address": "Cyfeiriad",
        "reference": "Cyfeirnod",
        "offences": "Troseddau",
    },
    "sections": {
        "hearings": "Gwrandawiadau",
        "dailyHearings": "Gwrandawiadau dyddiol",
        "futureJudgments": "Dyfarniadau yn y dyfodol",
        "mainHearings": "Prif wrandawiadau",
        "planningCourt": "Llys Cynllunio",
        "cases": "Achosion",
    },
    "openJustice": {
        "heading": "Cyfiawnder agored",
        "email": "E-bost",
        "telephone": "Ffôn",
    },
    "importantInformation": {
        "CIVIL_AND_FAMILY_DAILY_CAUSE_LIST": (
            "Bydd partïon a chynrychiolwyr yn cael gwybod am drefniadau ar gyfer gwrando achosion o bell."
        ),
        "CARE_STANDARDS_TRIBUNAL_WEEKLY_HEARING_LIST": (
            "Dylai aelodau'r cyhoedd sy'n dymuno arsylwi gwrandawiad gysylltu â swyddfa'r tribiwnlys."
        ),
        "SJP_PRESS_LIST": (
            "Mae'r rhestr hon ar gyfer y wasg yn unig. Mae'n cynnwys data personol na ddylid ei rannu."
        ),
        "SJP_PUBLIC_LIST": (
            "Penderfynir ar yr achosion hyn gan ynad unigol ar sail y papurau heb wrandawiad yn y llys."
        ),
    },
}
