from __future__ import annotations

EN = {
    "months": (
        "January",
        "February",
        "March",
        "April",
        "May",
        "June",
        "July",
        "August",
        "September",
        "October",
        "November",
        "December",
    ),
    "at": "at",
    "durationUnits": {"hour": "hour", "hours": "hours", "minute": "min", "minutes": "mins"},
    "listFor": "List for",
    "lastUpdated": "Last updated",
    "dataSource": "Data source",
    "noCases": "No hearings scheduled.",
    "reportingRestrictionNotice": (
        "Reporting restrictions may apply to cases on this list. "
        "Check with the court before publishing any details."
    ),
    "columns": {
        "venue": "Venue",
        "judge": "Judge",
        "time": "Time",
        "caseNumber": "Case number",
        "caseDetails": "Case details",
        "hearingType": "Hearing type",
        "additionalInformation": "Additional information",
        "date": "Date",
        "caseName": "Case name",
        "hearingLength": "Hearing length",
        "courtRoom": "Court room",
        "judiciary": "Judiciary",
        "duration": "Duration",
        "hearingChannel": "Hearing channel",
        "caseReference": "Case reference",
        "caseType": "Case type",
        "applicant": "Applicant/Petitioner",
        "respondent": "Respondent",
        "reportingRestrictions": "Reporting restrictions",
        "name": "Name",
        "postcode": "Postcode",
        "offence": "Offence",
        "prosecutor": "Prosecutor",
        "dateOfBirth": "Date of birth",
        "age": "Age",
        "address": "Address",
        "reference": "Reference",
        "offences": "Offences",
    },
    "sections": {
        "hearings": "Hearings",
        "dailyHearings": "Daily hearings",
        "futureJudgments": "Future judgments",
        "mainHearings": "Main hearings",
        "planningCourt": "Planning Court",
        "cases": "Cases",
    },
    "openJustice": {
        "heading": "Open justice",
        "email": "Email",
        "telephone": "Telephone",
    },
    "importantInformation": {
        "CIVIL_AND_FAMILY_DAILY_CAUSE_LIST": (
            "Parties and representatives will be informed about arrangements for hearing cases remotely."
        ),
        "CARE_STANDARDS_TRIBUNAL_WEEKLY_HEARING_LIST": (
            "Members of the public wishing to observe a hearing should contact the tribunal office."
        ),
        "SJP_PRESS_LIST": (
            "This list is for the press only. It contains personal data which must not be shared."
        ),
        "SJP_PUBLIC_LIST": (
            "These cases are decided by a single magistrate on the papers without a hearing in court."
        ),
    },
}
