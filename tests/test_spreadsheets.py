from __future__ import annotations

from datetime import datetime, time
import io

from openpyxl import Workbook
import pytest

from hearing_lists.errors import SpreadsheetConversionError
from hearing_lists.list_types import build_default_registry
from hearing_lists.spreadsheets import (
    SheetLayout,
    SpreadsheetField,
    cell_text,
    convert_sheet_rows,
    no_html_tags,
    validate_day_month_year,
    validate_simple_time,
    validate_twelve_hour_time,
)

CST_HEADERS = ["Date", "Case name", "Hearing length", "Hearing type", "Venue", "Additional information"]
RCJ_HEADERS = ["Venue", "Judge", "Time", "Case Number", "Case Details", "Hearing Type", "Additional Information"]
RCJ_ROW = ["Court 1", "Mr Justice Smith", "10:30am", "KB-2026-000123", "A v B", "Trial", ""]


def _workbook_bytes(*sheets: tuple[str, list[list[object]]]) -> bytes:
    workbook = Workbook()
    workbook.remove(workbook.active)
    for title, rows in sheets:
        worksheet = workbook.create_sheet(title)
        for row in rows:
            worksheet.append(row)
    buffer = io.BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()


def _from_spreadsheet(list_type: object):
    bundle = build_default_registry().resolve(list_type)
    assert bundle.from_spreadsheet is not None
    return bundle, bundle.from_spreadsheet


def test_care_standards_upload_becomes_valid_list_json() -> None:
    bundle, from_spreadsheet = _from_spreadsheet(9)
    content = _workbook_bytes(
        (
            "Sheet1",
            [
                [header.upper() for header in CST_HEADERS],
                ["02/01/2025", "  A Vs B  ", "1 hour", "Substantive hearing", "Care Standards Tribunal", "Remote"],
                [datetime(2025, 1, 3), "C Vs D", "Half day", "Preliminary hearing", "Care Standards Office", "In person"],
            ],
        )
    )

    raw = from_spreadsheet(content)

    assert raw == [
        {
            "date": "02/01/2025",
            "caseName": "A Vs B",
            "hearingLength": "1 hour",
            "hearingType": "Substantive hearing",
            "venue": "Care Standards Tribunal",
            "additionalInformation": "Remote",
        },
        {
            "date": "03/01/2025",
            "caseName": "C Vs D",
            "hearingLength": "Half day",
            "hearingType": "Preliminary hearing",
            "venue": "Care Standards Office",
            "additionalInformation": "In person",
        },
    ]
    assert bundle.validate(raw).valid is True
    assert len(bundle.convert(raw).hearings) == 2


def test_missing_columns_are_named() -> None:
    _, from_spreadsheet = _from_spreadsheet(9)
    content = _workbook_bytes(("Sheet1", [CST_HEADERS[:4], ["02/01/2025", "A Vs B", "1 hour", "Trial"]]))

    with pytest.raises(SpreadsheetConversionError, match="Missing: Venue, Additional information") as exc_info:
        from_spreadsheet(content)
    assert exc_info.value.code == "SPREADSHEET_CONVERSION_FAILED"


def test_upload_without_data_rows_is_rejected() -> None:
    _, from_spreadsheet = _from_spreadsheet(9)

    with pytest.raises(SpreadsheetConversionError, match="at least 1 data row"):
        from_spreadsheet(_workbook_bytes(("Sheet1", [CST_HEADERS])))


def test_every_invalid_cell_is_reported_with_its_row_number() -> None:
    _, from_spreadsheet = _from_spreadsheet(9)
    content = _workbook_bytes(
        (
            "Sheet1",
            [
                CST_HEADERS,
                ["02/01/2025", "A Vs B", "1 hour", "Trial", "Court 1", "None"],
                ["32/01/2025", "<b>C</b> Vs D", "1 hour", "Trial", "Court 1", "None"],
                ["2025-01-04", "E Vs F", "1 hour", "", "Court 1", "None"],
            ],
        )
    )

    with pytest.raises(SpreadsheetConversionError) as exc_info:
        from_spreadsheet(content)

    assert exc_info.value.errors == (
        "Error in row 3: Invalid date '32/01/2025' in row 3. Date does not exist in calendar",
        "Error in row 3: Invalid content in 'Case name' in row 3: HTML tags are not allowed",
        "Error in row 4: Invalid date format '2025-01-04' in row 4. Expected format: dd/MM/yyyy (e.g., 15/01/2025)",
        "Error in row 4: Missing required field 'Hearing type' in row 4",
    )


def test_rcj_upload_checks_twelve_hour_times() -> None:
    bundle, from_spreadsheet = _from_spreadsheet("KINGS_BENCH_DIVISION_DAILY_CAUSE_LIST")
    content = _workbook_bytes(
        (
            "Sheet1",
            [
                RCJ_HEADERS,
                RCJ_ROW,
                ["Court 2", "Mrs Justice Jones", time(14, 30), "KB-2026-000124", "C v D", "Application", "Remote"],
            ],
        )
    )

    raw = from_spreadsheet(content)

    assert [row["time"] for row in raw] == ["10:30am", "2:30pm"]
    assert raw[0]["additionalInformation"] == ""
    assert bundle.validate(raw).valid is True

    bad = _workbook_bytes(("Sheet1", [RCJ_HEADERS, ["Court 1", "Judge", "9:30", "KB-1", "A v B", "Trial", ""]]))
    with pytest.raises(SpreadsheetConversionError, match="Invalid time format '9:30' in row 2"):
        from_spreadsheet(bad)


@pytest.mark.parametrize("value", ["9:30am", "10.15pm", "12:00am", "9am", "12pm", "10:15 pm"])
def test_twelve_hour_time_accepts(value: str) -> None:
    validate_twelve_hour_time(value, 1)


@pytest.mark.parametrize("value", ["9", "25:00am", "13pm", "9:30", "9:75am", "invalid"])
def test_twelve_hour_time_rejects(value: str) -> None:
    with pytest.raises(ValueError, match="Invalid time format"):
        validate_twelve_hour_time(value, 5)


def test_simple_time_has_no_hour_range() -> None:
    validate_simple_time("13:30pm", 1)
    with pytest.raises(ValueError, match="row 10"):
        validate_simple_time("13:30", 10)


def test_date_validator_checks_the_calendar() -> None:
    validate_day_month_year("29/02/2024", 1)
    with pytest.raises(ValueError, match="Date does not exist in calendar"):
        validate_day_month_year("29/02/2025", 3)
    with pytest.raises(ValueError, match="Expected format: dd/MM/yyyy"):
        validate_day_month_year("1/1/2025", 2)


def test_html_validator_names_field_and_row() -> None:
    no_html_tags("Venue")("Royal Courts of Justice & Rolls Building", 1)
    with pytest.raises(ValueError, match="Invalid content in 'Venue' in row 5: HTML tags are not allowed"):
        no_html_tags("Venue")("<script>alert('x')</script>", 5)


def test_london_administrative_court_tabs_are_found_by_name() -> None:
    bundle, from_spreadsheet = _from_spreadsheet(18)
    content = _workbook_bytes(
        ("Planning Court", [RCJ_HEADERS, ["Court 5", "Judge P", "2pm", "AC-2", "Planning", "Hearing", ""]]),
        ("Main hearings", [RCJ_HEADERS, RCJ_ROW]),
    )

    raw = from_spreadsheet(content)

    assert [row["caseNumber"] for row in raw["mainHearings"]] == ["KB-2026-000123"]
    assert [row["caseNumber"] for row in raw["planningCourt"]] == ["AC-2"]
    assert bundle.validate(raw).valid is True


def test_missing_optional_tab_becomes_an_empty_section() -> None:
    bundle, from_spreadsheet = _from_spreadsheet(19)

    raw = from_spreadsheet(_workbook_bytes(("Daily hearings", [RCJ_HEADERS, RCJ_ROW])))

    assert raw["futureJudgments"] == []
    assert len(raw["dailyHearings"]) == 1
    assert bundle.validate(raw).valid is True


def test_tab_errors_name_the_worksheet() -> None:
    _, from_spreadsheet = _from_spreadsheet(19)
    content = _workbook_bytes(
        ("Daily hearings", [RCJ_HEADERS]),
        ("Notice for future judgments", [["Date", *RCJ_HEADERS], ["31/02/2026", *RCJ_ROW]]),
    )

    with pytest.raises(SpreadsheetConversionError) as exc_info:
        from_spreadsheet(content)

    assert exc_info.value.errors == (
        "Sheet 'Notice for future judgments': Error in row 2: "
        "Invalid date '31/02/2026' in row 2. Date does not exist in calendar",
    )


def test_unreadable_upload_is_a_conversion_error() -> None:
    _, from_spreadsheet = _from_spreadsheet(9)

    with pytest.raises(SpreadsheetConversionError, match="Spreadsheet could not be read"):
        from_spreadsheet(b"Date,Case name\n02/01/2025,A Vs B\n")


def test_list_types_without_a_spreadsheet_layout_do_not_accept_uploads() -> None:
    registry = build_default_registry()

    accepting = [entry.descriptor.list_type_id for entry in registry if entry.bundle.from_spreadsheet is not None]

    assert accepting == [9, *range(10, 24)]


def test_convert_sheet_rows_skips_blank_rows_and_keeps_sheet_row_numbers() -> None:
    layout = SheetLayout(fields=(SpreadsheetField("Name", "name"),))
    rows = [("Name",), ("Ann",), (None,), ("",)]

    assert convert_sheet_rows(rows, layout) == [{"name": "Ann"}]
    with pytest.raises(SpreadsheetConversionError, match="Error in row 3: Missing required field 'Name'"):
        convert_sheet_rows([("Name", "Age"), ("Ann", 1), (None, 2)], layout)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, ""),
        ("  text ", "text"),
        (12.0, "12"),
        (12.5, "12.5"),
        (datetime(2025, 1, 2), "02/01/2025"),
        (time(9, 0), "9am"),
    ],
)
def test_cell_text(value: object, expected: str) -> None:
    assert cell_text(value) == expected
