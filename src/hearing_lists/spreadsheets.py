"""Spreadsheet (.xlsx) uploads turned into the raw JSON a list type validates.

Each list type declares its columns once: the header text expected in row 1,
the JSON field it feeds, whether a value is required, and the cell checks to
run. Row numbers in errors are worksheet row numbers, so they match what the
uploader sees.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
import io
import logging
import re
from typing import Any, Callable, Iterable, Sequence
import zipfile

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from hearing_lists.errors import SpreadsheetConversionError
from hearing_lists.rendering.dates import format_clock_time

LOGGER = logging.getLogger(__name__)

CellValidator = Callable[[str, int], None]

HTML_TAG_PATTERN = re.compile(r"<[^>]+>")
DD_MM_YYYY_PATTERN = re.compile(r"^\d{2}/\d{2}/\d{4}$")
# h:mma, h.mma or ha with the hour limited to 1-12
TWELVE_HOUR_TIME_PATTERN = re.compile(r"^(?:1[0-2]|0?[1-9])(?:[:.][0-5]\d)?\s*[ap]m$", re.IGNORECASE)
SIMPLE_TIME_PATTERN = re.compile(r"^\d{1,2}(?:[:.]\d{2})?\s*[ap]m$", re.IGNORECASE)


def no_html_tags(label: str) -> CellValidator:
    def _validate(value: str, row_number: int) -> None:
        if HTML_TAG_PATTERN.search(value):
            raise ValueError(f"Invalid content in '{label}' in row {row_number}: HTML tags are not allowed")

    return _validate


def validate_day_month_year(value: str, row_number: int) -> None:
    if not DD_MM_YYYY_PATTERN.match(value):
        raise ValueError(
            f"Invalid date format '{value}' in row {row_number}. Expected format: dd/MM/yyyy (e.g., 15/01/2025)"
        )
    try:
        datetime.strptime(value, "%d/%m/%Y")
    except ValueError as exc:
        raise ValueError(f"Invalid date '{value}' in row {row_number}. Date does not exist in calendar") from exc


def _time_validator(pattern: re.Pattern[str]) -> CellValidator:
    def _validate(value: str, row_number: int) -> None:
        if not pattern.match(value):
            raise ValueError(
                f"Invalid time format '{value}' in row {row_number}. "
                "Expected format: h:mma (e.g., 9:30am) or ha (e.g., 2pm)"
            )

    return _validate


validate_twelve_hour_time = _time_validator(TWELVE_HOUR_TIME_PATTERN)
validate_simple_time = _time_validator(SIMPLE_TIME_PATTERN)


@dataclass(frozen=True)
class SpreadsheetField:
    header: str
    field_name: str
    required: bool = True
    validators: tuple[CellValidator, ...] = ()


@dataclass(frozen=True)
class SheetLayout:
    fields: tuple[SpreadsheetField, ...]
    min_rows: int = 1


@dataclass(frozen=True)
class WorkbookSheet:
    """One worksheet feeding one JSON key; a `None` key means the sheet is the whole document."""

    key: str | None
    layout: SheetLayout
    sheet_name: str | None = None


@dataclass(frozen=True)
class WorkbookLayout:
    sheets: tuple[WorkbookSheet, ...]

    @classmethod
    def single(cls, layout: SheetLayout) -> WorkbookLayout:
        return cls(sheets=(WorkbookSheet(key=None, layout=layout),))

    @property
    def is_single_sheet(self) -> bool:
        return len(self.sheets) == 1 and self.sheets[0].key is None


def cell_text(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, datetime):
        if value.time() == time(0):
            return value.strftime("%d/%m/%Y")
        return f"{value.strftime('%d/%m/%Y')} {format_clock_time(value)}"
    if isinstance(value, date):
        return value.strftime("%d/%m/%Y")
    if isinstance(value, time):
        return format_clock_time(value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def _plural_rows(count: int) -> str:
    return f"{count} data row" if count == 1 else f"{count} data rows"


def convert_sheet_rows(
    rows: Iterable[Sequence[object]],
    layout: SheetLayout,
    *,
    sheet_label: str | None = None,
) -> list[dict[str, str]]:
    """Maps worksheet rows (header first) to JSON objects keyed by field name."""
    prefix = f"Sheet '{sheet_label}': " if sheet_label else ""
    iterator = iter(rows)
    header_row = next(iterator, None)
    headers = [cell_text(value).lower() for value in header_row or ()]
    data_rows = [
        (row_number, row)
        for row_number, row in enumerate(iterator, start=2)
        if any(cell_text(value) for value in row)
    ]

    if len(data_rows) < layout.min_rows:
        raise SpreadsheetConversionError(
            f"{prefix}Spreadsheet must contain at least {_plural_rows(layout.min_rows)}"
        )
    if not data_rows and not any(headers):
        return []

    missing = [field.header for field in layout.fields if field.header.lower() not in headers]
    if missing:
        expected = ", ".join(field.header for field in layout.fields)
        raise SpreadsheetConversionError(
            f"{prefix}Spreadsheet must contain columns: {expected}. Missing: {', '.join(missing)}"
        )
    positions = {field.field_name: headers.index(field.header.lower()) for field in layout.fields}

    converted: list[dict[str, str]] = []
    errors: list[str] = []
    for row_number, row in data_rows:
        item: dict[str, str] = {}
        for field in layout.fields:
            position = positions[field.field_name]
            value = cell_text(row[position]) if position < len(row) else ""
            try:
                if not value:
                    if field.required:
                        raise ValueError(f"Missing required field '{field.header}' in row {row_number}")
                else:
                    for validator in field.validators:
                        validator(value, row_number)
            except ValueError as exc:
                errors.append(f"{prefix}Error in row {row_number}: {exc}")
            item[field.field_name] = value
        converted.append(item)

    if errors:
        raise SpreadsheetConversionError("; ".join(errors), errors=tuple(errors))
    return converted


def _find_worksheet(workbook: Any, sheet: WorkbookSheet, index: int) -> Any | None:
    if sheet.sheet_name and sheet.sheet_name in workbook.sheetnames:
        return workbook[sheet.sheet_name]
    if index < len(workbook.worksheets):
        return workbook.worksheets[index]
    return None


def convert_workbook(content: bytes, layout: WorkbookLayout) -> list[dict[str, str]] | dict[str, list[dict[str, str]]]:
    try:
        workbook = load_workbook(io.BytesIO(content), read_only=True, data_only=True)
    except (InvalidFileException, zipfile.BadZipFile, KeyError, OSError, ValueError) as exc:
        raise SpreadsheetConversionError(f"Spreadsheet could not be read: {exc}") from exc

    try:
        if not workbook.worksheets:
            raise SpreadsheetConversionError("Spreadsheet must contain at least one worksheet")

        converted: dict[str, list[dict[str, str]]] = {}
        errors: list[str] = []
        for index, sheet in enumerate(layout.sheets):
            worksheet = _find_worksheet(workbook, sheet, index)
            key = sheet.key or ""
            if worksheet is None:
                converted[key] = []
                continue
            label = None if layout.is_single_sheet else worksheet.title
            try:
                converted[key] = convert_sheet_rows(
                    worksheet.iter_rows(values_only=True),
                    sheet.layout,
                    sheet_label=label,
                )
            except SpreadsheetConversionError as exc:
                errors.extend(exc.errors)
    finally:
        workbook.close()

    if errors:
        raise SpreadsheetConversionError("; ".join(errors), errors=tuple(errors))
    LOGGER.debug("Converted spreadsheet with %d row(s)", sum(len(rows) for rows in converted.values()))
    if layout.is_single_sheet:
        return converted[""]
    return converted


__all__ = [
    "SheetLayout",
    "SpreadsheetField",
    "WorkbookLayout",
    "WorkbookSheet",
    "cell_text",
    "convert_sheet_rows",
    "convert_workbook",
    "no_html_tags",
    "validate_day_month_year",
    "validate_simple_time",
    "validate_twelve_hour_time",
]
