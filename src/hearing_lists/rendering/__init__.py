from hearing_lists.rendering.dates import (
    LONDON_TZ,
    format_clock_time,
    format_display_date,
    format_duration,
    format_last_updated,
)
from hearing_lists.rendering.view import ListView, ViewColumn, ViewSection, build_columns, display_text

__all__ = [
    "LONDON_TZ",
    "ListView",
    "ViewColumn",
    "ViewSection",
    "build_columns",
    "display_text",
    "format_clock_time",
    "format_display_date",
    "format_duration",
    "format_last_updated",
]
