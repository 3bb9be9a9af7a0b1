from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping


@dataclass(frozen=True)
class ViewColumn:
    key: str
    label: str


@dataclass(frozen=True)
class ViewSection:
    section_id: str
    heading: str
    columns: tuple[ViewColumn, ...]
    rows: tuple[Mapping[str, str], ...]


@dataclass(frozen=True)
class ListView:
    """Locale-formatted list data handed to templates and the PDF generator.

    Column keys, section ids and row counts depend only on the document;
    labels, dates and copy depend on the locale.
    """

    list_type: str
    locale: str
    title: str
    header: Mapping[str, str]
    sections: tuple[ViewSection, ...]
    copy: Mapping[str, Any]
    open_justice: Mapping[str, str] | None = None
    notices: tuple[str, ...] = field(default=())

    @property
    def entry_count(self) -> int:
        return sum(len(section.rows) for section in self.sections)


def build_columns(keys: Iterable[str], copy: Mapping[str, Any]) -> tuple[ViewColumn, ...]:
    labels = copy["columns"]
    return tuple(ViewColumn(key=key, label=labels[key]) for key in keys)


def display_text(value: object) -> str:
    if value is None:
        return ""
    return str(value)


__all__ = ["ListView", "ViewColumn", "ViewSection", "build_columns", "display_text"]
