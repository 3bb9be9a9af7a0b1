from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping

from hearing_lists.schemas import CaseSummary, SummaryField

SPECIAL_CATEGORY_DATA_WARNING = (
    "This list contains Special Category Data as defined in the Data Protection Act 2018. "
    "Case details are not included in this email. Sign in to view the full list, and note "
    "that reporting restrictions may apply to the cases it contains."
)
SPECIAL_CATEGORY_DATA_LABEL = "Notice"
NO_CASES_MESSAGE = "No cases scheduled."

REDACTED_CASE_SUMMARY = CaseSummary(
    entries=(SummaryField(label=SPECIAL_CATEGORY_DATA_LABEL, value=SPECIAL_CATEGORY_DATA_WARNING),)
)


@dataclass(frozen=True)
class SummaryFieldSpec:
    label: str
    key: str
    omit_when_empty: bool = False


@dataclass(frozen=True)
class SummaryPolicy:
    """Digest fields a list type allows, in display order.

    When ``special_category_data`` is set no field is read at all; every
    case is replaced by the standard warning notice.
    """

    fields: tuple[SummaryFieldSpec, ...]
    special_category_data: bool = False
    empty_value: str = ""

    def __post_init__(self) -> None:
        keys = [spec.key for spec in self.fields]
        if len(set(keys)) != len(keys):
            raise ValueError(f"Summary policy declares a field more than once: {keys}")


def _field_value(entry: Mapping[str, object], spec: SummaryFieldSpec, empty_value: str) -> str | None:
    raw = entry.get(spec.key)
    value = "" if raw is None else str(raw).strip()
    if not value:
        return None if spec.omit_when_empty else empty_value
    return value


def build_case_summaries(
    entries: Iterable[Mapping[str, object]],
    policy: SummaryPolicy,
) -> tuple[CaseSummary, ...]:
    if policy.special_category_data:
        return tuple(REDACTED_CASE_SUMMARY for _entry in entries)

    summaries: list[CaseSummary] = []
    for entry in entries:
        fields: list[SummaryField] = []
        for spec in policy.fields:
            value = _field_value(entry, spec, policy.empty_value)
            if value is not None:
                fields.append(SummaryField(label=spec.label, value=value))
        summaries.append(CaseSummary(entries=tuple(fields)))
    return tuple(summaries)


def format_case_summary_for_email(summaries: Iterable[CaseSummary]) -> str:
    blocks = ["---\n\n" + "\n".join(summary.as_lines()) for summary in summaries]
    if not blocks:
        return NO_CASES_MESSAGE
    return "\n\n".join(blocks)


__all__ = [
    "NO_CASES_MESSAGE",
    "REDACTED_CASE_SUMMARY",
    "SPECIAL_CATEGORY_DATA_WARNING",
    "SummaryFieldSpec",
    "SummaryPolicy",
    "build_case_summaries",
    "format_case_summary_for_email",
]
