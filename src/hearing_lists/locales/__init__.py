from __future__ import annotations

from typing import Any, Mapping

from hearing_lists.locales.cy import CY
from hearing_lists.locales.en import EN

COPY_TABLES: dict[str, Mapping[str, Any]] = {"en": EN, "cy": CY}


def normalize_locale(locale: str | None) -> str:
    """Map any caller locale onto en/cy; anything that is not Welsh renders as English."""
    if not locale:
        return "en"
    primary = str(locale).strip().lower().replace("_", "-").split("-", 1)[0]
    return "cy" if primary == "cy" else "en"


def copy_for(locale: str | None) -> Mapping[str, Any]:
    return COPY_TABLES[normalize_locale(locale)]


__all__ = ["COPY_TABLES", "copy_for", "normalize_locale"]
