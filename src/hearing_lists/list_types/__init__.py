from __future__ import annotations

from functools import lru_cache

from hearing_lists.list_types import (
    administrative_court_daily_cause_list,
    care_standards_tribunal_weekly_hearing_list,
    civil_and_family_daily_cause_list,
    court_of_appeal_civil_daily_cause_list,
    london_administrative_court_daily_cause_list,
    rcj_standard_daily_cause_list,
    sjp_press_list,
    sjp_public_list,
)
from hearing_lists.registry import ListTypeRegistry, ListTypeRegistryBuilder

LIST_TYPE_MODULES = (
    civil_and_family_daily_cause_list,
    care_standards_tribunal_weekly_hearing_list,
    rcj_standard_daily_cause_list,
    london_administrative_court_daily_cause_list,
    court_of_appeal_civil_daily_cause_list,
    administrative_court_daily_cause_list,
    sjp_press_list,
    sjp_public_list,
)


def register_all(builder: ListTypeRegistryBuilder) -> None:
    for module in LIST_TYPE_MODULES:
        module.register(builder)


@lru_cache(maxsize=1)
def build_default_registry() -> ListTypeRegistry:
    builder = ListTypeRegistryBuilder()
    register_all(builder)
    return builder.build()


__all__ = ["LIST_TYPE_MODULES", "build_default_registry", "register_all"]
