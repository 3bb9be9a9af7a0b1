from __future__ import annotations

from dataclasses import dataclass
import logging
from types import MappingProxyType
from typing import Any, Callable, Iterator

from hearing_lists.errors import (
    DuplicateRegistrationError,
    RegistrySealedError,
    UnknownListTypeError,
)
from hearing_lists.schemas import CaseSummary, ValidationResult

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class ListTypeDescriptor:
    list_type_id: int
    name: str
    schema_name: str
    schema_version: str
    english_friendly_name: str
    welsh_friendly_name: str
    url_path: str

    def friendly_name(self, locale: str) -> str:
        return self.welsh_friendly_name if locale == "cy" else self.english_friendly_name


@dataclass(frozen=True)
class HandlerBundle:
    validate: Callable[[Any], ValidationResult]
    convert: Callable[[Any], Any]
    render: Callable[..., Any]
    to_pdf: Callable[..., bytes]
    summarize: Callable[[Any], tuple[CaseSummary, ...]]
    from_spreadsheet: Callable[[bytes], Any] | None = None


@dataclass(frozen=True)
class RegisteredListType:
    descriptor: ListTypeDescriptor
    bundle: HandlerBundle


class ListTypeRegistry:
    """Read-only list type lookup, produced by ListTypeRegistryBuilder.build()."""

    def __init__(self, entries: dict[int, RegisteredListType]) -> None:
        self._by_id = MappingProxyType(dict(sorted(entries.items())))
        self._by_name = MappingProxyType(
            {entry.descriptor.name.upper(): entry for entry in self._by_id.values()}
        )

    def __len__(self) -> int:
        return len(self._by_id)

    def __iter__(self) -> Iterator[RegisteredListType]:
        return iter(self._by_id.values())

    def __contains__(self, identifier: object) -> bool:
        return self.lookup(identifier) is not None

    def descriptors(self) -> tuple[ListTypeDescriptor, ...]:
        return tuple(entry.descriptor for entry in self._by_id.values())

    def lookup(self, identifier: object) -> RegisteredListType | None:
        if isinstance(identifier, bool):
            return None
        if isinstance(identifier, int):
            return self._by_id.get(identifier)
        if not isinstance(identifier, str):
            return None
        normalized = identifier.strip()
        if normalized.isascii() and normalized.isdigit():
            return self._by_id.get(int(normalized))
        return self._by_name.get(normalized.upper())

    def resolve(self, identifier: object) -> HandlerBundle | None:
        entry = self.lookup(identifier)
        return entry.bundle if entry is not None else None

    def require(self, identifier: object) -> RegisteredListType:
        entry = self.lookup(identifier)
        if entry is None:
            raise UnknownListTypeError(identifier)
        return entry


class ListTypeRegistryBuilder:
    def __init__(self) -> None:
        self._entries: dict[int, RegisteredListType] = {}
        self._names: set[str] = set()
        self._sealed = False

    def register(self, descriptor: ListTypeDescriptor, bundle: HandlerBundle) -> None:
        if self._sealed:
            raise RegistrySealedError(
                f"Cannot register list type {descriptor.name} after the registry was built"
            )
        if descriptor.list_type_id in self._entries:
            existing = self._entries[descriptor.list_type_id].descriptor
            raise DuplicateRegistrationError(
                f"Duplicate list type id {descriptor.list_type_id}: {existing.name} and {descriptor.name}"
            )
        if descriptor.name.upper() in self._names:
            raise DuplicateRegistrationError(f"Duplicate list type name: {descriptor.name}")
        self._entries[descriptor.list_type_id] = RegisteredListType(descriptor=descriptor, bundle=bundle)
        self._names.add(descriptor.name.upper())
        LOGGER.debug(
            "Registered list type %s (id=%d, schema=%s@%s)",
            descriptor.name,
            descriptor.list_type_id,
            descriptor.schema_name,
            descriptor.schema_version,
        )

    def build(self) -> ListTypeRegistry:
        self._sealed = True
        registry = ListTypeRegistry(self._entries)
        LOGGER.info("List type registry built with %d list types", len(registry))
        return registry


__all__ = [
    "HandlerBundle",
    "ListTypeDescriptor",
    "ListTypeRegistry",
    "ListTypeRegistryBuilder",
    "RegisteredListType",
]
