from __future__ import annotations

import pytest

from hearing_lists.errors import DuplicateRegistrationError, RegistrySealedError, UnknownListTypeError
from hearing_lists.list_types import LIST_TYPE_MODULES, build_default_registry
from hearing_lists.registry import HandlerBundle, ListTypeDescriptor, ListTypeRegistryBuilder
from hearing_lists.schemas import ValidationResult


def _descriptor(list_type_id: int = 1, name: str = "TEST_LIST") -> ListTypeDescriptor:
    return ListTypeDescriptor(
        list_type_id=list_type_id,
        name=name,
        schema_name="test-list",
        schema_version="1.0",
        english_friendly_name="Test List",
        welsh_friendly_name="Rhestr Prawf",
        url_path="test-list",
    )


def _bundle() -> HandlerBundle:
    return HandlerBundle(
        validate=lambda raw: ValidationResult(valid=True),
        convert=lambda raw: raw,
        render=lambda document, locale=None, metadata=None: document,
        to_pdf=lambda document, **_: b"%PDF-1.7",
        summarize=lambda document: (),
    )


def test_registering_the_same_id_twice_fails() -> None:
    builder = ListTypeRegistryBuilder()
    builder.register(_descriptor(), _bundle())

    with pytest.raises(DuplicateRegistrationError, match="Duplicate list type id 1"):
        builder.register(_descriptor(name="OTHER_LIST"), _bundle())


def test_registering_the_same_name_twice_fails() -> None:
    builder = ListTypeRegistryBuilder()
    builder.register(_descriptor(), _bundle())

    with pytest.raises(DuplicateRegistrationError, match="Duplicate list type name: TEST_LIST"):
        builder.register(_descriptor(list_type_id=2), _bundle())


def test_names_differing_only_by_case_are_duplicates() -> None:
    builder = ListTypeRegistryBuilder()
    builder.register(_descriptor(), _bundle())

    with pytest.raises(DuplicateRegistrationError, match="Duplicate list type name: test_list"):
        builder.register(_descriptor(list_type_id=2, name="test_list"), _bundle())


def test_builder_refuses_registration_after_build() -> None:
    builder = ListTypeRegistryBuilder()
    builder.register(_descriptor(), _bundle())
    builder.build()

    with pytest.raises(RegistrySealedError):
        builder.register(_descriptor(list_type_id=2, name="LATE_LIST"), _bundle())


def test_resolve_returns_registered_bundle_for_id_numeric_string_and_name() -> None:
    bundle = _bundle()
    builder = ListTypeRegistryBuilder()
    builder.register(_descriptor(list_type_id=7), bundle)
    registry = builder.build()

    assert registry.resolve(7) is bundle
    assert registry.resolve("7") is bundle
    assert registry.resolve(" test_list ") is bundle
    assert registry.require("TEST_LIST").descriptor.list_type_id == 7


@pytest.mark.parametrize("identifier", [99, "99", "²", "٧", "UNKNOWN_LIST", "", None, True, 7.0])
def test_resolve_unknown_identifier_is_not_found(identifier: object) -> None:
    builder = ListTypeRegistryBuilder()
    builder.register(_descriptor(list_type_id=7), _bundle())
    registry = builder.build()

    assert registry.resolve(identifier) is None
    assert identifier not in registry
    with pytest.raises(UnknownListTypeError) as exc_info:
        registry.require(identifier)
    assert exc_info.value.code == "UNKNOWN_LIST_TYPE"


def test_built_registry_is_unaffected_by_later_builder_state() -> None:
    builder = ListTypeRegistryBuilder()
    builder.register(_descriptor(), _bundle())
    registry = builder.build()

    assert len(registry) == 1
    assert not hasattr(registry, "register")


def test_default_registry_contains_every_list_type() -> None:
    registry = build_default_registry()

    assert [descriptor.list_type_id for descriptor in registry.descriptors()] == list(range(8, 26))
    assert registry.require("SJP_PRESS_LIST").descriptor.list_type_id == 24
    assert registry.require(19).descriptor.english_friendly_name == "Court of Appeal (Civil Division) Daily Cause List"
    assert registry.require(22).descriptor.welsh_friendly_name == "Rhestr Achosion Dyddiol Llys Gweinyddol Bryste a Chaerdydd"


def test_registration_order_does_not_change_the_registry() -> None:
    forward = ListTypeRegistryBuilder()
    for module in LIST_TYPE_MODULES:
        module.register(forward)
    backward = ListTypeRegistryBuilder()
    for module in reversed(LIST_TYPE_MODULES):
        module.register(backward)

    assert forward.build().descriptors() == backward.build().descriptors()


def test_registering_a_module_twice_fails_at_startup() -> None:
    builder = ListTypeRegistryBuilder()
    LIST_TYPE_MODULES[0].register(builder)

    with pytest.raises(DuplicateRegistrationError):
        LIST_TYPE_MODULES[0].register(builder)
