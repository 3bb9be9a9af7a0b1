from __future__ import annotations

from datetime import datetime
from functools import lru_cache
import json
import logging
from pathlib import Path
import re
from typing import Any, Iterable, Mapping

from jsonschema import Draft202012Validator, FormatChecker
from jsonschema.exceptions import SchemaError, ValidationError
from jsonschema.validators import validator_for

from hearing_lists.errors import SchemaDefinitionError
from hearing_lists.schemas import ValidationIssue, ValidationResult

LOGGER = logging.getLogger(__name__)

SCHEMA_ROOT = Path(__file__).resolve().parent / "list_types" / "schemas"
_DD_MM_YYYY_PATTERN = re.compile(r"^\d{2}/\d{2}/\d{4}$")

FORMAT_CHECKER = FormatChecker(formats=())


@FORMAT_CHECKER.checks("date-time", raises=ValueError)
def _is_iso_datetime(instance: object) -> bool:
    if not isinstance(instance, str):
        return True
    datetime.fromisoformat(instance)
    return True


@FORMAT_CHECKER.checks("dd/mm/yyyy", raises=ValueError)
def _is_day_month_year(instance: object) -> bool:
    if not isinstance(instance, str):
        return True
    if not _DD_MM_YYYY_PATTERN.match(instance):
        return False
    datetime.strptime(instance, "%d/%m/%Y")
    return True


def format_error_path(parts: Iterable[object]) -> str:
    rendered = ""
    for part in parts:
        if isinstance(part, int):
            rendered += f"[{part}]"
        elif rendered:
            rendered += f".{part}"
        else:
            rendered = str(part)
    return rendered or "root"


def _describe_type(expected: object) -> str:
    if isinstance(expected, (list, tuple)):
        return " or ".join(str(item) for item in expected)
    return str(expected)


def _issues_from_error(error: ValidationError, seen_required: set[tuple[object, ...]]) -> list[ValidationIssue]:
    path = list(error.absolute_path)

    if error.validator == "required":
        # jsonschema raises once per missing name; each error carries the whole keyword value
        instance = error.instance if isinstance(error.instance, Mapping) else {}
        issues: list[ValidationIssue] = []
        for name in error.validator_value:
            key = (*path, name)
            if name in instance or key in seen_required:
                continue
            seen_required.add(key)
            issues.append(
                ValidationIssue(
                    path=format_error_path([*path, name]),
                    message=f"must have required property '{name}'",
                )
            )
        return issues

    if error.validator == "type":
        message = f"must be {_describe_type(error.validator_value)}"
    elif error.validator == "enum":
        message = "must be one of: " + ", ".join(str(item) for item in error.validator_value)
    elif error.validator == "format":
        message = f'must match format "{error.validator_value}"'
    elif error.validator == "pattern":
        message = f'must match pattern "{error.validator_value}"'
    elif error.validator == "minItems":
        message = f"must not have fewer than {error.validator_value} items"
    elif error.validator == "minLength":
        message = f"must not be shorter than {error.validator_value} characters"
    else:
        message = error.message
    return [ValidationIssue(path=format_error_path(path), message=message)]


class JsonSchemaValidator:
    """Checks raw list JSON against one schema, compiled once per list type."""

    def __init__(self, schema: Mapping[str, Any], *, schema_name: str, schema_version: str) -> None:
        if not isinstance(schema, Mapping):
            raise SchemaDefinitionError(f"Schema {schema_name!r} must be a JSON object")
        validator_cls = validator_for(schema, default=Draft202012Validator)
        try:
            validator_cls.check_schema(schema)
        except SchemaError as exc:
            raise SchemaDefinitionError(
                f"Schema {schema_name!r} (version {schema_version}) is invalid: {exc.message}"
            ) from exc
        self.schema_name = schema_name
        self.schema_version = schema_version
        self._validator = validator_cls(schema, format_checker=FORMAT_CHECKER)

    def validate(self, raw: Any) -> ValidationResult:
        issues: list[ValidationIssue] = []
        seen_required: set[tuple[object, ...]] = set()
        for error in self._validator.iter_errors(raw):
            issues.extend(_issues_from_error(error, seen_required))

        if issues:
            LOGGER.debug(
                "Schema %s (version %s) rejected document with %d error(s)",
                self.schema_name,
                self.schema_version,
                len(issues),
            )
        return ValidationResult(
            valid=not issues,
            errors=tuple(issues),
            schema_name=self.schema_name,
            schema_version=self.schema_version,
        )


def validate_json(raw: Any, schema: Mapping[str, Any], schema_version: str) -> ValidationResult:
    schema_name = "anonymous"
    if isinstance(schema, Mapping):
        schema_name = str(schema.get("title") or schema.get("$id") or schema_name)
    return JsonSchemaValidator(schema, schema_name=schema_name, schema_version=schema_version).validate(raw)


@lru_cache(maxsize=None)
def _read_schema(schema_name: str) -> str:
    path = SCHEMA_ROOT / f"{schema_name}.json"
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise SchemaDefinitionError(f"Schema resource not found: {path.name}") from exc


def load_schema(schema_name: str) -> dict[str, Any]:
    try:
        payload = json.loads(_read_schema(schema_name))
    except json.JSONDecodeError as exc:
        raise SchemaDefinitionError(f"Schema resource {schema_name!r} is not valid JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise SchemaDefinitionError(f"Schema resource {schema_name!r} must contain a JSON object")
    return payload


__all__ = [
    "FORMAT_CHECKER",
    "JsonSchemaValidator",
    "format_error_path",
    "load_schema",
    "validate_json",
]
