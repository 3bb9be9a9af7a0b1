#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
from pathlib import Path
import sys

REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = REPO_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from hearing_lists.errors import ListPipelineError, SpreadsheetConversionError  # noqa: E402
from hearing_lists.list_types import build_default_registry  # noqa: E402


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Validate a hearing list JSON file against its list type schema.")
    parser.add_argument("list_type", help="List type id or name, e.g. 8 or CIVIL_AND_FAMILY_DAILY_CAUSE_LIST")
    parser.add_argument("path", type=Path, help="Path to the hearing list JSON file, or an .xlsx upload")
    return parser.parse_args(argv)


def _load_spreadsheet(registration, path: Path):
    if registration.bundle.from_spreadsheet is None:
        raise SpreadsheetConversionError(f"{registration.descriptor.name} does not accept spreadsheet uploads")
    return registration.bundle.from_spreadsheet(path.read_bytes())


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        registration = build_default_registry().require(args.list_type)
        if args.path.suffix.lower() == ".xlsx":
            payload = _load_spreadsheet(registration, args.path)
        else:
            with args.path.open("r", encoding="utf-8") as handle:
                payload = json.load(handle)
    except SpreadsheetConversionError as exc:
        for line in exc.errors:
            print(f"[ERROR] {line}", file=sys.stderr)
        return 1
    except (FileNotFoundError, json.JSONDecodeError, ListPipelineError) as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 1

    result = registration.bundle.validate(payload)
    descriptor = registration.descriptor
    if not result.valid:
        for line in result.describe_errors():
            print(f"[ERROR] {line}", file=sys.stderr)
        return 1

    print(f"[OK] {descriptor.name} document is valid (schema {descriptor.schema_name}@{descriptor.schema_version})")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
