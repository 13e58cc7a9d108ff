"""
Record ingestion.

Builds tagged ``Record`` objects from in-memory rows or from
``.json`` / ``.csv`` files. CSV columns are read as text so that
values like ``"75%"`` or ``"10/07/2026 3:04 PM"`` reach the
evaluator unchanged.
"""

from __future__ import annotations

import json
import os
from typing import Any, Iterable

import pandas as pd

from riskmark.config import ENVIRONMENT_FIELDS
from riskmark.errors import RecordLoadError
from riskmark.models import Record

_FILE_EXTENSIONS = {".json", ".csv"}


def _environment_of(row: dict[str, Any], default: str | None) -> str:
    for key in ENVIRONMENT_FIELDS:
        value = row.get(key)
        if value not in (None, ""):
            return str(value)
    if default is None:
        raise RecordLoadError(
            f"record has no {' / '.join(ENVIRONMENT_FIELDS)} field and no default environment"
        )
    return default


def build_records(
    rows: Iterable[dict[str, Any]], environment: str | None = None
) -> list[Record]:
    """Tag every row with its environment and resolve its field values."""
    records: list[Record] = []
    for index, row in enumerate(rows):
        if not isinstance(row, dict):
            raise RecordLoadError(f"row {index}: expected an object")
        records.append(Record.from_mapping(_environment_of(row, environment), row))
    return records


def _read_json(path: str) -> list[dict[str, Any]]:
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as exc:
            raise RecordLoadError(f"invalid JSON in {path}: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise RecordLoadError(f"{path} is not UTF-8 text: {exc}") from exc
    if isinstance(data, dict) and "records" in data:
        data = data["records"]
    if not isinstance(data, list):
        raise RecordLoadError(f"{path}: expected a list of records")
    return data


def _read_csv(path: str) -> list[dict[str, Any]]:
    try:
        df = pd.read_csv(path, dtype=str).fillna("")
    except (pd.errors.EmptyDataError, pd.errors.ParserError) as exc:
        raise RecordLoadError(f"cannot parse CSV {path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise RecordLoadError(f"{path} is not UTF-8 text: {exc}") from exc
    return df.to_dict(orient="records")


def load_records(path: str, environment: str | None = None) -> list[Record]:
    """Read records from *path*; *environment* tags rows that lack one."""
    ext = os.path.splitext(path)[1].lower()
    if ext not in _FILE_EXTENSIONS:
        raise RecordLoadError(
            f"Unsupported file type: '{ext}'. Allowed: {', '.join(sorted(_FILE_EXTENSIONS))}"
        )
    if not os.path.isfile(path):
        raise RecordLoadError(f"record file not found: {path}")

    rows = _read_json(path) if ext == ".json" else _read_csv(path)
    return build_records(rows, environment)
