"""Ledger key layout and (de)serialization of index and record payloads.

Parse functions return the parsed value or a `ParseError` instance; they never raise.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from pydantic import TypeAdapter, ValidationError

from rwa_options.exceptions import ParseError
from rwa_options.positions.models import Position, PositionRecord, PositionStatus

if TYPE_CHECKING:
    from collections.abc import Sequence

INDEX_KEY = "position_keys"
RECORD_KEY_PREFIX = "position_"

_index_adapter: TypeAdapter[list[str]] = TypeAdapter(list[str])


def record_key(position_id: str) -> str:
    """Ledger key holding the record for `position_id`."""
    return f"{RECORD_KEY_PREFIX}{position_id}"


def _to_json_bytes(payload: object) -> bytes:
    return json.dumps(payload, separators=(",", ":")).encode("utf-8")


def parse_index(raw: bytes) -> list[str] | ParseError:
    """Parse the `position_keys` value. Absent or blank values are an empty index."""
    if not raw:
        return []
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        return ParseError(INDEX_KEY, f"not UTF-8 ({e.reason})")
    if not text.strip():
        return []
    try:
        return _index_adapter.validate_json(text)
    except ValidationError as e:
        return ParseError(INDEX_KEY, f"{e.error_count()} validation error(s)")


def dump_index(position_ids: Sequence[str]) -> bytes:
    """Serialize the index as a UTF-8 JSON array."""
    return _to_json_bytes(list(position_ids))


def parse_record(position_id: str, raw: bytes) -> Position | ParseError:
    """Parse a non-empty `position_<id>` value into a `Position`."""
    key = record_key(position_id)
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        return ParseError(key, f"not UTF-8 ({e.reason})")
    try:
        record = PositionRecord.model_validate_json(text)
    except ValidationError as e:
        return ParseError(key, f"{e.error_count()} validation error(s)")
    return Position(id=position_id, **record.model_dump())


def dump_record(record: PositionRecord) -> bytes:
    """Serialize a record (never its id) with camelCase field names."""
    return _to_json_bytes(
        record.model_dump(mode="json", by_alias=True, exclude={"id"}),
    )


def replace_status(raw: bytes, status: PositionStatus) -> bytes:
    """Rewrite a stored record with only `status` changed.

    Every other key, including unknown ones, keeps its stored value. `raw` must already have
    passed `parse_record`.
    """
    payload = json.loads(raw.decode("utf-8"))
    payload["status"] = status.value
    return _to_json_bytes(payload)
