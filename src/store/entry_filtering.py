"""Entry matching helpers.

This module implements the linear scans behind every store lookup.
Entries that lack a field, or carry it with the wrong JSON kind,
simply do not match; no helper raises for malformed entries.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Mapping

from core.constants import (
    ENTRY_ID_FIELD,
    ENTRY_TAGS_FIELD,
    ENTRY_TYPE_FIELD,
    SCHEMA_ID_KEY,
    SCHEMA_TYPE_KEY,
)
from core.types import Entry, Schema, entry_schema

EntryPredicate = Callable[[Any], bool]


def find_first(entries: Iterable[Entry], predicate: EntryPredicate) -> Entry | None:
    """Return the first entry matching a predicate, in insertion order.

    Args:
        entries: Entries to scan.
        predicate: Match test applied to each entry.

    Returns:
        First matching entry or None.
    """
    for entry in entries:
        if predicate(entry):
            return entry
    return None


def has_entry_id(entry_id: str) -> EntryPredicate:
    """Build a predicate for exact top-level ``id`` equality."""
    return lambda entry: _field(entry, ENTRY_ID_FIELD) == entry_id


def has_schema_id(schema_id: str) -> EntryPredicate:
    """Build a predicate for exact nested ``schema['@id']`` equality."""
    return lambda entry: _schema_field(entry, SCHEMA_ID_KEY) == schema_id


def filter_by_schema_type(entries: Iterable[Entry], schema_type: str) -> list[Entry]:
    """Keep entries whose nested ``schema['@type']`` equals the given type.

    Args:
        entries: Entries to filter.
        schema_type: Case-sensitive schema type.

    Returns:
        Matching entries in order.
    """
    return [entry for entry in entries if _schema_field(entry, SCHEMA_TYPE_KEY) == schema_type]


def filter_by_type(entries: Iterable[Entry], entry_type: str) -> list[Entry]:
    """Keep entries whose top-level ``type`` equals the given type."""
    return [entry for entry in entries if _field(entry, ENTRY_TYPE_FIELD) == entry_type]


def filter_by_tag(entries: Iterable[Entry], tag: str) -> list[Entry]:
    """Keep entries tagged with the given tag, ignoring case.

    Args:
        entries: Entries to filter.
        tag: Tag to look for.

    Returns:
        Matching entries in order.
    """
    wanted = tag.lower()
    return [entry for entry in entries if wanted in _lowered_tags(entry)]


def collect_schemas(entries: Iterable[Entry]) -> list[Schema]:
    """Project entries onto their schemas, skipping entries without one."""
    schemas: list[Schema] = []
    for entry in entries:
        schema = entry_schema(entry)
        if schema is not None:
            schemas.append(schema)
    return schemas


def _field(entry: object, name: str) -> Any:
    if not isinstance(entry, Mapping):
        return None
    return entry.get(name)


def _schema_field(entry: object, key: str) -> Any:
    schema = entry_schema(entry)
    if schema is None:
        return None
    return schema.get(key)


def _lowered_tags(entry: object) -> list[str]:
    tags = _field(entry, ENTRY_TAGS_FIELD)
    if not isinstance(tags, list):
        return []
    # non-string tags cannot match a string query
    return [value.lower() for value in tags if isinstance(value, str)]
