"""Unit tests for entry matching helpers."""

from __future__ import annotations

from store.entry_filtering import (
    collect_schemas,
    filter_by_schema_type,
    filter_by_tag,
    find_first,
    has_entry_id,
    has_schema_id,
)

ENTRIES = [
    "not an object",
    {"id": "a", "schema": "not an object"},
    {"id": "b", "tags": ["Alpha", None], "schema": {"@type": "Thing", "@id": "urn:b"}},
    {"id": "c", "tags": ["ALPHA"], "schema": {"@type": "Thing", "@id": "urn:c"}},
]


def test_find_first_returns_first_match() -> None:
    """First-match scan should respect insertion order."""
    assert find_first(ENTRIES, has_schema_id("urn:c")) is ENTRIES[3]
    assert find_first(ENTRIES, has_entry_id("a")) is ENTRIES[1]
    assert find_first(ENTRIES, has_entry_id("z")) is None


def test_filters_skip_malformed_entries() -> None:
    """Non-object entries and schemas should never match or raise."""
    assert filter_by_schema_type(ENTRIES, "Thing") == ENTRIES[2:]
    assert filter_by_tag(ENTRIES, "alpha") == ENTRIES[2:]


def test_collect_schemas_keeps_object_schemas_only() -> None:
    """Schema projection should drop entries without an object schema."""
    schemas = collect_schemas(ENTRIES)

    assert [schema["@id"] for schema in schemas] == ["urn:b", "urn:c"]
