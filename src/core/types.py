"""Shared entry models.

Entries are open JSON objects, so they are modelled as plain dictionaries
with typed accessor helpers rather than closed dataclasses. The store never
copies entries; callers receive the same objects that were loaded.
"""

from __future__ import annotations

from typing import Any, Mapping

from core.constants import ENTRY_SCHEMA_FIELD, SCHEMA_ID_KEY, SCHEMA_TYPE_KEY

Entry = dict[str, Any]
Schema = dict[str, Any]
SchemaRef = dict[str, Any]


def entry_schema(entry: object) -> Schema | None:
    """Return the nested schema of an entry.

    Args:
        entry: Loaded array element of any JSON kind.

    Returns:
        The schema mapping, or None when the entry has no object schema.
    """
    if not isinstance(entry, Mapping):
        return None
    schema = entry.get(ENTRY_SCHEMA_FIELD)
    if not isinstance(schema, Mapping):
        return None
    return schema  # type: ignore[return-value]


def schema_ref(schema: Mapping[str, Any]) -> SchemaRef:
    """Project a schema onto its ``@type``/``@id`` reference.

    Args:
        schema: Nested schema mapping.

    Returns:
        Two-key reference; absent schema keys are passed through as None.
    """
    return {
        SCHEMA_TYPE_KEY: schema.get(SCHEMA_TYPE_KEY),
        SCHEMA_ID_KEY: schema.get(SCHEMA_ID_KEY),
    }
