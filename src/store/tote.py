"""In-memory schema entry store.

This module owns the ordered entry list and every read accessor over it.
Lookups are linear scans so duplicate ids resolve to the first entry loaded.
"""

from __future__ import annotations

from functools import partial
import json
import os
from typing import Any, Callable

from core.config import ToteConfig
from core.errors import ToteShapeError
from core.logging_config import get_logger
from core.types import Entry, Schema, SchemaRef, entry_schema, schema_ref
from ingest.document_reader import read_document_text
from store.entry_filtering import (
    collect_schemas,
    filter_by_schema_type,
    filter_by_tag,
    filter_by_type,
    find_first,
    has_entry_id,
    has_schema_id,
)

DocumentReader = Callable[[str], str]

_LOGGER = get_logger(__name__)


class SchemaTote:
    """Ordered collection of schema entries loaded from JSON arrays."""

    def __init__(
        self,
        config: ToteConfig | None = None,
        reader: DocumentReader | None = None,
    ) -> None:
        """Create an empty store.

        Args:
            config: Optional runtime configuration.
            reader: Optional text reader used instead of the default
                local/S3 document reader.
        """
        self._config = config or ToteConfig.from_env()
        self._reader = reader or partial(read_document_text, config=self._config)
        self._entries: list[Entry] = []

    @property
    def data(self) -> list[Entry]:
        """Live list of loaded entries."""
        return self._entries

    def load(self, source: str | os.PathLike[str]) -> list[Entry]:
        """Append every entry of a JSON array document.

        Args:
            source: Local path or ``s3://bucket/key`` URI.

        Returns:
            The full, updated entry list.

        Raises:
            OSError: If the document cannot be read.
            json.JSONDecodeError: If the document is not valid JSON.
            ToteShapeError: If the top-level value is not an array. The
                entry list is left unchanged.
        """
        source_text = os.fspath(source)
        payload = json.loads(self._reader(source_text))
        if not isinstance(payload, list):
            kind = _json_kind(payload)
            _LOGGER.warning("tote_shape_rejected", source=source_text, found=kind)
            raise ToteShapeError(
                f"Expected array in {source_text}: found JSON {kind} at top level. "
                "Wrap the entries in a JSON array."
            )
        self._entries.extend(payload)
        _LOGGER.info(
            "tote_loaded",
            source=source_text,
            loaded_count=len(payload),
            entry_count=len(self._entries),
        )
        return self._entries

    def reload(self, source: str | os.PathLike[str]) -> list[Entry]:
        """Replace all entries with the contents of one document.

        The store is cleared before loading, so a failed reload leaves it empty.

        Args:
            source: Local path or ``s3://bucket/key`` URI.

        Returns:
            The new entry list.
        """
        _LOGGER.debug("tote_cleared", dropped_count=len(self._entries))
        self._entries = []
        return self.load(source)

    def get_all(self) -> list[Entry]:
        """Return every entry in insertion order."""
        return self._entries

    def get_by_id(self, entry_id: str) -> Entry | None:
        """Return the first entry whose top-level ``id`` equals ``entry_id``."""
        return find_first(self._entries, has_entry_id(entry_id))

    def get_by_schema_id(self, schema_id: str) -> Entry | None:
        """Return the first entry whose ``schema['@id']`` equals ``schema_id``."""
        return find_first(self._entries, has_schema_id(schema_id))

    def get_all_by_schema_type(self, schema_type: str) -> list[Entry]:
        """Return entries whose ``schema['@type']`` equals ``schema_type``."""
        return filter_by_schema_type(self._entries, schema_type)

    def get_all_by_type(self, entry_type: str) -> list[Entry]:
        """Return entries by top-level type (e.g. ``home``, ``core``)."""
        return filter_by_type(self._entries, entry_type)

    def get_all_by_tag(self, tag: str) -> list[Entry]:
        """Return entries carrying ``tag``, compared case-insensitively."""
        return filter_by_tag(self._entries, tag)

    def get_ref_by_id(self, entry_id: str) -> SchemaRef | None:
        """Return the ``@type``/``@id`` reference of an entry found by id."""
        return _ref_of(self.get_by_id(entry_id))

    def get_ref_by_schema_id(self, schema_id: str) -> SchemaRef | None:
        """Return the ``@type``/``@id`` reference of an entry found by schema id."""
        return _ref_of(self.get_by_schema_id(schema_id))

    def get_schema_by_id(self, entry_id: str) -> Schema | None:
        """Return only the schema of the entry found by id."""
        return entry_schema(self.get_by_id(entry_id))

    def get_schema_by_schema_id(self, schema_id: str) -> Schema | None:
        """Return only the schema of the entry found by schema id."""
        return entry_schema(self.get_by_schema_id(schema_id))

    def get_all_schemas(self) -> list[Schema]:
        """Return the schema of every entry that has one."""
        return collect_schemas(self._entries)

    def get_all_schemas_by_type(self, schema_type: str) -> list[Schema]:
        """Return schemas whose ``@type`` equals ``schema_type``."""
        return collect_schemas(self.get_all_by_schema_type(schema_type))

    def get_all_schemas_by_tag(self, tag: str) -> list[Schema]:
        """Return schemas of tagged entries, skipping entries without a schema."""
        return collect_schemas(self.get_all_by_tag(tag))


def _ref_of(entry: Entry | None) -> SchemaRef | None:
    schema = entry_schema(entry)
    if schema is None:
        return None
    return schema_ref(schema)


def _json_kind(payload: Any) -> str:
    """Name the JSON kind of a parsed value for error messages."""
    if isinstance(payload, dict):
        return "object"
    if isinstance(payload, str):
        return "string"
    if isinstance(payload, bool):
        return "boolean"
    if isinstance(payload, (int, float)):
        return "number"
    return "null"
