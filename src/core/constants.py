"""Core constants used across schema tote modules.

This module centralizes entry field names and runtime defaults.
Keeping values here avoids magic literals in lookup logic.
"""

from __future__ import annotations

DEFAULT_ENCODING = "utf-8"
DEFAULT_LOG_LEVEL = "info"
S3_URI_SCHEME = "s3://"
ENTRY_ID_FIELD = "id"
ENTRY_TAGS_FIELD = "tags"
ENTRY_TYPE_FIELD = "type"
ENTRY_SCHEMA_FIELD = "schema"
SCHEMA_ID_KEY = "@id"
SCHEMA_TYPE_KEY = "@type"
LOG_LEVEL_NAMES = ("debug", "info", "warning", "error", "critical")
