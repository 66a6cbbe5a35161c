"""Public SDK surface for schema tote.

This module provides a stable import path for library users.
It re-exports the store, its configuration, and the error types.
"""

from __future__ import annotations

from core.config import ToteConfig
from core.errors import (
    ToteConfigError,
    ToteDependencyError,
    ToteError,
    ToteShapeError,
    ToteSourceError,
)
from core.logging_config import configure_logging
from ingest.document_reader import read_document_text
from store.tote import SchemaTote

__all__ = [
    "SchemaTote",
    "ToteConfig",
    "ToteConfigError",
    "ToteDependencyError",
    "ToteError",
    "ToteShapeError",
    "ToteSourceError",
    "configure_logging",
    "read_document_text",
]
