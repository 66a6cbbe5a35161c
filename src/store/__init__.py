"""In-memory entry store.

This module holds loaded schema entries and answers lookup queries
by id, schema id, schema type, top-level type and tag.
"""
