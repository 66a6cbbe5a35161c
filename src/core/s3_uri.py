"""S3 URI parsing helpers.

This module validates ``s3://bucket/key`` locators for document reads.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.constants import S3_URI_SCHEME
from core.errors import ToteSourceError


@dataclass(frozen=True)
class S3Location:
    """Parsed S3 object location."""

    bucket: str
    key: str


def is_s3_uri(source: str) -> bool:
    """Return whether a source locator names an S3 object."""
    return source.startswith(S3_URI_SCHEME)


def parse_s3_uri(uri: str) -> S3Location:
    """Parse and validate an S3 object URI.

    Args:
        uri: URI in format ``s3://bucket/key``.

    Returns:
        Parsed bucket and key pair.

    Raises:
        ToteSourceError: If bucket or key is missing.
    """
    stripped_uri = uri.removeprefix(S3_URI_SCHEME)
    bucket, _, key = stripped_uri.partition("/")
    if not bucket or not key:
        raise ToteSourceError(
            f"Invalid S3 URI '{uri}': expected s3://bucket/key. "
            "Provide both bucket and object key."
        )
    return S3Location(bucket=bucket, key=key)
