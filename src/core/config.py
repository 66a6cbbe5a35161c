"""Runtime configuration model for schema tote.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass
import os

from core.constants import DEFAULT_ENCODING
from core.errors import ToteConfigError


@dataclass(frozen=True)
class ToteConfig:
    """Validated runtime configuration.

    Attributes:
        encoding: Text encoding used to decode source documents.
        s3_region: Optional default AWS region for S3 reads.
        s3_profile: Optional AWS profile for boto3 session initialization.
    """

    encoding: str = DEFAULT_ENCODING
    s3_region: str | None = None
    s3_profile: str | None = None

    @classmethod
    def from_env(cls) -> "ToteConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            ToteConfigError: If environment values are invalid.
        """
        encoding = _parse_encoding(os.getenv("TOTE_ENCODING", DEFAULT_ENCODING))
        return cls(
            encoding=encoding,
            s3_region=os.getenv("TOTE_S3_REGION"),
            s3_profile=os.getenv("TOTE_S3_PROFILE"),
        )


def _parse_encoding(raw_value: str) -> str:
    """Validate the source encoding environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Canonical codec name.

    Raises:
        ToteConfigError: If no codec is registered under the name.
    """
    try:
        return codecs.lookup(raw_value).name
    except LookupError as error:
        raise ToteConfigError(
            "Invalid TOTE_ENCODING value: "
            f"unknown codec '{raw_value}'. "
            "Set TOTE_ENCODING to a Python codec name such as utf-8."
        ) from error
