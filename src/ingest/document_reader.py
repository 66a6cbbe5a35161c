"""Source document readers.

This module loads the full text of a JSON document from a local path
or an S3 object. Read failures propagate unchanged to the caller.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from core.config import ToteConfig
from core.errors import ToteDependencyError, ToteSourceError
from core.s3_uri import is_s3_uri, parse_s3_uri


def read_document_text(source: str | os.PathLike[str], config: ToteConfig) -> str:
    """Read a whole source document as text.

    Args:
        source: Local path or ``s3://bucket/key`` URI.
        config: Runtime configuration for encoding and S3 session defaults.

    Returns:
        Decoded document text.

    Raises:
        OSError: If a local file cannot be read.
        ToteSourceError: If an S3 URI is malformed or the object read fails.
        ToteDependencyError: If boto3 is required but not installed.
    """
    source_text = os.fspath(source)
    if is_s3_uri(source_text):
        return _read_s3_document(source_text, config)
    return Path(source_text).expanduser().read_text(encoding=config.encoding)


def _read_s3_document(source_uri: str, config: ToteConfig) -> str:
    """Download and decode a single S3 object.

    Args:
        source_uri: Object URI.
        config: Runtime config for region, profile and encoding.

    Returns:
        Decoded object body.

    Raises:
        ToteSourceError: If the object cannot be fetched.
    """
    location = parse_s3_uri(source_uri)
    s3_client = _create_s3_client(config)
    from botocore.exceptions import BotoCoreError, ClientError

    try:
        response = s3_client.get_object(Bucket=location.bucket, Key=location.key)
        body = response["Body"]
        try:
            payload = body.read()
        finally:
            body.close()
    except (BotoCoreError, ClientError) as error:
        raise ToteSourceError(
            f"Failed to read S3 object {source_uri}: {error}. "
            "Check the object key and AWS credentials."
        ) from error
    return payload.decode(config.encoding)


def _create_s3_client(config: ToteConfig) -> Any:
    """Create a boto3 S3 client.

    Args:
        config: Runtime config containing optional profile/region.

    Returns:
        Boto3 S3 client.

    Raises:
        ToteDependencyError: If boto3 is missing.
    """
    try:
        import boto3
    except ImportError as error:
        raise ToteDependencyError(
            "S3 support requires boto3, but it is not installed. "
            "Install boto3 to load documents from s3:// sources."
        ) from error
    session_kwargs = _build_boto3_session_kwargs(config)
    session = boto3.session.Session(**session_kwargs)
    return session.client("s3")


def _build_boto3_session_kwargs(config: ToteConfig) -> dict[str, str]:
    """Build boto3 Session kwargs from config."""
    kwargs: dict[str, str] = {}
    if config.s3_profile:
        kwargs["profile_name"] = config.s3_profile
    if config.s3_region:
        kwargs["region_name"] = config.s3_region
    return kwargs
