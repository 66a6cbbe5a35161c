"""Unit tests for the document reader module."""

from __future__ import annotations

import io
from pathlib import Path
from typing import Any

import pytest
from botocore.exceptions import ClientError, NoCredentialsError

from core.config import ToteConfig
from core.errors import ToteSourceError
from ingest import document_reader
from ingest.document_reader import read_document_text
from store.tote import SchemaTote
from tests.fixture_paths import fixture_path


class _FakeS3Client:
    """Minimal S3 client serving in-memory objects."""

    def __init__(self, objects: dict[tuple[str, str], bytes]) -> None:
        self.objects = objects
        self.requests: list[tuple[str, str]] = []

    def get_object(self, Bucket: str, Key: str) -> dict[str, Any]:
        self.requests.append((Bucket, Key))
        if (Bucket, Key) not in self.objects:
            raise ClientError(
                {"Error": {"Code": "NoSuchKey", "Message": "The specified key does not exist."}},
                "GetObject",
            )
        return {"Body": io.BytesIO(self.objects[(Bucket, Key)])}


def test_read_document_text_reads_local_file() -> None:
    """Reader should return the whole local file."""
    text = read_document_text(fixture_path("brand_catalog.json"), ToteConfig())

    assert text.lstrip().startswith("[")


def test_read_document_text_uses_configured_encoding(tmp_path: Path) -> None:
    """Reader should decode local files with the configured encoding."""
    source_path = tmp_path / "latin.json"
    source_path.write_bytes('[{"id": "caf\xe9"}]'.encode("latin-1"))

    text = read_document_text(str(source_path), ToteConfig(encoding="latin-1"))

    assert "café" in text


def test_read_document_text_raises_for_missing_path(tmp_path: Path) -> None:
    """Missing files should raise the underlying OS error."""
    missing_path = tmp_path / "does-not-exist.json"

    with pytest.raises(FileNotFoundError):
        read_document_text(missing_path, ToteConfig())

    assert missing_path.exists() is False


def test_read_document_text_downloads_s3_object(monkeypatch: pytest.MonkeyPatch) -> None:
    """S3 URIs should be fetched through the boto3 client."""
    client = _FakeS3Client({("site-data", "schema/pages.json"): b'[{"id": "s3_entry"}]'})
    monkeypatch.setattr(document_reader, "_create_s3_client", lambda config: client)

    tote = SchemaTote(ToteConfig())
    tote.load("s3://site-data/schema/pages.json")

    assert client.requests == [("site-data", "schema/pages.json")]
    assert tote.get_by_id("s3_entry") == {"id": "s3_entry"}


def test_read_document_text_rejects_bad_s3_uri() -> None:
    """Malformed S3 URIs should fail before any client is created."""
    with pytest.raises(ToteSourceError):
        read_document_text("s3://bucket-only", ToteConfig())


def test_boto3_session_kwargs_follow_config() -> None:
    """Session kwargs should include only configured values."""
    config = ToteConfig(s3_region="us-east-2", s3_profile=None)

    kwargs = document_reader._build_boto3_session_kwargs(config)

    assert kwargs == {"region_name": "us-east-2"}


def test_read_document_text_wraps_s3_client_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    """Missing S3 objects should surface as source errors."""
    client = _FakeS3Client({})
    monkeypatch.setattr(document_reader, "_create_s3_client", lambda config: client)

    with pytest.raises(ToteSourceError, match="s3://site-data/missing.json"):
        read_document_text("s3://site-data/missing.json", ToteConfig())

    assert client.requests == [("site-data", "missing.json")]


def test_read_document_text_wraps_credential_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    """Botocore failures before a response should surface as source errors."""

    class _UnauthenticatedClient:
        def get_object(self, Bucket: str, Key: str) -> dict[str, Any]:
            raise NoCredentialsError()

    monkeypatch.setattr(
        document_reader, "_create_s3_client", lambda config: _UnauthenticatedClient()
    )

    with pytest.raises(ToteSourceError):
        read_document_text("s3://site-data/pages.json", ToteConfig())
