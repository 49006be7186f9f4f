"""
Test suite for S3BlobStore.

Uses a MagicMock in place of the boto3 client to cover key generation,
uploads, chunked downloads and error translation.

System role: Verification of the object storage adapter
"""

import io
from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError, EndpointConnectionError

from docvault.boundary.aws.s3_client import BlobStream, S3BlobStore
from docvault.configs.storage import S3StorageSettings
from docvault.core.exceptions import BlobNotFoundError, StorageError


def client_error(code: str, operation: str = "GetObject") -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": code}}, operation)


@pytest.fixture
def mock_s3() -> MagicMock:
    return MagicMock()


@pytest.fixture
def store(mock_s3: MagicMock) -> S3BlobStore:
    return S3BlobStore(bucket="docs", region="eu-north-1", client=mock_s3, chunk_size=2)


class TestBuildKey:
    def test_format(self, store):
        assert store.build_key("report.pdf", timestamp_ms=1700000000123) == (
            "uploads/1700000000123_report.pdf"
        )

    @pytest.mark.parametrize(
        "file_name",
        ["../../etc/report.pdf", "C:\\Users\\me\\report.pdf", "nested/dir/report.pdf"],
    )
    def test_directory_components_dropped(self, store, file_name):
        assert store.build_key(file_name, timestamp_ms=1) == "uploads/1_report.pdf"

    def test_uses_current_time(self, store):
        key = store.build_key("a.txt")
        prefix, _, rest = key.partition("/")
        millis, _, name = rest.partition("_")

        assert prefix == "uploads"
        assert millis.isdigit() and len(millis) >= 13
        assert name == "a.txt"

    def test_custom_prefix(self, mock_s3):
        store = S3BlobStore(bucket="docs", key_prefix="/tenant-files/", client=mock_s3)
        assert store.build_key("a.txt", timestamp_ms=5) == "tenant-files/5_a.txt"


class TestLocation:
    def test_aws_virtual_hosted_url(self, store):
        assert store.location_for("uploads/1_a.txt") == (
            "https://docs.s3.eu-north-1.amazonaws.com/uploads/1_a.txt"
        )

    def test_custom_endpoint(self, mock_s3):
        store = S3BlobStore(bucket="docs", endpoint_url="http://localhost:9000/", client=mock_s3)
        assert store.location_for("uploads/1_a b.txt") == (
            "http://localhost:9000/docs/uploads/1_a%20b.txt"
        )


class TestPut:
    async def test_streams_file_object(self, store, mock_s3):
        fileobj = io.BytesIO(b"%PDF-1.7")

        stored = await store.put("uploads/1_report.pdf", fileobj, "application/pdf")

        mock_s3.upload_fileobj.assert_called_once_with(
            fileobj,
            "docs",
            "uploads/1_report.pdf",
            ExtraArgs={"ContentType": "application/pdf"},
        )
        assert stored.key == "uploads/1_report.pdf"
        assert stored.location.endswith("/uploads/1_report.pdf")

    async def test_without_content_type(self, store, mock_s3):
        await store.put("uploads/1_a", io.BytesIO(b"x"))

        assert mock_s3.upload_fileobj.call_args.kwargs["ExtraArgs"] is None

    async def test_failure_raises_storage_error(self, store, mock_s3):
        mock_s3.upload_fileobj.side_effect = client_error("AccessDenied", "PutObject")

        with pytest.raises(StorageError) as exc_info:
            await store.put("uploads/1_a", io.BytesIO(b"x"))

        assert exc_info.value.details["operation"] == "put"


class TestGet:
    async def test_streams_chunks_and_closes_body(self, store, mock_s3):
        body = MagicMock()
        body.iter_chunks.return_value = iter([b"ab", b"cd", b"e"])
        mock_s3.get_object.return_value = {
            "Body": body,
            "ContentLength": 5,
            "ContentType": "text/plain",
        }

        stream = await store.get("uploads/1_a.txt")
        chunks = [chunk async for chunk in stream]

        assert chunks == [b"ab", b"cd", b"e"]
        assert stream.content_length == 5
        assert stream.content_type == "text/plain"
        body.iter_chunks.assert_called_once_with(chunk_size=2)
        body.close.assert_called_once()
        assert stream.closed

    @pytest.mark.parametrize("code", ["NoSuchKey", "404", "NotFound"])
    async def test_missing_key(self, store, mock_s3, code):
        mock_s3.get_object.side_effect = client_error(code)

        with pytest.raises(BlobNotFoundError):
            await store.get("uploads/missing")

    async def test_other_client_error(self, store, mock_s3):
        mock_s3.get_object.side_effect = client_error("AccessDenied")

        with pytest.raises(StorageError):
            await store.get("uploads/1_a")

    async def test_connection_error(self, store, mock_s3):
        mock_s3.get_object.side_effect = EndpointConnectionError(endpoint_url="http://s3")

        with pytest.raises(StorageError):
            await store.get("uploads/1_a")


class TestBlobStream:
    async def test_close_is_idempotent(self):
        close = MagicMock()
        stream = BlobStream(iter([b"a"]), close=close)

        stream.close()
        stream.close()

        close.assert_called_once()

    async def test_error_mid_stream_still_closes(self):
        def broken():
            yield b"a"
            raise RuntimeError("connection reset")

        close = MagicMock()
        stream = BlobStream(broken(), close=close)

        with pytest.raises(RuntimeError):
            async for _ in stream:
                pass

        close.assert_called_once()

    async def test_empty_chunks_skipped(self):
        stream = BlobStream(iter([b"", b"a", b""]))
        assert [chunk async for chunk in stream] == [b"a"]


class TestPing:
    async def test_ok(self, store, mock_s3):
        await store.ping()
        mock_s3.head_bucket.assert_called_once_with(Bucket="docs")

    async def test_unreachable(self, store, mock_s3):
        mock_s3.head_bucket.side_effect = client_error("403", "HeadBucket")

        with pytest.raises(StorageError):
            await store.ping()


def test_from_settings():
    settings = S3StorageSettings(
        bucket_name="docs",
        region="us-east-1",
        key_prefix="files",
        chunk_size=1024,
    )
    store = S3BlobStore.from_settings(settings)

    assert store.bucket == "docs"
    assert store.build_key("a.txt", timestamp_ms=3) == "files/3_a.txt"
