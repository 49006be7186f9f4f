"""
S3 client for document bucket operations.

Writes uploaded file objects under time-prefixed keys and streams stored
objects back in chunks. boto3 is synchronous, so every network call is
dispatched to Starlette's thread pool to keep the event loop free.

Dependencies: boto3, starlette
System role: Blob store adapter for document bytes
"""

import logging
import time
from pathlib import PurePosixPath, PureWindowsPath
from typing import Any, AsyncIterator, BinaryIO, Callable, Iterator
from urllib.parse import quote

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from starlette.concurrency import iterate_in_threadpool, run_in_threadpool

from docvault.configs.storage import S3StorageSettings
from docvault.core.exceptions import BlobNotFoundError, StorageError

logger = logging.getLogger(__name__)

NOT_FOUND_CODES = {"404", "NoSuchKey", "NotFound"}


class StoredObject:
    """Result of a successful put."""

    def __init__(self, key: str, location: str) -> None:
        self.key = key
        self.location = location

    def __repr__(self) -> str:
        return f"StoredObject(key={self.key!r}, location={self.location!r})"


class BlobStream:
    """
    Async iterator over an object's bytes.

    Chunks are pulled from a blocking iterator in the thread pool. The
    underlying body is closed when iteration ends, raises, or is cancelled
    (client disconnect), and close() is safe to call more than once.
    """

    def __init__(
        self,
        chunks: Iterator[bytes],
        close: Callable[[], Any] | None = None,
        content_length: int | None = None,
        content_type: str | None = None,
    ) -> None:
        self._chunks = chunks
        self._close = close
        self._closed = False
        self.content_length = content_length
        self.content_type = content_type

    async def __aiter__(self) -> AsyncIterator[bytes]:
        try:
            async for chunk in iterate_in_threadpool(self._chunks):
                if chunk:
                    yield chunk
        finally:
            self.close()

    def close(self) -> None:
        """Release the underlying body."""
        if self._closed:
            return
        self._closed = True
        if self._close is not None:
            self._close()

    @property
    def closed(self) -> bool:
        return self._closed


def _error_code(error: ClientError) -> str:
    return str(error.response.get("Error", {}).get("Code", "Unknown"))


class S3BlobStore:
    """S3 adapter for document bytes (put, streaming get, health ping)."""

    def __init__(
        self,
        bucket: str,
        region: str = "eu-north-1",
        endpoint_url: str | None = None,
        key_prefix: str = "uploads",
        chunk_size: int = 64 * 1024,
        client: Any | None = None,
        aws_access_key_id: str | None = None,
        aws_secret_access_key: str | None = None,
    ) -> None:
        """
        Initialize S3 adapter for the document bucket.

        Args:
            bucket: S3 bucket name for document storage
            region: AWS region for S3 bucket
            endpoint_url: Custom endpoint (MinIO, LocalStack); None for AWS
            key_prefix: Prefix for generated keys
            chunk_size: Bytes per chunk when streaming downloads
            client: Pre-built boto3 S3 client (tests inject a mock)
            aws_access_key_id: Explicit credentials; default chain when None
            aws_secret_access_key: Explicit credentials; default chain when None
        """
        self._bucket = bucket
        self._region = region
        self._endpoint_url = endpoint_url
        self._key_prefix = key_prefix.strip("/")
        self._chunk_size = chunk_size
        self._s3_client = client or boto3.client(
            "s3",
            region_name=region,
            endpoint_url=endpoint_url,
            aws_access_key_id=aws_access_key_id,
            aws_secret_access_key=aws_secret_access_key,
        )

    @classmethod
    def from_settings(cls, settings: S3StorageSettings) -> "S3BlobStore":
        """Build the adapter from storage settings."""
        return cls(
            bucket=settings.bucket_name,
            region=settings.region,
            endpoint_url=settings.endpoint_url,
            key_prefix=settings.key_prefix,
            chunk_size=settings.chunk_size,
            aws_access_key_id=settings.access_key_id,
            aws_secret_access_key=settings.secret_access_key,
        )

    @property
    def bucket(self) -> str:
        return self._bucket

    def build_key(self, file_name: str, timestamp_ms: int | None = None) -> str:
        """
        Generate a storage key for an upload.

        Format: {prefix}/{epoch_millis}_{file_name}. Directory components of
        the client-supplied name are dropped. Two uploads of the same name in
        the same millisecond collide; that is accepted.

        Args:
            file_name: Original filename from the client
            timestamp_ms: Override for the millisecond timestamp

        Returns:
            str: Object key
        """
        if timestamp_ms is None:
            timestamp_ms = time.time_ns() // 1_000_000
        base_name = PurePosixPath(PureWindowsPath(file_name).name).name
        return f"{self._key_prefix}/{timestamp_ms}_{base_name}"

    def location_for(self, key: str) -> str:
        """Public URL of an object (not presigned)."""
        quoted = quote(key)
        if self._endpoint_url:
            return f"{self._endpoint_url.rstrip('/')}/{self._bucket}/{quoted}"
        return f"https://{self._bucket}.s3.{self._region}.amazonaws.com/{quoted}"

    async def put(
        self,
        key: str,
        fileobj: BinaryIO,
        content_type: str | None = None,
    ) -> StoredObject:
        """
        Stream a file object to S3.

        upload_fileobj reads the file in parts (multipart for large files),
        so the content is never fully held in memory.

        Args:
            key: Object key from build_key
            fileobj: Readable binary file object
            content_type: MIME type stored with the object

        Returns:
            StoredObject: Key and location of the stored object

        Raises:
            StorageError: If the upload fails
        """
        extra_args = {"ContentType": content_type} if content_type else None
        try:
            await run_in_threadpool(
                self._s3_client.upload_fileobj,
                fileobj,
                self._bucket,
                key,
                ExtraArgs=extra_args,
            )
        except (ClientError, BotoCoreError) as e:
            raise StorageError(
                f"Failed to upload to S3: {e}", operation="put", details={"key": key}
            ) from e

        logger.info("Blob stored", extra={"bucket": self._bucket, "key": key})
        return StoredObject(key=key, location=self.location_for(key))

    async def get(self, key: str) -> BlobStream:
        """
        Open an object for streaming.

        Args:
            key: Object key

        Returns:
            BlobStream: Chunked async reader over the object's body

        Raises:
            BlobNotFoundError: If no object exists under the key
            StorageError: For any other S3 failure
        """
        try:
            response = await run_in_threadpool(
                self._s3_client.get_object, Bucket=self._bucket, Key=key
            )
        except ClientError as e:
            if _error_code(e) in NOT_FOUND_CODES:
                raise BlobNotFoundError(key) from e
            raise StorageError(
                f"Failed to read from S3: {e}", operation="get", details={"key": key}
            ) from e
        except BotoCoreError as e:
            raise StorageError(
                f"Failed to read from S3: {e}", operation="get", details={"key": key}
            ) from e

        body = response["Body"]
        return BlobStream(
            chunks=body.iter_chunks(chunk_size=self._chunk_size),
            close=body.close,
            content_length=response.get("ContentLength"),
            content_type=response.get("ContentType"),
        )

    async def ping(self) -> None:
        """
        Check the bucket is reachable.

        Raises:
            StorageError: If head_bucket fails
        """
        try:
            await run_in_threadpool(self._s3_client.head_bucket, Bucket=self._bucket)
        except (ClientError, BotoCoreError) as e:
            raise StorageError(f"S3 bucket unreachable: {e}", operation="ping") from e
