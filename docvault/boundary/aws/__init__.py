"""AWS boundary adapters."""

from docvault.boundary.aws.s3_client import BlobStream, S3BlobStore, StoredObject

__all__ = ["BlobStream", "S3BlobStore", "StoredObject"]
