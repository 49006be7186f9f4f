"""
S3 document storage configuration.

Settings for the bucket holding uploaded document bytes.

Dependencies: pydantic_settings
System role: Object storage configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class S3StorageSettings(BaseSettings):
    """Settings for S3 document bucket operations."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="S3_",
        case_sensitive=False,
        extra="ignore",
    )

    bucket_name: str = Field(
        default="docvault-documents",
        description="S3 bucket for document storage",
    )
    region: str = Field(
        default="eu-north-1",
        description="AWS region for S3 bucket",
    )
    endpoint_url: str | None = Field(
        default=None,
        description="Custom S3 endpoint (MinIO, LocalStack)",
    )
    access_key_id: str | None = Field(
        default=None,
        description="AWS access key; falls back to the default credential chain",
    )
    secret_access_key: str | None = Field(
        default=None,
        description="AWS secret key; falls back to the default credential chain",
    )
    key_prefix: str = Field(
        default="uploads",
        description="Prefix for generated object keys",
    )
    chunk_size: int = Field(
        default=64 * 1024,
        description="Bytes per chunk when streaming downloads",
    )
