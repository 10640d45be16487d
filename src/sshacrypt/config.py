# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""Configuration management for sshacrypt."""

from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from SSHACRYPT_* environment variables or .env."""

    model_config = SettingsConfigDict(
        env_prefix="SSHACRYPT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = Field(default="WARNING", description="Logging level")

    # Salt generation
    salt_length: int = Field(
        default=6, ge=1, le=16, description="Salt length for {SSHA} strings"
    )
    salt_source: Literal["system", "linear"] = Field(
        default="system",
        description="'system' uses the OS CSPRNG, 'linear' the legacy C generator",
    )
    salt_seed: Optional[int] = Field(
        default=None, description="Seed for the linear generator (default: clock)"
    )

    # Digest command
    read_chunk_size: int = Field(
        default=65536, gt=0, description="Bytes read per chunk when hashing files"
    )


# Global settings instance
settings = Settings()
