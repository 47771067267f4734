"""Configuration management for the Bulletin Board using Pydantic Settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from bulletin_board.domain.value_objects.identifiers import IdPolicy


class StorageConfig(BaseSettings):
    """Post storage configuration."""

    model_config = SettingsConfigDict(env_prefix="BBS_STORAGE_")

    id_policy: IdPolicy = Field(
        default=IdPolicy.SEQUENCE,
        description="Id assignment: sequence (never reused) or length (legacy len+1)",
    )
    seed_sample_posts: int = Field(default=0, ge=0, description="Sample posts created at start-up")


class ServerConfig(BaseSettings):
    """Server configuration."""

    model_config = SettingsConfigDict(env_prefix="BBS_SERVER_")

    host: str = "0.0.0.0"
    port: int = 8080
    rest_prefix: str = "/v1/api"
    graphql_path: str = "/v1/gql/query"
    graphql_ide: bool = True


class ObservabilityConfig(BaseSettings):
    """Observability configuration."""

    model_config = SettingsConfigDict(env_prefix="BBS_OBSERVABILITY_")

    log_level: str = "info"
    log_format: Literal["json", "console"] = "json"
    otlp_endpoint: str = ""
    console_traces: bool = False
    environment: str = "development"


class Config(BaseSettings):
    """Root configuration for the Bulletin Board."""

    model_config = SettingsConfigDict(
        env_prefix="BBS_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    storage: StorageConfig = Field(default_factory=StorageConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache
def get_config() -> Config:
    """Get cached configuration instance."""
    return Config()
