"""Validation limits and runtime settings via environment variables."""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Settings loaded from environment variables (prefix ``PARAMCHECK_``)."""

    # String validators
    MAX_STR_LEN: int = 64

    # Pagination
    MIN_OFFSET: int = 0
    MIN_LIMIT: int = 1
    MAX_LIMIT: int = 1000

    # Smallest accepted subnet prefix length per address family
    SUBNET_MIN_IPV4: int = 8
    SUBNET_MIN_IPV6: int = 8

    # Logging
    DEBUG: bool = False
    LOG_LEVEL: str = "info"

    model_config = {"env_prefix": "PARAMCHECK_", "env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
