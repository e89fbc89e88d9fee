"""
Configuration management for graphmap
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    # Logging
    debug: bool = False
    log_level: str = "INFO"

    # Registry
    strict_links: bool = True  # reject GraphQLNonNull targets at link time

    # Declarative type links
    type_links_config_path: str | None = None

    class Config:
        env_file = ".env"
        env_prefix = "GRAPHMAP_"
        case_sensitive = False
        extra = "ignore"


# Global settings instance
settings = Settings()

# Debug: Log settings initialization (only in debug mode)
if settings.debug:
    from .logging import get_logger

    _logger = get_logger(__name__)
    _logger.debug(
        "Settings initialized",
        strict_links=settings.strict_links,
        type_links_config_path=settings.type_links_config_path,
    )
