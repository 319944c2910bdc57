"""Configuration management for the parental control service."""

import logging
import os

from pydantic import BaseModel

logger = logging.getLogger(__name__)

ENV_PREFIX = "PARENTAL_CONTROL_"


class ParentalControlConfig(BaseModel):
    """Configuration for the parental control service."""

    log_level: str = "INFO"
    seed_sample_catalog: bool = True
    legacy_viewer_name: str = "legacy_user"

    @classmethod
    def from_env(cls) -> "ParentalControlConfig":
        """Create configuration from environment variables."""
        log_level = os.getenv(f"{ENV_PREFIX}LOG_LEVEL", "INFO").upper()
        seed_sample_catalog = os.getenv(f"{ENV_PREFIX}SEED_SAMPLE_CATALOG", "true").lower() == "true"
        legacy_viewer_name = os.getenv(f"{ENV_PREFIX}LEGACY_VIEWER_NAME", "legacy_user")

        # getLevelName maps known names to their numeric level
        if not isinstance(logging.getLevelName(log_level), int):
            logger.warning(f"⚠️ Unknown log level '{log_level}' - falling back to INFO")
            log_level = "INFO"

        if seed_sample_catalog:
            logger.info("🎬 Catalog will be seeded with sample content")
        else:
            logger.info("🚫 Sample catalog seeding disabled - catalog starts empty")

        return cls(
            log_level=log_level,
            seed_sample_catalog=seed_sample_catalog,
            legacy_viewer_name=legacy_viewer_name,
        )
