"""
Configuration settings for the Test Record Service
"""

import os
import logging
from dataclasses import dataclass, field
from typing import List

from testbank.models.enums import ServiceVariant

logger = logging.getLogger(__name__)


def _split_origins(raw: str) -> List[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@dataclass
class Settings:
    """Environment-driven service configuration"""

    database_path: str = field(default_factory=lambda: os.getenv("DATABASE_PATH", "./test.db"))
    variant: ServiceVariant = field(default_factory=lambda: os.getenv("SERVICE_VARIANT", ServiceVariant.METADATA.value))
    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", 3001)))
    allowed_origins: List[str] = field(default_factory=lambda: _split_origins(os.getenv("ALLOWED_ORIGINS", "*")))

    def __post_init__(self):
        # Accept plain strings from the environment or from callers
        try:
            self.variant = ServiceVariant(self.variant)
        except ValueError:
            allowed = ", ".join(v.value for v in ServiceVariant)
            raise ValueError(f"SERVICE_VARIANT must be one of: {allowed} (got '{self.variant}')")

        if not self.database_path:
            raise ValueError("DATABASE_PATH must not be empty")


def get_settings() -> Settings:
    """Build settings from the current environment"""
    settings = Settings()
    logger.info(f"Variant: {settings.variant.value}, database: {settings.database_path}")
    return settings
