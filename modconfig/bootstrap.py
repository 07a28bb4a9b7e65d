from __future__ import annotations

import logging

from modconfig.config import Settings
from modconfig.config_manager import ConfigManager
from modconfig.logging_config import configure_logging

logger = logging.getLogger(__name__)


def create_config_manager(settings: Settings | None = None) -> ConfigManager:
    """Configure logging from settings and return a manager rooted at config_dir."""
    settings = settings or Settings()

    configure_logging(
        level=settings.log_level,
        json_format=settings.log_json,
        log_file=settings.log_file,
    )

    manager = ConfigManager(config_dir=settings.config_dir)
    logger.info("Config manager ready (config_dir=%s)", settings.config_dir)
    return manager
