import logging
import logging.config

from yaml import safe_load

from tagstore.config import Config

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def configure_logging(config: Config) -> None:
    """Configure logging from a YAML file, or from the level/format/file settings."""
    if config.log_config_path:
        with open(config.log_config_path, "r") as f:
            logging_config = safe_load(f.read())
        logging.config.dictConfig(logging_config)
    else:
        log_level = config.log_level.upper()
        if log_level not in LOG_LEVELS:
            raise ValueError(f"Invalid log level: {log_level}")
        handlers: list[logging.Handler] = [logging.StreamHandler()]
        if config.log_file:
            handlers.append(logging.FileHandler(config.log_file))
        logging.basicConfig(level=log_level, format=config.log_format, handlers=handlers)
    logger.info("Logging configured for %s %s", config.app_name, config.app_version)
