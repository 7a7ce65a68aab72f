"""
Logging setup for setupscan.
"""
import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def configure_logging(config: Optional[dict] = None) -> None:
    """Configure root logging from the ``logging`` section of the config."""
    logging_config = (config or {}).get("logging", {}) or {}
    level_name = str(logging_config.get("level", "WARNING")).upper()
    level = getattr(logging, level_name, logging.WARNING)

    handlers = [logging.StreamHandler()]
    log_file = logging_config.get("file")
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)
