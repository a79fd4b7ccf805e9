"""
Copyright (c) 2024 Aiven Ltd
See LICENSE for details
"""

from kafka_health.config import Config

import logging
import sys

LOG = logging.getLogger(__name__)

ROOT_HANDLER_NAME = "kafka-health"
SECRET_KEY_MARKERS = ("password", "keyfile")


def _create_root_handler(config: Config) -> logging.Handler | None:
    match config.log_handler:
        case "stdout" | None:
            return logging.StreamHandler(stream=sys.stdout)
        case "systemd":
            from systemd import journal

            return journal.JournalHandler(SYSLOG_IDENTIFIER=ROOT_HANDLER_NAME)
    return None


def _remove_installed_handler() -> None:
    for handler in list(logging.root.handlers):
        if handler.get_name() == ROOT_HANDLER_NAME:
            logging.root.removeHandler(handler)
            handler.close()


def configure_logging(*, config: Config) -> None:
    """Install the service's root handler, replacing one left by an earlier call."""
    _remove_installed_handler()

    root_handler = _create_root_handler(config)
    if root_handler is None:
        logging.basicConfig(level=config.log_level, format=config.log_format)
        logging.warning("Log handler %s not recognized, root handler not set.", config.log_handler)
    else:
        root_handler.setFormatter(logging.Formatter(config.log_format))
        root_handler.set_name(name=ROOT_HANDLER_NAME)
        logging.root.addHandler(root_handler)

    logging.root.setLevel(config.log_level)
    logging.getLogger("uvicorn.error").setLevel(config.log_level)


def log_config_without_secrets(config: Config) -> None:
    masked = {
        key: "****" if value is not None and any(marker in key for marker in SECRET_KEY_MARKERS) else value
        for key, value in config.model_dump().items()
    }
    LOG.debug("Config %r", masked)
