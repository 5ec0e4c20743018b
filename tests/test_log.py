import logging

import pytest

from tagstore.config import Config
from tagstore.log import configure_logging


def test_invalid_log_level():
    with pytest.raises(ValueError, match="Invalid log level: VERBOSE"):
        configure_logging(Config(log_config_path=None, log_level="verbose"))


def test_yaml_log_config(tmp_path):
    log_config = tmp_path / "logging.yaml"
    # incremental keeps the handlers pytest installed on the root logger
    log_config.write_text(
        "version: 1\n"
        "incremental: true\n"
        "loggers:\n"
        "  tagstore.yaml_configured:\n"
        "    level: WARNING\n"
    )
    configure_logging(Config(log_config_path=str(log_config)))
    assert logging.getLogger("tagstore.yaml_configured").level == logging.WARNING
