import json
import logging

import pytest

from registrar.config import RegistrarConfig, configure_logging, load_config
from registrar.core.enums import PaymentMode
from registrar.core.exceptions import ConfigurationError


def test_defaults_match_example_driver():
    config = load_config()
    assert config == RegistrarConfig()
    assert config.payment_mode is PaymentMode.RANDOM
    assert config.min_age == 21
    assert config.prerequisite == "CS101"


def test_file_values_and_overrides(tmp_path):
    path = tmp_path / "registrar.json"
    path.write_text(json.dumps({"payment_mode": "decline", "seed": 1, "log_level": "debug"}))

    config = load_config(str(path), seed=None, payment_mode="approve")

    assert config.payment_mode is PaymentMode.APPROVE
    assert config.seed == 1
    assert config.log_level == "DEBUG"


@pytest.mark.parametrize("contents, code", [
    ("{not json", "CONFIG_INVALID_JSON"),
    ("[1, 2]", "CONFIG_INVALID_JSON"),
    (json.dumps({"log_level": "LOUD"}), "CONFIG_INVALID"),
    (json.dumps({"min_age": -1}), "CONFIG_INVALID"),
    (json.dumps({"payment_mode": "sometimes"}), "CONFIG_INVALID"),
])
def test_invalid_files_raise_configuration_error(tmp_path, contents, code):
    path = tmp_path / "registrar.json"
    path.write_text(contents)

    with pytest.raises(ConfigurationError) as exc_info:
        load_config(str(path))
    assert exc_info.value.error_code == code


def test_missing_file_raises(tmp_path):
    with pytest.raises(ConfigurationError) as exc_info:
        load_config(str(tmp_path / "missing.json"))
    assert exc_info.value.error_code == "CONFIG_UNREADABLE"


def test_configure_logging_sets_package_level():
    configure_logging("warning")
    logger = logging.getLogger("registrar")
    assert logger.level == logging.WARNING
    assert len(logger.handlers) == 1
    assert logger.propagate is False


class RecordingHandler(logging.Handler):

    def __init__(self):
        super().__init__()
        self.closed = False

    def emit(self, record):
        pass

    def close(self):
        self.closed = True
        super().close()


def test_configure_logging_replaces_and_closes_old_handler():
    logger = logging.getLogger("registrar")
    old_handler = RecordingHandler()
    logger.addHandler(old_handler)

    configure_logging("DEBUG")

    assert old_handler.closed
    assert old_handler not in logger.handlers
    assert len(logger.handlers) == 1


def test_configured_records_are_not_repeated_by_root(capsys):
    root_handler = logging.StreamHandler()
    logging.getLogger().addHandler(root_handler)
    try:
        configure_logging("INFO")
        logging.getLogger("registrar.core.entities").info("enrolled once")
    finally:
        logging.getLogger().removeHandler(root_handler)
        root_handler.close()

    assert capsys.readouterr().err.count("enrolled once") == 1
