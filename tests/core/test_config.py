import json
import logging
import pytest
from pydantic import ValidationError
from fpkit.core.config import Settings, configure
from fpkit.logger import logger


@pytest.fixture
def clean_env(monkeypatch):
    names = ("FPKIT_RANDOM_SEED", "FPKIT_RANDOM_LOW", "FPKIT_RANDOM_HIGH", "LOG_LEVEL")
    for name in names:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults_without_file(tmp_path, clean_env):
    settings = Settings.load(tmp_path / "missing.json")
    assert settings.RANDOM_SEED is None
    assert settings.RANDOM_LOW == 0.0
    assert settings.RANDOM_HIGH == 1.0
    assert settings.LOG_LEVEL == "INFO"
    assert settings.CONFIG_PATH == tmp_path / "missing.json"


def test_values_from_file(tmp_path, clean_env):
    path = tmp_path / "fpkit.json"
    path.write_text(json.dumps({"RANDOM_SEED": 7, "RANDOM_HIGH": 10.0}))

    settings = Settings.load(path)
    assert settings.RANDOM_SEED == 7
    assert settings.RANDOM_HIGH == 10.0


def test_environment_overrides_file(tmp_path, clean_env):
    path = tmp_path / "fpkit.json"
    path.write_text(json.dumps({"RANDOM_SEED": 7}))
    clean_env.setenv("FPKIT_RANDOM_SEED", "11")
    clean_env.setenv("LOG_LEVEL", "DEBUG")

    settings = Settings.load(path)
    assert settings.RANDOM_SEED == 11
    assert settings.LOG_LEVEL == "DEBUG"


def test_invalid_bounds_rejected(tmp_path, clean_env):
    clean_env.setenv("FPKIT_RANDOM_LOW", "5")
    clean_env.setenv("FPKIT_RANDOM_HIGH", "1")

    with pytest.raises(ValidationError, match="RANDOM_LOW"):
        Settings.load(tmp_path / "missing.json")


@pytest.fixture
def restore_level():
    level = logger.level
    yield
    logger.setLevel(level)


def test_log_level_from_file_is_applied(tmp_path, clean_env, restore_level):
    path = tmp_path / "fpkit.json"
    path.write_text(json.dumps({"LOG_LEVEL": "debug"}))

    settings = configure(Settings.load(path))
    assert settings.LOG_LEVEL == "DEBUG"
    assert logger.level == logging.DEBUG


def test_unknown_log_level_rejected(tmp_path, clean_env):
    clean_env.setenv("LOG_LEVEL", "chatty")

    with pytest.raises(ValidationError, match="Unknown log level"):
        Settings.load(tmp_path / "missing.json")
