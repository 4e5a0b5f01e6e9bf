"""Tests for layered configuration and logging setup."""

import logging

import pytest
import yaml
from rich.logging import RichHandler

from primecounter.shared.core import (
    ConfigManager,
    LoggingConfig,
    SystemConfig,
    ValidationLevel,
    configure_logging,
)


def _write(manager, name, data):
    manager.config_dir.mkdir(parents=True, exist_ok=True)
    (manager.config_dir / name).write_text(yaml.safe_dump(data), encoding="utf-8")


@pytest.fixture
def manager(tmp_path, clean_env):
    return ConfigManager(tmp_path)


def test_defaults_without_files(manager):
    config = manager.get_config()

    assert config == SystemConfig()
    assert config.lookup.query_template == "prime {n}"
    assert config.lookup.base_url == "https://api.wolframalpha.com/v2/query"


def test_precedence_env_over_project_over_user_over_defaults(manager, clean_env):
    _write(manager, "defaults.yaml", {"lookup": {"timeout": 2.0, "app_id": "DEFAULT"}})
    _write(manager, "user.yaml", {"lookup": {"timeout": 5.0}, "logging": {"level": "DEBUG"}})
    _write(manager, "project.yaml", {"lookup": {"timeout": 7.0}})
    clean_env.setenv("LOOKUP_TIMEOUT", "9")

    config = manager.get_config()

    assert config.lookup.timeout == 9.0
    assert config.lookup.app_id == "DEFAULT"
    assert config.logging.level == "DEBUG"


def test_env_overrides(manager, clean_env):
    clean_env.setenv("WOLFRAM_APP_ID", "ABC-123")
    clean_env.setenv("LOG_RICH_CONSOLE", "no")

    config = manager.get_config()

    assert config.lookup.app_id == "ABC-123"
    assert config.logging.rich_console is False


def test_invalid_env_value_is_ignored(manager, clean_env):
    clean_env.setenv("LOOKUP_TIMEOUT", "soon")

    assert manager.get_config().lookup.timeout == 10.0


def test_dotenv_in_project_root_is_loaded(manager, clean_env):
    (manager.project_root / ".env").write_text("WOLFRAM_APP_ID=DOTENV-APP\n", encoding="utf-8")
    # Registers the variable with monkeypatch so teardown removes what .env sets
    clean_env.setenv("WOLFRAM_APP_ID", "")
    clean_env.delenv("WOLFRAM_APP_ID")

    assert manager.get_config().lookup.app_id == "DOTENV-APP"


def test_environment_wins_over_dotenv(manager, clean_env):
    (manager.project_root / ".env").write_text("WOLFRAM_APP_ID=DOTENV-APP\n", encoding="utf-8")
    clean_env.setenv("WOLFRAM_APP_ID", "ENV-APP")

    assert manager.get_config().lookup.app_id == "ENV-APP"


def test_unknown_log_level_strict_raises(manager, clean_env):
    clean_env.setenv("LOG_LEVEL", "LOUD")

    with pytest.raises(ValueError, match="Configuration validation failed"):
        manager.get_config(ValidationLevel.STRICT)


def test_unknown_log_level_lenient_falls_back(manager, clean_env):
    clean_env.setenv("LOG_LEVEL", "LOUD")

    assert manager.get_config(ValidationLevel.LENIENT) == SystemConfig()


def test_log_level_is_normalized():
    assert LoggingConfig(level=" debug ").level == "DEBUG"


def test_strict_validation_raises(manager):
    _write(manager, "project.yaml", {"lookup": {"timeout": -1}})

    with pytest.raises(ValueError, match="Configuration validation failed"):
        manager.get_config(ValidationLevel.STRICT)


def test_unknown_keys_are_rejected(manager):
    _write(manager, "user.yaml", {"lookup": {"retries": 3}})

    with pytest.raises(ValueError):
        manager.get_config()


def test_lenient_validation_falls_back_to_defaults(manager):
    _write(manager, "project.yaml", {"lookup": {"timeout": -1}})

    assert manager.get_config(ValidationLevel.LENIENT) == SystemConfig()


def test_broken_yaml_is_ignored(manager):
    manager.config_dir.mkdir(parents=True)
    (manager.config_dir / "user.yaml").write_text("lookup: [unclosed", encoding="utf-8")

    assert manager.get_config() == SystemConfig()


def test_save_project_config_merges_and_reloads(manager):
    _write(manager, "project.yaml", {"lookup": {"timeout": 4.0}})
    assert manager.get_config().lookup.timeout == 4.0

    assert manager.save_project_config({"lookup": {"app_id": "SAVED"}})

    config = manager.get_config()
    assert config.lookup.app_id == "SAVED"
    assert config.lookup.timeout == 4.0


class TestConfigureLogging:

    @pytest.fixture(autouse=True)
    def restore_root(self):
        root = logging.getLogger()
        handlers, level = list(root.handlers), root.level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_plain_handler(self):
        handler = configure_logging(LoggingConfig(level="debug", rich_console=False))

        assert isinstance(handler, logging.StreamHandler)
        assert not isinstance(handler, RichHandler)
        assert logging.getLogger().level == logging.DEBUG

    def test_rich_handler_replaces_previous(self):
        configure_logging(LoggingConfig(rich_console=False))
        handler = configure_logging(LoggingConfig(level="WARNING"))

        root = logging.getLogger()
        assert isinstance(handler, RichHandler)
        assert sum(1 for h in root.handlers if getattr(h, "_primecounter", False)) == 1
        assert root.level == logging.WARNING
