"""Tests for the optional YAML settings file."""

import logging

from fwharden.core.config_manager import ConfigManager


def test_missing_file_uses_defaults(tmp_path):
    manager = ConfigManager(tmp_path / "absent.yaml")

    assert manager.load_config() is False
    assert manager.get_setting("log_level") == "INFO"
    assert manager.get_setting("log_file") is None
    assert manager.get_setting("quiet") is False


def test_loads_settings(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text(
        "version: '1.0'\n"
        "settings:\n"
        "  log_level: debug\n"
        "  quiet: true\n"
    )
    manager = ConfigManager(config_file)

    assert manager.load_config() is True
    assert manager.get_setting("quiet") is True
    assert manager.get_log_level() == logging.DEBUG
    # Unspecified settings keep their defaults
    assert manager.get_setting("log_file") is None


def test_empty_file_uses_defaults(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("")
    manager = ConfigManager(config_file)

    assert manager.load_config() is False
    assert manager.get_setting("log_level") == "INFO"


def test_yaml_error_uses_defaults(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("settings: [unclosed\n")
    manager = ConfigManager(config_file)

    assert manager.load_config() is False
    assert manager.get_setting("quiet") is False


def test_non_mapping_document_rejected(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("- just\n- a list\n")
    manager = ConfigManager(config_file)

    assert manager.load_config() is False


def test_settings_must_be_mapping(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("settings: verbose\n")
    manager = ConfigManager(config_file)

    assert manager.load_config() is False


def test_unknown_log_level_falls_back_to_info(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("settings:\n  log_level: chatty\n")
    manager = ConfigManager(config_file)
    manager.load_config()

    assert manager.get_log_level() == logging.INFO
