"""Tests for beangen.codegen.core.config."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from beangen.codegen.core.config import (
    ConfigError,
    ConfigManager,
    GeneratorConfig,
    load_config,
)


def test_defaults() -> None:
    config = load_config()

    assert config.indent_size == 4
    assert config.indent == "    "
    assert config.wildcard_import_threshold == 5
    assert config.banner_width == 160
    assert config.implicit_packages == ["java.lang"]
    assert config.import_group_prefixes == ["java.", "javax."]
    assert config.copyright_header == ""
    assert config.custom == {}


def test_defaults_are_not_shared() -> None:
    first = load_config()
    first.implicit_packages.append("kotlin")

    assert load_config().implicit_packages == ["java.lang"]


def test_tab_indent() -> None:
    assert GeneratorConfig(use_tabs=True).indent == "\t"


def test_overrides_and_custom_keys() -> None:
    config = load_config({"indent_size": 2, "template_dir": "templates"})

    assert config.indent == "  "
    assert config.custom == {"template_dir": "templates"}


def test_load_from_file(tmp_path: Path) -> None:
    config_file = tmp_path / "beangen.json"
    config_file.write_text(
        json.dumps({"banner_width": 120, "copyright_header": "Copyright", "vendor": "acme"}),
        encoding="utf-8",
    )

    config = load_config({"banner_width": 100}, config_file)

    assert config.banner_width == 100
    assert config.copyright_header == "Copyright"
    assert config.custom == {"vendor": "acme"}


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_config(config_file=tmp_path / "missing.json")


def test_non_json_suffix(tmp_path: Path) -> None:
    config_file = tmp_path / "beangen.yml"
    config_file.write_text("banner_width: 10", encoding="utf-8")

    with pytest.raises(ConfigError, match="must be JSON"):
        load_config(config_file=config_file)


def test_invalid_json(tmp_path: Path) -> None:
    config_file = tmp_path / "beangen.json"
    config_file.write_text("{not json", encoding="utf-8")

    with pytest.raises(ConfigError, match="Invalid JSON"):
        load_config(config_file=config_file)


def test_json_must_be_object(tmp_path: Path) -> None:
    config_file = tmp_path / "beangen.json"
    config_file.write_text("[1, 2]", encoding="utf-8")

    with pytest.raises(ConfigError, match="JSON object"):
        load_config(config_file=config_file)


def test_save_and_reload(tmp_path: Path) -> None:
    manager = ConfigManager()
    config = manager.get_config({"indent_size": 8, "vendor": "acme"})
    path = tmp_path / "saved.json"

    manager.save_config(config, path)
    saved = json.loads(path.read_text(encoding="utf-8"))
    reloaded = manager.get_config(config_file=path)

    assert saved["vendor"] == "acme"
    assert "custom" not in saved
    assert reloaded == config


class TestValidateConfig:
    """Tests for ConfigManager.validate_config."""

    def test_valid_defaults(self) -> None:
        assert ConfigManager().validate_config(GeneratorConfig()) == []

    def test_problems_reported(self) -> None:
        config = GeneratorConfig(
            indent_size=0,
            wildcard_import_threshold=0,
            line_ending="\r",
            banner_width=10,
            import_group_prefixes=["java.", ""],
        )

        warnings = ConfigManager().validate_config(config)

        assert len(warnings) == 5
        assert "Invalid indent_size: 0" in warnings
