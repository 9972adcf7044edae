from pathlib import Path

import pytest

from modwarn.configuration.app_configuration import (
    AppConfig,
    DEFAULT_MODERATOR_PERMISSION,
    DEFAULT_WARNINGS_FILE,
)


@pytest.fixture()
def config_path(tmp_path: Path) -> Path:
    return tmp_path / "app_config.yml"


def test_app_config_reload_parses_yaml(config_path: Path) -> None:
    config_path.write_text(
        "warnings:\n"
        "  file_path: /var/lib/modwarn/warnings.json\n"
        "  indent: 2\n"
        "  moderator_permission: kick_members\n",
        encoding="utf-8",
    )

    config = AppConfig(config_path)

    assert config.warnings_file == Path("/var/lib/modwarn/warnings.json")
    assert config.warnings_indent == 2
    assert config.moderator_permission == "kick_members"
    assert config.get("warnings")["indent"] == 2


def test_app_config_missing_file_returns_defaults(tmp_path: Path) -> None:
    config = AppConfig(tmp_path / "does_not_exist.yml")

    assert config.data == {}
    assert config.warnings_file == DEFAULT_WARNINGS_FILE
    assert config.warnings_indent is None
    assert config.moderator_permission == DEFAULT_MODERATOR_PERMISSION


@pytest.mark.parametrize("content", ["warnings: [unclosed", "- just\n- a list\n", ""])
def test_app_config_malformed_or_non_mapping_returns_defaults(config_path: Path, content: str) -> None:
    config_path.write_text(content, encoding="utf-8")

    config = AppConfig(config_path)

    assert config.data == {}
    assert config.warnings_file == DEFAULT_WARNINGS_FILE


@pytest.mark.parametrize("indent", ["wide", -1])
def test_app_config_invalid_indent_falls_back_to_compact(config_path: Path, indent) -> None:
    config_path.write_text(f"warnings:\n  indent: {indent}\n", encoding="utf-8")

    assert AppConfig(config_path).warnings_indent is None


def test_app_config_reload_picks_up_changes(config_path: Path) -> None:
    config_path.write_text("warnings:\n  file_path: first.json\n", encoding="utf-8")
    config = AppConfig(config_path)
    assert config.warnings_file == Path("first.json")

    config_path.write_text("warnings:\n  file_path: second.json\n", encoding="utf-8")
    config.reload()

    assert config.warnings_file == Path("second.json")


def test_app_config_ignores_non_mapping_section(config_path: Path) -> None:
    config_path.write_text("warnings: nope\n", encoding="utf-8")

    config = AppConfig(config_path)

    assert config.warnings_file == DEFAULT_WARNINGS_FILE
    assert config.moderator_permission == DEFAULT_MODERATOR_PERMISSION
