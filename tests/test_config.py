"""
Tests for configuration loading — grubutils.yml discovery and validation.
"""

import textwrap
from pathlib import Path

import pytest

from grubutils.core.config.loader import (
    CONFIG_ENV_VAR,
    ConfigError,
    find_config_file,
    load_settings,
)
from grubutils.core.models.settings import Settings


@pytest.fixture
def fedora_yml(tmp_path: Path) -> Path:
    content = textwrap.dedent("""\
        generator_tool: grub2-mkconfig
        default_output: /boot/grub2/grub.cfg
        default_editor: /usr/bin/vi
    """)
    path = tmp_path / "grubutils.yml"
    path.write_text(content)
    return path


class TestFindConfigFile:
    def test_explicit_wins(self, tmp_path: Path, fedora_yml: Path):
        other = tmp_path / "other.yml"
        other.write_text("")
        found = find_config_file(fedora_yml, {CONFIG_ENV_VAR: str(other)})
        assert found == fedora_yml

    def test_explicit_missing(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="not found"):
            find_config_file(tmp_path / "nope.yml")

    def test_env_var(self, fedora_yml: Path, tmp_path: Path):
        found = find_config_file(None, {CONFIG_ENV_VAR: str(fedora_yml)}, system_file=tmp_path / "x")
        assert found == fedora_yml

    def test_env_var_missing_file(self, tmp_path: Path):
        with pytest.raises(ConfigError, match=CONFIG_ENV_VAR):
            find_config_file(None, {CONFIG_ENV_VAR: str(tmp_path / "nope.yml")})

    def test_empty_env_var_ignored(self, tmp_path: Path):
        found = find_config_file(None, {CONFIG_ENV_VAR: ""}, system_file=tmp_path / "absent.yml")
        assert found is None

    def test_system_file(self, fedora_yml: Path):
        assert find_config_file(None, {}, system_file=fedora_yml) == fedora_yml

    def test_nothing_found(self, tmp_path: Path):
        assert find_config_file(None, {}, system_file=tmp_path / "absent.yml") is None


class TestLoadSettings:
    def test_none_gives_defaults(self):
        assert load_settings(None) == Settings()

    def test_empty_file_gives_defaults(self, tmp_path: Path):
        path = tmp_path / "empty.yml"
        path.write_text("")
        assert load_settings(path) == Settings()

    def test_overrides(self, fedora_yml: Path):
        s = load_settings(fedora_yml)
        assert s.generator_tool == "grub2-mkconfig"
        assert s.default_output == "/boot/grub2/grub.cfg"
        assert s.default_editor == "/usr/bin/vi"
        # Untouched keys keep their defaults
        assert s.default_file == "/etc/default/grub"
        assert s.elevation_tool == "sudo"

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "bad.yml"
        path.write_text("generator_tool: [unclosed\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_settings(path)

    def test_not_a_mapping(self, tmp_path: Path):
        path = tmp_path / "list.yml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="Expected a YAML mapping"):
            load_settings(path)

    def test_unknown_key(self, tmp_path: Path):
        path = tmp_path / "typo.yml"
        path.write_text("generater_tool: grub2-mkconfig\n")
        with pytest.raises(ConfigError, match="Invalid settings"):
            load_settings(path)

    def test_unreadable(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="Cannot read"):
            load_settings(tmp_path)
