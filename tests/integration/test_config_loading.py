"""Integration tests for configuration loading."""

import pytest

from orgscribe.config import ConfigManager, load_config
from orgscribe.models.config import SeparateNotesWithNewLine, WriterSettings


class TestLoadConfig:
    """Tests for YAML loading with environment overrides."""

    def test_load_complete_config_from_file(self, tmp_path):
        """Test loading complete configuration from YAML file."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("""
writer:
  tags_column: -80
  property_format: '%-12s %s'
  org_indent_mode: true
  org_indent_indentation_per_level: 3
  separate_header_and_content_with_new_line: false
  separate_notes_with_new_line: always
""")

        config = load_config(config_file)

        assert config.writer == WriterSettings(
            tags_column=-80,
            property_format="%-12s %s",
            org_indent_mode=True,
            org_indent_indentation_per_level=3,
            separate_header_and_content_with_new_line=False,
            separate_notes_with_new_line=SeparateNotesWithNewLine.ALWAYS,
        )

    def test_partial_config_uses_defaults(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("writer:\n  tags_column: 60\n")

        config = load_config(config_file)

        assert config.writer.tags_column == 60
        assert config.writer.property_format == "%-10s %s"

    def test_empty_file_uses_defaults(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("")

        assert load_config(config_file).writer == WriterSettings.basic()

    def test_missing_file_uses_defaults(self, tmp_path):
        """Test a missing optional config is not an error."""
        config = load_config(tmp_path / "missing.yaml")

        assert config.writer == WriterSettings.basic()

    def test_missing_required_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Configuration file not found"):
            load_config(tmp_path / "missing.yaml", required=True)

    def test_default_path_under_home(self, isolated_home):
        """Test the default path is read from ~/.config/orgscribe."""
        config_dir = isolated_home / ".config" / "orgscribe"
        config_dir.mkdir(parents=True)
        (config_dir / "config.yaml").write_text("writer:\n  tags_column: 42\n")

        assert load_config().writer.tags_column == 42

    def test_invalid_yaml(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("writer: [unclosed\n")

        with pytest.raises(ValueError, match="Invalid YAML"):
            load_config(config_file)

    def test_non_mapping_yaml(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("- just\n- a list\n")

        with pytest.raises(ValueError, match="must be a mapping"):
            load_config(config_file)

    def test_invalid_values(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("writer:\n  property_format: '%s'\n")

        with pytest.raises(ValueError):
            load_config(config_file)


class TestEnvironmentOverrides:
    """Tests for ORGSCRIBE_WRITER_* overrides."""

    def test_env_overrides_yaml(self, tmp_path, monkeypatch):
        """Test environment variables take precedence over file values."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("writer:\n  tags_column: 60\n  org_indent_mode: false\n")

        monkeypatch.setenv("ORGSCRIBE_WRITER_TAGS_COLUMN", "-70")
        monkeypatch.setenv("ORGSCRIBE_WRITER_ORG_INDENT_MODE", "yes")
        monkeypatch.setenv("ORGSCRIBE_WRITER_ORG_INDENT_INDENTATION_PER_LEVEL", "4")
        monkeypatch.setenv("ORGSCRIBE_WRITER_SEPARATE_HEADER_AND_CONTENT_WITH_NEW_LINE", "off")
        monkeypatch.setenv("ORGSCRIBE_WRITER_PROPERTY_FORMAT", "%s %s")
        monkeypatch.setenv("ORGSCRIBE_WRITER_SEPARATE_NOTES_WITH_NEW_LINE", "never")

        writer = load_config(config_file).writer

        assert writer.tags_column == -70
        assert writer.org_indent_mode is True
        assert writer.org_indent_indentation_per_level == 4
        assert writer.separate_header_and_content_with_new_line is False
        assert writer.property_format == "%s %s"
        assert writer.separate_notes_with_new_line is SeparateNotesWithNewLine.NEVER

    def test_env_without_file(self, tmp_path, monkeypatch):
        monkeypatch.setenv("ORGSCRIBE_WRITER_TAGS_COLUMN", "50")

        assert load_config(tmp_path / "missing.yaml").writer.tags_column == 50

    def test_invalid_env_values_ignored(self, tmp_path, monkeypatch):
        """Test unparseable int and bool overrides are skipped."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("writer:\n  tags_column: 60\n  org_indent_mode: true\n")

        monkeypatch.setenv("ORGSCRIBE_WRITER_TAGS_COLUMN", "wide")
        monkeypatch.setenv("ORGSCRIBE_WRITER_ORG_INDENT_MODE", "maybe")

        writer = load_config(config_file).writer

        assert writer.tags_column == 60
        assert writer.org_indent_mode is True

    def test_invalid_env_enum_rejected(self, tmp_path, monkeypatch):
        monkeypatch.setenv("ORGSCRIBE_WRITER_SEPARATE_NOTES_WITH_NEW_LINE", "sometimes")

        with pytest.raises(ValueError):
            load_config(tmp_path / "missing.yaml")


class TestConfigManager:
    """Tests for ConfigManager loading."""

    def test_load_from_path(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("writer:\n  tags_column: 33\n")

        config_mgr = ConfigManager.load_from_path(config_file)

        assert config_mgr.writer.tags_column == 33

    def test_load_from_missing_path(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ConfigManager.load_from_path(tmp_path / "missing.yaml")

    def test_validation_error_wrapped(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("writer:\n  tags_column: not-a-number\n")

        with pytest.raises(ValueError, match="Configuration validation failed"):
            ConfigManager.load_from_path(config_file)

    def test_load_default_without_file(self):
        """Test default loading falls back to basic settings."""
        assert ConfigManager.load_default().writer == WriterSettings.basic()
