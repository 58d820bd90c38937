"""Unit tests for configuration models."""

import pytest
from pydantic import ValidationError

from orgscribe.models.config import Config, SeparateNotesWithNewLine, WriterSettings


class TestWriterSettings:
    """Test writer settings model."""

    def test_basic_defaults(self):
        """Test the basic settings values."""
        settings = WriterSettings.basic()

        assert settings.tags_column == 77
        assert settings.property_format == "%-10s %s"
        assert settings.org_indent_mode is False
        assert settings.org_indent_indentation_per_level == 2
        assert settings.separate_header_and_content_with_new_line is True
        assert settings.separate_notes_with_new_line == SeparateNotesWithNewLine.MULTI_LINE_NOTES_ONLY

    def test_separate_notes_from_string(self):
        """Test enum accepts its string value."""
        settings = WriterSettings(separate_notes_with_new_line="always")

        assert settings.separate_notes_with_new_line is SeparateNotesWithNewLine.ALWAYS

    def test_invalid_separate_notes(self):
        with pytest.raises(ValidationError):
            WriterSettings(separate_notes_with_new_line="sometimes")

    def test_negative_values_allowed(self):
        """Test negative column and indentation are accepted."""
        settings = WriterSettings(tags_column=-77, org_indent_indentation_per_level=-1)

        assert settings.tags_column == -77
        assert settings.org_indent_indentation_per_level == -1

    @pytest.mark.parametrize("fmt", ["%s", "%s %s %s", "%d %s", "{} {}"])
    def test_invalid_property_format(self, fmt):
        """Test property format must take exactly two strings."""
        with pytest.raises(ValidationError, match="Property format"):
            WriterSettings(property_format=fmt)

    @pytest.mark.parametrize("fmt", ["%s %s", "%-12s%s", "%s: %s"])
    def test_valid_property_format(self, fmt):
        assert WriterSettings(property_format=fmt).property_format == fmt

    def test_settings_immutable(self):
        """Test that settings are frozen (immutable)."""
        settings = WriterSettings()

        with pytest.raises(ValidationError):
            settings.tags_column = 10


class TestConfig:
    """Test root configuration model."""

    def test_default_writer_section(self):
        assert Config().writer == WriterSettings.basic()

    def test_nested_writer_section(self):
        config = Config(writer={"tags_column": -60})

        assert config.writer.tags_column == -60
        assert config.writer.property_format == "%-10s %s"

    def test_load_yaml_file(self, tmp_path):
        """Test loading the writer section from YAML."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("writer:\n  tags_column: -60\n  separate_notes_with_new_line: never\n")

        config = Config.load(config_file)

        assert config.writer.tags_column == -60
        assert config.writer.separate_notes_with_new_line is SeparateNotesWithNewLine.NEVER

    def test_load_empty_file_uses_defaults(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("")

        assert Config.load(config_file) == Config()

    def test_load_missing_file(self, tmp_path):
        """Test missing file error includes an example config."""
        with pytest.raises(FileNotFoundError, match="tags_column: 77"):
            Config.load(tmp_path / "missing.yaml")

    def test_load_invalid_values(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("writer:\n  property_format: '%s'\n")

        with pytest.raises(ValueError):
            Config.load(config_file)
