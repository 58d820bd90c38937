"""Configuration models for orgscribe."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, field_validator


class SeparateNotesWithNewLine(str, Enum):
    """When to leave a blank line after a heading's body."""

    ALWAYS = "always"
    MULTI_LINE_NOTES_ONLY = "multi_line_notes_only"  # Only when there is something under the title line
    NEVER = "never"


class WriterSettings(BaseModel):
    """Formatting settings for the Org writer."""

    tags_column: int = Field(
        default=77,
        description="Column for tag alignment; negative aligns the right edge of the tags"
    )

    property_format: str = Field(
        default="%-10s %s",
        description="printf-style format applied to ':NAME:' and the property value"
    )

    org_indent_mode: bool = Field(
        default=False,
        description="Shift tags left to compensate for org-indent-mode virtual indentation"
    )

    org_indent_indentation_per_level: int = Field(
        default=2,
        description="Value of org-indent-indentation-per-level"
    )

    separate_header_and_content_with_new_line: bool = Field(
        default=True,
        description="Leave a blank line between the header and the body"
    )

    separate_notes_with_new_line: SeparateNotesWithNewLine = Field(
        default=SeparateNotesWithNewLine.MULTI_LINE_NOTES_ONLY,
        description="When to leave a blank line after a heading"
    )

    @field_validator("property_format")
    @classmethod
    def validate_property_format(cls, v: str) -> str:
        """Validate the format takes exactly a name and a value."""
        try:
            v % (":NAME:", "value")
        except (TypeError, ValueError) as e:
            raise ValueError(
                f"Property format must have two %s slots (name and value): {v!r} ({e})"
            ) from e
        return v

    @classmethod
    def basic(cls) -> "WriterSettings":
        """Return the default settings."""
        return cls()

    model_config = {"frozen": True}


class Config(BaseModel):
    """Root configuration for orgscribe."""

    writer: WriterSettings = Field(
        default_factory=WriterSettings,
        description="Org writer formatting settings"
    )

    @classmethod
    def load(cls, path: Path) -> "Config":
        """
        Load configuration from YAML file.

        An empty file yields the defaults. ORGSCRIBE_WRITER_* environment
        variables override file values.

        Args:
            path: Path to config.yaml file

        Returns:
            Validated Config instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If YAML is invalid or validation fails
        """
        from orgscribe.config.loader import load_config

        return load_config(path, required=True)

    model_config = {"frozen": True}
