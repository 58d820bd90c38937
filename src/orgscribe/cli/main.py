#!/usr/bin/env python3
"""orgscribe CLI - Render Org headings from YAML descriptions.

This is the main entry point for the orgscribe command-line tool.
"""

import sys
from pathlib import Path
from typing import Any, Optional

import click
import yaml

from orgscribe.config import ConfigManager
from orgscribe.models.config import WriterSettings
from orgscribe.org.heading import OrgHeading
from orgscribe.org.writer import OrgWriter
from orgscribe.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file (default: ~/.config/orgscribe/config.yaml)",
)
@click.option("--verbose", is_flag=True, help="Enable debug logging")
@click.version_option(package_name="orgscribe", prog_name="orgscribe")
@click.pass_context
def cli(ctx: click.Context, config: Optional[Path], verbose: bool):
    """orgscribe - Write Org mode headings as canonical text."""
    configure_logging("DEBUG" if verbose else None)

    # Store global options in context
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config


def load_settings(ctx: click.Context) -> WriterSettings:
    """Load writer settings, exiting with an error message on failure."""
    config_path = ctx.obj.get("config_path")

    try:
        if config_path is not None:
            config_mgr = ConfigManager.load_from_path(config_path)
        else:
            config_mgr = ConfigManager.load_default()
    except (FileNotFoundError, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    return config_mgr.writer


def load_document(path: Path) -> tuple[Optional[str], list[OrgHeading]]:
    """Load preface and headings from a YAML document.

    Expected format:

        preface: |
          #+TITLE: Notes
        headings:
          - title: Foo
            state: TODO
            tags: [work]
            properties:
              - [ID, abc]

    Args:
        path: Path to YAML file

    Returns:
        Tuple of (preface, headings)

    Raises:
        ValueError: If the document is malformed
    """
    try:
        data: Any = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return None, []

    if not isinstance(data, dict):
        raise ValueError(f"Document must be a mapping with a 'headings' list: {path}")

    preface = data.get("preface")
    if preface is not None and not isinstance(preface, str):
        raise ValueError("Preface must be a string")

    raw_headings = data.get("headings") or []
    if not isinstance(raw_headings, list):
        raise ValueError("'headings' must be a list")

    headings = []
    for i, raw in enumerate(raw_headings):
        try:
            headings.append(OrgHeading.from_dict(raw))
        except ValueError as e:
            raise ValueError(f"Heading {i + 1}: {e}") from e

    return preface, headings


@cli.command()
@click.argument("headings_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--flush", is_flag=True, help="Write planning and drawer lines without indentation")
@click.pass_context
def render(ctx: click.Context, headings_file: Path, flush: bool):
    """Render headings described in HEADINGS_FILE as Org text.

    Examples:
        orgscribe render notes.yaml
        orgscribe render notes.yaml --flush > notes.org
    """
    settings = load_settings(ctx)

    try:
        preface, headings = load_document(headings_file)
    except ValueError as e:
        logger.error("document_invalid", path=str(headings_file), error=str(e))
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    logger.info("render_started", path=str(headings_file), headings=len(headings), indented=not flush)

    for heading in headings:
        logger.debug(
            "heading_loaded",
            title=heading.title,
            heading_level=heading.level,
            properties=heading.properties.size(),
            has_content=heading.has_content(),
        )

    writer = OrgWriter(settings)
    text = writer.white_spaced_document(headings, preface=preface, is_indented=not flush)

    click.echo(text, nl=False)

    logger.info("render_completed", path=str(headings_file), chars=len(text))


@cli.command("config-show")
@click.pass_context
def config_show(ctx: click.Context):
    """Show the effective writer settings as YAML."""
    settings = load_settings(ctx)

    data = {"writer": settings.model_dump(mode="json")}
    click.echo(yaml.safe_dump(data, sort_keys=False), nl=False)


def main():
    """Main entry point for orgscribe CLI."""
    cli(obj={})


if __name__ == "__main__":
    sys.exit(main())
