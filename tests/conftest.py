"""Shared test fixtures for all test modules."""

import os

import pytest

from orgscribe.models.config import WriterSettings
from orgscribe.org.writer import OrgWriter


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """
    Point HOME at a temporary directory and clear ORGSCRIBE_* variables.

    Keeps tests from reading the developer's config file or writing logs
    into their cache directory.
    """
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))

    for name in list(os.environ):
        if name.startswith("ORGSCRIBE_"):
            monkeypatch.delenv(name)

    return home


@pytest.fixture
def writer():
    """Writer with default settings."""
    return OrgWriter(WriterSettings.basic())


@pytest.fixture
def plain_writer():
    """Writer with single-space property format and no blank-line separation."""
    return OrgWriter(WriterSettings(
        property_format="%s %s",
        separate_header_and_content_with_new_line=False,
        separate_notes_with_new_line="never",
    ))
