"""Org heading model, property drawer model and writer."""

from orgscribe.org.heading import OrgHeading
from orgscribe.org.properties import OrgProperties, OrgProperty
from orgscribe.org.writer import OrgWriter

__all__ = [
    "OrgHeading",
    "OrgProperties",
    "OrgProperty",
    "OrgWriter",
]
