"""Org heading model.

A heading is the title line plus everything that belongs to it: planning
times, property drawer, logbook and the free-text body. Planning times are
stored as already formatted strings, e.g. ``"<2024-03-01 Fri>"``.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from orgscribe.org.properties import OrgProperties


@dataclass
class OrgHeading:
    """Single Org heading with its metadata and body.

    Attributes:
        title: Heading title (without stars, state, priority or tags)
        level: Depth, 1 for top-level headings
        state: Todo keyword such as "TODO" or "DONE"
        priority: Priority letter without brackets, e.g. "A"
        tags: Tags in display order
        closed: Formatted CLOSED timestamp
        deadline: Formatted DEADLINE timestamp
        scheduled: Formatted SCHEDULED timestamp
        clock: Formatted CLOCK entry
        properties: Property drawer entries
        logbook: Raw lines of the LOGBOOK drawer
        content: Body text, possibly multi-line
    """

    title: str
    level: int = 1
    state: Optional[str] = None
    priority: Optional[str] = None
    tags: list[str] = field(default_factory=list)
    closed: Optional[str] = None
    deadline: Optional[str] = None
    scheduled: Optional[str] = None
    clock: Optional[str] = None
    properties: OrgProperties = field(default_factory=OrgProperties)
    logbook: list[str] = field(default_factory=list)
    content: Optional[str] = None

    def has_tags(self) -> bool:
        return bool(self.tags)

    def has_closed(self) -> bool:
        return bool(self.closed)

    def has_deadline(self) -> bool:
        return bool(self.deadline)

    def has_scheduled(self) -> bool:
        return bool(self.scheduled)

    def has_clock(self) -> bool:
        return bool(self.clock)

    def has_properties(self) -> bool:
        return not self.properties.is_empty()

    def has_logbook(self) -> bool:
        return bool(self.logbook)

    def has_content(self) -> bool:
        return bool(self.content)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "OrgHeading":
        """Build a heading from a plain mapping (e.g. loaded from YAML).

        Properties may be given as a list of ``[name, value]`` pairs or
        single-entry mappings, which keeps duplicates and order, or as a
        plain mapping.

        Args:
            data: Mapping with at least a "title" key

        Returns:
            OrgHeading instance

        Raises:
            ValueError: If the mapping is malformed

        Examples:
            >>> heading = OrgHeading.from_dict({
            ...     "title": "Foo",
            ...     "properties": [["ID", "1"], {"tags+": "x"}],
            ... })
            >>> heading.properties.get("tags")
            'x'
        """
        if not isinstance(data, dict):
            raise ValueError(f"Heading must be a mapping, got {type(data).__name__}")

        if "title" not in data:
            raise ValueError("Heading is missing required key: title")

        unknown = set(data) - _HEADING_KEYS
        if unknown:
            raise ValueError(f"Unknown heading keys: {', '.join(sorted(unknown))}")

        level = data.get("level", 1)
        if not isinstance(level, int) or isinstance(level, bool) or level < 1:
            raise ValueError(f"Heading level must be a positive integer, got {level!r}")

        tags = data.get("tags") or []
        if isinstance(tags, str):
            tags = [tags]

        logbook = data.get("logbook") or []
        if isinstance(logbook, str):
            logbook = logbook.split("\n")

        return cls(
            title=_as_str(data["title"]),
            level=level,
            state=_optional_str(data.get("state")),
            priority=_optional_str(data.get("priority")),
            tags=[_as_str(tag) for tag in tags],
            closed=_optional_str(data.get("closed")),
            deadline=_optional_str(data.get("deadline")),
            scheduled=_optional_str(data.get("scheduled")),
            clock=_optional_str(data.get("clock")),
            properties=_properties_from(data.get("properties")),
            logbook=[_as_str(line) for line in logbook],
            content=_optional_str(data.get("content")),
        )


_HEADING_KEYS = {
    "title", "level", "state", "priority", "tags",
    "closed", "deadline", "scheduled", "clock",
    "properties", "logbook", "content",
}


def _as_str(value: Any) -> str:
    # YAML turns unquoted values like 1 or yes into int/bool
    if value is None:
        return ""
    if isinstance(value, bool):
        return "t" if value else "nil"
    return str(value)


def _optional_str(value: Any) -> Optional[str]:
    return None if value is None else _as_str(value)


def _properties_from(raw: Any) -> OrgProperties:
    properties = OrgProperties()

    if raw is None:
        return properties

    if isinstance(raw, dict):
        items = list(raw.items())
    elif isinstance(raw, list):
        items = []
        for entry in raw:
            if isinstance(entry, dict) and len(entry) == 1:
                items.extend(entry.items())
            elif isinstance(entry, (list, tuple)) and len(entry) == 2:
                items.append((entry[0], entry[1]))
            else:
                raise ValueError(
                    f"Property must be a [name, value] pair or a single-entry mapping, got {entry!r}"
                )
    else:
        raise ValueError(f"Properties must be a list or mapping, got {type(raw).__name__}")

    for name, value in items:
        properties.put(_as_str(name), _as_str(value))

    return properties
