"""Org property drawer model with support for appending properties.

Properties are kept twice:

- an ordered log of every ``put`` (duplicates included), used when writing
  the drawer back out so that it round-trips exactly
- a merged view keyed by canonical name, used for lookups

A name with a trailing ``+`` (``tags+``) appends its value to the property
of the same name without the ``+``:

    :PROPERTIES:
    :var:      foo=1
    :var+:     bar=2
    :END:

gives ``get("var") == "foo=1 bar=2"``.
"""

from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass(frozen=True)
class OrgProperty:
    """Single property drawer entry, exactly as it was added.

    Attributes:
        name: Property name, possibly with an appending ``+`` suffix
        value: Property value (unmerged)
    """

    name: str
    value: str


def _canonical_name(name: str) -> Optional[str]:
    """Return the name an appending property refers to, or None.

    A bare ``+`` is an ordinary name.
    """
    if len(name) > 1 and name.endswith("+"):
        return name[:-1]
    return None


class OrgProperties:
    """Ordered property log plus merged values by canonical name.

    IMPORTANT: get_all() returns entries in insertion order with duplicates.
    The merged values are derived from the log as entries are added and are
    never used for writing.

    Example:
        >>> props = OrgProperties()
        >>> props.put("a", "x")
        >>> props.put("a+", "y")
        >>> props.get("a")
        'x y'
        >>> [p.name for p in props.get_all()]
        ['a', 'a+']
    """

    def __init__(self):
        # Every property, in insertion order
        self._list: list[OrgProperty] = []

        # Full values by canonical name (no + suffix)
        self._values: dict[str, str] = {}

        # Appending names ever used, mapped to their canonical name
        self._appending_keys: dict[str, str] = {}

    def put(self, name: str, value: str) -> None:
        """Add a property.

        The entry is always appended to the log. An appending name
        (``name+``) extends the merged value of its canonical name with a
        space separator; any other name overwrites the merged value.

        Args:
            name: Property name
            value: Property value
        """
        self._list.append(OrgProperty(name, value))

        real_name = _canonical_name(name)

        if real_name is None:
            self._values[name] = value
            return

        self._appending_keys[name] = real_name

        prev_value = self._values.get(real_name)
        if prev_value:
            value = f"{prev_value} {value}"

        self._values[real_name] = value

    def remove(self, name: str) -> None:
        """Remove a property and all of its appending entries.

        Does nothing if there is no merged value for ``name``.

        Args:
            name: Canonical property name
        """
        if name is None or not self.contains_key(name):
            return

        appending_name = name + "+"
        self._list = [
            prop for prop in self._list
            if prop.name != name and prop.name != appending_name
        ]

        del self._values[name]

    def get_all(self) -> list[OrgProperty]:
        """Return all entries in insertion order, duplicates included."""
        return self._list

    def get_at(self, index: int) -> OrgProperty:
        """Return the entry at ``index`` in the log.

        Raises:
            IndexError: If index is out of range
        """
        return self._list[index]

    def get(self, name: str) -> Optional[str]:
        """Return the merged value of a property.

        Appending names resolve to their canonical name, so ``get("a+")``
        and ``get("a")`` return the same value once ``a+`` has been used.

        Args:
            name: Property name (canonical or appending)

        Returns:
            Merged value, or None if the property is not set
        """
        real_name = self._appending_keys.get(name, name)
        return self._values.get(real_name)

    def contains_key(self, name: str) -> bool:
        return name in self._values

    def size(self) -> int:
        return len(self._list)

    def is_empty(self) -> bool:
        return self.size() == 0

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[OrgProperty]:
        return iter(self._list)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.contains_key(name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrgProperties):
            return NotImplemented
        return self._list == other._list

    def __repr__(self) -> str:
        entries = ", ".join(f"{p.name}={p.value!r}" for p in self._list)
        return f"OrgProperties({entries})"
