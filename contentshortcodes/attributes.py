"""
Expand content shortcodes into HTML markup.

Copyright 2026, Content Shortcodes contributors
"""

import re
from collections.abc import Iterator, Mapping

_ATTRIBUTE_REGEXP = re.compile(r'(\w+)="([^"]*)"')


class AttributeMap(Mapping[str, str]):
    """
    Read-only mapping of shortcode attribute names to attribute values.

    Missing attributes are queried with `get(key, default)`.
    """

    _items: dict[str, str]

    def __init__(self, items: Mapping[str, str] | None = None) -> None:
        self._items = dict(items) if items else {}

    def __getitem__(self, key: str) -> str:
        return self._items[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Mapping):
            return self._items == dict(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(frozenset(self._items.items()))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._items!r})"


def parse_attributes(text: str) -> AttributeMap:
    """
    Extracts `key="value"` pairs from the attribute part of a shortcode tag.

    Values must be enclosed in double quotes; unquoted and single-quoted values are ignored. If a key occurs more than
    once, the last occurrence wins.

    :param text: Text between the tag keyword and the closing bracket.
    :returns: Attributes found, possibly none.
    """

    if not text:
        return AttributeMap()

    return AttributeMap({m.group(1): m.group(2) for m in _ATTRIBUTE_REGEXP.finditer(text)})
