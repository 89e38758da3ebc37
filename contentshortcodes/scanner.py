"""
Expand content shortcodes into HTML markup.

Copyright 2026, Content Shortcodes contributors
"""

import enum
import re
from dataclasses import dataclass
from typing import Callable, Iterator

from .attributes import AttributeMap, parse_attributes


@enum.unique
class ContentModel(enum.Enum):
    "Identifies what a shortcode may enclose between its opening and closing tag."

    EMPTY = "empty"
    "Self-closing tag with no body, e.g. `[gallery images=\"1,2\"]`."

    TEXT = "text"
    "Body is plain text and stops at the first `[`, e.g. `[button]Go[/button]`."

    MARKUP = "markup"
    "Body may contain arbitrary markup including other tags, e.g. `[tabs]...[/tabs]`."


@dataclass(frozen=True)
class ShortcodeMatch:
    """
    A single occurrence of a shortcode in a text.

    :param name: Tag keyword as written in the text.
    :param text: The full text of the occurrence, from the opening bracket to the end of the closing tag.
    :param attributes: Attributes parsed from the attribute text.
    :param content: Raw (unescaped) text between the opening and closing tag, or `None` for a self-closing tag.
    :param children: Nested child tags found in the content (for compound tags such as tabs or accordion).
    """

    name: str
    text: str
    attributes: AttributeMap
    content: str | None
    children: tuple["ShortcodeMatch", ...] = ()


def _compile_pattern(keyword: str, model: ContentModel) -> re.Pattern[str]:
    escaped = re.escape(keyword)

    # keyword must be followed by whitespace or the closing bracket
    opening = rf"\[({escaped})(?:\s+([^\]]*))?\]"
    match model:
        case ContentModel.EMPTY:
            body = ""
        case ContentModel.TEXT:
            body = rf"([^\[]*)\[/{escaped}\]"
        case ContentModel.MARKUP:
            body = rf"(.*?)\[/{escaped}\]"

    return re.compile(opening + body, flags=re.IGNORECASE | re.DOTALL)


class TagScanner:
    """
    Finds all non-overlapping occurrences of a shortcode tag, scanning left to right.

    Matching is case-insensitive on the tag keyword. Nested occurrences of the same tag are not supported: the body of
    an enclosing tag ends at the first matching closing tag.
    """

    keyword: str
    model: ContentModel
    child: "TagScanner | None"
    pattern: re.Pattern[str]

    def __init__(self, keyword: str, model: ContentModel, *, child: "TagScanner | None" = None) -> None:
        """
        Creates a scanner for a shortcode tag.

        :param keyword: Tag keyword, e.g. `button`.
        :param model: What the tag may enclose.
        :param child: Scanner for nested child tags to collect from the body of each occurrence.
        """

        if child is not None and model is ContentModel.EMPTY:
            raise ValueError("expected: a tag with a body when nested child tags are to be collected")

        self.keyword = keyword
        self.model = model
        self.child = child
        self.pattern = _compile_pattern(keyword, model)

    def _to_match(self, m: re.Match[str]) -> ShortcodeMatch:
        attributes = parse_attributes(m.group(2) or "")
        content = m.group(3) if self.model is not ContentModel.EMPTY else None

        children: tuple[ShortcodeMatch, ...] = ()
        if self.child is not None and content:
            children = tuple(self.child.finditer(content))

        return ShortcodeMatch(
            name=m.group(1),
            text=m.group(0),
            attributes=attributes,
            content=content,
            children=children,
        )

    def finditer(self, text: str) -> Iterator[ShortcodeMatch]:
        "Iterates over all occurrences of the tag in the text."

        for m in self.pattern.finditer(text):
            yield self._to_match(m)

    def sub(self, repl: Callable[[ShortcodeMatch], str], text: str) -> str:
        """
        Replaces each occurrence of the tag with the string returned by a callback.

        :param repl: Produces the replacement text for an occurrence.
        :param text: Text to scan.
        :returns: Text with all occurrences replaced; the input itself if there are none.
        """

        return self.pattern.sub(lambda m: repl(self._to_match(m)), text)
