"""
Expand content shortcodes into HTML markup.

Copyright 2026, Content Shortcodes contributors
"""

import logging
import re
import typing
from dataclasses import dataclass

import yaml

from .options import EngineOverrides
from .serializer import JsonType, json_to_object

LOGGER = logging.getLogger(__name__)


def extract_value(expr: re.Pattern[str], text: str) -> tuple[str | None, str]:
    """
    Extracts the value captured by the first group in a regular expression.

    :returns: A tuple of (1) the value extracted and (2) remaining text without the captured text.
    """

    if expr.groups != 1:
        raise ValueError("expected: a single group whose value to extract")

    class _Matcher:
        value: str | None = None

        def __call__(self, match: re.Match[str]) -> str:
            self.value = match.group(1)
            return ""

    matcher = _Matcher()
    text = expr.sub(matcher, text, count=1)
    return matcher.value, text


_FRONT_MATTER_REGEXP = re.compile(r"\A---\n(.+?)^---\n", flags=re.DOTALL | re.MULTILINE)
_FRONT_COMMENT_REGEXP = re.compile(r"\A<!--\n(.+?)^-->\n", flags=re.DOTALL | re.MULTILINE)


def extract_frontmatter_json(text: str) -> tuple[dict[str, JsonType] | None, str]:
    """
    Extracts the front-matter from a document into a dictionary.

    Front-matter is a YAML block at the very beginning of the document, enclosed either in lines of `---` or in an
    HTML comment.

    :returns: A tuple of (1) the front-matter data, if any, and (2) the document text without the front-matter.
    """

    block, remaining = extract_value(_FRONT_MATTER_REGEXP, text)
    if block is None:
        block, remaining = extract_value(_FRONT_COMMENT_REGEXP, text)
    if block is None:
        return None, text

    try:
        data = yaml.safe_load(block)
    except yaml.YAMLError as exc:
        # an HTML comment at the top of a page need not be front-matter
        LOGGER.warning("Ignoring malformed front-matter: %s", exc)
        return None, text

    if not isinstance(data, dict):
        return None, text
    return typing.cast(dict[str, JsonType], data), remaining


@dataclass
class DocumentProperties:
    """
    Properties extracted from the front-matter of a document.

    :param shortcodes: Changes to which kinds of shortcode are expanded in this document.
    """

    shortcodes: EngineOverrides | None = None


def extract_document_properties(text: str) -> tuple[DocumentProperties | None, str]:
    """
    Extracts document properties from front-matter.

    Keys that are not recognized are ignored.

    :returns: A tuple of (1) properties, if the document has front-matter, and (2) the document text without the front-matter.
    """

    data, text = extract_frontmatter_json(text)
    if data is None:
        return None, text
    return json_to_object(DocumentProperties, data), text
