"""
Expand content shortcodes into HTML markup.

Copyright 2026, Content Shortcodes contributors
"""

import logging
from abc import abstractmethod
from typing import Callable, ClassVar

from .formatting import warning_block
from .scanner import ShortcodeMatch, TagScanner
from .services import RenderServices

LOGGER = logging.getLogger(__name__)


class ShortcodeExtension:
    """
    Expands every occurrence of one kind of shortcode in a text.

    Derived classes set the tag scanner and implement `expand`, which maps a single occurrence to HTML.
    """

    kind: ClassVar[str]
    "Human-readable name of the shortcode, used in warnings."

    scanner: ClassVar[TagScanner]
    "Finds occurrences of the shortcode."

    services: RenderServices

    def __init__(self, services: RenderServices) -> None:
        self.services = services

    def escape(self, text: str) -> str:
        return self.services.escape(text)

    def warning(self, message: str) -> str:
        "Emits a warning block in place of a shortcode that cannot be rendered."

        LOGGER.warning("%s shortcode: %s", self.kind, message)
        return warning_block(self.kind, message)

    @abstractmethod
    def expand(self, match: ShortcodeMatch) -> str:
        "Emits HTML for a single occurrence of the shortcode."
        ...

    def _replace(self, match: ShortcodeMatch) -> str:
        try:
            markup = self.expand(match)
        except Exception:
            # a failure is confined to the occurrence; the rest of the text is still processed
            LOGGER.exception("Failed to expand shortcode: %s", match.text)
            return warning_block(self.kind, "Rendering failed")

        LOGGER.debug("Expanded %s shortcode: %s", self.kind.lower(), match.text)
        return markup

    def process(self, text: str, store: Callable[[str], str] | None = None) -> str:
        """
        Replaces all occurrences of the shortcode in a text.

        :param text: Text to scan.
        :param store: Sets aside the HTML for an occurrence, and returns the text to put in its place.
        :returns: Text with each occurrence replaced by HTML (or what `store` returns); other text is left untouched.
        """

        if store is None:
            return self.scanner.sub(self._replace, text)
        return self.scanner.sub(lambda match: store(self._replace(match)), text)
