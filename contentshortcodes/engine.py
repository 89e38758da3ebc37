"""
Expand content shortcodes into HTML markup.

Copyright 2026, Content Shortcodes contributors
"""

import logging
from typing import Callable

from .compound import AccordionExtension, TabsExtension
from .contact import ContactFormExtension
from .countdown import CountdownExtension
from .extension import ShortcodeExtension
from .gallery import GalleryExtension
from .options import EngineConfig
from .services import RenderServices
from .widgets import AlertExtension, ButtonExtension

LOGGER = logging.getLogger(__name__)

# Order matters: later stages see text already transformed by earlier stages. In particular, buttons are expanded
# before alerts such that an alert may wrap a button.
STAGES: list[tuple[Callable[[EngineConfig], bool], type[ShortcodeExtension]]] = [
    (lambda config: config.enable_buttons, ButtonExtension),
    (lambda config: config.enable_alerts, AlertExtension),
    (lambda config: config.enable_gallery, GalleryExtension),
    (lambda config: config.enable_tabs, TabsExtension),
    (lambda config: config.enable_accordion, AccordionExtension),
    (lambda config: config.enable_countdown, CountdownExtension),
    (lambda config: config.enable_contact_form, ContactFormExtension),
]


class ShortcodeEngine:
    """
    Expands shortcodes in a text by applying one stage per kind of shortcode in a fixed order.

    Each stage rescans the whole text as produced by the previous stage. Stages disabled in the configuration are
    skipped, and their tags are left as literal text.
    """

    config: EngineConfig
    services: RenderServices
    extensions: list[ShortcodeExtension]

    def __init__(self, config: EngineConfig | None = None, services: RenderServices | None = None) -> None:
        """
        Initializes a new engine instance.

        :param config: Determines which kinds of shortcode are expanded (all by default).
        :param services: External collaborators such as image lookup (defaults that need no outside resources if omitted).
        """

        self.config = config or EngineConfig()
        self.services = services or RenderServices()
        self.extensions = [extension_type(self.services) for is_enabled, extension_type in STAGES if is_enabled(self.config)]
        LOGGER.debug("Enabled shortcodes: %s", ", ".join(extension.kind for extension in self.extensions))

    def expand(self, text: str, *, store: Callable[[str], str] | None = None) -> str:
        """
        Replaces all shortcodes of enabled kinds in a text with HTML.

        :param text: Content text, possibly with shortcodes.
        :param store: Sets aside the HTML for each occurrence, and returns the text to put in its place.
        :returns: Text with shortcodes expanded; text outside of shortcodes is left unchanged.
        """

        if not text:
            return text

        for extension in self.extensions:
            text = extension.process(text, store)
        return text


def expand_shortcodes(text: str, config: EngineConfig | None = None, services: RenderServices | None = None) -> str:
    "Expands shortcodes in a text with a single-use engine."

    return ShortcodeEngine(config, services).expand(text)
