"""
Expand content shortcodes into HTML markup.

Copyright 2026, Content Shortcodes contributors
"""

import html
import itertools
import secrets
import uuid
from dataclasses import dataclass
from typing import Callable, Protocol


@dataclass(frozen=True)
class ImageRecord:
    """
    An image resolved by the image lookup service.

    :param id: Media identifier.
    :param url: Absolute or site-relative URL to the image file.
    :param alt_text: Alternate text for the image.
    :param caption: Caption text shown below the image (empty if none).
    """

    id: str
    url: str
    alt_text: str
    caption: str = ""


class ImageLookup(Protocol):
    "Resolves an image by its identifier, returning `None` if there is no such image."

    def __call__(self, image_id: str) -> ImageRecord | None: ...


class IdGenerator(Protocol):
    "Produces an HTML element identifier that starts with the given prefix."

    def __call__(self, prefix: str) -> str: ...


def no_images(image_id: str) -> ImageRecord | None:
    "An image lookup that never finds any image."

    return None


def random_id(prefix: str) -> str:
    "Generates an identifier with a random suffix, unique enough to tell apart widgets on the same page."

    return f"{prefix}-{uuid.uuid4().hex[:13]}"


class SequentialIdGenerator:
    """
    Generates predictable identifiers with an incrementing suffix, e.g. `tabs-1`, `tabs-2`.

    Counters are maintained separately for each prefix.
    """

    _counters: dict[str, "itertools.count[int]"]

    def __init__(self) -> None:
        self._counters = {}

    def __call__(self, prefix: str) -> str:
        counter = self._counters.setdefault(prefix, itertools.count(1))
        return f"{prefix}-{next(counter)}"


def random_form_token() -> str:
    "Issues a random anti-forgery token to use as the name of a hidden form field."

    return secrets.token_hex(16)


def escape_html(text: str) -> str:
    "Escapes characters with special meaning in HTML text and attribute values."

    return html.escape(text, quote=True)


DEFAULT_LABELS: dict[str, str] = {
    "NAME": "Name",
    "EMAIL": "Email",
    "MESSAGE": "Message",
    "SEND_MESSAGE": "Send Message",
}


def default_translate(key: str) -> str:
    "Looks up English text for a user interface label, falling back to the key itself."

    return DEFAULT_LABELS.get(key, key)


def same_page_url() -> str:
    "Returns an empty form action, which posts the form back to the page it is on."

    return ""


@dataclass
class RenderServices:
    """
    External collaborators that shortcode expansion relies on.

    :param image_lookup: Resolves gallery image identifiers to images.
    :param issue_form_token: Issues the anti-forgery token embedded in contact forms.
    :param escape: Escapes text injected into HTML.
    :param current_url: Returns the URL that contact forms are submitted to.
    :param translate: Maps a label key to user interface text.
    :param generate_id: Produces identifiers for stateful widgets.
    """

    image_lookup: ImageLookup = no_images
    issue_form_token: Callable[[], str] = random_form_token
    escape: Callable[[str], str] = escape_html
    current_url: Callable[[], str] = same_page_url
    translate: Callable[[str], str] = default_translate
    generate_id: IdGenerator = random_id
