"""
Expand content shortcodes into HTML markup.

Copyright 2026, Content Shortcodes contributors
"""

import unittest
from collections.abc import Container, Iterable
from typing import TypeVar

import lxml.html

from contentshortcodes.services import ImageRecord, RenderServices, SequentialIdGenerator

T = TypeVar("T")

HtmlElement = lxml.html.HtmlElement


class TypedTestCase(unittest.TestCase):
    def assertEqual(self, first: T, second: T, msg: str | None = None) -> None:
        super().assertEqual(first, second, msg)

    def assertNotEqual(self, first: T, second: T, msg: str | None = None) -> None:
        super().assertNotEqual(first, second, msg)

    def assertIn(self, member: T, container: Iterable[T] | Container[T], msg: str | None = None) -> None:
        super().assertIn(member, container, msg)

    def assertNotIn(self, member: T, container: Iterable[T] | Container[T], msg: str | None = None) -> None:
        super().assertNotIn(member, container, msg)

    def assertListEqual(self, list1: list[T], list2: list[T], msg: str | None = None) -> None:
        super().assertListEqual(list1, list2, msg=msg)


def parse_fragment(text: str) -> HtmlElement:
    "Parses an HTML fragment, wrapping it in a `<div>` element."

    return lxml.html.fragment_fromstring(text, create_parent="div")


def class_names(element: HtmlElement) -> list[str]:
    "Returns the list of class names in the `class` attribute of an element."

    return (element.get("class") or "").split()


IMAGES: dict[str, ImageRecord] = {
    "5": ImageRecord(id="5", url="/media/five.jpg", alt_text="Five", caption='A "caption"'),
    "7": ImageRecord(id="7", url="/media/seven.jpg", alt_text="Seven & more"),
}


def lookup_image(image_id: str) -> ImageRecord | None:
    return IMAGES.get(image_id)


def predictable_services() -> RenderServices:
    "Services that produce the same output on each run."

    return RenderServices(
        image_lookup=lookup_image,
        issue_form_token=lambda: "0123456789abcdef",
        current_url=lambda: "https://example.com/contact?page=1&lang=en",
        generate_id=SequentialIdGenerator(),
    )
