"""
Expand content shortcodes into HTML markup.

Copyright 2026, Content Shortcodes contributors
"""

import logging
import unittest

from contentshortcodes.compound import AccordionExtension, TabsExtension
from tests.utility import TypedTestCase, class_names, parse_fragment, predictable_services

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(funcName)s [%(lineno)d] - %(message)s",
)


class TestTabs(TypedTestCase):
    def setUp(self) -> None:
        self.extension = TabsExtension(predictable_services())

    def test_tabs(self) -> None:
        self.assertEqual(
            self.extension.process('[tabs][tab title="A"]one[/tab][tab title="B"]two[/tab][/tabs]'),
            '<div class="content-shortcodes-tabs">'
            '<ul class="nav nav-tabs" id="tabs-1-nav" role="tablist">'
            '<li class="nav-item" role="presentation">'
            '<button class="nav-link active" id="tabs-1-tab-0-tab" data-bs-toggle="tab" data-bs-target="#tabs-1-tab-0" type="button" role="tab">A</button>'
            "</li>"
            '<li class="nav-item" role="presentation">'
            '<button class="nav-link" id="tabs-1-tab-1-tab" data-bs-toggle="tab" data-bs-target="#tabs-1-tab-1" type="button" role="tab">B</button>'
            "</li>"
            "</ul>"
            '<div class="tab-content" id="tabs-1-content">'
            '<div class="tab-pane fade active show" id="tabs-1-tab-0" role="tabpanel">one</div>'
            '<div class="tab-pane fade" id="tabs-1-tab-1" role="tabpanel">two</div>'
            "</div>"
            "</div>",
        )

    def test_structure(self) -> None:
        text = '<h2>Options</h2>\n[tabs class="mt-3"]\n[tab title="Q &amp; A"]<p>Ask <em>anything</em></p>[/tab]\n[tab title="Three"]\n3\n[/tab]\n[tab title="B"]two[/tab]\n[/tabs]\n<p>End</p>'
        html = self.extension.process(text)
        self.assertTrue(html.startswith("<h2>Options</h2>\n<div "))
        self.assertTrue(html.endswith("</div>\n<p>End</p>"))

        root = parse_fragment(html)
        (container,) = root.find_class("content-shortcodes-tabs")
        self.assertListEqual(class_names(container), ["content-shortcodes-tabs", "mt-3"])

        buttons = container.find_class("nav-link")
        panes = container.find_class("tab-pane")
        self.assertEqual(len(buttons), 3)
        self.assertEqual(len(panes), 3)
        self.assertIn("active", class_names(buttons[0]))
        self.assertNotIn("active", class_names(buttons[1]))
        self.assertIn("show", class_names(panes[0]))
        self.assertNotIn("show", class_names(panes[2]))

        # title is escaped, body is passed through
        self.assertEqual(buttons[0].text, "Q &amp; A")
        self.assertEqual(panes[0].find("p").find("em").text, "anything")

        for button, pane in zip(buttons, panes):
            self.assertEqual(button.get("data-bs-target"), f"#{pane.get('id')}")

    def test_invalid_tabs(self) -> None:
        for text in ["[tabs][/tabs]", "[tabs]just text[/tabs]", '[tabs][tab title=""]x[/tab][tab]y[/tab][/tabs]']:
            with self.subTest(text=text):
                self.assertEqual(
                    self.extension.process(text),
                    '<div class="alert alert-warning">Tabs shortcode: No valid tabs found</div>',
                )

    def test_untitled_tab_skipped(self) -> None:
        root = parse_fragment(self.extension.process('[tabs][tab]x[/tab][tab title="Only"]y[/tab][/tabs]'))
        buttons = root.find_class("nav-link")
        self.assertEqual(len(buttons), 1)
        self.assertEqual(buttons[0].get("id"), "tabs-1-tab-0-tab")

    def test_unterminated(self) -> None:
        text = '[tabs][tab title="A"]one[/tab]'
        self.assertEqual(self.extension.process(text), text)


class TestAccordion(TypedTestCase):
    def setUp(self) -> None:
        self.extension = AccordionExtension(predictable_services())

    def test_accordion(self) -> None:
        self.assertEqual(
            self.extension.process('[accordion class="faq"][item title="Why?"]Because.[/item][item title="How?"]<b>So</b>[/item][/accordion]'),
            '<div class="content-shortcodes-accordion accordion faq" id="accordion-1">'
            '<div class="accordion-item">'
            '<h2 class="accordion-header" id="heading-accordion-1-item-0">'
            '<button class="accordion-button" type="button" data-bs-toggle="collapse" data-bs-target="#accordion-1-item-0">Why?</button>'
            "</h2>"
            '<div id="accordion-1-item-0" class="accordion-collapse collapse show" data-bs-parent="#accordion-1">'
            '<div class="accordion-body">Because.</div>'
            "</div>"
            "</div>"
            '<div class="accordion-item">'
            '<h2 class="accordion-header" id="heading-accordion-1-item-1">'
            '<button class="accordion-button collapsed" type="button" data-bs-toggle="collapse" data-bs-target="#accordion-1-item-1">How?</button>'
            "</h2>"
            '<div id="accordion-1-item-1" class="accordion-collapse collapse" data-bs-parent="#accordion-1">'
            '<div class="accordion-body"><b>So</b></div>'
            "</div>"
            "</div>"
            "</div>",
        )

    def test_no_items(self) -> None:
        with self.assertLogs("contentshortcodes.extension", level=logging.WARNING):
            html = self.extension.process("[accordion]\n[tab title=\"A\"]x[/tab]\n[/accordion]")
        self.assertEqual(html, '<div class="alert alert-warning">Accordion shortcode: No valid items found</div>')

    def test_multiline(self) -> None:
        text = "[ACCORDION]\n[Item title=\"One\"]\nfirst\n[/item]\n[item title=\"Two\"]second[/ITEM]\n[/accordion]"
        root = parse_fragment(self.extension.process(text))
        bodies = [body.text for body in root.find_class("accordion-body")]
        self.assertListEqual(bodies, ["\nfirst\n", "second"])


if __name__ == "__main__":
    unittest.main()
