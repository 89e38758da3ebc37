"""
Expand content shortcodes into HTML markup.

Copyright 2026, Content Shortcodes contributors
"""

from dataclasses import dataclass

from .extension import ShortcodeExtension
from .extra import override
from .formatting import active_class, join_classes
from .scanner import ContentModel, ShortcodeMatch, TagScanner


@dataclass(frozen=True)
class Section:
    """
    A titled child of a compound shortcode, i.e. a single tab or accordion item.

    :param title: Title text (unescaped).
    :param body: Body markup (passed through as is).
    """

    title: str
    body: str


def _sections(match: ShortcodeMatch) -> list[Section]:
    "Collects children that have a non-empty title."

    sections: list[Section] = []
    for child in match.children:
        title = child.attributes.get("title", "")
        if title:
            sections.append(Section(title, child.content or ""))
    return sections


class TabsExtension(ShortcodeExtension):
    """
    Expands `[tabs][tab title="..."]...[/tab][/tabs]` into a tab navigation bar and tab panes.

    The first tab is active. Tab identifiers are `{id}-tab-{index}`, where `id` is generated for the tab container
    and `index` counts from zero.
    """

    kind = "Tabs"
    scanner = TagScanner("tabs", ContentModel.MARKUP, child=TagScanner("tab", ContentModel.MARKUP))

    @override
    def expand(self, match: ShortcodeMatch) -> str:
        extra_class = match.attributes.get("class", "")

        sections = _sections(match)
        if not sections:
            return self.warning("No valid tabs found")

        tabs_id = self.escape(self.services.generate_id("tabs"))
        tabs_class = join_classes("content-shortcodes-tabs", extra_class)

        nav = f'<ul class="nav nav-tabs" id="{tabs_id}-nav" role="tablist">'
        panes = f'<div class="tab-content" id="{tabs_id}-content">'
        for index, section in enumerate(sections):
            tab_id = f"{tabs_id}-tab-{index}"
            active = active_class(index, "active")

            nav += '<li class="nav-item" role="presentation">'
            nav += (
                f'<button class="{join_classes("nav-link", active)}" id="{tab_id}-tab" data-bs-toggle="tab" '
                f'data-bs-target="#{tab_id}" type="button" role="tab">'
            )
            nav += self.escape(section.title)
            nav += "</button></li>"

            pane_class = join_classes("tab-pane fade", active, active_class(index, "show"))
            panes += f'<div class="{pane_class}" id="{tab_id}" role="tabpanel">{section.body}</div>'
        nav += "</ul>"
        panes += "</div>"

        return f'<div class="{self.escape(tabs_class)}">{nav}{panes}</div>'


class AccordionExtension(ShortcodeExtension):
    """
    Expands `[accordion][item title="..."]...[/item][/accordion]` into collapsible panels.

    The first item is expanded, all others are collapsed. Item identifiers are `{id}-item-{index}`.
    """

    kind = "Accordion"
    scanner = TagScanner("accordion", ContentModel.MARKUP, child=TagScanner("item", ContentModel.MARKUP))

    @override
    def expand(self, match: ShortcodeMatch) -> str:
        extra_class = match.attributes.get("class", "")

        sections = _sections(match)
        if not sections:
            return self.warning("No valid items found")

        accordion_id = self.escape(self.services.generate_id("accordion"))
        accordion_class = join_classes("content-shortcodes-accordion accordion", extra_class)

        html = f'<div class="{self.escape(accordion_class)}" id="{accordion_id}">'
        for index, section in enumerate(sections):
            item_id = f"{accordion_id}-item-{index}"
            button_class = join_classes("accordion-button", "" if index == 0 else "collapsed")
            collapse_class = join_classes("accordion-collapse collapse", active_class(index, "show"))

            html += '<div class="accordion-item">'
            html += f'<h2 class="accordion-header" id="heading-{item_id}">'
            html += f'<button class="{button_class}" type="button" data-bs-toggle="collapse" data-bs-target="#{item_id}">'
            html += self.escape(section.title)
            html += "</button></h2>"
            html += f'<div id="{item_id}" class="{collapse_class}" data-bs-parent="#{accordion_id}">'
            html += f'<div class="accordion-body">{section.body}</div>'
            html += "</div></div>"
        html += "</div>"

        return html
