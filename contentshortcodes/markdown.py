"""
Expand content shortcodes into HTML markup.

Copyright 2026, Content Shortcodes contributors
"""

import re

import markdown
from markdown.extensions import Extension
from markdown.preprocessors import Preprocessor
from markdown.util import HTML_PLACEHOLDER_RE

from .engine import ShortcodeEngine
from .extra import override


class ShortcodePreprocessor(Preprocessor):
    """
    Expands shortcodes in Markdown source before it is parsed.

    The HTML produced for each occurrence is kept in the HTML stash, and a placeholder takes its place in the source.
    Markdown thus leaves attribute values and generated markup intact, and an occurrence that makes up a paragraph
    on its own is restored as a block without an enclosing `<p>`.
    """

    engine: ShortcodeEngine

    def __init__(self, md: markdown.Markdown, engine: ShortcodeEngine) -> None:
        super().__init__(md)
        self.engine = engine

    def _restore(self, match: re.Match[str]) -> str:
        return str(self.md.htmlStash.rawHtmlBlocks[int(match.group(1))])

    def _store(self, html: str) -> str:
        # markup of an enclosing tag may hold placeholders of tags expanded in an earlier stage
        html = HTML_PLACEHOLDER_RE.sub(self._restore, html)
        return self.md.htmlStash.store(html)

    @override
    def run(self, lines: list[str]) -> list[str]:
        text = self.engine.expand("\n".join(lines), store=self._store)
        return text.split("\n")


class ShortcodeMarkdownExtension(Extension):
    "Registers the shortcode preprocessor with Python-Markdown."

    engine: ShortcodeEngine

    def __init__(self, engine: ShortcodeEngine) -> None:
        super().__init__()
        self.engine = engine

    @override
    def extendMarkdown(self, md: markdown.Markdown) -> None:
        # after whitespace normalization and fenced code blocks, before raw HTML blocks
        md.preprocessors.register(ShortcodePreprocessor(md, self.engine), "content_shortcodes", 22)


def _create_converter(engine: ShortcodeEngine | None) -> markdown.Markdown:
    extensions: list[str | Extension] = [
        "admonition",
        "footnotes",
        "markdown.extensions.tables",
        "md_in_html",
        "pymdownx.highlight",  # required by `pymdownx.superfences`
        "pymdownx.superfences",
        "pymdownx.tilde",
        "sane_lists",
    ]
    if engine is not None:
        extensions.append(ShortcodeMarkdownExtension(engine))

    # no auto-linking extensions: URLs in text must stay plain text
    return markdown.Markdown(
        extensions=extensions,
        extension_configs={
            "footnotes": {"BACKLINK_TITLE": ""},
            "pymdownx.highlight": {
                "use_pygments": False,
            },
        },
    )


def markdown_to_html(content: str, engine: ShortcodeEngine | None = None) -> str:
    """
    Converts a Markdown document into HTML with Python-Markdown.

    When an engine is given, shortcodes are expanded before Markdown parsing, and the text inside shortcode
    attributes and bodies is not subject to Markdown formatting. Otherwise, shortcodes pass through as plain text.

    :param content: Markdown input as a string.
    :param engine: Shortcode engine to expand shortcodes with.
    :returns: HTML output as a string.
    :see: https://python-markdown.github.io/
    """

    return _create_converter(engine).convert(content)
