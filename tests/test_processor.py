"""
Expand content shortcodes into HTML markup.

Copyright 2026, Content Shortcodes contributors
"""

import logging
import os
import unittest
from pathlib import Path
from tempfile import TemporaryDirectory

from contentshortcodes.environment import ArgumentError
from contentshortcodes.markdown import markdown_to_html
from contentshortcodes.options import EngineConfig
from contentshortcodes.processor import Processor
from tests.utility import TypedTestCase, parse_fragment, predictable_services

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(funcName)s [%(lineno)d] - %(message)s",
)


def write_file(path: Path, text: str) -> None:
    os.makedirs(path.parent, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)


def read_file(path: Path) -> str:
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


class TestMarkdown(TypedTestCase):
    def test_shortcodes_pass_through(self) -> None:
        html = markdown_to_html('# Title\n\nSee [button url="https://example.com/a_b"]Go[/button] now.\n')
        self.assertEqual(html, '<h1>Title</h1>\n<p>See [button url="https://example.com/a_b"]Go[/button] now.</p>')


class TestProcessor(TypedTestCase):
    def setUp(self) -> None:
        self.processor = Processor(EngineConfig(), predictable_services())

    def test_markdown_document(self) -> None:
        html = self.processor.expand_document('Read **this**.\n\n[alert type="warning"]Heads up[/alert]\n', is_markdown=True)
        root = parse_fragment(html)
        self.assertEqual(root.find("p").find("strong").text, "this")
        (alert,) = root.find_class("alert-warning")
        self.assertEqual(alert.text, "Heads up")

    def test_markdown_attributes(self) -> None:
        html = self.processor.expand_document('[button url="/s?a=1&b=2"]Tom & Jerry[/button]', is_markdown=True)
        self.assertEqual(html, '<p><a href="/s?a=1&amp;b=2" class="btn btn-primary" target="_self">Tom &amp; Jerry</a></p>')

        html = self.processor.expand_document('[countdown date="2030-01-01" message="Done <3"]', is_markdown=True)
        self.assertTrue(html.startswith('<div id="countdown-1" class="content-shortcodes-countdown" '))
        self.assertIn('data-message="Done &lt;3"', html)
        self.assertNotIn("&amp;lt;", html)

    def test_markdown_blocks(self) -> None:
        text = 'Intro\n\n[tabs]\n[tab title="*New* items"]\nFirst\n[/tab]\n[/tabs]\n\n[contact_form]\n\nOutro\n'
        html = self.processor.expand_document(text, is_markdown=True)
        self.assertTrue(html.startswith('<p>Intro</p>\n<div class="content-shortcodes-tabs"><ul '))
        self.assertTrue(html.endswith("</form>\n<p>Outro</p>"))
        self.assertNotIn("<p><div", html)
        self.assertNotIn("<p><form", html)

        root = parse_fragment(html)
        (nav_link,) = root.find_class("nav-link")
        self.assertEqual(nav_link.text, "*New* items")
        self.assertNotIn("<em>", html)

    def test_markdown_nested(self) -> None:
        html = self.processor.expand_document('Text\n\n[alert][button url="/x"]Go[/button][/alert]\n', is_markdown=True)
        self.assertEqual(
            html,
            '<p>Text</p>\n<div class="alert alert-info alert-dismissible fade show" role="alert">'
            '<a href="/x" class="btn btn-primary" target="_self">Go</a>'
            '<button type="button" class="btn-close" data-bs-dismiss="alert" aria-label="Close"></button></div>',
        )

    def test_markdown_code(self) -> None:
        html = self.processor.expand_document("```\n[button]Go[/button]\n```\n", is_markdown=True)
        self.assertIn("[button]Go[/button]", html)
        self.assertNotIn("btn-primary", html)

    def test_html_document(self) -> None:
        text = '<p>**kept**</p>\n[button url="/x"]Go[/button]'
        html = self.processor.expand_document(text, is_markdown=False)
        self.assertEqual(html, '<p>**kept**</p>\n<a href="/x" class="btn btn-primary" target="_self">Go</a>')

    def test_front_matter(self) -> None:
        text = "---\nshortcodes:\n  enable_buttons: false\n---\n<p>[button]Go[/button] [countdown date=\"2030-01-01\"]</p>"
        html = self.processor.expand_document(text, is_markdown=False)
        self.assertTrue(html.startswith("<p>[button]Go[/button] <div "))
        self.assertIn('data-target="2030-01-01 00:00:00"', html)
        self.assertNotIn("shortcodes:", html)

    def test_front_matter_enables(self) -> None:
        processor = Processor(EngineConfig(enable_buttons=False), predictable_services())
        text = "<!--\nshortcodes:\n  enable_buttons: true\n-->\n[button]Go[/button]"
        html = processor.expand_document(text, is_markdown=False)
        self.assertEqual(html, '<a href="#" class="btn btn-primary" target="_self">Go</a>')

    def test_file_beside_source(self) -> None:
        with TemporaryDirectory() as temp_dir:
            source = Path(temp_dir) / "page.md"
            write_file(source, '[button url="/x"]Go[/button]\n')

            (out_path,) = self.processor.process(source)
            self.assertEqual(out_path, Path(temp_dir) / "page.html")
            self.assertEqual(read_file(out_path), '<p><a href="/x" class="btn btn-primary" target="_self">Go</a></p>')

    def test_html_overwrite(self) -> None:
        with TemporaryDirectory() as temp_dir:
            source = Path(temp_dir) / "page.html"
            write_file(source, "<p>Text</p>")
            with self.assertRaises(ArgumentError):
                self.processor.process(source)
            self.assertEqual(read_file(source), "<p>Text</p>")

    def test_missing(self) -> None:
        with TemporaryDirectory() as temp_dir:
            with self.assertRaises(ArgumentError):
                self.processor.process(Path(temp_dir) / "missing.md")

    def test_directory(self) -> None:
        with TemporaryDirectory() as temp_dir:
            root_dir = Path(temp_dir) / "site"
            out_dir = root_dir / "out"
            write_file(root_dir / "index.md", "# Home\n")
            write_file(root_dir / "blog" / "post.markdown", "[alert]New[/alert]\n")
            write_file(root_dir / "blog" / "legacy.htm", '<p>[gallery images="5"]</p>')
            write_file(root_dir / "notes.txt", "[alert]Not a document[/alert]")
            write_file(root_dir / ".drafts" / "draft.md", "Draft\n")
            write_file(out_dir / "stale.md", "Stale\n")

            processor = Processor(EngineConfig(), predictable_services(), out_dir=out_dir)
            out_paths = processor.process(root_dir)

            self.assertListEqual(
                sorted(path.relative_to(out_dir).as_posix() for path in out_paths),
                ["blog/legacy.html", "blog/post.html", "index.html"],
            )
            self.assertEqual(read_file(out_dir / "index.html"), "<h1>Home</h1>")
            self.assertIn('<img src="/media/five.jpg" alt="Five" class="img-fluid">', read_file(out_dir / "blog" / "legacy.html"))
            self.assertFalse((out_dir / "stale.html").exists())
            self.assertFalse((out_dir / ".drafts").exists())
            self.assertFalse((root_dir / "index.html").exists())

    def test_directory_rerun(self) -> None:
        with TemporaryDirectory() as temp_dir:
            root_dir = Path(temp_dir)
            write_file(root_dir / "page.md", '[button url="/x"]Go[/button]\n')
            write_file(root_dir / "docs" / "legacy.htm", "<p>[alert]Old[/alert]</p>")

            first = self.processor.process(root_dir)
            self.assertListEqual(
                sorted(path.relative_to(root_dir.resolve()).as_posix() for path in first),
                ["docs/legacy.html", "page.html"],
            )
            html = read_file(root_dir / "page.html")

            # generated files are not taken as sources on a subsequent run
            second = self.processor.process(root_dir)
            self.assertListEqual(sorted(second), sorted(first))
            self.assertEqual(read_file(root_dir / "page.html"), html)

    def test_directory_conflict(self) -> None:
        with TemporaryDirectory() as temp_dir:
            root_dir = Path(temp_dir)
            write_file(root_dir / "about.htm", "<p>About</p>")
            write_file(root_dir / "about.md", "About\n")
            write_file(root_dir / "index.md", "Home\n")

            with self.assertRaises(ArgumentError):
                self.processor.process(root_dir)
            self.assertFalse((root_dir / "about.html").exists())
            self.assertFalse((root_dir / "index.html").exists())


if __name__ == "__main__":
    unittest.main()
