"""
Expand content shortcodes into HTML markup.

Copyright 2026, Content Shortcodes contributors
"""

import logging
import os
from pathlib import Path

from .engine import ShortcodeEngine
from .environment import ArgumentError
from .frontmatter import extract_document_properties
from .markdown import markdown_to_html
from .options import EngineConfig
from .services import RenderServices

LOGGER = logging.getLogger(__name__)

MARKDOWN_EXTENSIONS = (".md", ".markdown")
HTML_EXTENSIONS = (".html", ".htm")


class Processor:
    """
    Expands shortcodes in a single document or a directory of documents, and saves the result as HTML files.

    Markdown documents are converted to HTML, with shortcodes expanded as part of the conversion. HTML documents are
    expanded as is.
    """

    config: EngineConfig
    services: RenderServices
    out_dir: Path | None

    def __init__(self, config: EngineConfig, services: RenderServices, *, out_dir: Path | None = None) -> None:
        """
        Initializes a new processor instance.

        :param config: Determines which kinds of shortcode are expanded, unless overridden in front-matter.
        :param services: External collaborators passed to the shortcode engine.
        :param out_dir: File system directory to write HTML documents to (default: next to the source).
        """

        self.config = config
        self.services = services
        self.out_dir = out_dir

    def expand_document(self, text: str, *, is_markdown: bool) -> str:
        """
        Expands shortcodes in the text of a document, applying configuration changes found in front-matter.

        :param text: Document text, optionally starting with front-matter.
        :param is_markdown: Whether the document is Markdown to convert to HTML.
        :returns: HTML text.
        """

        properties, text = extract_document_properties(text)
        config = self.config.overridden(properties.shortcodes if properties is not None else None)
        if config != self.config:
            LOGGER.debug("Configuration overridden in front-matter: %s", config)

        engine = ShortcodeEngine(config, self.services)
        if is_markdown:
            return markdown_to_html(text, engine)
        return engine.expand(text)

    def process(self, path: Path) -> list[Path]:
        """
        Processes a single document or a directory of documents.

        :returns: Paths to the HTML files written.
        """

        if path.is_dir():
            return self.process_directory(path)
        elif path.is_file():
            return [self.process_document(path, path.parent)]
        else:
            raise ArgumentError(f"expected: existing file or directory; got: {path}")

    def get_output_path(self, path: Path, root_dir: Path) -> Path:
        "Returns the path to the HTML file that a document is saved to."

        if self.out_dir is not None:
            return self.out_dir / path.relative_to(root_dir).with_suffix(".html")
        else:
            return path.with_suffix(".html")

    def process_directory(self, local_dir: Path) -> list[Path]:
        """
        Recursively scans a directory hierarchy for Markdown and HTML documents, and processes each.

        Without an output directory, HTML files that would be overwritten by their own output are skipped; these are
        typically produced by an earlier run. Output paths are checked for conflicts before any file is written.
        """

        local_dir = local_dir.resolve(True)
        LOGGER.info("Processing directory: %s", local_dir)

        out_dir = self.out_dir.resolve() if self.out_dir is not None else None
        documents: dict[Path, Path] = {}
        for dirpath, dirnames, filenames in os.walk(local_dir):
            # skip hidden directories and the output directory
            dirnames[:] = sorted(d for d in dirnames if not d.startswith(".") and (Path(dirpath) / d).resolve() != out_dir)
            for filename in sorted(filenames):
                if not filename.lower().endswith(MARKDOWN_EXTENSIONS + HTML_EXTENSIONS):
                    continue

                path = Path(dirpath) / filename
                out_path = self.get_output_path(path, local_dir)
                if out_path.resolve() == path.resolve():
                    LOGGER.info("Skipping document that would be overwritten by its output: %s", path)
                    continue

                if out_path in documents:
                    raise ArgumentError(f"documents {documents[out_path]} and {path} would both be saved to: {out_path}")
                documents[out_path] = path

        LOGGER.info("Found %d document(s)", len(documents))
        return [self.process_document(document, local_dir) for document in documents.values()]

    def process_document(self, path: Path, root_dir: Path) -> Path:
        """
        Processes a single document.

        :param path: Path to a Markdown or HTML document.
        :param root_dir: Directory that the output path mirrors the relative location of the document to.
        :returns: Path to the HTML file written.
        """

        LOGGER.info("Processing document: %s", path)

        is_markdown = path.suffix.lower() in MARKDOWN_EXTENSIONS
        out_path = self.get_output_path(path, root_dir)
        if out_path.resolve() == path.resolve():
            raise ArgumentError(f"output would overwrite source document; specify an output directory: {path}")

        with open(path, "r", encoding="utf-8") as f:
            text = f.read()

        html = self.expand_document(text, is_markdown=is_markdown)

        os.makedirs(out_path.parent, exist_ok=True)
        with open(out_path, "w", encoding="utf-8") as f:
            f.write(html)

        LOGGER.info("Saved HTML: %s", out_path)
        return out_path
