"""
Expand content shortcodes into HTML markup.

Expands shortcodes in Markdown and HTML documents, and saves the result as HTML files. Images referenced in
galleries are resolved from a media catalog file or a remote media service.

Copyright 2026, Content Shortcodes contributors
"""

import argparse
import logging
import os.path
from contextlib import ExitStack
from io import StringIO
from pathlib import Path

from . import __version__
from .clio import add_arguments, get_options
from .environment import ArgumentError, MediaConnectionProperties, SiteProperties
from .media import MediaAPI, MediaCatalog
from .options import EngineConfig
from .processor import Processor
from .services import ImageLookup, RenderServices, no_images


class Arguments(argparse.Namespace):
    path: Path
    output: str | None
    loglevel: str
    site_url: str | None
    media: str | None
    media_api: str | None
    media_api_key: str | None
    current_url: str


def get_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser()
    parser.prog = os.path.basename(os.path.dirname(__file__))
    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument("path", help="Path to Markdown or HTML file or directory to process.")
    parser.add_argument("-o", "--output", help="Directory to write HTML files to (default: next to source files).")
    parser.add_argument(
        "-l",
        "--loglevel",
        choices=[
            logging.getLevelName(level).lower()
            for level in (
                logging.DEBUG,
                logging.INFO,
                logging.WARN,
                logging.ERROR,
                logging.CRITICAL,
            )
        ],
        default=logging.getLevelName(logging.INFO),
        help="Use this option to set the log verbosity.",
    )
    parser.add_argument("--site-url", dest="site_url", help="Site root URL that media paths are relative to.")
    media = parser.add_mutually_exclusive_group()
    media.add_argument("--media", help="JSON or YAML file that lists media items to resolve gallery images from.")
    media.add_argument("--media-api", dest="media_api", help="Media REST API URL to resolve gallery images from.")
    parser.add_argument("--media-api-key", dest="media_api_key", help="API key for the media REST API.")
    parser.add_argument(
        "--current-url",
        dest="current_url",
        default="",
        help="URL that contact forms are submitted to (default: the page that shows the form).",
    )
    add_arguments(parser, EngineConfig)
    return parser


def get_help() -> str:
    parser = get_parser()
    with StringIO() as buf:
        parser.print_help(file=buf)
        return buf.getvalue()


def main() -> None:
    parser = get_parser()
    args = Arguments()
    parser.parse_args(namespace=args)

    args.path = Path(args.path)

    logging.basicConfig(
        level=getattr(logging, args.loglevel.upper(), logging.INFO),
        format="%(asctime)s - %(levelname)s - %(funcName)s [%(lineno)d] - %(message)s",
    )

    config = get_options(args, EngineConfig)
    site = SiteProperties(site_url=args.site_url)
    current_url = args.current_url

    with ExitStack() as stack:
        image_lookup: ImageLookup = no_images
        if args.media:
            try:
                image_lookup = MediaCatalog.from_file(Path(args.media), site)
            except (OSError, ValueError) as e:
                parser.error(f"cannot load media catalog: {e}")
        elif args.media_api or os.getenv("SHORTCODES_MEDIA_API_URL"):
            try:
                properties = MediaConnectionProperties(api_url=args.media_api, api_key=args.media_api_key)
            except ArgumentError as e:
                parser.error(str(e))
            image_lookup = stack.enter_context(MediaAPI(properties, site))

        services = RenderServices(image_lookup=image_lookup, current_url=lambda: current_url)
        processor = Processor(config, services, out_dir=Path(args.output) if args.output else None)
        try:
            processor.process(args.path)
        except ArgumentError as e:
            parser.error(str(e))


if __name__ == "__main__":
    main()
