"""
Expand content shortcodes into HTML markup.

Copyright 2026, Content Shortcodes contributors
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from types import TracebackType
from typing import Iterable
from urllib.parse import quote

import requests
import yaml
from cattrs.errors import BaseValidationError

from .environment import MediaConnectionProperties, MediaError, SiteProperties
from .serializer import json_payload_to_object, json_to_object
from .services import ImageRecord

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class MediaItem:
    """
    A media file as stored by a media library.

    :param id: Unique identifier of the media item.
    :param path: Path to the file relative to the site root, or an absolute URL.
    :param name: Display name of the file.
    :param alt_text: Alternate text; falls back to the display name when empty.
    :param caption: Caption text.
    """

    id: str
    path: str
    name: str = ""
    alt_text: str | None = None
    caption: str | None = None

    def to_record(self, site_url: str) -> ImageRecord:
        """
        Creates the image record that gallery shortcodes consume.

        :param site_url: Site root URL, ending with `/`.
        """

        if self.path.startswith(("http://", "https://")):
            url = self.path
        else:
            url = f"{site_url}{self.path.lstrip('/')}"

        return ImageRecord(
            id=self.id,
            url=url,
            alt_text=self.alt_text or self.name,
            caption=self.caption or "",
        )


class MediaCatalog:
    """
    Resolves images from a fixed set of media items held in memory.

    Use an instance as the `image_lookup` service.
    """

    site_url: str
    _items: dict[str, MediaItem]

    def __init__(self, items: Iterable[MediaItem], site: SiteProperties | None = None) -> None:
        self.site_url = (site or SiteProperties()).site_url
        self._items = {item.id.strip(): item for item in items}

    def __len__(self) -> int:
        return len(self._items)

    def __call__(self, image_id: str) -> ImageRecord | None:
        item = self._items.get(image_id.strip())
        if item is None:
            return None
        return item.to_record(self.site_url)

    @classmethod
    def from_file(cls, path: Path, site: SiteProperties | None = None) -> "MediaCatalog":
        """
        Loads media items from a JSON or YAML file that holds a list of objects.

        :param path: Path to a file with extension `.json`, `.yaml` or `.yml`.
        :param site: Site that media paths are relative to.
        """

        LOGGER.info("Loading media catalog: %s", path)
        try:
            match path.suffix.lower():
                case ".json":
                    items = json_payload_to_object(list[MediaItem], path.read_bytes())
                case ".yaml" | ".yml":
                    with open(path, "r", encoding="utf-8") as f:
                        data = yaml.safe_load(f)
                    items = json_to_object(list[MediaItem], data or [])
                case _:
                    raise ValueError(f"expected: media catalog file with extension `.json`, `.yaml` or `.yml`; got: {path}")
        except (yaml.YAMLError, BaseValidationError) as exc:
            raise ValueError(f"malformed media catalog: {path}") from exc

        LOGGER.debug("Loaded %d media item(s)", len(items))
        return cls(items, site)


class MediaAPI:
    """
    Represents an active connection to a remote media service.

    Use as a context manager; the session it yields is an `image_lookup` service.
    """

    properties: MediaConnectionProperties
    site: SiteProperties
    session: "MediaSession | None" = None

    def __init__(self, properties: MediaConnectionProperties | None = None, site: SiteProperties | None = None) -> None:
        self.properties = properties or MediaConnectionProperties()
        self.site = site or SiteProperties()

    def __enter__(self) -> "MediaSession":
        session = requests.Session()
        if self.properties.api_key:
            session.headers.update({"Authorization": f"Bearer {self.properties.api_key}"})
        if self.properties.headers:
            session.headers.update(self.properties.headers)

        self.session = MediaSession(session, api_url=self.properties.api_url, site_url=self.site.site_url)
        return self.session

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self.session is not None:
            self.session.close()
            self.session = None


class MediaSession:
    """
    Information about an open session to a media service.

    :param session: HTTP session that carries authentication headers.
    :param api_url: Base URL of the media REST API, ending with `/`.
    :param site_url: Site root URL that media paths are relative to.
    """

    session: requests.Session
    api_url: str
    site_url: str

    def __init__(self, session: requests.Session, *, api_url: str, site_url: str) -> None:
        self.session = session
        self.api_url = api_url
        self.site_url = site_url

    def close(self) -> None:
        self.session.close()

    def get_media(self, media_id: str) -> MediaItem | None:
        """
        Retrieves a media item by its identifier.

        :returns: The media item, or `None` if the service has no item with the identifier.
        :raises MediaError: The service could not be reached, or responded with an error.
        """

        url = f"{self.api_url}media/{quote(media_id, safe='')}"
        try:
            response = self.session.get(url, headers={"Accept": "application/json"})
        except requests.RequestException as exc:
            raise MediaError(f"media service unreachable: {url}") from exc

        if response.status_code == 404:
            return None
        if response.text:
            LOGGER.debug("Received HTTP payload:\n%s", response.text)
        try:
            response.raise_for_status()
        except requests.HTTPError as exc:
            raise MediaError(f"media service returned HTTP status {response.status_code} for: {url}") from exc

        return json_payload_to_object(MediaItem, response.content)

    def __call__(self, image_id: str) -> ImageRecord | None:
        item = self.get_media(image_id.strip())
        if item is None:
            return None
        return item.to_record(self.site_url)
