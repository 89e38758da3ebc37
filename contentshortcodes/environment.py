"""
Expand content shortcodes into HTML markup.

Copyright 2026, Content Shortcodes contributors
"""

import os
from typing import overload


class ArgumentError(ValueError):
    "Raised when wrong arguments are passed to a function call."


class MediaError(RuntimeError):
    "Raised when a media service call fails."


@overload
def _validate_url(url: str) -> str: ...


@overload
def _validate_url(url: str | None) -> str | None: ...


def _validate_url(url: str | None) -> str | None:
    if url is None:
        return None

    if not url.startswith(("http://", "https://")):
        raise ArgumentError(f"expected: absolute URL with scheme `http` or `https`; got: {url}")

    return url


class SiteProperties:
    """
    Properties related to the site that serves media files.

    :param site_url: Site root URL that media paths are relative to, e.g. `https://example.com/`.
    """

    site_url: str

    def __init__(self, site_url: str | None = None) -> None:
        opt_site_url = site_url or os.getenv("SHORTCODES_SITE_URL")
        if not opt_site_url:
            opt_site_url = "/"
        elif not opt_site_url.endswith("/"):
            opt_site_url = f"{opt_site_url}/"

        self.site_url = opt_site_url


class MediaConnectionProperties:
    """
    Properties related to connecting to a remote media service.

    :param api_url: Base URL of the media REST API, e.g. `https://example.com/api/`.
    :param api_key: API key passed as a bearer token.
    :param headers: Additional HTTP headers to pass to media API calls.
    """

    api_url: str
    api_key: str | None
    headers: dict[str, str] | None

    def __init__(
        self,
        *,
        api_url: str | None = None,
        api_key: str | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        opt_api_url = api_url or os.getenv("SHORTCODES_MEDIA_API_URL")
        opt_api_key = api_key or os.getenv("SHORTCODES_MEDIA_API_KEY")

        if not opt_api_url:
            raise ArgumentError("media API URL not specified")
        if not opt_api_url.endswith("/"):
            opt_api_url = f"{opt_api_url}/"

        self.api_url = _validate_url(opt_api_url)
        self.api_key = opt_api_key
        self.headers = headers
