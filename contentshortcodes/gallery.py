"""
Expand content shortcodes into HTML markup.

Copyright 2026, Content Shortcodes contributors
"""

import logging

from .extension import ShortcodeExtension
from .extra import override
from .formatting import join_classes
from .scanner import ContentModel, ShortcodeMatch, TagScanner
from .services import ImageRecord

LOGGER = logging.getLogger(__name__)


class GalleryExtension(ShortcodeExtension):
    """
    Expands `[gallery images="1,2,3"]` into an image grid.

    Each identifier is resolved with the image lookup service. Identifiers that cannot be resolved are left out, and
    a failing lookup counts as a miss.
    """

    kind = "Gallery"
    scanner = TagScanner("gallery", ContentModel.EMPTY)

    def _lookup(self, image_id: str) -> ImageRecord | None:
        try:
            image = self.services.image_lookup(image_id)
        except Exception as exc:
            LOGGER.warning("Image lookup failed for ID %s: %s", image_id, exc)
            return None

        if image is None:
            LOGGER.debug("Image not found: %s", image_id)
        return image

    def _render_item(self, image: ImageRecord) -> str:
        html = '<div class="gallery-item">'
        html += f'<img src="{self.escape(image.url)}" alt="{self.escape(image.alt_text)}" class="img-fluid">'
        if image.caption:
            html += f'<div class="gallery-caption">{self.escape(image.caption)}</div>'
        html += "</div>"
        return html

    @override
    def expand(self, match: ShortcodeMatch) -> str:
        attrs = match.attributes
        images = attrs.get("images", "")
        layout = attrs.get("layout", "grid")
        columns = attrs.get("columns", "3")
        extra_class = attrs.get("class", "")

        if not images:
            return self.warning("No images specified")

        gallery_id = self.services.generate_id("gallery")
        gallery_class = join_classes("content-shortcodes-gallery", f"gallery-{layout}", extra_class)

        html = f'<div id="{self.escape(gallery_id)}" class="{self.escape(gallery_class)}" data-columns="{self.escape(columns)}">'
        for image_id in images.split(","):
            image_id = image_id.strip()
            if not image_id:
                continue

            image = self._lookup(image_id)
            if image is not None:
                html += self._render_item(image)
        html += "</div>"

        return html
