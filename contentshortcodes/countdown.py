"""
Expand content shortcodes into HTML markup.

Copyright 2026, Content Shortcodes contributors
"""

from .extension import ShortcodeExtension
from .extra import override
from .formatting import join_classes
from .scanner import ContentModel, ShortcodeMatch, TagScanner

COUNTDOWN_UNITS: tuple[tuple[str, str], ...] = (
    ("days", "Days"),
    ("hours", "Hours"),
    ("minutes", "Minutes"),
    ("seconds", "Seconds"),
)


class CountdownExtension(ShortcodeExtension):
    """
    Expands `[countdown date="2025-01-01" time="12:00:00"]` into a countdown display.

    The display is a static skeleton. A client-side script reads the target timestamp from `data-target`, the units
    to show from `data-format`, and the text to show at the end from `data-message`, and updates the elements tagged
    with `data-type`.
    """

    kind = "Countdown"
    scanner = TagScanner("countdown", ContentModel.EMPTY)

    @override
    def expand(self, match: ShortcodeMatch) -> str:
        attrs = match.attributes
        date = attrs.get("date", "")
        time = attrs.get("time", "00:00:00")
        format = attrs.get("format", "days,hours,minutes,seconds")
        extra_class = attrs.get("class", "")
        message = attrs.get("message", "Countdown finished!")

        if not date:
            return self.warning("No date specified")

        countdown_id = self.services.generate_id("countdown")
        countdown_class = join_classes("content-shortcodes-countdown", extra_class)
        target = f"{date} {time}"

        html = (
            f'<div id="{self.escape(countdown_id)}" class="{self.escape(countdown_class)}" '
            f'data-target="{self.escape(target)}" data-format="{self.escape(format)}" data-message="{self.escape(message)}">'
        )
        html += '<div class="countdown-display">'
        for unit, label in COUNTDOWN_UNITS:
            html += (
                '<div class="countdown-item">'
                f'<span class="countdown-number" data-type="{unit}">0</span>'
                f'<span class="countdown-label">{label}</span>'
                "</div>"
            )
        html += "</div>"
        html += f'<div class="countdown-message" style="display: none;">{self.escape(message)}</div>'
        html += "</div>"

        return html
