"""
Expand content shortcodes into HTML markup.

Copyright 2026, Content Shortcodes contributors
"""

from .extra import override
from .extension import ShortcodeExtension
from .formatting import join_classes
from .scanner import ContentModel, ShortcodeMatch, TagScanner


class ButtonExtension(ShortcodeExtension):
    """
    Expands `[button url="..." style="..."]Label[/button]` into a styled link.

    The label is plain text, and is escaped.
    """

    kind = "Button"
    scanner = TagScanner("button", ContentModel.TEXT)

    @override
    def expand(self, match: ShortcodeMatch) -> str:
        attrs = match.attributes
        url = attrs.get("url", "#")
        style = attrs.get("style", "primary")
        size = attrs.get("size", "")
        target = attrs.get("target", "_self")
        extra_class = attrs.get("class", "")

        button_class = join_classes("btn", f"btn-{style}", f"btn-{size}" if size else "", extra_class)
        content = (match.content or "").strip()

        return f'<a href="{self.escape(url)}" class="{self.escape(button_class)}" target="{self.escape(target)}">{self.escape(content)}</a>'


class AlertExtension(ShortcodeExtension):
    """
    Expands `[alert type="..."]Message[/alert]` into an alert box.

    The message is trusted rich content, and is passed through unescaped. The alert can be dismissed unless
    `dismissible` is anything other than the exact string `true`.
    """

    kind = "Alert"
    scanner = TagScanner("alert", ContentModel.TEXT)

    @override
    def expand(self, match: ShortcodeMatch) -> str:
        attrs = match.attributes
        alert_type = attrs.get("type", "info")
        dismissible = attrs.get("dismissible", "true") == "true"
        extra_class = attrs.get("class", "")

        alert_class = join_classes(
            "alert",
            f"alert-{alert_type}",
            "alert-dismissible fade show" if dismissible else "",
            extra_class,
        )
        content = (match.content or "").strip()

        dismiss_button = ""
        if dismissible:
            dismiss_button = '<button type="button" class="btn-close" data-bs-dismiss="alert" aria-label="Close"></button>'

        return f'<div class="{self.escape(alert_class)}" role="alert">{content}{dismiss_button}</div>'
