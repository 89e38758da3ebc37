"""
Expand content shortcodes into HTML markup.

Copyright 2026, Content Shortcodes contributors
"""

from typing import Callable


def join_classes(*classes: str) -> str:
    """
    Composes the value of an HTML `class` attribute.

    Empty items are skipped such that no stray whitespace is left behind, e.g. `join_classes("btn", "", "wide")`
    gives `btn wide`.
    """

    return " ".join(c for c in classes if c)


def active_class(index: int, name: str) -> str:
    "Returns the class name for the first item in a widget, and an empty string for subsequent items."

    return name if index == 0 else ""


def warning_block(kind: str, message: str) -> str:
    """
    Produces the inline fallback shown in place of a shortcode whose required input is absent or invalid.

    :param kind: Human-readable shortcode name, e.g. `Gallery`.
    :param message: Explanation of what is missing.
    """

    return f'<div class="alert alert-warning">{kind} shortcode: {message}</div>'


def hidden_input(name: str, value: str, escape: Callable[[str], str]) -> str:
    "Produces a hidden form field with an escaped name and value."

    return f'<input type="hidden" name="{escape(name)}" value="{escape(value)}">'
