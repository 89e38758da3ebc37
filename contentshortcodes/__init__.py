"""
Expand content shortcodes into HTML markup.

Scans free-form text for bracketed shortcode tags such as `[button]`, `[alert]`, `[gallery]`, `[tabs]`, `[accordion]`,
`[countdown]` and `[contact_form]`, and replaces each occurrence with an HTML fragment.
"""

from ._version import __version__

__all__ = ["__version__"]

__author__ = "Content Shortcodes contributors"
__copyright__ = "Copyright 2026, Content Shortcodes contributors"
__license__ = "MIT"
__maintainer__ = "Content Shortcodes contributors"
__status__ = "Production"
