"""
Expand content shortcodes into HTML markup.

Copyright 2026, Content Shortcodes contributors
"""

import dataclasses
from dataclasses import dataclass, field

from .clio import boolean_option


@dataclass(frozen=True)
class EngineConfig:
    """
    Determines which kinds of shortcode are expanded.

    A shortcode kind that is disabled is left in the text as is.

    :param enable_buttons: Whether to expand `[button]` shortcodes.
    :param enable_alerts: Whether to expand `[alert]` shortcodes.
    :param enable_gallery: Whether to expand `[gallery]` shortcodes.
    :param enable_tabs: Whether to expand `[tabs]` shortcodes.
    :param enable_accordion: Whether to expand `[accordion]` shortcodes.
    :param enable_countdown: Whether to expand `[countdown]` shortcodes.
    :param enable_contact_form: Whether to expand `[contact_form]` shortcodes.
    """

    enable_buttons: bool = field(
        default=True,
        metadata=boolean_option("Expand [button] shortcodes into styled links.", "Leave [button] shortcodes as is."),
    )
    enable_alerts: bool = field(
        default=True,
        metadata=boolean_option("Expand [alert] shortcodes into alert boxes.", "Leave [alert] shortcodes as is."),
    )
    enable_gallery: bool = field(
        default=True,
        metadata=boolean_option("Expand [gallery] shortcodes into image grids.", "Leave [gallery] shortcodes as is."),
    )
    enable_tabs: bool = field(
        default=True,
        metadata=boolean_option("Expand [tabs] shortcodes into tabbed panes.", "Leave [tabs] shortcodes as is."),
    )
    enable_accordion: bool = field(
        default=True,
        metadata=boolean_option("Expand [accordion] shortcodes into collapsible panels.", "Leave [accordion] shortcodes as is."),
    )
    enable_countdown: bool = field(
        default=True,
        metadata=boolean_option("Expand [countdown] shortcodes into countdown displays.", "Leave [countdown] shortcodes as is."),
    )
    enable_contact_form: bool = field(
        default=True,
        metadata=boolean_option("Expand [contact_form] shortcodes into contact forms.", "Leave [contact_form] shortcodes as is."),
    )

    def overridden(self, overrides: "EngineOverrides | None") -> "EngineConfig":
        """
        Applies overrides on top of this configuration.

        :param overrides: Settings to change; a `None` value keeps the current setting.
        :returns: A new configuration object.
        """

        if overrides is None:
            return self

        updates = {f.name: value for f in dataclasses.fields(overrides) if (value := getattr(overrides, f.name)) is not None}
        return dataclasses.replace(self, **updates)


@dataclass
class EngineOverrides:
    """
    Document-level changes to which kinds of shortcode are expanded, typically read from front-matter.

    Each field corresponds to a field in `EngineConfig`; `None` means no change.
    """

    enable_buttons: bool | None = None
    enable_alerts: bool | None = None
    enable_gallery: bool | None = None
    enable_tabs: bool | None = None
    enable_accordion: bool | None = None
    enable_countdown: bool | None = None
    enable_contact_form: bool | None = None
