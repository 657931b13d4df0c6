"""Token tree handed to the host's "extend theme" sink."""

from __future__ import annotations

import logging
from typing import Any

from goldentokens.core.config import TokenOptions
from goldentokens.core.constants import (
    BORDER_RADII,
    GOLDEN_ANGLE,
    TRANSITION_DURATIONS,
    VIEWPORT_HEIGHTS,
)
from goldentokens.core.engine import (
    compute_line_heights,
    compute_ratio_table,
    compute_spacing_scale,
    compute_typography_scale,
)
from goldentokens.core.formatting import format_percent
from goldentokens.models.ratios import RatioTable
from goldentokens.models.scales import TypographyScale

logger = logging.getLogger(__name__)

# Top-level theme keys, in the order they are emitted
THEME_KEYS = (
    "spacing",
    "padding",
    "margin",
    "gap",
    "width",
    "height",
    "fontSize",
    "lineHeight",
    "borderRadius",
    "transitionDuration",
    "rotate",
)

ThemeExtensionBundle = dict[str, dict[str, Any]]


def golden_widths(ratios: RatioTable) -> dict[str, str]:
    """Return width tokens as golden percentages of the container."""
    return {
        "phi": f"{format_percent(ratios.major)}%",
        "phi-sm": f"{format_percent(ratios.minor)}%",
        "phi-xs": f"{format_percent(ratios.tertiary)}%",
    }


def font_size_tokens(typography: TypographyScale) -> dict[str, list[str]]:
    """Return fontSize tokens as [font-size, line-height] pairs."""
    return {tier.name: [tier.font_size_rem, tier.line_height] for tier in typography.tiers}


def build_theme_extension(options: TokenOptions | None = None) -> ThemeExtensionBundle:
    """Assemble the theme extension from freshly computed tables.

    Spacing, padding, margin and gap share one scale. Each call returns new
    dicts, so callers may mutate the result.

    Args:
        options: Generator options; defaults apply when None.

    Returns:
        Mapping keyed by THEME_KEYS.
    """
    options = options or TokenOptions()
    spacing = compute_spacing_scale(options.base_size)

    bundle: ThemeExtensionBundle = {
        "spacing": spacing.as_rem(),
        "padding": spacing.as_rem(),
        "margin": spacing.as_rem(),
        "gap": spacing.as_rem(),
        "width": golden_widths(compute_ratio_table()),
        "height": dict(VIEWPORT_HEIGHTS),
        "fontSize": font_size_tokens(compute_typography_scale(options.base_size)),
        "lineHeight": compute_line_heights().as_mapping(),
        "borderRadius": dict(BORDER_RADII),
        "transitionDuration": dict(TRANSITION_DURATIONS),
        "rotate": {"phi": GOLDEN_ANGLE},
    }
    logger.debug("Built theme extension for base %s", options.base_size)
    return bundle
