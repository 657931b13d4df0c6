"""Utility rules handed to the host's "add utilities" sink.

Rules are grouped the way the host receives them: layout, spacing,
line-height, typography. Each rule maps a selector to CSS declarations.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from goldentokens.core.config import TokenOptions
from goldentokens.core.constants import HYBRID_COLUMN_COUNTS, PHI
from goldentokens.core.engine import (
    compute_column_ratios,
    compute_line_heights,
    compute_ratio_table,
    compute_spacing_scale,
    compute_typography_scale,
)
from goldentokens.core.formatting import class_selector, format_number, grid_track
from goldentokens.models.ratios import ColumnRatioSet, RatioTable
from goldentokens.models.scales import SPACING_TIERS, LineHeightSet, SpacingScale, TypographyScale

logger = logging.getLogger(__name__)

Declarations = dict[str, str]
RuleSet = dict[str, Declarations]

# Tiers that get axis, side, gap and space-between variants
DIRECTIONAL_TIERS = ("phi", "phi-sm", "phi-xs")

# Variant suffix -> sides it applies to; "" means the shorthand
_BOX_SIDES: dict[str, tuple[str, ...]] = {
    "": ("",),
    "x": ("left", "right"),
    "y": ("top", "bottom"),
    "t": ("top",),
    "r": ("right",),
    "b": ("bottom",),
    "l": ("left",),
}

_BOX_PROPERTIES = {"p": "padding", "m": "margin"}

_GAP_PROPERTIES = {"gap": "gap", "gap-x": "column-gap", "gap-y": "row-gap"}

_SIBLINGS = " > :not([hidden]) ~ :not([hidden])"

GROUP_NAMES = ("layout", "spacing", "line-height", "typography")


@dataclass(frozen=True)
class UtilityRegistrationBatch:
    """Named rule groups, in registration order.

    Attributes:
        groups: Group name -> selector -> declarations.
    """

    groups: dict[str, RuleSet]

    def __iter__(self) -> Iterator[tuple[str, RuleSet]]:
        return iter(self.groups.items())

    def selectors(self) -> list[str]:
        """Return every selector across all groups."""
        return [selector for rules in self.groups.values() for selector in rules]

    def merged(self) -> RuleSet:
        """Return all groups as one flat mapping.

        Raises:
            ValueError: If a selector appears in more than one group.
        """
        merged: RuleSet = {}
        for name, rules in self.groups.items():
            for selector, declarations in rules.items():
                if selector in merged:
                    raise ValueError(f"duplicate utility {selector} in group {name}")
                merged[selector] = declarations
        return merged


def _grid(tracks: str) -> Declarations:
    return {"display": "grid", "grid-template-columns": tracks}


def layout_utilities(ratios: RatioTable, columns: ColumnRatioSet) -> RuleSet:
    """Aspect ratios and golden grid templates.

    Templates describe proportions for clamped tracks and need not sum to 100%.
    """
    phi = format_number(PHI)
    rules: RuleSet = {
        class_selector("aspect-phi"): {"aspect-ratio": f"{phi}/1"},
        class_selector("aspect-phi-reverse"): {"aspect-ratio": f"1/{phi}"},
        class_selector("grid-cols-phi-fixed"): _grid(
            f"{grid_track(ratios.major)} {grid_track(ratios.minor)}"
        ),
        class_selector("grid-cols-phi-thirds"): _grid(
            " ".join(grid_track(p) for p in (ratios.minor, ratios.tertiary, ratios.minor))
        ),
        class_selector("grid-cols-phi-small-start"): _grid(
            f"{grid_track(ratios.tertiary)} {grid_track(ratios.tertiary_complement)}"
        ),
        class_selector("grid-cols-phi-small-end"): _grid(
            f"{grid_track(ratios.tertiary_complement)} {grid_track(ratios.tertiary)}"
        ),
        class_selector("grid-cols-phi-4"): _grid(
            " ".join(grid_track(p) for p in ratios.extended.as_tuple())
        ),
        class_selector("grid-cols-phi-pure"): _grid(
            " ".join(grid_track(p) for p in columns.pure)
        ),
    }
    for count in HYBRID_COLUMN_COUNTS:
        split = columns.hybrid(count)
        rules[class_selector(f"grid-cols-phi-{count}")] = _grid(
            f"{grid_track(split.major)} repeat({split.equal_count}, {grid_track(split.equal)})"
        )
    return rules


def _box_declarations(prop: str, sides: tuple[str, ...], value: str) -> Declarations:
    return {(f"{prop}-{side}" if side else prop): value for side in sides}


def _space_between(axis: str, value: str) -> Declarations:
    reverse = f"var(--tw-space-{axis}-reverse)"
    if axis == "y":
        start, end = "margin-top", "margin-bottom"
    else:
        start, end = "margin-left", "margin-right"
    return {
        f"--tw-space-{axis}-reverse": "0",
        start: f"calc({value} * calc(1 - {reverse}))",
        end: f"calc({value} * {reverse})",
    }


def spacing_utilities(spacing: SpacingScale) -> RuleSet:
    """Padding, margin, gap and space-between variants.

    Generated from direction × tier: the shorthand for every tier, axis and
    side variants for DIRECTIONAL_TIERS.
    """
    lengths = spacing.as_rem()
    rules: RuleSet = {}

    for prefix, prop in _BOX_PROPERTIES.items():
        for suffix, sides in _BOX_SIDES.items():
            tiers = SPACING_TIERS if not suffix else DIRECTIONAL_TIERS
            for tier in tiers:
                name = f"{prefix}{suffix}-{tier}"
                rules[class_selector(name)] = _box_declarations(prop, sides, lengths[tier])

    for tier in DIRECTIONAL_TIERS:
        for axis in ("y", "x"):
            selector = class_selector(f"space-{axis}-{tier}") + _SIBLINGS
            rules[selector] = _space_between(axis, lengths[tier])

    for prefix, prop in _GAP_PROPERTIES.items():
        for tier in DIRECTIONAL_TIERS:
            rules[class_selector(f"{prefix}-{tier}")] = {prop: lengths[tier]}

    return rules


def line_height_utilities(line_heights: LineHeightSet) -> RuleSet:
    """One leading-* class per line-height token."""
    return {
        class_selector(f"leading-{name}"): {"line-height": value}
        for name, value in line_heights.as_mapping().items()
    }


def typography_utilities(typography: TypographyScale) -> RuleSet:
    """One text-* class per typography tier, with its line height."""
    return {
        class_selector(f"text-{tier.name}"): {
            "font-size": tier.font_size_rem,
            "line-height": tier.line_height,
        }
        for tier in typography.tiers
    }


def build_utilities(options: TokenOptions | None = None) -> UtilityRegistrationBatch:
    """Compute every table and assemble the utility groups.

    Args:
        options: Generator options; defaults apply when None.

    Returns:
        UtilityRegistrationBatch with unique selectors.

    Raises:
        ValueError: If two groups define the same selector.
    """
    options = options or TokenOptions()
    batch = UtilityRegistrationBatch(
        groups={
            "layout": layout_utilities(compute_ratio_table(), compute_column_ratios()),
            "spacing": spacing_utilities(compute_spacing_scale(options.base_size)),
            "line-height": line_height_utilities(compute_line_heights()),
            "typography": typography_utilities(compute_typography_scale(options.base_size)),
        }
    )
    batch.merged()  # raises on duplicate selectors
    logger.debug("Built %d utilities for base %s", len(batch.selectors()), options.base_size)
    return batch
