"""Immutable value tables produced by the token engine."""

from goldentokens.models.ratios import ColumnRatioSet, ExtendedRatios, HybridSplit, RatioTable
from goldentokens.models.scales import (
    SPACING_TIERS,
    LineHeightSet,
    SpacingScale,
    TypeTier,
    TypographyScale,
)

__all__ = [
    "ColumnRatioSet",
    "ExtendedRatios",
    "HybridSplit",
    "LineHeightSet",
    "RatioTable",
    "SPACING_TIERS",
    "SpacingScale",
    "TypeTier",
    "TypographyScale",
]
