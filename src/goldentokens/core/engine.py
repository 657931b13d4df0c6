"""Golden-ratio token engine.

Pure derivations of every numeric table from PHI and an optional base size.
Each call recomputes its table; equal inputs give equal outputs.
"""

import logging
import math

from goldentokens.core.constants import DEFAULT_BASE_SIZE, HEADLINE_LINE_HEIGHT, PHI
from goldentokens.core.formatting import format_number
from goldentokens.core.validation import DomainError, validate_base_size
from goldentokens.models.ratios import ColumnRatioSet, ExtendedRatios, RatioTable
from goldentokens.models.scales import LineHeightSet, SpacingScale, TypeTier, TypographyScale

logger = logging.getLogger(__name__)

_PURE_COLUMN_COUNT = 6

# (tier name, power of φ applied to the base)
_MAJOR_TIERS: tuple[tuple[str, float], ...] = (
    ("phi-3xl", 4),
    ("phi-2xl", 3),
    ("phi-xl", 2),
    ("phi-lg", 1),
    ("phi", 0),
    ("phi-sm", -1),
    ("phi-xs", -2),
)

# Half powers of φ; each alt tier fills its own gap between major tiers
_ALT_TIERS: tuple[tuple[str, float], ...] = (
    ("phi-2xl-alt", 1.5),
    ("phi-xl-alt", 2.5),
    ("phi-lg-alt", 0.5),
    ("phi-sm-alt", -0.5),
)

_HEADLINE_TIERS = frozenset({"phi-3xl", "phi-2xl", "phi-2xl-alt"})
_SECTION_TIERS = frozenset({"phi-xl", "phi-xl-alt"})


def _check_lengths(base: float, lengths: tuple[float, ...]) -> None:
    # Finite bases can still overflow or underflow once scaled by φⁿ
    if not all(math.isfinite(px) for px in lengths):
        logger.debug("Rejected base size %r: derived lengths overflow", base)
        raise DomainError("base size", base, "derived lengths overflow")
    if not all(px > 0 for px in lengths):
        logger.debug("Rejected base size %r: derived lengths underflow", base)
        raise DomainError("base size", base, "derived lengths underflow")


def _percent_of_power(power: int) -> float:
    return 100 / PHI**power


def compute_ratio_table() -> RatioTable:
    """Split 100% into golden segments.

    Returns:
        RatioTable with exact (unrounded) percentages.
    """
    return RatioTable(
        major=_percent_of_power(1),
        minor=_percent_of_power(2),
        tertiary=_percent_of_power(3),
        extended=ExtendedRatios(*(_percent_of_power(p) for p in range(3, 7))),
    )


def compute_column_ratios() -> ColumnRatioSet:
    """Return the pure column progression 100/φ¹ .. 100/φ⁶."""
    return ColumnRatioSet(
        pure=tuple(_percent_of_power(p) for p in range(1, _PURE_COLUMN_COUNT + 1))
    )


def compute_spacing_scale(base: float = DEFAULT_BASE_SIZE) -> SpacingScale:
    """Derive the spacing tiers from a base size.

    Args:
        base: Base size in px.

    Raises:
        DomainError: If base is not a finite number greater than zero, or a
            derived length overflows or underflows.
    """
    size = validate_base_size(base)
    logger.debug("Computing spacing scale for base %s", size)
    scale = SpacingScale(
        base=size,
        phi=size * PHI,
        phi_sm=size,
        phi_xs=size / PHI,
        phi_2xs=size / (PHI * PHI),
    )
    _check_lengths(size, scale.values())
    return scale


def _line_height_for(name: str) -> str:
    if name in _HEADLINE_TIERS:
        return HEADLINE_LINE_HEIGHT
    if name in _SECTION_TIERS:
        return format_number(PHI)
    return format_number(1 + 1 / PHI)


def compute_typography_scale(base: float = DEFAULT_BASE_SIZE) -> TypographyScale:
    """Derive font sizes from integer and half-integer powers of φ.

    The major track multiplies the base by φ⁴ .. φ⁻². The alt track fills
    the gaps with √φ steps so callers can pick a smoother progression.

    Args:
        base: Base font size in px.

    Raises:
        DomainError: If base is not a finite number greater than zero, or a
            derived length overflows or underflows.
    """
    size = validate_base_size(base)
    logger.debug("Computing typography scale for base %s", size)
    tiers = tuple(
        TypeTier(name=name, font_size=size * PHI**power, line_height=_line_height_for(name))
        for name, power in _MAJOR_TIERS + _ALT_TIERS
    )
    _check_lengths(size, tuple(tier.font_size for tier in tiers))
    return TypographyScale(base=size, tiers=tiers)


def compute_line_heights() -> LineHeightSet:
    """Return the φ-derived line heights."""
    return LineHeightSet(
        phi=PHI,
        phi_2=PHI * PHI,
        phi_half=math.sqrt(PHI),
        phi_tight=1 + 1 / PHI,
        phi_relaxed=PHI + 1 / PHI,
    )
