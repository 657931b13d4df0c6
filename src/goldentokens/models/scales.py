"""Golden-ratio scales for spacing, typography and line height.

Lengths are stored in px and published in rem, so every token follows a
change of the root font size.

Usage:
    from goldentokens.core.engine import compute_spacing_scale

    spacing = compute_spacing_scale()
    spacing.as_rem()["phi-sm"]  # '1rem'
"""

from __future__ import annotations

from dataclasses import dataclass

from goldentokens.core.formatting import format_number, to_rem

SPACING_TIERS = ("phi", "phi-sm", "phi-xs", "phi-2xs")


@dataclass(frozen=True, slots=True)
class SpacingScale:
    """Spacing tiers in px, largest first."""

    base: float
    phi: float  # base·φ
    phi_sm: float  # base
    phi_xs: float  # base/φ
    phi_2xs: float  # base/φ²

    def values(self) -> tuple[float, float, float, float]:
        """Return the tiers in the order of SPACING_TIERS."""
        return (self.phi, self.phi_sm, self.phi_xs, self.phi_2xs)

    def as_rem(self) -> dict[str, str]:
        """Return a mapping of tier name to rem length."""
        return {name: to_rem(px) for name, px in zip(SPACING_TIERS, self.values())}

    def rem(self, tier: str) -> str:
        """Return one tier as a rem length.

        Raises:
            KeyError: If the tier name is unknown.
        """
        return self.as_rem()[tier]


@dataclass(frozen=True, slots=True)
class TypeTier:
    """A named font size with its line height.

    Attributes:
        name: Tier name, e.g. "phi-lg" or "phi-lg-alt".
        font_size: Font size in px.
        line_height: Unitless line height as published.
    """

    name: str
    font_size: float
    line_height: str

    @property
    def is_alt(self) -> bool:
        """Return True for tiers on the half-step track."""
        return self.name.endswith("-alt")

    @property
    def font_size_rem(self) -> str:
        """Return the font size as a rem length."""
        return to_rem(self.font_size)


@dataclass(frozen=True, slots=True)
class TypographyScale:
    """Integer-power tiers and half-power alt tiers of a base size.

    Attributes:
        base: Base font size in px.
        tiers: Major tiers largest first, followed by alt tiers largest first.
    """

    base: float
    tiers: tuple[TypeTier, ...]

    @property
    def names(self) -> tuple[str, ...]:
        """Return every tier name in order."""
        return tuple(tier.name for tier in self.tiers)

    @property
    def major(self) -> tuple[TypeTier, ...]:
        """Return the integer-power tiers."""
        return tuple(tier for tier in self.tiers if not tier.is_alt)

    @property
    def alt(self) -> tuple[TypeTier, ...]:
        """Return the half-power tiers."""
        return tuple(tier for tier in self.tiers if tier.is_alt)

    def get(self, name: str) -> TypeTier:
        """Return a tier by name.

        Raises:
            KeyError: If no tier has that name.
        """
        for tier in self.tiers:
            if tier.name == name:
                return tier
        raise KeyError(name)

    def font_sizes(self) -> dict[str, str]:
        """Return a mapping of tier name to rem font size."""
        return {tier.name: tier.font_size_rem for tier in self.tiers}


@dataclass(frozen=True, slots=True)
class LineHeightSet:
    """Unitless line heights derived from φ alone."""

    phi: float  # φ
    phi_2: float  # φ²
    phi_half: float  # √φ
    phi_tight: float  # 1 + 1/φ
    phi_relaxed: float  # φ + 1/φ

    def as_mapping(self) -> dict[str, str]:
        """Return a mapping of token name to line-height string."""
        return {
            "phi": format_number(self.phi),
            "phi-2": format_number(self.phi_2),
            "phi-0.5": format_number(self.phi_half),
            "phi-tight": format_number(self.phi_tight),
            "phi-relaxed": format_number(self.phi_relaxed),
        }
