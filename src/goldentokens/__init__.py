"""Golden-ratio design tokens for utility-first styling frameworks."""

from goldentokens.core import (
    PHI,
    DomainError,
    TokenOptions,
    compute_column_ratios,
    compute_line_heights,
    compute_ratio_table,
    compute_spacing_scale,
    compute_typography_scale,
)
from goldentokens.plugin import (
    Sinks,
    build_theme_extension,
    build_utilities,
    register_base_utilities,
)

__version__ = "0.1.0"

__all__ = [
    "PHI",
    "DomainError",
    "Sinks",
    "TokenOptions",
    "build_theme_extension",
    "build_utilities",
    "compute_column_ratios",
    "compute_line_heights",
    "compute_ratio_table",
    "compute_spacing_scale",
    "compute_typography_scale",
    "register_base_utilities",
]
