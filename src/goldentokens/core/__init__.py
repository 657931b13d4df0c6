"""Golden-ratio derivations.

Modules:
    constants: PHI and the fixed token constants.
    validation: DomainError and the numeric domain guards.
    formatting: Display strings for exact values.
    config: TokenOptions parsed from host plugin options.
    engine: compute_* functions for every token table.
"""

from goldentokens.core.config import TokenOptions
from goldentokens.core.constants import PHI
from goldentokens.core.engine import (
    compute_column_ratios,
    compute_line_heights,
    compute_ratio_table,
    compute_spacing_scale,
    compute_typography_scale,
)
from goldentokens.core.validation import DomainError

__all__ = [
    "PHI",
    "DomainError",
    "TokenOptions",
    "compute_column_ratios",
    "compute_line_heights",
    "compute_ratio_table",
    "compute_spacing_scale",
    "compute_typography_scale",
]
