"""Golden ratio and the fixed token constants derived from it.

Everything else in the package is a pure function of PHI and, for lengths,
an optional base size.
"""

import math

# a/b = (a+b)/a = φ
PHI: float = (1 + math.sqrt(5)) / 2

# Lengths are published as multiples of the root font size
REFERENCE_SIZE = 16
DEFAULT_BASE_SIZE = 16.0

# Fixed-point digits for percentages embedded in style values
PERCENT_DIGITS = 4

# Headlines use a tighter leading than any φ-derived line height
HEADLINE_LINE_HEIGHT = "1.2"

# Viewport fractions, rounded to one decimal (1/φ .. 1/φ⁴)
VIEWPORT_HEIGHTS: dict[str, str] = {
    "phi": "61.8vh",
    "phi-sm": "38.2vh",
    "phi-xs": "23.6vh",
    "phi-2xs": "14.6vh",
}

BORDER_RADII: dict[str, str] = {
    "phi-sm": "0.382rem",  # 1/φ²
    "phi": "0.618rem",  # 1/φ
    "phi-lg": "1rem",  # Base
}

TRANSITION_DURATIONS: dict[str, str] = {
    "phi": "618ms",  # 1000/φ
    "phi-fast": "382ms",  # 1000/φ²
    "phi-slow": "1000ms",  # Base timing unit
}

# 360° · (1 − 1/φ), rounded
GOLDEN_ANGLE = "137.5deg"

# Hybrid layouts published as utilities
HYBRID_COLUMN_COUNTS = (5, 6, 7)
