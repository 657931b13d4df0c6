"""Display formatting for exact token values.

Derivations keep full float precision. Rounding happens only here, when a
value is embedded in a style string, so dependent calculations never see a
rounded intermediate.
"""

from goldentokens.core.constants import PERCENT_DIGITS, REFERENCE_SIZE


def format_number(value: float) -> str:
    """Return the shortest round-tripping text for a number.

    Integral values drop the trailing ".0" so they read as CSS integers.

    Examples:
        >>> format_number(1.0)
        '1'
        >>> format_number(0.5)
        '0.5'
    """
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def to_rem(px: float) -> str:
    """Convert a px length to a root-relative rem string."""
    return f"{format_number(px / REFERENCE_SIZE)}rem"


def format_percent(value: float) -> str:
    """Format a percentage with fixed decimals, without the % sign."""
    return f"{value:.{PERCENT_DIGITS}f}"


def grid_track(percent: float) -> str:
    """Return a clamped grid track of the given width."""
    return f"minmax(0, {format_percent(percent)}%)"


def class_selector(name: str) -> str:
    """Return the class selector for a utility name.

    Dots inside the name (e.g. ``leading-phi-0.5``) are escaped.
    """
    return "." + name.replace(".", "\\.")
