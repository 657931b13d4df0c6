"""Percentage splits of a whole into golden-ratio segments."""

from dataclasses import dataclass

from goldentokens.core.validation import validate_column_count


@dataclass(frozen=True, slots=True)
class ExtendedRatios:
    """Four-level diminishing progression, 100/φ³ .. 100/φ⁶.

    Not a partition: the segments do not sum to 100.
    """

    a: float
    b: float
    c: float
    d: float

    def as_tuple(self) -> tuple[float, float, float, float]:
        """Return the segments in descending order."""
        return (self.a, self.b, self.c, self.d)


@dataclass(frozen=True, slots=True)
class RatioTable:
    """Golden segments of 100%.

    Attributes:
        major: Larger segment, 100/φ.
        minor: Smaller segment, 100/φ².
        tertiary: Further subdivision, 100/φ³.
        extended: Four-level table for multi-column layouts.
    """

    major: float
    minor: float
    tertiary: float
    extended: ExtendedRatios

    @property
    def tertiary_complement(self) -> float:
        """Return 100 minus the exact tertiary segment."""
        return 100 - self.tertiary


@dataclass(frozen=True, slots=True)
class HybridSplit:
    """One golden-major column followed by equal remaining columns.

    Attributes:
        columns: Total number of columns.
        major: Width of the emphasized column in percent.
        equal: Width of each of the other columns in percent.
    """

    columns: int
    major: float
    equal: float

    @property
    def equal_count(self) -> int:
        """Return the number of equally sized columns."""
        return self.columns - 1


@dataclass(frozen=True, slots=True)
class ColumnRatioSet:
    """Multi-column percentage sequences.

    Attributes:
        pure: Six descending widths, 100/φ¹ .. 100/φ⁶.
    """

    pure: tuple[float, ...]

    @property
    def major(self) -> float:
        """Return the widest pure column, 100/φ."""
        return self.pure[0]

    def hybrid(self, n: int) -> HybridSplit:
        """Split 100% into one major column and n-1 equal columns.

        Args:
            n: Total column count, at least 2.

        Raises:
            DomainError: If n is not an integer of at least 2.
        """
        columns = validate_column_count(n)
        return HybridSplit(
            columns=columns,
            major=self.major,
            equal=(100 - self.major) / (columns - 1),
        )
