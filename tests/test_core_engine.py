"""Tests for the golden-ratio token engine."""

import math

import pytest

from goldentokens.core.constants import PHI
from goldentokens.core.engine import (
    compute_column_ratios,
    compute_line_heights,
    compute_ratio_table,
    compute_spacing_scale,
    compute_typography_scale,
)
from goldentokens.core.validation import DomainError


class TestPhi:
    """Tests for the PHI constant."""

    def test_value(self) -> None:
        """Test PHI is (1 + √5) / 2."""
        assert PHI == pytest.approx(1.618034, abs=1e-6)

    def test_defining_identity(self) -> None:
        """Test φ² = φ + 1."""
        assert PHI * PHI == pytest.approx(PHI + 1)


class TestRatioTable:
    """Tests for compute_ratio_table."""

    def test_segments(self) -> None:
        """Test major, minor and tertiary percentages."""
        ratios = compute_ratio_table()
        assert ratios.major == pytest.approx(61.8034, abs=1e-3)
        assert ratios.minor == pytest.approx(38.1966, abs=1e-3)
        assert ratios.tertiary == pytest.approx(23.6068, abs=1e-3)

    def test_ratio_identity(self) -> None:
        """Test each segment is 1/φ of the previous one."""
        ratios = compute_ratio_table()
        assert ratios.minor / ratios.major == pytest.approx(1 / PHI, rel=1e-6)
        assert ratios.tertiary / ratios.minor == pytest.approx(1 / PHI, rel=1e-6)

    def test_major_and_minor_partition_the_whole(self) -> None:
        """Test the two-segment split sums to 100."""
        ratios = compute_ratio_table()
        assert ratios.major + ratios.minor == pytest.approx(100)

    def test_extended_table(self) -> None:
        """Test the four-level table from 100/φ³ to 100/φ⁶."""
        extended = compute_ratio_table().extended.as_tuple()
        assert extended == pytest.approx((23.6068, 14.5898, 9.0170, 5.5728), abs=1e-3)

    def test_extended_table_is_not_a_partition(self) -> None:
        """Test the extended table is a diminishing progression below 100."""
        assert sum(compute_ratio_table().extended.as_tuple()) < 100

    def test_complement_uses_exact_tertiary(self) -> None:
        """Test the tertiary complement sums to exactly 100 with tertiary."""
        ratios = compute_ratio_table()
        assert ratios.tertiary_complement == pytest.approx(76.3932, abs=1e-3)
        assert ratios.tertiary + ratios.tertiary_complement == pytest.approx(100, abs=1e-9)


class TestColumnRatios:
    """Tests for compute_column_ratios."""

    def test_pure_sequence(self) -> None:
        """Test the six pure columns."""
        pure = compute_column_ratios().pure
        expected = [61.8034, 38.1966, 23.6068, 14.5898, 9.0170, 5.5728]
        assert list(pure) == pytest.approx(expected, abs=1e-3)

    def test_pure_sequence_is_geometric(self) -> None:
        """Test each pure column is 1/φ of the previous one."""
        pure = compute_column_ratios().pure
        for larger, smaller in zip(pure, pure[1:]):
            assert smaller / larger == pytest.approx(1 / PHI)

    def test_hybrid_five(self) -> None:
        """Test hybrid(5) splits the remainder into four columns."""
        split = compute_column_ratios().hybrid(5)
        assert split.major == pytest.approx(61.8034, abs=1e-3)
        assert split.equal == pytest.approx(9.5492, abs=1e-3)
        assert split.equal_count == 4

    def test_hybrid_two(self) -> None:
        """Test hybrid(2) is the plain golden split."""
        split = compute_column_ratios().hybrid(2)
        assert split.equal == pytest.approx(38.1966, abs=1e-3)

    def test_hybrid_columns_fill_the_whole(self) -> None:
        """Test one major plus n-1 equal columns sum to 100."""
        for n in range(2, 10):
            split = compute_column_ratios().hybrid(n)
            assert split.major + split.equal * split.equal_count == pytest.approx(100)

    @pytest.mark.parametrize("n", [1, 0, -1])
    def test_hybrid_domain_guard(self, n: int) -> None:
        """Test fewer than two columns raise DomainError."""
        with pytest.raises(DomainError):
            compute_column_ratios().hybrid(n)


class TestSpacingScale:
    """Tests for compute_spacing_scale."""

    def test_default_values(self) -> None:
        """Test tiers for base 16, in rem."""
        spacing = compute_spacing_scale()
        assert spacing.phi / 16 == pytest.approx(1.618034, abs=1e-6)
        assert spacing.phi_sm / 16 == 1.0
        assert spacing.phi_xs / 16 == pytest.approx(0.618034, abs=1e-6)
        assert spacing.phi_2xs / 16 == pytest.approx(0.381966, abs=1e-6)

    def test_scale_is_decreasing(self) -> None:
        """Test spacing tiers strictly decrease from phi to phi-2xs."""
        values = compute_spacing_scale().values()
        for i in range(len(values) - 1):
            assert values[i] > values[i + 1], f"spacing scale not decreasing at index {i}"

    def test_deterministic(self) -> None:
        """Test repeated calls give identical output."""
        assert compute_spacing_scale(16) == compute_spacing_scale(16)
        assert compute_spacing_scale(16).as_rem() == compute_spacing_scale(16).as_rem()

    def test_scales_with_base(self) -> None:
        """Test doubling the base doubles every tier."""
        small = compute_spacing_scale(10).values()
        large = compute_spacing_scale(20).values()
        assert list(large) == pytest.approx([2 * v for v in small])

    @pytest.mark.parametrize("base", [0, -16, math.inf, math.nan])
    def test_invalid_base_raises(self, base: float) -> None:
        """Test invalid base sizes raise DomainError."""
        with pytest.raises(DomainError):
            compute_spacing_scale(base)

    def test_underflowing_base_raises(self) -> None:
        """Test a base whose phi-2xs tier rounds to zero is rejected."""
        with pytest.raises(DomainError, match="underflow"):
            compute_spacing_scale(5e-324)


class TestTypographyScale:
    """Tests for compute_typography_scale."""

    MAJOR_ORDER = ["phi-3xl", "phi-2xl", "phi-xl", "phi-lg", "phi", "phi-sm", "phi-xs"]

    def test_major_tiers_strictly_ordered(self) -> None:
        """Test major tiers decrease from phi-3xl to phi-xs."""
        scale = compute_typography_scale(16)
        sizes = [scale.get(name).font_size for name in self.MAJOR_ORDER]
        for i in range(len(sizes) - 1):
            assert sizes[i] > sizes[i + 1], f"typography not decreasing at {self.MAJOR_ORDER[i]}"

    def test_base_tier(self) -> None:
        """Test the phi tier equals the base size."""
        assert compute_typography_scale(16).get("phi").font_size_rem == "1rem"

    def test_integer_powers(self) -> None:
        """Test major tiers are base·φⁿ."""
        scale = compute_typography_scale(16)
        assert scale.get("phi-3xl").font_size == pytest.approx(16 * PHI**4)
        assert scale.get("phi-lg").font_size == pytest.approx(16 * PHI)
        assert scale.get("phi-xs").font_size == pytest.approx(16 / PHI**2)

    @pytest.mark.parametrize(
        ("alt", "upper", "lower"),
        [
            ("phi-xl-alt", "phi-2xl", "phi-xl"),
            ("phi-2xl-alt", "phi-xl", "phi-lg"),
            ("phi-lg-alt", "phi-lg", "phi"),
            ("phi-sm-alt", "phi", "phi-sm"),
        ],
    )
    def test_alt_tiers_interleave(self, alt: str, upper: str, lower: str) -> None:
        """Test each alt tier lies strictly between two major tiers."""
        scale = compute_typography_scale(16)
        assert scale.get(lower).font_size < scale.get(alt).font_size < scale.get(upper).font_size

    def test_alt_tiers_are_half_steps(self) -> None:
        """Test alt tiers sit √φ from their neighbours."""
        scale = compute_typography_scale(16)
        assert scale.get("phi-lg-alt").font_size == pytest.approx(16 * math.sqrt(PHI))
        assert scale.get("phi-sm-alt").font_size == pytest.approx(16 / math.sqrt(PHI))
        assert scale.get("phi-2xl-alt").font_size == pytest.approx(16 * PHI * math.sqrt(PHI))
        assert scale.get("phi-xl-alt").font_size == pytest.approx(16 * PHI**2 * math.sqrt(PHI))

    def test_alt_tiers_fill_distinct_gaps(self) -> None:
        """Test no two alt tiers share a font size."""
        sizes = [tier.font_size for tier in compute_typography_scale(16).alt]
        assert len(set(sizes)) == len(sizes)

    def test_both_tracks_present(self) -> None:
        """Test major and alt tracks coexist."""
        scale = compute_typography_scale()
        assert len(scale.major) == 7
        assert len(scale.alt) == 4

    def test_line_heights(self) -> None:
        """Test headline, section and body leading per tier."""
        scale = compute_typography_scale()
        assert scale.get("phi-3xl").line_height == "1.2"
        assert scale.get("phi-2xl-alt").line_height == "1.2"
        assert float(scale.get("phi-xl").line_height) == pytest.approx(PHI)
        assert float(scale.get("phi").line_height) == pytest.approx(1.381966, abs=1e-6)

    def test_invalid_base_raises(self) -> None:
        """Test invalid base sizes raise DomainError."""
        with pytest.raises(DomainError):
            compute_typography_scale(-1)

    def test_overflowing_base_raises(self) -> None:
        """Test a finite base whose φ⁴ tier overflows is rejected."""
        with pytest.raises(DomainError, match="overflow"):
            compute_typography_scale(1e308)

    def test_underflowing_base_raises(self) -> None:
        """Test a base whose smallest tier rounds to zero is rejected."""
        with pytest.raises(DomainError, match="underflow"):
            compute_typography_scale(5e-324)


class TestLineHeights:
    """Tests for compute_line_heights."""

    def test_values(self) -> None:
        """Test every line height against its closed form."""
        heights = compute_line_heights()
        assert heights.phi == pytest.approx(1.618034, abs=1e-6)
        assert heights.phi_2 == pytest.approx(2.618034, abs=1e-6)
        assert heights.phi_half == pytest.approx(1.272020, abs=1e-6)
        assert heights.phi_tight == pytest.approx(1.381966, abs=1e-6)
        assert heights.phi_relaxed == pytest.approx(2.236068, abs=1e-6)

    def test_deterministic(self) -> None:
        """Test repeated calls give equal tables."""
        assert compute_line_heights() == compute_line_heights()
