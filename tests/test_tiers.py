"""Tests for strength tier classification."""

import math

import pytest
from entropy import DEFAULT_TIERS, build_tiers, classify, select_tier


class TestClassify:
    """Test entropy to tier mapping."""

    @pytest.mark.parametrize("entropy, expected", [
        (78, 5),
        (77.999, 4),
        (66, 4),
        (65.999, 3),
        (56, 3),
        (48, 2),
        (40, 1),
        (39.999, 0),
        (0, 0),
        (-12.5, 0),
        (1e9, 5),
    ])
    def test_thresholds(self, entropy, expected):
        """Tier is the highest one whose lower bound is reached."""
        assert classify(entropy) == expected

    def test_nan_is_weakest(self):
        """NaN entropy falls through to tier 0."""
        assert classify(math.nan) == 0

    def test_non_decreasing(self):
        """Higher entropy never yields a lower tier."""
        values = [x / 4 for x in range(-40, 400)]
        tiers = [classify(v) for v in values]
        assert tiers == sorted(tiers)


class TestTierTable:
    """Test tier table construction."""

    def test_default_labels(self):
        """Default tiers run from 'Very weak' to 'Super strong'."""
        assert [t.label for t in DEFAULT_TIERS] == [
            "Very weak", "Weak", "Pass", "Strong", "Very strong", "Super strong"
        ]
        assert DEFAULT_TIERS[0].style_class == "very-weak"
        assert DEFAULT_TIERS[5].style_class == "super-strong"

    def test_lower_bounds(self):
        """Lower bounds strictly increase with the index."""
        bounds = [t.lower_bound for t in DEFAULT_TIERS]
        assert bounds[0] == -math.inf
        assert bounds[1:] == [40, 48, 56, 66, 78]
        assert all(a < b for a, b in zip(bounds, bounds[1:]))

    def test_as_dict_hides_infinite_bound(self):
        """Tier 0 serializes with no lower bound."""
        assert DEFAULT_TIERS[0].as_dict()["lower_bound"] is None
        assert DEFAULT_TIERS[5].as_dict()["lower_bound"] == 78

    def test_wrong_label_count(self):
        """Label and class lists must have six entries."""
        with pytest.raises(ValueError):
            build_tiers(["a", "b"], ["c", "d"])
        with pytest.raises(ValueError):
            build_tiers(["a"] * 6, ["c"] * 7)

    def test_select_tier_uses_custom_labels(self):
        """Custom labels come back from select_tier."""
        tiers = build_tiers([f"L{i}" for i in range(6)], [f"c{i}" for i in range(6)])
        tier = select_tier(tiers, 50)
        assert tier.index == 2
        assert tier.label == "L2"
        assert tier.style_class == "c2"
