"""Tests for nisab threshold resolution."""
import pytest

from zakatcore.constants import GRAMS_PER_OUNCE, NISAB_GOLD_GRAMS, NISAB_SILVER_GRAMS
from zakatcore.methodology.loader import replace_sections
from zakatcore.services.nisab import calculate_nisab, nisab_grams


class TestCalculateNisab:
    """Tests for grams -> ounces -> currency conversion."""

    def test_gold_standard(self, bradford):
        """85g gold at $2,000/oz."""
        nisab = calculate_nisab(25.0, 2000.0, 'gold', bradford)
        assert nisab == pytest.approx(85 / 31.1035 * 2000.0)

    def test_silver_standard(self, bradford):
        """595g silver at $25/oz."""
        nisab = calculate_nisab(25.0, 2000.0, 'silver', bradford)
        assert nisab == pytest.approx(595 / 31.1035 * 25.0)

    def test_policy_default_standard(self, bradford, shafii):
        """Without an explicit standard the policy default applies."""
        assert calculate_nisab(25.0, 2000.0, policy=bradford) == calculate_nisab(25.0, 2000.0, 'silver', bradford)
        assert calculate_nisab(25.0, 2000.0, policy=shafii) == calculate_nisab(25.0, 2000.0, 'gold', shafii)

    def test_policy_gram_override(self, bradford):
        """Gram weights come from the methodology, not the constants."""
        thresholds = bradford.thresholds.model_dump()
        thresholds['nisab']['gold_grams'] = 87.48
        policy = replace_sections(bradford, thresholds=thresholds)

        nisab = calculate_nisab(25.0, 2000.0, 'gold', policy)

        assert nisab == pytest.approx(87.48 / GRAMS_PER_OUNCE * 2000.0)

    def test_zero_price(self, bradford):
        assert calculate_nisab(0.0, 0.0, 'silver', bradford) == 0.0


class TestNisabGrams:

    def test_defaults(self, bradford):
        assert nisab_grams(bradford, 'gold') == NISAB_GOLD_GRAMS
        assert nisab_grams(bradford, 'silver') == NISAB_SILVER_GRAMS

    def test_invalid_standard(self, bradford):
        with pytest.raises(ValueError):
            nisab_grams(bradford, 'platinum')
