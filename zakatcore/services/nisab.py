"""Nisab (threshold) resolution from caller-supplied spot prices."""
from zakatcore.constants import GRAMS_PER_OUNCE
from zakatcore.methodology.loader import DEFAULT_POLICY
from zakatcore.methodology.schema import MethodologyPolicy


def nisab_grams(policy: MethodologyPolicy, standard: str) -> float:
    """Get the nisab weight in grams for a standard ('gold' or 'silver')."""
    nisab = policy.thresholds.nisab
    if standard == 'gold':
        return nisab.gold_grams
    if standard == 'silver':
        return nisab.silver_grams
    raise ValueError(f'Invalid nisab standard: {standard}')


def calculate_nisab(
    silver_price_per_ounce: float,
    gold_price_per_ounce: float,
    standard: str | None = None,
    policy: MethodologyPolicy = DEFAULT_POLICY,
) -> float:
    """Calculate the nisab threshold in the prices' currency.

    Args:
        silver_price_per_ounce: Silver spot price per troy ounce
        gold_price_per_ounce: Gold spot price per troy ounce
        standard: 'gold' or 'silver'; None uses the policy default
        policy: Methodology supplying the gram weights

    Returns:
        Threshold amount (grams / GRAMS_PER_OUNCE * price)
    """
    standard = standard or policy.thresholds.nisab.default_standard
    price = gold_price_per_ounce if standard == 'gold' else silver_price_per_ounce
    ounces = nisab_grams(policy, standard) / GRAMS_PER_OUNCE
    return ounces * price
