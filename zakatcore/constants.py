"""Shared constants for zakat calculation."""

# Nisab thresholds (minimum wealth for zakat obligation)
NISAB_GOLD_GRAMS = 85.0
NISAB_SILVER_GRAMS = 595.0
GRAMS_PER_OUNCE = 31.1035

# Zakat rates
ZAKAT_RATE = 0.025          # 2.5% for a lunar year
SOLAR_ZAKAT_RATE = 0.02577  # 2.5% * 365.25/354.37

# Fallback spot prices (per troy ounce) used when a caller omits prices
DEFAULT_SILVER_PRICE_PER_OUNCE = 24.50
DEFAULT_GOLD_PRICE_PER_OUNCE = 2650.0

# Retirement accessibility
EARLY_WITHDRAWAL_AGE = 59.5
EARLY_WITHDRAWAL_PENALTY_RATE = 0.10
FLAT_RETIREMENT_TAX_RATE = 0.30

# Liability expense periods
EXPENSE_PERIOD_MULTIPLIERS = {
    'annual': 12,
    'monthly': 1,
}
DEFAULT_EXPENSE_PERIOD = 'annual'

CALENDAR_TYPES = ('lunar', 'solar')
NISAB_STANDARDS = ('gold', 'silver')

# ============================================================
# Methodology enum labels
# ============================================================

RETIREMENT_METHODS = {
    'full': '100% of Balance',
    'net_accessible': 'Net Accessible (Minus Taxes/Penalties)',
    'deferred_upon_access': 'Exempt until Withdrawn',
    'conditional_age': 'Exempt until Age {age:g}',
    'exempt': 'Exempt',
}

PASSIVE_INVESTMENT_TREATMENTS = {
    'market_value': '100% Market Value',
    'underlying_assets': '{percent:.0f}% of Market Value',
    'income_only': 'Dividends Only (No Principal)',
}

DEBT_METHODS = {
    'full_deduction': 'Fully Deductible',
    'no_deduction': 'Not Deductible',
    '12_month_rule': 'Next 12 Months Only',
    'asset_specific': 'Per Debt Type',
}

DEBT_TYPE_RULES = {
    'full': 'Full amount',
    '12_months': 'Next 12 months',
    'current_due': 'Currently due only',
    'none': 'Not deductible',
}

# Breakdown categories, in report order
ASSET_CATEGORIES = {
    'liquid': 'Cash & Savings',
    'precious_metals': 'Precious Metals',
    'crypto': 'Crypto & Digital',
    'investments': 'Investments',
    'retirement': 'Retirement',
    'trusts': 'Trusts',
    'real_estate': 'Real Estate',
    'business': 'Business',
    'debts_owed': 'Debt Owed to You',
    'illiquid': 'Illiquid Assets',
    'exempt': 'Exempt Assets',
}
