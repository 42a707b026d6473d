"""Sections shared verbatim by several built-in methodologies.

Presets assemble complete documents from whole sections; a preset that
disagrees with one of these writes its own section out in full.
"""
from zakatcore.constants import NISAB_GOLD_GRAMS, NISAB_SILVER_GRAMS, SOLAR_ZAKAT_RATE, ZAKAT_RATE


def nisab(default_standard: str) -> dict:
    return {
        'default_standard': default_standard,
        'gold_grams': NISAB_GOLD_GRAMS,
        'silver_grams': NISAB_SILVER_GRAMS,
        'description': '85g gold (20 mithqal) or 595g silver (200 dirhams).',
    }


ZAKAT_RATES = {
    'lunar': ZAKAT_RATE,
    'solar': SOLAR_ZAKAT_RATE,
    'description': '2.5% for a lunar year; 2.577% for a solar year (365.25/354.37).',
}

CASH = {
    'zakatable': True,
    'rate': 1.0,
    'description': 'All cash holdings are fully zakatable.',
    'scholarly_basis': 'Consensus of all four schools: cash is the modern equivalent of gold and silver coinage.',
}

JEWELRY_ZAKATABLE = {
    'zakatable': True,
    'rate': 1.0,
    'conditions': [],
    'description': 'Gold and silver jewelry is zakatable whether or not it is worn.',
}

JEWELRY_EXEMPT = {
    'zakatable': False,
    'rate': 1.0,
    'conditions': ['personal_use', 'customary_amount'],
    'description': 'Permissible jewelry worn for personal adornment is exempt.',
}

CRYPTO = {
    'currency_rate': 1.0,
    'trading_rate': 1.0,
    'staking': {
        'principal_rate': 1.0,
        'rewards_rate': 1.0,
        'vested_only': True,
    },
    'description': 'Cryptocurrency is zakatable at full market value; staking rewards once vested.',
}

MARKET_VALUE_INVESTMENTS = {
    'passive_investments': {
        'rate': 1.0,
        'treatment': 'market_value',
        'description': 'Shares are trade goods valued at market price.',
    },
    'reits_rate': 1.0,
    'dividends': {
        'zakatable': True,
        'deduct_purification': True,
    },
    'description': 'All investments at full market value.',
}

NET_ACCESSIBLE_RETIREMENT = {
    'zakatability': 'net_accessible',
    'exemption_age': 59.5,
    'penalty_rate': 0.10,
    'tax_rate_source': 'user_input',
    'description': 'Zakatable on what could be withdrawn today, after taxes and early withdrawal penalties.',
}

REAL_ESTATE = {
    'for_sale': {'zakatable': True, 'rate': 1.0, 'description': 'Trade goods: full market value.'},
    'land_banking': {'zakatable': True, 'rate': 1.0, 'description': 'Held for appreciation: trade goods by intent.'},
    'rental_property': {'income_zakatable': True, 'description': 'Property value exempt; rental income zakatable.'},
    'description': 'Personal residence exempt. Rental income zakatable. Trade property at full value.',
}

BUSINESS = {
    'cash_receivables_rate': 1.0,
    'inventory_rate': 1.0,
    'fixed_assets_rate': 0.0,
    'description': 'Cash, receivables and inventory are zakatable; fixed assets are exempt.',
}

DEBTS_OWED = {
    'good_debt_rate': 1.0,
    'bad_debt_on_recovery': True,
    'description': 'Collectible debts are zakatable; bad debts only once recovered.',
}

ILLIQUID_ASSETS = {
    'rate': 1.0,
    'description': 'Illiquid assets held for sale are zakatable at market value.',
}

TRUSTS = {
    'revocable_rate': 1.0,
    'irrevocable_rate': 1.0,
    'description': 'Revocable trusts belong to the grantor; irrevocable trusts only when accessible.',
}


def personal_debt(housing, student_loans, credit_cards, living_expenses, insurance='full',
                  expense_period='annual', deductible=True, description=None) -> dict:
    doc = {
        'deductible': deductible,
        'types': {
            'housing': housing,
            'student_loans': student_loans,
            'credit_cards': credit_cards,
            'living_expenses': living_expenses,
            'insurance': insurance,
            'expense_period': expense_period,
        },
    }
    if description:
        doc['description'] = description
    return doc
