"""Classical Maliki position (Al-Mudawwana)."""
from . import common

MALIKI = {
    'meta': {
        'id': 'maliki',
        'name': 'Maliki',
        'version': '1.0.0',
        'author': 'ZakatFlow Official',
        'description': 'Personal jewelry exempt, debts due within the year deductible, net accessible retirement.',
        'tier': 'official',
        'reference': {
            'authority': 'Imam Malik (Al-Muwatta), Sahnun (Al-Mudawwana)',
        },
    },
    'thresholds': {
        'nisab': common.nisab('gold'),
        'zakat_rate': common.ZAKAT_RATES,
    },
    'assets': {
        'cash': common.CASH,
        'precious_metals': {
            'jewelry': common.JEWELRY_EXEMPT,
        },
        'crypto': common.CRYPTO,
        'investments': common.MARKET_VALUE_INVESTMENTS,
        'retirement': common.NET_ACCESSIBLE_RETIREMENT,
        'real_estate': common.REAL_ESTATE,
        'business': common.BUSINESS,
        'debts_owed_to_user': common.DEBTS_OWED,
        'illiquid_assets': common.ILLIQUID_ASSETS,
        'trusts': common.TRUSTS,
    },
    'liabilities': {
        'method': '12_month_rule',
        'personal_debt': common.personal_debt(
            housing='12_months',
            student_loans='current_due',
            credit_cards='full',
            living_expenses='current_due',
        ),
        'description': 'Only debts falling due within the coming year are deducted.',
    },
}
