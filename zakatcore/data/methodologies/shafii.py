"""Classical Shafi'i position (Al-Nawawi, Al-Majmu')."""
from . import common

SHAFII = {
    'meta': {
        'id': 'shafii',
        'name': "Shafi'i",
        'version': '1.0.0',
        'author': 'ZakatFlow Official',
        'description': 'Personal jewelry exempt, debts never reduce zakat, net accessible retirement.',
        'tier': 'official',
        'reference': {
            'authority': "Al-Nawawi (Al-Majmu'), Al-Shirazi (Al-Muhadhdhab)",
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
            'description': 'Investment metal is zakatable; permissible worn jewelry is exempt.',
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
        'method': 'no_deduction',
        'personal_debt': common.personal_debt(
            housing='none',
            student_loans='none',
            credit_cards='none',
            living_expenses='none',
            insurance='none',
            deductible=False,
        ),
        'description': 'Debt does not prevent zakat: it is owed on wealth in hand regardless of obligations.',
    },
}
