"""Classical Hanbali position (Ibn Qudama, Al-Mughni)."""
from . import common

HANBALI = {
    'meta': {
        'id': 'hanbali',
        'name': 'Hanbali',
        'version': '1.0.0',
        'author': 'ZakatFlow Official',
        'description': 'Personal jewelry exempt, full debt deduction, net accessible retirement.',
        'tier': 'official',
        'reference': {
            'authority': 'Ibn Qudama (Al-Mughni), Al-Buhuti (Kashshaf al-Qina)',
        },
    },
    'thresholds': {
        'nisab': common.nisab('silver'),
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
        'method': 'full_deduction',
        'personal_debt': common.personal_debt(
            housing='12_months',
            student_loans='full',
            credit_cards='full',
            living_expenses='12_months',
        ),
        'description': 'Debts owed to others are deducted before assessing zakat.',
    },
}
