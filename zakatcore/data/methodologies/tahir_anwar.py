"""Imam Tahir Anwar (Hanafi, strong-ownership reading).

Differs from the mainstream Hanafi preset on retirement: the whole vested
balance is zakatable regardless of taxes, penalties or access limits.
"""
from . import common

TAHIR_ANWAR = {
    'meta': {
        'id': 'tahir_anwar',
        'name': 'Imam Tahir Anwar (Hanafi)',
        'version': '1.0.0',
        'author': 'ZakatFlow Official',
        'description': 'Hanafi with full retirement balance, jewelry zakatable, currently-due debts deducted.',
        'tier': 'official',
        'reference': {
            'authority': 'Imam Tahir Anwar',
        },
    },
    'thresholds': {
        'nisab': common.nisab('silver'),
        'zakat_rate': common.ZAKAT_RATES,
    },
    'assets': {
        'cash': common.CASH,
        'precious_metals': {
            'jewelry': common.JEWELRY_ZAKATABLE,
        },
        'crypto': common.CRYPTO,
        'investments': common.MARKET_VALUE_INVESTMENTS,
        'retirement': {
            'zakatability': 'full',
            'description': 'Strong ownership (milk tam): the vested balance is fully zakatable.',
        },
        'real_estate': common.REAL_ESTATE,
        'business': common.BUSINESS,
        'debts_owed_to_user': common.DEBTS_OWED,
        'illiquid_assets': common.ILLIQUID_ASSETS,
        'trusts': common.TRUSTS,
    },
    'liabilities': {
        'method': 'full_deduction',
        'personal_debt': common.personal_debt(
            housing='current_due',
            student_loans='current_due',
            credit_cards='full',
            living_expenses='current_due',
        ),
    },
}
