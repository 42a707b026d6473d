"""Assembly of Muslim Jurists of America.

Shares are exploited assets: only dividends are zakatable, never principal.
Only the portion of each debt currently due is deducted.
"""
from . import common

AMJA = {
    'meta': {
        'id': 'amja',
        'name': 'AMJA (Assembly of Muslim Jurists of America)',
        'version': '1.0.0',
        'author': 'ZakatFlow Official',
        'description': 'Income-only passive investments, jewelry exempt, currently-due debts only.',
        'tier': 'official',
        'reference': {
            'authority': 'Assembly of Muslim Jurists of America',
            'url': 'https://www.amjaonline.org',
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
        'investments': {
            'passive_investments': {
                'rate': 0.0,
                'treatment': 'income_only',
                'description': 'Long-term holdings are exploited assets; zakat is due on the income only.',
            },
            'reits_rate': 0.0,
            'dividends': {
                'zakatable': True,
                'deduct_purification': True,
            },
        },
        'retirement': common.NET_ACCESSIBLE_RETIREMENT,
        'real_estate': common.REAL_ESTATE,
        'business': common.BUSINESS,
        'debts_owed_to_user': common.DEBTS_OWED,
        'illiquid_assets': common.ILLIQUID_ASSETS,
        'trusts': common.TRUSTS,
    },
    'liabilities': {
        'method': 'asset_specific',
        'personal_debt': common.personal_debt(
            housing='current_due',
            student_loans='current_due',
            credit_cards='full',
            living_expenses='current_due',
            insurance='current_due',
        ),
        'description': 'Only the payments currently due are deducted.',
    },
}
