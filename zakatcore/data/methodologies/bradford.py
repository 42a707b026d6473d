"""Balanced modern synthesis (Sheikh Joe Bradford). The system default.

30% proxy for passive investments, retirement exempt under 59.5, jewelry
zakatable, 12-month debt deduction.
"""
from . import common

BRADFORD = {
    'meta': {
        'id': 'bradford',
        'name': 'Balanced (Sheikh Joe Bradford)',
        'version': '2.0.0',
        'author': 'ZakatFlow Official',
        'description': (
            'Modern synthesis: 30% proxy for passive investments, retirement exempt '
            'under 59.5, jewelry zakatable, 12-month debt deduction.'
        ),
        'tier': 'official',
        'reference': {
            'authority': 'Sheikh Joe Bradford',
            'url': 'https://joebradford.net/zakat-on-assets-a-quick-review/',
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
            'description': 'Precautionary position: gold and silver keep their monetary nature in any form.',
        },
        'crypto': common.CRYPTO,
        'investments': {
            'passive_investments': {
                'rate': 0.30,
                'treatment': 'underlying_assets',
                'description': (
                    'Roughly 30% of a diversified fund represents zakatable current assets '
                    '(cash, receivables, inventory).'
                ),
                'scholarly_basis': 'AAOIFI Shariah Standard No. 9.',
            },
            'reits_rate': 0.30,
            'dividends': {
                'zakatable': True,
                'deduct_purification': True,
            },
            'description': 'Active trading at full value; long-term holdings at the 30% proxy.',
        },
        'retirement': {
            'zakatability': 'conditional_age',
            'exemption_age': 59.5,
            'penalty_rate': 0.10,
            'tax_rate_source': 'user_input',
            'description': '401(k)/IRA balances are inaccessible wealth (mal dimar) until 59.5.',
        },
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
            living_expenses='12_months',
            insurance='current_due',
            description='Debts due within the coming year; monthly obligations annualized.',
        ),
        'description': 'Debts due within the coming year reduce zakatable wealth.',
    },
}
