"""Classical Hanafi position (Al-Hidaya, Badai' al-Sanai')."""
from . import common

HANAFI = {
    'meta': {
        'id': 'hanafi',
        'name': 'Hanafi',
        'version': '1.0.0',
        'author': 'ZakatFlow Official',
        'description': 'Jewelry zakatable, full debt deduction, net accessible retirement, 100% investments.',
        'tier': 'official',
        'reference': {
            'authority': "Al-Kasani (Badai' al-Sanai'), Al-Marghinani (Al-Hidaya), Al-Sarakhsi (Al-Mabsut)",
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
            'scholarly_basis': 'Gold and silver are created as prices (thaman); form does not change their nature.',
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
            description='Debt weakens ownership (al-dayn yunqis al-milk).',
        ),
        'description': 'Debts are a full offset against zakatable wealth.',
    },
}
