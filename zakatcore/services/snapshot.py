"""Financial snapshot: the subject's raw financial facts for one assessment."""
import re
from collections.abc import Mapping
from dataclasses import asdict, dataclass, fields

from zakatcore.constants import CALENDAR_TYPES, EARLY_WITHDRAWAL_AGE, NISAB_STANDARDS


@dataclass(frozen=True)
class FinancialSnapshot:
    """Flat, immutable set of balances, flags and preferences.

    All monetary fields are in ``currency`` and expected to be non-negative;
    sanitizing them is the caller's job. The evaluators only do arithmetic.
    """
    # Preferences
    currency: str = 'USD'
    calendar_type: str = 'lunar'            # lunar | solar
    nisab_standard: str | None = None       # None -> methodology default
    methodology: str | None = None          # registry id

    # Personal
    age: float = 30
    estimated_tax_rate: float = 0.25        # combined marginal rate as a fraction
    is_over_59_half: bool = False

    # Category switches
    has_precious_metals: bool = False
    has_crypto: bool = False
    has_real_estate: bool = False
    has_business: bool = False
    has_illiquid_assets: bool = False
    has_debt_owed_to_you: bool = False
    has_tax_payments: bool = False
    has_trusts: bool = False

    # Liquid assets
    checking_accounts: float = 0.0
    savings_accounts: float = 0.0
    cash_on_hand: float = 0.0
    digital_wallets: float = 0.0
    foreign_currency: float = 0.0
    interest_earned: float = 0.0            # purification only, never zakatable

    # Precious metals
    gold_investment_value: float = 0.0
    gold_jewelry_value: float = 0.0
    silver_investment_value: float = 0.0
    silver_jewelry_value: float = 0.0

    # Crypto
    crypto_currency: float = 0.0
    crypto_trading: float = 0.0
    staked_assets: float = 0.0
    staked_rewards_vested: float = 0.0
    staked_rewards_unvested: float = 0.0
    liquidity_pool_value: float = 0.0

    # Investments
    active_investments: float = 0.0
    passive_investments_value: float = 0.0
    reits_value: float = 0.0
    dividends: float = 0.0
    dividend_purification_percent: float = 0.0  # 0-100

    # Retirement
    roth_ira_contributions: float = 0.0
    roth_ira_earnings: float = 0.0
    traditional_ira_balance: float = 0.0
    four_oh_one_k_vested_balance: float = 0.0
    four_oh_one_k_unvested_match: float = 0.0
    retirement_withdrawal_allowed: bool = True
    retirement_withdrawal_limit: float = 1.0
    ira_withdrawals: float = 0.0
    esa_withdrawals: float = 0.0
    five_twenty_nine_withdrawals: float = 0.0
    hsa_balance: float = 0.0

    # Trusts
    revocable_trust_value: float = 0.0
    irrevocable_trust_value: float = 0.0
    irrevocable_trust_accessible: bool = False
    clat_value: float = 0.0

    # Real estate
    primary_residence_value: float = 0.0
    real_estate_for_sale: float = 0.0
    land_banking_value: float = 0.0
    rental_property_income: float = 0.0

    # Business
    business_cash_and_receivables: float = 0.0
    business_inventory: float = 0.0
    business_fixed_assets: float = 0.0

    # Illiquid assets
    illiquid_assets_value: float = 0.0
    livestock_value: float = 0.0

    # Debts owed to the subject
    good_debt_owed_to_you: float = 0.0
    bad_debt_outstanding: float = 0.0
    bad_debt_recovered: float = 0.0

    # Liabilities
    monthly_living_expenses: float = 0.0
    monthly_mortgage: float = 0.0
    mortgage_remaining_principal: float = 0.0
    student_loans_due: float = 0.0
    student_loan_remaining_principal: float = 0.0
    credit_card_balance: float = 0.0
    unpaid_bills: float = 0.0
    insurance_expenses: float = 0.0
    property_tax: float = 0.0
    late_tax_payments: float = 0.0

    @property
    def is_past_withdrawal_age(self) -> bool:
        return self.is_over_59_half or self.age >= EARLY_WITHDRAWAL_AGE

    @classmethod
    def from_dict(cls, data: Mapping) -> 'FinancialSnapshot':
        """Build a snapshot from snake_case or camelCase keys.

        Unknown keys are ignored; missing keys take their defaults.
        """
        known = SNAPSHOT_FIELDS
        values = {}
        for key, value in data.items():
            name = key if key in known else _ALIASES.get(key, camel_to_snake(key))
            if name in known:
                values[name] = value
        return cls(**values)

    def to_dict(self) -> dict:
        return asdict(self)


def camel_to_snake(name: str) -> str:
    """Convert ``fourOhOneKVestedBalance`` to ``four_oh_one_k_vested_balance``."""
    return re.sub(r'(?<=[a-z0-9])(?=[A-Z])', '_', name).lower()


SNAPSHOT_FIELDS = {f.name: f for f in fields(FinancialSnapshot)}

# Field names that do not survive a mechanical camelCase conversion
_ALIASES = {
    'rothIRAContributions': 'roth_ira_contributions',
    'rothIRAEarnings': 'roth_ira_earnings',
    'traditionalIRABalance': 'traditional_ira_balance',
    'iraWithdrawals': 'ira_withdrawals',
    'hsaBalance': 'hsa_balance',
    'isOver59Half': 'is_over_59_half',
    'fourOhOneKVestedBalance': 'four_oh_one_k_vested_balance',
    'fourOhOneKUnvestedMatch': 'four_oh_one_k_unvested_match',
    'madhab': 'methodology',
}


def check_snapshot(data: Mapping) -> list[str]:
    """Shape-check raw snapshot input before it reaches the evaluators.

    Numbers must be numeric and non-negative, flags must be booleans, and the
    preference fields must hold one of their known values.

    Returns:
        List of ``field: message`` errors (empty when the input is usable)
    """
    errors = []
    for key, value in data.items():
        name = key if key in SNAPSHOT_FIELDS else _ALIASES.get(key, camel_to_snake(key))
        if name not in SNAPSHOT_FIELDS:
            continue
        default = SNAPSHOT_FIELDS[name].default
        if isinstance(default, bool):
            if not isinstance(value, bool):
                errors.append(f'{key}: must be a boolean')
        elif isinstance(default, (int, float)):
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                errors.append(f'{key}: must be a number')
            elif value < 0:
                errors.append(f'{key}: must be non-negative')
        elif value is not None and not isinstance(value, str):
            errors.append(f'{key}: must be a string')

    calendar_type = data.get('calendar_type', data.get('calendarType'))
    if calendar_type is not None and calendar_type not in CALENDAR_TYPES:
        errors.append(f"calendar_type: must be one of {', '.join(CALENDAR_TYPES)}")
    standard = data.get('nisab_standard', data.get('nisabStandard'))
    if standard is not None and standard not in NISAB_STANDARDS:
        errors.append(f"nisab_standard: must be one of {', '.join(NISAB_STANDARDS)}")
    return errors
