"""Asset evaluation: zakatable amounts per category with line-item detail.

Every category is built from ``LineItem``s and its zakatable amount is the
sum of its items, so the category totals, the breakdown and the grand total
always agree. The ``exempt`` category is informational and never adds to the
zakatable total.
"""
import logging
from dataclasses import asdict, dataclass, field, replace

from zakatcore.constants import (
    ASSET_CATEGORIES,
    EARLY_WITHDRAWAL_AGE,
    FLAT_RETIREMENT_TAX_RATE,
)
from zakatcore.methodology.loader import DEFAULT_POLICY
from zakatcore.methodology.schema import MethodologyPolicy
from .snapshot import FinancialSnapshot

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LineItem:
    name: str
    value: float
    zakatable_fraction: float
    zakatable_amount: float

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class CategoryBreakdown:
    """Gross and zakatable totals for one asset category."""
    key: str
    label: str
    total: float
    zakatable_amount: float
    zakatable_fraction: float
    percent_of_net: float
    items: list[LineItem] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            'key': self.key,
            'label': self.label,
            'total': self.total,
            'zakatable_amount': self.zakatable_amount,
            'zakatable_fraction': self.zakatable_fraction,
            'percent_of_net': self.percent_of_net,
            'items': [item.to_dict() for item in self.items],
        }


def _clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(high, value))


def _item(name: str, value: float, fraction: float) -> LineItem:
    return LineItem(name=name, value=value, zakatable_fraction=fraction, zakatable_amount=value * fraction)


def _amount_item(name: str, value: float, amount: float) -> LineItem:
    """Line item whose zakatable amount is computed rather than a flat rate."""
    fraction = amount / value if value > 0 else 0.0
    return LineItem(name=name, value=value, zakatable_fraction=fraction, zakatable_amount=amount)


def calculate_retirement_accessible(
    balance: float,
    age: float,
    tax_rate: float,
    policy: MethodologyPolicy = DEFAULT_POLICY,
    withdrawal_allowed: bool = True,
    withdrawal_limit: float = 1.0,
    over_59_half: bool = False,
) -> float:
    """Resolve a vested retirement balance to its zakatable amount.

    The policy's ``zakatability`` mode is checked in this order:

    - exempt: nothing is zakatable
    - deferred_upon_access: nothing this year, zakat is due on withdrawal
    - conditional_age: nothing below ``exemption_age``, otherwise net_accessible
    - full: the whole vested balance
    - net_accessible: what could be withdrawn today, after tax and the early
      withdrawal penalty (penalty only under 59.5)

    Args:
        balance: Vested balance
        age: Subject's age in years
        tax_rate: Subject's estimated tax rate (ignored under a flat-rate policy)
        policy: Methodology to apply
        withdrawal_allowed: False when the plan forbids any withdrawal
        withdrawal_limit: Fraction of the balance the plan lets you withdraw
        over_59_half: Subject states they are past 59.5 whatever ``age`` says

    Returns:
        Zakatable amount, never negative and never above ``balance``
    """
    rules = policy.assets.retirement
    mode = rules.zakatability
    if over_59_half:
        age = max(age, EARLY_WITHDRAWAL_AGE)

    if mode == 'exempt':
        return 0.0
    if mode == 'deferred_upon_access':
        return 0.0
    if mode == 'conditional_age':
        if age < rules.exemption_age:
            return 0.0
        return _net_accessible(balance, age, tax_rate, rules, withdrawal_allowed, withdrawal_limit)
    if mode == 'full':
        return balance
    if mode == 'net_accessible':
        return _net_accessible(balance, age, tax_rate, rules, withdrawal_allowed, withdrawal_limit)
    raise ValueError(f'Unknown retirement zakatability: {mode}')


def _net_accessible(balance, age, tax_rate, rules, withdrawal_allowed, withdrawal_limit) -> float:
    if not withdrawal_allowed:
        return 0.0
    accessible = balance * _clamp(withdrawal_limit)
    penalty = rules.penalty_rate if age < EARLY_WITHDRAWAL_AGE else 0.0
    if rules.tax_rate_source == 'flat_rate':
        tax_rate = FLAT_RETIREMENT_TAX_RATE
    return accessible * _clamp(1 - tax_rate - penalty)


def _retirement_amount(snapshot: FinancialSnapshot, balance: float, policy: MethodologyPolicy) -> float:
    return calculate_retirement_accessible(
        balance,
        snapshot.age,
        snapshot.estimated_tax_rate,
        policy,
        withdrawal_allowed=snapshot.retirement_withdrawal_allowed,
        withdrawal_limit=snapshot.retirement_withdrawal_limit,
        over_59_half=snapshot.is_over_59_half,
    )


def _roth_earnings_amount(snapshot: FinancialSnapshot, policy: MethodologyPolicy) -> float:
    """Roth earnings follow the policy once past 59.5, else the net-accessible formula."""
    earnings = snapshot.roth_ira_earnings
    if snapshot.is_past_withdrawal_age:
        return _retirement_amount(snapshot, earnings, policy)
    return _net_accessible(
        earnings,
        snapshot.age,
        snapshot.estimated_tax_rate,
        policy.assets.retirement,
        snapshot.retirement_withdrawal_allowed,
        snapshot.retirement_withdrawal_limit,
    )


def dividend_purification_amount(snapshot: FinancialSnapshot) -> float:
    """Tainted share of dividend income, owed as charity rather than zakat."""
    percent = _clamp(snapshot.dividend_purification_percent, 0.0, 100.0)
    return snapshot.dividends * percent / 100


# ============================================================
# Category line items
# ============================================================

def _liquid_items(s: FinancialSnapshot, policy: MethodologyPolicy) -> list[LineItem]:
    cash = policy.assets.cash
    rate = cash.rate if cash.zakatable else 0.0
    return [
        _item('Checking Accounts', s.checking_accounts, rate),
        _item('Savings Accounts', s.savings_accounts, rate),
        _item('Cash on Hand', s.cash_on_hand, rate),
        _item('Digital Wallets', s.digital_wallets, rate),
        _item('Foreign Currency', s.foreign_currency, rate),
    ]


def _precious_metal_items(s: FinancialSnapshot, policy: MethodologyPolicy) -> list[LineItem]:
    if not s.has_precious_metals:
        return []
    jewelry = policy.assets.precious_metals.jewelry
    jewelry_rate = jewelry.rate if jewelry.zakatable else 0.0
    # Investment-grade bullion is always fully zakatable
    return [
        _item('Gold Investment', s.gold_investment_value, 1.0),
        _item('Gold Jewelry', s.gold_jewelry_value, jewelry_rate),
        _item('Silver Investment', s.silver_investment_value, 1.0),
        _item('Silver Jewelry', s.silver_jewelry_value, jewelry_rate),
    ]


def _crypto_items(s: FinancialSnapshot, policy: MethodologyPolicy) -> list[LineItem]:
    if not s.has_crypto:
        return []
    crypto = policy.assets.crypto
    staking = crypto.staking
    unvested_rate = 0.0 if staking.vested_only else staking.rewards_rate
    return [
        _item('Currency Holdings', s.crypto_currency, crypto.currency_rate),
        _item('Trading Holdings', s.crypto_trading, crypto.trading_rate),
        _item('Staked Principal', s.staked_assets, staking.principal_rate),
        _item('Vested Staking Rewards', s.staked_rewards_vested, staking.rewards_rate),
        _item('Unvested Staking Rewards', s.staked_rewards_unvested, unvested_rate),
        _item('Liquidity Pools', s.liquidity_pool_value, crypto.trading_rate),
    ]


def _investment_items(s: FinancialSnapshot, policy: MethodologyPolicy) -> list[LineItem]:
    investments = policy.assets.investments
    dividends = investments.dividends
    if not dividends.zakatable:
        dividend_rate = 0.0
    elif dividends.deduct_purification:
        dividend_rate = 1 - _clamp(s.dividend_purification_percent, 0.0, 100.0) / 100
    else:
        dividend_rate = 1.0
    return [
        # Active trading holdings are trade goods at full market value
        _item('Active Investments', s.active_investments, 1.0),
        _item('Passive Investments', s.passive_investments_value, investments.passive_investments.rate),
        _item('Dividends', s.dividends, dividend_rate),
        _item('REITs (Equity)', s.reits_value, investments.reits_rate),
    ]


def _retirement_items(s: FinancialSnapshot, policy: MethodologyPolicy) -> list[LineItem]:
    return [
        # Roth contributions are post-tax and can be withdrawn without penalty
        _item('Roth IRA Contributions', s.roth_ira_contributions, 1.0),
        _amount_item('Roth IRA Earnings', s.roth_ira_earnings, _roth_earnings_amount(s, policy)),
        _amount_item('401(k) Vested', s.four_oh_one_k_vested_balance,
                     _retirement_amount(s, s.four_oh_one_k_vested_balance, policy)),
        _amount_item('Traditional IRA', s.traditional_ira_balance,
                     _retirement_amount(s, s.traditional_ira_balance, policy)),
        _item('IRA Withdrawals', s.ira_withdrawals, 1.0),
        _item('ESA Withdrawals', s.esa_withdrawals, 1.0),
        _item('529 Withdrawals', s.five_twenty_nine_withdrawals, 1.0),
        _item('HSA Balance', s.hsa_balance, 1.0),
    ]


def _trust_items(s: FinancialSnapshot, policy: MethodologyPolicy) -> list[LineItem]:
    if not s.has_trusts:
        return []
    trusts = policy.assets.trusts
    items = [_item('Revocable Trust', s.revocable_trust_value, trusts.revocable_rate)]
    if s.irrevocable_trust_accessible:
        items.append(_item('Irrevocable Trust (Accessible)', s.irrevocable_trust_value, trusts.irrevocable_rate))
    return items


def _real_estate_items(s: FinancialSnapshot, policy: MethodologyPolicy) -> list[LineItem]:
    if not s.has_real_estate:
        return []
    real_estate = policy.assets.real_estate
    for_sale = real_estate.for_sale
    land = real_estate.land_banking
    return [
        _item('Property for Sale', s.real_estate_for_sale, for_sale.rate if for_sale.zakatable else 0.0),
        _item('Land Held for Appreciation', s.land_banking_value, land.rate if land.zakatable else 0.0),
        _item('Rental Income', s.rental_property_income,
              1.0 if real_estate.rental_property.income_zakatable else 0.0),
    ]


def _business_items(s: FinancialSnapshot, policy: MethodologyPolicy) -> list[LineItem]:
    if not s.has_business:
        return []
    business = policy.assets.business
    return [
        _item('Cash & Receivables', s.business_cash_and_receivables, business.cash_receivables_rate),
        _item('Inventory', s.business_inventory, business.inventory_rate),
        _item('Fixed Assets', s.business_fixed_assets, business.fixed_assets_rate),
    ]


def _debts_owed_items(s: FinancialSnapshot, policy: MethodologyPolicy) -> list[LineItem]:
    if not s.has_debt_owed_to_you:
        return []
    debts = policy.assets.debts_owed_to_user
    items = [_item('Collectible Loans', s.good_debt_owed_to_you, debts.good_debt_rate)]
    if debts.bad_debt_on_recovery:
        items.append(_item('Recovered Bad Debt', s.bad_debt_recovered, 1.0))
    return items


def _illiquid_items(s: FinancialSnapshot, policy: MethodologyPolicy) -> list[LineItem]:
    if not s.has_illiquid_assets:
        return []
    rate = policy.assets.illiquid_assets.rate
    return [
        _item('Illiquid Assets', s.illiquid_assets_value, rate),
        _item('Livestock', s.livestock_value, rate),
    ]


def _exempt_items(s: FinancialSnapshot, policy: MethodologyPolicy) -> list[LineItem]:
    items = [
        _item('401(k) Unvested Match', s.four_oh_one_k_unvested_match, 0.0),
        _item('Primary Residence', s.primary_residence_value, 0.0),
        _item('CLAT', s.clat_value, 0.0),
    ]
    if s.has_trusts and not s.irrevocable_trust_accessible:
        items.append(_item('Irrevocable Trust', s.irrevocable_trust_value, 0.0))
    if s.has_debt_owed_to_you:
        items.append(_item('Outstanding Bad Debt', s.bad_debt_outstanding, 0.0))
    return items


_CATEGORY_BUILDERS = {
    'liquid': _liquid_items,
    'precious_metals': _precious_metal_items,
    'crypto': _crypto_items,
    'investments': _investment_items,
    'retirement': _retirement_items,
    'trusts': _trust_items,
    'real_estate': _real_estate_items,
    'business': _business_items,
    'debts_owed': _debts_owed_items,
    'illiquid': _illiquid_items,
    'exempt': _exempt_items,
}


def _build_category(key: str, items: list[LineItem], net_wealth: float) -> CategoryBreakdown:
    items = [item for item in items if item.value > 0]
    total = sum(item.value for item in items)
    zakatable = sum(item.zakatable_amount for item in items)
    return CategoryBreakdown(
        key=key,
        label=ASSET_CATEGORIES[key],
        total=total,
        zakatable_amount=zakatable,
        zakatable_fraction=zakatable / total if total > 0 else 0.0,
        percent_of_net=zakatable / net_wealth if net_wealth > 0 else 0.0,
        items=items,
    )


def calculate_asset_breakdown(
    snapshot: FinancialSnapshot,
    net_wealth_estimate: float = 0.0,
    policy: MethodologyPolicy = DEFAULT_POLICY,
) -> dict[str, CategoryBreakdown]:
    """Build the per-category breakdown, in report order.

    Args:
        snapshot: Subject's financial facts
        net_wealth_estimate: Net zakatable wealth used for ``percent_of_net``
        policy: Methodology to apply

    Returns:
        Dict of category key -> CategoryBreakdown
    """
    breakdown = {}
    for key, build in _CATEGORY_BUILDERS.items():
        category = _build_category(key, build(snapshot, policy), net_wealth_estimate)
        logger.debug(f"{policy.id} {key}: total={category.total:.2f} zakatable={category.zakatable_amount:.2f}")
        breakdown[key] = category
    return breakdown


def _zakatable_total(breakdown: dict[str, CategoryBreakdown]) -> float:
    return sum(category.zakatable_amount for key, category in breakdown.items() if key != 'exempt')


def calculate_total_assets(snapshot: FinancialSnapshot, policy: MethodologyPolicy = DEFAULT_POLICY) -> float:
    """Sum of zakatable amounts across all categories (never gross values)."""
    return _zakatable_total(calculate_asset_breakdown(snapshot, 0.0, policy))


def evaluate_assets(
    snapshot: FinancialSnapshot,
    net_wealth_estimate: float = 0.0,
    policy: MethodologyPolicy = DEFAULT_POLICY,
) -> dict:
    """Evaluate all asset categories in one pass.

    Returns:
        Dict with 'total_assets' and 'breakdown'
    """
    breakdown = calculate_asset_breakdown(snapshot, net_wealth_estimate, policy)
    return {
        'total_assets': _zakatable_total(breakdown),
        'breakdown': breakdown,
    }


def with_percent_of_net(breakdown: dict[str, CategoryBreakdown], net_wealth: float) -> dict[str, CategoryBreakdown]:
    """Recompute each category's share of the final net zakatable wealth."""
    return {
        key: replace(category, percent_of_net=category.zakatable_amount / net_wealth if net_wealth > 0 else 0.0)
        for key, category in breakdown.items()
    }
