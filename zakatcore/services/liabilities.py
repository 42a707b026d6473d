"""Liability evaluation: deductible debts under a methodology's rules."""
import logging
from dataclasses import asdict, dataclass

from zakatcore.constants import EXPENSE_PERIOD_MULTIPLIERS
from zakatcore.methodology.loader import DEFAULT_POLICY
from zakatcore.methodology.schema import MethodologyPolicy
from .snapshot import FinancialSnapshot

logger = logging.getLogger(__name__)

DEDUCTING_METHODS = ('full_deduction', '12_month_rule', 'asset_specific')


@dataclass(frozen=True)
class LiabilityItem:
    name: str
    amount: float
    rule: str

    def to_dict(self) -> dict:
        return asdict(self)


def expense_multiplier(policy: MethodologyPolicy) -> int:
    """Months of a monthly figure that count as one period's obligation."""
    return EXPENSE_PERIOD_MULTIPLIERS[policy.liabilities.personal_debt.types.expense_period]


def _recurring_amount(monthly: float, rule: str, multiplier: int, principal: float = 0.0) -> float:
    """Deductible amount for a monthly obligation (living expenses, mortgage).

    ``full`` uses the remaining principal when one is supplied, otherwise it
    resolves through the expense-period multiplier like ``12_months``.
    """
    if rule == 'none':
        return 0.0
    if rule == 'current_due':
        return monthly
    if rule == '12_months':
        return monthly * multiplier
    if rule == 'full':
        return principal if principal > 0 else monthly * multiplier
    raise ValueError(f'Unknown debt type rule: {rule}')


def _immediate_amount(amount: float, rule: str) -> float:
    """Debts that are due now: deductible in full unless the type is excluded."""
    if rule == 'none':
        return 0.0
    if rule in ('full', '12_months', 'current_due'):
        return amount
    raise ValueError(f'Unknown debt type rule: {rule}')


def calculate_liability_items(
    snapshot: FinancialSnapshot,
    policy: MethodologyPolicy = DEFAULT_POLICY,
) -> list[LiabilityItem]:
    """Itemise the deductible liabilities.

    Args:
        snapshot: Subject's financial facts
        policy: Methodology to apply

    Returns:
        List of LiabilityItem with a positive amount, in report order
    """
    liabilities = policy.liabilities
    method = liabilities.method

    if method == 'no_deduction':
        logger.info(f"{policy.id}: debts do not reduce zakatable wealth, no deductions applied")
        return []
    if method not in DEDUCTING_METHODS:
        raise ValueError(f'Unknown debt deduction method: {method}')

    items = []
    personal = liabilities.personal_debt
    if personal.deductible:
        types = personal.types
        multiplier = expense_multiplier(policy)
        items.extend([
            LiabilityItem('Living Expenses',
                          _recurring_amount(snapshot.monthly_living_expenses, types.living_expenses, multiplier),
                          types.living_expenses),
            LiabilityItem('Housing',
                          _recurring_amount(snapshot.monthly_mortgage, types.housing, multiplier,
                                            snapshot.mortgage_remaining_principal),
                          types.housing),
            LiabilityItem('Student Loans',
                          _recurring_amount(snapshot.student_loans_due, types.student_loans, multiplier,
                                            snapshot.student_loan_remaining_principal),
                          types.student_loans),
            LiabilityItem('Credit Cards',
                          _immediate_amount(snapshot.credit_card_balance, types.credit_cards),
                          types.credit_cards),
            LiabilityItem('Unpaid Bills', snapshot.unpaid_bills, 'current_due'),
            LiabilityItem('Insurance',
                          _immediate_amount(snapshot.insurance_expenses, types.insurance),
                          types.insurance),
        ])

    if snapshot.has_tax_payments:
        items.append(LiabilityItem('Property Tax', snapshot.property_tax, 'current_due'))
        items.append(LiabilityItem('Late Tax Payments', snapshot.late_tax_payments, 'current_due'))

    items = [item for item in items if item.amount > 0]
    for item in items:
        logger.debug(f"{policy.id} deduction {item.name} ({item.rule}): {item.amount:.2f}")
    return items


def calculate_total_liabilities(
    snapshot: FinancialSnapshot,
    policy: MethodologyPolicy = DEFAULT_POLICY,
) -> float:
    """Total deductible liabilities (0 under a no-deduction methodology)."""
    return sum(item.amount for item in calculate_liability_items(snapshot, policy))
