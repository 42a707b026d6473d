"""Side-by-side comparison of two methodologies on their most contested rulings."""
from dataclasses import asdict, dataclass

from zakatcore.constants import DEBT_METHODS, PASSIVE_INVESTMENT_TREATMENTS, RETIREMENT_METHODS
from zakatcore.methodology.schema import MethodologyPolicy


@dataclass(frozen=True)
class MethodologyDifference:
    category: str
    label: str
    verdict_a: str
    verdict_b: str
    is_different: bool

    def to_dict(self) -> dict:
        return asdict(self)


def jewelry_verdict(policy: MethodologyPolicy) -> str:
    return 'Zakatable' if policy.assets.precious_metals.jewelry.zakatable else 'Exempt'


def retirement_verdict(policy: MethodologyPolicy) -> str:
    rules = policy.assets.retirement
    return RETIREMENT_METHODS[rules.zakatability].format(age=rules.exemption_age)


def investment_verdict(policy: MethodologyPolicy) -> str:
    passive = policy.assets.investments.passive_investments
    return PASSIVE_INVESTMENT_TREATMENTS[passive.treatment].format(percent=passive.rate * 100)


def debt_verdict(policy: MethodologyPolicy) -> str:
    return DEBT_METHODS[policy.liabilities.method]


def _retirement_key(policy: MethodologyPolicy) -> tuple:
    rules = policy.assets.retirement
    if rules.zakatability == 'conditional_age':
        return (rules.zakatability, rules.exemption_age)
    return (rules.zakatability,)


def _investment_key(policy: MethodologyPolicy) -> tuple:
    passive = policy.assets.investments.passive_investments
    return (passive.treatment, passive.rate)


def compare_methodologies(a: MethodologyPolicy, b: MethodologyPolicy) -> list[MethodologyDifference]:
    """Compare two methodologies on four fixed rows.

    Rows are always jewelry, retirement, investments and debt, in that order.
    ``is_different`` reflects the underlying policy fields, not the verdict text.
    """
    return [
        MethodologyDifference(
            category='Jewelry',
            label='Personal Gold/Silver',
            verdict_a=jewelry_verdict(a),
            verdict_b=jewelry_verdict(b),
            is_different=a.assets.precious_metals.jewelry.zakatable != b.assets.precious_metals.jewelry.zakatable,
        ),
        MethodologyDifference(
            category='Retirement',
            label='401(k) & IRA',
            verdict_a=retirement_verdict(a),
            verdict_b=retirement_verdict(b),
            is_different=_retirement_key(a) != _retirement_key(b),
        ),
        MethodologyDifference(
            category='Investments',
            label='Stocks & Funds',
            verdict_a=investment_verdict(a),
            verdict_b=investment_verdict(b),
            is_different=_investment_key(a) != _investment_key(b),
        ),
        MethodologyDifference(
            category='Debt',
            label='Loans & Mortgages',
            verdict_a=debt_verdict(a),
            verdict_b=debt_verdict(b),
            is_different=a.liabilities.method != b.liabilities.method,
        ),
    ]
