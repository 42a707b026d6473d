"""Zakat calculation service: composes assets, liabilities and nisab."""
import logging
from dataclasses import dataclass, field

from zakatcore.methodology.loader import DEFAULT_POLICY
from zakatcore.methodology.registry import MethodologyRegistry, get_registry
from zakatcore.methodology.schema import MethodologyPolicy
from .assets import CategoryBreakdown, dividend_purification_amount, evaluate_assets, with_percent_of_net
from .liabilities import LiabilityItem, calculate_liability_items
from .nisab import calculate_nisab
from .snapshot import FinancialSnapshot

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalculationResult:
    total_assets: float
    total_liabilities: float
    net_zakatable_wealth: float
    nisab: float
    nisab_standard: str
    is_above_nisab: bool
    zakat_rate: float
    zakat_due: float
    interest_to_purify: float
    dividends_to_purify: float
    breakdown: dict[str, CategoryBreakdown] = field(default_factory=dict)
    liabilities: list[LiabilityItem] = field(default_factory=list)
    methodology_id: str = ''
    currency: str = 'USD'

    def to_dict(self) -> dict:
        return {
            'methodology_id': self.methodology_id,
            'currency': self.currency,
            'total_assets': round(self.total_assets, 2),
            'total_liabilities': round(self.total_liabilities, 2),
            'net_zakatable_wealth': round(self.net_zakatable_wealth, 2),
            'nisab': round(self.nisab, 2),
            'nisab_standard': self.nisab_standard,
            'is_above_nisab': self.is_above_nisab,
            'zakat_rate': self.zakat_rate,
            'zakat_due': round(self.zakat_due, 2),
            'interest_to_purify': round(self.interest_to_purify, 2),
            'dividends_to_purify': round(self.dividends_to_purify, 2),
            'breakdown': {key: category.to_dict() for key, category in self.breakdown.items()},
            'liabilities': [item.to_dict() for item in self.liabilities],
        }


def resolve_methodology(
    snapshot: FinancialSnapshot,
    policy: MethodologyPolicy | None = None,
    registry: MethodologyRegistry | None = None,
) -> MethodologyPolicy:
    """Pick the methodology for a calculation.

    An explicit policy wins, then the snapshot's methodology id, then
    DEFAULT_POLICY.

    Raises:
        UnknownMethodologyError: The snapshot names an unregistered methodology.
    """
    if policy is not None:
        return policy
    if snapshot.methodology:
        registry = registry or get_registry()
        return registry.get(snapshot.methodology)
    return DEFAULT_POLICY


def calculate_zakat(
    snapshot: FinancialSnapshot,
    silver_price: float,
    gold_price: float,
    policy: MethodologyPolicy | None = None,
) -> CalculationResult:
    """Calculate zakat due for a snapshot.

    Args:
        snapshot: Subject's financial facts
        silver_price: Silver spot price per troy ounce
        gold_price: Gold spot price per troy ounce
        policy: Methodology to apply (defaults per ``resolve_methodology``)

    Returns:
        CalculationResult
    """
    policy = resolve_methodology(snapshot, policy)

    assets = evaluate_assets(snapshot, 0.0, policy)
    total_assets = assets['total_assets']
    liabilities = calculate_liability_items(snapshot, policy)
    total_liabilities = sum(item.amount for item in liabilities)
    net_wealth = max(0.0, total_assets - total_liabilities)

    standard = snapshot.nisab_standard or policy.thresholds.nisab.default_standard
    nisab = calculate_nisab(silver_price, gold_price, standard, policy)
    above_nisab = net_wealth >= nisab

    if snapshot.calendar_type == 'solar':
        rate = policy.thresholds.zakat_rate.solar
    elif snapshot.calendar_type == 'lunar':
        rate = policy.thresholds.zakat_rate.lunar
    else:
        raise ValueError(f'Invalid calendar type: {snapshot.calendar_type}')

    zakat_due = net_wealth * rate if above_nisab else 0.0

    logger.debug(
        f"{policy.id}: assets={total_assets:.2f} liabilities={total_liabilities:.2f} "
        f"net={net_wealth:.2f} nisab={nisab:.2f} due={zakat_due:.2f}"
    )

    return CalculationResult(
        total_assets=total_assets,
        total_liabilities=total_liabilities,
        net_zakatable_wealth=net_wealth,
        nisab=nisab,
        nisab_standard=standard,
        is_above_nisab=above_nisab,
        zakat_rate=rate,
        zakat_due=zakat_due,
        interest_to_purify=snapshot.interest_earned,
        dividends_to_purify=dividend_purification_amount(snapshot),
        breakdown=with_percent_of_net(assets['breakdown'], net_wealth),
        liabilities=liabilities,
        methodology_id=policy.id,
        currency=snapshot.currency,
    )
