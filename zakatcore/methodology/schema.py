"""Pydantic models describing a zakat methodology document.

A methodology is a versioned, named rule set made of four sections:

- ``meta``: identity and citation metadata
- ``thresholds``: nisab gram weights and the levy rate per calendar
- ``assets``: one sub-policy per asset category
- ``liabilities``: the debt deduction philosophy and per-debt-type rules

Every rate field is a fraction in the closed interval [0, 1] and every
enum-like field is a closed ``Literal``. Instances are frozen, so a policy
cannot change once it has been validated.
"""
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, StrictBool

from zakatcore.constants import (
    DEFAULT_EXPENSE_PERIOD,
    EARLY_WITHDRAWAL_AGE,
    EARLY_WITHDRAWAL_PENALTY_RATE,
    NISAB_GOLD_GRAMS,
    NISAB_SILVER_GRAMS,
)

Rate = Annotated[float, Field(strict=True, ge=0.0, le=1.0)]
Grams = Annotated[float, Field(strict=True, ge=0.0)]

NisabStandard = Literal['gold', 'silver']
RetirementZakatability = Literal[
    'full', 'net_accessible', 'deferred_upon_access', 'conditional_age', 'exempt'
]
TaxRateSource = Literal['user_input', 'flat_rate']
PassiveTreatment = Literal['market_value', 'underlying_assets', 'income_only']
DebtMethod = Literal['full_deduction', 'no_deduction', '12_month_rule', 'asset_specific']
DebtTypeRule = Literal['full', '12_months', 'current_due', 'none']
ExpensePeriod = Literal['monthly', 'annual']


class ImmutableModel(BaseModel):
    """Base class that freezes instances and rejects unknown fields."""

    model_config = ConfigDict(frozen=True, extra='forbid', populate_by_name=True)


class Section(ImmutableModel):
    """A policy section carrying optional human-readable documentation."""

    description: str | None = None
    scholarly_basis: str | None = None


# ---------------------------------------------------------------------------
# meta
# ---------------------------------------------------------------------------

class Reference(ImmutableModel):
    authority: str
    url: str | None = None


class Certification(ImmutableModel):
    certified_by: str | None = None
    date: str | None = None
    url: str | None = None


class Meta(ImmutableModel):
    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    version: str = Field(min_length=1)
    author: str = ''
    description: str = ''
    tier: Literal['official', 'community'] = 'community'
    reference: Reference | None = None
    certification: Certification | None = None


# ---------------------------------------------------------------------------
# thresholds
# ---------------------------------------------------------------------------

class Nisab(Section):
    default_standard: NisabStandard
    gold_grams: Grams = NISAB_GOLD_GRAMS
    silver_grams: Grams = NISAB_SILVER_GRAMS


class ZakatRate(Section):
    lunar: Rate
    solar: Rate


class Thresholds(ImmutableModel):
    nisab: Nisab
    zakat_rate: ZakatRate


# ---------------------------------------------------------------------------
# assets
# ---------------------------------------------------------------------------

class CashRules(Section):
    zakatable: StrictBool
    rate: Rate


class JewelryRules(Section):
    zakatable: StrictBool
    rate: Rate
    conditions: tuple[str, ...] = ()


class PreciousMetalRules(Section):
    jewelry: JewelryRules


class StakingRules(ImmutableModel):
    principal_rate: Rate
    rewards_rate: Rate
    vested_only: StrictBool


class CryptoRules(Section):
    currency_rate: Rate
    trading_rate: Rate
    staking: StakingRules


class PassiveInvestmentRules(Section):
    rate: Rate
    treatment: PassiveTreatment = 'market_value'


class DividendRules(Section):
    zakatable: StrictBool
    deduct_purification: StrictBool


class InvestmentRules(Section):
    passive_investments: PassiveInvestmentRules
    reits_rate: Rate
    dividends: DividendRules


class RetirementRules(Section):
    zakatability: RetirementZakatability
    exemption_age: float = Field(default=EARLY_WITHDRAWAL_AGE, strict=True, gt=0)
    penalty_rate: Rate = EARLY_WITHDRAWAL_PENALTY_RATE
    tax_rate_source: TaxRateSource = 'user_input'


class ZakatableAtRate(Section):
    zakatable: StrictBool
    rate: Rate


class RentalPropertyRules(Section):
    income_zakatable: StrictBool


class RealEstateRules(Section):
    for_sale: ZakatableAtRate
    land_banking: ZakatableAtRate
    rental_property: RentalPropertyRules


class BusinessRules(Section):
    cash_receivables_rate: Rate
    inventory_rate: Rate
    fixed_assets_rate: Rate = 0.0


class DebtsOwedRules(Section):
    good_debt_rate: Rate
    bad_debt_on_recovery: StrictBool = True


class IlliquidRules(Section):
    rate: Rate = 1.0


class TrustRules(Section):
    revocable_rate: Rate = 1.0
    irrevocable_rate: Rate = 1.0


class Assets(ImmutableModel):
    cash: CashRules
    precious_metals: PreciousMetalRules
    crypto: CryptoRules
    investments: InvestmentRules
    retirement: RetirementRules
    real_estate: RealEstateRules
    business: BusinessRules
    debts_owed_to_user: DebtsOwedRules
    illiquid_assets: IlliquidRules = IlliquidRules()
    trusts: TrustRules = TrustRules()


# ---------------------------------------------------------------------------
# liabilities
# ---------------------------------------------------------------------------

class DebtTypes(ImmutableModel):
    housing: DebtTypeRule
    student_loans: DebtTypeRule
    credit_cards: DebtTypeRule
    living_expenses: DebtTypeRule
    insurance: DebtTypeRule = 'full'
    expense_period: ExpensePeriod = DEFAULT_EXPENSE_PERIOD


class PersonalDebt(Section):
    deductible: StrictBool
    types: DebtTypes


class Liabilities(Section):
    method: DebtMethod
    personal_debt: PersonalDebt


# ---------------------------------------------------------------------------
# root document
# ---------------------------------------------------------------------------

class MethodologyPolicy(ImmutableModel):
    """A complete, validated zakat methodology."""

    schema_uri: str | None = Field(default=None, alias='$schema')
    meta: Meta
    thresholds: Thresholds
    assets: Assets
    liabilities: Liabilities

    @property
    def id(self) -> str:
        return self.meta.id

    def to_dict(self) -> dict:
        """Serialize to the plain JSON interchange document."""
        return self.model_dump(mode='json', by_alias=True, exclude_none=True)


SECTION_MODELS = {
    'meta': Meta,
    'thresholds': Thresholds,
    'assets': Assets,
    'liabilities': Liabilities,
}
