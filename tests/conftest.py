"""Pytest fixtures for zakat methodology engine tests."""
import copy

import pytest

from zakatcore import create_app
from zakatcore.data.methodologies import BUILTIN_METHODOLOGIES
from zakatcore.methodology.registry import get_registry, reset_registry
from zakatcore.services.snapshot import FinancialSnapshot


@pytest.fixture(autouse=True)
def _fresh_registry():
    """Each test starts from a registry holding only the built-in presets."""
    reset_registry()
    yield
    reset_registry()


@pytest.fixture
def app(monkeypatch):
    """Create application for testing.

    Yields:
        Flask application configured for testing.
    """
    monkeypatch.delenv('ZAKAT_COMMUNITY_METHODOLOGY_DIR', raising=False)
    monkeypatch.delenv('ZAKAT_DEFAULT_METHODOLOGY', raising=False)
    app = create_app({'TESTING': True})
    yield app


@pytest.fixture
def client(app):
    """Create test client.

    Args:
        app: Flask application fixture.

    Yields:
        Flask test client for making requests.
    """
    with app.test_client() as client:
        yield client


@pytest.fixture
def registry():
    return get_registry()


@pytest.fixture
def bradford(registry):
    return registry.get('bradford')


@pytest.fixture
def hanafi(registry):
    return registry.get('hanafi')


@pytest.fixture
def shafii(registry):
    return registry.get('shafii')


@pytest.fixture
def hanafi_document():
    """A mutable copy of the Hanafi preset document."""
    return copy.deepcopy(BUILTIN_METHODOLOGIES['hanafi'])


@pytest.fixture
def cash_snapshot():
    """$20,000 cash with $5,000 on a credit card."""
    return FinancialSnapshot(checking_accounts=20000, credit_card_balance=5000)


@pytest.fixture
def rich_snapshot():
    """A snapshot touching every asset category."""
    return FinancialSnapshot(
        age=40,
        estimated_tax_rate=0.25,
        checking_accounts=10000,
        savings_accounts=5000,
        cash_on_hand=500,
        interest_earned=120,
        has_precious_metals=True,
        gold_investment_value=3000,
        gold_jewelry_value=2000,
        has_crypto=True,
        crypto_currency=1500,
        staked_assets=1000,
        staked_rewards_vested=100,
        staked_rewards_unvested=50,
        active_investments=4000,
        passive_investments_value=20000,
        reits_value=1000,
        dividends=800,
        dividend_purification_percent=5,
        roth_ira_contributions=6000,
        roth_ira_earnings=2000,
        four_oh_one_k_vested_balance=50000,
        four_oh_one_k_unvested_match=3000,
        traditional_ira_balance=10000,
        hsa_balance=700,
        has_trusts=True,
        revocable_trust_value=8000,
        irrevocable_trust_value=4000,
        has_real_estate=True,
        primary_residence_value=400000,
        real_estate_for_sale=50000,
        rental_property_income=6000,
        has_business=True,
        business_cash_and_receivables=7000,
        business_inventory=3000,
        business_fixed_assets=9000,
        has_illiquid_assets=True,
        livestock_value=2500,
        has_debt_owed_to_you=True,
        good_debt_owed_to_you=1200,
        bad_debt_outstanding=900,
        bad_debt_recovered=300,
        monthly_living_expenses=1000,
        monthly_mortgage=2000,
        credit_card_balance=1500,
        student_loans_due=300,
    )
