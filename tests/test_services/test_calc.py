"""Tests for the zakat calculation orchestrator."""
import pytest

from zakatcore.methodology import UnknownMethodologyError
from zakatcore.methodology.loader import DEFAULT_POLICY
from zakatcore.services.calc import calculate_zakat, resolve_methodology
from zakatcore.services.nisab import calculate_nisab
from zakatcore.services.snapshot import FinancialSnapshot

SILVER_PRICE = 24.50
GOLD_PRICE = 2650.0


class TestZakatRate:
    """Tests for lunar and solar rates."""

    def test_lunar(self, hanafi):
        snapshot = FinancialSnapshot(checking_accounts=10000, calendar_type='lunar')

        result = calculate_zakat(snapshot, SILVER_PRICE, GOLD_PRICE, hanafi)

        assert result.zakat_rate == 0.025
        assert result.zakat_due == pytest.approx(250.00)

    def test_solar(self, hanafi):
        snapshot = FinancialSnapshot(checking_accounts=10000, calendar_type='solar')

        result = calculate_zakat(snapshot, SILVER_PRICE, GOLD_PRICE, hanafi)

        assert result.zakat_rate == 0.02577
        assert result.zakat_due == pytest.approx(257.70)

    def test_invalid_calendar(self, hanafi):
        snapshot = FinancialSnapshot(checking_accounts=10000, calendar_type='gregorian')
        with pytest.raises(ValueError):
            calculate_zakat(snapshot, SILVER_PRICE, GOLD_PRICE, hanafi)


class TestNisab:
    """Tests for the threshold comparison."""

    def test_below_nisab_owes_nothing(self, shafii):
        """Shafi'i uses the gold standard (~$7,242 here)."""
        snapshot = FinancialSnapshot(checking_accounts=5000)

        result = calculate_zakat(snapshot, SILVER_PRICE, GOLD_PRICE, shafii)

        assert result.nisab_standard == 'gold'
        assert result.is_above_nisab is False
        assert result.zakat_due == 0.0
        assert result.net_zakatable_wealth == 5000

    def test_snapshot_standard_overrides_policy(self, shafii):
        snapshot = FinancialSnapshot(checking_accounts=5000, nisab_standard='silver')

        result = calculate_zakat(snapshot, SILVER_PRICE, GOLD_PRICE, shafii)

        assert result.nisab_standard == 'silver'
        assert result.nisab == pytest.approx(calculate_nisab(SILVER_PRICE, GOLD_PRICE, 'silver', shafii))
        assert result.is_above_nisab is True
        assert result.zakat_due == pytest.approx(125.0)

    def test_exactly_at_nisab_is_due(self, hanafi):
        nisab = calculate_nisab(SILVER_PRICE, GOLD_PRICE, 'silver', hanafi)
        snapshot = FinancialSnapshot(checking_accounts=nisab)

        result = calculate_zakat(snapshot, SILVER_PRICE, GOLD_PRICE, hanafi)

        assert result.is_above_nisab is True


class TestDeductions:
    """Tests for liabilities in the full calculation."""

    def test_no_deduction_vs_full_deduction(self, shafii, hanafi, cash_snapshot):
        """$20,000 cash, $5,000 credit card."""
        no_deduction = calculate_zakat(cash_snapshot, SILVER_PRICE, GOLD_PRICE, shafii)
        full_deduction = calculate_zakat(cash_snapshot, SILVER_PRICE, GOLD_PRICE, hanafi)

        assert no_deduction.total_liabilities == 0
        assert no_deduction.zakat_due == pytest.approx(20000 * 0.025)
        assert full_deduction.total_liabilities == 5000
        assert full_deduction.zakat_due == pytest.approx(15000 * 0.025)

    def test_net_wealth_floored_at_zero(self, hanafi):
        snapshot = FinancialSnapshot(checking_accounts=1000, credit_card_balance=9000)

        result = calculate_zakat(snapshot, SILVER_PRICE, GOLD_PRICE, hanafi)

        assert result.net_zakatable_wealth == 0.0
        assert result.zakat_due == 0.0


class TestPurification:
    """Purification is reported whether or not zakat is due."""

    def test_purification_below_nisab(self, hanafi):
        snapshot = FinancialSnapshot(interest_earned=40, dividends=200, dividend_purification_percent=10)

        result = calculate_zakat(snapshot, SILVER_PRICE, GOLD_PRICE, hanafi)

        assert result.is_above_nisab is False
        assert result.interest_to_purify == 40
        assert result.dividends_to_purify == pytest.approx(20.0)


class TestInvariants:
    """Tests for properties that hold across methodologies."""

    @pytest.mark.parametrize('key', ['bradford', 'hanafi', 'shafii', 'maliki', 'hanbali', 'amja', 'tahir_anwar'])
    def test_result_invariants(self, registry, rich_snapshot, key):
        result = calculate_zakat(rich_snapshot, SILVER_PRICE, GOLD_PRICE, registry.get(key))

        assert result.net_zakatable_wealth >= 0
        assert result.net_zakatable_wealth == pytest.approx(max(0.0, result.total_assets - result.total_liabilities))
        if result.net_zakatable_wealth < result.nisab:
            assert result.zakat_due == 0
        else:
            assert result.zakat_due == pytest.approx(result.net_zakatable_wealth * result.zakat_rate)
        assert result.total_assets == pytest.approx(sum(c.zakatable_amount for c in result.breakdown.values()))
        assert result.total_liabilities == pytest.approx(sum(item.amount for item in result.liabilities))
        assert result.methodology_id == key

    def test_percent_of_net_uses_final_net_wealth(self, hanafi):
        snapshot = FinancialSnapshot(checking_accounts=6000, has_crypto=True, crypto_currency=6000,
                                     credit_card_balance=2000)

        result = calculate_zakat(snapshot, SILVER_PRICE, GOLD_PRICE, hanafi)

        assert result.breakdown['liquid'].percent_of_net == pytest.approx(0.6)
        assert result.breakdown['crypto'].percent_of_net == pytest.approx(0.6)

    def test_inputs_not_mutated(self, rich_snapshot, bradford):
        before = rich_snapshot.to_dict()
        calculate_zakat(rich_snapshot, SILVER_PRICE, GOLD_PRICE, bradford)
        assert rich_snapshot.to_dict() == before

    def test_to_dict(self, hanafi, cash_snapshot):
        data = calculate_zakat(cash_snapshot, SILVER_PRICE, GOLD_PRICE, hanafi).to_dict()

        assert data['methodology_id'] == 'hanafi'
        assert data['currency'] == 'USD'
        assert data['zakat_due'] == 375.0
        assert data['breakdown']['liquid']['zakatable_amount'] == 20000
        assert data['liabilities'] == [{'name': 'Credit Cards', 'amount': 5000, 'rule': 'full'}]


class TestResolveMethodology:
    """Tests for methodology selection."""

    def test_explicit_policy_wins(self, hanafi):
        snapshot = FinancialSnapshot(methodology='shafii')
        assert resolve_methodology(snapshot, hanafi) is hanafi

    def test_snapshot_methodology(self, shafii):
        snapshot = FinancialSnapshot(methodology='shafii')
        assert resolve_methodology(snapshot) is shafii

    def test_default(self):
        assert resolve_methodology(FinancialSnapshot()) is DEFAULT_POLICY

    def test_unknown_snapshot_methodology(self):
        with pytest.raises(UnknownMethodologyError):
            resolve_methodology(FinancialSnapshot(methodology='no_such_school'))

    def test_calculate_without_policy_uses_default(self):
        result = calculate_zakat(FinancialSnapshot(checking_accounts=10000), SILVER_PRICE, GOLD_PRICE)
        assert result.methodology_id == 'bradford'
