"""Tests for the methodology difference engine."""
import pytest

from zakatcore.methodology.loader import replace_sections
from zakatcore.services.difference import compare_methodologies

PRESETS = ['bradford', 'hanafi', 'shafii', 'maliki', 'hanbali', 'amja', 'tahir_anwar']


class TestCompareMethodologies:
    """Tests for the fixed four-row comparison."""

    def test_hanafi_vs_shafii(self, hanafi, shafii):
        rows = {row.category: row for row in compare_methodologies(hanafi, shafii)}

        assert rows['Jewelry'].verdict_a == 'Zakatable'
        assert rows['Jewelry'].verdict_b == 'Exempt'
        assert rows['Jewelry'].is_different is True
        assert rows['Debt'].verdict_a == 'Fully Deductible'
        assert rows['Debt'].verdict_b == 'Not Deductible'
        assert rows['Debt'].is_different is True
        assert rows['Retirement'].is_different is False
        assert rows['Investments'].is_different is False

    def test_labels(self, bradford, hanafi):
        rows = {row.category: row for row in compare_methodologies(bradford, hanafi)}

        assert rows['Jewelry'].label == 'Personal Gold/Silver'
        assert rows['Retirement'].label == '401(k) & IRA'
        assert rows['Retirement'].verdict_a == 'Exempt until Age 59.5'
        assert rows['Retirement'].verdict_b == 'Net Accessible (Minus Taxes/Penalties)'
        assert rows['Investments'].label == 'Stocks & Funds'
        assert rows['Investments'].verdict_a == '30% of Market Value'
        assert rows['Investments'].verdict_b == '100% Market Value'
        assert rows['Debt'].label == 'Loans & Mortgages'
        assert rows['Debt'].verdict_a == 'Next 12 Months Only'

    @pytest.mark.parametrize('a', PRESETS)
    @pytest.mark.parametrize('b', PRESETS)
    def test_structure_is_fixed(self, registry, a, b):
        """Every pair yields the same four rows, in the same order."""
        rows = compare_methodologies(registry.get(a), registry.get(b))
        assert [row.category for row in rows] == ['Jewelry', 'Retirement', 'Investments', 'Debt']

    @pytest.mark.parametrize('key', PRESETS)
    def test_identical_policies_never_differ(self, registry, key):
        policy = registry.get(key)
        assert not any(row.is_different for row in compare_methodologies(policy, policy))

    def test_passive_rate_change_differs(self, bradford):
        """Same treatment at another rate still counts as a difference."""
        assets = bradford.assets.model_dump()
        assets['investments']['passive_investments']['rate'] = 0.25
        other = replace_sections(bradford, assets=assets)

        investments = compare_methodologies(bradford, other)[2]

        assert investments.is_different is True
        assert investments.verdict_b == '25% of Market Value'

    def test_exemption_age_change_differs(self, bradford):
        assets = bradford.assets.model_dump()
        assets['retirement']['exemption_age'] = 65
        other = replace_sections(bradford, assets=assets)

        retirement = compare_methodologies(bradford, other)[1]

        assert retirement.is_different is True
        assert retirement.verdict_b == 'Exempt until Age 65'

    def test_to_dict(self, hanafi, shafii):
        row = compare_methodologies(hanafi, shafii)[0].to_dict()
        assert row == {
            'category': 'Jewelry',
            'label': 'Personal Gold/Silver',
            'verdict_a': 'Zakatable',
            'verdict_b': 'Exempt',
            'is_different': True,
        }
