"""Tests for the financial snapshot model."""
import dataclasses

import pytest

from zakatcore.services.snapshot import FinancialSnapshot, camel_to_snake, check_snapshot


class TestFromDict:
    """Tests for building snapshots from request payloads."""

    def test_snake_case(self):
        snapshot = FinancialSnapshot.from_dict({'checking_accounts': 100, 'has_crypto': True})
        assert snapshot.checking_accounts == 100
        assert snapshot.has_crypto is True

    def test_camel_case(self):
        snapshot = FinancialSnapshot.from_dict({
            'checkingAccounts': 100,
            'fourOhOneKVestedBalance': 5000,
            'rothIRAEarnings': 300,
            'isOver59Half': True,
            'fiveTwentyNineWithdrawals': 40,
            'madhab': 'hanafi',
        })

        assert snapshot.checking_accounts == 100
        assert snapshot.four_oh_one_k_vested_balance == 5000
        assert snapshot.roth_ira_earnings == 300
        assert snapshot.is_over_59_half is True
        assert snapshot.five_twenty_nine_withdrawals == 40
        assert snapshot.methodology == 'hanafi'

    def test_unknown_keys_ignored(self):
        snapshot = FinancialSnapshot.from_dict({'favouriteColour': 'green', 'savings_accounts': 10})
        assert snapshot.savings_accounts == 10

    def test_defaults(self):
        snapshot = FinancialSnapshot.from_dict({})
        assert snapshot.age == 30
        assert snapshot.calendar_type == 'lunar'
        assert snapshot.retirement_withdrawal_allowed is True
        assert snapshot.nisab_standard is None

    def test_frozen(self):
        snapshot = FinancialSnapshot()
        with pytest.raises(dataclasses.FrozenInstanceError):
            snapshot.checking_accounts = 5

    def test_past_withdrawal_age(self):
        assert FinancialSnapshot(age=59.5).is_past_withdrawal_age
        assert FinancialSnapshot(age=40, is_over_59_half=True).is_past_withdrawal_age
        assert not FinancialSnapshot(age=59).is_past_withdrawal_age

    def test_camel_to_snake(self):
        assert camel_to_snake('businessCashAndReceivables') == 'business_cash_and_receivables'
        assert camel_to_snake('clatValue') == 'clat_value'


class TestCheckSnapshot:
    """Tests for input shape checks."""

    def test_valid(self):
        assert check_snapshot({'checking_accounts': 100, 'hasCrypto': False, 'currency': 'CAD'}) == []

    def test_type_errors(self):
        errors = check_snapshot({'checking_accounts': '100', 'has_crypto': 1, 'currency': 5})
        assert errors == [
            'checking_accounts: must be a number',
            'has_crypto: must be a boolean',
            'currency: must be a string',
        ]

    def test_negative_value(self):
        assert check_snapshot({'savingsAccounts': -5}) == ['savingsAccounts: must be non-negative']

    def test_bool_is_not_a_number(self):
        assert check_snapshot({'age': True}) == ['age: must be a number']

    def test_enum_fields(self):
        errors = check_snapshot({'calendar_type': 'gregorian', 'nisabStandard': 'copper'})
        assert errors == [
            'calendar_type: must be one of lunar, solar',
            'nisab_standard: must be one of gold, silver',
        ]

    def test_unknown_keys_ignored(self):
        assert check_snapshot({'somethingElse': 'x'}) == []
