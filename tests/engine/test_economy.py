"""
Spin & Solve - Gem Economy Tests
"""

import logging
import random

import pytest

from spin_solve.engine.base import ErrorKind, InsufficientFundsError
from spin_solve.engine.economy import GemWallet


class TestBalance:
    def test_starts_at_zero(self):
        assert GemWallet().balance == 0

    def test_initial_balance(self):
        assert GemWallet(7).balance == 7

    def test_negative_initial_balance_raises(self):
        with pytest.raises(ValueError):
            GemWallet(-1)


class TestAddGems:
    def test_credits(self):
        wallet = GemWallet()
        assert wallet.add_gems(3) == 3
        assert wallet.add_gems(4) == 7

    def test_zero_is_allowed(self):
        wallet = GemWallet(2)
        wallet.add_gems(0)
        assert wallet.balance == 2

    def test_negative_raises(self):
        wallet = GemWallet(5)
        with pytest.raises(ValueError, match="cannot be negative"):
            wallet.add_gems(-2)
        assert wallet.balance == 5


class TestSpendGems:
    def test_spend_within_balance(self):
        wallet = GemWallet(5)
        assert wallet.spend_gems(3) is True
        assert wallet.balance == 2

    def test_spend_exact_balance(self):
        wallet = GemWallet(3)
        assert wallet.spend_gems(3) is True
        assert wallet.balance == 0

    def test_insufficient_leaves_balance(self):
        wallet = GemWallet(2)
        assert wallet.spend_gems(3) is False
        assert wallet.balance == 2

    def test_can_afford(self):
        wallet = GemWallet(3)
        assert wallet.can_afford(3)
        assert not wallet.can_afford(4)

    def test_charge_raises_when_short(self):
        wallet = GemWallet(4)
        with pytest.raises(InsufficientFundsError, match="5 gems") as exc:
            wallet.charge(5, "a hint")
        assert exc.value.kind == ErrorKind.INSUFFICIENT_FUNDS
        assert wallet.balance == 4

    def test_charge_debits(self):
        wallet = GemWallet(6)
        wallet.charge(5, "a hint")
        assert wallet.balance == 1

    def test_balance_never_negative(self):
        """Random add/spend sequences keep the balance non-negative."""
        rnd = random.Random(99)
        wallet = GemWallet()
        expected = 0
        for _ in range(500):
            amount = rnd.randint(0, 6)
            if rnd.random() < 0.4:
                wallet.add_gems(amount)
                expected += amount
            elif wallet.spend_gems(amount):
                expected -= amount
            assert wallet.balance >= 0
            assert wallet.balance == expected


class TestResetGems:
    def test_reset_to_zero(self):
        wallet = GemWallet(9)
        wallet.reset_gems()
        assert wallet.balance == 0

    def test_reset_to_value(self):
        wallet = GemWallet()
        wallet.reset_gems(4)
        assert wallet.balance == 4


class TestObservers:
    def test_notified_on_every_change(self):
        wallet = GemWallet()
        seen = []
        wallet.subscribe(seen.append)

        wallet.add_gems(5)
        wallet.spend_gems(3)
        wallet.reset_gems(0)

        assert seen == [5, 2, 0]

    def test_not_notified_on_rejected_spend(self):
        wallet = GemWallet(1)
        seen = []
        wallet.subscribe(seen.append)
        wallet.spend_gems(3)
        assert seen == []

    def test_subscribe_twice_notifies_once(self):
        wallet = GemWallet()
        seen = []
        wallet.subscribe(seen.append)
        wallet.subscribe(seen.append)
        wallet.add_gems(1)
        assert seen == [1]

    def test_unsubscribe(self):
        wallet = GemWallet()
        seen = []
        wallet.subscribe(seen.append)
        wallet.unsubscribe(seen.append)
        wallet.add_gems(1)
        assert seen == []

    def test_failing_observer_is_logged(self, caplog):
        wallet = GemWallet()

        def broken(_balance):
            raise RuntimeError("display gone")

        seen = []
        wallet.subscribe(broken)
        wallet.subscribe(seen.append)

        with caplog.at_level(logging.ERROR, logger="spin_solve.engine.economy"):
            wallet.add_gems(2)

        assert wallet.balance == 2
        assert seen == [2]
        assert "Gem balance observer failed" in caplog.text
