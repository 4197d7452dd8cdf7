"""
Spin & Solve - Gem Economy

The player's gem balance. Credits always succeed, debits succeed only
when the balance covers them, so the balance can never go negative.
Observers are told the new balance after every change.
"""

import logging
from typing import Callable

from spin_solve.engine.base import InsufficientFundsError
from spin_solve.engine.validators import validate_gem_amount

logger = logging.getLogger(__name__)

BalanceObserver = Callable[[int], None]


class GemWallet:
    """Gem balance for one app session."""

    def __init__(self, balance: int = 0) -> None:
        self._balance = validate_gem_amount(balance)
        self._observers: list[BalanceObserver] = []

    @property
    def balance(self) -> int:
        return self._balance

    def subscribe(self, observer: BalanceObserver) -> None:
        """Register a callback receiving the new balance after each change."""
        if observer not in self._observers:
            self._observers.append(observer)

    def unsubscribe(self, observer: BalanceObserver) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def can_afford(self, cost: int) -> bool:
        return self._balance >= validate_gem_amount(cost)

    def add_gems(self, amount: int) -> int:
        """Credit gems unconditionally. Returns the new balance."""
        amount = validate_gem_amount(amount)
        self._balance += amount
        logger.debug("Credited %d gems, balance now %d", amount, self._balance)
        self._notify()
        return self._balance

    def spend_gems(self, amount: int) -> bool:
        """Debit gems if the balance covers the amount.

        Returns:
            True if the gems were spent, False if the balance was too low
            (balance left unchanged)
        """
        amount = validate_gem_amount(amount)
        if self._balance < amount:
            logger.debug("Cannot spend %d gems with balance %d", amount, self._balance)
            return False

        self._balance -= amount
        logger.debug("Spent %d gems, balance now %d", amount, self._balance)
        self._notify()
        return True

    def charge(self, amount: int, purpose: str = "that") -> None:
        """Spend gems or raise InsufficientFundsError."""
        if not self.spend_gems(amount):
            raise InsufficientFundsError(f"You need {amount} gems for {purpose}!")

    def reset_gems(self, value: int = 0) -> None:
        """Set the balance to an explicit value (new game)."""
        self._balance = validate_gem_amount(value)
        self._notify()

    def _notify(self) -> None:
        for observer in list(self._observers):
            try:
                observer(self._balance)
            except Exception:
                logger.exception("Gem balance observer failed")
