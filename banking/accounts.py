# -*- coding: utf-8 -*-
"""
Savings and Current Accounts.

- Both variants satisfy the `Account` capability set structurally; nothing
  inherits from a shared base.
- Business-rule failures come back as `Rejected` values with the balance
  untouched. Nothing here raises for a failed deposit or withdrawal.
- Amounts are used exactly as given. Rounding to cents happens where
  user text is parsed, not here.
- No console I/O: callers decide how to present an outcome.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from decimal import Decimal
from typing import Callable, Optional, Protocol, Union

import banking.config as cfg
from .errors import InsufficientFunds, InvalidAmount
from .logging import get_logger
from .money import as_decimal, as_money

logger = get_logger(__name__)


class RejectionReason(str, enum.Enum):
    INVALID_AMOUNT = "invalid_amount"
    INSUFFICIENT_FUNDS = "insufficient_funds"


@dataclass(frozen=True)
class Confirmed:
    """The operation went through; `balance` is the new balance."""

    balance: Decimal

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> Decimal:
        return self.balance


@dataclass(frozen=True)
class Rejected:
    """The operation was refused; `balance` is the unchanged balance."""

    reason: RejectionReason
    balance: Decimal
    minimum_balance: Optional[Decimal] = None

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> Decimal:
        """Raise the exception matching the rejection reason."""
        if self.reason is RejectionReason.INVALID_AMOUNT:
            raise InvalidAmount("Amount must be positive")
        if self.minimum_balance is not None:
            raise InsufficientFunds(
                f"Withdrawal would reduce the balance below the minimum of {self.minimum_balance}"
            )
        raise InsufficientFunds("Insufficient funds")


Outcome = Union[Confirmed, Rejected]


class Account(Protocol):
    """Capability set shared by every account variant."""

    def deposit(self, amount: Decimal) -> Outcome: ...

    def withdraw(self, amount: Decimal) -> Outcome: ...

    def check_balance(self) -> Decimal: ...


# An operation applied to an account with a user-supplied amount.
Operation = Callable[[Account, Decimal], Outcome]


def deposit(account: Account, amount: Decimal) -> Outcome:
    return account.deposit(amount)


def withdraw(account: Account, amount: Decimal) -> Outcome:
    return account.withdraw(amount)


def _opening_balance(value) -> Decimal:
    balance = as_decimal(value)
    if not balance.is_finite():
        raise InvalidAmount(f"Opening balance must be a finite number, got {value!r}")
    return balance


class SavingsAccount:
    MINIMUM_BALANCE = as_money(cfg.MINIMUM_BALANCE)

    def __init__(self, initial_balance: Decimal = MINIMUM_BALANCE):
        balance = _opening_balance(initial_balance)
        if balance < self.MINIMUM_BALANCE:
            logger.warning(
                "Savings initial balance %s is below the minimum; clamping to %s",
                balance, self.MINIMUM_BALANCE,
            )
            balance = self.MINIMUM_BALANCE
        self._balance = balance

    def __repr__(self) -> str:
        return f"SavingsAccount(balance={self._balance})"

    def check_balance(self) -> Decimal:
        return self._balance

    def deposit(self, amount: Decimal) -> Outcome:
        amt = as_decimal(amount)
        if not amt.is_finite():
            logger.debug("Savings deposit of %s rejected: invalid amount", amount)
            return Rejected(RejectionReason.INVALID_AMOUNT, self._balance)
        self._balance += amt
        logger.debug("Savings deposit of %s confirmed; balance %s", amount, self._balance)
        return Confirmed(self._balance)

    def withdraw(self, amount: Decimal) -> Outcome:
        amt = as_decimal(amount)
        if not amt.is_finite() or amt <= 0:
            logger.debug("Savings withdrawal of %s rejected: invalid amount", amount)
            return Rejected(RejectionReason.INVALID_AMOUNT, self._balance)
        if self._balance - amt < self.MINIMUM_BALANCE:
            logger.debug("Savings withdrawal of %s rejected: would breach minimum", amount)
            return Rejected(RejectionReason.INSUFFICIENT_FUNDS, self._balance, self.MINIMUM_BALANCE)
        self._balance -= amt
        logger.debug("Savings withdrawal of %s confirmed; balance %s", amount, self._balance)
        return Confirmed(self._balance)


class CurrentAccount:
    def __init__(self, initial_balance: Decimal):
        self._balance = _opening_balance(initial_balance)
        if self._balance < 0:
            logger.warning("Current account opened with a negative balance of %s", self._balance)

    def __repr__(self) -> str:
        return f"CurrentAccount(balance={self._balance})"

    def check_balance(self) -> Decimal:
        return self._balance

    def deposit(self, amount: Decimal) -> Outcome:
        amt = as_decimal(amount)
        if not amt.is_finite():
            logger.debug("Current deposit of %s rejected: invalid amount", amount)
            return Rejected(RejectionReason.INVALID_AMOUNT, self._balance)
        self._balance += amt
        logger.debug("Current deposit of %s confirmed; balance %s", amount, self._balance)
        return Confirmed(self._balance)

    def withdraw(self, amount: Decimal) -> Outcome:
        amt = as_decimal(amount)
        if not amt.is_finite() or amt <= 0:
            logger.debug("Current withdrawal of %s rejected: invalid amount", amount)
            return Rejected(RejectionReason.INVALID_AMOUNT, self._balance)
        if amt > self._balance:
            logger.debug("Current withdrawal of %s rejected: insufficient funds", amount)
            return Rejected(RejectionReason.INSUFFICIENT_FUNDS, self._balance)
        self._balance -= amt
        logger.debug("Current withdrawal of %s confirmed; balance %s", amount, self._balance)
        return Confirmed(self._balance)
