# -*- coding: utf-8 -*-
"""
Custom Exception Classes for the Banking Domain.

Accounts report business-rule failures as `Rejected` outcomes, so these
exceptions only cross the input boundary: parsing and validating what the
user typed before it ever reaches an account.
"""


class BankingError(Exception):
    """Base exception for all banking errors."""


class InvalidAmount(BankingError):
    """
    Raised when a transaction amount is invalid:
    - Not a number, or not finite.
    - Negative or zero value.
    - Outside the configured transaction limits.
    """


class InsufficientFunds(BankingError):
    """
    Raised by `Outcome.unwrap()` when a withdrawal was rejected because the
    balance would fall below the account's floor.
    """
