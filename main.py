# -*- coding: utf-8 -*-
"""
Savings / Current Account Console

Purpose:
- Opens one savings account (seeded with the minimum balance) and one
  current account (seeded with DEFAULT_CURRENT_BALANCE).
- Lets the user deposit, withdraw and check balances from a text menu.
- Nothing is persisted; balances live for the lifetime of the process.
"""


from __future__ import annotations

from banking.accounts import CurrentAccount, SavingsAccount
from banking.console import Console, clear_terminal
from banking.logging import setup_logging
from banking.menu import Menu
import banking.config as cfg


def main() -> None:
    setup_logging(cfg.LOG_LEVEL, cfg.LOG_FORMAT)

    savings = SavingsAccount()  # initialized with the minimum balance
    current = CurrentAccount(cfg.DEFAULT_CURRENT_BALANCE)

    menu = Menu(Console(clear=clear_terminal))
    menu.run([("Savings", savings), ("Current", current)])


if __name__ == "__main__":
    main()
