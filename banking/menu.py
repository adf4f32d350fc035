# -*- coding: utf-8 -*-
"""
Interactive Account Menu

Purpose:
- Main menu: pick an account or exit.
- Account menu: deposit, withdraw, check balance, back.
- Deposits and withdrawals share one handler that receives the operation
  as a plain function, collects an amount, applies it and offers repeats.

Every failure is reported and the loop carries on; only the exit choice,
end of input or Ctrl+C ends the session.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

from .accounts import Account, Confirmed, Operation, Outcome, RejectionReason, deposit, withdraw
from .console import Console
from .logging import get_logger
from .money import fmt_money

logger = get_logger(__name__)

# How each account type names its balance in confirmations.
BALANCE_LABELS: Dict[str, str] = {
    "Savings": "savings balance",
    "Current": "balance",
}


class Menu:
    def __init__(self, console: Console):
        self.console = console

    # ---------- screens ----------
    def show_main_menu(self, account_types: List[str]) -> None:
        self.console.clear_screen()
        self.console.print_header("Main Menu")
        for i, account_type in enumerate(account_types, start=1):
            self.console.out(f"{i} - {account_type} Account")
        self.console.out(f"{len(account_types) + 1} - Exit")

    def show_account_menu(self, account_type: str) -> None:
        self.console.clear_screen()
        self.console.print_header(f"{account_type} Account Menu")
        self.console.out("1 - Deposit")
        self.console.out("2 - Withdraw")
        self.console.out("3 - Check Balance")
        self.console.out("4 - Back")

    def report(self, outcome: Outcome, account_type: str) -> None:
        if isinstance(outcome, Confirmed):
            label = BALANCE_LABELS.get(account_type, "balance")
            self.console.separator()
            self.console.out(f"> Your current {label} is: {fmt_money(outcome.balance)}")
        elif outcome.reason is RejectionReason.INVALID_AMOUNT:
            self.console.out("Invalid amount. Please enter a positive value!")
        elif outcome.minimum_balance is not None:
            self.console.out(
                "Insufficient balance! Withdrawals would reduce your balance below "
                f"the minimum allowed of {fmt_money(outcome.minimum_balance)}!"
            )
        else:
            self.console.out("Insufficient balance!")

    # ---------- flows ----------
    def run(self, accounts: List[Tuple[str, Account]]) -> None:
        """Main menu loop. Returns when the user exits or input ends."""
        account_types = [account_type for account_type, _ in accounts]
        exit_choice = len(accounts) + 1
        try:
            while True:
                self.show_main_menu(account_types)
                choice = self.console.prompt_choice(1, exit_choice)
                if choice == exit_choice:
                    self.console.out("Terminating the program...")
                    break
                account_type, account = accounts[choice - 1]
                self.handle_account(account, account_type)
        except (EOFError, KeyboardInterrupt):
            logger.info("Input closed; ending session")
            self.console.out("\nGoodbye.")

    def handle_account(self, account: Account, account_type: str) -> None:
        while True:
            self.show_account_menu(account_type)
            choice = self.console.prompt_choice(1, 4)
            if choice == 1:
                self.handle_transaction(account, account_type, "Deposit", deposit)
            elif choice == 2:
                self.handle_transaction(account, account_type, "Withdrawal", withdraw)
            elif choice == 3:
                self.handle_check_balance(account, account_type)
            else:
                self.console.out("Returning to main menu...")
                return

    def handle_transaction(self, account: Account, account_type: str, action: str,
                           operation: Operation) -> None:
        """Collect an amount, apply `operation` to `account`, then offer repeats."""
        self.console.clear_screen()
        self.console.print_header(action)
        self.console.out(f"Currently performing {action} in: {account_type} Account")
        self.console.out(f"\n> Current Balance: {fmt_money(account.check_balance())}")

        amount = self.console.prompt_amount()
        self.report(operation(account, amount), account_type)

        self.handle_repeat_transaction(account, account_type, action, operation)

    def handle_repeat_transaction(self, account: Account, account_type: str, action: str,
                                  operation: Operation) -> None:
        while True:
            self.console.out("\n> Choose from the following:")
            self.console.out(f"1 - Make another {action}")
            self.console.out(f"2 - Go back to {account_type} account menu")
            if self.console.prompt_choice(1, 2) == 2:
                return
            amount = self.console.prompt_amount()
            self.report(operation(account, amount), account_type)

    def handle_check_balance(self, account: Account, account_type: str) -> None:
        self.console.clear_screen()
        self.console.print_header("Check Balance")
        self.console.out(
            f"> Your recent {account_type} account balance is: {fmt_money(account.check_balance())}"
        )
        self.console.pause()
