# -*- coding: utf-8 -*-
"""
Console collaborator.

Wraps the three things the menu needs from a terminal: read a line, write
a line, clear the screen. Each is injected, so tests drive the menu with
scripted input and the accounts never touch the terminal at all.
"""

from __future__ import annotations

import os
from decimal import Decimal
from typing import Callable, Optional

import banking.config as cfg
from .errors import InvalidAmount
from .logging import get_logger
from .money import parse_amount

logger = get_logger(__name__)


def clear_terminal() -> None:
    os.system("cls" if os.name == "nt" else "clear")


class Console:
    def __init__(self,
                 read_line: Callable[[str], str] = input,
                 write: Callable[[str], None] = print,
                 clear: Optional[Callable[[], None]] = None):
        self._read_line = read_line
        self._write = write
        self._clear = clear

    # ---------- output ----------
    def out(self, text: str = "") -> None:
        self._write(text)

    def separator(self) -> None:
        self._write("-" * cfg.SEPARATOR_WIDTH)

    def print_header(self, title: str) -> None:
        width = cfg.HEADER_WIDTH
        padding = max(0, (width - len(title)) // 2)
        self._write("=" * width)
        self._write(" " * padding + title)
        self._write("=" * width)

    def clear_screen(self) -> None:
        if self._clear is not None:
            self._clear()

    # ---------- input ----------
    def prompt_amount(self) -> Decimal:
        """Keep asking until a strictly positive amount within limits is typed."""
        while True:
            text = self._read_line("\n[Amount]: ")
            try:
                return parse_amount(text)
            except InvalidAmount as e:
                logger.debug("Rejected amount input %r: %s", text, e)
                self._write("\n> Invalid input. Please enter a positive number.")
                self.separator()

    def prompt_choice(self, low: int, high: int) -> int:
        """Keep asking until an integer in [low, high] is typed."""
        while True:
            text = self._read_line("\n[Choice]: ").strip()
            try:
                choice = int(text)
            except ValueError:
                choice = None
            if choice is not None and low <= choice <= high:
                return choice
            self._write("> Invalid choice. Please try again.")
            self.separator()

    def pause(self) -> None:
        """Pause for user input (safe in case of non-interactive piping)."""
        try:
            self._read_line("\nPress Enter to continue... ")
        except (EOFError, KeyboardInterrupt):
            self._write("")
