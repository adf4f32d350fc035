# -*- coding: utf-8 -*-
"""Logging setup and the warnings accounts emit at construction."""

import io
import json
import logging
import unittest
from decimal import Decimal

from banking.accounts import CurrentAccount, SavingsAccount
from banking.logging import get_logger, setup_logging


class TestLoggingSetup(unittest.TestCase):
    def setUp(self):
        root = logging.getLogger()
        self._saved = (root.level, root.handlers[:])
        self.stream = io.StringIO()

    def tearDown(self):
        root = logging.getLogger()
        level, handlers = self._saved
        for handler in root.handlers[:]:
            root.removeHandler(handler)
        for handler in handlers:
            root.addHandler(handler)
        root.setLevel(level)
        logging.getLogger("banking").setLevel(logging.NOTSET)

    def test_standard_format(self):
        setup_logging("INFO", stream=self.stream)
        get_logger("banking.test").info("hello")
        line = self.stream.getvalue().strip()
        self.assertIn("| INFO     | banking.test | hello", line)

    def test_json_format(self):
        setup_logging("DEBUG", format_type="json", stream=self.stream)
        get_logger("banking.test").debug("structured")
        record = json.loads(self.stream.getvalue().strip())
        self.assertEqual(record["level"], "DEBUG")
        self.assertEqual(record["logger"], "banking.test")
        self.assertEqual(record["message"], "structured")

    def test_unknown_level_falls_back_to_warning(self):
        setup_logging("chatty", stream=self.stream)
        self.assertEqual(logging.getLogger().level, logging.WARNING)

    def test_savings_clamp_is_logged(self):
        setup_logging("WARNING", stream=self.stream)
        SavingsAccount(Decimal("10"))
        self.assertIn("below the minimum", self.stream.getvalue())

    def test_negative_current_balance_is_logged(self):
        setup_logging("WARNING", stream=self.stream)
        CurrentAccount(Decimal("-1"))
        self.assertIn("negative balance", self.stream.getvalue())

    def test_rejections_are_debug_only(self):
        setup_logging("WARNING", stream=self.stream)
        CurrentAccount(Decimal("0")).withdraw(Decimal("5"))
        self.assertEqual(self.stream.getvalue(), "")


if __name__ == '__main__':
    unittest.main(verbosity=2)
