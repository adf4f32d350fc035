# -*- coding: utf-8 -*-
"""Amount parsing and formatting at the console boundary."""

import unittest
from decimal import Decimal

from banking.errors import BankingError, InvalidAmount
from banking.money import as_money, fmt_money, parse_amount, validate_amount_positive_in_limits


class TestParseAmount(unittest.TestCase):
    def test_accepts_positive_numbers(self):
        self.assertEqual(parse_amount("500"), Decimal("500.00"))
        self.assertEqual(parse_amount(" 12.5 "), Decimal("12.50"))
        self.assertEqual(parse_amount("1,250.75"), Decimal("1250.75"))

    def test_rounds_to_cents_with_bankers_rounding(self):
        self.assertEqual(parse_amount("12.345"), Decimal("12.34"))
        self.assertEqual(parse_amount("12.355"), Decimal("12.36"))

    def test_rejects_malformed_and_non_positive_input(self):
        for text in ("", "   ", "abc", "0", "-5", "0.001", "nan", "inf", "-inf", "1e400", "-1e400"):
            with self.subTest(text=text):
                with self.assertRaises(InvalidAmount):
                    parse_amount(text)

    def test_rejects_amounts_above_limit(self):
        with self.assertRaises(InvalidAmount):
            parse_amount("1000000.01")
        self.assertEqual(parse_amount("1000000"), Decimal("1000000.00"))

    def test_invalid_amount_is_a_banking_error(self):
        with self.assertRaises(BankingError):
            validate_amount_positive_in_limits(Decimal("-1"))


class TestMoneyFormatting(unittest.TestCase):
    def test_as_money_avoids_float_noise(self):
        self.assertEqual(as_money(0.1 + 0.2), Decimal("0.30"))

    def test_fmt_money(self):
        self.assertEqual(fmt_money(Decimal("1500")), "$1,500.00")
        self.assertEqual(fmt_money(Decimal("-5")), "-$5.00")

    def test_fmt_money_handles_values_too_large_to_quantize(self):
        self.assertEqual(
            fmt_money(Decimal("1E+27")), "$1," + ",".join(["000"] * 9) + ".00"
        )


if __name__ == '__main__':
    unittest.main(verbosity=2)
