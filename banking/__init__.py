# -*- coding: utf-8 -*-
"""
Core package for the savings/current account console exercise.

Importing the package sets the global `Decimal` context so every balance
and amount in the program shares the same precision and rounding.
"""
from decimal import getcontext, ROUND_HALF_EVEN

# Banker's rounding for all money arithmetic.
getcontext().prec = 28
getcontext().rounding = ROUND_HALF_EVEN
