"""
Weight Ledger - Item weight records with unit conversion and running totals.

Records named weights in kilograms, grams, pounds or ounces, keeps them
newest first in a locally persisted ledger, and reports totals in kilograms.
"""

__version__ = "0.1.0"
