"""Currencies, balances, orders and errors for a simulated leveraged futures exchange."""

__version__ = "0.123.0"