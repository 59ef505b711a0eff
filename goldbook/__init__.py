"""Bookkeeping ledger for a gold and silver jewelry store."""

__version__ = "1.0.0"
