"""Bullion ledger application package."""
