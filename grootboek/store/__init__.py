"""Ledger store layer - provides flat-file persistence for the application.

This module re-exports all public ledger file functions for easy importing.
"""

from grootboek.store.ledger_file import append_transaction, load_transactions, read_ledger

__all__ = [
    "append_transaction",
    "load_transactions",
    "read_ledger",
]
