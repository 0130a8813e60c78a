"""Domain models and types for grootboek.

This package contains the functional core:
- Pure functions with no side effects
- No I/O operations
- Easy to test
- Ledger logic separated from infrastructure
"""

from grootboek.domain.calendar import Date, Month, Year, YearMonth
from grootboek.domain.models import Account, Cents, Mutation, Tag, Transaction

__all__ = ["Account", "Cents", "Date", "Month", "Mutation", "Tag", "Transaction", "Year", "YearMonth"]
