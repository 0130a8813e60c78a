"""Tests for grootboek.domain.transactions pure functions."""

import pytest

from grootboek.domain.calendar import Date
from grootboek.domain.errors import MutationError, ParseError, TagError
from grootboek.domain.models import Account, Cents, Mutation, Tag, Transaction
from grootboek.domain.parse import parse_transactions
from grootboek.domain.transactions import build_transaction, filter_transactions, format_transaction

LEDGER = """\
2024-12-31: year end
+10.00 assets/cash
-10.00 income/misc

2025-01-15: coffee
+3.00 expenses/coffee
-3.00 assets/cash

2025-02-01: rent
+500.00 expenses/rent
-500.00 assets/bank
"""


class TestFilterTransactions:
    """Tests for filter_transactions."""

    def test_no_filters(self) -> None:
        """Should keep everything in order."""
        transactions = parse_transactions(LEDGER)

        assert filter_transactions(transactions) == transactions

    def test_inclusive_date_bounds(self) -> None:
        """Should keep transactions on the boundary dates."""
        transactions = parse_transactions(LEDGER)

        result = filter_transactions(transactions, start=Date.new(2025, 1, 15), end=Date.new(2025, 2, 1))

        assert [t.description for t in result] == ["coffee", "rent"]

    def test_end_only(self) -> None:
        """Should drop transactions after the end date."""
        transactions = parse_transactions(LEDGER)

        result = filter_transactions(transactions, end=Date.new(2025, 1, 31))

        assert [t.description for t in result] == ["year end", "coffee"]

    def test_account_prefix(self) -> None:
        """Should keep transactions touching the account or its sub-accounts."""
        transactions = parse_transactions(LEDGER)

        assert [t.description for t in filter_transactions(transactions, account="expenses")] == ["coffee", "rent"]
        assert [t.description for t in filter_transactions(transactions, account="assets/cash")] == [
            "year end",
            "coffee",
        ]
        assert filter_transactions(transactions, account="assets/ca") == []


class TestFormatTransaction:
    """Tests for format_transaction."""

    def test_format(self) -> None:
        """Should render header, tags and mutations."""
        transaction = Transaction(
            date=Date.new(2020, 1, 2),
            description="buy coffee",
            tags=(Tag("receipt", "0042"),),
            mutations=(
                Mutation(Cents(150), Account("expenses/coffee")),
                Mutation(Cents(-150), Account("assets/cash")),
            ),
        )

        assert format_transaction(transaction) == (
            "2020-01-02: buy coffee\nreceipt: 0042\n+1.50 expenses/coffee\n-1.50 assets/cash\n"
        )

    def test_parses_back(self) -> None:
        """Should produce text the parser reads back to the same transactions."""
        transactions = parse_transactions(LEDGER)

        text = "\n".join(format_transaction(t) for t in transactions)

        assert parse_transactions(text) == transactions


class TestBuildTransaction:
    """Tests for build_transaction."""

    def test_build(self) -> None:
        """Should parse tags and mutations from strings."""
        transaction = build_transaction(
            Date.new(2025, 3, 1),
            " invoice 2025-001 ",
            tags=["invoice=2025-001", "customer: ACME"],
            mutations=["+121.00 assets/debitors/acme", "-121 income/consulting"],
        )

        assert transaction.description == "invoice 2025-001"
        assert transaction.tags == (Tag("invoice", "2025-001"), Tag("customer", "ACME"))
        assert transaction.mutations == (
            Mutation(Cents(12100), Account("assets/debitors/acme")),
            Mutation(Cents(-12100), Account("income/consulting")),
        )
        assert transaction.is_balanced()

    def test_empty_description(self) -> None:
        """Should reject empty descriptions."""
        with pytest.raises(ValueError):
            build_transaction(Date.new(2025, 3, 1), "   ", mutations=["+1 a"])

    def test_invalid_tag_label(self) -> None:
        """Should reject tags with an invalid label."""
        with pytest.raises(ParseError) as exc_info:
            build_transaction(Date.new(2025, 3, 1), "x", tags=["bad label=1"])

        assert exc_info.value.details is TagError.INVALID_LABEL

    def test_invalid_mutation(self) -> None:
        """Should report mutation errors with the mutation index as line."""
        with pytest.raises(ParseError) as exc_info:
            build_transaction(Date.new(2025, 3, 1), "x", mutations=["+1 a", "2 b"])

        assert exc_info.value.details is MutationError.MISSING_SIGN
        assert exc_info.value.line == 2

    @pytest.mark.parametrize(
        ("description", "tags", "mutations"),
        [
            ("coffee\rmore", [], ["+1.50 a"]),
            ("coffee\nmore", [], ["+1.50 a"]),
            ("coffee", ["shop=Corner\nCafe"], ["+1.50 a"]),
            ("coffee", [], ["+1.50 assets/cash\nbroken", "-1.50 b"]),
        ],
    )
    def test_rejects_line_breaks(self, description: str, tags: list[str], mutations: list[str]) -> None:
        """Should refuse text that would spill onto extra ledger lines."""
        with pytest.raises(ValueError, match="line breaks"):
            build_transaction(Date.new(2025, 3, 1), description, tags=tags, mutations=mutations)

    def test_formatted_result_parses_back(self) -> None:
        """Should build transactions that survive a trip through the ledger text."""
        transaction = build_transaction(
            Date.new(2025, 3, 1),
            "coffee at cafe",
            tags=["shop=Corner Cafe"],
            mutations=["+1.50 assets/cash", "-1.50 expenses/coffee"],
        )

        assert parse_transactions(format_transaction(transaction)) == [transaction]
