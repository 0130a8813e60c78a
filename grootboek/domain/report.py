"""Pure functions for balance aggregation and reporting.

This module contains the functional core for reporting operations:
- No I/O operations (no files, no console)
- No side effects on the input transactions
- The aggregation tree is built fresh for every report

All monetary amounts are in cents (Cents type).
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from grootboek.domain.models import ZERO, Account, Cents, Transaction


@dataclass
class AccountNode:
    """Node of the aggregation tree.

    Attributes:
        account: Full path of this node. The root has an empty path.
        balance: Sum of mutations booked directly on this account.
        total: Sum of mutations on this account and all descendants.
        children: Child nodes keyed by their last path segment, in first-seen order.
    """

    account: Account
    balance: Cents = ZERO
    total: Cents = ZERO
    children: dict[str, "AccountNode"] = field(default_factory=dict)

    @property
    def name(self) -> str:
        return self.account.name()

    def insert(self, account: Account, amount: Cents) -> None:
        """Add an amount to every node on the path to account."""
        self.total += amount
        current = self
        for node in account.walk_nodes():
            segment = node.name()
            child = current.children.get(segment)
            if child is None:
                child = AccountNode(node)
                current.children[segment] = child
            child.total += amount
            current = child
        current.balance += amount

    def find(self, account: Account | str) -> "AccountNode | None":
        """Look up a descendant node by full path."""
        if isinstance(account, str):
            account = Account(account)
        current = self
        for node in account.walk_nodes():
            current = current.children.get(node.name())
            if current is None:
                return None
        return current

    def walk(self) -> Iterator["AccountNode"]:
        """Yield all descendants depth-first, parents before children."""
        for child in self.children.values():
            yield child
            yield from child.walk()

    def is_leaf(self) -> bool:
        return not self.children


@dataclass(frozen=True)
class UnbalancedTransaction:
    """Transaction whose mutations do not sum to zero."""

    transaction: Transaction
    residual: Cents


@dataclass(frozen=True)
class TreeLine:
    """One line of the indented tree report."""

    indent: str
    connector: str
    name: str
    total: Cents
    depth: int


def compute_totals(transactions: Iterable[Transaction]) -> AccountNode:
    """Build the aggregation tree over all mutations.

    Args:
        transactions: Transactions to aggregate.

    Returns:
        Root node; its total is the sum of all mutation amounts.
    """
    root = AccountNode(Account(""))
    for transaction in transactions:
        for mutation in transaction.mutations:
            root.insert(mutation.account, mutation.amount)
    return root


def find_unbalanced(transactions: Iterable[Transaction]) -> list[UnbalancedTransaction]:
    """Find transactions whose mutations do not sum to zero.

    Args:
        transactions: Transactions to check.

    Returns:
        Each unbalanced transaction with its non-zero residual, in input order.
    """
    unbalanced = []
    for transaction in transactions:
        residual = transaction.balance()
        if not residual.is_zero():
            unbalanced.append(UnbalancedTransaction(transaction, residual))
    return unbalanced


def _visible_children(node: AccountNode, hide_zero: bool) -> list[AccountNode]:
    """Children to draw; with hide_zero, a zero total with nothing visible below it is dropped."""
    if not hide_zero:
        return list(node.children.values())
    return [
        child
        for child in node.children.values()
        if not child.total.is_zero() or _visible_children(child, hide_zero)
    ]


def render_tree(root: AccountNode, hide_zero: bool = False) -> list[TreeLine]:
    """Lay out the tree as an indented hierarchy of cumulative totals.

    Args:
        root: Root from compute_totals.
        hide_zero: Omit accounts whose total is zero, unless a descendant is shown.

    Returns:
        Lines in display order, without the root itself.
    """
    lines: list[TreeLine] = []

    def visit(node: AccountNode, indent: str, depth: int) -> None:
        children = _visible_children(node, hide_zero)
        for i, child in enumerate(children):
            last = i == len(children) - 1
            connector = "└─" if last else "├─"
            lines.append(TreeLine(indent, connector, child.name, child.total, depth))
            visit(child, indent + ("   " if last else "│  "), depth + 1)

    visit(root, "", 0)
    return lines


def flatten(root: AccountNode, hide_zero: bool = False) -> list[tuple[Cents, Account]]:
    """List own balances per account.

    Interior nodes with a zero own balance are skipped.

    Args:
        root: Root from compute_totals.
        hide_zero: Omit leaves whose own balance is zero.

    Returns:
        (own balance, account) pairs in depth-first order.
    """
    pairs = []
    for node in root.walk():
        if node.balance.is_zero() and not node.is_leaf():
            continue
        if hide_zero and node.is_leaf() and node.balance.is_zero():
            continue
        pairs.append((node.balance, node.account))
    return pairs
