"""Domain types for the ledger.

- Cents: exact money amount in minor currency units
- Account: slash-delimited hierarchical account path
- Tag: (label, value) attached to a transaction header
- Mutation: one signed money movement against one account
- Transaction: a dated, described set of tags and mutations
"""

from collections.abc import Iterator
from dataclasses import dataclass
from itertools import takewhile

from grootboek.domain.calendar import Date


@dataclass(frozen=True, order=True)
class Cents:
    """Money amount in cents. No floating point anywhere."""

    value: int

    def total_cents(self) -> int:
        return self.value

    def is_negative(self) -> bool:
        return self.value < 0

    def is_zero(self) -> bool:
        return self.value == 0

    def __add__(self, other: "Cents") -> "Cents":
        return Cents(self.value + other.value)

    def __sub__(self, other: "Cents") -> "Cents":
        return Cents(self.value - other.value)

    def __neg__(self) -> "Cents":
        return Cents(-self.value)

    def __abs__(self) -> "Cents":
        return Cents(abs(self.value))

    def __str__(self) -> str:
        sign = "-" if self.value < 0 else "+"
        whole, cents = divmod(abs(self.value), 100)
        return f"{sign}{whole}.{cents:02d}"


ZERO = Cents(0)


@dataclass(frozen=True, order=True)
class Account:
    """Hierarchical account path such as 'assets/bank/checking'.

    A node is any prefix ending at a '/' boundary, or the whole path.
    """

    raw: str

    def matches_prefix(self, prefix: str) -> bool:
        """Check if this account is prefix or lies below it.

        'a/b/c' matches 'a/b' and 'a/b/' but not 'a/bc'.
        """
        prefix = prefix.removesuffix("/")
        return self.raw == prefix or self.raw.startswith(prefix + "/")

    def name(self) -> str:
        """Last path segment."""
        return self.raw.rpartition("/")[2]

    def parent(self) -> "Account | None":
        """Account one level up, or None for a top-level account."""
        head, sep, _ = self.raw.rpartition("/")
        if not sep:
            return None
        return Account(head)

    def parents(self) -> Iterator["Account"]:
        """Yield all ancestors, nearest first."""
        current = self.parent()
        while current is not None:
            yield current
            current = current.parent()

    def walk_nodes(self) -> Iterator["Account"]:
        """Yield every node from the top-level segment down to this account."""
        for index, char in enumerate(self.raw):
            if char == "/":
                yield Account(self.raw[:index])
        yield self

    def common_parent(self, other: "Account") -> "Account | None":
        """Deepest strict ancestor shared by both accounts, or None."""
        mine = list(self.parents())[::-1]
        theirs = list(other.parents())[::-1]
        shared = [a for a, _ in takewhile(lambda pair: pair[0] == pair[1], zip(mine, theirs))]
        return shared[-1] if shared else None

    def depth(self) -> int:
        """Number of segments in the path."""
        return self.raw.count("/") + 1

    def __str__(self) -> str:
        return self.raw


@dataclass(frozen=True)
class Tag:
    """Immutable transaction tag."""

    label: str
    value: str


@dataclass(frozen=True)
class Mutation:
    """Immutable money movement against an account."""

    amount: Cents
    account: Account


@dataclass(frozen=True)
class Transaction:
    """Immutable ledger transaction.

    Mutations are not required to balance; use balance() or
    grootboek.domain.report.find_unbalanced to check.
    """

    date: Date
    description: str
    tags: tuple[Tag, ...] = ()
    mutations: tuple[Mutation, ...] = ()

    def balance(self) -> Cents:
        """Sum of all mutation amounts."""
        return sum((mutation.amount for mutation in self.mutations), ZERO)

    def is_balanced(self) -> bool:
        return self.balance().is_zero()

    def mutates_account(self, prefix: str) -> bool:
        """Check if any mutation touches prefix or one of its sub-accounts."""
        return any(mutation.account.matches_prefix(prefix) for mutation in self.mutations)

    def tag(self, label: str) -> str | None:
        """Value of the first tag with this label."""
        for tag in self.tags:
            if tag.label == label:
                return tag.value
        return None
