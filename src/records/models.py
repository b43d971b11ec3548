"""Typed input records.

The parser builds these from loosely-typed mappings at each calculator's
entry point; everything downstream works on these instead of raw dicts.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from core.numeric import Number


@dataclass(frozen=True)
class Student:
    """A student and their marks, keyed by subject in entry order."""

    name: str
    marks: Dict[str, Number]

    @property
    def subject_count(self) -> int:
        return len(self.marks)


@dataclass(frozen=True)
class Team:
    """An auction team and its purse."""

    name: Optional[str]
    purse: Number


@dataclass(frozen=True)
class Player:
    """A player bought at auction."""

    name: Optional[str]
    role: Optional[str]
    price: Number


@dataclass(frozen=True)
class CartItem:
    """One cart line as ordered, with addon prices already parsed."""

    name: Optional[str]
    price: Number
    qty: Number
    addon_prices: List[float] = field(default_factory=list)

    @property
    def addon_total(self) -> Number:
        """Raw sum of addon prices; may be negative."""
        return sum(self.addon_prices)


@dataclass(frozen=True)
class Transaction:
    """A valid credit or debit entry from a transaction log.

    ``id``, ``to``, ``category`` and ``date`` are passed through untouched.
    """

    id: Any
    type: str
    amount: Number
    to: Any = None
    category: Any = None
    date: Any = None
