"""Transaction Log Analyzer

Aggregates a payment transaction log: credit and debit totals, per-category
spend, the most frequent counterparty and a couple of threshold flags.
Entries with a non-positive amount or an unknown type are left out of every
figure.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, List, Optional

from constants import LARGE_TRANSACTION_THRESHOLD, SMALL_TRANSACTION_LIMIT
from core.logging import get_logger
from core.numeric import Number, round_half_up
from records.models import Transaction
from records.parser import parse_transactions

logger = get_logger(__name__)


@dataclass(frozen=True)
class TransactionAnalysis:
    """Aggregates over the valid transactions of a log."""

    total_credit: Number
    total_debit: Number
    net_balance: Number
    transaction_count: int
    avg_transaction: int
    highest_transaction: Transaction
    category_breakdown: Dict[Any, Number] = field(default_factory=dict)
    frequent_contact: Any = None
    all_above_100: bool = False
    has_large_transaction: bool = False


def category_totals(transactions: List[Transaction]) -> Dict[Any, Number]:
    """Sum amounts per category, credits and debits together."""
    totals: Dict[Any, Number] = {}
    for txn in transactions:
        totals[txn.category] = totals.get(txn.category, 0) + txn.amount
    return totals


def most_frequent(values: List[Hashable]) -> Any:
    """Most common value; on a tie, the one seen first wins.

    Examples:
        >>> most_frequent(["Rent", "Swiggy", "Swiggy", "Rent"])
        'Rent'
    """
    counts: Dict[Hashable, int] = {}
    for value in values:
        counts[value] = counts.get(value, 0) + 1

    leader, leader_count = None, 0
    for value, count in counts.items():
        if count > leader_count:
            leader, leader_count = value, count
    return leader


def analyze_transactions(transactions: Any) -> Optional[TransactionAnalysis]:
    """Analyze a transaction log.

    Args:
        transactions: Non-empty list of ``{"id", "type", "amount", "to",
            "category", "date"}`` records

    Returns:
        TransactionAnalysis over the valid entries, or None if the input is
        not a non-empty list or nothing in it is valid
    """
    parsed = parse_transactions(transactions)
    if not parsed["ok"]:
        logger.debug("Rejected transaction log: {}", parsed["error"])
        return None

    valid: List[Transaction] = parsed["value"]
    total_credit = sum(t.amount for t in valid if t.type == "credit")
    total_debit = sum(t.amount for t in valid if t.type == "debit")

    highest = valid[0]
    for txn in valid:
        if txn.amount > highest.amount:
            highest = txn

    return TransactionAnalysis(
        total_credit=total_credit,
        total_debit=total_debit,
        net_balance=total_credit - total_debit,
        transaction_count=len(valid),
        avg_transaction=round_half_up((total_credit + total_debit) / len(valid)),
        highest_transaction=highest,
        category_breakdown=category_totals(valid),
        frequent_contact=most_frequent([t.to for t in valid]),
        all_above_100=all(t.amount > SMALL_TRANSACTION_LIMIT for t in valid),
        has_large_transaction=any(
            t.amount >= LARGE_TRANSACTION_THRESHOLD for t in valid
        ),
    )
