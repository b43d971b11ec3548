"""Entry-point parsing for the calculators.

Each ``parse_*`` function takes the loosely-typed data a caller hands in
(mappings, sequences, primitives) and returns a Result holding typed records
from ``records.models``. A failed Result means the whole computation cannot
proceed and the calculator returns its sentinel.

Malformed entries *inside* an otherwise valid collection are a different
matter: those are caller bugs and raise ``RecordError``.
"""

from collections.abc import Mapping, Sequence
from typing import Any, List, Optional

from constants import (
    ADDON_SEPARATOR,
    MAX_MARK,
    TRANSACTION_TYPES,
)
from core.logging import get_logger
from core.numeric import Number, is_finite_number
from errors import RecordError
from records.models import CartItem, Player, Student, Team, Transaction
from result import Result, failure, success

logger = get_logger(__name__)


def is_record(value: Any) -> bool:
    """True for mapping-like records."""
    return isinstance(value, Mapping)


def is_non_empty_sequence(value: Any) -> bool:
    """True for non-empty lists and tuples; strings and bytes don't count."""
    if isinstance(value, (str, bytes, bytearray)):
        return False
    return isinstance(value, Sequence) and len(value) > 0


def parse_title(raw: Any) -> Result:
    """Split a raw title into its non-empty whitespace-delimited tokens.

    Examples:
        >>> parse_title("  DIL   SE  ")["value"]
        ['DIL', 'SE']
        >>> parse_title(42)["ok"]
        False
    """
    if not isinstance(raw, str):
        return failure(f"title must be a string, got {type(raw).__name__}")

    tokens = raw.split()
    if not tokens:
        return failure("title is empty")
    return success(tokens)


def parse_student(raw: Any) -> Result:
    """Parse a ``{name, marks}`` record into a Student.

    Args:
        raw: Mapping with a non-empty ``name`` string and a non-empty
            ``marks`` mapping of subject to mark

    Returns:
        Result holding a Student, or a failure naming the first problem
    """
    if not is_record(raw):
        return failure("student must be a mapping")

    name = raw.get("name")
    if not isinstance(name, str) or name == "":
        return failure("student name must be a non-empty string")

    marks = raw.get("marks")
    if not is_record(marks) or len(marks) == 0:
        return failure("marks must be a non-empty mapping")

    for subject, mark in marks.items():
        if not is_finite_number(mark) or mark < 0 or mark > MAX_MARK:
            return failure(f"mark for {subject!r} must be a number in [0, 100]")

    return success(Student(name=name, marks=dict(marks)))


def parse_team(raw: Any) -> Result:
    """Parse a ``{name, purse}`` record into a Team."""
    if not is_record(raw):
        return failure("team must be a mapping")

    purse = raw.get("purse")
    if not is_finite_number(purse) or purse <= 0:
        return failure("team purse must be a positive number")

    return success(Team(name=raw.get("name"), purse=purse))


def parse_players(raw: Any) -> Result:
    """Parse the list of players bought by a team.

    Returns:
        Result holding a list of Players, or a failure if ``raw`` is not a
        non-empty sequence

    Raises:
        RecordError: If an entry is not a mapping or its price is not a
            finite number
    """
    if not is_non_empty_sequence(raw):
        return failure("players must be a non-empty sequence")

    players: List[Player] = []
    for index, entry in enumerate(raw):
        if not is_record(entry):
            raise RecordError("player must be a mapping", index)

        price = entry.get("price")
        if not is_finite_number(price):
            raise RecordError(f"player price must be a number, got {price!r}", index)

        players.append(Player(name=entry.get("name"), role=entry.get("role"), price=price))

    return success(players)


def parse_addon_price(addon: Any, index: Optional[int] = None) -> Number:
    """Read the price out of a ``"Label:Price"`` addon string.

    Only the second ``:``-separated segment is read; anything after it is
    ignored. A blank price segment reads as 0.

    Examples:
        >>> parse_addon_price("Raita:30")
        30
        >>> parse_addon_price("Extra Cheese:12.5")
        12.5

    Raises:
        RecordError: If the string has no price segment or it isn't numeric
    """
    if not isinstance(addon, str):
        raise RecordError(f"addon must be a string, got {addon!r}", index)

    segments = addon.split(ADDON_SEPARATOR)
    if len(segments) < 2:
        raise RecordError(f"addon {addon!r} has no price", index)

    text = segments[1].strip()
    if text == "":
        return 0
    for convert in (int, float):
        try:
            price = convert(text)
        except ValueError:
            continue
        if is_finite_number(price):
            return price
        break

    raise RecordError(f"addon {addon!r} has an invalid price", index)


def parse_cart(raw: Any) -> Result:
    """Parse a cart into CartItems, dropping lines with ``qty <= 0``.

    A cart whose every line is dropped is still a valid (empty) cart.

    Returns:
        Result holding the kept CartItems in order, or a failure if ``raw``
        is not a non-empty sequence

    Raises:
        RecordError: If an entry is not a mapping, its qty or price is not
            numeric, or an addon cannot be priced
    """
    if not is_non_empty_sequence(raw):
        return failure("cart must be a non-empty sequence")

    items: List[CartItem] = []
    for index, entry in enumerate(raw):
        if not is_record(entry):
            raise RecordError("cart item must be a mapping", index)

        qty = entry.get("qty")
        if not is_finite_number(qty):
            raise RecordError(f"cart item qty must be a number, got {qty!r}", index)
        if qty <= 0:
            logger.debug("Dropping cart item {} with qty {}", index, qty)
            continue

        price = entry.get("price")
        if not is_finite_number(price):
            raise RecordError(f"cart item price must be a number, got {price!r}", index)

        addons = entry.get("addons") or []
        if isinstance(addons, (str, bytes)) or not isinstance(addons, Sequence):
            raise RecordError("cart item addons must be a list of strings", index)

        items.append(
            CartItem(
                name=entry.get("name"),
                price=price,
                qty=qty,
                addon_prices=[parse_addon_price(addon, index) for addon in addons],
            )
        )

    return success(items)


def is_valid_transaction(entry: Any) -> bool:
    """A transaction counts only with a positive amount and a known type."""
    if not is_record(entry):
        return False
    amount = entry.get("amount")
    return (
        is_finite_number(amount)
        and amount > 0
        and entry.get("type") in TRANSACTION_TYPES
    )


def parse_transactions(raw: Any) -> Result:
    """Keep the valid transactions of a log, in order.

    Invalid entries are skipped rather than failing the batch; the batch
    fails only when nothing valid is left.
    """
    if not is_non_empty_sequence(raw):
        return failure("transactions must be a non-empty sequence")

    transactions = [
        Transaction(
            id=entry.get("id"),
            type=entry["type"],
            amount=entry["amount"],
            to=entry.get("to"),
            category=entry.get("category"),
            date=entry.get("date"),
        )
        for entry in raw
        if is_valid_transaction(entry)
    ]

    skipped = len(raw) - len(transactions)
    if skipped:
        logger.debug("Skipped {} invalid transaction(s)", skipped)

    if not transactions:
        return failure("no valid transactions")
    return success(transactions)
