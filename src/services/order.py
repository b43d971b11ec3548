"""Order Bill Builder

Prices a food order: per-line totals with addons, delivery fee tiers, GST
and coupon discounts.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

from constants import (
    COUPON_FIRST50,
    COUPON_FLAT100,
    COUPON_FREESHIP,
    DELIVERY_FEE_TIERS,
    FIRST50_CAP,
    FIRST50_RATE,
    FLAT100_AMOUNT,
    GST_RATE,
)
from core.logging import get_logger
from core.numeric import Number, round_half_up
from records.models import CartItem
from records.parser import parse_cart

logger = get_logger(__name__)


@dataclass(frozen=True)
class LineItem:
    """A priced cart line.

    ``addon_total`` is the raw addon sum and may be negative, while
    ``item_total`` never lets addons lower the unit price.
    """

    name: Optional[str]
    qty: Number
    base_price: Number
    addon_total: Number
    item_total: Number


@dataclass(frozen=True)
class Bill:
    """Final bill for an order."""

    items: List[LineItem] = field(default_factory=list)
    subtotal: Number = 0
    delivery_fee: Number = 0
    gst: float = 0.0
    discount: Number = 0
    grand_total: float = 0.0
    coupon: Optional[str] = None


def price_line(item: CartItem) -> LineItem:
    addon_total = item.addon_total
    return LineItem(
        name=item.name,
        qty=item.qty,
        base_price=item.price,
        addon_total=addon_total,
        item_total=(item.price + max(0, addon_total)) * item.qty,
    )


def delivery_fee_for(subtotal: Number) -> int:
    """Delivery fee tier for a subtotal.

    Examples:
        >>> delivery_fee_for(499.99)
        30
        >>> delivery_fee_for(500)
        15
        >>> delivery_fee_for(1000)
        0
    """
    for minimum, fee in DELIVERY_FEE_TIERS:
        if subtotal >= minimum:
            return fee
    # Only reachable with a negative subtotal
    return DELIVERY_FEE_TIERS[-1][1]


def apply_coupon(
    coupon: Any, subtotal: Number, delivery_fee: Number
) -> Tuple[Optional[str], Number, Number]:
    """Resolve a coupon code against an order.

    Codes are matched case-insensitively. Unknown codes, and anything that
    is not a string, give no discount.

    Returns:
        Tuple of (applied code or None, discount, delivery fee after coupon)
    """
    code = coupon.upper() if isinstance(coupon, str) else None

    if code == COUPON_FIRST50:
        return code, min(FIRST50_CAP, subtotal * FIRST50_RATE), delivery_fee
    if code == COUPON_FLAT100:
        return code, FLAT100_AMOUNT, delivery_fee
    if code == COUPON_FREESHIP:
        return code, delivery_fee, 0

    if coupon is not None:
        logger.debug("Ignoring unknown coupon {!r}", coupon)
    return None, 0, delivery_fee


def build_order(cart: Any, coupon: Any = None) -> Optional[Bill]:
    """Build the bill for a cart.

    Args:
        cart: Non-empty list of ``{"name", "price", "qty", "addons"}``
            records, where each addon is a ``"Label:Price"`` string
        coupon: Optional coupon code (FIRST50, FLAT100 or FREESHIP)

    Returns:
        Bill, or None if the cart is not a non-empty list

    Raises:
        RecordError: If a cart item or addon is malformed

    Examples:
        >>> bill = build_order(
        ...     [{"name": "Biryani", "price": 300, "qty": 1, "addons": ["Raita:30"]}],
        ...     "FLAT100",
        ... )
        >>> bill.subtotal, bill.delivery_fee, bill.gst, bill.grand_total
        (330, 30, 16.5, 276.5)
    """
    parsed = parse_cart(cart)
    if not parsed["ok"]:
        logger.debug("Rejected cart: {}", parsed["error"])
        return None

    items = [price_line(item) for item in parsed["value"]]
    subtotal = sum(line.item_total for line in items)
    gst = round_half_up(subtotal * GST_RATE, 2)
    applied, discount, delivery_fee = apply_coupon(
        coupon, subtotal, delivery_fee_for(subtotal)
    )

    grand_total = max(
        0, round_half_up(subtotal + delivery_fee + gst - max(0, discount), 2)
    )

    logger.debug(
        "Order of {} line(s): subtotal={} discount={} total={}",
        len(items),
        subtotal,
        discount,
        grand_total,
    )
    return Bill(
        items=items,
        subtotal=subtotal,
        delivery_fee=delivery_fee,
        gst=gst,
        discount=discount,
        grand_total=grand_total,
        coupon=applied,
    )
