"""Receipt totals and CGST/SGST breakdown for a past order.

Everything here is pure: the functions read the order, never mutate it and
never raise for missing or degenerate values. Missing numbers count as zero,
a missing cart is an empty cart. Amounts keep full precision; they are
rounded half-up to cents by ``to_money`` only when displayed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, Iterable, Iterator, Optional

from pos_receipt.models.order import LineItem, Order

logger = logging.getLogger(__name__)


def to_money(amount: float) -> Decimal:
    """Quantize to cents, rounding half-cent ties up."""
    value = Decimal(str(amount))
    if not value.is_finite():
        return value
    return value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def round_money(amount: float) -> float:
    """Round to 2 decimal places for currency."""
    return float(to_money(amount))


class RateSet:
    """Distinct positive tax rates in first-seen order."""

    def __init__(self, rates: Iterable[float] = ()) -> None:
        self._rates: Dict[float, None] = {}
        for rate in rates:
            self.add(rate)

    def add(self, rate: float) -> None:
        if rate > 0:
            self._rates.setdefault(rate, None)

    def __iter__(self) -> Iterator[float]:
        return iter(self._rates)

    def __len__(self) -> int:
        return len(self._rates)

    def __contains__(self, rate: object) -> bool:
        return rate in self._rates

    def __eq__(self, other: object) -> bool:
        if isinstance(other, RateSet):
            return list(self) == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"RateSet({list(self._rates)!r})"


@dataclass
class ItemTax:
    cgst: float
    sgst: float


@dataclass
class TaxSummary:
    base_amount: float = 0.0
    cgst_amount: float = 0.0
    sgst_amount: float = 0.0
    cgst_rates: RateSet = field(default_factory=RateSet)
    sgst_rates: RateSet = field(default_factory=RateSet)

    @property
    def total_tax(self) -> float:
        return self.cgst_amount + self.sgst_amount


@dataclass
class ReceiptSummary:
    """Figures printed in the totals block of a receipt."""

    total_amount: float
    discount_amount: float
    final_amount: float
    tax_summary: TaxSummary

    @property
    def total_tax(self) -> float:
        return self.tax_summary.total_tax

    @property
    def taxable_value(self) -> float:
        return self.final_amount - self.total_tax

    @property
    def grand_total(self) -> float:
        return self.final_amount

    @property
    def cgst_rate_display(self) -> str:
        return format_rate_range(self.tax_summary.cgst_rates)

    @property
    def sgst_rate_display(self) -> str:
        return format_rate_range(self.tax_summary.sgst_rates)

    def rounded(self) -> Dict[str, Any]:
        """Return the display figures, each rounded once to two decimals."""
        return {
            "total_amount": round_money(self.total_amount),
            "discount_amount": round_money(self.discount_amount),
            "final_amount": round_money(self.final_amount),
            "taxable_value": round_money(self.taxable_value),
            "cgst_amount": round_money(self.tax_summary.cgst_amount),
            "sgst_amount": round_money(self.tax_summary.sgst_amount),
            "cgst_rate": self.cgst_rate_display,
            "sgst_rate": self.sgst_rate_display,
            "total_tax": round_money(self.total_tax),
        }


def _items(cart: Optional[Iterable[Any]]) -> Iterator[LineItem]:
    for item in cart or ():
        yield LineItem.coerce(item)


def compute_total_amount(cart: Optional[Iterable[Any]]) -> float:
    """Sum of quantity x price over the cart."""
    return sum((item.line_total for item in _items(cart)), 0.0)


def compute_discount_amount(total_amount: float, discount_percentage: Optional[float]) -> float:
    """Discount on the pre-tax total.

    Only a zero or missing percentage suppresses the discount; out of range
    values are applied as given.
    """
    if not discount_percentage:
        return 0.0
    return total_amount * (discount_percentage / 100)


def compute_final_amount(total_amount: float, discount_amount: float) -> float:
    return total_amount - discount_amount


def compute_item_tax(item: Any) -> ItemTax:
    item = LineItem.coerce(item)
    base_amount = item.price * item.quantity
    return ItemTax(
        cgst=base_amount * item.cgst / 100,
        sgst=base_amount * item.sgst / 100,
    )


def compute_tax_summary(cart: Optional[Iterable[Any]]) -> TaxSummary:
    """Accumulate base amount, CGST/SGST amounts and the rates seen."""
    summary = TaxSummary()
    for item in _items(cart):
        tax = compute_item_tax(item)
        summary.base_amount += item.quantity * item.price
        summary.cgst_amount += tax.cgst
        summary.sgst_amount += tax.sgst
        summary.cgst_rates.add(item.cgst)
        summary.sgst_rates.add(item.sgst)
    return summary


def _format_rate(rate: float) -> str:
    if float(rate).is_integer():
        return str(int(rate))
    return str(rate)


def format_rate_range(rates: Iterable[float]) -> str:
    """Compact rate label: "0", a single rate, or "min-max".

    Rates between the minimum and maximum are not shown, so 5, 12 and 18
    display as "5-18".
    """
    values = list(rates)
    if not values:
        return "0"
    if len(values) == 1:
        return _format_rate(values[0])
    return f"{_format_rate(min(values))}-{_format_rate(max(values))}"


def summarize_order(order: Any) -> Optional[ReceiptSummary]:
    """Compute every receipt figure for an order; None when there is no order."""
    order = Order.coerce(order)
    if order is None:
        return None

    total_amount = compute_total_amount(order.cart)
    discount_amount = compute_discount_amount(total_amount, order.discount_percentage)
    summary = ReceiptSummary(
        total_amount=total_amount,
        discount_amount=discount_amount,
        final_amount=compute_final_amount(total_amount, discount_amount),
        tax_summary=compute_tax_summary(order.cart),
    )
    logger.debug(
        "Order %s: total=%.2f discount=%.2f tax=%.2f",
        order.order_id,
        summary.total_amount,
        summary.discount_amount,
        summary.total_tax,
    )
    return summary
