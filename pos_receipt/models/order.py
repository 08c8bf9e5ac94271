"""Dataclasses representing a past order and its cart."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional


def _to_float(value: Any, default: float = 0.0) -> float:
    if value in (None, ""):
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    return number if math.isfinite(number) else default


def _to_int(value: Any, default: int = 0) -> int:
    if value in (None, ""):
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    return int(number) if math.isfinite(number) else default


def _to_str(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _pick(data: Mapping[str, Any], *keys: str) -> Any:
    """Return the first key present in data, accepting alternate spellings."""
    for key in keys:
        if key in data:
            return data[key]
    return None


@dataclass
class LineItem:
    name: str = ""
    price: float = 0.0
    quantity: int = 0
    description: str = ""
    cgst: float = 0.0
    sgst: float = 0.0

    @property
    def line_total(self) -> float:
        return self.quantity * self.price

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "LineItem":
        """Build an item, filling anything missing with its neutral value."""
        if not data:
            return cls()
        return cls(
            name=_to_str(data.get("name")),
            price=_to_float(data.get("price")),
            quantity=_to_int(data.get("quantity")),
            description=_to_str(data.get("description")),
            cgst=_to_float(_pick(data, "cgst", "cgst_rate")),
            sgst=_to_float(_pick(data, "sgst", "sgst_rate")),
        )

    @classmethod
    def coerce(cls, value: Any) -> "LineItem":
        if isinstance(value, cls):
            return value
        return cls.from_dict(value)


@dataclass
class CustomerInfo:
    doctor_name: str = ""
    customer_name: str = ""
    customer_mobile: str = ""

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> Optional["CustomerInfo"]:
        """Build customer details; None when nothing identifying is present."""
        if not data:
            return None
        info = cls(
            doctor_name=_to_str(_pick(data, "doctor_name", "doctorName")),
            customer_name=_to_str(_pick(data, "customer_name", "customerName")),
            customer_mobile=_to_str(_pick(data, "customer_mobile", "customerMobile")),
        )
        return None if info.is_empty() else info

    def is_empty(self) -> bool:
        return not (self.doctor_name or self.customer_name or self.customer_mobile)


@dataclass
class Order:
    """A placed order as read from order history. Never mutated here."""

    order_id: int = 0
    invoice_number: str = ""
    order_date: str = ""
    order_time: str = ""
    total: float = 0.0
    payment_method: str = ""
    cart: List[LineItem] = field(default_factory=list)
    customer: Optional[CustomerInfo] = None
    discount_percentage: float = 0.0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Order":
        """Normalize a raw order mapping.

        Accepts both the snake_case keys used by the workbook and the keys
        of the billing frontend (``paymentMethod``, ``customerDetails``).
        """
        customer = _pick(data, "customer", "customerDetails", "customer_details")
        if isinstance(customer, CustomerInfo):
            customer_info: Optional[CustomerInfo] = customer
        else:
            customer_info = CustomerInfo.from_dict(customer)

        return cls(
            order_id=_to_int(_pick(data, "order_id", "id")),
            invoice_number=_to_str(data.get("invoice_number")),
            order_date=_to_str(data.get("order_date")),
            order_time=_to_str(data.get("order_time")),
            total=_to_float(data.get("total")),
            payment_method=_to_str(_pick(data, "payment_method", "paymentMethod")),
            cart=[LineItem.coerce(item) for item in (data.get("cart") or [])],
            customer=customer_info,
            discount_percentage=_to_float(data.get("discount_percentage")),
        )

    @classmethod
    def coerce(cls, value: Any) -> Optional["Order"]:
        """Return an Order for a dataclass or mapping; None when absent."""
        if value is None:
            return None
        if isinstance(value, cls):
            return value
        return cls.from_dict(value)
