"""Excel repository for reading past orders for receipt reprints."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import date, datetime, time
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

from openpyxl import load_workbook

from pos_receipt import config
from pos_receipt.models.order import LineItem, Order

logger = logging.getLogger(__name__)

ORDER_COLUMNS = [
    "Order_ID",
    "Invoice_Number",
    "Order_Date",
    "Order_Time",
    "Total",
    "Payment_Method",
    "Discount_Percentage",
]
ITEM_COLUMNS = ["Order_ID", "Name", "Price", "Quantity"]


@dataclass
class SheetRows:
    """Header positions and data rows of one sheet."""

    columns: Dict[str, int]
    rows: List[Tuple[Any, ...]]

    def value(self, row: Sequence[Any], column: str) -> Any:
        idx = self.columns.get(column)
        if idx is None or idx >= len(row):
            return None
        return row[idx]


class ExcelOrderRepository:
    """Loads order history from an Excel workbook. The workbook is never written."""

    def __init__(
        self,
        path: Path | str = None,
        orders_sheet: Optional[str] = None,
        items_sheet: Optional[str] = None,
    ) -> None:
        self.path: Path = Path(path) if path else config.ORDERS_PATH
        self.orders_sheet = orders_sheet or config.ORDERS_SHEET_NAME
        self.items_sheet = items_sheet or config.ITEMS_SHEET_NAME
        self._orders: List[Order] = []
        self._load()

    def _load(self) -> None:
        if not self.path.exists():
            raise FileNotFoundError(f"Excel file not found: {self.path}")

        workbook = load_workbook(self.path, read_only=True, data_only=True)
        try:
            orders = self._read_sheet(workbook, self.orders_sheet, ORDER_COLUMNS)
            items = self._read_sheet(workbook, self.items_sheet, ITEM_COLUMNS)
        finally:
            workbook.close()

        self._orders = self._build_orders(orders, items)
        logger.info("Loaded %d orders from %s", len(self._orders), self.path)

    @staticmethod
    def _read_sheet(workbook, sheet_name: str, required: List[str]) -> SheetRows:
        """Read a sheet's header row and data rows; raises if columns are missing."""
        if sheet_name not in workbook.sheetnames:
            raise ValueError(f"Sheet '{sheet_name}' not found in Excel file.")

        row_iter = workbook[sheet_name].iter_rows(values_only=True)
        header = next(row_iter, ())
        columns: Dict[str, int] = {}
        for idx, value in enumerate(header):
            if value is not None:
                columns[str(value).strip()] = idx

        missing = [col for col in required if col not in columns]
        if missing:
            raise ValueError(f"Missing required columns in '{sheet_name}': {', '.join(missing)}")
        return SheetRows(columns=columns, rows=list(row_iter))

    def _build_orders(self, orders: SheetRows, items: SheetRows) -> List[Order]:
        by_id: Dict[int, Order] = {}
        result: List[Order] = []
        for row in orders.rows:
            order_id = orders.value(row, "Order_ID")
            if order_id in (None, ""):
                continue

            order = Order.from_dict(
                {
                    "order_id": order_id,
                    "invoice_number": self._cell_text(orders.value(row, "Invoice_Number")),
                    "order_date": self._cell_text(orders.value(row, "Order_Date")),
                    "order_time": self._cell_text(orders.value(row, "Order_Time")),
                    "total": orders.value(row, "Total"),
                    "payment_method": orders.value(row, "Payment_Method"),
                    "discount_percentage": orders.value(row, "Discount_Percentage"),
                    "customer": {
                        "customer_name": orders.value(row, "Customer_Name"),
                        "customer_mobile": self._cell_text(orders.value(row, "Customer_Mobile")),
                        "doctor_name": orders.value(row, "Doctor_Name"),
                    },
                }
            )
            if order.order_id in by_id:
                logger.warning("Skipping duplicate row for order %s in '%s'", order.order_id, self.orders_sheet)
                continue
            by_id[order.order_id] = order
            result.append(order)

        for row in items.rows:
            order = by_id.get(self._to_int(items.value(row, "Order_ID")))
            if order is None:
                logger.debug("Skipping item row for unknown order %r", items.value(row, "Order_ID"))
                continue
            order.cart.append(
                LineItem.from_dict(
                    {
                        "name": items.value(row, "Name"),
                        "description": items.value(row, "Description"),
                        "price": items.value(row, "Price"),
                        "quantity": items.value(row, "Quantity"),
                        "cgst": items.value(row, "CGST"),
                        "sgst": items.value(row, "SGST"),
                    }
                )
            )
        return result

    @staticmethod
    def _cell_text(value: Any) -> Optional[str]:
        """Excel hands back dates and times as Python objects; render them as text."""
        if isinstance(value, (datetime, date)):
            return value.strftime("%d-%m-%Y")
        if isinstance(value, time):
            return value.strftime("%H:%M")
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        return value

    @staticmethod
    def _to_int(value, default: int = 0) -> int:
        if value in (None, ""):
            return default
        try:
            number = float(value)
        except (TypeError, ValueError):
            return default
        return int(number) if math.isfinite(number) else default

    def list_orders(self) -> List[Order]:
        """Return all orders in sheet order."""
        return list(self._orders)

    def get_order(self, order_id: int) -> Optional[Order]:
        """Return an order or None if not found."""
        for order in self._orders:
            if order.order_id == order_id:
                return order
        return None
