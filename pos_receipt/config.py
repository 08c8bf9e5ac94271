"""Configuration constants for the order history receipt app."""

from pathlib import Path
from typing import Tuple

# Workbook exported from the billing counter with past orders.
ORDERS_PATH: Path = Path("data/orders.xlsx")

# Sheet names inside the orders workbook.
ORDERS_SHEET_NAME: str = "Orders"
ITEMS_SHEET_NAME: str = "Order_Items"

# Name of the Windows printer to target for receipts.
PRINTER_NAME: str = "Star TSP700II (TSP743II)"

# Receipt paper width in millimeters for 80mm thermal rolls.
RECEIPT_WIDTH_MM: float = 80.0

# Header block printed on top of every receipt.
STORE_NAME: str = "Avanthi"
STORE_ADDRESS: str = (
    "Avanthi Institute of Engineering and Technology, Narsipatnam Road, "
    "Makavarapalem, Andhra Pradesh 531113"
)
STORE_CONTACT: str = "Contact No: 9876543210, 9123456780"

CURRENCY_SYMBOL: str = "₹"

FOOTER_LINES: Tuple[str, ...] = (
    "Thank you for shopping with us!",
    "Please visit again",
    "* This is a computer generated receipt",
    "* Price includes GST",
)

LOG_LEVEL: str = "INFO"
