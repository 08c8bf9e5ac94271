"""Receipt printing via QTextDocument to a Windows printer."""

from __future__ import annotations

import logging
from typing import Any

from PyQt5.QtCore import QSizeF
from PyQt5.QtGui import QTextDocument
from PyQt5.QtPrintSupport import QPrinter

from pos_receipt import config
from pos_receipt.models.order import Order
from pos_receipt.printing.receipt_html import render_receipt_html

logger = logging.getLogger(__name__)


class ReceiptPrinter:
    """Render and print order receipts as HTML to a target printer."""

    def __init__(self, printer_name: str | None = None, receipt_width_mm: float | None = None) -> None:
        self.printer_name = printer_name or config.PRINTER_NAME
        self.receipt_width_mm = receipt_width_mm or config.RECEIPT_WIDTH_MM

    @staticmethod
    def page_height_mm(line_count: int) -> float:
        # Header, totals and footer take ~110mm; each cart line ~10mm with its description.
        return 110.0 + line_count * 10.0

    def print_order(self, order: Any) -> bool:
        """Send the order's receipt to the printer; returns True on success."""
        order = Order.coerce(order)
        html = render_receipt_html(order)
        if html is None:
            return False

        printer = QPrinter(QPrinter.HighResolution)
        printer.setPrinterName(self.printer_name)
        if not printer.isValid():
            logger.warning("Printer %r is not available", self.printer_name)
            return False

        height_mm = self.page_height_mm(len(order.cart))
        printer.setPaperSize(QSizeF(self.receipt_width_mm, height_mm), QPrinter.Millimeter)
        printer.setFullPage(True)

        doc = QTextDocument()
        doc.setHtml(html)
        doc.setPageSize(QSizeF(self.receipt_width_mm, height_mm))

        doc.print_(printer)
        logger.info("Printed receipt for invoice %s on %s", order.invoice_number or order.order_id, self.printer_name)
        return printer.isValid()
