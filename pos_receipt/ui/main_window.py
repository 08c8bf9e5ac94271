"""Main PyQt window for browsing and reprinting order receipts."""

from __future__ import annotations

import logging
from typing import List, Optional

from PyQt5.QtCore import Qt
from PyQt5.QtWidgets import (
    QAbstractItemView,
    QHBoxLayout,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QTableWidget,
    QTableWidgetItem,
    QTextBrowser,
    QVBoxLayout,
    QWidget,
)

from pos_receipt.billing.calculator import summarize_order
from pos_receipt.data.excel_repo import ExcelOrderRepository
from pos_receipt.models.order import Order
from pos_receipt.printing.receipt_html import PLACEHOLDER, format_currency, render_receipt_html
from pos_receipt.printing.receipt_printer import ReceiptPrinter

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """UI controller that ties together order history, preview, and printing."""

    def __init__(self) -> None:
        super().__init__()
        self.setWindowTitle("Order History Receipts")
        self.setMinimumSize(900, 600)

        self.repo: Optional[ExcelOrderRepository] = None
        self.orders: List[Order] = []
        self.selected_order: Optional[Order] = None

        self._build_ui()
        self._load_orders()

    def _build_ui(self) -> None:
        """Construct all widgets and layouts."""
        central = QWidget()
        root_layout = QVBoxLayout()
        content_layout = QHBoxLayout()

        self.table = QTableWidget(0, 4)
        self.table.setHorizontalHeaderLabels(["Invoice #", "Order #", "Date", "Payable"])
        self.table.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.table.setSelectionBehavior(QAbstractItemView.SelectRows)
        self.table.setSelectionMode(QAbstractItemView.SingleSelection)
        self.table.horizontalHeader().setStretchLastSection(True)
        self.table.itemSelectionChanged.connect(self._on_selection_changed)

        # Receipt preview
        self.preview = QTextBrowser()
        self.preview.setMinimumWidth(360)

        content_layout.addWidget(self.table, 3)
        content_layout.addWidget(self.preview, 2)

        buttons_layout = QHBoxLayout()
        self.reload_button = QPushButton("Reload")
        self.reload_button.clicked.connect(self._load_orders)
        self.print_button = QPushButton("PRINT")
        self.print_button.setStyleSheet("font-size: 16px; padding: 10px;")
        self.print_button.clicked.connect(self._on_print_clicked)
        buttons_layout.addWidget(self.reload_button)
        buttons_layout.addStretch()
        buttons_layout.addWidget(self.print_button, alignment=Qt.AlignRight)

        root_layout.addLayout(content_layout, 1)
        root_layout.addLayout(buttons_layout)
        central.setLayout(root_layout)
        self.setCentralWidget(central)

    def _load_orders(self) -> None:
        """Load orders from Excel and fill the history table."""
        self.repo = None
        try:
            self.repo = ExcelOrderRepository()
            self.orders = self.repo.list_orders()
            self.print_button.setEnabled(True)
        except (OSError, ValueError) as exc:
            logger.exception("Failed to load order history")
            QMessageBox.critical(self, "Error", f"Failed to load order history:\n{exc}")
            self.orders = []
            self.print_button.setEnabled(False)

        self._refresh_table()
        self._clear_selection()

    def _refresh_table(self) -> None:
        self.table.setRowCount(len(self.orders))
        for row, order in enumerate(self.orders):
            summary = summarize_order(order)
            values = [
                order.invoice_number or PLACEHOLDER,
                str(order.order_id or PLACEHOLDER),
                order.order_date or PLACEHOLDER,
                format_currency(summary.grand_total),
            ]
            for col, value in enumerate(values):
                self.table.setItem(row, col, QTableWidgetItem(value))
        self.table.resizeColumnsToContents()

    def _clear_selection(self) -> None:
        self.selected_order = None
        self.preview.clear()

    def _on_selection_changed(self) -> None:
        rows = self.table.selectionModel().selectedRows()
        if not rows:
            self._clear_selection()
            return
        self.selected_order = self.orders[rows[0].row()]
        self.preview.setHtml(render_receipt_html(self.selected_order) or "")

    def _on_print_clicked(self) -> None:
        if not self.selected_order:
            QMessageBox.information(self, "Nothing to print", "Select an order to print its receipt.")
            return

        printer = ReceiptPrinter()
        if not printer.print_order(self.selected_order):
            QMessageBox.critical(self, "Print Failed", "Printer is not available or failed to print.")
            return

        QMessageBox.information(self, "Printed", "Receipt sent to printer.")
