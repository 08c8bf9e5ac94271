"""HTML layout of an order history receipt."""

from __future__ import annotations

from html import escape
from typing import Any, List, Optional

from pos_receipt import config
from pos_receipt.billing.calculator import ReceiptSummary, summarize_order, to_money
from pos_receipt.models.order import Order

PLACEHOLDER = "N/A"


def format_currency(amount: float, symbol: Optional[str] = None) -> str:
    """Return amount with the currency symbol, to two decimals."""
    symbol = config.CURRENCY_SYMBOL if symbol is None else symbol
    return f"{symbol}{to_money(amount)}"


def _format_percentage(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def _info_row(label: str, value: Any) -> str:
    return f"<tr><td>{escape(label)}</td><td align='right'>{escape(str(value))}</td></tr>"


def _total_row(label: str, value: str, bold: bool = False) -> str:
    if bold:
        return f"<tr class='grand'><td><b>{escape(label)}</b></td><td align='right'><b>{escape(value)}</b></td></tr>"
    return f"<tr><td>{escape(label)}</td><td align='right'>{escape(value)}</td></tr>"


def _order_info_rows(order: Order) -> List[str]:
    if order.order_date and order.order_time:
        placed_at = f"{order.order_date} {order.order_time}"
    else:
        placed_at = PLACEHOLDER

    rows = [
        _info_row("Invoice #:", order.invoice_number or PLACEHOLDER),
        _info_row("Order #:", order.order_id or PLACEHOLDER),
        _info_row("Date:", placed_at),
    ]
    customer = order.customer
    if customer:
        if customer.customer_name:
            rows.append(_info_row("Customer:", customer.customer_name))
        if customer.customer_mobile:
            rows.append(_info_row("Phone:", customer.customer_mobile))
        if customer.doctor_name:
            rows.append(_info_row("Doctor:", customer.doctor_name))
    return rows


def _item_rows(order: Order) -> List[str]:
    rows: List[str] = []
    for item in order.cart:
        rows.append(
            f"<tr><td>{escape(item.name or PLACEHOLDER)}"
            f"<br/><span class='desc'>{escape(item.description)}</span></td>"
            f"<td align='right'>{item.quantity}</td>"
            f"<td align='right'>{escape(format_currency(item.line_total))}</td></tr>"
        )
    return rows


def _total_rows(order: Order, summary: ReceiptSummary) -> List[str]:
    figures = summary.rounded()
    rows = [_total_row("Total Amount:", format_currency(figures["total_amount"]))]
    if order.discount_percentage > 0:
        rows.append(
            _total_row(
                f"Discount ({_format_percentage(order.discount_percentage)}%):",
                f"-{format_currency(figures['discount_amount'])}",
            )
        )
    rows.extend(
        [
            _total_row("Taxable Value:", format_currency(figures["taxable_value"])),
            _total_row(f"CGST @ {figures['cgst_rate']}%:", format_currency(figures["cgst_amount"])),
            _total_row(f"SGST @ {figures['sgst_rate']}%:", format_currency(figures["sgst_amount"])),
            _total_row("Total Tax:", format_currency(figures["total_tax"])),
            _total_row("Total Amount Payable:", format_currency(figures["final_amount"]), bold=True),
        ]
    )
    if order.payment_method:
        rows.append(_total_row("Payment Method:", order.payment_method))
    return rows


def render_receipt_html(order: Any, summary: Optional[ReceiptSummary] = None) -> Optional[str]:
    """Build the printable receipt for an order; None when there is no order."""
    order = Order.coerce(order)
    if order is None:
        return None
    if summary is None:
        summary = summarize_order(order)

    footer = "".join(f"<p>{escape(line)}</p>" for line in config.FOOTER_LINES)

    return f"""
    <html>
    <head>
        <meta charset='utf-8' />
        <style>
            body {{ font-family: monospace; font-size: 10pt; color: black; }}
            h2 {{ text-align: center; margin: 0 0 4px 0; }}
            .header p {{ text-align: center; font-size: 8pt; margin: 2px 0; }}
            table {{ width: 100%; border-collapse: collapse; }}
            td, th {{ padding: 1px 0; }}
            .desc {{ color: #6b7280; font-size: 8pt; }}
            .grand td {{ border-top: 1px solid #e5e7eb; padding-top: 4px; }}
            .footer p {{ text-align: center; font-size: 8pt; margin: 2px 0; }}
        </style>
    </head>
    <body>
        <div class='header'>
            <h2>{escape(config.STORE_NAME)}</h2>
            <p>{escape(config.STORE_ADDRESS)}</p>
            <p>{escape(config.STORE_CONTACT)}</p>
        </div>
        <table class='info'>
            {''.join(_order_info_rows(order))}
        </table>
        <hr />
        <table class='items'>
            <tr><th align='left'>Item</th><th align='right'>Qty</th><th align='right'>Amount</th></tr>
            {''.join(_item_rows(order))}
        </table>
        <hr />
        <table class='totals'>
            {''.join(_total_rows(order, summary))}
        </table>
        <div class='footer'>{footer}</div>
    </body>
    </html>
    """
