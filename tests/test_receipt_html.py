"""
Tests for the receipt layout built from an order and its totals.
"""
import pytest

from pos_receipt import config
from pos_receipt.billing.calculator import summarize_order
from pos_receipt.printing.receipt_html import format_currency, render_receipt_html


@pytest.fixture
def order():
    return {
        "order_id": 42,
        "invoice_number": "INV-2024-0042",
        "order_date": "12-03-2024",
        "order_time": "10:15",
        "total": 180,
        "paymentMethod": "UPI",
        "discount_percentage": 10,
        "customerDetails": {
            "customerName": "Ravi Kumar",
            "customerMobile": "9000000001",
            "doctorName": "Dr. Rao",
        },
        "cart": [
            {
                "name": "Azithromycin 500",
                "description": "Strip of 3",
                "price": 100,
                "quantity": 2,
                "cgst": 9,
                "sgst": 9,
            },
        ],
    }


def test_format_currency_uses_symbol_and_two_decimals():
    assert format_currency(12.5) == f"{config.CURRENCY_SYMBOL}12.50"
    assert format_currency(3, symbol="Rs.") == "Rs.3.00"


def test_absent_order_renders_nothing():
    assert render_receipt_html(None) is None


def test_receipt_contains_header_and_footer(order):
    html = render_receipt_html(order)
    assert config.STORE_NAME in html
    assert config.STORE_CONTACT in html
    for line in config.FOOTER_LINES:
        assert line in html


def test_receipt_shows_order_details(order):
    html = render_receipt_html(order)
    assert "INV-2024-0042" in html
    assert "12-03-2024 10:15" in html
    assert "Ravi Kumar" in html
    assert "9000000001" in html
    assert "Dr. Rao" in html
    assert "Payment Method:" in html
    assert "UPI" in html


def test_receipt_totals_block(order):
    html = render_receipt_html(order)
    assert "Azithromycin 500" in html
    assert "Strip of 3" in html
    assert f"Total Amount:</td><td align='right'>{config.CURRENCY_SYMBOL}200.00" in html
    assert f"Discount (10%):</td><td align='right'>-{config.CURRENCY_SYMBOL}20.00" in html
    assert f"Taxable Value:</td><td align='right'>{config.CURRENCY_SYMBOL}144.00" in html
    assert f"CGST @ 9%:</td><td align='right'>{config.CURRENCY_SYMBOL}18.00" in html
    assert f"SGST @ 9%:</td><td align='right'>{config.CURRENCY_SYMBOL}18.00" in html
    assert f"Total Tax:</td><td align='right'>{config.CURRENCY_SYMBOL}36.00" in html
    assert f"{config.CURRENCY_SYMBOL}180.00" in html


def test_zero_discount_hides_discount_row(order):
    order["discount_percentage"] = 0
    html = render_receipt_html(order)
    assert "Discount (" not in html


def test_negative_discount_hides_discount_row(order):
    order["discount_percentage"] = -5
    html = render_receipt_html(order)
    assert "Discount (" not in html
    assert f"Total Amount Payable:</b></td><td align='right'><b>{config.CURRENCY_SYMBOL}210.00" in html


def test_half_cent_ties_round_up():
    html = render_receipt_html({"discount_percentage": 12.5, "cart": [{"price": 0.375, "quantity": 3}]})
    assert f"Total Amount:</td><td align='right'>{config.CURRENCY_SYMBOL}1.13" in html
    assert format_currency(1.125) == f"{config.CURRENCY_SYMBOL}1.13"
    assert format_currency(0.125) == f"{config.CURRENCY_SYMBOL}0.13"


def test_missing_identifiers_use_placeholder():
    html = render_receipt_html({"order_date": "12-03-2024", "cart": [{"price": 5, "quantity": 1}]})
    assert "Invoice #:</td><td align='right'>N/A" in html
    assert "Order #:</td><td align='right'>N/A" in html
    assert "Date:</td><td align='right'>N/A" in html
    assert "<td>N/A<br/>" in html
    assert "Customer:" not in html
    assert "Payment Method:" not in html


def test_rate_range_in_labels():
    cart = [
        {"name": "A", "price": 10, "quantity": 1, "cgst": 2.5, "sgst": 2.5},
        {"name": "B", "price": 10, "quantity": 1, "cgst": 6, "sgst": 6},
        {"name": "C", "price": 10, "quantity": 1, "cgst": 9, "sgst": 9},
    ]
    html = render_receipt_html({"order_id": 1, "cart": cart})
    assert "CGST @ 2.5-9%" in html
    assert "SGST @ 2.5-9%" in html


def test_item_text_is_escaped():
    html = render_receipt_html({"order_id": 1, "cart": [{"name": "<b>Syrup</b>", "price": 1, "quantity": 1}]})
    assert "&lt;b&gt;Syrup&lt;/b&gt;" in html
    assert "<b>Syrup</b>" not in html


def test_precomputed_summary_is_used(order):
    summary = summarize_order(order)
    assert render_receipt_html(order, summary) == render_receipt_html(order)
