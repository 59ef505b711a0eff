"""Customer-facing invoice summary text (sent over WhatsApp by the front end)."""

import math
from urllib.parse import quote

from goldbook.core.entities import Invoice, ProductCategory, SaleType
from goldbook.core.exceptions import InvalidPhoneError

STORE_NAME = "الفادي للمجوهرات"
PHONE_LENGTH = 11
SEPARATOR = "--------------------"


def _round_half_up(amount: float) -> int:
    return math.floor(amount + 0.5)


def format_currency(amount: float) -> str:
    """Whole Egyptian pounds with thousands separators."""
    return f"{_round_half_up(amount):,} ج.م"


def validate_customer_phone(phone: str | None) -> str:
    """Return the trimmed phone, or raise if it is not an 11-digit local number."""
    cleaned = (phone or "").strip()
    if len(cleaned) != PHONE_LENGTH or not cleaned.isdigit():
        raise InvalidPhoneError(cleaned)
    return cleaned


def _balance_line(remaining_balance: float) -> str:
    rounded = _round_half_up(remaining_balance)
    if rounded > 0:
        return f"*المبلغ المتبقي: {format_currency(rounded)}*"
    if rounded < 0:
        return f"*المبلغ المستحق لكم: {format_currency(abs(rounded))}*"
    return f"*الرصيد: {format_currency(0)}*"


def build_invoice_message(invoice: Invoice, store_name: str = STORE_NAME) -> str:
    """Render the invoice summary: one line per item, then weight, net, paid and balance."""
    item_lines = []
    for item in invoice.items:
        kind = "بيع" if item.sale_type == SaleType.SELL else "شراء"
        metal = (
            f"ذهب {int(item.karat)}"
            if item.category == ProductCategory.GOLD and item.karat is not None
            else "فضة"
        )
        desc = f" ({item.description})" if item.description else ""
        item_lines.append(
            f"- *{kind}*: {metal}{desc} - وزن: {item.weight:.2f} جم"
            f" - إجمالي: {format_currency(item.total)}"
        )

    lines = [
        f"*فاتورة من {store_name}*",
        SEPARATOR,
        "*تفاصيل الفاتورة:*",
        *item_lines,
        SEPARATOR,
        "*ملخص:*",
        f"- إجمالي وزن القطع: {invoice.total_weight:.2f} جرام",
        f"- صافي الفاتورة: {format_currency(invoice.net_total)}",
        f"- المبلغ المدفوع: {format_currency(invoice.amount_paid)}",
        _balance_line(invoice.remaining_balance),
        SEPARATOR,
        "شكراً لك!",
    ]
    return "\n".join(lines)


def build_whatsapp_link(invoice: Invoice, store_name: str = STORE_NAME) -> str:
    """wa.me link carrying the message, for the customer's validated phone."""
    phone = validate_customer_phone(invoice.customer.phone)
    message = build_invoice_message(invoice, store_name)
    return f"https://wa.me/2{phone}?text={quote(message)}"
