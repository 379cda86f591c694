from __future__ import annotations

import html
import re
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional


# Shipped inside the package (bizadmin/templates/), see package-data in pyproject.toml
PACKAGE_ROOT = Path(__file__).resolve().parents[1]
TEMPLATE_PATH = PACKAGE_ROOT / "templates" / "quotation_document.html"

RE_PLACEHOLDER = re.compile(r"\[\[([a-zA-Z0-9_]+)\]\]")


def _format_money(value: Any, currency: Optional[str] = None) -> str:
    """
    1234.5 -> '1,234.50', with the currency appended when known:
    1234.5, "USD" -> '1,234.50 USD'.
    Values that are not numbers are returned as text.
    """
    if value is None or value == "":
        return ""
    try:
        num = float(value)
    except (TypeError, ValueError):
        return str(value)

    s = f"{num:,.2f}"
    return f"{s} {currency}" if currency else s


def _e(value: Any) -> str:
    return html.escape("" if value is None else str(value))


def build_rows_html(items: Iterable[Any], currency: Optional[str] = None) -> str:
    """
    Build the <tbody> rows from quotation items.
    Every item is expected to carry description, quantity and price;
    missing numbers count as 0 and the line total is quantity * price.
    """
    rows: List[str] = []
    for index, item in enumerate(items or [], start=1):
        if not isinstance(item, dict):
            continue

        try:
            quantity = float(item.get("quantity") or 0)
        except (TypeError, ValueError):
            quantity = 0.0
        try:
            price = float(item.get("price") or 0)
        except (TypeError, ValueError):
            price = 0.0

        quantity_str = f"{quantity:g}"

        rows.append(
            "<tr>"
            f'<td class="col-no">{index}</td>'
            f'<td class="col-description">{_e(item.get("description"))}</td>'
            f'<td class="col-qty">{quantity_str}</td>'
            f'<td class="col-price">{_e(_format_money(price, currency))}</td>'
            f'<td class="col-total">{_e(_format_money(quantity * price, currency))}</td>'
            "</tr>"
        )

    return "\n          ".join(rows)


def build_context_from_quotation(
    quotation: Dict[str, Any],
    company: Dict[str, Any],
    *,
    document_title: str = "Quotation",
) -> Dict[str, str]:
    """
    Collect every value the template uses.

    The quotation is a stored record (camelCase keys). Records edited by hand
    in db.json may lack fields, so everything falls back to an empty string.
    """
    q = quotation or {}
    c = company or {}
    currency = q.get("currency") or ""

    return {
        "document_title": _e(document_title),
        "quotation_id": _e(q.get("id")),
        "quotation_version": _e(q.get("version")),
        "quotation_status": _e(q.get("status")),
        "document_date": _e(q.get("dateCreated")),
        "client_name": _e(q.get("clientName")),
        "company_name": _e(c.get("name")),
        "company_address": _e(c.get("address")),
        "company_email": _e(c.get("email")),
        "company_phone": _e(c.get("phone")),
        "rows_html": build_rows_html(q.get("items") or [], currency),
        "total_value": _e(_format_money(q.get("totalValue"), currency)),
        "grand_total": _e(_format_money(q.get("totalValue"), currency)),
    }


def render_quotation_html(context: Dict[str, Any], template_path: Path = TEMPLATE_PATH) -> str:
    """
    Read the HTML template and replace every [[key]] with its context value.
    Placeholders without a value are removed. Substitution is a single pass,
    so text inside a value is never treated as a placeholder.
    """
    doc = template_path.read_text(encoding="utf-8")

    def _sub(m: "re.Match[str]") -> str:
        return str(context.get(m.group(1), ""))

    return RE_PLACEHOLDER.sub(_sub, doc)
