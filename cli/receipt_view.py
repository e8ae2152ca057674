"""Receipt display, saving and printing for the CLI"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional
from rich.panel import Panel
from rich.text import Text

import settings
from utils.formatting import format_currency, truncate

logger = logging.getLogger(__name__)

# Characters per line for 58 mm and 80 mm thermal paper
WIDTH_58MM = 32
WIDTH_80MM = 48


def receipt_width(printer_width_mm: int) -> int:
    return WIDTH_58MM if printer_width_mm == 58 else WIDTH_80MM


def _pad_right(label: str, value: str, width: int) -> str:
    return f"{label}{value.rjust(max(width - len(label), 1))}"


def _columns(item: str, qty: str, amount: str, width: int) -> str:
    item_width = width - 17
    return f"{item.ljust(item_width)}{qty.rjust(5)}{amount.rjust(12)}"


def _centered(text: str, width: int) -> str:
    return text[:width].center(width).rstrip()


def _amount(value: Any) -> float:
    # Postgres numerics arrive as strings like "1500.00"
    try:
        return float(value or 0)
    except (TypeError, ValueError):
        return 0.0


def render_receipt(data: Dict[str, Any], width: int = WIDTH_80MM) -> str:
    """Lay out the backend's json receipt as monospaced text

    ``data`` has the sections header, receipt, vehicle, customer, services,
    totals, payments and footer; the receipt date arrives preformatted.
    """
    separator = "-" * width
    double_line = "=" * width
    lines: List[str] = []

    header = data.get("header") or {}
    if header.get("companyName"):
        lines.append(_centered(str(header["companyName"]).upper(), width))
    if header.get("address"):
        lines.append(_centered(str(header["address"]), width))
    if header.get("phone"):
        lines.append(_centered(f"Tel: {header['phone']}", width))
    if header.get("pin"):
        lines.append(_centered(f"PIN: {header['pin']}", width))
    if lines:
        lines.append(separator)

    receipt = data.get("receipt") or {}
    lines.append(f"Receipt No: {receipt.get('number') or '-'}")
    lines.append(f"Date: {receipt.get('date') or '-'}")
    lines.append(separator)

    vehicle = data.get("vehicle") or {}
    lines.append(f"Vehicle: {vehicle.get('registration') or '-'}")
    if vehicle.get("type"):
        lines.append(f"Type: {str(vehicle['type']).upper()}")

    customer = data.get("customer")
    if customer:
        lines.append(f"Customer: {customer.get('name') or '-'}")
        if customer.get("phone"):
            lines.append(f"Phone: {customer['phone']}")
    lines.append(separator)

    lines.append(_columns("ITEM", "QTY", "AMOUNT", width))
    lines.append(separator)
    for service in data.get("services") or []:
        name = truncate(str(service.get("name", "")), width - 20)
        amount = format_currency(_amount(service.get("total"))).replace("KES ", "")
        lines.append(_columns(name, str(service.get("quantity", 1)), amount, width))
    lines.append(separator)

    totals = data.get("totals") or {}
    lines.append(_pad_right("Subtotal:", format_currency(_amount(totals.get("subtotal"))), width))
    discount = _amount(totals.get("discount"))
    if discount > 0:
        lines.append(_pad_right("Discount:", f"-{format_currency(discount)}", width))
    tax = _amount(totals.get("tax"))
    if tax > 0:
        lines.append(_pad_right("VAT (16%):", format_currency(tax), width))
    lines.append(double_line)
    lines.append(_pad_right("TOTAL:", format_currency(_amount(totals.get("total"))), width))
    lines.append(double_line)

    payments = data.get("payments") or []
    if payments:
        lines.append("PAYMENT DETAILS:")
        for payment in payments:
            line = f"{str(payment.get('method', '')).upper()}: {format_currency(_amount(payment.get('amount')))}"
            if payment.get("reference"):
                line += f" ({payment['reference']})"
            lines.append(line)
        lines.append(separator)

    footer = data.get("footer") or {}
    if footer.get("cashier"):
        lines.append(f"Served by: {footer['cashier']}")
    if footer.get("branch"):
        lines.append(f"Branch: {footer['branch']}")
    lines.append(_centered(footer.get("message") or "Thank you for your business!", width))
    return "\n".join(lines)


def show_receipt(
    cli,
    job_id: str,
    receipt_format: str = "text",
    output: Optional[str] = None,
    send_to_printer: bool = False,
) -> bool:
    """Fetch a job's receipt and display it, save it, and/or print it"""
    envelope = cli.run(cli.api.receipts.generate(job_id, receipt_format))
    content = envelope.get("data")

    if receipt_format == "json" and isinstance(content, dict):
        body = render_receipt(content, receipt_width(settings.RECEIPT_PRINTER_WIDTH))
        saved = json.dumps(content, indent=2)
    else:
        body = saved = content if isinstance(content, str) else json.dumps(content, indent=2)

    if receipt_format == "html" and not output:
        output = f"receipt-{job_id}.html"

    if output:
        path = Path(output)
        path.write_text(saved, encoding="utf-8")
        logger.debug(f"Saved receipt for job {job_id} to {path}")
        cli.console.print(f"[green]✓ Receipt saved to {path.resolve()}[/green]")
    else:
        cli.console.print(Panel(Text(body), title=f"Receipt · {job_id}", expand=False))

    if send_to_printer:
        cli.run(cli.api.receipts.print(job_id))
        cli.console.print("[green]✓ Receipt sent to printer[/green]")
    return True
