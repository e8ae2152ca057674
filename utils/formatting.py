"""Display formatting and input checks shared by the CLI and the resources"""

import datetime
import re
from typing import Any, Dict, Mapping, Optional, Union

CURRENCY = "KES"

_KENYAN_PHONE_PATTERNS = (
    re.compile(r"^254[17]\d{8}$"),  # International format
    re.compile(r"^0[17]\d{8}$"),    # Local format with leading 0
    re.compile(r"^[17]\d{8}$"),     # Without leading 0 or country code
)
_EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_VEHICLE_REG_PATTERN = re.compile(r"^K[A-Z]{2}\d{3}[A-Z]?$")

DateInput = Union[str, datetime.datetime, datetime.date, None]


def format_currency(amount: Optional[float]) -> str:
    """Format an amount in Kenyan Shillings with no decimals, e.g. 'KES 1,500'"""
    value = round(float(amount or 0))
    sign = "-" if value < 0 else ""
    return f"{sign}{CURRENCY} {abs(value):,}"


def format_number(value: float) -> str:
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.2f}"


def _digits(value: str) -> str:
    return re.sub(r"\D", "", value or "")


def format_phone_number(phone: str) -> str:
    """Format a Kenyan phone number for display as '+254 712 345678'"""
    cleaned = _digits(phone)

    if cleaned.startswith("254"):
        return f"+{cleaned[:3]} {cleaned[3:6]} {cleaned[6:]}"
    if cleaned.startswith("0"):
        return f"+254 {cleaned[1:4]} {cleaned[4:]}"
    if cleaned.startswith(("7", "1")):
        return f"+254 {cleaned[:3]} {cleaned[3:]}"
    return phone


def normalize_phone_number(phone: str) -> str:
    """Normalize a Kenyan phone number to the 2547XXXXXXXX form used by M-Pesa"""
    cleaned = _digits(phone)

    if cleaned.startswith("254"):
        return cleaned
    if cleaned.startswith("0"):
        return f"254{cleaned[1:]}"
    if cleaned.startswith(("7", "1")):
        return f"254{cleaned}"
    return cleaned


def is_valid_kenyan_phone(phone: str) -> bool:
    cleaned = _digits(phone)
    return any(pattern.match(cleaned) for pattern in _KENYAN_PHONE_PATTERNS)


def is_valid_email(email: str) -> bool:
    return bool(_EMAIL_PATTERN.match(email or ""))


def is_valid_vehicle_reg(reg: str) -> bool:
    """Kenyan registration plates: KAA 123A, KAA123A, KBZ 456"""
    cleaned = re.sub(r"\s", "", reg or "").upper()
    return bool(_VEHICLE_REG_PATTERN.match(cleaned))


def format_vehicle_reg(reg: str) -> str:
    cleaned = re.sub(r"\s", "", reg or "").upper()
    if len(cleaned) >= 6:
        return f"{cleaned[:3]} {cleaned[3:]}"
    return cleaned


def _parse_date(value: DateInput) -> Optional[datetime.datetime]:
    if isinstance(value, datetime.datetime):
        return value
    if isinstance(value, datetime.date):
        return datetime.datetime(value.year, value.month, value.day)
    if not isinstance(value, str) or not value:
        return None

    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.datetime.fromisoformat(text)
    except ValueError:
        return None


def format_date(value: DateInput, include_time: bool = False) -> str:
    """Format an ISO date string or datetime as 'Mar 5, 2025' (optionally with time)"""
    parsed = _parse_date(value)
    if parsed is None:
        return "Invalid date"
    text = f"{parsed:%b} {parsed.day}, {parsed.year}"
    if include_time:
        text += f" {format_time(parsed)}"
    return text


def format_datetime(value: DateInput) -> str:
    return format_date(value, include_time=True)


def format_time(value: DateInput) -> str:
    parsed = _parse_date(value)
    if parsed is None:
        return "Invalid time"
    hour = parsed.hour % 12 or 12
    return f"{hour}:{parsed:%M} {'AM' if parsed.hour < 12 else 'PM'}"


def format_duration(minutes: int) -> str:
    """Format a duration in minutes as '45 min', '2 hr' or '1 hr 30 min'"""
    if minutes < 60:
        return f"{minutes} min"

    hours, remaining = divmod(minutes, 60)
    if remaining == 0:
        return f"{hours} hr"
    return f"{hours} hr {remaining} min"


def calculate_percentage(value: float, total: float) -> int:
    if total == 0:
        return 0
    return round(value / total * 100)


def format_percentage(value: float, decimals: int = 1) -> str:
    return f"{value:.{decimals}f}%"


def truncate(text: str, length: int) -> str:
    if len(text) <= length:
        return text
    return text[:length] + "..."


def snake_to_title(text: str) -> str:
    return " ".join(word.capitalize() for word in text.split("_"))


def get_initials(name: str) -> str:
    return "".join(word[0] for word in name.split() if word).upper()[:2]


def clean_params(params: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Drop query parameters whose value is None or an empty string

    Booleans are sent as 'true'/'false' like the web frontend does.
    """
    cleaned: Dict[str, Any] = {}
    for key, value in (params or {}).items():
        if value is None or value == "":
            continue
        if isinstance(value, bool):
            value = "true" if value else "false"
        cleaned[key] = value
    return cleaned
