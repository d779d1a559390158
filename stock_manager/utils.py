import re
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation

from . import settings

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
_LEADING_DECIMAL = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_UNSAFE_FILENAME_CHARS = re.compile(r'[<>:"/\\|?*\x00-\x1f]')

CENT = Decimal("0.01")


def parse_leading_int(text: str) -> int | None:
    """
    Reads the integer at the start of `text`, ignoring anything after it.
    '12abc' -> 12, '5.7' -> 5, 'abc' -> None.
    """
    match = _LEADING_INT.match(text)
    if not match:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        # More digits than the interpreter will convert.
        return None


def parse_leading_decimal(text: str) -> Decimal | None:
    """Same as parse_leading_int, for decimal numbers ('2.5kg' -> Decimal('2.5'))."""
    match = _LEADING_DECIMAL.match(text)
    if not match:
        return None
    try:
        return Decimal(match.group(1))
    except InvalidOperation:
        return None


def round_money(value: Decimal) -> Decimal:
    """Rounds to cents, half-up. Only call this at display time."""
    return Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def format_money(value: Decimal) -> str:
    return f"{settings.CURRENCY_SYMBOL}{round_money(value)}"


def format_timestamp(moment: datetime) -> str:
    return moment.strftime(settings.REPORT_TIMESTAMP_FORMAT)


def sanitize_filename_part(text: str) -> str:
    """Replaces characters that are not allowed in file names with '_'."""
    cleaned = _UNSAFE_FILENAME_CHARS.sub("_", text).strip().rstrip(".")
    return cleaned or "_"
