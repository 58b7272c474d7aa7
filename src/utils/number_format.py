"""Parsing and formatting of human-written numbers.

Understands the notations commonly found in scraped pages: thousands
separators (``1,000.12``), percentages (``-76%``), byte sizes (``3.467TB``),
abbreviations (``1.2k``), durations (``2:23:57``) and currency symbols.
Format patterns follow the numeral.js style: ``"$0,0.00"``, ``"0.0b"``,
``"0%"``, ``"0.0a"``, ``"00:00:00"``.
"""

from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

DECIMAL_BYTE_UNITS = ["B", "KB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB"]
BINARY_BYTE_UNITS = ["B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB", "ZiB", "YiB"]
ABBREVIATIONS = [("t", Decimal(10) ** 12), ("b", Decimal(10) ** 9), ("m", Decimal(10) ** 6), ("k", Decimal(10) ** 3)]

_HAS_DIGIT = re.compile(r"\d")
_NON_NUMERIC = re.compile(r"[^0-9.]")
_BYTES = re.compile(r"(?<=[\d\s])([KMGTPEZY])?(i)?B\b")
_ABBREVIATION = re.compile(r"(?<=[\d\s])([kmbt])\b")
_CURRENCY_SYMBOLS = "$€£¥₹"


def unformat(text: str) -> float | None:
    """Parse a formatted number.

    Args:
        text: Raw text such as ``"10,000.12"`` or ``"'-76%"``

    Returns:
        The numeric value, or None when the text holds no number
    """
    text = text.strip()
    if not text:
        return None

    try:
        plain = float(text)
    except ValueError:
        pass
    else:
        return plain if math.isfinite(plain) else None

    if not _HAS_DIGIT.search(text):
        return None
    if ":" in text:
        return _time_to_seconds(text)

    multiplier = Decimal(1)
    if "%" in text:
        multiplier = Decimal("0.01")
    elif byte_unit := _BYTES.search(text):
        power, binary = byte_unit.group(1), byte_unit.group(2)
        units = BINARY_BYTE_UNITS if binary else DECIMAL_BYTE_UNITS
        base = Decimal(1024) if binary else Decimal(1000)
        suffix = f"{power or ''}{'i' if binary else ''}B"
        multiplier = base ** units.index(suffix)
    elif abbreviation := _ABBREVIATION.search(text):
        multiplier = dict(ABBREVIATIONS)[abbreviation.group(1)]

    negative = (text.count("-") + min(text.count("("), text.count(")"))) % 2 == 1
    digits = _NON_NUMERIC.sub("", text)
    try:
        number = Decimal(digits) * multiplier
    except InvalidOperation:
        return None
    return float(-number if negative else number)


def _time_to_seconds(text: str) -> float | None:
    parts = text.strip().split(":")
    try:
        numbers = [float(part) for part in parts]
    except ValueError:
        return None
    if len(numbers) == 3:
        hours, minutes, seconds = numbers
    elif len(numbers) == 2:
        hours, (minutes, seconds) = 0.0, numbers
    else:
        return None
    return hours * 3600 + minutes * 60 + seconds


def format_number(value: float, pattern: str) -> str:
    """Render a number with a numeral-style pattern.

    Args:
        value: Number to render
        pattern: Pattern such as ``"$0,0.00"`` or ``"0.0b"``

    Returns:
        Formatted string
    """
    if ":" in pattern:
        return _format_time(value)

    number = Decimal(str(value))
    prefix, suffix = "", ""

    currency = next((symbol for symbol in _CURRENCY_SYMBOLS if symbol in pattern), None)
    if currency:
        if pattern.lstrip("+-(").startswith(currency):
            prefix = currency
        else:
            suffix = (" " if f" {currency}" in pattern else "") + currency
        pattern = pattern.replace(f" {currency}", "").replace(currency, "")

    if "%" in pattern:
        number *= 100
        suffix = (" " if " %" in pattern else "") + "%" + suffix
        pattern = pattern.replace(" %", "").replace("%", "")
    elif "b" in pattern:
        binary = "ib" in pattern
        units = BINARY_BYTE_UNITS if binary else DECIMAL_BYTE_UNITS
        base = Decimal(1024) if binary else Decimal(1000)
        power = 0
        while abs(number) >= base and power < len(units) - 1:
            number /= base
            power += 1
        suffix = (" " if " b" in pattern or " ib" in pattern else "") + units[power] + suffix
        pattern = re.sub(r"\s?i?b", "", pattern)
    elif "a" in pattern:
        spaced = " a" in pattern
        for letter, threshold in ABBREVIATIONS:
            if abs(number) >= threshold:
                number /= threshold
                suffix = (" " if spaced else "") + letter + suffix
                break
        pattern = re.sub(r"\s?a", "", pattern)

    negative = number < 0
    body = _format_decimal(abs(number), pattern)

    if negative and "(" in pattern:
        return f"({prefix}{body}{suffix})"
    sign = "-" if negative else ("+" if "+" in pattern and number > 0 else "")
    return f"{sign}{prefix}{body}{suffix}"


def _format_decimal(number: Decimal, pattern: str) -> str:
    core = pattern.strip("+-() ")
    thousands = "," in core
    _, _, fraction = core.partition(".")
    optional = fraction.count("0", fraction.find("[")) if "[" in fraction else 0
    precision = fraction.count("0")

    rounded = number.quantize(Decimal(1).scaleb(-precision), rounding=ROUND_HALF_UP)
    integer, _, decimals = f"{rounded:f}".partition(".")
    if thousands:
        integer = f"{int(integer):,}"
    if optional:
        keep = precision - optional
        decimals = decimals[:keep] + decimals[keep:].rstrip("0")
    return f"{integer}.{decimals}" if decimals else integer


def _format_time(value: float) -> str:
    total = int(round(value))
    hours, remainder = divmod(total, 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{hours}:{minutes:02d}:{seconds:02d}"
