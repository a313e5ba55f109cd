"""Parsing of user-typed text into the numbers the engine expects."""

from __future__ import annotations

import re

from firstmillion.utils.exceptions import InputParseError

_NUMBER_PATTERN = re.compile(r"^\d*\.?\d*$")


def format_currency_input(text: str) -> str:
    """Re-format a currency field the way a cash machine keypad does.

    Every digit typed shifts the amount left by one cent: ``"1234"`` becomes
    ``"12,34"`` and ``"123456"`` becomes ``"1.234,56"``. Non-digits are dropped
    and an empty field reads ``"0,00"``.
    """
    digits = re.sub(r"\D", "", text)
    if not digits:
        return "0,00"
    reais, cents = divmod(int(digits), 100)
    return f"{reais:,}".replace(",", ".") + f",{cents:02d}"


def parse_currency(text: str) -> float:
    """Read a pt-BR amount such as ``"1.234,56"``; unreadable text counts as zero."""
    if not text:
        return 0.0
    cleaned = text.replace("R$", "").strip().replace(".", "").replace(",", ".")
    try:
        return float(cleaned)
    except ValueError:
        return 0.0


def parse_number(text: str) -> float:
    """Read a rate or period field (digits with an optional decimal point).

    An empty field counts as zero.

    Raises:
        InputParseError: If the text is not a plain non-negative decimal.
    """
    cleaned = text.strip()
    if not _NUMBER_PATTERN.match(cleaned):
        raise InputParseError(f"Invalid number: {text!r}")
    if cleaned in ("", "."):
        return 0.0
    return float(cleaned)
