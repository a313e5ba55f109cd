"""Display formatting in Brazilian Portuguese (currency and durations)."""

from __future__ import annotations

from firstmillion.config.schema import MONTHS_PER_YEAR

CURRENCY_SYMBOL = "R$"
_NBSP = "\u00a0"


def _localize_number(text: str) -> str:
    """Swap ``1,234.56`` style separators for ``1.234,56``."""
    return text.replace(",", "_").replace(".", ",").replace("_", ".")


def format_currency(value: float) -> str:
    """Format an amount as Brazilian Reais, e.g. ``R$ 1.234,56``.

    The symbol is separated from the digits by a non-breaking space, as in
    the pt-BR locale's own currency format.
    """
    sign = "-" if value < 0 else ""
    digits = _localize_number(f"{abs(value):,.2f}")
    return f"{sign}{CURRENCY_SYMBOL}{_NBSP}{digits}"


def _years_phrase(years: int) -> str:
    return f"{years} ano" if years == 1 else f"{years} anos"


def _months_phrase(months: int) -> str:
    return f"{months} mês" if months == 1 else f"{months} meses"


def format_duration(total_months: int) -> str:
    """Render a month count as whole years and remaining months.

    14 becomes ``"1 ano e 2 meses"``, 24 becomes ``"2 anos"``. Counts below
    one month fall back to ``"menos de 1 mês"``.
    """
    if total_months <= 0:
        return "menos de 1 mês"
    years, months = divmod(int(total_months), MONTHS_PER_YEAR)
    parts: list[str] = []
    if years > 0:
        parts.append(_years_phrase(years))
    if months > 0:
        parts.append(_months_phrase(months))
    return " e ".join(parts)


def format_elapsed(month: int) -> str:
    """Compact label for table rows: ``2 anos 3m``, ``1 ano``, ``5m``."""
    years, months = divmod(month, MONTHS_PER_YEAR)
    parts: list[str] = []
    if years > 0:
        parts.append(_years_phrase(years))
    if months > 0:
        parts.append(f"{months}m")
    return " ".join(parts)


def format_month_label(month: int) -> str:
    """Chart axis tick: whole years once past the first year, months before."""
    years = month // MONTHS_PER_YEAR
    if years > 0:
        return _years_phrase(years)
    return f"{month}m"
