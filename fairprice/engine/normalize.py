"""Input normalization for the price and area form fields.

The price field behaves like a cash-register mask: every digit typed shifts
the value left, and the last two digits are always centavos. Display text
produced by format_currency() normalizes back to the same value, so the field
can be reformatted on every keystroke.
"""

import re
from decimal import Decimal, localcontext

CURRENCY_SYMBOL = "R$"
MAX_CURRENCY_DIGITS = 10  # R$ 99.999.999,99
MAX_PRICE = Decimal("99999999.99")
MAX_AREA_DIGITS = 9
MAX_AREA = 10**MAX_AREA_DIGITS - 1

_NON_DIGITS = re.compile(r"\D")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def normalize_currency(raw: str | None) -> Decimal | None:
    """Parse masked currency text into a Decimal with two places.

    Returns None when the text holds no digits at all ("not entered yet"),
    which is distinct from an explicit R$ 0,00.
    """
    if not raw:
        return None
    digits = _NON_DIGITS.sub("", raw)
    if not digits:
        return None
    digits = digits[:MAX_CURRENCY_DIGITS]
    return Decimal(int(digits)).scaleb(-2).quantize(Decimal("0.01"))


def format_currency(value: Decimal | int | float | None) -> str:
    """Render a value as pt-BR currency, e.g. R$ 250.000,00."""
    if value is None:
        return ""
    amount = Decimal(str(value))
    with localcontext() as ctx:
        # room for every integer digit plus centavos
        ctx.prec = max(ctx.prec, amount.adjusted() + 3)
        amount = amount.quantize(Decimal("0.01"))
    sign = "-" if amount < 0 else ""
    text = f"{abs(amount):,.2f}"
    # 1,234.56 → 1.234,56
    text = text.replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{sign}{CURRENCY_SYMBOL} {text}"


def reformat_currency_input(raw: str | None) -> str:
    """Normalize and re-render a price field as the user types."""
    return format_currency(normalize_currency(raw))


def parse_area(raw: str | int | None) -> int | None:
    """Parse the leading integer of an area field ("130", "130 m²").

    Returns None for empty or non-numeric text, and for digit runs longer
    than MAX_AREA_DIGITS. The sign is kept; rejecting non-positive areas is
    the evaluator's job.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    match = _LEADING_INT.match(str(raw))
    if match is None:
        return None
    digits = match.group(1)
    if len(digits.lstrip("+-")) > MAX_AREA_DIGITS:
        return None
    return int(digits)


def format_area(area: int | None) -> str:
    return f"{area if area is not None else 0} m²"
