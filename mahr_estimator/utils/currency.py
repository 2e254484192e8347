"""Currency display formatting"""

from typing import Dict

# Codes rendered with a symbol; everything else is prefixed with the code itself
CURRENCY_SYMBOLS: Dict[str, str] = {
    "USD": "$",
    "GBP": "£",
    "EUR": "€",
    "INR": "₹",
}


def format_currency(amount: float, currency: str) -> str:
    """
    Format an amount with thousands separators and no fractional digits.

    Locale-stable (en-US grouping) regardless of the host locale:
        format_currency(7050, "USD") -> "$7,050"
        format_currency(7050, "AED") -> "AED 7,050"
    """
    code = (currency or "").upper()
    sign = "-" if amount < 0 else ""
    digits = f"{abs(amount):,.0f}"

    symbol = CURRENCY_SYMBOLS.get(code)
    if symbol is not None:
        return f"{sign}{symbol}{digits}"
    return f"{sign}{code} {digits}" if code else f"{sign}{digits}"
