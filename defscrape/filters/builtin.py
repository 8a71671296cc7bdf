"""
Baseline filters

Every filter maps a string to a string and never raises. The price helper
``pence`` works on digits only; strings with decimal points or thousands
separators are read digit by digit with the separators ignored.
"""

import re
from urllib.parse import unquote_plus

UNESCAPE_ERROR = "UNESCAPE_ERROR"

_BAD_PERCENT = re.compile(r"%(?![0-9A-Fa-f]{2})")


def trim(value: str) -> str:
    """Strip leading and trailing whitespace."""
    return value.strip()


def unescape(value: str) -> str:
    """Percent-decode a URL encoded string, UNESCAPE_ERROR if malformed."""
    if _BAD_PERCENT.search(value):
        return UNESCAPE_ERROR
    try:
        return unquote_plus(value, errors="strict")
    except UnicodeDecodeError:
        return UNESCAPE_ERROR


def lowercase(value: str) -> str:
    return value.lower()


def uppercase(value: str) -> str:
    return value.upper()


def _needs_space(value: str, i: int) -> bool:
    char = value[i]
    if "A" <= char <= "Z" or char == "&":
        return True
    return char == "x" and i + 1 < len(value) and value[i + 1].isdigit()


def respace(value: str) -> str:
    """Add a space before capitals, ampersands and 'x' ahead of a digit.

    "RedApples&Pears" -> "Red Apples & Pears", "Pack6x100g" -> "Pack6 x100g".
    The first character never gets a space in front of it.
    """
    i = 1
    while i < len(value):
        if _needs_space(value, i):
            value = value[:i] + " " + value[i:]
            # step over the inserted space onto the character that caused it
            i += 1
        i += 1
    return value


def pence(value: str) -> str:
    """Read the digits of a string as one integer, e.g. "£12.34" -> "1234"."""
    amount = 0
    unit = 1
    for char in reversed(value):
        if "0" <= char <= "9":
            amount += int(char) * unit
            unit *= 10
    return str(amount)


BUILTIN_FILTERS = {
    "trim": (trim, "Strip leading/trailing whitespace"),
    "unescape": (unescape, "Percent-decode a URL encoded value"),
    "lowercase": (lowercase, "Lower-case the value"),
    "uppercase": (uppercase, "Upper-case the value"),
    "respace": (respace, "Space out capitals, '&' and 'x<digit>'"),
    "pence": (pence, "Trailing digits as an integer amount"),
}
