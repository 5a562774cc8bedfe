"""Parsing of user-typed numbers and locale-style formatting for display."""

import re

from engine.numeric import safe_number

# Characters that never change the value: whitespace (incl. NBSP / narrow NBSP),
# apostrophe thousands separators, currency and percent signs
_IGNORED = re.compile(r"[\s\u00a0\u202f'\u2019€$£%]")
_VALID = re.compile(r"^[+-]?[0-9.,]+$")
_GROUPED = re.compile(r"^[0-9]{1,3}[.,][0-9]{3}$")

# Separator that groups thousands in each display style
_GROUP_SEPARATOR = {'en': ",", 'de': "."}


def parse_number(text, style="en"):
    """
    Parse a number typed with either '.' or ',' as decimal separator.

    - both separators present: the right-most one is the decimal separator
    - one separator repeated: thousands separator ("1.234.567")
    - the style's grouping separator once, followed by exactly three
      digits: thousands separator ("1,000" in en, "1.000" in de)
    - any other single separator: decimal separator ("1,5" == 1.5)

    Empty or unparseable text gives 0.0. Sign is kept; clamping happens in
    the engine's numeric layer.
    """
    if text is None:
        return 0.0
    if isinstance(text, (int, float)):
        return safe_number(text)

    s = _IGNORED.sub("", str(text))
    if not s or not _VALID.match(s):
        return 0.0

    negative = s.startswith("-")
    s = s.lstrip("+-")

    if "." in s and "," in s:
        decimal = "." if s.rfind(".") > s.rfind(",") else ","
        thousands = "," if decimal == "." else "."
        s = s.replace(thousands, "")
        if s.count(decimal) > 1:
            return 0.0
        s = s.replace(decimal, ".")
    else:
        group = _GROUP_SEPARATOR.get(style, ",")
        for sep in (".", ","):
            if sep not in s:
                continue
            if s.count(sep) > 1 or (sep == group and _GROUPED.match(s)):
                s = s.replace(sep, "")
            else:
                s = s.replace(sep, ".")

    value = safe_number(s)
    return -value if negative else value


def format_number(value, decimals=2, style="en"):
    text = f"{safe_number(value):,.{decimals}f}"
    if style == "de":
        text = text.replace(",", "X").replace(".", ",").replace("X", ".")
    return text


def format_currency(value, symbol="€", decimals=2, style="en"):
    return f"{format_number(value, decimals, style)} {symbol}"


def format_percent(value, decimals=1, style="en"):
    return f"{format_number(value, decimals, style)}%"


def format_input(value, style="en", max_decimals=4):
    """Compact text for writing a number back into an input box (no thousands separators)"""
    text = f"{safe_number(value):.{max_decimals}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("", "-0"):
        text = "0"
    if style == "de":
        text = text.replace(".", ",")
    return text
