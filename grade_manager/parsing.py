"""
Strict number parsing for roster fields and typed input.

Only plain ASCII numerals are accepted: no surrounding whitespace, no digit
separators such as "1_0", no non-ASCII digits.
"""

import re

INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_integer(text: str) -> int:
    """
    Parse a whole number written with ASCII digits and an optional sign.

    Raises:
        ValueError: If the text is anything else.
    """
    if not isinstance(text, str) or not INTEGER_PATTERN.fullmatch(text):
        raise ValueError(f"Not an integer: {text!r}")
    return int(text)


def parse_number(text: str) -> float:
    """
    Parse a decimal number such as "90", "-1.5" or "2e3".

    Raises:
        ValueError: If the text is not a number.
    """
    if (
        not isinstance(text, str)
        or not text.isascii()
        or "_" in text
        or text != text.strip()
    ):
        raise ValueError(f"Not a number: {text!r}")
    return float(text)
