"""
Date parsing helpers for customer records.

Option values describe date layouts with Java-style patterns such as
``yyyy-MM-dd`` (the format customer exports are written in). They are
translated into ``strptime`` directives before parsing.
"""

from __future__ import annotations

import re
from datetime import datetime
from functools import lru_cache

DEFAULT_DATE_PATTERN = "yyyy-MM-dd"

# Longest runs first so "MMMM" wins over "MM".
_DIRECTIVES: dict[str, str] = {
    "yyyy": "%Y",
    "yy": "%y",
    "MMMM": "%B",
    "MMM": "%b",
    "MM": "%m",
    "M": "%m",
    "dd": "%d",
    "d": "%d",
    "HH": "%H",
    "H": "%H",
    "hh": "%I",
    "h": "%I",
    "mm": "%M",
    "m": "%M",
    "ss": "%S",
    "s": "%S",
    "SSS": "%f",
    "EEEE": "%A",
    "EEE": "%a",
    "a": "%p",
}

_TOKEN_RE = re.compile(r"'(?:[^']|'')*'|([A-Za-z])\1*|.", re.DOTALL)


@lru_cache(maxsize=32)
def java_pattern_to_strptime(pattern: str) -> str:
    """
    Translate a Java ``SimpleDateFormat`` style pattern to a ``strptime`` format.

    Quoted text (``'T'``) is kept literally and ``''`` stands for a single quote.

    Raises:
        ValueError: If the pattern uses a letter run with no strptime equivalent.
    """
    parts: list[str] = []
    for match in _TOKEN_RE.finditer(pattern):
        token = match.group(0)
        if token.startswith("'"):
            literal = "'" if token == "''" else token[1:-1].replace("''", "'")
            parts.append(literal.replace("%", "%%"))
        elif match.group(1):
            directive = _DIRECTIVES.get(token)
            if directive is None:
                raise ValueError(f"Unsupported date pattern element {token!r} in {pattern!r}")
            parts.append(directive)
        else:
            parts.append(token.replace("%", "%%"))
    return "".join(parts)


def parse_date(text: str, pattern: str = DEFAULT_DATE_PATTERN) -> datetime:
    """
    Parse ``text`` using a Java-style ``pattern``.

    Raises:
        ValueError: If the text does not match the pattern or the pattern is unsupported.
    """
    return datetime.strptime(text, java_pattern_to_strptime(pattern))
