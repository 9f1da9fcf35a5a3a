"""
utils/text.py
String canonicalization shared by the extractors and the venue matcher.
"""

import re
from typing import Optional

_NON_ALNUM = re.compile(r"[^a-z0-9\s]")
_WHITESPACE = re.compile(r"\s+")


def normalize(text: Optional[str]) -> str:
    """
    Lowercase, drop everything that is not an ASCII letter, digit or
    whitespace, collapse whitespace runs and trim.

    Accented and non-Latin letters are dropped, not transliterated:
    "Università" -> "universit".
    """
    if not text:
        return ""
    lowered = _NON_ALNUM.sub("", text.lower())
    return _WHITESPACE.sub(" ", lowered).strip()
