from __future__ import annotations

from typing import Optional

import regex as re

from emailsvalidator.common.diacritics import remove_diacritics
from emailsvalidator.common.regex_patterns import EMAIL_ADDRESS_REGEX

_EMAIL_RE = re.compile(EMAIL_ADDRESS_REGEX)


def find_email(folded: str) -> Optional[str]:
    """
    First grammar-conforming address found in an already folded candidate.

    Trailing garbage is allowed: "john@gmail.com>" gives "john@gmail.com".
    """
    m = _EMAIL_RE.search(folded)
    if not m:
        return None
    return m.group(0).lower()


def is_email(email: str) -> bool:
    """
    True when the whole string is a single valid address.

    Diacritics are folded first, "Hervé@Gmail.com" is valid. Unlike
    find_email, nothing may surround the address.
    """
    if not isinstance(email, str):
        raise TypeError(f"expected str, got {type(email).__name__}")
    return _EMAIL_RE.fullmatch(remove_diacritics(email)) is not None
