from __future__ import annotations

from typing import Optional

import regex as re

from emailsvalidator.common.defaults import ANGLE_OPEN, DISPLAY_NAME_STRIP_CHARS
from emailsvalidator.common.field_parser import ParsedCandidate

_NAME_SPLIT_RE = re.compile(r'[._]')
_TRAILING_DIGITS_RE = re.compile(r'[0-9]+\Z')
_STRIP_TABLE = str.maketrans("", "", DISPLAY_NAME_STRIP_CHARS)


def _capitalize(piece: str) -> str:
    # Only the first character changes, str.capitalize() would lower the rest
    return piece[:1].upper() + piece[1:]


def generate_display_name(email: str) -> str:
    """
    Build a display name from the local part of an address.

    Words are split on '.' and '_' and joined by spaces, parts joined by '-'
    are capitalized too and trailing digits are dropped:
    "john.doe0149@gmail.com" -> "John Doe", "marie-claire_durand" -> "Marie-Claire Durand".
    """
    if not isinstance(email, str):
        raise TypeError(f"expected str, got {type(email).__name__}")
    local_part = email.split("@")[0]

    display_name = " ".join(_capitalize(x) for x in _NAME_SPLIT_RE.split(local_part))
    display_name = "-".join(_capitalize(x) for x in display_name.split("-"))

    return _TRAILING_DIGITS_RE.sub("", display_name)


def bare_display_name(display: str) -> str:
    """
    Display name written in front of an angled address: 'John Doe <'.

    Any other text in front of the local part is not a name.
    """
    display = display.rstrip()
    if not display.endswith(ANGLE_OPEN):
        return ""
    return display.translate(_STRIP_TABLE).strip()


def resolve_display_name(parsed: ParsedCandidate, email: str, add_display_names: bool = False) -> Optional[str]:
    if parsed.quoted_name:
        return parsed.quoted_name

    display_name = bare_display_name(parsed.display_name)
    if display_name:
        return display_name

    if add_display_names:
        return generate_display_name(email) or None
    return None
