from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import regex as re

from emailsvalidator.common.field_tokenizer import Field
from emailsvalidator.common.regex_patterns import FIELD_INFO_REGEX, WHITESPACE_REGEX

_FIELD_INFO_RE = re.compile(FIELD_INFO_REGEX)
_WHITESPACE_RE = re.compile(WHITESPACE_REGEX)


@dataclass(frozen=True, slots=True)
class ParsedCandidate:
    display_name: str
    local_part: str
    rest: str
    quoted_name: Optional[str] = None

    @property
    def candidate(self) -> str:
        return f"{self.local_part}@{self.rest}"


def strip_whitespace(text: str) -> str:
    return _WHITESPACE_RE.sub("", text)


def _raw_prefix(raw: str, length: int) -> str:
    """Shortest prefix of raw holding `length` non-whitespace characters."""
    if length <= 0:
        return ""
    seen = 0
    for i, ch in enumerate(raw):
        if _WHITESPACE_RE.match(ch):
            continue
        seen += 1
        if seen == length:
            return raw[:i + 1]
    return raw


def parse_field(field: Field) -> Optional[ParsedCandidate]:
    """
    Decompose a field into (display name candidate, local part, rest).

    Matching runs on the field without any whitespace. The display name
    candidate is cut from the original text so the spaces inside a name
    are kept. Returns None when no local part can be found.
    """
    raw = field.parse_text
    m = _FIELD_INFO_RE.match(strip_whitespace(raw))
    if not m:
        return None

    display = _raw_prefix(raw, len(m.group("display")))
    return ParsedCandidate(display, m.group("local"), m.group("rest"), field.quoted_name)
