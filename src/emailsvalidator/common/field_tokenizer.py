from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

import regex as re

from emailsvalidator.common.regex_patterns import FIELD_REGEX

_FIELD_RE = re.compile(FIELD_REGEX)
_DOUBLE_AT_RE = re.compile(r"@{2,}")


@dataclass(frozen=True, slots=True)
class Field:
    """
    One candidate address unit cut out of the input.

    text: the matched field, separators excluded
    quoted_name: content of the double quotes for '"Name" <addr>' fields
    address: the part after '<' for '"Name" <addr>' fields
    """
    text: str
    quoted_name: Optional[str] = None
    address: Optional[str] = None

    @property
    def parse_text(self) -> str:
        # The address capture wins over the whole field when present
        return self.address or self.text


def normalize_input(emails: str) -> str:
    # Pasted lists sometimes carry a doubled '@'
    return _DOUBLE_AT_RE.sub("@", emails)


class FieldTokenizer:
    """
    Splits free text into Fields, one per prospective address.

    Iterating twice over the same tokenizer restarts the scan from the
    beginning of the text.
    """

    __slots__ = ("text",)

    def __init__(self, emails: str):
        self.text = normalize_input(emails)

    def __iter__(self) -> Iterator[Field]:
        if "@" not in self.text:
            return
        # Every match holds an '@', the scan moves forward on each step
        for m in _FIELD_RE.finditer(self.text):
            yield Field(m.group("field"), m.group("quoted"), m.group("address"))
