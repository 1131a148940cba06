from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from emailsvalidator.common.field_parser import ParsedCandidate
from emailsvalidator.common.field_tokenizer import Field


@dataclass(slots=True)
class CandidateData:
    """State of one field while it moves through the pipeline."""
    field: Field
    parsed: Optional[ParsedCandidate] = None
    folded: str = ""
    email: str = ""
    display_name: Optional[str] = None
    entry: str = ""
