import logging
from typing import List, Optional

from emailsvalidator.common.defaults import GARBAGE_LOG_PREFIX, REASON_INVALID_EMAIL
from emailsvalidator.data.candidate_data import CandidateData
from emailsvalidator.data.rejection import Rejection
from emailsvalidator.interfaces.filter import Filter

logger = logging.getLogger(__name__)


class ExcludeInvalidEmailFilter(Filter[CandidateData]):
    """Drops candidates holding no valid address, even once diacritics are removed."""

    def __init__(self, rejected: Optional[List[Rejection]] = None):
        super().__init__()
        self.__rejected = rejected

    def filter(self, data: CandidateData) -> bool:
        if data.email:
            return True

        if self.__rejected is not None:
            # Report what was typed, not the folded form
            candidate = data.parsed.candidate
            logger.info("%s: %s %r", GARBAGE_LOG_PREFIX, REASON_INVALID_EMAIL, candidate)
            self.__rejected.append(Rejection(REASON_INVALID_EMAIL, candidate))
        return False
