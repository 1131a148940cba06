import logging
from typing import List, Optional

from emailsvalidator.common.defaults import GARBAGE_LOG_PREFIX, REASON_INVALID_FIELD
from emailsvalidator.data.candidate_data import CandidateData
from emailsvalidator.data.rejection import Rejection
from emailsvalidator.interfaces.filter import Filter

logger = logging.getLogger(__name__)


class ExcludeInvalidFieldFilter(Filter[CandidateData]):
    """Drops fields where no local part could be found."""

    def __init__(self, rejected: Optional[List[Rejection]] = None):
        super().__init__()
        self.__rejected = rejected

    def filter(self, data: CandidateData) -> bool:
        if data.parsed is not None:
            return True

        if self.__rejected is not None:
            logger.info("%s: %s %r", GARBAGE_LOG_PREFIX, REASON_INVALID_FIELD, data.field.text)
            self.__rejected.append(Rejection(REASON_INVALID_FIELD, data.field.text))
        return False
