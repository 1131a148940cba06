from typing import List

from emailsvalidator.data.candidate_data import CandidateData
from emailsvalidator.interfaces.processor import Processor


class EntryCollectorProcessor(Processor[CandidateData]):
    """Keeps every rendered entry, in field order."""

    def __init__(self):
        super().__init__()
        self.__entries: List[str] = []
        self.__records: List[CandidateData] = []

    def execute(self, data: CandidateData) -> None:
        self.__entries.append(data.entry)
        self.__records.append(data)

    @property
    def entries(self) -> List[str]:
        return self.__entries

    @property
    def records(self) -> List[CandidateData]:
        return self.__records

    def reset(self) -> None:
        self.__entries = []
        self.__records = []
