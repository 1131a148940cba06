from __future__ import annotations

from typing import Iterable, List, Optional

from emailsvalidator.common.config import CleanUpOptions
from emailsvalidator.common.field_tokenizer import FieldTokenizer
from emailsvalidator.data.candidate_data import CandidateData
from emailsvalidator.data.rejection import Rejection
from emailsvalidator.processing.pipeline_manager import PipelineManager


class EmailListProcessor:
    """
    Runs every field of a text through the clean up pipeline.

    Rejected fields are kept in `rejected` (across calls) when the options
    ask for garbage logging.
    """

    def __init__(self, options: Optional[CleanUpOptions] = None):
        self.__options = options or CleanUpOptions()
        self.__rejected: List[Rejection] = []
        self.__pipeline_manager = PipelineManager(
            self.__options,
            self.__rejected if self.__options.log_garbage else None,
        )
        self.__collector = self.__pipeline_manager.get_processor_manager().entry_collector_processor

    @property
    def options(self) -> CleanUpOptions:
        return self.__options

    @property
    def rejected(self) -> List[Rejection]:
        return self.__rejected

    @property
    def records(self) -> List[CandidateData]:
        """Accepted fields of the last processed text."""
        return self.__collector.records

    def get_pipeline_manager(self) -> PipelineManager:
        return self.__pipeline_manager

    def process(self, emails: str) -> List[str]:
        if not isinstance(emails, str):
            raise TypeError(f"expected str, got {type(emails).__name__}")

        self.__collector.reset()
        pipeline = self.__pipeline_manager.get_pipeline()
        for field in FieldTokenizer(emails):
            pipeline.handle(CandidateData(field))
        return list(self.__collector.entries)


def clean_up_email_list(emails: str, options: Optional[CleanUpOptions] = None) -> List[str]:
    """
    Compute the list of valid email addresses contained in a string,
    accepting the syntax "User Name" <someone@gmail.com>.

    >>> clean_up_email_list("me@gmail.com, some text, other@gmail.com")
    ['me@gmail.com', 'other@gmail.com']
    >>> clean_up_email_list("me@gmail.com, élève1@gmail.com")
    ['me@gmail.com', 'eleve1@gmail.com']

    Addresses are lowercased and their diacritics removed, display names keep
    their case. Entries come out in input order and are not deduplicated.
    """
    return EmailListProcessor(options).process(emails)


def clean_up_email_list_batch(texts: Iterable[str], options: Optional[CleanUpOptions] = None) -> List[List[str]]:
    processor = EmailListProcessor(options)
    return [processor.process(text) for text in texts]


def clean_up_single_address(email: str) -> Optional[str]:
    """Clean up one dirty address: "Hervé.Du Chène@gmail.com" --> "herve.duchene@gmail.com", or None."""
    res = clean_up_email_list(email, CleanUpOptions(only_return_emails=True))
    return res[0] if res else None
