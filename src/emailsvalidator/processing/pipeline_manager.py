from typing import List, Optional

from emailsvalidator.common.config import CleanUpOptions
from emailsvalidator.data.candidate_data import CandidateData
from emailsvalidator.data.rejection import Rejection
from emailsvalidator.interfaces.handler import Handler
from emailsvalidator.processing.filter_manager import FilterManager
from emailsvalidator.processing.processor_manager import ProcessorManager
from emailsvalidator.processing.transform_manager import TransformManager


class PipelineManager:
    def __init__(self, options: CleanUpOptions, rejected: Optional[List[Rejection]] = None):
        self.__transform_manager = TransformManager(options)
        self.__filter_manager = FilterManager(rejected)
        self.__processor_manager = ProcessorManager()
        self.__pipeline = self.__build_pipeline(options)

    def __build_pipeline(self, options: CleanUpOptions) -> Handler[CandidateData]:
        pipeline = (self.__transform_manager.field_parse_transform
                    .set_next(self.__filter_manager.exclude_invalid_field_filter)
                    .set_next(self.__transform_manager.diacritics_transform)
                    .set_next(self.__transform_manager.address_transform)
                    .set_next(self.__filter_manager.exclude_invalid_email_filter))

        if not options.only_return_emails:
            pipeline.set_next(self.__transform_manager.display_name_transform)

        pipeline.set_next(self.__transform_manager.entry_format_transform)
        pipeline.set_next(self.__processor_manager.entry_collector_processor)

        return pipeline

    def get_pipeline(self) -> Handler[CandidateData]:
        return self.__pipeline

    def get_filter_manager(self) -> FilterManager:
        return self.__filter_manager

    def get_processor_manager(self) -> ProcessorManager:
        return self.__processor_manager
