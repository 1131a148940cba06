from emailsvalidator.core.processors import *


class ProcessorManager:
    def __init__(self):
        self.entry_collector_processor = EntryCollectorProcessor()
