import sys
from typing import List, Optional

from emailsvalidator.core.filters import *
from emailsvalidator.data.rejection import Rejection


class FilterManager:
    def __init__(self, rejected: Optional[List[Rejection]] = None):
        self.exclude_invalid_field_filter = ExcludeInvalidFieldFilter(rejected)
        self.exclude_invalid_email_filter = ExcludeInvalidEmailFilter(rejected)

    @property
    def excluded_total(self) -> int:
        return (self.exclude_invalid_field_filter.excluded_count
                + self.exclude_invalid_email_filter.excluded_count)

    def display_summary(self, file=None):
        file = file or sys.stderr
        if not self.excluded_total:
            return
        print("Fields excluded from output:", file=file)
        print(f"  Invalid fields: {self.exclude_invalid_field_filter.excluded_count}", file=file)
        print(f"  Invalid emails: {self.exclude_invalid_email_filter.excluded_count}", file=file)
        print(file=file)
