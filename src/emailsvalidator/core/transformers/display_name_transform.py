from emailsvalidator.common.display_name import resolve_display_name
from emailsvalidator.data.candidate_data import CandidateData
from emailsvalidator.interfaces.transform import Transform


class DisplayNameTransform(Transform[CandidateData]):
    def __init__(self, add_display_names: bool = False):
        super().__init__()
        self.__add_display_names = add_display_names

    def transform(self, data: CandidateData) -> CandidateData:
        data.display_name = resolve_display_name(data.parsed, data.email, self.__add_display_names)
        return data
