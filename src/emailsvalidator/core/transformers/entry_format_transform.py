from emailsvalidator.data.candidate_data import CandidateData
from emailsvalidator.interfaces.transform import Transform


class EntryFormatTransform(Transform[CandidateData]):
    """Render the output entry: address, name, or '"Name" <address>'."""

    def __init__(self, only_return_names: bool = False):
        super().__init__()
        self.__only_return_names = only_return_names

    def transform(self, data: CandidateData) -> CandidateData:
        if not data.display_name:
            data.entry = data.email
        elif self.__only_return_names:
            data.entry = data.display_name
        else:
            data.entry = f'"{data.display_name}" <{data.email}>'
        return data
