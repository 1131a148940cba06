from emailsvalidator.common.field_parser import parse_field
from emailsvalidator.data.candidate_data import CandidateData
from emailsvalidator.interfaces.transform import Transform


class FieldParseTransform(Transform[CandidateData]):
    def transform(self, data: CandidateData) -> CandidateData:
        data.parsed = parse_field(data.field)
        return data
