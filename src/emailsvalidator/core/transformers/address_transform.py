from emailsvalidator.common.address_validator import find_email
from emailsvalidator.data.candidate_data import CandidateData
from emailsvalidator.interfaces.transform import Transform


class AddressTransform(Transform[CandidateData]):
    def transform(self, data: CandidateData) -> CandidateData:
        data.email = find_email(data.folded) or ""
        return data
