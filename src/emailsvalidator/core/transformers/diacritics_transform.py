from emailsvalidator.common.diacritics import remove_diacritics
from emailsvalidator.data.candidate_data import CandidateData
from emailsvalidator.interfaces.transform import Transform


class DiacriticsTransform(Transform[CandidateData]):
    def transform(self, data: CandidateData) -> CandidateData:
        # Second chance for names like "Hervé": fold before validating
        data.folded = remove_diacritics(data.parsed.candidate)
        return data
