from emailsvalidator.common.address_validator import find_email, is_email
from emailsvalidator.common.config import CleanUpOptions
from emailsvalidator.common.diacritics import get_diacritics_map, remove_diacritics
from emailsvalidator.common.display_name import generate_display_name, resolve_display_name
from emailsvalidator.common.errors import ConfigurationError, EmailsValidatorError
from emailsvalidator.common.field_parser import ParsedCandidate, parse_field
from emailsvalidator.common.field_tokenizer import Field, FieldTokenizer
from emailsvalidator.data.rejection import Rejection
from emailsvalidator.processing.email_list_processor import (
    EmailListProcessor,
    clean_up_email_list,
    clean_up_email_list_batch,
    clean_up_single_address,
)

__all__ = [
    'CleanUpOptions',
    'ConfigurationError',
    'EmailListProcessor',
    'EmailsValidatorError',
    'Field',
    'FieldTokenizer',
    'ParsedCandidate',
    'Rejection',
    'clean_up_email_list',
    'clean_up_email_list_batch',
    'clean_up_single_address',
    'find_email',
    'generate_display_name',
    'get_diacritics_map',
    'is_email',
    'parse_field',
    'remove_diacritics',
    'resolve_display_name',
]
