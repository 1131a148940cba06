from .exclude_invalid_email_filter import ExcludeInvalidEmailFilter
from .exclude_invalid_field_filter import ExcludeInvalidFieldFilter

__all__ = [
    'ExcludeInvalidEmailFilter',
    'ExcludeInvalidFieldFilter',
]
