from .address_transform import AddressTransform
from .diacritics_transform import DiacriticsTransform
from .display_name_transform import DisplayNameTransform
from .entry_format_transform import EntryFormatTransform
from .field_parse_transform import FieldParseTransform

__all__ = [
    'AddressTransform',
    'DiacriticsTransform',
    'DisplayNameTransform',
    'EntryFormatTransform',
    'FieldParseTransform',
]
