from emailsvalidator.common.config import CleanUpOptions
from emailsvalidator.core.transformers import *


class TransformManager:
    def __init__(self, options: CleanUpOptions):
        self.field_parse_transform = FieldParseTransform()
        self.diacritics_transform = DiacriticsTransform()
        self.address_transform = AddressTransform()
        self.display_name_transform = DisplayNameTransform(options.add_display_names)
        self.entry_format_transform = EntryFormatTransform(options.only_return_names)
