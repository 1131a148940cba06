# Characters removed from a bare display name before it is trimmed
DISPLAY_NAME_STRIP_CHARS = "\"<>"

# Opens an angled address, a bare display name must end with it
ANGLE_OPEN = "<"

REASON_INVALID_FIELD = "invalid field"
REASON_INVALID_EMAIL = "invalid email"

GARBAGE_LOG_PREFIX = "EmailsValidator"

# Excel evaluates cells starting with these as formulas
EXCEL_FORMULA_PREFIXES = ("=", "+", "-", "@")

DEFAULT_TABLE_STYLE = "Table Style Medium 9"
