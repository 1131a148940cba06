# Characters allowed in a local-part atom (and in the loose domain remainder)
LOCAL_PART_CHARS = r'[^<>()\[\]\\.,;:\s@"]'
LOCAL_PART = rf'{LOCAL_PART_CHARS}+(?:\.{LOCAL_PART_CHARS}+)*'

DOMAIN_LITERAL = r'\[[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\]'
DOMAIN_NAME = r'(?:[a-zA-Z\-0-9]+\.)+[a-zA-Z]{2,}'

EMAIL_ADDRESS_REGEX = rf'{LOCAL_PART}@(?:{DOMAIN_LITERAL}|{DOMAIN_NAME})'

# One field of a pasted list: either '... "Name" <local@rest' or 'prefix@rest',
# followed by a separator run or the end of the input.
FIELD_REGEX = (
    r'(?P<field>[^@"]*?"(?P<quoted>[^"]*)"\s+<(?P<address>[^@]+?@[^@]+?)'
    r'|[^@]+?@[^@]+?)'
    r'(?:[,;\s/]+|\Z)'
)

# (display name candidate)(local part)@(rest)
FIELD_INFO_REGEX = rf'(?P<display>.*?)(?P<local>{LOCAL_PART})@(?P<rest>.+)\Z'

WHITESPACE_REGEX = r'\s'
