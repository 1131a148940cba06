class EmailsValidatorError(Exception):
    """Base class for errors raised by emailsvalidator."""


class ConfigurationError(EmailsValidatorError, ValueError):
    """Options that cannot be combined were requested."""
