from __future__ import annotations

from dataclasses import dataclass

from emailsvalidator.common.errors import ConfigurationError


@dataclass(frozen=True)
class CleanUpOptions:
    """
    Options of a clean up call.

    only_return_emails: drop display names, eg: toto Shinnigan <user@gmail.com> --> user@gmail.com
    only_return_names: drop addresses, eg: "John Doe" <toto.shinnigan@gmail.com> --> John Doe.
        Implies add_display_names.
    add_display_names: generate a display name for addresses without one,
        eg: toto.shinnigan@gmail.com --> "Toto Shinnigan" <toto.shinnigan@gmail.com>
    log_garbage: report every field that does not hold a valid address
    """
    only_return_emails: bool = False
    only_return_names: bool = False
    add_display_names: bool = False
    log_garbage: bool = False

    def __post_init__(self):
        if self.only_return_names and not self.add_display_names:
            object.__setattr__(self, "add_display_names", True)

        if self.only_return_emails and self.add_display_names:
            raise ConfigurationError("Can't set both only_return_emails & add_display_names to true")

    @classmethod
    def from_args(cls, args) -> CleanUpOptions:
        return cls(
            only_return_emails=args.only_emails,
            only_return_names=args.only_names,
            add_display_names=args.add_names,
            log_garbage=args.log_garbage,
        )
