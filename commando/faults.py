"""
Commando faults (user-facing parse failures) and their rendering.

Scope
- FaultCode: stable numeric identifiers for the two ways a parse can fail.
- CommandoException: base type carrying a plain message plus read-only options
  (code, title, subjects, prog) and rendering itself through rich.
- UnknownOptionsError / MissingOptionsError: raised by Error.unwrap().
- HelpRequested: raised by Help.unwrap() so callers can print and exit 0.

The reconciler itself never raises these; it returns an Error outcome. The
exceptions exist for callers that prefer regular control flow (see
commando.outcomes.unwrap).

Host configuration (read from __main__ when rendering)
- __prog__:   program name shown in the header.
- __styles__: mapping overriding the default rich styles.
- __codes__:  mapping FaultCode → label, see FaultCode.normalize().
"""
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Group
from rich.text import Text

from .utils import *


class FaultCode(IntEnum):
    """
    canonical fault codes (stable identifiers).

    numbering follows the Seralix Fault Codes convention: the 111xx range is
    reserved for switch errors, leaving gaps for future additions.
    - UNKNOWN_OPTION: a token did not match any switch or alias, or its value
      could not be coerced to the switch type.
    - MISSING_OPTION: a required switch was not supplied.
    """
    UNKNOWN_OPTION = 11112
    MISSING_OPTION = 11125

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__ to
        override numeric ids with friendlier labels.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


def _styles(defaults, /):
    return defaultdict(str, defaults | getattr(__import__("__main__"), "__styles__", {}))


class CommandoException(Exception):
    """
    base class for parse faults surfaced as exceptions.

    str(exception) is the plain message, identical to the message of the Error
    outcome it was built from.
    """

    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        super().__init__(coalesce(message, ""))
        self.message = coalesce(message, "")
        self.options = MappingProxyType(options)

    @property
    def code(self):
        return self.options.get("code")

    @property
    def subjects(self):
        return tuple(self.options.get("subjects", ()))

    def __rich__(self):
        styles = _styles({
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #00E5FF",  # neon cyan fault code
            "error-title": "bold #FF4DA6",  # friendly pinky title
            "error-message": "#C8C8D0",  # soft light gray message
        })

        prog = getattr(__import__("__main__"), "__prog__", self.options.get("prog", ""))
        header = [("[ ", ""), (prog, styles["prog-name"])]
        if self.code is not None:
            header += [(" — ", ""), (self.code.normalize(), styles["code"])]
        header += [(" | ", ""), (self.options.get("title", "error").title(), styles["error-title"]), (" ]", "")]

        return Group(Text.assemble(*header), Text(self.message, styles["error-message"]))

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class UnknownOptionsError(CommandoException): ...
class MissingOptionsError(CommandoException): ...


class HelpRequested(Exception):
    """
    raised by Help.unwrap(); carries the rendered help message.

    not a fault: callers are expected to print the message and exit cleanly.
    """

    def __init__(self, message, /):
        super().__init__(message)
        self.message = message

    def __rich__(self):
        return Text(self.message)


__all__ = (
    "FaultCode",
    "CommandoException",
    "UnknownOptionsError",
    "MissingOptionsError",
    "HelpRequested",
)
