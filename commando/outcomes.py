"""
Commando parse outcomes.

A parse ends in exactly one of three outcomes:
- Help(message): the help switch was given; print message and exit 0.
- Ok(values): switch name → value, defaults already merged in.
- Error(message, code, subjects): unknown/malformed switches or missing
  required switches; print message and exit non-zero.

ParseOutcome is the closed union of the three, meant for exhaustive matching:

    match commando.parse(spec, sys.argv[1:]):
        case Help(message):
            print(message)
        case Ok(values):
            run(**values)
        case Error(message):
            sys.exit(message)

Every outcome renders through rich (console.print(outcome)); unwrap() turns it
into plain Python control flow instead.
"""
from dataclasses import dataclass, field
from types import MappingProxyType

from rich.pretty import Pretty
from rich.text import Text

from .faults import *


@dataclass(frozen=True)
class Help:
    message: str

    def __rich__(self):
        return Text(self.message)

    def unwrap(self):
        raise HelpRequested(self.message)


@dataclass(frozen=True)
class Ok:
    values: MappingProxyType = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))

    def __rich__(self):
        return Pretty(dict(self.values))

    def unwrap(self):
        return dict(self.values)


_EXCEPTIONS = {
    FaultCode.UNKNOWN_OPTION: (UnknownOptionsError, "unknown options"),
    FaultCode.MISSING_OPTION: (MissingOptionsError, "missing required options"),
}


@dataclass(frozen=True)
class Error:
    message: str
    code: FaultCode
    subjects: tuple = ()
    prog: str = field(default="", compare=False)

    def __post_init__(self):
        object.__setattr__(self, "subjects", tuple(self.subjects))

    @property
    def exception(self):
        """
        the CommandoException equivalent of this outcome (not raised).
        """
        exception, title = _EXCEPTIONS.get(self.code, (CommandoException, "error"))
        return exception(self.message, code=self.code, title=title, subjects=self.subjects, prog=self.prog)

    def __rich__(self):
        return self.exception.__rich__()

    def unwrap(self):
        raise self.exception


type ParseOutcome = Help | Ok | Error


def unwrap(outcome, /):
    """
    values of an Ok outcome; raises for the other two.

    raises
    - HelpRequested: for Help (message attached).
    - UnknownOptionsError / MissingOptionsError: for Error.
    """
    if not isinstance(outcome, Help | Ok | Error):
        raise TypeError("unwrap() argument must be a parse outcome")
    return outcome.unwrap()


__all__ = (
    "Help",
    "Ok",
    "Error",
    "ParseOutcome",
    "unwrap",
)
