"""
Commando reconciliation: tokenizer result + spec → final outcome.

Precedence (strict, first match wins)
1. help requested          → Help(render_help(spec))
2. unknown/invalid tokens  → Error(UNKNOWN_OPTION)
3. missing required        → Error(MISSING_OPTION)
4. otherwise               → Ok(values with defaults filled in)

Notes
- Missing required switches are computed from the tokenizer values before
  defaults are merged, so a default never satisfies a requirement.
- A "help" switch counts as requested only when its value is exactly True.
- Nothing here raises on user input; every fault becomes an Error outcome.
"""
import logging

from .messages import *
from .outcomes import *
from .faults import FaultCode
from .switches import SwitchSpec
from .tokenizer import tokenize

logger = logging.getLogger(__name__)


def reconcile(spec, values, invalid=(), /):
    """
    resolve a raw tokenizer result into a ParseOutcome.

    parameters
    - spec: SwitchSpec
    - values: Mapping[str, object], recognized switch values.
    - invalid: Iterable[str], textual form of unrecognized or malformed switches.

    returns
    - Help | Ok | Error

    a required name that was never registered as a switch is reported as
    missing like any other.
    """
    if not isinstance(spec, SwitchSpec):
        raise TypeError("reconcile() first argument must be a SwitchSpec")

    invalid = list(invalid)
    missing = [name for name in spec.required if name not in values]

    if values.get("help") is True:
        logger.debug("%s: help requested", spec.name)
        return Help(render_help(spec))

    if invalid:
        logger.debug("%s: invalid options %r", spec.name, invalid)
        return Error(render_invalid_options(invalid), FaultCode.UNKNOWN_OPTION, invalid, spec.name)

    if missing:
        logger.debug("%s: missing required options %r", spec.name, missing)
        return Error(render_missing_options(missing), FaultCode.MISSING_OPTION, missing, spec.name)

    result = dict(values)
    for name, default in spec.defaults.items():
        result.setdefault(name, default)
    logger.debug("%s: parsed %r", spec.name, result)
    return Ok(result)


def parse(spec, args, /, *, tokenizer=tokenize):
    """
    parse command-line `args` (without the program name) against `spec`.

    the tokenizer receives the SwitchSpec type and alias tables; its leftover
    (positional) tokens are ignored.

    examples
    - create("app").add_switch("path", "string", "Path").parse(["--path", "abc"])
      → Ok(values={"path": "abc"})
    - create("app").parse(["--path", "abc"])
      → Error("Unknown options: --path", ...)
    - create("app").add_switch("foo", "count", "", alias="f").parse(["--foo", "-f", "-f"])
      → Ok(values={"foo": 3})
    """
    if not isinstance(spec, SwitchSpec):
        raise TypeError("parse() first argument must be a SwitchSpec")
    if isinstance(args, str):
        raise TypeError("parse() second argument must be a sequence of tokens, not a string")

    # a tokenizer may return (values, invalid) or (values, invalid, rest)
    values, invalid, *rest = tokenizer(list(args), spec.switches, spec.aliases)
    if rest and rest[0]:
        logger.debug("%s: ignoring positional tokens %r", spec.name, rest[0])
    return reconcile(spec, values, invalid)


def help_message(spec, /):
    """
    the help message of `spec`, ready to be printed.
    """
    return render_help(spec)


__all__ = (
    "reconcile",
    "parse",
    "help_message",
)
