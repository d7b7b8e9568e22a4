r"""
Commando default tokenizer: raw argv tokens → typed switch values.

Contract
- tokenize(args, switches, aliases) -> Tokens(values, invalid, rest)
  • values: dict[str, object], switch name → coerced value, in first-seen order.
  • invalid: list[str], switch text of every token that was not recognized or
    whose value could not be coerced (e.g. "--path", "-x"), in input order.
  • rest: list[str], non-switch tokens and everything after "--".
- The tokenizer knows nothing about required switches or defaults; that is
  the reconciler's job (see commando.reconciler).

Any callable honoring the Tokenizer protocol can replace tokenize() in
commando.parse(..., tokenizer=...).

Grammar
- long form:  --name, --name=value   (dashes in names map to underscores)
- short form: -a, -a=value           (resolved through the alias table)
- negation:   --no-name              (boolean switches only)
- values:     inline after '=' or taken from the next token, unless that token
              looks like a switch (negative numbers are accepted as values).
- anything else starting with '-' (other than '-' itself and ASCII negative
  numbers) is an unknown switch: "--foo bar" and "--=x" land in invalid.
"""
import logging
import re
from collections import deque
from typing import NamedTuple, Protocol

from .switches import SwitchType

logger = logging.getLogger(__name__)

_SWITCH = re.compile(r"(?P<dashes>--?)(?P<name>[^=]*)(=(?P<value>.*))?", re.DOTALL)
_INTEGER = re.compile(r"[+-]?\d+", re.ASCII)
_FLOAT = re.compile(r"[+-]?\d+(\.\d+)?([eE][+-]?\d+)?", re.ASCII)
_NEGATIVE = re.compile(r"-\d+(\.\d+)?([eE][+-]?\d+)?", re.ASCII)


class Tokens(NamedTuple):
    """
    raw tokenizer result consumed by the reconciler.
    """
    values: dict
    invalid: list
    rest: list


class Tokenizer(Protocol):
    """
    structural type of a pluggable tokenizer.

    it receives the SwitchSpec type table (name → SwitchType) and alias table
    (alias → name) and must return a Tokens triple.
    """

    def __call__(self, args, switches, aliases, /) -> Tokens: ...


def _coerce(type, raw, /):
    """
    convert the raw text of a valued switch; returns (ok, value).
    """
    match type:
        case SwitchType.INTEGER:
            if _INTEGER.fullmatch(raw):
                return True, int(raw)
        case SwitchType.FLOAT:
            if _FLOAT.fullmatch(raw):
                return True, float(raw)
        case SwitchType.STRING:
            return True, raw
    return False, None


def _resolve(dashes, name, switches, aliases, /):
    """
    map the textual switch to (canonical name, negated) or None when unknown.
    """
    if dashes == "-":
        target = aliases.get(name)
        return (target, False) if target in switches else None

    # underscores are not part of the command-line spelling
    if "_" in name:
        return None
    key = name.replace("-", "_")
    if key in switches:
        return key, False
    if key.startswith("no_") and switches.get(key[3:]) == SwitchType.BOOLEAN:
        return key[3:], True
    return None


def _takes(token, /):
    """
    whether the next token may be consumed as a switch value.
    """
    return not token.startswith("-") or bool(_NEGATIVE.fullmatch(token))


def tokenize(args, switches, aliases, /):
    """
    split `args` into recognized switch values, invalid switches and leftovers.

    parameters
    - args: Iterable[str]
      raw tokens, excluding the program name.
    - switches: Mapping[str, SwitchType | str]
      strict type table; any switch not listed here is invalid.
    - aliases: Mapping[str, str]
      alias → canonical switch name.

    returns
    - Tokens(values, invalid, rest)

    notes
    - count switches add one per occurrence; every other switch keeps the
      last value supplied.
    - an invalid valued switch still consumes the value that follows it, so
      "--port abc" reports "--port" once and does not leak "abc" into rest.
    """
    tokens = deque(args)
    values = {}
    invalid = []
    rest = []

    while tokens:
        token = tokens.popleft()

        if token == "--":
            rest.extend(tokens)
            break

        if token == "-" or _takes(token):
            rest.append(token)
            continue

        # every other dash-prefixed token is a switch, known or not
        match = _SWITCH.fullmatch(token)
        text = match["dashes"] + match["name"] if match["name"] else token
        inline = match["value"]  # None without '=', possibly '' with it
        resolved = _resolve(match["dashes"], match["name"], switches, aliases) if match["name"] else None

        if resolved is None:
            logger.debug("unknown switch %r", text)
            invalid.append(text)
            continue

        name, negated = resolved
        type = SwitchType(switches[name])

        if type is SwitchType.BOOLEAN:
            if inline is None:
                values[name] = not negated
            elif not negated and inline in ("true", "false"):
                values[name] = inline == "true"
            else:
                logger.debug("boolean switch %r cannot take %r", text, inline)
                invalid.append(text)
            continue

        if type is SwitchType.COUNT:
            if inline is None:
                values[name] = values.get(name, 0) + 1
            else:
                logger.debug("count switch %r cannot take %r", text, inline)
                invalid.append(text)
            continue

        if inline is None:
            if not tokens or not _takes(tokens[0]):
                logger.debug("switch %r is missing its value", text)
                invalid.append(text)
                continue
            inline = tokens.popleft()

        ok, value = _coerce(type, inline)
        if ok:
            values[name] = value
        else:
            logger.debug("cannot coerce %r for %s switch %r", inline, type, text)
            invalid.append(text)

    return Tokens(values, invalid, rest)


__all__ = (
    "Tokens",
    "Tokenizer",
    "tokenize",
)
