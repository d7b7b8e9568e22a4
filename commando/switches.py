"""
Commando switch specifications (the builder side of the library).

Overview
- SwitchType: the five switch kinds understood by the tokenizer.
  • boolean, count → take no value
  • integer, float, string → take exactly one value
- SwitchSpec: immutable description of an application's switches.
  • app metadata: name, description, example
  • tables: switches (name → type), defaults, descriptions, aliases (alias → name)
  • required: ordered names of switches that must be supplied
- create / add_switch / add_help_switch: functional builder API. Every call
  returns a new SwitchSpec; the receiver is never modified.

Tables are insertion-ordered. Re-adding a key replaces its value in place, so
the help message keeps the order in which switches were first declared.

Quick example:
    >>> from commando import create
    >>> spec = (
    ...     create("demo", "Short demo app", "python -m demo")
    ...     .add_help_switch()
    ...     .add_switch("path", "string", "Some path", required=True, alias="p", default="path")
    ... )
    >>> spec.required
    ('path',)
"""
import copy
import re
from enum import StrEnum

from .utils import *


class SwitchType(StrEnum):
    """
    switch kinds, shared with the tokenizer.

    the kind decides how many values a switch consumes and how its raw text
    is coerced:
    - BOOLEAN: no value; True when present (False with the "--no-" prefix).
    - COUNT: no value; number of occurrences.
    - INTEGER / FLOAT / STRING: one value, inline (--name=value) or spaced (--name value).
    """
    BOOLEAN = "boolean"
    COUNT   = "count"
    INTEGER = "integer"
    FLOAT   = "float"
    STRING  = "string"


def _sanitize_identifier(kind, name, /):
    # switch names and aliases become result keys, so they follow identifier rules
    if not isinstance(name, str):
        raise TypeError(f"switch {kind} must be a string")
    elif not re.fullmatch(r"[^\W\d]\w*", name):
        raise ValueError(f"switch {kind} must be a valid identifier, got {name!r}")
    return name


def _sanitize_type(type, /):
    if not isinstance(type, str):
        raise TypeError("switch type must be a string or a SwitchType")
    try:
        return SwitchType(type)
    except ValueError:
        raise ValueError(f"unknown switch type {type!r}, expected one of: {
            ", ".join(map(str, SwitchType))
        }") from None


def _sanitize_text(kind, text, /):
    if not isinstance(text, str):
        raise TypeError(f"{kind} must be a string")
    return text


class SwitchSpec:
    """
    Immutable specification of the switches accepted by an application.

    A SwitchSpec is a value: builder methods (add_switch, add_help_switch)
    return a new spec via copy.replace(), leaving the receiver untouched, so a
    single spec can be shared or reused across any number of parse calls.

    Attributes (read-only views)
    - name, description, example: application metadata used by the help message.
    - switches: Mapping[str, SwitchType], in declaration order.
    - defaults: Mapping[str, object], injected into successful results.
    - descriptions: Mapping[str, str], shown in the help message.
    - aliases: Mapping[str, str], alias → switch name.
    - required: tuple[str, ...], in declaration order.

    The four tables are keyed independently; a well-formed spec populates them
    together through add_switch, but nothing enforces it.
    """
    __slots__ = (
        "_name",
        "_description",
        "_example",
        "_switches",
        "_defaults",
        "_descriptions",
        "_aliases",
        "_required",
    )

    name = view("name")
    description = view("description")
    example = view("example")
    switches = view("switches")
    defaults = view("defaults")
    descriptions = view("descriptions")
    aliases = view("aliases")
    required = view("required")

    def __init__(
            self,
            name,
            description="",
            example="",
            *,
            switches=(),
            defaults=(),
            descriptions=(),
            aliases=(),
            required=(),
    ):
        self._name = _sanitize_text("application name", name)
        self._description = _sanitize_text("application description", description)
        self._example = _sanitize_text("application example", example)
        # private copies, so views handed out earlier can never observe a change
        self._switches = dict(switches)
        self._defaults = dict(defaults)
        self._descriptions = dict(descriptions)
        self._aliases = dict(aliases)
        self._required = list(required)

    def __replace__(self, /, **changes):
        fields = {
            "name": self._name,
            "description": self._description,
            "example": self._example,
            "switches": self._switches,
            "defaults": self._defaults,
            "descriptions": self._descriptions,
            "aliases": self._aliases,
            "required": self._required,
        } | changes
        return type(self)(
            fields.pop("name"),
            fields.pop("description"),
            fields.pop("example"),
            **fields,
        )

    def __eq__(self, other, /):
        if not isinstance(other, SwitchSpec):
            return NotImplemented
        return self._ordered() == other._ordered()

    __hash__ = None

    def _ordered(self):
        # declaration order drives the help message, so it is part of the value
        return (
            self._name,
            self._description,
            self._example,
            tuple(self._switches.items()),
            tuple(self._defaults.items()),
            tuple(self._descriptions.items()),
            tuple(self._aliases.items()),
            tuple(self._required),
        )

    def __rich_repr__(self):
        yield "name", self.name
        yield "description", self.description
        yield "example", self.example
        yield "switches", dict(self._switches)
        yield "defaults", dict(self._defaults)
        yield "descriptions", dict(self._descriptions)
        yield "aliases", dict(self._aliases)
        yield "required", self.required

    def __repr__(self):
        return f"{type(self).__name__}({
            ", ".join("%s=%r" % pair for pair in self.__rich_repr__())
        })"

    def aliases_of(self, name, /):
        """
        return the aliases resolving to `name`, in the order they were added.
        """
        return tuple(alias for alias, target in self._aliases.items() if target == name)

    def add_switch(self, name, type, description="", *, default=Unset, alias=Unset, required=False):
        """
        return a new spec with the switch `name` registered.

        parameters
        - name: str
          canonical switch name; also the key in parse results. underscores are
          typed as dashes on the command line (dry_run → --dry-run).
        - type: SwitchType | str
          one of "boolean", "count", "integer", "float", "string".
        - description: str
          shown next to the switch in the help message.
        - default: any (keyword-only)
          value injected into successful results when the switch is absent.
          None is a valid default; omit the parameter for "no default".
        - alias: str (keyword-only)
          one short name (e.g. "p" for -p). call again with another alias to
          add more; earlier aliases are kept.
        - required: bool (keyword-only)
          when True, parsing fails if the switch is not supplied. passing False
          never removes an earlier requirement.

        configuration is applied in a fixed order: default, alias, required.
        """
        name = _sanitize_identifier("name", name)
        type = _sanitize_type(type)
        description = _sanitize_text("switch description", description)
        if not isinstance(required, bool):
            raise TypeError("switch 'required' must be a boolean")

        switches = self._switches | {name: type}
        descriptions = self._descriptions | {name: description}
        defaults = self._defaults
        aliases = self._aliases
        requirements = self._required

        if default is not Unset:
            defaults = defaults | {name: default}
        if alias is not Unset:
            aliases = aliases | {_sanitize_identifier("alias", alias): name}
        if required and name not in requirements:
            requirements = requirements + [name]

        return copy.replace(
            self,
            switches=switches,
            descriptions=descriptions,
            defaults=defaults,
            aliases=aliases,
            required=requirements,
        )

    def add_help_switch(self):
        """
        return a new spec with the standard --help/-h boolean switch.

        callers check the parse outcome: a Help outcome carries the rendered
        help message, ready to be printed.
        """
        return self.add_switch("help", SwitchType.BOOLEAN, "Print help message", alias="h")

    def parse(self, args, /, **options):
        """
        shortcut for commando.reconciler.parse(self, args, **options).
        """
        from .reconciler import parse
        return parse(self, args, **options)

    def help_message(self):
        """
        shortcut for commando.messages.render_help(self).
        """
        from .messages import render_help
        return render_help(self)


def create(name, description="", example="", /):
    """
    create an empty spec for the application `name`.

    examples
    - create("app").name                                -> "app"
    - create("app", "Doc test app").description         -> "Doc test app"
    - create("app", "Doc test app", "mix run").example  -> "mix run"
    """
    return SwitchSpec(name, description, example)


def add_switch(spec, name, type, description="", /, **options):
    """
    functional form of SwitchSpec.add_switch.
    """
    if not isinstance(spec, SwitchSpec):
        raise TypeError("add_switch() first argument must be a SwitchSpec")
    return spec.add_switch(name, type, description, **options)


def add_help_switch(spec, /):
    """
    functional form of SwitchSpec.add_help_switch.
    """
    if not isinstance(spec, SwitchSpec):
        raise TypeError("add_help_switch() argument must be a SwitchSpec")
    return spec.add_help_switch()


__all__ = (
    "SwitchType",
    "SwitchSpec",
    "create",
    "add_switch",
    "add_help_switch",
)
