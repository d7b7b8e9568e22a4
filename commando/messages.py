"""
Commando message rendering: help text and fault messages.

All renderers return plain strings (no styling, no trailing newline) so that
outcomes compare and print predictably; rich styling is layered on top by the
outcome types.

Help layout
    demo - Short demo app

    Arguments:
      --path, -p : (Required) Some path (Default: "path")
      --help, -h : Print help message

    Example: python -m demo
"""
import json

from .switches import SwitchSpec


def spelling(name, /):
    """
    command-line spelling of a switch name (dry_run → --dry-run).
    """
    return "--" + name.replace("_", "-")


def inspect_value(value, /):
    """
    canonical textual form of a default value in help messages.

    - str: double-quoted with escapes ("path")
    - bool: true / false
    - None: nil
    - list / tuple: [a, b]
    - anything else: repr()
    """
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "nil"
    if isinstance(value, list | tuple):
        return "[%s]" % ", ".join(map(inspect_value, value))
    return repr(value)


def _describe(spec, name, /):
    names = ", ".join([spelling(name), *("-" + alias for alias in spec.aliases_of(name))])
    parts = []
    if name in spec.required:
        parts.append("(Required)")
    if description := spec.descriptions.get(name, ""):
        parts.append(description)
    if name in spec.defaults:
        parts.append("(Default: %s)" % inspect_value(spec.defaults[name]))
    return "  %s : %s" % (names, " ".join(parts))


def render_help(spec, /):
    """
    render the help message of `spec`.

    the header omits " - <description>" when the application has no
    description, and the "Example:" footer is left out when there is no
    example. switches are listed in declaration order.
    """
    if not isinstance(spec, SwitchSpec):
        raise TypeError("render_help() argument must be a SwitchSpec")

    lines = [spec.name + (" - " + spec.description if spec.description else ""), "", "Arguments:"]
    lines.extend(_describe(spec, name) for name in spec.switches)
    if spec.example:
        lines.extend(["", "Example: " + spec.example])
    return "\n".join(lines)


def render_invalid_options(tokens, /):
    """
    "Unknown options: --a -b", tokens in the order they were reported.
    """
    return "Unknown options: " + " ".join(tokens)


def render_missing_options(names, /):
    """
    "Missing required options: --a, --b", names in required-list order.
    """
    return "Missing required options: " + ", ".join(map(spelling, names))


__all__ = (
    "spelling",
    "inspect_value",
    "render_help",
    "render_invalid_options",
    "render_missing_options",
)
