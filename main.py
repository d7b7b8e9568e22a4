import sys

from rich.console import Console

from commando import *

spec = (
    create("demo", "Short demo app", "python main.py --path ./src -vv")
    .add_help_switch()
    .add_switch("path", "string", "Some path", required=True, alias="p", default="path")
    .add_switch("verbose", "count", "Verbosity level", alias="v")
    .add_switch("dry_run", "boolean", "Do not write anything", default=False)
)


if __name__ == '__main__':
    match outcome := parse(spec, sys.argv[1:]):
        case Help() | Ok():
            Console().print(outcome)
        case Error():
            Console(stderr=True).print(outcome)
            sys.exit(1)
