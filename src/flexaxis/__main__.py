import sys

from flexaxis import Flex, format_style

USAGE = "Usage: python -m flexaxis [--html] x=<axis spec> y=<axis spec> [debug] [inline] [wrap] [flex=<flex>]"


# the props that can be given without a value
bare_props = ("x", "y", "debug", "inline", "wrap")


def parse_arg(arg: str) -> tuple[str, str | bool]:
    """`x=4px center` -> ("x", "4px center") and a bare `x` -> ("x", True)"""
    key, sep, value = arg.partition("=")
    if not sep and key not in bare_props:
        raise ValueError(f"{key} needs a value")
    return key, value if sep else True


def main(args: list[str]) -> str:
    match args:
        case []:
            return USAGE
        case l if "-h" in l or "--help" in l:
            return USAGE
        case ["--html", *props]:
            html = True
        case props:
            html = False
    try:
        elem = Flex.from_props(**dict(map(parse_arg, props)))
    except (TypeError, ValueError):
        return USAGE
    return elem.to_html() if html else format_style(elem.cstyle)


def cli():
    print(main(sys.argv[1:]))


if __name__ == "__main__":
    cli()
