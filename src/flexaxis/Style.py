"""
The style record of a Flex container.

`flex_style` turns a BoxLayoutDescriptor and the rendering flags into css declarations.
`compute_style` merges them with caller-supplied declarations, longhand by longhand.
"""
from __future__ import annotations

from typing import Mapping

from .axis import BoxLayoutDescriptor
from .config import css_alignments, g
from .style.itemgetters import *
from .style.Parser import parse_inline_style
from .types import BugError, frozendict
from .utils import filter_dvals, log_error, log_error_once, split_value, to_hex

# A Style maps a css-property to its value
Style = Mapping[str, str]

dir_shorthands: dict[str, tuple[str, ...]] = {
    "padding": pad_keys,
    "gap": gap_keys,
}
dir_getters = {
    "padding": pad_getter,
    "gap": gap_getter,
}


def flex_style(
    descriptor: BoxLayoutDescriptor,
    *,
    debug: bool = False,
    inline: bool = False,
    wrap: bool = False,
    flex: str | None = None,
) -> frozendict[str, str]:
    """
    Takes a BoxLayoutDescriptor and the rendering flags and returns the css declarations.
    Declarations without a value are left out.
    """
    color = to_hex(g["debug_color"])
    for key, alignment in (
        ("align-items", descriptor.cross_alignment),
        ("justify-content", descriptor.main_alignment),
    ):
        if alignment and alignment not in css_alignments:
            log_error_once(f"Unknown alignment found: {key}: {alignment}")
    style = {
        "outline": debug and f"{g['debug_outline']} {color}",
        "box-shadow": debug and f"{g['debug_shadow']} {color}",
        "flex": flex,
        "display": "inline-flex" if inline else descriptor.display,
        "flex-wrap": wrap and "wrap",
        "flex-direction": descriptor.direction,
        "align-items": descriptor.cross_alignment,
        "justify-content": descriptor.main_alignment,
        "padding": descriptor.padding_shorthand,
        "gap": descriptor.gap,
    }
    return frozendict(filter_dvals(style))


def process_dir(value: list[str], n: int = 4) -> list[str]:
    """
    Takes a split direction shorthand and returns the n resulting values
    """
    _len = len(value)
    assert 0 < _len <= n, f"Wrong number of values: {_len}/{n}"
    if n == 4 and _len == 3:
        return [*value, value[1]]
    assert not n % _len, f"Wrong number of values: {_len}/{n}"
    return value * (n // _len)


def process_property(key: str, value: str) -> list[tuple[str, str]] | str:
    """
    Processes a single Property
    If this returns a list the property was a shorthand and these are its longhands
    """
    if (keys := dir_shorthands.get(key)) is not None:
        return list(zip(keys, process_dir(split_value(value), len(keys))))
    return value


def expand_shorthands(style: Style) -> dict[str, str]:
    """
    Unpacks the padding and gap shorthands and reports invalid ones.
    """
    done: dict[str, str] = {}
    for k, v in style.items():
        try:
            processed = process_property(k, v)
        except BugError:
            raise
        except AssertionError as e:
            reason = e.args[0] if e.args else "Invalid Property"
            log_error(f"CSS: {reason} ({k}: {v})")
            continue
        if isinstance(processed, list):
            done.update(processed)
        else:
            done[k] = processed
    return done


def pack_dir(longhands: list[str]) -> str:
    """
    The shortest shorthand for the given longhands
    """
    match longhands:
        case [w, x, y, z] if w == x == y == z:  # 0
            return w
        case [w1, x1, w2, x2] if w1 == w2 and x1 == x2:  # 0 1
            return f"{w1} {x1}"
        case [w, x1, y, x2] if x1 == x2:  # 0 1 2
            return f"{w} {x1} {y}"
        case [x, y] if x == y:
            return x
        case _:
            return " ".join(longhands)


def pack_longhands(style: Style) -> dict[str, str]:
    """
    Pack longhands back into their shorthands for readability.
    The shorthand takes the place of its first longhand.
    """
    d = dict(style)
    for shorthand, keys in dir_shorthands.items():
        if any(k not in d for k in keys):
            continue
        value = pack_dir(list(dir_getters[shorthand](d)))
        first, *rest = keys
        d = {
            (shorthand if k == first else k): (value if k == first else v)
            for k, v in d.items()
            if k not in rest
        }
    return d


def join_styles(style1: Style, style2: Style) -> frozendict[str, str]:
    """
    Join two styles. Prefers the first
    """
    fused = dict(style2)
    fused.update(style1)
    return frozendict(fused)


def format_style(style: Style) -> str:
    """
    Format a style for a style attribute
    """
    return "; ".join(f"{k}: {v}" for k, v in style.items())


def compute_style(
    descriptor: BoxLayoutDescriptor, extra: str = "", **flags
) -> frozendict[str, str]:
    """
    The style of a flex container: the generated declarations overwritten by the extra declarations.
    Both are expanded first, so `padding-top: 10px` only replaces the top padding.
    The result is packed into the shortest shorthands again.
    """
    fused = join_styles(
        expand_shorthands(parse_inline_style(extra)),
        expand_shorthands(flex_style(descriptor, **flags)),
    )
    return frozendict(pack_longhands(fused))


__all__ = [
    "Style",
    "dir_shorthands",
    "flex_style",
    "process_dir",
    "process_property",
    "expand_shorthands",
    "pack_dir",
    "pack_longhands",
    "join_styles",
    "format_style",
    "compute_style",
    "parse_inline_style",
]
