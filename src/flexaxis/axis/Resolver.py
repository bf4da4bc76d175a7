"""
Merges the two parsed axes into one box layout

The primary axis is the axis that was declared first. It decides the flex-direction,
its alignment becomes the main axis alignment (justify-content) and the other axis
gives the cross axis alignment (align-items).

The padding does not care about the primary axis: the vertical padding always comes
from the y axis and the horizontal padding always from the x axis.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping

from flexaxis.axis.Parser import ParsedAxis, parse_axis_spec
from flexaxis.config import axes, default_axis, default_length, directions
from flexaxis.types import Axis, AxisSpec, Direction, Str4Tuple
from flexaxis.utils import find, make_default


@dataclass(frozen=True)
class BoxLayoutDescriptor:
    direction: Direction
    main_alignment: str | None
    cross_alignment: str | None
    padding: Str4Tuple  # top, right, bottom, left
    gap: str | None
    display: str = "flex"

    @property
    def padding_shorthand(self) -> str:
        return " ".join(self.padding)


def primary_axis(declared: Iterable[str]) -> Axis:
    """
    The axis that appears first in `declared`. Other keys are ignored.
    """
    return make_default(find(declared, lambda key: key in axes), default_axis)


def merge_gap(
    primary: ParsedAxis, secondary: ParsedAxis, x: ParsedAxis, y: ParsedAxis
) -> str | None:
    """
    A gap only on the primary axis stays a single value.
    As soon as the secondary axis has a gap, the result is "<y-gap> <x-gap>"
    and a missing gap counts as 0.
    """
    if secondary.gap is not None:
        return f"{make_default(y.gap, default_length)} {make_default(x.gap, default_length)}"
    return primary.gap


def resolve(
    x: AxisSpec = None,
    y: AxisSpec = None,
    declared: Iterable[str] = (),
    strict: bool | None = None,
) -> BoxLayoutDescriptor:
    """
    Resolves the axis specs into a BoxLayoutDescriptor.

    `declared` are the keys in the order the caller declared them,
    for example `["y", "x"]` makes y the primary axis.

    ```py
    resolve("4px 5px center 4px", "4px 6px stretch", ["x", "y"])
    ```
    """
    parsed = {"x": parse_axis_spec(x, strict), "y": parse_axis_spec(y, strict)}
    primary = primary_axis(declared)
    secondary = "y" if primary == "x" else "x"
    x_axis, y_axis = parsed["x"], parsed["y"]
    padding_top, padding_bottom = y_axis.padding
    padding_left, padding_right = x_axis.padding
    return BoxLayoutDescriptor(
        direction=directions[primary],
        main_alignment=parsed[primary].alignment,
        cross_alignment=parsed[secondary].alignment,
        padding=(padding_top, padding_right, padding_bottom, padding_left),
        gap=merge_gap(parsed[primary], parsed[secondary], x_axis, y_axis),
    )


def resolve_props(
    props: Mapping[str, AxisSpec], strict: bool | None = None
) -> BoxLayoutDescriptor:
    """
    Resolves a mapping like `{"y": "stretch", "x": "4px center"}`.
    The insertion order of the mapping is the declaration order.
    """
    return resolve(props.get("x"), props.get("y"), list(props), strict)
