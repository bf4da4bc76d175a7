"""
The Flex container

```py
Flex.from_props(x="4px center 4px", y="stretch")
Flex.from_props(y="4px stretch", x="center")  # y was declared first, so this is a column
```
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field

from markupsafe import Markup

from . import config
from .axis import BoxLayoutDescriptor, resolve
from .config import axes
from .Style import compute_style, format_style
from .types import AxisSpec, frozendict

flex_template = config.jinja_env.from_string(
    r"""{{ indentation }}<{{ tag }}{% if class_name %} class="{{ class_name }}"{% endif %} style="{{ style }}">
{%- if children -%}
{{ '\n' }}{{ children | join('\n') }}{{ '\n' }}{{ indentation }}
{%- endif -%}
</{{ tag }}>"""
)


@dataclass(repr=False)
class Flex:
    """
    A flex container that is layouted by two axis specs.

    `declared` are the axes in the order the caller declared them.
    If it is empty, it is derived from the axes that are set (x before y).
    """

    x: AxisSpec = None
    y: AxisSpec = None
    declared: tuple[str, ...] = ()
    children: list[Flex | str] = field(default_factory=list)
    class_name: str = ""
    style: str = ""  # extra declarations, these win over the generated ones
    debug: bool = False
    flex: str | None = None
    inline: bool = False
    wrap: bool = False

    tag = "div"

    def __post_init__(self):
        if not self.declared:
            self.declared = tuple(axis for axis in axes if getattr(self, axis) is not None)

    @classmethod
    def from_props(cls, *children: Flex | str, **props):
        """
        The order of the keyword arguments is the declaration order
        """
        declared = tuple(key for key in props if key in axes)
        return cls(declared=declared, children=list(children), **props)

    @property
    def descriptor(self) -> BoxLayoutDescriptor:
        return resolve(self.x, self.y, self.declared)

    @property
    def cstyle(self) -> frozendict[str, str]:
        """The computed style"""
        return compute_style(
            self.descriptor,
            self.style,
            debug=self.debug,
            inline=self.inline,
            wrap=self.wrap,
            flex=self.flex,
        )

    def to_html(self, indent=0):
        """Convert the element to formatted html"""
        logging.debug(f"Rendering {self.tag} with {self.declared}")
        return flex_template.render(
            tag=self.tag,
            indentation=" " * indent,
            class_name=self.class_name,
            style=format_style(self.cstyle),
            children=[
                Markup(c.to_html(indent + 2)) if isinstance(c, Flex) else " " * (indent + 2) + c
                for c in self.children
            ],
        )

    __repr__ = to_html

    def __str__(self):
        return f"<{self.tag}>"
