import flexaxis.config

from .axis import (BoxLayoutDescriptor, ParsedAxis, TokenPattern,
                   UnparseableAxisSpec, parse_axis_spec, resolve, resolve_props)
from .Element import Flex
from .Style import compute_style, flex_style, format_style


def set_config(**kwargs):
    """
    Updates the global settings

    ```py
    set_config(strict=True, error_log="flex_errors.log")
    ```
    """
    unknown = kwargs.keys() - flexaxis.config.g.keys()
    if unknown:
        raise KeyError(f"Unknown settings: {', '.join(sorted(unknown))}")
    flexaxis.config.g.update(kwargs)


__all__ = [
    # core
    "parse_axis_spec",
    "resolve",
    "resolve_props",
    "ParsedAxis",
    "BoxLayoutDescriptor",
    "TokenPattern",
    "UnparseableAxisSpec",
    # rendering
    "Flex",
    "flex_style",
    "compute_style",
    "format_style",
    # config
    "set_config",
]
