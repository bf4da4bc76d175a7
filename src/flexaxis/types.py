"""
A single source of thruth for types that are used in the other modules.
Instead of importing Colors from pygame or frozendicts from frozendict, import them from here.
"""
from __future__ import annotations

import os
from enum import Enum as _Enum
from typing import Literal, TypeVar, Union

from frozendict import frozendict as frozendict

# no import banner on stdout
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
from pygame.color import Color as Color


class BugError(AssertionError):
    """A type of error that should never occur. If it occurs, something needs to be fixed. Please report any BugErrors found."""


# Aliases
##########################################################################

Axis = Literal["x", "y"]
Direction = Literal["row", "column"]
# A string in the shorthand grammar, True for "primary but unconfigured" or None for absent
AxisSpec = Union[str, bool, None]

Str2Tuple = tuple[str, str]
Str4Tuple = tuple[str, str, str, str]

K_T = TypeVar("K_T")
V_T = TypeVar("V_T")


class Enum(_Enum):
    def __repr__(self):
        return f"{self.__class__.__name__}.{self.name}"
