from operator import itemgetter
from typing import Any, Mapping, Protocol

from flexaxis.types import Str2Tuple, Str4Tuple

#################### Itemgetters ###########################

StyleRecord = Mapping[str, Any]


class T4Getter(Protocol):
    def __call__(self, input: StyleRecord) -> Str4Tuple:
        ...


class T2Getter(Protocol):
    def __call__(self, input: StyleRecord) -> Str2Tuple:
        ...


directions = ("top", "right", "bottom", "left")

# fmt: off
pad_keys: Str4Tuple = tuple(f"padding-{k}" for k in directions)  # type: ignore[assignment]
gap_keys: Str2Tuple = ("row-gap", "column-gap")

pad_getter: T4Getter = itemgetter(*pad_keys)    # type: ignore[assignment]
gap_getter: T2Getter = itemgetter(*gap_keys)    # type: ignore[assignment]
# fmt: on
####################################################################

__all__ = [
    "directions",
    "pad_keys",
    "gap_keys",
    "pad_getter",
    "gap_getter",
]
