from typing import Callable, Iterable

from flexaxis.types import K_T, V_T


########################## Misc #########################
def make_default(value: V_T | None, default: V_T) -> V_T:
    """
    If the `value` is None this returns `default` else it returns `value`

    `make_default(strict, g["strict"])`
    """
    return default if value is None else value


def find(__iterable: Iterable[V_T], key: Callable[[V_T], bool]):
    """
    Find the first element in the iterable that is accepted by the key
    """
    for x in __iterable:
        if key(x):
            return x


def filter_dvals(d: dict[K_T, V_T], key: Callable[[V_T], bool] = bool) -> dict[K_T, V_T]:
    """
    Only keeps the items of a dictionary whose values are accepted by the key
    """
    return {k: v for k, v in d.items() if key(v)}
