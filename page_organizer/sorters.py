"""Named page reordering presets.

Every sorter maps a page count to zero-based source indices in output
order. They are total over ``total_pages >= 0``.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import List, Mapping, Union

from .exceptions import UnknownSorterError
from .types import PageOrder, Sorter


def reverse_order(total_pages: int) -> PageOrder:
    return list(range(total_pages - 1, -1, -1))


def duplex_sort(total_pages: int) -> PageOrder:
    """Interleave the front half with the back half read backwards.

    Meant for documents scanned one side at a time: the first half holds
    the fronts in order, the second half the backs in reverse.
    """

    order: PageOrder = []
    half = (total_pages + 1) // 2
    for i in range(1, half + 1):
        order.append(i - 1)
        if i <= total_pages - half:
            order.append(total_pages - i)
    return order


def booklet_sort(total_pages: int) -> PageOrder:
    """Pair outer pages with inner ones, ``0, n-1, 1, n-2, ...``.

    The middle page of an odd count is emitted once.
    """

    order: PageOrder = []
    for i in range((total_pages + 1) // 2):
        order.append(i)
        mirror = total_pages - i - 1
        if mirror != i:
            order.append(mirror)
    return order


def side_stitch_booklet_sort(total_pages: int) -> PageOrder:
    """Reorder in sheets of four as ``4, 1, 2, 3`` (one-based).

    Positions past the last page of a partial final sheet repeat the last
    page.
    """

    order: PageOrder = []
    last = total_pages - 1
    for sheet in range((total_pages + 3) // 4):
        begin = sheet * 4
        order.append(min(begin + 3, last))
        order.append(min(begin, last))
        order.append(min(begin + 1, last))
        order.append(min(begin + 2, last))
    return order


def odd_even_split(total_pages: int) -> PageOrder:
    return list(range(0, total_pages, 2)) + list(range(1, total_pages, 2))


def remove_first(total_pages: int) -> PageOrder:
    return list(range(1, total_pages))


def remove_last(total_pages: int) -> PageOrder:
    return list(range(total_pages - 1))


def remove_first_and_last(total_pages: int) -> PageOrder:
    return list(range(1, total_pages - 1))


class SortPreset(str, Enum):
    """Registered page sort presets."""

    REVERSE_ORDER = "REVERSE_ORDER"
    DUPLEX_SORT = "DUPLEX_SORT"
    BOOKLET_SORT = "BOOKLET_SORT"
    SIDE_STITCH_BOOKLET_SORT = "SIDE_STITCH_BOOKLET_SORT"
    ODD_EVEN_SPLIT = "ODD_EVEN_SPLIT"
    REMOVE_FIRST = "REMOVE_FIRST"
    REMOVE_LAST = "REMOVE_LAST"
    REMOVE_FIRST_AND_LAST = "REMOVE_FIRST_AND_LAST"

    @property
    def sorter(self) -> Sorter:
        return SORTERS[self]

    def sort(self, total_pages: int) -> PageOrder:
        return self.sorter(total_pages)


SORTERS: Mapping[SortPreset, Sorter] = MappingProxyType(
    {
        SortPreset.REVERSE_ORDER: reverse_order,
        SortPreset.DUPLEX_SORT: duplex_sort,
        SortPreset.BOOKLET_SORT: booklet_sort,
        SortPreset.SIDE_STITCH_BOOKLET_SORT: side_stitch_booklet_sort,
        SortPreset.ODD_EVEN_SPLIT: odd_even_split,
        SortPreset.REMOVE_FIRST: remove_first,
        SortPreset.REMOVE_LAST: remove_last,
        SortPreset.REMOVE_FIRST_AND_LAST: remove_first_and_last,
    }
)


def resolve_preset(name: Union[str, SortPreset]) -> SortPreset:
    """Return the :class:`SortPreset` called ``name`` (case-insensitive)."""

    if isinstance(name, SortPreset):
        return name
    try:
        return SortPreset(str(name).strip().upper())
    except ValueError as exc:
        raise UnknownSorterError(name) from exc


def get_sorter(name: Union[str, SortPreset]) -> Sorter:
    """Look up the sorter registered under ``name``.

    Raises:
        UnknownSorterError: If no preset of that name exists.
    """

    return SORTERS[resolve_preset(name)]


def available_presets() -> List[str]:
    return [preset.value for preset in SortPreset]


__all__ = [
    "SortPreset",
    "SORTERS",
    "get_sorter",
    "resolve_preset",
    "available_presets",
    "reverse_order",
    "duplex_sort",
    "booklet_sort",
    "side_stitch_booklet_sort",
    "odd_even_split",
    "remove_first",
    "remove_last",
    "remove_first_and_last",
]
