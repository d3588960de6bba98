from __future__ import annotations

import pytest

from page_organizer.exceptions import UnknownSorterError
from page_organizer.sorters import (
    SORTERS,
    SortPreset,
    available_presets,
    booklet_sort,
    duplex_sort,
    get_sorter,
    odd_even_split,
    remove_first,
    remove_first_and_last,
    remove_last,
    resolve_preset,
    reverse_order,
    side_stitch_booklet_sort,
)

PAGE_COUNTS = range(0, 13)


def test_registry_covers_every_preset() -> None:
    assert set(SORTERS) == set(SortPreset)
    assert available_presets() == [
        "REVERSE_ORDER",
        "DUPLEX_SORT",
        "BOOKLET_SORT",
        "SIDE_STITCH_BOOKLET_SORT",
        "ODD_EVEN_SPLIT",
        "REMOVE_FIRST",
        "REMOVE_LAST",
        "REMOVE_FIRST_AND_LAST",
    ]


def test_registry_is_read_only() -> None:
    with pytest.raises(TypeError):
        SORTERS[SortPreset.REVERSE_ORDER] = remove_first  # type: ignore[index]


def test_get_sorter_by_name() -> None:
    assert get_sorter("REVERSE_ORDER") is reverse_order
    assert get_sorter("duplex_sort") is duplex_sort
    assert get_sorter(SortPreset.BOOKLET_SORT) is booklet_sort
    assert resolve_preset(" odd_even_split ") is SortPreset.ODD_EVEN_SPLIT


@pytest.mark.parametrize("name", ["", "SHUFFLE", "CUSTOM_PAGE_ORDER", "REVERSE ORDER"])
def test_unknown_sorter(name: str) -> None:
    with pytest.raises(UnknownSorterError) as excinfo:
        get_sorter(name)
    assert excinfo.value.name == name


def test_reverse_order() -> None:
    assert reverse_order(4) == [3, 2, 1, 0]
    assert reverse_order(1) == [0]
    assert reverse_order(0) == []


def test_duplex_sort() -> None:
    assert duplex_sort(5) == [0, 4, 1, 3, 2]
    assert duplex_sort(6) == [0, 5, 1, 4, 2, 3]
    assert duplex_sort(1) == [0]
    assert duplex_sort(0) == []


def test_booklet_sort() -> None:
    assert booklet_sort(8) == [0, 7, 1, 6, 2, 5, 3, 4]
    assert booklet_sort(5) == [0, 4, 1, 3, 2]
    assert booklet_sort(1) == [0]
    assert booklet_sort(0) == []


def test_side_stitch_booklet_sort() -> None:
    assert side_stitch_booklet_sort(4) == [3, 0, 1, 2]
    assert side_stitch_booklet_sort(8) == [3, 0, 1, 2, 7, 4, 5, 6]
    assert side_stitch_booklet_sort(6) == [3, 0, 1, 2, 5, 4, 5, 5]
    assert side_stitch_booklet_sort(1) == [0, 0, 0, 0]
    assert side_stitch_booklet_sort(0) == []


def test_odd_even_split() -> None:
    assert odd_even_split(5) == [0, 2, 4, 1, 3]
    assert odd_even_split(6) == [0, 2, 4, 1, 3, 5]
    assert odd_even_split(0) == []


def test_remove_presets() -> None:
    assert remove_first(4) == [1, 2, 3]
    assert remove_last(4) == [0, 1, 2]
    assert remove_first_and_last(4) == [1, 2]
    assert remove_first_and_last(2) == []


@pytest.mark.parametrize("n", PAGE_COUNTS)
def test_remove_first_length(n: int) -> None:
    order = remove_first(n)
    assert len(order) == max(n - 1, 0)
    assert 0 not in order


@pytest.mark.parametrize("n", PAGE_COUNTS)
def test_degenerate_counts_stay_in_range(n: int) -> None:
    for preset in SortPreset:
        order = preset.sort(n)
        assert all(0 <= index < n for index in order), preset


@pytest.mark.parametrize("n", PAGE_COUNTS)
def test_booklet_is_a_permutation(n: int) -> None:
    assert sorted(booklet_sort(n)) == list(range(n))


@pytest.mark.parametrize("n", PAGE_COUNTS)
def test_permuting_presets(n: int) -> None:
    for preset in (SortPreset.REVERSE_ORDER, SortPreset.DUPLEX_SORT, SortPreset.ODD_EVEN_SPLIT):
        assert sorted(preset.sort(n)) == list(range(n)), preset


def test_sorters_are_deterministic() -> None:
    for preset in SortPreset:
        assert preset.sort(11) == preset.sort(11)
