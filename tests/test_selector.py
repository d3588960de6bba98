from __future__ import annotations

import pytest

from page_organizer.exceptions import InvalidSelectorSyntaxError, PageOutOfRangeError
from page_organizer.selector import (
    classify_token,
    invert_selection,
    parse_selector,
    tokenize_selector,
    validate_page_indices,
)
from page_organizer.types import AllPages, LinearTerm, PageSpan, SinglePage


def test_all_expands_to_every_page() -> None:
    assert parse_selector("all", 5) == [0, 1, 2, 3, 4]
    assert parse_selector("ALL", 3) == [0, 1, 2]
    assert parse_selector(" All ", 0) == []


def test_ranges_are_inclusive_and_clamped() -> None:
    assert parse_selector("1-3", 10) == [0, 1, 2]
    assert parse_selector("1-20", 10) == list(range(10))
    assert parse_selector("4-4", 10) == [3]


def test_range_starting_past_the_end_selects_nothing() -> None:
    assert parse_selector("15-20", 10) == []


@pytest.mark.parametrize("token", ["5-3", "0-3", "3-", "-3", "a-b", "1-2-3"])
def test_malformed_ranges_raise(token: str) -> None:
    with pytest.raises(InvalidSelectorSyntaxError) as excinfo:
        parse_selector(token, 10)
    assert excinfo.value.token == token


@pytest.mark.parametrize(
    "selector, expected",
    [
        ("2n-1", [0, 2, 4, 6, 8]),
        ("2n", [1, 3, 5, 7, 9]),
        ("3n", [2, 5, 8]),
        ("n", list(range(10))),
        ("+n", list(range(10))),
        ("n+7", [7, 8, 9]),
        ("+7", [7, 8, 9]),
        ("n-8", [0, 1]),
        ("4n+1", [4, 8]),
        ("0n+3", [2] * 10),
    ],
)
def test_linear_terms(selector: str, expected: list[int]) -> None:
    assert parse_selector(selector, 10) == expected


def test_linear_term_tokens() -> None:
    assert classify_token("2n-1") == LinearTerm(coefficient=2, constant=-1)
    assert classify_token("n") == LinearTerm()
    assert classify_token("n+3") == LinearTerm(constant=3)
    assert classify_token("5n") == LinearTerm(coefficient=5)
    assert classify_token("+4") == LinearTerm(constant=4)
    assert classify_token("10n") == LinearTerm(coefficient=10)


def test_token_dispatch_order() -> None:
    assert classify_token("all") == AllPages()
    assert classify_token("n-1") == LinearTerm(constant=-1)
    assert classify_token("2-6") == PageSpan(2, 6)
    assert classify_token("7") == SinglePage(7)
    assert classify_token(" 1 - 3 ") == PageSpan(1, 3)


def test_single_pages_are_not_bounds_checked() -> None:
    assert parse_selector("12", 10) == [11]
    assert parse_selector("0", 10) == [-1]


def test_order_and_duplicates_are_preserved() -> None:
    assert parse_selector("3,1-2,3", 5) == [2, 0, 1, 2]
    assert parse_selector("1-3,2n", 6) == [0, 1, 2, 1, 3, 5]
    assert parse_selector("all,1", 3) == [0, 1, 2, 0]


def test_empty_tokens_are_skipped() -> None:
    assert parse_selector("1,,3,", 5) == [0, 2]


@pytest.mark.parametrize("selector", ["", "   ", ",", " , "])
def test_empty_selectors_raise(selector: str) -> None:
    with pytest.raises(InvalidSelectorSyntaxError):
        parse_selector(selector, 5)


@pytest.mark.parametrize("token", ["abc", "1.5", "n2", "2n+", "-2n+1", "first", "²", "1²", "٣", "1-٣"])
def test_unparseable_tokens_raise(token: str) -> None:
    with pytest.raises(InvalidSelectorSyntaxError):
        tokenize_selector(f"1,{token}")


def test_parse_is_deterministic() -> None:
    selector = "all,2n-1,3-5,2"
    assert parse_selector(selector, 9) == parse_selector(selector, 9)


def test_validate_page_indices_accepts_in_range_and_empty() -> None:
    assert validate_page_indices([0, 4, 4, 2], 5) == [0, 4, 4, 2]
    assert validate_page_indices([], 0) == []
    assert validate_page_indices(iter([1, 0]), 2) == [1, 0]


def test_validate_page_indices_reports_highest_offender() -> None:
    with pytest.raises(PageOutOfRangeError) as excinfo:
        validate_page_indices([0, 11, 14, 2], 10)
    assert excinfo.value.index == 14
    assert excinfo.value.total_pages == 10
    assert "only has 10 pages" in str(excinfo.value)
    assert "page 15" in str(excinfo.value)


def test_validate_page_indices_rejects_negative_indices() -> None:
    with pytest.raises(PageOutOfRangeError) as excinfo:
        validate_page_indices(parse_selector("0,1", 3), 3)
    assert excinfo.value.index == -1


def test_invert_selection() -> None:
    assert invert_selection([1, 3], 5) == [0, 2, 4]
    assert invert_selection([3, 1, 1, 3], 5) == [0, 2, 4]
    assert invert_selection([], 3) == [0, 1, 2]
    assert invert_selection([0, 1, 2], 3) == []
    assert invert_selection([7], 2) == [0, 1]
    assert invert_selection([0], 0) == []


@pytest.mark.parametrize("selector", ["1 2", "1 2-5", "3-4 5", "2 1n"])
def test_whitespace_between_numbers_raises(selector: str) -> None:
    with pytest.raises(InvalidSelectorSyntaxError):
        parse_selector(selector, 20)


def test_whitespace_around_operators_is_ignored() -> None:
    assert parse_selector(" 2 n - 1 , 1 - 3 , + 4 ", 6) == [0, 2, 4, 0, 1, 2, 4, 5]
