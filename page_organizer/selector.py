"""Page selector grammar.

A selector is a comma-separated list of one-based page expressions:

* ``all`` - every page in order
* ``2n-1``, ``3n``, ``n+4``, ``+n``, ``+4`` - arithmetic progressions
* ``3-7`` - an inclusive range, the end is clamped to the page count
* ``5`` - a single page

Tokens are expanded left to right and concatenated, so order and
duplicates are preserved: ``"3,1-2,3"`` yields ``[2, 0, 1, 2]``.
"""

from __future__ import annotations

import re
from typing import Iterable, List, Union

from .exceptions import InvalidSelectorSyntaxError, PageOutOfRangeError
from .types import AllPages, LinearTerm, PageOrder, PageSpan, SinglePage

SelectionToken = Union[AllPages, LinearTerm, PageSpan, SinglePage]

_LINEAR_PATTERN = re.compile(r"^(?P<coefficient>\d*)n(?P<constant>[+-]\d+)?$", re.ASCII)
_PLUS_N_PATTERN = re.compile(r"^\+n$")
_OFFSET_PATTERN = re.compile(r"^\+(?P<constant>\d+)$", re.ASCII)
_RANGE_PATTERN = re.compile(r"^(?P<start>\d+)-(?P<end>\d+)$", re.ASCII)
_PAGE_PATTERN = re.compile(r"^\d+$", re.ASCII)
_OPERATOR_SPACING = re.compile(r"\s*([-+n])\s*")


def _linear_term(token: str) -> LinearTerm | None:
    match = _LINEAR_PATTERN.match(token)
    if match:
        coefficient = match.group("coefficient")
        constant = match.group("constant")
        return LinearTerm(
            coefficient=int(coefficient) if coefficient else None,
            constant=int(constant) if constant else None,
        )
    if _PLUS_N_PATTERN.match(token):
        return LinearTerm()
    match = _OFFSET_PATTERN.match(token)
    if match:
        return LinearTerm(constant=int(match.group("constant")))
    return None


def classify_token(token: str) -> SelectionToken:
    """Classify a single selector token.

    Dispatch order is ``all``, then linear terms, then ranges (any token
    containing ``-``), then single page numbers.

    Raises:
        InvalidSelectorSyntaxError: If the token fits none of the forms, or
            is a range starting below page 1 or ending before it starts.
    """

    compact = _OPERATOR_SPACING.sub(r"\1", token.strip())

    if compact.lower() == "all":
        return AllPages()

    term = _linear_term(compact)
    if term is not None:
        return term

    if "-" in compact:
        match = _RANGE_PATTERN.match(compact)
        if not match:
            raise InvalidSelectorSyntaxError(
                token,
                f"Invalid page range format: '{token}'. Expected 'start-end'.",
            )
        start = int(match.group("start"))
        end = int(match.group("end"))
        if start < 1:
            raise InvalidSelectorSyntaxError(
                token,
                f"Invalid range '{token}': page numbers must be >= 1.",
            )
        if start > end:
            raise InvalidSelectorSyntaxError(
                token,
                f"Invalid range '{token}': start page ({start}) must be <= end page ({end}).",
            )
        return PageSpan(start, end)

    if not _PAGE_PATTERN.match(compact):
        raise InvalidSelectorSyntaxError(
            token,
            f"Invalid page number: '{token}'. Expected a positive integer.",
        )
    return SinglePage(int(compact))


def tokenize_selector(selector: str) -> List[SelectionToken]:
    """Split ``selector`` on commas and classify each non-empty token."""

    if selector is None or not selector.strip():
        raise InvalidSelectorSyntaxError(selector, "Page selector cannot be empty.")

    tokens = [classify_token(part) for part in selector.split(",") if part.strip()]
    if not tokens:
        raise InvalidSelectorSyntaxError(selector, "Page selector contains no pages.")
    return tokens


def parse_selector(selector: str, total_pages: int) -> PageOrder:
    """Compile ``selector`` into zero-based page indices.

    Args:
        selector: One-based selector string such as ``"1-3,5,2n"``.
        total_pages: Page count of the target document.

    Returns:
        Indices in selection order. Single page tokens are not bounds
        checked here; see :func:`validate_page_indices`.

    Raises:
        InvalidSelectorSyntaxError: If any token cannot be interpreted.
    """

    order: PageOrder = []
    for token in tokenize_selector(selector):
        order.extend(token.indices(total_pages))
    return order


def validate_page_indices(indices: Iterable[int], total_pages: int) -> PageOrder:
    """Ensure every index lies in ``[0, total_pages)``.

    Returns the indices as a list. An empty selection is valid.

    Raises:
        PageOutOfRangeError: Reporting the highest index past the end of the
            document, or otherwise the lowest negative index.
    """

    order = list(indices)
    if not order:
        return order

    highest = max(order)
    if highest >= total_pages:
        raise PageOutOfRangeError(highest, total_pages)
    lowest = min(order)
    if lowest < 0:
        raise PageOutOfRangeError(lowest, total_pages)
    return order


def invert_selection(pages_to_remove: Iterable[int], total_pages: int) -> PageOrder:
    """Return every index of the document not listed in ``pages_to_remove``."""

    removed = set(pages_to_remove)
    return [index for index in range(total_pages) if index not in removed]


__all__ = [
    "SelectionToken",
    "classify_token",
    "tokenize_selector",
    "parse_selector",
    "validate_page_indices",
    "invert_selection",
]
