"""Client-side roster search."""

import re
from typing import Callable, Sequence, TypeVar

T = TypeVar("T")

_WHITESPACE = re.compile(r"\s+")


def keywords(query: str) -> list[str]:
    """Lower-cased whitespace-separated tokens of a search query."""
    return query.lower().split()


def normalize(text: str) -> str:
    return _WHITESPACE.sub(" ", text.lower())


def filter_records(
    records: Sequence[T], query: str, text_of: Callable[[T], str]
) -> list[T]:
    """Keep records whose searchable text contains every query token.

    Blank queries return all records in their original order.
    """
    tokens = keywords(query)
    if not tokens:
        return list(records)

    results = []
    for record in records:
        haystack = normalize(text_of(record))
        if all(token in haystack for token in tokens):
            results.append(record)
    return results
