"""
Facet Helpers.

A candidate is reduced to text by a caller-supplied extractor that returns
either a single optional string or an ordered sequence of strings. These
helpers give both shapes a common iterable form.
"""

from typing import Any, Iterable, Iterator, Optional


def iter_facets(value: Any) -> Iterator[str]:
    """
    Yields the non-None text facets of an extracted value.

    Args:
        value: None, a string, or an iterable of optional strings.

    Yields:
        str: Each facet in order. Facets are produced lazily so callers can
            stop early.

    Raises:
        TypeError: If the value is neither a string nor iterable.
    """
    if value is None:
        return
    if isinstance(value, str):
        yield value
        return
    for facet in value:
        if facet is not None:
            yield facet


def single_text(value: Optional[str]) -> Iterable[str]:
    """Wraps an optional string as a facet sequence of length 0 or 1."""
    return () if value is None else (value,)
