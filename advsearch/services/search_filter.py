"""
Search Filter Module.

Applies a SearchMode across a collection of caller-supplied items. Each item
is reduced to text by an extractor function, so any object type can be
filtered without the filter knowing about it.

Result order depends on the mode:
    - Contains, Prefix, Suffix, Regex: original collection order.
    - Fuzzy: descending relevance score, ties in original order.

Usage:
    >>> filter_by_text("a", ["banana", "apple", "kiwi"], str, SearchMode.CONTAINS)
    ['banana', 'apple']
    >>> filter_by_facets("ali", users, lambda u: [u.name, u.alias], SearchMode.PREFIX)
"""

import logging
from typing import Any, Callable, Iterable, List, Optional, Sequence, TypeVar

from advsearch.core.facets import iter_facets, single_text
from advsearch.core.fuzzy_ranker import extract_all, rank
from advsearch.core.matcher import compile_query, fold_case, matches
from advsearch.core.search_config import DEFAULT_SETTINGS, SearchSettings
from advsearch.core.search_mode import SearchMode

logger = logging.getLogger(__name__)

T = TypeVar("T")


def filter_candidates(
    query: str,
    candidates: Optional[Iterable[T]],
    extract: Callable[[T], Any],
    mode: SearchMode,
    settings: Optional[SearchSettings] = None,
) -> Optional[List[T]]:
    """
    Returns the candidates whose text matches the query.

    The extractor may return None, a single string, or a sequence of strings
    (facets). A candidate matches if any of its facets matches; facets are
    tried in order and evaluation stops at the first match.

    Args:
        query: The raw search query. May be empty.
        candidates: Items to filter. None is passed through as None.
        extract: Returns the text (or texts) of an item.
        mode: The matching strategy.
        settings: Optional matching settings.

    Returns:
        Optional[List]: Matching items in mode-dependent order, or None if
            candidates is None. Never raises: an invalid pattern or an
            unknown mode yields an empty list.
    """
    if candidates is None:
        return None
    if not isinstance(mode, SearchMode):
        logger.warning(f"Unknown search mode {mode!r}, returning no results")
        return []

    settings = settings or DEFAULT_SETTINGS
    items = candidates if isinstance(candidates, Sequence) else list(candidates)
    if not items:
        return []

    def facets_of(item: T) -> Iterable[str]:
        return iter_facets(extract(item))

    if mode is SearchMode.FUZZY:
        results = _filter_fuzzy(query, items, facets_of, settings)
    elif mode is SearchMode.REGEX:
        results = _filter_regex(query, items, facets_of, settings)
    else:
        results = [
            item
            for item in items
            if any(matches(query, text, mode, settings) for text in facets_of(item))
        ]

    logger.debug(
        f"{mode.label} search for {query!r}: {len(results)} of {len(items)} matched"
    )
    return results


def filter_by_text(
    query: str,
    candidates: Optional[Iterable[T]],
    extract: Callable[[T], Optional[str]],
    mode: SearchMode,
    settings: Optional[SearchSettings] = None,
) -> Optional[List[T]]:
    """
    Filters items that each expose one optional text.

    Args:
        query: The raw search query.
        candidates: Items to filter, or None.
        extract: Returns the text of an item, or None to skip it.
        mode: The matching strategy.
        settings: Optional matching settings.

    Returns:
        Optional[List]: See filter_candidates.
    """
    return filter_candidates(
        query, candidates, lambda item: single_text(extract(item)), mode, settings
    )


def filter_by_facets(
    query: str,
    candidates: Optional[Iterable[T]],
    extract: Callable[[T], Iterable[Optional[str]]],
    mode: SearchMode,
    settings: Optional[SearchSettings] = None,
) -> Optional[List[T]]:
    """
    Filters items that each expose several texts (e.g. name and aliases).

    Each matching item appears once, however many of its facets match. In
    fuzzy mode an item is ranked by its best facet.

    Args:
        query: The raw search query.
        candidates: Items to filter, or None.
        extract: Returns the ordered facets of an item. None facets are
            skipped.
        mode: The matching strategy.
        settings: Optional matching settings.

    Returns:
        Optional[List]: See filter_candidates.
    """
    return filter_candidates(query, candidates, extract, mode, settings)


def _filter_regex(
    query: str,
    items: Sequence[T],
    facets_of: Callable[[T], Iterable[str]],
    settings: SearchSettings,
) -> List[T]:
    """Find-anywhere regex filtering with a single compilation."""
    pattern = compile_query(query, settings)
    if pattern is None:
        return []
    return [
        item
        for item in items
        if any(pattern.search(text) is not None for text in facets_of(item))
    ]


def _filter_fuzzy(
    query: str,
    items: Sequence[T],
    facets_of: Callable[[T], Iterable[str]],
    settings: SearchSettings,
) -> List[T]:
    """Scores all items in one batch and returns them best first."""
    scored = extract_all(
        query,
        items,
        facets_of,
        min_score=settings.fuzzy_min_score,
        processor=fold_case(settings),
    )
    return rank(scored)
