"""
Matcher Module.

Decides whether a single text matches a single query under one SearchMode.
"""

import logging
import re
from typing import Optional

from advsearch.core.fuzzy_ranker import weighted_ratio
from advsearch.core.search_config import DEFAULT_SETTINGS, SearchSettings
from advsearch.core.search_mode import SearchMode

logger = logging.getLogger(__name__)


def compile_query(
    query: str, settings: SearchSettings = DEFAULT_SETTINGS
) -> Optional["re.Pattern[str]"]:
    """
    Compiles a query as a regular expression.

    Args:
        query: The pattern source.
        settings: Controls case sensitivity.

    Returns:
        re.Pattern or None: The compiled pattern, or None if the query is not
            a valid regular expression.
    """
    flags = 0 if settings.case_sensitive else re.IGNORECASE
    try:
        return re.compile(query, flags)
    except re.error as e:
        logger.debug(f"Ignoring invalid regular expression {query!r}: {e}")
        return None


def fold_case(settings: SearchSettings):
    """Returns the text processor implied by the settings (None = as is)."""
    return None if settings.case_sensitive else str.casefold


def matches(
    query: str,
    text: str,
    mode: SearchMode,
    settings: Optional[SearchSettings] = None,
) -> bool:
    """
    Checks whether text matches query under the given mode.

    Regex mode requires the whole text to match the pattern. The batch
    filters use find-anywhere semantics instead.

    Args:
        query: The raw search query. May be empty.
        text: The text to test.
        mode: The matching strategy.
        settings: Optional settings; defaults to case-sensitive matching with
            a fuzzy threshold of 50.

    Returns:
        bool: True if the text matches. Invalid regular expressions and
            unknown modes never match.
    """
    settings = settings or DEFAULT_SETTINGS

    if mode is SearchMode.REGEX:
        pattern = compile_query(query, settings)
        return pattern is not None and pattern.fullmatch(text) is not None

    if mode is SearchMode.FUZZY:
        score = weighted_ratio(
            query,
            text,
            score_cutoff=settings.fuzzy_min_score,
            processor=fold_case(settings),
        )
        return score > 0

    if not settings.case_sensitive:
        query = query.casefold()
        text = text.casefold()

    if mode is SearchMode.CONTAINS:
        return query in text
    if mode is SearchMode.PREFIX:
        return text.startswith(query)
    if mode is SearchMode.SUFFIX:
        return text.endswith(query)

    logger.warning(f"Unknown search mode {mode!r}, treating as no match")
    return False
