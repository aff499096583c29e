"""
Fuzzy Ranker Module.

Thin boundary over rapidfuzz. Provides the single-pair weighted ratio used by
the matcher and the batch scoring used by the fuzzy filter.

Multi-facet candidates are reduced to one score by taking the best (maximum)
facet score. This is observable in the ranking order: a candidate with one
excellent alias outranks a candidate with several mediocre ones.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Generic, Iterable, List, Optional, Sequence, TypeVar

from rapidfuzz import fuzz, process

logger = logging.getLogger(__name__)

T = TypeVar("T")

Processor = Callable[[str], str]


@dataclass(frozen=True)
class ScoredCandidate(Generic[T]):
    """
    A candidate paired with its relevance score.

    Attributes:
        candidate: The caller's item.
        score: Best weighted ratio across the candidate's facets (0-100).
        index: Position of the candidate in the input collection.
    """

    candidate: T
    score: float
    index: int


def weighted_ratio(
    query: str,
    text: str,
    score_cutoff: Optional[float] = None,
    processor: Optional[Processor] = None,
) -> float:
    """
    Computes the weighted similarity ratio of two strings.

    Args:
        query: The search query.
        text: The text to compare against.
        score_cutoff: Scores below this value are reported as 0.
        processor: Optional preprocessing applied to both strings.

    Returns:
        float: Score between 0 and 100. Identical non-empty strings score
            100; an empty string on either side scores 0.
    """
    return fuzz.WRatio(query, text, processor=processor, score_cutoff=score_cutoff)


def extract_all(
    query: str,
    candidates: Iterable[T],
    extract: Callable[[T], Iterable[str]],
    min_score: float,
    processor: Optional[Processor] = None,
) -> List[ScoredCandidate[T]]:
    """
    Scores every candidate against the query.

    Args:
        query: The search query.
        candidates: Items to score.
        extract: Returns the text facets of an item.
        min_score: Facets scoring below this value are ignored.
        processor: Optional preprocessing applied to query and facets.

    Returns:
        List[ScoredCandidate]: One entry per candidate whose best facet scored
            at least min_score (and above zero), in input order.
    """
    items: List[T] = []
    owners: List[int] = []
    texts: List[str] = []
    for index, candidate in enumerate(candidates):
        items.append(candidate)
        for facet in extract(candidate):
            owners.append(index)
            texts.append(facet)

    if not texts:
        return []

    hits = process.extract(
        query,
        texts,
        scorer=fuzz.WRatio,
        processor=processor,
        score_cutoff=min_score,
        limit=None,
    )

    best: dict[int, float] = {}
    for _text, score, position in hits:
        if score <= 0:
            continue
        owner = owners[position]
        if score > best.get(owner, -1.0):
            best[owner] = score

    logger.debug(
        f"Fuzzy scored {len(texts)} facets of {len(items)} candidates, "
        f"{len(best)} above {min_score}"
    )
    return [
        ScoredCandidate(candidate=items[index], score=best[index], index=index)
        for index in sorted(best)
    ]


def rank(scored: Sequence[ScoredCandidate[T]]) -> List[T]:
    """
    Orders scored candidates by descending score.

    The sort is stable, so equal scores keep their input order.

    Args:
        scored: Candidates with scores, in input order.

    Returns:
        List: The candidates, best first.
    """
    ordered = sorted(scored, key=lambda item: item.score, reverse=True)
    return [item.candidate for item in ordered]
