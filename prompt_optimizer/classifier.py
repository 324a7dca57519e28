"""Keyword-weighted category classification."""

import logging

from prompt_optimizer import lexicon
from prompt_optimizer.features import count_phrases
from prompt_optimizer.models import Classification
from prompt_optimizer.scoring import confidence_score

logger = logging.getLogger(__name__)


def category_scores(text: str) -> list[tuple[str, int, int]]:
    """
    Score every category against the text.

    Returns (category, score, keyword_hits) in tie-break order: keyword
    categories first, then "general" with its base score and no hits.
    """
    lowered = text.lower()
    scored = []
    for category, keywords in lexicon.CATEGORY_KEYWORDS:
        hits = count_phrases(lowered, keywords)
        scored.append((category, hits * lexicon.CATEGORY_KEYWORD_WEIGHT, hits))
    scored.append((lexicon.GENERAL_CATEGORY, lexicon.GENERAL_BASE_SCORE, 0))
    return scored


def classify(text: str) -> Classification:
    """Assign a single category label; the first of equal top scores wins."""
    best_category, best_score, best_hits = max(
        category_scores(text), key=lambda entry: entry[1]
    )
    logger.debug("Classified prompt as %s (score=%d)", best_category, best_score)
    return Classification(
        category=best_category,
        confidence=confidence_score(best_hits),
        keyword_hits=best_hits,
    )
