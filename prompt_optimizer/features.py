"""
Feature extraction.

Scans raw prompt text for lexical and structural signals. Never fails:
empty or whitespace-only text yields a zeroed FeatureSet.
"""

import hashlib
import logging

from prompt_optimizer import lexicon
from prompt_optimizer.models import FeatureSet

logger = logging.getLogger(__name__)


def tokenize(text: str) -> list[str]:
    """Split on whitespace and normalize each token for word matching."""
    words = []
    for raw in text.split():
        token = raw.strip(lexicon.TOKEN_STRIP_CHARS).lower()
        if token:
            words.append(token)
    return words


def split_sentences(text: str) -> list[str]:
    return [s for s in lexicon.SENTENCE_SPLIT_RE.split(text) if s.strip()]


def contains_any(lowered: str, phrases) -> bool:
    """Case-insensitive substring test; `lowered` must already be lowercase."""
    return any(phrase in lowered for phrase in phrases)


def count_phrases(lowered: str, phrases) -> int:
    """Number of distinct phrases present in `lowered`."""
    return sum(1 for phrase in phrases if phrase in lowered)


def count_words(words: list[str], lexicon_words) -> int:
    """Occurrences of any lexicon word among normalized tokens."""
    return sum(1 for word in words if word in lexicon_words)


def technical_categories(text: str) -> tuple[str, ...]:
    return tuple(
        name for name, pattern in lexicon.TECHNICAL_PATTERNS if pattern.search(text)
    )


def extract_features(text: str) -> FeatureSet:
    """Compute the FeatureSet for a prompt."""
    if not text or not text.strip():
        return FeatureSet()

    lowered = text.lower()
    words = tokenize(text)
    word_count = len(words)
    sentence_count = len(split_sentences(text))

    # Zero sentences would make the average undefined
    avg_sentence_length = word_count / max(sentence_count, 1)
    pronoun_ratio = (
        count_words(words, lexicon.PRONOUNS) / word_count if word_count else 0.0
    )

    phrases = lexicon.ELEMENT_PHRASES
    features = FeatureSet(
        word_count=word_count,
        sentence_count=sentence_count,
        avg_sentence_length=avg_sentence_length,
        vague_word_count=count_words(words, lexicon.VAGUE_WORDS),
        pronoun_ratio=pronoun_ratio,
        has_numbers=bool(lexicon.NUMBER_RE.search(text)),
        technical_patterns=technical_categories(text),
        quantifier_hits=count_phrases(lowered, lexicon.QUANTIFIER_PHRASES),
        vague_adjective_hits=count_words(words, lexicon.VAGUE_ADJECTIVES),
        precise_descriptor_hits=count_words(words, lexicon.PRECISE_DESCRIPTORS),
        connective_count=count_words(words, lexicon.FLOW_CONNECTIVES),
        has_list_markers=bool(lexicon.LIST_MARKER_RE.search(text)),
        has_sections=bool(lexicon.SECTION_BREAK_RE.search(text.strip())),
        has_context=contains_any(lowered, phrases[lexicon.CONTEXT]),
        has_role=contains_any(lowered, phrases[lexicon.ROLE]),
        has_format=contains_any(lowered, phrases[lexicon.FORMAT]),
        has_examples=contains_any(lowered, phrases[lexicon.EXAMPLES]),
        has_constraints=contains_any(lowered, phrases[lexicon.CONSTRAINTS]),
        has_output_spec=contains_any(lowered, phrases[lexicon.OUTPUT_SPECIFICATION]),
    )
    logger.debug(
        "Extracted features (words=%d, sentences=%d, vague=%d)",
        word_count,
        sentence_count,
        features.vague_word_count,
    )
    return features


def fingerprint(text: str) -> str:
    """Content fingerprint tying an analysis to the exact text it scored."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()
