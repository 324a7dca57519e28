"""
Score calculation.

Every score here is a pure function of a FeatureSet (plus the raw text
length for the token estimate), so two analyses of the same text always
agree.
"""

import math

from prompt_optimizer import lexicon
from prompt_optimizer.models import FeatureSet


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))


def clamp_score(value: float) -> int:
    return max(lexicon.SCORE_MIN, min(lexicon.SCORE_MAX, round_half_up(value)))


def clarity_score(features: FeatureSet) -> int:
    score = lexicon.CLARITY_START
    score -= lexicon.CLARITY_VAGUE_WORD_PENALTY * features.vague_word_count
    if features.avg_sentence_length > lexicon.CLARITY_LONG_SENTENCE_WORDS:
        score -= lexicon.CLARITY_LONG_SENTENCE_PENALTY
    if features.avg_sentence_length < lexicon.CLARITY_SHORT_SENTENCE_WORDS:
        score -= lexicon.CLARITY_SHORT_SENTENCE_PENALTY
    if features.pronoun_ratio > lexicon.CLARITY_PRONOUN_RATIO:
        score -= lexicon.CLARITY_PRONOUN_PENALTY
    return clamp_score(score)


def specificity_score(features: FeatureSet) -> int:
    score = lexicon.SPECIFICITY_START
    if features.has_numbers:
        score += lexicon.SPECIFICITY_NUMBER_BONUS
    score += lexicon.SPECIFICITY_QUANTIFIER_BONUS * features.quantifier_hits
    score += lexicon.SPECIFICITY_TECHNICAL_BONUS * len(features.technical_patterns)
    score -= lexicon.SPECIFICITY_VAGUE_ADJECTIVE_PENALTY * features.vague_adjective_hits
    score += lexicon.SPECIFICITY_DESCRIPTOR_BONUS * features.precise_descriptor_hits
    return clamp_score(score)


def structure_score(features: FeatureSet) -> int:
    score = lexicon.STRUCTURE_START
    if features.has_list_markers:
        score += lexicon.STRUCTURE_LIST_BONUS
    if features.has_sections:
        score += lexicon.STRUCTURE_SECTION_BONUS
    score += min(lexicon.STRUCTURE_MAX_CONNECTIVES, features.connective_count)
    if features.has_role:
        score += lexicon.STRUCTURE_ROLE_BONUS
    if features.has_format:
        score += lexicon.STRUCTURE_FORMAT_BONUS
    return clamp_score(score)


def composite_score(clarity: int, specificity: int, structure: int) -> int:
    """Strength score: rounded mean of the three sub-scores."""
    return clamp_score((clarity + specificity + structure) / 3)


def readability_score(clarity: int, structure: int) -> int:
    return round_half_up((clarity + structure) / 2)


def confidence_score(keyword_hits: int) -> int:
    return min(
        lexicon.MAX_CONFIDENCE,
        lexicon.BASE_CONFIDENCE + lexicon.CONFIDENCE_PER_KEYWORD * keyword_hits,
    )


def estimate_tokens(text: str) -> int:
    """Rough token count at four characters per token; not a tokenizer."""
    return math.ceil(len(text) / lexicon.CHARS_PER_TOKEN)
