"""Rewrite-intensity policy: the only place tier thresholds are applied."""

from prompt_optimizer import lexicon
from prompt_optimizer.models import OptimizationTier


def plan_tier(strength_score: float) -> OptimizationTier:
    """Minimal at 7 and above, Targeted from 5 up to 7, Full below 5."""
    if strength_score >= lexicon.MINIMAL_TIER_MIN_SCORE:
        return OptimizationTier.MINIMAL
    if strength_score >= lexicon.TARGETED_TIER_MIN_SCORE:
        return OptimizationTier.TARGETED
    return OptimizationTier.FULL
