"""
Core Prompt Optimizer engine.

Takes a prompt, extracts lexical features, scores it, classifies it,
and rewrites it. Everything here is deterministic and side-effect free:
records are returned to the caller, which owns history and persistence.
"""

import logging
from typing import Optional

from prompt_optimizer import config, lexicon
from prompt_optimizer.classifier import classify as classify_text
from prompt_optimizer.elements import find_elements
from prompt_optimizer.features import extract_features, fingerprint
from prompt_optimizer.models import (
    AnalysisRecord,
    CharacterCounts,
    Classification,
    OptimizationOutcome,
    OptimizationRecord,
    OptimizationTier,
    SynthesisResult,
)
from prompt_optimizer.planner import plan_tier as plan_tier_for_score
from prompt_optimizer.scoring import (
    clarity_score,
    composite_score,
    estimate_tokens,
    readability_score,
    specificity_score,
    structure_score,
)
from prompt_optimizer.synthesizer import synthesize as synthesize_text

logger = logging.getLogger(__name__)


class PromptOptimizer:
    """
    Heuristic prompt analyzer and rewriter.

    Usage:
        optimizer = PromptOptimizer()
        analysis = optimizer.analyze("Write a story about a dragon", "creative")
        outcome = optimizer.optimize("Write a story about a dragon", intent="creative")
        if outcome.ok:
            print(outcome.record.optimized_text)
    """

    def analyze(self, text: str, intent: str = lexicon.GENERAL_INTENT) -> AnalysisRecord:
        """
        Score a prompt and report its missing elements.

        Never raises for string input; empty text yields the default record.
        """
        text = text or ""
        elements = find_elements(text, intent)

        if not text.strip():
            return self._default_record(text, intent, elements.missing)

        features = extract_features(text)
        clarity = clarity_score(features)
        specificity = specificity_score(features)
        structure = structure_score(features)
        classification = classify_text(text)

        record = AnalysisRecord(
            fingerprint=fingerprint(text),
            intent=intent,
            clarity_score=clarity,
            specificity_score=specificity,
            structure_score=structure,
            strength_score=composite_score(clarity, specificity, structure),
            category=classification.category,
            confidence=classification.confidence,
            token_estimate=estimate_tokens(text),
            readability_score=readability_score(clarity, structure),
            missing_elements=elements.missing,
            detected_elements=elements.detected,
            weaknesses=self._weaknesses(features.vague_word_count, clarity, specificity, structure),
            improvement_candidates=self._improvement_candidates(elements.missing),
        )
        logger.debug(
            "Analyzed prompt (length=%d, intent=%s, strength=%d, category=%s)",
            len(text),
            intent,
            record.strength_score,
            record.category,
        )
        return record

    def classify(self, text: str) -> Classification:
        return classify_text(text or "")

    def plan_tier(self, strength_score: float) -> OptimizationTier:
        return plan_tier_for_score(strength_score)

    def synthesize(
        self,
        text: str,
        intent: str,
        platform: str,
        tone: int,
        analysis: AnalysisRecord,
    ) -> SynthesisResult:
        """Rewrite text; `analysis` must come from analyze() on the same text and intent."""
        return synthesize_text(text, intent, platform, tone, analysis)

    def optimize(
        self,
        text: str,
        intent: str = lexicon.GENERAL_INTENT,
        platform: str = config.DEFAULT_PLATFORM,
        tone: int = config.DEFAULT_TONE,
        analysis: Optional[AnalysisRecord] = None,
    ) -> OptimizationOutcome:
        """
        Analyze and rewrite a prompt in one call.

        A previously computed analysis is reused only when it still matches
        the text and intent; otherwise a fresh one is computed.

        Returns:
            OptimizationOutcome with the record, or ok=False for blank text
        """
        if not text or not text.strip():
            logger.info("Rejected optimize request: empty prompt")
            return OptimizationOutcome(
                ok=False,
                error="invalid_input",
                message="Please enter a prompt to optimize.",
            )

        if analysis is None or analysis.fingerprint != fingerprint(text) or analysis.intent != intent:
            analysis = self.analyze(text, intent)

        result = self.synthesize(text, intent, platform, tone, analysis)
        record = OptimizationRecord(
            original_text=text,
            optimized_text=result.optimized_text,
            improvements=result.improvements,
            intent=intent,
            platform=platform,
            tone=tone,
            character_counts=CharacterCounts(
                original=len(text),
                optimized=len(result.optimized_text),
            ),
            token_estimates=CharacterCounts(
                original=estimate_tokens(text),
                optimized=estimate_tokens(result.optimized_text),
            ),
            tier=result.tier,
            strength_score=analysis.strength_score,
            projected_score=result.projected_score,
            weaknesses=analysis.weaknesses,
        )
        logger.info(
            "Optimized prompt (length=%d -> %d, tier=%s, strength=%d -> %d)",
            record.character_counts.original,
            record.character_counts.optimized,
            record.tier.value,
            record.strength_score,
            record.projected_score,
        )
        return OptimizationOutcome(ok=True, record=record)

    def _default_record(self, text: str, intent: str, missing: tuple[str, ...]) -> AnalysisRecord:
        """Record returned for empty or whitespace-only text."""
        floor = lexicon.SCORE_MIN
        return AnalysisRecord(
            fingerprint=fingerprint(text),
            intent=intent,
            clarity_score=floor,
            specificity_score=floor,
            structure_score=floor,
            strength_score=floor,
            category=lexicon.GENERAL_CATEGORY,
            confidence=0,
            token_estimate=estimate_tokens(text),
            readability_score=0,
            missing_elements=missing,
            detected_elements=(),
            weaknesses=(lexicon.WEAKNESS_DESCRIPTIONS["empty"],),
            improvement_candidates=self._improvement_candidates(missing),
        )

    def _weaknesses(
        self, vague_word_count: int, clarity: int, specificity: int, structure: int
    ) -> tuple[str, ...]:
        descriptions = lexicon.WEAKNESS_DESCRIPTIONS
        threshold = lexicon.WEAKNESS_THRESHOLD
        found = []
        if vague_word_count:
            found.append(descriptions["vague_language"])
        elif clarity < threshold:
            found.append(descriptions["low_clarity"])
        if specificity < threshold:
            found.append(descriptions["low_specificity"])
        if structure < threshold:
            found.append(descriptions["low_structure"])
        return tuple(found[: lexicon.MAX_WEAKNESSES])

    def _improvement_candidates(self, missing: tuple[str, ...]) -> tuple[str, ...]:
        candidates = [lexicon.IMPROVEMENT_CANDIDATES[element] for element in missing]
        return tuple(candidates[: lexicon.MAX_IMPROVEMENT_CANDIDATES])
