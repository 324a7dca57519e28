"""
Content synthesis.

Rewrites a prompt according to the tier chosen for its analysis:

- Minimal: leave strong prompts alone, otherwise patch only the critical
  gaps (examples for intents that need them, output specification).
- Targeted: add role, format, and examples where missing.
- Full: add context, role, format, examples, constraints, and an output
  specification.

Prepended sentences come before the original text in the order
context, role; appended ones follow it in the order format, examples,
constraints, output. Each applied edit produces exactly one improvement
description, in the order the edits were applied.
"""

import logging

from prompt_optimizer import lexicon
from prompt_optimizer.elements import is_relevant
from prompt_optimizer.exceptions import InvalidInputError, StaleAnalysisError
from prompt_optimizer.features import fingerprint
from prompt_optimizer.models import AnalysisRecord, OptimizationTier, SynthesisResult
from prompt_optimizer.planner import plan_tier
from prompt_optimizer.scoring import round_half_up

logger = logging.getLogger(__name__)


def tone_wording(tone: int) -> str:
    for upper_bound, wording in lexicon.TONE_WORDINGS:
        if tone < upper_bound:
            return wording
    return lexicon.TECHNICAL_TONE


def context_sentence(intent: str) -> str:
    return lexicon.CONTEXT_BANK.get(intent, "")


def role_sentence(intent: str) -> str:
    return lexicon.ROLE_BANK.get(intent, "")


def format_sentence(intent: str) -> str:
    return lexicon.FORMAT_BANK.get(intent, lexicon.GENERIC_FORMAT)


def output_sentence(intent: str) -> str:
    return lexicon.OUTPUT_BANK.get(intent, lexicon.GENERIC_OUTPUT)


def constraints_sentence(tone: int) -> str:
    return lexicon.CONSTRAINTS_TEMPLATE.format(tone=tone_wording(tone))


class Rewrite:
    """Collects prepend/append edits and their improvement descriptions."""

    def __init__(self, intent: str, tone: int):
        self.intent = intent
        self.tone = tone
        self.prepends: list[str] = []
        self.appends: list[str] = []
        self.edits: list[str] = []
        self.improvements: list[str] = []

    def _record(self, element: str) -> None:
        self.edits.append(element)
        self.improvements.append(
            lexicon.IMPROVEMENT_DESCRIPTIONS[element].format(
                intent=self.intent, tone=tone_wording(self.tone)
            )
        )

    def prepend(self, element: str, sentence: str) -> None:
        if not sentence:
            return
        self.prepends.append(sentence)
        self._record(element)

    def append(self, element: str, sentence: str) -> None:
        if not sentence:
            return
        self.appends.append(sentence)
        self._record(element)

    def render(self, original: str) -> str:
        return "\n\n".join([*self.prepends, original.strip(), *self.appends]).strip()


def _needs(element: str, missing: set, intent: str) -> bool:
    return element in missing and is_relevant(element, intent)


def _minimal(text: str, intent: str, tone: int, missing: set, score: int) -> SynthesisResult:
    tier = OptimizationTier.MINIMAL
    if score >= lexicon.ALREADY_STRONG_SCORE:
        return SynthesisResult(
            optimized_text=text,
            improvements=(lexicon.NOTE_ALREADY_STRONG,),
            tier=tier,
            projected_score=score,
        )

    rewrite = Rewrite(intent, tone)
    if _needs(lexicon.EXAMPLES, missing, intent):
        rewrite.append(lexicon.EXAMPLES, lexicon.MINIMAL_EXAMPLES_SENTENCE)
    if lexicon.OUTPUT_SPECIFICATION in missing:
        rewrite.append(lexicon.OUTPUT_SPECIFICATION, lexicon.MINIMAL_OUTPUT_SENTENCE)

    if not rewrite.edits:
        return SynthesisResult(
            optimized_text=text,
            improvements=(lexicon.NOTE_MINOR_ENHANCEMENTS,),
            tier=tier,
            projected_score=score,
        )
    return SynthesisResult(
        optimized_text=rewrite.render(text),
        improvements=tuple(rewrite.improvements),
        edits=tuple(rewrite.edits),
        tier=tier,
        projected_score=min(lexicon.SCORE_MAX, score + lexicon.MINIMAL_SCORE_DELTA),
    )


def _targeted(text: str, intent: str, tone: int, missing: set, score: int) -> SynthesisResult:
    rewrite = Rewrite(intent, tone)
    if _needs(lexicon.ROLE, missing, intent):
        rewrite.prepend(lexicon.ROLE, role_sentence(intent))
    if lexicon.FORMAT in missing:
        rewrite.append(lexicon.FORMAT, format_sentence(intent))
    if _needs(lexicon.EXAMPLES, missing, intent):
        rewrite.append(lexicon.EXAMPLES, lexicon.EXAMPLES_SENTENCE)

    projected = min(lexicon.SCORE_MAX, score + lexicon.TARGETED_SCORE_DELTA)
    if not rewrite.edits:
        return SynthesisResult(
            optimized_text=text,
            improvements=(lexicon.NOTE_NOTHING_TARGETED,),
            tier=OptimizationTier.TARGETED,
            projected_score=projected,
        )
    return SynthesisResult(
        optimized_text=rewrite.render(text),
        improvements=tuple(rewrite.improvements),
        edits=tuple(rewrite.edits),
        tier=OptimizationTier.TARGETED,
        projected_score=projected,
    )


def _full(text: str, intent: str, tone: int, missing: set, score: int) -> SynthesisResult:
    rewrite = Rewrite(intent, tone)
    if lexicon.CONTEXT in missing and intent != lexicon.GENERAL_INTENT:
        rewrite.prepend(lexicon.CONTEXT, context_sentence(intent))
    if _needs(lexicon.ROLE, missing, intent):
        rewrite.prepend(lexicon.ROLE, role_sentence(intent))
    if lexicon.FORMAT in missing:
        rewrite.append(lexicon.FORMAT, format_sentence(intent))
    if _needs(lexicon.EXAMPLES, missing, intent):
        rewrite.append(lexicon.EXAMPLES, lexicon.EXAMPLES_SENTENCE)
    rewrite.append(lexicon.CONSTRAINTS, constraints_sentence(tone))
    rewrite.append(lexicon.OUTPUT_SPECIFICATION, output_sentence(intent))

    projected = min(
        lexicon.SCORE_MAX,
        round_half_up(score + lexicon.FULL_SCORE_DELTA_PER_CHANGE * len(rewrite.edits)),
    )
    return SynthesisResult(
        optimized_text=rewrite.render(text),
        improvements=tuple(rewrite.improvements),
        edits=tuple(rewrite.edits),
        tier=OptimizationTier.FULL,
        projected_score=projected,
    )


_BRANCHES = {
    OptimizationTier.MINIMAL: _minimal,
    OptimizationTier.TARGETED: _targeted,
    OptimizationTier.FULL: _full,
}


def synthesize_for_tier(
    text: str,
    intent: str,
    tone: int,
    missing_elements,
    strength_score: int,
) -> SynthesisResult:
    """Run the branch for the tier that `strength_score` maps to."""
    tier = plan_tier(strength_score)
    return _BRANCHES[tier](text, intent, tone, set(missing_elements), strength_score)


def synthesize(
    text: str,
    intent: str,
    platform: str,
    tone: int,
    analysis: AnalysisRecord,
) -> SynthesisResult:
    """
    Rewrite `text` using an analysis of that same text.

    Raises:
        InvalidInputError: text is empty or whitespace-only
        StaleAnalysisError: analysis was produced for different text or intent
    """
    if not text or not text.strip():
        raise InvalidInputError()
    if analysis.fingerprint != fingerprint(text) or analysis.intent != intent:
        raise StaleAnalysisError(
            details={"analysis_intent": analysis.intent, "intent": intent}
        )

    result = synthesize_for_tier(
        text, intent, tone, analysis.missing_elements, analysis.strength_score
    )
    logger.debug(
        "Synthesized prompt (tier=%s, edits=%d, platform=%s)",
        result.tier.value,
        len(result.edits),
        platform,
    )
    return result
