"""Tests for content synthesis."""

import pytest

from prompt_optimizer import lexicon
from prompt_optimizer.exceptions import InvalidInputError, StaleAnalysisError
from prompt_optimizer.models import OptimizationTier
from prompt_optimizer.synthesizer import (
    constraints_sentence,
    format_sentence,
    output_sentence,
    synthesize,
    synthesize_for_tier,
    tone_wording,
)

from tests.conftest import MIDDLING_PROMPT, STRONG_PROMPT, WEAK_PROMPT


def paragraphs(text):
    return text.split("\n\n")


class TestToneWording:
    @pytest.mark.parametrize(
        "tone,wording",
        [
            (0, "casual and friendly"),
            (32, "casual and friendly"),
            (33, "professional and clear"),
            (65, "professional and clear"),
            (66, "technical and precise"),
            (100, "technical and precise"),
        ],
    )
    def test_boundaries(self, tone, wording):
        assert tone_wording(tone) == wording

    def test_constraints_sentence_uses_tone(self):
        assert "casual and friendly" in constraints_sentence(10)


class TestTextBanks:
    def test_unknown_intent_falls_back_to_generic(self):
        assert format_sentence("poetry-slam") == lexicon.GENERIC_FORMAT
        assert output_sentence("poetry-slam") == lexicon.GENERIC_OUTPUT

    def test_known_intent_uses_its_sentence(self):
        assert format_sentence("code") == lexicon.FORMAT_BANK["code"]


class TestMinimalTier:
    def test_strong_prompt_is_returned_unchanged(self):
        result = synthesize_for_tier(STRONG_PROMPT, "analysis", 50, ("context",), 9)
        assert result.tier is OptimizationTier.MINIMAL
        assert result.optimized_text == STRONG_PROMPT
        assert result.improvements == (lexicon.NOTE_ALREADY_STRONG,)
        assert result.edits == ()
        assert result.projected_score == 9

    def test_patches_only_output_and_examples(self):
        missing = ("context", "format", "examples", "constraints", "output_specification")
        result = synthesize_for_tier("Pitch our app", "marketing", 50, missing, 7)
        assert result.edits == ("examples", "output_specification")
        assert paragraphs(result.optimized_text) == [
            "Pitch our app",
            lexicon.MINIMAL_EXAMPLES_SENTENCE,
            lexicon.MINIMAL_OUTPUT_SENTENCE,
        ]
        assert result.projected_score == 8

    def test_examples_not_patched_for_ungated_intent(self):
        missing = ("examples", "output_specification")
        result = synthesize_for_tier("Pitch our app", "code", 50, missing, 7)
        assert result.edits == ("output_specification",)

    def test_no_critical_gap_returns_unchanged_with_note(self):
        result = synthesize_for_tier("Provide a recap", "general", 50, ("context", "format"), 7)
        assert result.optimized_text == "Provide a recap"
        assert result.improvements == (lexicon.NOTE_MINOR_ENHANCEMENTS,)
        assert result.projected_score == 7


class TestTargetedTier:
    def test_role_format_and_examples_for_creative(self):
        missing = ("context", "role", "format", "examples", "constraints")
        result = synthesize_for_tier(MIDDLING_PROMPT, "creative", 50, missing, 6)
        assert result.tier is OptimizationTier.TARGETED
        assert result.edits == ("role", "format", "examples")
        assert paragraphs(result.optimized_text) == [
            lexicon.ROLE_BANK["creative"],
            MIDDLING_PROMPT,
            lexicon.FORMAT_BANK["creative"],
            lexicon.EXAMPLES_SENTENCE,
        ]
        assert result.projected_score == 8

    def test_ignores_context_and_constraints(self):
        missing = ("context", "constraints", "output_specification")
        result = synthesize_for_tier("Explain recursion", "code", 50, missing, 5)
        assert result.edits == ()
        assert result.optimized_text == "Explain recursion"
        assert result.improvements == (lexicon.NOTE_NOTHING_TARGETED,)

    def test_role_skipped_for_marketing(self):
        result = synthesize_for_tier("Pitch our app", "marketing", 50, ("role", "format"), 6)
        assert result.edits == ("format",)


class TestFullTier:
    def test_creative_full_rewrite_order(self):
        missing = ("context", "role", "format", "examples", "constraints")
        result = synthesize_for_tier(MIDDLING_PROMPT, "creative", 50, missing, 4)
        parts = paragraphs(result.optimized_text)

        assert result.tier is OptimizationTier.FULL
        assert result.optimized_text.startswith("Context: You are working on a creative project")
        assert parts == [
            lexicon.CONTEXT_BANK["creative"],
            lexicon.ROLE_BANK["creative"],
            MIDDLING_PROMPT,
            lexicon.FORMAT_BANK["creative"],
            lexicon.EXAMPLES_SENTENCE,
            constraints_sentence(50),
            lexicon.OUTPUT_BANK["creative"],
        ]
        assert result.edits == (
            "context",
            "role",
            "format",
            "examples",
            "constraints",
            "output_specification",
        )
        # 4 + 6 * 0.8 = 8.8 -> 9
        assert result.projected_score == 9

    def test_general_skips_context_and_role(self):
        missing = ("context", "format", "constraints", "output_specification")
        result = synthesize_for_tier(WEAK_PROMPT, "general", 20, missing, 4)
        assert result.edits == ("format", "constraints", "output_specification")
        assert paragraphs(result.optimized_text) == [
            WEAK_PROMPT,
            lexicon.GENERIC_FORMAT,
            constraints_sentence(20),
            lexicon.GENERIC_OUTPUT,
        ]
        assert "casual and friendly" in result.optimized_text
        assert result.projected_score == 6

    def test_unknown_intent_skips_context_but_appends_generic_sentences(self):
        result = synthesize_for_tier("Tell a joke", "poetry-slam", 80, ("context", "format"), 3)
        assert result.edits == ("format", "constraints", "output_specification")
        assert lexicon.GENERIC_OUTPUT in result.optimized_text

    def test_constraints_and_output_always_applied(self):
        result = synthesize_for_tier("Tell a joke", "code", 50, (), 2)
        assert result.edits == ("constraints", "output_specification")

    def test_text_is_trimmed(self):
        result = synthesize_for_tier("  Tell a joke \n", "general", 50, (), 2)
        assert result.optimized_text.startswith("Tell a joke\n\n")
        assert result.optimized_text == result.optimized_text.strip()


class TestImprovementCorrespondence:
    @pytest.mark.parametrize("score", [2, 4, 5, 6, 7])
    def test_one_improvement_per_edit(self, score):
        missing = lexicon.ELEMENT_ORDER
        result = synthesize_for_tier(MIDDLING_PROMPT, "creative", 50, missing, score)
        assert len(result.improvements) == len(result.edits)
        # each edit adds exactly one paragraph around the original
        assert len(paragraphs(result.optimized_text)) == len(result.edits) + 1


class TestSynthesizeContract:
    def test_rejects_blank_text(self, optimizer):
        analysis = optimizer.analyze("   ", "general")
        with pytest.raises(InvalidInputError):
            synthesize("   ", "general", "general", 50, analysis)

    def test_rejects_analysis_for_other_text(self, optimizer):
        analysis = optimizer.analyze("Write a poem", "creative")
        with pytest.raises(StaleAnalysisError) as exc_info:
            synthesize("Write a poem about cats", "creative", "general", 50, analysis)
        assert exc_info.value.status_code == 409

    def test_rejects_analysis_for_other_intent(self, optimizer):
        analysis = optimizer.analyze("Write a poem", "creative")
        with pytest.raises(StaleAnalysisError):
            synthesize("Write a poem", "code", "general", 50, analysis)

    def test_uses_matching_analysis(self, optimizer):
        analysis = optimizer.analyze(MIDDLING_PROMPT, "creative")
        result = synthesize(MIDDLING_PROMPT, "creative", "chatgpt", 50, analysis)
        assert result.tier is OptimizationTier.TARGETED
