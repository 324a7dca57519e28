"""Tests for feature extraction."""

from prompt_optimizer.features import (
    extract_features,
    fingerprint,
    split_sentences,
    tokenize,
)
from prompt_optimizer.models import FeatureSet


class TestTokenize:
    def test_strips_punctuation_and_lowercases(self):
        assert tokenize("Hello, WORLD! (really)") == ["hello", "world", "really"]

    def test_drops_pure_punctuation_tokens(self):
        assert tokenize("a -- b") == ["a", "b"]

    def test_sentences_discard_empty_fragments(self):
        assert split_sentences("One. Two!! Three?") == ["One", " Two", " Three"]
        assert split_sentences("...") == []


class TestExtractFeatures:
    def test_empty_text_yields_zeroed_features(self):
        assert extract_features("") == FeatureSet()
        assert extract_features("   \n\t ") == FeatureSet()

    def test_counts_words_and_sentences(self):
        features = extract_features("Write a story. Make it short!")
        assert features.word_count == 6
        assert features.sentence_count == 2
        assert features.avg_sentence_length == 3.0

    def test_no_sentence_terminator_counts_as_one_sentence(self):
        features = extract_features("Write a story about a dragon")
        assert features.sentence_count == 1
        assert features.avg_sentence_length == 6.0

    def test_vague_words_are_exact_token_matches(self):
        features = extract_features("Make something good. Goodness is great, stuff!")
        # "Goodness" is not "good"
        assert features.vague_word_count == 4

    def test_pronoun_ratio(self):
        features = extract_features("Fix it and ship this")
        assert features.pronoun_ratio == 2 / 5

    def test_numbers_detected(self):
        assert extract_features("Grow by 12.5% next year").has_numbers
        assert extract_features("Grow by 3 points").has_numbers
        assert not extract_features("Grow a lot").has_numbers

    def test_technical_pattern_categories(self):
        features = extract_features("Read user_id from config.settings via the API")
        assert features.technical_patterns == (
            "all_caps",
            "dotted_identifier",
            "underscore_identifier",
        )

    def test_abbreviations_are_not_dotted_identifiers(self):
        assert extract_features("Name some fruits, e.g. apples.").technical_patterns == ()
        assert extract_features("Use the short form, i.e. the summary").technical_patterns == ()
        assert extract_features("Call os.path here").technical_patterns == ("dotted_identifier",)

    def test_single_capital_is_not_technical(self):
        assert extract_features("I like A cats").technical_patterns == ()

    def test_quantifiers_and_descriptors(self):
        features = extract_features(
            "Tell me exactly how many users, specifically new ones, in a detailed report"
        )
        assert features.quantifier_hits == 3
        assert features.precise_descriptor_hits == 1

    def test_vague_adjectives(self):
        features = extract_features("List some ideas from several various sources")
        assert features.vague_adjective_hits == 3

    def test_structure_markers(self):
        text = "Steps:\n- load the file\n- clean it\n\nThen report the results."
        features = extract_features(text)
        assert features.has_list_markers
        assert features.has_sections
        assert features.connective_count == 1

    def test_numbered_list_marker(self):
        assert extract_features("Do this:\n1. First\n2) Second").has_list_markers

    def test_element_phrase_flags_are_case_insensitive(self):
        features = extract_features("ACT AS a chef. Given that guests are vegan, you MUST return a TABLE.")
        assert features.has_role
        assert features.has_context
        assert features.has_constraints
        assert features.has_output_spec
        assert features.has_format
        assert not features.has_examples


class TestFingerprint:
    def test_same_text_same_fingerprint(self):
        assert fingerprint("abc") == fingerprint("abc")

    def test_any_edit_changes_fingerprint(self):
        assert fingerprint("abc") != fingerprint("abc ")
