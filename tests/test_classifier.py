"""Tests for category classification."""

from prompt_optimizer.classifier import category_scores, classify


class TestClassify:
    def test_defaults_to_general(self):
        result = classify("Do something nice with this stuff.")
        assert result.category == "general"
        assert result.confidence == 70

    def test_empty_text_is_general(self):
        assert classify("").category == "general"

    def test_single_keyword_beats_general(self):
        result = classify("Write a story about a dragon")
        assert result.category == "creative-writing"
        assert result.confidence == 75

    def test_more_keywords_win(self):
        result = classify("Write a Python function and debug the script")
        assert result.category == "code-generation"
        assert result.keyword_hits == 4
        assert result.confidence == 90

    def test_ties_go_to_first_category_in_order(self):
        # one data-analysis hit ("data") and one summarization hit ("summary")
        result = classify("Give me a summary of this data")
        assert result.category == "data-analysis"

    def test_confidence_capped(self):
        text = (
            "code function program script algorithm debug python javascript "
            "api implement refactor"
        )
        assert classify(text).confidence == 100

    def test_keywords_are_case_insensitive(self):
        assert classify("MARKETING CAMPAIGN for our BRAND").category == "marketing"


class TestCategoryScores:
    def test_general_is_last_with_base_score(self):
        scores = category_scores("anything")
        assert scores[-1] == ("general", 1, 0)

    def test_keyword_weight_is_three(self):
        scores = dict((name, score) for name, score, _ in category_scores("a poem and a story"))
        assert scores["creative-writing"] == 6
