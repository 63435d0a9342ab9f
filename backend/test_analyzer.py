"""
Prompt strength analyzer verification
Run with: pytest backend/test_analyzer.py
"""

import pytest

from diagram_studio import config
from diagram_studio.analyzer import (
    MESSAGES,
    MessageKey,
    StrengthLevel,
    analyze_prompt_strength,
    is_strong_enough,
    level_for_score,
    level_hint,
    next_suggestion,
    score_components,
)
from diagram_studio.analyzer.strength import length_score
from diagram_studio.analyzer.workspace import DEFAULT_EXAMPLES
from diagram_studio.language import Language, default_language, resolve_language


KEYWORD_FREE = (
    "a quiet lakeside retreat with timber decks, "
    "tall windows and a warm welcoming hall for small events"
)


class TestEmptyPrompt:

    @pytest.mark.parametrize("raw", ["", "   ", "\n\t  \n", None])
    def test_empty_input_scores_zero(self, raw):
        verdict = analyze_prompt_strength(raw, "en")
        assert verdict.score == 0
        assert verdict.level == StrengthLevel.EXPLORATORY
        assert verdict.label == "Empty"
        assert verdict.reasons == ("No prompt yet",)
        assert len(verdict.suggestions) == 1

    def test_empty_input_in_chinese(self):
        verdict = analyze_prompt_strength("", "zh")
        assert verdict.label == "未输入"
        assert verdict.reasons == ("还没有输入 prompt",)
        assert verdict.suggestions[0].startswith("先写")


class TestLevels:

    @pytest.mark.parametrize("score,level", [
        (100, StrengthLevel.PRECISE),
        (70, StrengthLevel.PRECISE),
        (69, StrengthLevel.FOCUSED),
        (40, StrengthLevel.FOCUSED),
        (39, StrengthLevel.EXPLORATORY),
        (0, StrengthLevel.EXPLORATORY),
    ])
    def test_thresholds(self, score, level):
        assert level_for_score(score) == level

    def test_level_hints_follow_language(self):
        assert level_hint(StrengthLevel.PRECISE, "en") == "Precise, highly controllable."
        assert level_hint(StrengthLevel.PRECISE, "zh") == "很精确，生成会更可控。"


class TestSubScores:

    @pytest.mark.parametrize("length,points", [
        (1, 10), (39, 10), (40, 25), (79, 25), (80, 40), (119, 40),
        (120, 60), (259, 60), (260, 55), (379, 55), (380, 45), (1000, 45),
    ])
    def test_length_buckets(self, length, points):
        assert length_score("x" * length) == points

    def test_structure_signals_add_up(self):
        breakdown = score_components("Zoning diagram\n- public zone\n- private zone")
        assert breakdown.structure == 18  # line break + bullets, no punctuation

        breakdown = score_components("Zoning diagram: public,\n- private")
        assert breakdown.structure == 28

    def test_keyword_score_is_clamped(self):
        assert score_components("diagram " * 10).keywords == 30

    def test_constraints_are_weighted_and_clamped(self):
        assert score_components("3 zones / 2 paths").constraints == 4 + 4 + 1
        assert score_components("public and staff").constraints == 4
        assert score_components("1 2 3 4 5 6").constraints == 20

    def test_vague_penalty_is_clamped(self):
        assert score_components("nice").vague_penalty == 8
        assert score_components("nice nice nice").vague_penalty == 20


class TestScenarios:

    def test_nice_diagram(self):
        verdict = analyze_prompt_strength("nice diagram", "en")
        # length 10 + keyword 6 - vague 8
        assert verdict.score == 8
        assert verdict.level == StrengthLevel.EXPLORATORY
        assert verdict.label == "Exploratory"
        assert verdict.reasons == (
            "Too little detail",
            "Few diagram terms (a bit vague)",
            "Few constraints (model may drift)",
            "Contains vague words (reduces control)",
        )
        assert len(verdict.suggestions) == 3

    def test_precise_example(self):
        verdict = analyze_prompt_strength(DEFAULT_EXAMPLES[2].text, "en")
        assert verdict.score == 100
        assert verdict.level == StrengthLevel.PRECISE
        assert "Clear diagram / architecture terms" in verdict.reasons
        assert "Has constraints / categories (more controllable)" in verdict.reasons
        assert verdict.suggestions == ()
        assert next_suggestion(verdict, "en") == "Looks solid and controllable."

    def test_chinese_prompt_stays_in_chinese(self):
        verdict = analyze_prompt_strength("随便画一个好看的图", "zh")
        assert verdict.score == 0
        assert verdict.label == "探索 Exploratory"
        assert verdict.reasons[-1] == "存在模糊词（会降低可控性）"

        zh_strings = {entry[Language.ZH] for entry in MESSAGES.values()}
        en_strings = {entry[Language.EN] for entry in MESSAGES.values()}
        for text in verdict.reasons + verdict.suggestions:
            assert text in zh_strings
            assert text not in en_strings

    def test_unknown_language_answers_in_english(self):
        verdict = analyze_prompt_strength("nice diagram", "fr")
        assert verdict.reasons[0] == "Too little detail"

    def test_detail_reason_threshold(self):
        assert analyze_prompt_strength("x" * 80).reasons[0] == "Enough detail"
        assert analyze_prompt_strength("x" * 79).reasons[0] == "Too little detail"


class TestProperties:

    SAMPLES = [
        "nice",
        "12345",
        "massing " * 80,
        "Circulation diagram:\n- loop\n- core\n- 3 nodes / 2 paths",
        "随便好看高级感酷一点优化一下更好一点",
        KEYWORD_FREE,
    ] + [example.text for example in DEFAULT_EXAMPLES]

    @pytest.mark.parametrize("text", SAMPLES)
    def test_score_in_range_and_level_consistent(self, text):
        verdict = analyze_prompt_strength(text, "en")
        assert 0 <= verdict.score <= 100
        assert verdict.level == level_for_score(verdict.score)
        assert 3 <= len(verdict.reasons) <= 4
        assert 0 <= len(verdict.suggestions) <= 3

    @pytest.mark.parametrize("text", SAMPLES)
    def test_idempotent(self, text):
        first = analyze_prompt_strength(text, "zh")
        second = analyze_prompt_strength(text, "zh")
        assert first == second
        assert first.to_dict() == second.to_dict()

    def test_non_text_input_degrades_to_a_verdict(self):
        assert analyze_prompt_strength(12345).score == 14  # length 10 + one number 4
        assert 0 <= analyze_prompt_strength(b"\xff\xfe diagram").score <= 100
        assert 0 <= analyze_prompt_strength(["a", "b"]).score <= 100

    def test_adding_a_diagram_type_raises_the_score(self):
        assert score_components(KEYWORD_FREE).keywords == 0
        base = analyze_prompt_strength(KEYWORD_FREE).score
        extended = analyze_prompt_strength(KEYWORD_FREE + " circulation diagram").score
        assert extended >= base + 6

    def test_vague_phrase_lowers_the_score(self):
        specific = "Circulation diagram for a museum: main loop, secondary shortcuts"
        vague = "Circulation diagram for a museum: main loop, make it nice"
        assert analyze_prompt_strength(vague).score < analyze_prompt_strength(specific).score

    def test_strength_gate(self):
        verdict = analyze_prompt_strength("nice diagram")
        assert not is_strong_enough(verdict, 25)
        assert is_strong_enough(verdict, 8)


class TestDiagnosticEdges:

    @pytest.mark.parametrize("text,keywords,reason", [
        ("plan plan plan", 18, "Clear diagram / architecture terms"),
        ("plan plan", 12, "Few diagram terms (a bit vague)"),
    ])
    def test_clear_terms_edge(self, text, keywords, reason):
        assert score_components(text).keywords == keywords
        assert analyze_prompt_strength(text, "en").reasons[1] == reason

    @pytest.mark.parametrize("text,constraints,reason", [
        ("1 / 2 /", 10, "Has constraints / categories (more controllable)"),
        ("1 / 2", 9, "Few constraints (model may drift)"),
    ])
    def test_constraint_reason_edge(self, text, constraints, reason):
        assert score_components(text).constraints == constraints
        assert analyze_prompt_strength(text, "en").reasons[2] == reason

    @pytest.mark.parametrize("text,constraints,suggested", [
        ("1 2", 8, False),
        ("1 / / /", 7, True),
    ])
    def test_hard_constraint_suggestion_edge(self, text, constraints, suggested):
        assert score_components(text).constraints == constraints
        suggestions = analyze_prompt_strength(text, "en").suggestions
        assert (MESSAGES[MessageKey.SUGGEST_HARD_CONSTRAINTS][Language.EN] in suggestions) == suggested

    @pytest.mark.parametrize("text,structure,suggested", [
        ("zoning, loop", 10, False),
        ("zoning\nloop", 8, True),
        ("zoning loop", 0, True),
    ])
    def test_grouping_suggestion_edge(self, text, structure, suggested):
        assert score_components(text).structure == structure
        suggestions = analyze_prompt_strength(text, "en").suggestions
        assert (MESSAGES[MessageKey.SUGGEST_GROUPING][Language.EN] in suggestions) == suggested


class TestDefaultLanguage:

    def test_configured_default_applies_when_language_is_missing(self, monkeypatch):
        monkeypatch.setattr(config, "DEFAULT_LANGUAGE", "zh")
        assert default_language() == Language.ZH
        assert analyze_prompt_strength("").label == "未输入"
        assert analyze_prompt_strength("nice diagram", "fr").reasons[0] == "信息量偏少"
        assert level_hint(StrengthLevel.PRECISE) == "很精确，生成会更可控。"

    def test_explicit_language_wins_over_default(self, monkeypatch):
        monkeypatch.setattr(config, "DEFAULT_LANGUAGE", "zh")
        assert resolve_language("en") == Language.EN

    def test_unknown_default_answers_in_english(self, monkeypatch):
        monkeypatch.setattr(config, "DEFAULT_LANGUAGE", "klingon")
        assert resolve_language(None) == Language.EN
