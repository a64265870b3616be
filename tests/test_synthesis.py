"""Tests for question synthesis and the quality gate."""

import pytest

from quizlit.fallback.synthesis import (
    BLANK,
    GENERIC_OPTIONS,
    MULTIPLE_CHOICE_PREFIX,
    TRUE_FALSE_PREFIX,
    QuestionDraft,
    blank_answer,
    build_options,
    falsify_statement,
    make_multiple_choice,
    make_true_false,
)
from quizlit.fallback.validation import is_valid_question
from quizlit.models.quiz import QuestionType

SOURCE = (
    "Chlorophyll absorbs blue light strongly. Plants need sunlight. "
    "The Calvin cycle fixes carbon."
)


class TestBlankAnswer:
    def test_blanks_keyword(self) -> None:
        result = blank_answer("Chlorophyll absorbs blue light strongly.", ["chlorophyll"], [])
        assert result == (f"{BLANK} absorbs blue light strongly.", "Chlorophyll")

    def test_keeps_punctuation(self) -> None:
        result = blank_answer("Plants need sunlight.", ["sunlight"], [])
        assert result == (f"Plants need {BLANK}.", "sunlight")

    def test_short_keyword_skipped(self) -> None:
        result = blank_answer("Plants need sun.", ["sun"], [])
        assert result is None

    def test_falls_back_to_concept(self) -> None:
        result = blank_answer("The Calvin cycle fixes carbon.", [], ["Calvin cycle"])
        assert result == (f"The {BLANK} fixes carbon.", "Calvin cycle")

    def test_falls_back_to_middle_word(self) -> None:
        result = blank_answer("We all saw bright green leaves today.", [], [])
        assert result == (f"We all {BLANK} green leaves today.", "bright")

    def test_middle_word_skips_filler(self) -> None:
        result = blank_answer("We saw there which bright green leaves.", [], [])
        assert result == (f"We saw there which {BLANK} green leaves.", "bright")

    def test_nothing_to_blank(self) -> None:
        assert blank_answer("A cat sat.", [], []) is None


class TestBuildOptions:
    def test_keywords_then_concepts(self) -> None:
        options = build_options("sunlight", ["sunlight", "water", "energy"], ["green plants"])
        assert options == ["sunlight", "water", "energy", "green plants"]

    def test_generic_padding(self) -> None:
        assert build_options("sunlight", [], []) == ["sunlight", *GENERIC_OPTIONS[:3]]

    def test_concepts_containing_answer_excluded(self) -> None:
        options = build_options("water", [], ["water cycle", "soil nutrients"])
        assert options == ["water", "soil nutrients", "None of the above", "All of the above"]

    def test_always_four(self) -> None:
        keywords = [f"keyword{i}" for i in range(10)]
        assert len(build_options("answer", keywords, [])) == 4


class TestMakeMultipleChoice:
    def test_four_options_with_answer(self) -> None:
        draft = make_multiple_choice(
            "Plants need sunlight.", ["sunlight", "water", "energy"], ["green plants"]
        )
        assert draft is not None
        assert draft.type is QuestionType.MULTIPLE_CHOICE
        assert draft.text == f"{MULTIPLE_CHOICE_PREFIX}Plants need {BLANK}."
        assert len(draft.options) == 4
        assert draft.options[0] == "sunlight"
        assert draft.answer == "sunlight"

    @pytest.mark.parametrize("position", [0, 1, 2, 3, 6])
    def test_answer_position_rotates(self, position: int) -> None:
        draft = make_multiple_choice("Plants need sunlight.", ["sunlight", "water"], [], position)
        assert draft is not None
        assert draft.options[position % 4] == "sunlight"
        assert sorted(draft.options) == sorted(
            ["sunlight", "water", "None of the above", "All of the above"]
        )

    def test_long_question_truncated(self) -> None:
        sentence = "Photosynthesis " + "really " * 40 + "matters."
        draft = make_multiple_choice(sentence, ["photosynthesis"], [])
        assert draft is not None
        assert draft.text.endswith("...")
        assert len(draft.text) == len(MULTIPLE_CHOICE_PREFIX) + 150

    def test_unblankable_sentence(self) -> None:
        assert make_multiple_choice("A cat sat.", [], []) is None


class TestFalsifyStatement:
    def test_keyword_substitution(self) -> None:
        assert falsify_statement("A cat is an animal.", ["cat", "dog"]) == (
            "A dog is an animal.",
            "False",
        )

    def test_substitution_keeps_case_of_other_words(self) -> None:
        statement, label = falsify_statement("Plants absorb water.", ["water", "light"])
        assert (statement, label) == ("Plants absorb light.", "False")

    def test_last_keyword_has_no_replacement(self) -> None:
        statement, label = falsify_statement("Birds like dogs.", ["cats", "dogs"])
        assert (statement, label) == ("Birds like dogs.", "True")

    def test_negation_after_copula(self) -> None:
        assert falsify_statement("A cat is an animal.", []) == ("A cat is not an animal.", "False")

    def test_indonesian_copula(self) -> None:
        statement, label = falsify_statement("Daun adalah organ tumbuhan.", [])
        assert (statement, label) == ("Daun adalah not organ tumbuhan.", "False")

    def test_unchanged_when_nothing_applies(self) -> None:
        assert falsify_statement("Birds fly south in winter.", []) == (
            "Birds fly south in winter.",
            "True",
        )


class TestMakeTrueFalse:
    def test_draft_shape(self) -> None:
        draft = make_true_false("A cat is an animal.", ["cat", "dog"])
        assert draft.type is QuestionType.TRUE_FALSE
        assert draft.text == f"{TRUE_FALSE_PREFIX}A dog is an animal."
        assert draft.options == ["True", "False"]
        assert draft.answer == "False"


class TestIsValidQuestion:
    def _mc(self, **overrides: object) -> QuestionDraft:
        data: dict = {
            "text": "Complete the sentence: Plants need ____.",
            "type": QuestionType.MULTIPLE_CHOICE,
            "options": ["sunlight", "water", "soil", "air"],
            "answer": "sunlight",
        }
        data.update(overrides)
        return QuestionDraft(**data)

    def test_valid_multiple_choice(self) -> None:
        assert is_valid_question(self._mc(), SOURCE)

    def test_answer_match_is_case_insensitive(self) -> None:
        assert is_valid_question(self._mc(answer="Sunlight", options=["Sunlight", "a", "b", "c"]), SOURCE)

    def test_short_text_rejected(self) -> None:
        assert not is_valid_question(self._mc(text="Too short"), SOURCE)

    def test_too_few_options_rejected(self) -> None:
        assert not is_valid_question(self._mc(options=["sunlight", "water", "soil"]), SOURCE)

    def test_answer_missing_from_source_rejected(self) -> None:
        draft = self._mc(answer="moonlight", options=["moonlight", "water", "soil", "air"])
        assert not is_valid_question(draft, SOURCE)

    def test_placeholder_option_rejected(self) -> None:
        draft = self._mc(options=["sunlight", "Concept A", "soil", "air"])
        assert not is_valid_question(draft, SOURCE)

    def test_placeholder_text_rejected(self) -> None:
        draft = QuestionDraft(
            text="True or False: Option 1 is correct.",
            type=QuestionType.TRUE_FALSE,
            options=["True", "False"],
            answer="True",
        )
        assert not is_valid_question(draft, SOURCE)

    def test_true_false_not_checked_against_source(self) -> None:
        draft = make_true_false("A cat is an animal.", ["cat", "dog"])
        assert is_valid_question(draft, SOURCE)
