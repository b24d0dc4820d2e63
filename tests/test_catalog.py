import pytest

from anandak.catalog import (
    COPY,
    FEEDBACK,
    LANGUAGES,
    QUESTIONS,
    SCORE_VALUES,
    Option,
    Question,
    Trait,
    get_copy,
    resolve_language,
    verify_catalog,
)
from anandak.errors import EngineInputError


def test_every_question_offers_one_option_per_score():
    for question in QUESTIONS:
        assert len(question.options) == 3
        assert sorted(question.scores) == list(SCORE_VALUES)


def test_catalog_covers_every_trait_once():
    assert [question.id for question in QUESTIONS] == list(range(1, len(QUESTIONS) + 1))
    assert {question.trait for question in QUESTIONS} == set(Trait)


def test_questions_and_options_have_both_languages():
    for question in QUESTIONS:
        for language in LANGUAGES:
            assert question.prompt(language)
            assert all(option.text(language) for option in question.options)


def test_feedback_table_is_exhaustive():
    for trait in Trait:
        for score in SCORE_VALUES:
            for language in LANGUAGES:
                assert FEEDBACK[trait][score][language]


def test_copy_has_the_same_sections_in_every_language():
    english = COPY["en"]
    for language in LANGUAGES:
        assert set(COPY[language]) == set(english)
        for section, entries in english.items():
            assert set(COPY[language][section]) == set(entries), section


def test_resolve_language_falls_back_to_english():
    assert resolve_language("HI") == "hi"
    assert resolve_language("fr") == "en"
    assert resolve_language(None) == "en"
    assert get_copy("fr") is COPY["en"]


def test_verify_catalog_rejects_duplicate_scores():
    broken = Question(
        id=99,
        trait=Trait.EMPATHY,
        prompt_en="?",
        prompt_hi="?",
        options=(Option(1, "a", "a"), Option(1, "b", "b"), Option(3, "c", "c")),
    )
    with pytest.raises(EngineInputError):
        verify_catalog([broken])


def test_verify_catalog_rejects_duplicate_ids():
    with pytest.raises(EngineInputError):
        verify_catalog([QUESTIONS[0], QUESTIONS[0]])



def test_trait_column_names():
    assert Trait.SOCIAL_COGNITION.column_name == "social_cognition_score"
    assert Trait.GRATITUDE.column_name == "gratitude_score"
