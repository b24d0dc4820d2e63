import random

import pytest

from anandak.catalog import BUCKET_TEXT, FEEDBACK, LANGUAGES, QUESTIONS, SCORE_VALUES, Trait
from anandak.errors import EngineInputError
from anandak.scoring import (
    bucket_for_score,
    feedback_for_trait,
    feedback_variants,
    final_assessment,
    final_assessments,
    score_buckets,
    strongest_traits,
)


def _answers(scores):
    return [(question.trait, score) for question, score in zip(QUESTIONS, scores)]


@pytest.mark.parametrize("language", sorted(LANGUAGES))
def test_every_trait_and_score_has_feedback(language):
    for trait in Trait:
        for score in SCORE_VALUES:
            assert feedback_for_trait(trait, score, language).strip()


def test_feedback_accepts_trait_values():
    assert feedback_for_trait("Social Cognition", 2) == feedback_for_trait(Trait.SOCIAL_COGNITION, 2)


def test_feedback_without_rng_is_deterministic():
    first = feedback_for_trait(Trait.GRATITUDE, 3)
    assert all(feedback_for_trait(Trait.GRATITUDE, 3) == first for _ in range(5))


def test_feedback_with_rng_stays_within_variants():
    rng = random.Random(7)
    variants = feedback_variants(Trait.GRATITUDE, 3)
    assert len(variants) > 1
    picks = {feedback_for_trait(Trait.GRATITUDE, 3, rng=rng) for _ in range(20)}
    assert picks <= set(variants)


@pytest.mark.parametrize("score", [0, 4, -1, True, "3", None])
def test_feedback_rejects_scores_outside_range(score):
    with pytest.raises(EngineInputError):
        feedback_for_trait(Trait.EMPATHY, score)


def test_feedback_rejects_unknown_trait_and_language():
    with pytest.raises(EngineInputError):
        feedback_for_trait("Patience", 2)
    with pytest.raises(EngineInputError):
        feedback_for_trait(Trait.EMPATHY, 2, "fr")


def test_buckets_for_six_questions():
    assert [(bucket.key, bucket.low, bucket.high) for bucket in score_buckets(6)] == [
        ("low", 6, 10),
        ("medium", 11, 14),
        ("high", 15, 18),
    ]


@pytest.mark.parametrize("question_count", [1, 2, 3, 4, 5, 6, 7, 10, 25])
def test_buckets_partition_the_score_range(question_count):
    buckets = score_buckets(question_count)
    covered = []
    for bucket in buckets:
        assert bucket.low <= bucket.high
        covered.extend(range(bucket.low, bucket.high + 1))
    assert covered == list(range(question_count, 3 * question_count + 1))
    for total in range(question_count, 3 * question_count + 1):
        assert sum(total in bucket for bucket in buckets) == 1


def test_bucket_for_score_rejects_out_of_range_totals():
    with pytest.raises(EngineInputError):
        bucket_for_score(5, 6)
    with pytest.raises(EngineInputError):
        bucket_for_score(19, 6)
    with pytest.raises(EngineInputError):
        score_buckets(0)


def test_all_top_scores_select_high_bucket():
    text = final_assessment(18, _answers([3] * 6))
    assert text.startswith(BUCKET_TEXT["high"]["en"])
    assert "Your strongest areas: Gratitude, Resilience" in text


def test_all_bottom_scores_select_low_bucket():
    text = final_assessment(6, _answers([1] * 6))
    assert text == BUCKET_TEXT["low"]["en"]


def test_middle_scores_select_medium_bucket_in_hindi():
    text = final_assessment(12, _answers([2] * 6), "hi")
    assert text == BUCKET_TEXT["medium"]["hi"]


def test_final_assessment_rejects_mismatched_total():
    with pytest.raises(EngineInputError):
        final_assessment(12, _answers([3] * 6))


def test_final_assessment_rejects_total_outside_range():
    with pytest.raises(EngineInputError):
        final_assessment(20, _answers([3] * 6))


def test_final_assessment_for_a_shorter_questionnaire():
    answers = _answers([3, 3, 2])
    assert final_assessment(8, answers).startswith(BUCKET_TEXT["high"]["en"])


def test_strongest_traits_keeps_order_and_skips_duplicates():
    answers = [(Trait.EMPATHY, 3), (Trait.COURAGE, 2), (Trait.EMPATHY, 3), (Trait.GRATITUDE, 3)]
    assert strongest_traits(answers) == [Trait.EMPATHY, Trait.GRATITUDE]


def test_feedback_table_matches_lookup():
    for trait, by_score in FEEDBACK.items():
        for score, by_language in by_score.items():
            for language, variants in by_language.items():
                assert feedback_variants(trait, score, language) == variants


def test_final_assessments_words_one_bucket_per_language():
    texts = final_assessments(18, _answers([3] * 6))
    assert set(texts) == set(LANGUAGES)
    assert texts["en"].startswith(BUCKET_TEXT["high"]["en"])
    assert texts["hi"].startswith(BUCKET_TEXT["high"]["hi"])
    assert "कृतज्ञता" in texts["hi"]
    assert texts["en"] == final_assessment(18, _answers([3] * 6), "en")


def test_final_assessments_rejects_unknown_language():
    with pytest.raises(EngineInputError):
        final_assessments(12, _answers([2] * 6), ("en", "fr"))
