"""Scoring and feedback engine.

Pure functions over the static catalog: per-trait feedback for a single answer,
the score buckets for a questionnaire of N questions, and the overall assessment
text for a finished questionnaire. Nothing here keeps state between calls.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .catalog import (
    BUCKET_KEYS,
    BUCKET_TEXT,
    FEEDBACK,
    LANGUAGES,
    MAX_OPTION_SCORE,
    MIN_OPTION_SCORE,
    SCORE_VALUES,
    STRENGTHS_SENTENCE,
    Trait,
    trait_label,
)
from .errors import EngineInputError


@dataclass(frozen=True)
class ScoreBucket:
    key: str
    low: int
    high: int

    def __contains__(self, score: object) -> bool:
        return isinstance(score, int) and self.low <= score <= self.high


def coerce_trait(trait: Trait | str) -> Trait:
    if isinstance(trait, Trait):
        return trait
    try:
        return Trait(trait)
    except ValueError:
        raise EngineInputError(f"Unknown trait {trait!r}") from None


def _check_language(language: str) -> None:
    if language not in LANGUAGES:
        raise EngineInputError(f"Unsupported language {language!r}")


def _check_score(score: object) -> int:
    # bool is an int subclass; True would otherwise pass as a score of 1.
    if isinstance(score, bool) or not isinstance(score, int) or score not in SCORE_VALUES:
        raise EngineInputError(f"Score {score!r} outside {SCORE_VALUES}")
    return score


def feedback_variants(trait: Trait | str, score: int, language: str = "en") -> Tuple[str, ...]:
    trait = coerce_trait(trait)
    score = _check_score(score)
    _check_language(language)
    return FEEDBACK[trait][score][language]


def feedback_for_trait(
    trait: Trait | str,
    score: int,
    language: str = "en",
    rng: Optional[random.Random] = None,
) -> str:
    variants = feedback_variants(trait, score, language)
    if rng is None or len(variants) == 1:
        return variants[0]
    return rng.choice(variants)


def score_range(question_count: int) -> Tuple[int, int]:
    if question_count < 1:
        raise EngineInputError(f"Question count must be positive, got {question_count}")
    return question_count * MIN_OPTION_SCORE, question_count * MAX_OPTION_SCORE


def score_buckets(question_count: int) -> List[ScoreBucket]:
    """Split ``[N*min, N*max]`` into low/medium/high buckets.

    The span is cut at one third and two thirds (rounded down), so for six
    questions scored 1..3 the buckets are 6-10, 11-14 and 15-18.
    """
    lowest, highest = score_range(question_count)
    span = highest - lowest
    cuts = [lowest + (span * step) // len(BUCKET_KEYS) for step in range(1, len(BUCKET_KEYS))]

    buckets: List[ScoreBucket] = []
    start = lowest
    for key, end in zip(BUCKET_KEYS, cuts + [highest]):
        buckets.append(ScoreBucket(key=key, low=start, high=end))
        start = end + 1
    return buckets


def bucket_for_score(total_score: int, question_count: int) -> ScoreBucket:
    lowest, highest = score_range(question_count)
    if isinstance(total_score, bool) or not isinstance(total_score, int):
        raise EngineInputError(f"Total score must be an integer, got {total_score!r}")
    if not lowest <= total_score <= highest:
        raise EngineInputError(
            f"Total score {total_score} outside [{lowest}, {highest}] for {question_count} questions"
        )
    for bucket in score_buckets(question_count):
        if total_score in bucket:
            return bucket
    raise EngineInputError(f"No bucket covers total score {total_score}")


def strongest_traits(trait_answers: Iterable[Tuple[Trait | str, int]]) -> List[Trait]:
    strongest: List[Trait] = []
    for trait, score in trait_answers:
        trait = coerce_trait(trait)
        if _check_score(score) == MAX_OPTION_SCORE and trait not in strongest:
            strongest.append(trait)
    return strongest


def final_assessments(
    total_score: int,
    trait_answers: Sequence[Tuple[Trait | str, int]],
    languages: Sequence[str] = tuple(LANGUAGES),
) -> Dict[str, str]:
    """Overall assessment text for a finished questionnaire, one entry per language.

    ``trait_answers`` holds one ``(trait, score)`` pair per question, so its
    length is the question count used to derive the buckets. The bucket and
    the strongest traits are resolved once and then worded per language.
    """
    for language in languages:
        _check_language(language)
    answers = list(trait_answers)
    bucket = bucket_for_score(total_score, len(answers))
    if sum(_check_score(score) for _, score in answers) != total_score:
        raise EngineInputError(f"Total score {total_score} does not match the answers given")
    strongest = strongest_traits(answers)

    texts: Dict[str, str] = {}
    for language in languages:
        text = BUCKET_TEXT[bucket.key][language]
        if strongest:
            labels = ", ".join(trait_label(trait, language) for trait in strongest)
            text = f"{text} {STRENGTHS_SENTENCE[language].format(traits=labels)}"
        texts[language] = text
    return texts


def final_assessment(
    total_score: int,
    trait_answers: Sequence[Tuple[Trait | str, int]],
    language: str = "en",
) -> str:
    return final_assessments(total_score, trait_answers, (language,))[language]
