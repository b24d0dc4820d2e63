"""Assessment wizard state machine.

One ``AssessmentWizard`` is one user's session::

    LanguageSelect -> PersonalInfo -> Instructions -> Question(0..N-1) -> Results -> Terminal

Every transition is an explicit method call. Entering ``Results`` builds the
``SubmissionRecord`` and commits it to the submission sink exactly once; a
failed commit leaves a notice on the wizard instead of raising.
"""

from __future__ import annotations

import logging
import random
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple
from uuid import uuid4

from .catalog import (
    DEFAULT_LANGUAGE,
    LANGUAGES,
    PERSISTED_LANGUAGE,
    QUESTIONS,
    Question,
    get_copy,
    verify_catalog,
)
from .errors import CollaboratorError, SelectionRequired, TransitionError, ValidationError
from .models import AnswerRecord, SubmissionRecord, UserInfo, parse_user_info
from .scoring import feedback_for_trait, final_assessments
from .sink import SinkReceipt, SubmissionSink

logger = logging.getLogger(__name__)


class Step(str, Enum):
    LANGUAGE_SELECT = "language"
    PERSONAL_INFO = "personal_info"
    INSTRUCTIONS = "instructions"
    QUESTION = "question"
    RESULTS = "results"
    TERMINAL = "terminal"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AssessmentWizard:
    def __init__(
        self,
        sink: SubmissionSink,
        questions: Optional[Sequence[Question]] = None,
        rng: Optional[random.Random] = None,
        clock: Callable[[], datetime] = _utcnow,
        wizard_id: Optional[str] = None,
    ) -> None:
        self.id = wizard_id or uuid4().hex
        self.sink = sink
        self.questions: Tuple[Question, ...] = tuple(QUESTIONS if questions is None else questions)
        if not self.questions:
            raise ValueError("A wizard needs at least one question")
        verify_catalog(self.questions)
        self.rng = rng
        self.clock = clock

        self.step = Step.LANGUAGE_SELECT
        self.language = DEFAULT_LANGUAGE
        self.user_info: Optional[UserInfo] = None
        self.question_index = 0
        self._answers: List[AnswerRecord] = []
        self.pending_score: Optional[int] = None
        self.pending_feedback: Optional[str] = None

        self.submission: Optional[SubmissionRecord] = None
        self.receipt: Optional[SinkReceipt] = None
        self.notice: Optional[str] = None
        self._committed = False

        self._transliteration_ticket = 0
        self.name_hi_suggestion: Optional[str] = None

    # ------------------------------------------------------------------ helpers

    def _require(self, *steps: Step) -> None:
        if self.step not in steps:
            expected = ", ".join(step.value for step in steps)
            raise TransitionError(f"Action needs step {expected}; wizard {self.id} is at {self.step.value}")

    def _move(self, step: Step) -> None:
        logger.debug("Wizard %s: %s -> %s", self.id, self.step.value, step.value)
        self.step = step

    @property
    def copy(self) -> Dict[str, Any]:
        return get_copy(self.language)  # type: ignore[return-value]

    @property
    def answers(self) -> Tuple[AnswerRecord, ...]:
        return tuple(self._answers)

    @property
    def total_questions(self) -> int:
        return len(self.questions)

    @property
    def current_question(self) -> Question:
        self._require(Step.QUESTION)
        return self.questions[self.question_index]

    @property
    def is_last_question(self) -> bool:
        return self.question_index == self.total_questions - 1

    @property
    def progress_percent(self) -> int:
        return int(len(self._answers) * 100 / self.total_questions)

    @property
    def is_terminal(self) -> bool:
        return self.step is Step.TERMINAL

    # ------------------------------------------------------------- transitions

    def select_language(self, language: str) -> None:
        self._require(Step.LANGUAGE_SELECT)
        if language not in LANGUAGES:
            message = get_copy(DEFAULT_LANGUAGE)["errors"]["invalid_language"]  # type: ignore[index]
            raise ValidationError(message, {"language": message})
        self.language = language
        self._move(Step.PERSONAL_INFO)

    def begin_transliteration(self, text: str) -> int:
        """Register a transliteration request; only the newest ticket may be applied."""
        self._require(Step.PERSONAL_INFO)
        self._transliteration_ticket += 1
        return self._transliteration_ticket

    def apply_transliteration(self, ticket: int, value: str) -> bool:
        if self.step is not Step.PERSONAL_INFO or ticket != self._transliteration_ticket:
            logger.debug("Wizard %s: discarding stale transliteration ticket %s", self.id, ticket)
            return False
        self.name_hi_suggestion = value
        return True

    def submit_personal_info(self, form: Mapping[str, Any]) -> UserInfo:
        self._require(Step.PERSONAL_INFO)
        user_info = parse_user_info(form, self.language)
        self.user_info = user_info
        self._move(Step.INSTRUCTIONS)
        return user_info

    def acknowledge_instructions(self) -> None:
        self._require(Step.INSTRUCTIONS)
        self.question_index = 0
        self._move(Step.QUESTION)

    def select_option(self, score: int) -> str:
        """Hold ``score`` as the pending answer and return its feedback in the display language."""
        question = self.current_question
        if score not in question.scores:
            message = self.copy["errors"]["selection_required"]
            raise ValidationError(message, {"option": message})
        self.pending_score = score
        self.pending_feedback = feedback_for_trait(question.trait, score, self.language, self.rng)
        return self.pending_feedback

    def advance(self) -> Step:
        question = self.current_question
        if self.pending_score is None:
            message = self.copy["errors"]["selection_required"]
            raise SelectionRequired(message, {"option": message})

        self._answers.append(self._answer_record(question, self.pending_score))
        self.pending_score = None
        self.pending_feedback = None

        if len(self._answers) < self.total_questions:
            self.question_index += 1
            return self.step

        self.submission = self._build_submission()
        self._move(Step.RESULTS)
        logger.info(
            "Wizard %s completed: total score %s of %s",
            self.id,
            self.submission.total_score,
            3 * self.total_questions,
        )
        self.commit()
        return self.step

    def commit(self) -> Optional[SinkReceipt]:
        """Hand the submission to the sink once; later calls return the first outcome."""
        self._require(Step.RESULTS)
        if self._committed:
            return self.receipt
        self._committed = True
        assert self.submission is not None
        try:
            self.receipt = self.sink.submit(self.submission)
        except CollaboratorError as exc:
            logger.warning("Wizard %s: submission was not stored: %s", self.id, exc)
            self.notice = self.copy["errors"]["submission_failed"].format(reason=exc)
            return None
        return self.receipt

    def dismiss_notice(self) -> None:
        self.notice = None

    def restart(self) -> None:
        """End the session. A new wizard is needed to take the assessment again."""
        self._require(
            Step.LANGUAGE_SELECT,
            Step.PERSONAL_INFO,
            Step.INSTRUCTIONS,
            Step.QUESTION,
            Step.RESULTS,
        )
        self._move(Step.TERMINAL)

    # ----------------------------------------------------------------- records

    def _answer_record(self, question: Question, score: int) -> AnswerRecord:
        localized = {
            language: feedback_for_trait(question.trait, score, language, self.rng) for language in LANGUAGES
        }
        if self.pending_feedback:
            localized[self.language] = self.pending_feedback
        return AnswerRecord(
            question_id=question.id,
            trait=question.trait,
            score=score,
            feedback_text=localized[PERSISTED_LANGUAGE],
            localized_feedback=localized,
        )

    def _build_submission(self) -> SubmissionRecord:
        assert self.user_info is not None
        total_score = sum(answer.score for answer in self._answers)
        trait_answers = [(answer.trait, answer.score) for answer in self._answers]
        localized = final_assessments(total_score, trait_answers, tuple(LANGUAGES))
        return SubmissionRecord(
            user=self.user_info,
            answers=tuple(self._answers),
            total_score=total_score,
            final_assessment_text=localized[PERSISTED_LANGUAGE],
            submitted_at=self.clock(),
            language=self.language,
            localized_final_assessment=localized,
        )
