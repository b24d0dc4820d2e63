from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Literal, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic import ValidationError as PydanticValidationError

from .catalog import DEFAULT_GENDER, Trait, get_copy
from .errors import ValidationError
from .regions import DEFAULT_COUNTRY_CODE, district_belongs_to, is_known_dial_code, is_known_state

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
MOBILE_PATTERN = re.compile(r"^[0-9][0-9 \-]*$")
MOBILE_MIN_DIGITS = 6
MOBILE_MAX_DIGITS = 15

ROW_FORMATS: Tuple[str, ...] = ("detailed", "legacy")
DEFAULT_TABLES: Dict[str, str] = {
    "detailed": "assessment_submissions",
    "legacy": "assessment_submissions_legacy",
}

USER_INFO_FIELDS: Tuple[str, ...] = (
    "name",
    "name_hi",
    "age",
    "gender",
    "country_code",
    "mobile",
    "email",
    "state",
    "district",
)


class UserInfo(BaseModel):
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    name: str = Field(min_length=2)
    name_hi: str = Field(min_length=1)
    age: int = Field(ge=1, le=120)
    gender: Literal["Male", "Female", "Other", "Prefer not to say"] = DEFAULT_GENDER
    country_code: str = DEFAULT_COUNTRY_CODE
    mobile: str
    email: Optional[str] = None
    state: str
    district: str

    @field_validator("country_code")
    @classmethod
    def _known_dial_code(cls, value: str) -> str:
        if not is_known_dial_code(value):
            raise ValueError(f"unknown dial code {value!r}")
        return value

    @field_validator("mobile")
    @classmethod
    def _plausible_mobile(cls, value: str) -> str:
        digits = re.sub(r"\D", "", value)
        if not MOBILE_PATTERN.match(value) or not MOBILE_MIN_DIGITS <= len(digits) <= MOBILE_MAX_DIGITS:
            raise ValueError("mobile number must hold 6 to 15 digits")
        return value

    @field_validator("email", mode="before")
    @classmethod
    def _optional_email(cls, value: Any) -> Optional[str]:
        if value is None:
            return None
        value = str(value).strip()
        if not value:
            return None
        if not EMAIL_PATTERN.match(value):
            raise ValueError("invalid email address")
        return value

    @field_validator("state")
    @classmethod
    def _known_state(cls, value: str) -> str:
        if not is_known_state(value):
            raise ValueError(f"unknown state {value!r}")
        return value

    @field_validator("district")
    @classmethod
    def _district_in_state(cls, value: str, info: ValidationInfo) -> str:
        if not district_belongs_to(info.data.get("state"), value):
            raise ValueError(f"district {value!r} is not in the selected state")
        return value


def parse_user_info(form: Mapping[str, Any], language: str = "en") -> UserInfo:
    """Validate submitted form fields; failures carry one localized message per field."""
    values = {name: form.get(name) for name in USER_INFO_FIELDS if form.get(name) not in (None, "")}
    if "email" in form:
        values["email"] = form.get("email")
    try:
        return UserInfo(**values)
    except PydanticValidationError as exc:
        messages = get_copy(language)["validation"]
        errors: Dict[str, str] = {}
        for error in exc.errors():
            field_name = str(error["loc"][0]) if error.get("loc") else "form"
            errors.setdefault(field_name, messages.get(field_name, error["msg"]))  # type: ignore[union-attr]
        raise ValidationError("Personal information is incomplete or invalid", errors) from exc


@dataclass(frozen=True)
class AnswerRecord:
    question_id: int
    trait: Trait
    score: int
    feedback_text: str
    localized_feedback: Dict[str, str] = field(default_factory=dict, compare=False)

    def feedback(self, language: str) -> str:
        return self.localized_feedback.get(language, self.feedback_text)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.question_id,
            "trait": self.trait.value,
            "score": self.score,
            "feedback": self.feedback_text,
        }


def format_long_date(moment: datetime) -> str:
    return f"{moment:%B} {moment.day}, {moment.year}"


@dataclass(frozen=True)
class SubmissionRecord:
    user: UserInfo
    answers: Tuple[AnswerRecord, ...]
    total_score: int
    final_assessment_text: str
    submitted_at: datetime
    language: str = "en"
    localized_final_assessment: Dict[str, str] = field(default_factory=dict, compare=False)

    @property
    def trait_scores(self) -> Dict[Trait, int]:
        scores = {trait: 0 for trait in Trait}
        for answer in self.answers:
            scores[answer.trait] = answer.score
        return scores

    @property
    def feedback_comments(self) -> List[Dict[str, str]]:
        return [{"trait": answer.trait.value, "feedback": answer.feedback_text} for answer in self.answers]

    @property
    def display_date(self) -> str:
        return format_long_date(self.submitted_at)

    def final_assessment(self, language: str) -> str:
        return self.localized_final_assessment.get(language, self.final_assessment_text)

    def _personal_columns(self) -> Dict[str, Any]:
        user = self.user
        return {
            "name": user.name,
            "name_hi": user.name_hi,
            "age": user.age,
            "gender": user.gender,
            "country_code": user.country_code or DEFAULT_COUNTRY_CODE,
            "mobile": user.mobile,
            "email": user.email or None,
            "state": user.state,
            "district": user.district,
        }

    def to_detailed_row(self) -> Dict[str, Any]:
        row = self._personal_columns()
        row["total_score"] = self.total_score
        row["final_assessment"] = self.final_assessment_text
        for trait, score in self.trait_scores.items():
            row[trait.column_name] = score
        row["assessment_data"] = [answer.to_dict() for answer in self.answers]
        row["feedback_comments"] = self.feedback_comments
        return row

    def to_legacy_row(self) -> Dict[str, Any]:
        row = self._personal_columns()
        row["assessment_data"] = [answer.to_dict() for answer in self.answers]
        row["total_score"] = self.total_score
        row["final_assessment_text"] = self.final_assessment_text
        row["date"] = self.display_date
        return row

    def to_row(self, row_format: str = "detailed") -> Dict[str, Any]:
        if row_format == "legacy":
            return self.to_legacy_row()
        if row_format == "detailed":
            return self.to_detailed_row()
        raise ValueError(f"Unknown row format {row_format!r}; expected one of {ROW_FORMATS}")
