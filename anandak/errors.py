from __future__ import annotations

from typing import Dict, Optional


class AssessmentError(Exception):
    """Base class for every error raised by the assessment package."""


class ValidationError(AssessmentError):
    """User input was rejected; the wizard stays where it is."""

    def __init__(self, message: str, errors: Optional[Dict[str, str]] = None) -> None:
        super().__init__(message)
        self.errors: Dict[str, str] = dict(errors or {})


class SelectionRequired(ValidationError):
    pass


class EngineInputError(AssessmentError, ValueError):
    """A score or trait outside the catalog reached the scoring engine."""


class CollaboratorError(AssessmentError):
    """Transliteration or submission sink call failed or timed out."""


class TransitionError(AssessmentError):
    """The requested action is not available in the wizard's current state."""


class CertificateFontMissing(AssessmentError):
    pass
