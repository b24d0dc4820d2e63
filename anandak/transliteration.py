from __future__ import annotations

import logging
from typing import Any, Optional

import requests

from .config import DEFAULT_TRANSLITERATION_URL
from .errors import CollaboratorError

logger = logging.getLogger(__name__)


def parse_input_tools_response(payload: Any) -> Optional[str]:
    """Pull the first candidate out of ``["SUCCESS", [[text, [candidate, ...], ...]]]``."""
    try:
        if payload[0] != "SUCCESS":
            return None
        candidate = payload[1][0][1][0]
    except (IndexError, KeyError, TypeError):
        return None
    return candidate if isinstance(candidate, str) and candidate else None


class GoogleInputToolsTransliterator:
    """English to Hindi transliteration through the Google Input Tools endpoint."""

    def __init__(
        self,
        url: str = DEFAULT_TRANSLITERATION_URL,
        timeout: float = 3.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self.session = session or requests.Session()

    def request(self, text: str) -> str:
        """Call the service; raises ``CollaboratorError`` when no transliteration comes back."""
        params = {
            "ime": "transliteration_en_hi",
            "num": 1,
            "cp": 0,
            "cs": 1,
            "ie": "utf-8",
            "oe": "utf-8",
            "app": "jsapi",
            "text": text,
        }
        try:
            response = self.session.get(self.url, params=params, timeout=self.timeout)
            response.raise_for_status()
            payload = response.json()
        except (requests.RequestException, ValueError) as exc:
            raise CollaboratorError(f"Transliteration request failed: {exc}") from exc

        candidate = parse_input_tools_response(payload)
        if candidate is None:
            raise CollaboratorError("Transliteration service returned no candidate")
        return candidate

    def transliterate(self, text: str) -> str:
        """Transliterate ``text``, echoing it back unchanged on any failure."""
        text = (text or "").strip()
        if not text:
            return ""
        try:
            return self.request(text)
        except CollaboratorError as exc:
            logger.warning("Falling back to input text: %s", exc)
            return text

    __call__ = transliterate
