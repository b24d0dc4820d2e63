from unittest.mock import Mock

import pytest
import requests

from anandak.errors import CollaboratorError
from anandak.transliteration import GoogleInputToolsTransliterator, parse_input_tools_response

SUCCESS_PAYLOAD = ["SUCCESS", [["asha", ["आशा"], [], {"candidate_type": [0]}]]]


def _session(payload=None, error=None):
    session = Mock()
    if error is not None:
        session.get.side_effect = error
    else:
        session.get.return_value.json.return_value = payload
    return session


def test_parse_success_payload():
    assert parse_input_tools_response(SUCCESS_PAYLOAD) == "आशा"


@pytest.mark.parametrize(
    "payload",
    [["FAILED"], ["SUCCESS", []], ["SUCCESS", [["asha", []]]], None, {}, ["SUCCESS", [["asha", [""]]]]],
)
def test_parse_unusable_payloads(payload):
    assert parse_input_tools_response(payload) is None


def test_transliterate_sends_expected_query():
    session = _session(SUCCESS_PAYLOAD)
    transliterator = GoogleInputToolsTransliterator(url="https://example.test/request", timeout=2, session=session)

    assert transliterator.transliterate(" asha ") == "आशा"
    args, kwargs = session.get.call_args
    assert args == ("https://example.test/request",)
    assert kwargs["timeout"] == 2
    assert kwargs["params"]["ime"] == "transliteration_en_hi"
    assert kwargs["params"]["text"] == "asha"


def test_empty_text_skips_the_request():
    session = _session(SUCCESS_PAYLOAD)
    transliterator = GoogleInputToolsTransliterator(session=session)
    assert transliterator.transliterate("   ") == ""
    session.get.assert_not_called()


def test_timeout_falls_back_to_input_text():
    transliterator = GoogleInputToolsTransliterator(session=_session(error=requests.Timeout("slow")))
    assert transliterator("Bhopal") == "Bhopal"


def test_http_error_falls_back_to_input_text():
    session = _session(SUCCESS_PAYLOAD)
    session.get.return_value.raise_for_status.side_effect = requests.HTTPError("503")
    assert GoogleInputToolsTransliterator(session=session).transliterate("Indore") == "Indore"


def test_request_raises_collaborator_error_on_failed_payload():
    transliterator = GoogleInputToolsTransliterator(session=_session(["FAILED"]))
    with pytest.raises(CollaboratorError):
        transliterator.request("asha")
    assert transliterator.transliterate("asha") == "asha"


def test_default_session_is_a_requests_session(monkeypatch):
    fake_get = Mock()
    fake_get.return_value.json.return_value = SUCCESS_PAYLOAD
    monkeypatch.setattr(requests.Session, "get", fake_get)
    assert GoogleInputToolsTransliterator().transliterate("asha") == "आशा"
