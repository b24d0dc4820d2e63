from datetime import datetime, timezone

import pytest

from anandak.sink import InMemorySubmissionSink
from anandak.wizard import AssessmentWizard

FIXED_MOMENT = datetime(2026, 10, 17, 9, 30, tzinfo=timezone.utc)

VALID_FORM = {
    "name": "Test User",
    "name_hi": "टेस्ट यूज़र",
    "age": "30",
    "gender": "Male",
    "country_code": "+91",
    "mobile": "9999999999",
    "email": "",
    "state": "Madhya Pradesh",
    "district": "Bhopal",
}


@pytest.fixture
def valid_form():
    return dict(VALID_FORM)


@pytest.fixture
def memory_sink():
    return InMemorySubmissionSink()


def run_wizard(wizard, form, scores, language="en"):
    wizard.select_language(language)
    wizard.submit_personal_info(form)
    wizard.acknowledge_instructions()
    for score in scores:
        wizard.select_option(score)
        wizard.advance()
    return wizard


@pytest.fixture
def completed_wizard(memory_sink, valid_form):
    wizard = AssessmentWizard(sink=memory_sink, clock=lambda: FIXED_MOMENT)
    return run_wizard(wizard, valid_form, [3, 2, 3, 1, 2, 3])
