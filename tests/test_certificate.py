from datetime import datetime

import pytest

import anandak.certificate as certificate
from anandak.catalog import Trait
from anandak.certificate import (
    build_certificate,
    certificate_views,
    format_date_hindi,
    generate_certificate_pdf,
    prefixed_name,
    sanitize_for_pdf,
    to_devanagari_digits,
)
from anandak.errors import CertificateFontMissing, ValidationError
from anandak.models import parse_user_info

PLACE_NAMES = {"Bhopal": "भोपाल", "Madhya Pradesh": "मध्य प्रदेश"}


def fake_transliterate(text):
    return PLACE_NAMES.get(text, text)


def test_devanagari_digits_and_hindi_date():
    assert to_devanagari_digits("2026") == "२०२६"
    assert format_date_hindi(datetime(2026, 10, 17)) == "१७ अक्टूबर, २०२६"


@pytest.mark.parametrize(
    "gender, language, expected",
    [
        ("Male", "en", "Mr. Test User"),
        ("Female", "en", "Ms. Test User"),
        ("Other", "en", "Test User"),
        ("Male", "hi", "श्री टेस्ट यूज़र"),
        ("Female", "hi", "सुश्री टेस्ट यूज़र"),
        ("Prefer not to say", "hi", "टेस्ट यूज़र"),
    ],
)
def test_prefixed_name(valid_form, gender, language, expected):
    valid_form["gender"] = gender
    assert prefixed_name(parse_user_info(valid_form), language) == expected


def test_english_certificate(completed_wizard):
    view = build_certificate(completed_wizard.submission, "en", transliterate=fake_transliterate)
    assert view.name == "Mr. Test User"
    assert view.name_suffix == ""
    assert "of Bhopal, Madhya Pradesh" in view.main_line
    assert view.date_text == "October 17, 2026"
    assert view.summary == completed_wizard.submission.final_assessment_text


def test_hindi_certificate_transliterates_location(completed_wizard):
    view = build_certificate(completed_wizard.submission, "hi", transliterate=fake_transliterate)
    assert view.name == "श्री टेस्ट यूज़र"
    assert view.name_suffix == "को"
    assert "भोपाल, मध्य प्रदेश" in view.main_line
    assert view.date_text == "१७ अक्टूबर, २०२६"
    assert view.summary == completed_wizard.submission.final_assessment("hi")


def test_detailed_results_leave_out_courage(completed_wizard):
    view = build_certificate(completed_wizard.submission, "en")
    traits = [result.trait for result in view.results]
    assert Trait.COURAGE not in traits
    assert len(traits) == 5
    assert all(result.max_score == 3 for result in view.results)


@pytest.mark.parametrize("mode, languages", [("all", ["en", "hi"]), ("en", ["en"]), ("hi", ["hi"])])
def test_certificate_modes(completed_wizard, mode, languages):
    views = certificate_views(completed_wizard.submission, mode)
    assert [view.language for view in views] == languages


def test_unknown_certificate_mode(completed_wizard):
    with pytest.raises(ValidationError):
        certificate_views(completed_wizard.submission, "fr")


def test_sanitize_for_pdf():
    assert sanitize_for_pdf("It’s “great” – really…") == "It's \"great\" - really..."


def test_english_pdf_renders(completed_wizard):
    buffer = generate_certificate_pdf(certificate_views(completed_wizard.submission, "en"))
    assert buffer.getvalue().startswith(b"%PDF")


def test_hindi_pdf_needs_font(completed_wizard, monkeypatch, tmp_path):
    monkeypatch.setattr(certificate, "PDF_FONT_REGULAR_PATH", tmp_path / "missing.ttf")
    views = certificate_views(completed_wizard.submission, "all", transliterate=fake_transliterate)
    with pytest.raises(CertificateFontMissing):
        generate_certificate_pdf(views)
