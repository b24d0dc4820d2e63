from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from io import BytesIO
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from fpdf import FPDF
from fpdf.enums import XPos, YPos

from .catalog import MAX_OPTION_SCORE, Trait, get_copy, trait_label
from .errors import CertificateFontMissing, ValidationError
from .models import SubmissionRecord, UserInfo, format_long_date

logger = logging.getLogger(__name__)

FONT_DIR = Path(__file__).resolve().parent / "fonts"
PDF_FONT_FAMILY = "NotoSansDevanagari"
PDF_FONT_REGULAR_PATH = FONT_DIR / "NotoSansDevanagari-Regular.ttf"
PDF_FONT_BOLD_PATH = FONT_DIR / "NotoSansDevanagari-Bold.ttf"

CERTIFICATE_MODES: Dict[str, Tuple[str, ...]] = {
    "all": ("en", "hi"),
    "en": ("en",),
    "hi": ("hi",),
}
# The detailed results section lists every trait except these.
HIDDEN_DETAIL_TRAITS: Tuple[Trait, ...] = (Trait.COURAGE,)

HINDI_MONTHS: Dict[int, str] = {
    1: "जनवरी",
    2: "फ़रवरी",
    3: "मार्च",
    4: "अप्रैल",
    5: "मई",
    6: "जून",
    7: "जुलाई",
    8: "अगस्त",
    9: "सितंबर",
    10: "अक्टूबर",
    11: "नवंबर",
    12: "दिसंबर",
}
DEVANAGARI_DIGITS = str.maketrans("0123456789", "०१२३४५६७८९")

NAME_PREFIXES: Dict[str, Dict[str, str]] = {
    "en": {"Male": "Mr.", "Female": "Ms."},
    "hi": {"Male": "श्री", "Female": "सुश्री"},
}

Transliterate = Callable[[str], str]


@dataclass(frozen=True)
class TraitResult:
    trait: Trait
    label: str
    score: int
    max_score: int
    feedback: str


@dataclass(frozen=True)
class CertificateView:
    language: str
    title: str
    presented_to: str
    name: str
    name_suffix: str
    main_line: str
    results_heading: str
    score_label: str
    results: Tuple[TraitResult, ...]
    summary_heading: str
    summary: str
    authority_name: str
    authority_label: str
    date_text: str
    date_label: str


def to_devanagari_digits(value: str) -> str:
    return value.translate(DEVANAGARI_DIGITS)


def format_date_hindi(moment: datetime) -> str:
    day = to_devanagari_digits(str(moment.day))
    year = to_devanagari_digits(str(moment.year))
    return f"{day} {HINDI_MONTHS[moment.month]}, {year}"


def format_certificate_date(moment: datetime, language: str) -> str:
    return format_date_hindi(moment) if language == "hi" else format_long_date(moment)


def prefixed_name(user: UserInfo, language: str) -> str:
    name = user.name_hi if language == "hi" else user.name
    prefix = NAME_PREFIXES.get(language, {}).get(user.gender)
    return f"{prefix} {name}" if prefix else name


def build_certificate(
    record: SubmissionRecord,
    language: str,
    transliterate: Optional[Transliterate] = None,
) -> CertificateView:
    """Assemble one language's certificate from a finished submission."""
    text = get_copy(language)["cert"]
    user = record.user

    district, state = user.district, user.state
    if language == "hi" and transliterate is not None:
        district, state = transliterate(district), transliterate(state)
    location = f"{district}, {state}"

    name = prefixed_name(user, language)
    date_text = format_certificate_date(record.submitted_at, language)

    results = tuple(
        TraitResult(
            trait=answer.trait,
            label=trait_label(answer.trait, language),
            score=answer.score,
            max_score=MAX_OPTION_SCORE,
            feedback=answer.feedback(language),
        )
        for answer in record.answers
        if answer.trait not in HIDDEN_DETAIL_TRAITS
    )

    return CertificateView(
        language=language,
        title=text["cert_title"],  # type: ignore[index]
        presented_to=text["cert_presented_to"],  # type: ignore[index]
        name=name,
        name_suffix="को" if language == "hi" else "",
        main_line=text["main_line"].format(name=name, location=location, date=date_text),  # type: ignore[index]
        results_heading=text["detailed_results"],  # type: ignore[index]
        score_label=text["score"],  # type: ignore[index]
        results=results,
        summary_heading=text["assessment_summary"],  # type: ignore[index]
        summary=record.final_assessment(language),
        authority_name=text["issuing_authority_name"],  # type: ignore[index]
        authority_label=text["issuing_authority"],  # type: ignore[index]
        date_text=date_text,
        date_label=text["date_of_issue"],  # type: ignore[index]
    )


def certificate_views(
    record: SubmissionRecord,
    mode: str = "all",
    transliterate: Optional[Transliterate] = None,
) -> List[CertificateView]:
    languages = CERTIFICATE_MODES.get(mode)
    if languages is None:
        raise ValidationError(f"Unknown certificate mode {mode!r}", {"mode": mode})
    return [build_certificate(record, language, transliterate) for language in languages]


def sanitize_for_pdf(text: str) -> str:
    replacements = {
        "’": "'",
        "‘": "'",
        "“": '"',
        "”": '"',
        "–": "-",
        "—": "-",
        "…": "...",
        "\u00a0": " ",
    }
    for src, dest in replacements.items():
        text = text.replace(src, dest)
    return text


def _latin1(text: str) -> str:
    # Core PDF fonts only cover Latin-1.
    return sanitize_for_pdf(text).encode("latin-1", "replace").decode("latin-1")


def generate_certificate_pdf(views: Sequence[CertificateView]) -> BytesIO:
    """Render one A4 page per certificate view.

    Hindi pages need the Devanagari font files in ``fonts/``; without them
    ``CertificateFontMissing`` is raised before anything is drawn.
    """
    needs_devanagari = any(view.language == "hi" for view in views)
    has_font = PDF_FONT_REGULAR_PATH.exists()
    if needs_devanagari and not has_font:
        raise CertificateFontMissing(f"Hindi certificate needs {PDF_FONT_REGULAR_PATH.name} in {FONT_DIR}")

    pdf = FPDF(format="A4")
    pdf.set_auto_page_break(auto=True, margin=15)
    pdf.set_title("Anandak Assessment Certificate")
    pdf.set_author("Anandak")

    regular_family, regular_style = "Helvetica", ""
    bold_family, bold_style = "Helvetica", "B"
    encode = _latin1
    if has_font:
        pdf.add_font(PDF_FONT_FAMILY, "", str(PDF_FONT_REGULAR_PATH))
        regular_family = bold_family = PDF_FONT_FAMILY
        bold_style = ""
        if PDF_FONT_BOLD_PATH.exists():
            pdf.add_font(PDF_FONT_FAMILY, "B", str(PDF_FONT_BOLD_PATH))
            bold_style = "B"
        encode = sanitize_for_pdf

    base_text_color = (32, 37, 45)
    accent_color = (180, 83, 9)
    muted_color = (110, 116, 132)
    border_color = (245, 158, 11)

    for view in views:
        pdf.add_page()
        pdf.set_draw_color(*border_color)
        pdf.set_line_width(2)
        pdf.rect(8, 8, pdf.w - 16, pdf.h - 16)
        pdf.set_line_width(0.3)
        pdf.set_y(22)

        pdf.set_text_color(*accent_color)
        pdf.set_font(bold_family, bold_style, 24)
        pdf.cell(0, 14, encode(view.title), align="C", new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.ln(4)

        pdf.set_text_color(*base_text_color)
        if view.language == "hi":
            pdf.set_font(bold_family, bold_style, 18)
            pdf.cell(0, 10, encode(f"{view.name} {view.name_suffix}"), align="C", new_x=XPos.LMARGIN, new_y=YPos.NEXT)
            pdf.set_font(regular_family, regular_style, 13)
            pdf.cell(0, 8, encode(view.presented_to), align="C", new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        else:
            pdf.set_font(regular_family, regular_style, 13)
            pdf.cell(0, 8, encode(view.presented_to), align="C", new_x=XPos.LMARGIN, new_y=YPos.NEXT)
            pdf.set_font(bold_family, bold_style, 18)
            pdf.cell(0, 10, encode(view.name), align="C", new_x=XPos.LMARGIN, new_y=YPos.NEXT)

        pdf.ln(4)
        y = pdf.get_y()
        pdf.line(pdf.l_margin, y, pdf.w - pdf.r_margin, y)
        pdf.ln(6)

        pdf.set_font(regular_family, regular_style, 12)
        pdf.multi_cell(0, 7, encode(view.main_line), align="C", new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.ln(5)

        pdf.set_font(bold_family, bold_style, 14)
        pdf.cell(0, 9, encode(view.results_heading), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        for result in view.results:
            pdf.set_font(bold_family, bold_style, 11)
            pdf.cell(
                0,
                7,
                encode(f"{result.label}: {view.score_label} {result.score}/{result.max_score}"),
                new_x=XPos.LMARGIN,
                new_y=YPos.NEXT,
            )
            pdf.set_font(regular_family, regular_style, 10)
            pdf.set_text_color(*muted_color)
            pdf.multi_cell(0, 6, encode(f'"{result.feedback}"'), align="L", new_x=XPos.LMARGIN, new_y=YPos.NEXT)
            pdf.set_text_color(*base_text_color)
            pdf.ln(2)

        pdf.ln(3)
        pdf.set_font(bold_family, bold_style, 12)
        pdf.cell(0, 8, encode(f"{view.summary_heading}:"), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.set_font(regular_family, regular_style, 11)
        pdf.multi_cell(0, 6, encode(view.summary), align="L", new_x=XPos.LMARGIN, new_y=YPos.NEXT)

        pdf.ln(10)
        half = (pdf.w - pdf.l_margin - pdf.r_margin) / 2
        pdf.set_font(bold_family, bold_style, 12)
        pdf.cell(half, 7, encode(view.authority_name), align="C")
        pdf.cell(half, 7, encode(view.date_text), align="C", new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.set_font(regular_family, regular_style, 10)
        pdf.set_text_color(*muted_color)
        pdf.cell(half, 6, encode(view.authority_label), align="C")
        pdf.cell(half, 6, encode(view.date_label), align="C", new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.set_text_color(*base_text_color)

    buffer = BytesIO()
    pdf.output(buffer)
    buffer.seek(0)
    logger.debug("Rendered certificate PDF with %d page(s)", len(views))
    return buffer
