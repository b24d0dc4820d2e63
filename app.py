from __future__ import annotations

import logging
from typing import Dict

from flask import Flask, g, jsonify, redirect, render_template, request, send_file, session, url_for

from anandak.catalog import GENDERS, LANGUAGES, get_copy, resolve_language, trait_label
from anandak.certificate import CERTIFICATE_MODES, certificate_views, generate_certificate_pdf
from anandak.config import Config, configure_logging, validate_config
from anandak.errors import CertificateFontMissing, TransitionError, ValidationError
from anandak.regions import COUNTRY_CODES, DEFAULT_COUNTRY_CODE, DEFAULT_STATE, districts_for, list_states
from anandak.sessions import WizardStore
from anandak.sink import build_submission_sink
from anandak.transliteration import GoogleInputToolsTransliterator
from anandak.wizard import AssessmentWizard, Step

app = Flask(__name__)
app.config.from_object(Config)

configure_logging(app.config["LOG_LEVEL"])
logger = logging.getLogger(__name__)
for problem in validate_config(app.config):
    logger.warning("Config: %s", problem)

transliterator = GoogleInputToolsTransliterator(
    url=app.config["TRANSLITERATION_URL"],
    timeout=app.config["TRANSLITERATION_TIMEOUT"],
)
submission_sink = build_submission_sink(app.config)
wizards = WizardStore(
    lambda: AssessmentWizard(sink=submission_sink),
    max_age=app.config["WIZARD_MAX_AGE"],
    max_wizards=app.config["MAX_WIZARDS"],
)

STEP_ENDPOINTS: Dict[Step, str] = {
    Step.LANGUAGE_SELECT: "language",
    Step.PERSONAL_INFO: "personal_info",
    Step.INSTRUCTIONS: "instructions",
    Step.QUESTION: "assessment",
    Step.RESULTS: "results",
    Step.TERMINAL: "language",
}


def current_wizard(create: bool = True) -> AssessmentWizard | None:
    wizard = wizards.get(session.get("wizard_id"))
    if wizard is not None and not wizard.is_terminal:
        return wizard
    if not create:
        return None
    if wizard is not None:
        wizards.discard(wizard.id)
    wizard = wizards.create()
    session["wizard_id"] = wizard.id
    return wizard


def redirect_to_step(wizard: AssessmentWizard):
    return redirect(url_for(STEP_ENDPOINTS[wizard.step]))


def transliterate_place(name: str) -> str:
    return transliterator.transliterate(name)


@app.before_request
def set_language():
    wizard = wizards.get(session.get("wizard_id"))
    if wizard is not None and wizard.step is not Step.LANGUAGE_SELECT:
        g.language = wizard.language
    else:
        g.language = resolve_language(request.values.get("lang"))


@app.context_processor
def inject_language():
    language = getattr(g, "language", "en")
    return {
        "language": language,
        "copy": get_copy(language),
        "languages": LANGUAGES,
        "trait_label": trait_label,
    }


@app.errorhandler(TransitionError)
def handle_transition_error(exc: TransitionError):
    logger.info("Redirecting out-of-step request: %s", exc)
    wizard = current_wizard()
    if request.path.startswith("/api/"):
        return jsonify({"error": "Not available at this step", "step": wizard.step.value}), 409
    return redirect_to_step(wizard)


@app.route("/")
def index():
    return redirect_to_step(current_wizard())


@app.route("/language", methods=["GET", "POST"])
def language():
    wizard = current_wizard()
    if wizard.step is not Step.LANGUAGE_SELECT:
        return redirect_to_step(wizard)

    error = None
    if request.method == "POST":
        try:
            wizard.select_language(request.form.get("language", ""))
        except ValidationError as exc:
            error = str(exc)
        else:
            return redirect(url_for("personal_info"))

    return render_template("language.html", error=error)


def _personal_info_context(wizard: AssessmentWizard, submitted: Dict[str, str], errors: Dict[str, str]):
    values = {
        "country_code": DEFAULT_COUNTRY_CODE,
        "state": DEFAULT_STATE,
        "name_hi": wizard.name_hi_suggestion or "",
    }
    values.update({key: value for key, value in submitted.items() if value is not None})
    return {
        "values": values,
        "errors": errors,
        "genders": GENDERS,
        "states": list_states(),
        "districts": districts_for(values.get("state")),
        "country_codes": COUNTRY_CODES,
    }


@app.route("/personal-info", methods=["GET", "POST"])
def personal_info():
    wizard = current_wizard()
    if wizard.step is not Step.PERSONAL_INFO:
        return redirect_to_step(wizard)

    if request.method == "POST":
        try:
            wizard.submit_personal_info(request.form)
        except ValidationError as exc:
            context = _personal_info_context(wizard, request.form.to_dict(), exc.errors)
            return render_template("personal_info.html", **context)
        return redirect(url_for("instructions"))

    return render_template("personal_info.html", **_personal_info_context(wizard, {}, {}))


@app.route("/instructions", methods=["GET", "POST"])
def instructions():
    wizard = current_wizard()
    if wizard.step is not Step.INSTRUCTIONS:
        return redirect_to_step(wizard)

    if request.method == "POST":
        wizard.acknowledge_instructions()
        return redirect(url_for("assessment"))
    return render_template("instructions.html")


def _parse_score(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        return -1


def _render_question(wizard: AssessmentWizard, error: str | None = None):
    question = wizard.current_question
    return render_template(
        "question.html",
        question=question,
        options=question.options,
        index=wizard.question_index,
        total=wizard.total_questions,
        progress=wizard.progress_percent,
        is_last=wizard.is_last_question,
        selected=wizard.pending_score,
        feedback=wizard.pending_feedback,
        error=error,
    )


@app.route("/assessment", methods=["GET", "POST"])
def assessment():
    wizard = current_wizard()
    if wizard.step is not Step.QUESTION:
        return redirect_to_step(wizard)

    if request.method == "POST":
        raw_option = request.form.get("option")
        try:
            if raw_option:
                wizard.select_option(_parse_score(raw_option))
            if request.form.get("action") == "next":
                wizard.advance()
        except ValidationError as exc:
            return _render_question(wizard, error=str(exc))
        return redirect_to_step(wizard)

    return _render_question(wizard)


@app.get("/results")
def results():
    wizard = current_wizard()
    if wizard.step is not Step.RESULTS:
        return redirect_to_step(wizard)

    wizard.commit()
    submission = wizard.submission
    return render_template(
        "results.html",
        submission=submission,
        insight=submission.final_assessment(wizard.language),
        max_score=3 * wizard.total_questions,
        notice=wizard.notice,
    )


@app.post("/results/dismiss")
def dismiss_notice():
    wizard = current_wizard()
    wizard.dismiss_notice()
    return redirect_to_step(wizard)


@app.post("/restart")
def restart():
    wizard = wizards.get(session.get("wizard_id"))
    if wizard is not None:
        if not wizard.is_terminal:
            wizard.restart()
        wizards.discard(wizard.id)
    session.pop("wizard_id", None)
    return redirect(url_for("language"))


@app.get("/certificate")
def certificate():
    wizard = current_wizard()
    if wizard.step is not Step.RESULTS:
        return redirect_to_step(wizard)

    mode = request.args.get("mode", "all")
    if mode not in CERTIFICATE_MODES:
        return ("Unknown certificate mode", 400)
    views = certificate_views(wizard.submission, mode, transliterate=transliterate_place)
    return render_template("certificate.html", views=views, mode=mode)


@app.get("/certificate.pdf")
def certificate_pdf():
    wizard = current_wizard()
    if wizard.step is not Step.RESULTS:
        return redirect_to_step(wizard)

    mode = request.args.get("mode", "en")
    if mode not in CERTIFICATE_MODES:
        return ("Unknown certificate mode", 400)
    views = certificate_views(wizard.submission, mode, transliterate=transliterate_place)
    try:
        pdf_buffer = generate_certificate_pdf(views)
    except CertificateFontMissing as exc:
        logger.warning("PDF export unavailable: %s", exc)
        return (get_copy(wizard.language)["errors"]["font_missing"], 503)  # type: ignore[index]

    return send_file(
        pdf_buffer,
        mimetype="application/pdf",
        as_attachment=True,
        download_name=f"Anandak_Certificate_{mode}.pdf",
    )


@app.post("/api/transliterate")
def api_transliterate():
    payload = request.get_json(silent=True) or {}
    text = str(payload.get("text") or "").strip()
    if not text:
        return jsonify({"error": "Text is required"}), 400

    wizard = current_wizard(create=False)
    ticket = None
    if wizard is not None and wizard.step is Step.PERSONAL_INFO:
        ticket = wizard.begin_transliteration(text)

    transliteration = transliterator.transliterate(text)
    if ticket is not None:
        wizard.apply_transliteration(ticket, transliteration)
    return jsonify({"transliteration": transliteration})


@app.get("/api/districts")
def api_districts():
    state = request.args.get("state", "")
    return jsonify({"state": state, "districts": list(districts_for(state))})


@app.get("/health")
def health_check():
    return {"status": "ok"}


if __name__ == "__main__":
    app.run(debug=True, port=5001)
