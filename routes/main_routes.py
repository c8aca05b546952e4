# FILE: routes/main_routes.py
from flask import Blueprint, current_app, flash, redirect, render_template, request, url_for

from models import db
from services.directory_service import load_company_directory, load_company_interviews
from services.interview_form import FIELD_LABELS, InterviewForm
from services.listing_service import (
    filter_interviews,
    load_canned_questions,
    load_interviews,
    load_question_overview,
    load_shown_questions,
)
from services.store import InterviewStore, StoreError
from services.submission_service import (
    GENERIC_FAILURE_MESSAGE,
    FormValidationError,
    SubmissionError,
    submit_interview,
)


main_bp = Blueprint("main", __name__)

LOAD_FAILURE_MESSAGE = "Failed to load interview data. Please try again."
SUBMIT_SUCCESS_MESSAGE = "Interview info and questions submitted successfully!"


def _store(autocommit: bool = False) -> InterviewStore:
    return InterviewStore(db.session, autocommit=autocommit)


@main_bp.route("/", methods=["GET"])
def home():
    error = None
    companies = []
    try:
        companies = load_company_directory(_store())
    except StoreError as exc:
        current_app.logger.exception("Error fetching companies: %s", exc)
        error = LOAD_FAILURE_MESSAGE
    return render_template("home.html", companies=companies, error=error)


@main_bp.route("/companies/<path:company_name>", methods=["GET"])
def company(company_name: str):
    error = None
    interviews = []
    try:
        interviews = load_company_interviews(_store(), company_name)
    except StoreError as exc:
        current_app.logger.exception("Error fetching company %s: %s", company_name, exc)
        error = LOAD_FAILURE_MESSAGE
    return render_template("company.html", company_name=company_name, interviews=interviews, error=error)


@main_bp.route("/interviewsearch", methods=["GET"])
def interview_search():
    query = request.args.get("q", "")
    error = None
    interviews = []
    try:
        interviews = load_interviews(_store())
    except StoreError as exc:
        current_app.logger.exception("Error fetching interview data: %s", exc)
        error = LOAD_FAILURE_MESSAGE

    # Filter the full list on every request.
    filtered = filter_interviews(interviews, query)
    return render_template("search.html", interviews=filtered, query=query, error=error)


@main_bp.route("/questions", methods=["GET"])
def questions():
    error = None
    overview = []
    try:
        overview = load_question_overview(_store())
    except StoreError as exc:
        current_app.logger.exception("Error fetching questions: %s", exc)
        error = LOAD_FAILURE_MESSAGE
    return render_template("questions.html", overview=overview, error=error)


def _render_form(form: InterviewForm, canned_questions, error=None, missing=None, status=200):
    return (
        render_template(
            "add_interview.html",
            form=form,
            canned_questions=canned_questions,
            error=error,
            missing=missing or [],
            field_labels=FIELD_LABELS,
        ),
        status,
    )


@main_bp.route("/addinterview", methods=["GET", "POST"])
def add_interview():
    if request.method == "GET":
        try:
            canned_questions = load_canned_questions(_store())
        except StoreError as exc:
            current_app.logger.exception("Error fetching interview questions: %s", exc)
            flash(LOAD_FAILURE_MESSAGE, "error")
            canned_questions = []
        return _render_form(InterviewForm(), canned_questions)

    form = InterviewForm.from_form(request.form)
    action = request.form.get("action", "submit").strip()

    # Every shown canned question posts its our_answer_<id> field, even when empty.
    try:
        canned_questions = load_shown_questions(_store(), form.our_answers.keys())
    except StoreError as exc:
        current_app.logger.exception("Error fetching interview questions: %s", exc)
        return _render_form(form, [], error=GENERIC_FAILURE_MESSAGE, status=500)

    # Q/A rows are added and removed by re-rendering the form.
    if action == "add_pair":
        form.add_qa_pair()
        return _render_form(form, canned_questions)
    if action.startswith("remove_pair:"):
        index = action.split(":", 1)[1]
        if index.isdigit():
            form.remove_qa_pair(int(index))
        return _render_form(form, canned_questions)

    try:
        submit_interview(
            _store(autocommit=not current_app.config["ATOMIC_SUBMISSIONS"]),
            form,
            canned_questions,
            require_canned_answers=current_app.config["REQUIRE_CANNED_ANSWERS"],
        )
    except FormValidationError as exc:
        return _render_form(form, canned_questions, error=str(exc), missing=exc.missing, status=400)
    except SubmissionError as exc:
        return _render_form(form, canned_questions, error=str(exc), status=500)

    flash(SUBMIT_SUCCESS_MESSAGE, "success")
    return redirect(url_for("main.add_interview"))
