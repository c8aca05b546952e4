# FILE: services/submission_service.py
from dataclasses import dataclass, field

from flask import current_app

from models import GeneralInformation, OurInterviewAnswer, TheirInterviewAnswer, TheirInterviewQuestion
from services.store import StoreError


GENERIC_FAILURE_MESSAGE = "Something went wrong. Please try again."


class FormValidationError(Exception):
    def __init__(self, message: str, missing=None):
        super().__init__(message)
        self.missing = list(missing or [])


class SubmissionError(Exception):
    pass


@dataclass
class SubmissionReceipt:
    gen_info_id: int
    our_answer_ids: list = field(default_factory=list)
    their_question_ids: list = field(default_factory=list)
    their_answer_ids: list = field(default_factory=list)


def validate_submission(form, canned_questions, require_canned_answers: bool = False):
    # Presentational checks only; nothing here touches the database.
    missing = form.missing_fields()
    if missing:
        raise FormValidationError("Please fill out all required General Info fields.", missing)

    if require_canned_answers:
        unanswered = [
            question.id
            for question in canned_questions
            if not (form.our_answers.get(question.id) or "").strip()
        ]
        if unanswered:
            raise FormValidationError("Please answer every interview question.", unanswered)


def _write_rows(store, form, canned_questions) -> SubmissionReceipt:
    # 1) General information first; every dependent row needs its id.
    gen_info_id = store.insert(GeneralInformation(**form.general_info_values()))
    if not gen_info_id:
        raise SubmissionError("No new gen_info_id returned from the store.")
    receipt = SubmissionReceipt(gen_info_id=gen_info_id)

    # 2) One answer row per canned question shown on the form.
    for question in canned_questions:
        answer = (form.our_answers.get(question.id) or "").strip()
        answer_id = store.insert(
            OurInterviewAnswer(gen_info_id=gen_info_id, question_id=question.id, answer=answer)
        )
        receipt.our_answer_ids.append(answer_id)

    # 3) User-entered questions, each followed by its optional answer.
    for index, pair in enumerate(form.qa_pairs):
        question_text = (pair.question or "").strip()
        answer_text = (pair.answer or "").strip()
        if not question_text:
            current_app.logger.debug("Skipping empty Q/A pair %s for gen_info_id=%s", index, gen_info_id)
            continue

        question_id = store.insert(TheirInterviewQuestion(gen_info_id=gen_info_id, questions=question_text))
        if not question_id:
            raise SubmissionError("No new their_question_id returned from the store.")
        receipt.their_question_ids.append(question_id)

        if answer_text:
            answer_id = store.insert(
                TheirInterviewAnswer(
                    gen_info_id=gen_info_id,
                    their_question_id=question_id,
                    their_answer=answer_text,
                )
            )
            receipt.their_answer_ids.append(answer_id)

    return receipt


def submit_interview(store, form, canned_questions, require_canned_answers: bool = False) -> SubmissionReceipt:
    validate_submission(form, canned_questions, require_canned_answers)

    try:
        receipt = _write_rows(store, form, canned_questions)
        store.commit()
    except (StoreError, SubmissionError) as exc:
        # In autocommit mode rows written before the failure stay in the table.
        store.rollback()
        current_app.logger.exception("Error inserting interview data: %s", exc)
        raise SubmissionError(GENERIC_FAILURE_MESSAGE) from exc

    current_app.logger.info(
        "Stored interview gen_info_id=%s (%s canned answers, %s questions, %s answers)",
        receipt.gen_info_id,
        len(receipt.our_answer_ids),
        len(receipt.their_question_ids),
        len(receipt.their_answer_ids),
    )
    return receipt
