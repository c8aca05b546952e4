# FILE: services/listing_service.py
from dataclasses import dataclass, field
from datetime import datetime

from models import (
    GeneralInformation,
    OurInterviewAnswer,
    OurInterviewQuestion,
    TheirInterviewAnswer,
    TheirInterviewQuestion,
)


SEARCH_FIELDS = ("name", "major", "email", "company_name", "industry", "job_title")


@dataclass
class InterviewRecord:
    general_info: GeneralInformation
    our_answers: list = field(default_factory=list)
    their_questions: list = field(default_factory=list)
    their_answers: list = field(default_factory=list)

    def answer_for(self, their_question):
        for answer in self.their_answers:
            if answer.their_question_id == their_question.their_question_id:
                return answer
        return None


@dataclass
class QuestionOverview:
    question: OurInterviewQuestion
    answers: list = field(default_factory=list)


def parse_interview_date(value):
    # Stored as YYYY-MM-DD; anything else has no date.
    try:
        return datetime.strptime((value or "").strip(), "%Y-%m-%d").date()
    except ValueError:
        return None


def _date_sort_key(record: InterviewRecord):
    parsed = parse_interview_date(record.general_info.date)
    # Valid dates first (most recent first), malformed dates last.
    if parsed is None:
        return (1, 0)
    return (0, -parsed.toordinal())


def _load_related(store, info: GeneralInformation) -> InterviewRecord:
    our_answers = store.select(OurInterviewAnswer, eq=("gen_info_id", info.id), nested="question")
    their_questions = store.select(
        TheirInterviewQuestion,
        eq=("gen_info_id", info.id),
        order_by=("their_question_id", False),
    )
    their_answers = store.select(TheirInterviewAnswer, eq=("gen_info_id", info.id))
    return InterviewRecord(
        general_info=info,
        # Answers whose canned question no longer resolves are not shown.
        our_answers=[answer for answer in our_answers if answer.question is not None],
        their_questions=their_questions,
        their_answers=their_answers,
    )


def load_interviews(store) -> list:
    general_rows = store.select(GeneralInformation)
    records = [_load_related(store, info) for info in general_rows]
    return sorted(records, key=_date_sort_key)


def filter_interviews(records, query: str) -> list:
    needle = (query or "").strip().lower()
    if not needle:
        return list(records)

    matched = []
    for record in records:
        info = record.general_info
        if any(needle in (getattr(info, name) or "").lower() for name in SEARCH_FIELDS):
            matched.append(record)
    return matched


def load_canned_questions(store) -> list:
    return store.select(OurInterviewQuestion, order_by=("id", False))


def load_shown_questions(store, question_ids) -> list:
    # Only the canned questions that were on the submitted form.
    wanted = {int(question_id) for question_id in question_ids}
    if not wanted:
        return []
    return [question for question in load_canned_questions(store) if question.id in wanted]


def load_question_overview(store) -> list:
    questions = store.select(OurInterviewQuestion, order_by=("created_at", True))
    overview = []
    for question in questions:
        rows = store.select(OurInterviewAnswer, columns=("answer",), eq=("question_id", question.id))
        overview.append(QuestionOverview(question=question, answers=[row.answer for row in rows]))
    return overview
