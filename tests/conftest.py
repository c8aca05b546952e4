import pytest

from app import create_app
from config import TestConfig
from models import (
    GeneralInformation,
    OurInterviewAnswer,
    OurInterviewQuestion,
    TheirInterviewAnswer,
    TheirInterviewQuestion,
    db,
)
from services.store import InterviewStore


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def store(app):
    return InterviewStore(db.session)


@pytest.fixture
def add_question(app):
    def _add(text):
        question = OurInterviewQuestion(question=text)
        db.session.add(question)
        db.session.commit()
        return question

    return _add


@pytest.fixture
def add_interview(app):
    """Insert a general_information row plus optional related rows and commit."""

    def _add(our_answers=None, their_pairs=None, **overrides):
        values = {
            "name": "Jane Doe",
            "major": "CS",
            "email": "j@x.com",
            "company_name": "Acme",
            "industry": "Tech",
            "job_title": "SWE",
            "date": "2024-01-15",
            "got_job": False,
        }
        values.update(overrides)
        info = GeneralInformation(**values)
        db.session.add(info)
        db.session.flush()

        for question, answer in (our_answers or []):
            db.session.add(OurInterviewAnswer(gen_info_id=info.id, question_id=question.id, answer=answer))

        for question_text, answer_text in (their_pairs or []):
            question = TheirInterviewQuestion(gen_info_id=info.id, questions=question_text)
            db.session.add(question)
            db.session.flush()
            if answer_text:
                db.session.add(
                    TheirInterviewAnswer(
                        gen_info_id=info.id,
                        their_question_id=question.their_question_id,
                        their_answer=answer_text,
                    )
                )
        db.session.commit()
        return info

    return _add
