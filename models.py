# FILE: models.py
from datetime import datetime
from flask_sqlalchemy import SQLAlchemy


db = SQLAlchemy()


class GeneralInformation(db.Model):
    __tablename__ = "general_information"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), nullable=False)
    major = db.Column(db.String(120), nullable=False)
    email = db.Column(db.String(255), nullable=False)
    company_name = db.Column(db.String(255), nullable=True, index=True)
    industry = db.Column(db.String(120), nullable=False)
    job_title = db.Column(db.String(120), nullable=False)
    # Interview date as submitted (YYYY-MM-DD).
    date = db.Column(db.String(32), nullable=False)
    got_job = db.Column(db.Boolean, default=False, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    def __repr__(self):
        return f"<GeneralInformation id={self.id} company={self.company_name!r}>"


class OurInterviewQuestion(db.Model):
    __tablename__ = "our_interview_questions"

    id = db.Column(db.Integer, primary_key=True)
    question = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)


class OurInterviewAnswer(db.Model):
    __tablename__ = "our_interview_answers"

    id = db.Column(db.Integer, primary_key=True)
    gen_info_id = db.Column(db.Integer, db.ForeignKey("general_information.id"), nullable=False, index=True)
    question_id = db.Column(db.Integer, db.ForeignKey("our_interview_questions.id"), nullable=False, index=True)
    answer = db.Column(db.Text, nullable=False, default="")

    question = db.relationship("OurInterviewQuestion")


class TheirInterviewQuestion(db.Model):
    __tablename__ = "their_interview_questions"

    their_question_id = db.Column(db.Integer, primary_key=True)
    gen_info_id = db.Column(db.Integer, db.ForeignKey("general_information.id"), nullable=False, index=True)
    questions = db.Column(db.Text, nullable=False)


class TheirInterviewAnswer(db.Model):
    __tablename__ = "their_interview_answers"

    id = db.Column(db.Integer, primary_key=True)
    gen_info_id = db.Column(db.Integer, db.ForeignKey("general_information.id"), nullable=False, index=True)
    their_question_id = db.Column(
        db.Integer, db.ForeignKey("their_interview_questions.their_question_id"), nullable=False, index=True
    )
    their_answer = db.Column(db.Text, nullable=False)
