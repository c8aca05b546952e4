# FILE: services/interview_form.py
from dataclasses import dataclass, field


REQUIRED_FIELDS = ("name", "major", "email", "company_name", "industry", "job_title", "date")

FIELD_LABELS = {
    "name": "Name",
    "major": "Major",
    "email": "Email",
    "company_name": "Company Name",
    "industry": "Industry",
    "job_title": "Job Title",
    "date": "Interview Date",
}


@dataclass
class QAPair:
    question: str = ""
    answer: str = ""


@dataclass
class InterviewForm:
    """State of the add-interview page.

    Mirrors the ``general_information`` columns plus the canned-question
    answers (keyed by question id) and the free-form Q/A pairs.
    """

    name: str = ""
    major: str = ""
    email: str = ""
    company_name: str = ""
    industry: str = ""
    job_title: str = ""
    date: str = ""
    got_job: bool = False
    our_answers: dict = field(default_factory=dict)
    qa_pairs: list = field(default_factory=lambda: [QAPair()])

    def set_field(self, name: str, value: str):
        if name not in REQUIRED_FIELDS:
            raise KeyError(f"Unknown form field: {name}")
        setattr(self, name, value)

    def set_got_job(self, flag: bool):
        self.got_job = bool(flag)

    def set_our_answer(self, question_id: int, answer: str):
        self.our_answers[int(question_id)] = answer

    def add_qa_pair(self):
        self.qa_pairs.append(QAPair())

    def remove_qa_pair(self, index: int):
        if 0 <= index < len(self.qa_pairs):
            del self.qa_pairs[index]

    def set_qa(self, index: int, field_name: str, value: str):
        if field_name not in {"question", "answer"}:
            raise KeyError(f"Unknown Q/A field: {field_name}")
        setattr(self.qa_pairs[index], field_name, value)

    def missing_fields(self) -> list:
        return [name for name in REQUIRED_FIELDS if not (getattr(self, name) or "").strip()]

    def general_info_values(self) -> dict:
        values = {name: getattr(self, name).strip() for name in REQUIRED_FIELDS}
        values["got_job"] = self.got_job
        return values

    @classmethod
    def from_form(cls, form):
        # Build the record from submitted form data (werkzeug MultiDict).
        record = cls(qa_pairs=[])
        for name in REQUIRED_FIELDS:
            record.set_field(name, form.get(name, ""))
        record.set_got_job(form.get("got_job") in {"on", "true", "1", "yes"})

        for key in form.keys():
            if key.startswith("our_answer_"):
                question_id = key[len("our_answer_"):]
                if question_id.isdigit():
                    record.set_our_answer(int(question_id), form.get(key, ""))

        questions = form.getlist("qa_question")
        answers = form.getlist("qa_answer")
        for index, question in enumerate(questions):
            record.add_qa_pair()
            record.set_qa(index, "question", question)
            record.set_qa(index, "answer", answers[index] if index < len(answers) else "")
        return record
