# FILE: services/directory_service.py
from dataclasses import dataclass

from models import GeneralInformation


@dataclass
class CompanyEntry:
    id: int
    name: str


def load_company_directory(store) -> list:
    rows = store.select(GeneralInformation, columns=("company_name",))
    # dict keeps first-seen order while dropping duplicates.
    names = dict.fromkeys(row.company_name for row in rows if row.company_name and row.company_name.strip())
    return [CompanyEntry(id=index, name=name) for index, name in enumerate(names, start=1)]


def load_company_interviews(store, company_name: str) -> list:
    return store.select(
        GeneralInformation,
        eq=("company_name", company_name),
        order_by=("id", False),
    )
