from dataclasses import dataclass
from typing import Optional

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.orm import Session

from personapp.database import begin_session, open_session
from personapp.database.models import Person


@dataclass
class PersonRepository:
    """Data access for :class:`Person` rows, bound to a single session."""

    session: Session

    def persist(self, person: Person) -> Person:
        self.session.add(person)
        self.session.flush()  # flushing so we get back the ID of the model
        return person

    def list_all(self) -> list[Person]:
        return list(self.session.execute(select(Person).order_by(Person.id)).scalars().all())

    def find_by_name(self, name: str) -> list[Person]:
        query = select(Person).where(Person.name == name).order_by(Person.id)
        return list(self.session.execute(query).scalars().all())

    def find_by_age_greater_than(self, age: int) -> list[Person]:
        query = select(Person).where(Person.age > age).order_by(Person.id)
        return list(self.session.execute(query).scalars().all())

    def find_by_id(self, person_id: int) -> Optional[Person]:
        return self.session.get(Person, person_id)


def get_person_repository(db: Session = Depends(open_session)) -> PersonRepository:
    return PersonRepository(db)


def get_transactional_person_repository(db: Session = Depends(begin_session)) -> PersonRepository:
    return PersonRepository(db)
