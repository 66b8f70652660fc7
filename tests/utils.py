from typing import Any

from sqlalchemy import MetaData
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from personapp.database.models import Person


def truncate_all(engine: Engine) -> None:
    meta = MetaData()
    meta.reflect(bind=engine)
    with engine.begin() as conn:
        for table in reversed(meta.sorted_tables):
            conn.execute(table.delete())


def insert_people(
    mksession: sessionmaker[Session],  # pylint: disable=unsubscriptable-object
    people_data: list[dict[str, Any]],
) -> list[int]:
    with mksession.begin() as session:
        people = [Person(**data) for data in people_data]
        session.add_all(people)
        session.flush()
        return [person.id for person in people]
