import logging
from typing import Union

from fastapi import APIRouter, Depends, Response, status

from personapp.database.models import Person as PersonDB
from personapp.models import Person, PersonInsert
from personapp.repository import (
    PersonRepository,
    get_person_repository,
    get_transactional_person_repository,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/persons")


@router.post("", tags=["person"], response_model=Person)
def insert(
    person_data: PersonInsert,
    repository: PersonRepository = Depends(get_transactional_person_repository),
) -> Person:
    person = repository.persist(PersonDB(**person_data.model_dump()))
    logger.info("Created person %s", person.id)
    return Person.model_validate(person)


@router.get("", tags=["person"], response_model=list[Person])
def list_all(repository: PersonRepository = Depends(get_person_repository)) -> list[Person]:
    return [Person.model_validate(person) for person in repository.list_all()]


@router.get("/name/{name}", tags=["person"], response_model=list[Person])
def find_by_name(name: str, repository: PersonRepository = Depends(get_person_repository)) -> list[Person]:
    return [Person.model_validate(person) for person in repository.find_by_name(name)]


@router.get("/age-greater-than/{age}", tags=["person"], response_model=list[Person])
def find_by_age_greater_than(
    age: int,
    repository: PersonRepository = Depends(get_person_repository),
) -> list[Person]:
    return [Person.model_validate(person) for person in repository.find_by_age_greater_than(age)]


@router.get(
    "/{person_id}",
    tags=["person"],
    response_model=Person,
    responses={status.HTTP_204_NO_CONTENT: {"description": "No person with this id"}},
)
def get(person_id: int, repository: PersonRepository = Depends(get_person_repository)) -> Union[Person, Response]:
    person = repository.find_by_id(person_id)
    if person is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return Person.model_validate(person)
