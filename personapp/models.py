from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class Person(Model):
    id: int
    age: int
    name: str


class PersonInsert(BaseModel):
    age: int
    name: str
