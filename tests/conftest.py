from typing import Iterator

from fastapi.testclient import TestClient
from pytest import TempPathFactory, fixture
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from personapp import database
from personapp.database.models import Base
from personapp.main import create_app
from personapp.settings import Environment
from tests.utils import truncate_all


@fixture(name="env", scope="session")
def _env(tmp_path_factory: TempPathFactory) -> Environment:
    database_path = tmp_path_factory.mktemp("db") / "persons-test.sqlite3"
    return Environment(database_url=f"sqlite+pysqlite:///{database_path}", echo_sql=True)


@fixture(name="init_database", scope="session")
def _init_database(env: Environment) -> None:
    database.init_from_env(env)


@fixture(name="production_engine", scope="function")
def _production_engine(init_database: None) -> Iterator[Engine]:  # pylint: disable=unused-argument
    Base.metadata.create_all(database.ENGINE)
    yield database.ENGINE
    truncate_all(database.ENGINE)


@fixture(name="production_mksession", scope="function")
def _production_mksession(production_engine: Engine) -> sessionmaker[Session]:  # pylint: disable=unsubscriptable-object
    return sessionmaker(production_engine, expire_on_commit=False, future=True)


@fixture(name="client", scope="function")
def _client(env: Environment, production_engine: Engine) -> Iterator[TestClient]:  # pylint: disable=unused-argument
    with TestClient(create_app(env)) as client:
        yield client
