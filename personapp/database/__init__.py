import logging
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from personapp.database.models import Base
from personapp.settings import Environment

logger = logging.getLogger(__name__)

ENGINE: Engine
SESSION_MAKER: sessionmaker  # type: ignore[type-arg]


def init_from_env(env: Environment) -> None:
    global ENGINE, SESSION_MAKER  # pylint: disable=global-statement

    ENGINE = create_engine(
        env.database_url,
        echo=env.echo_sql,
        future=True,
        logging_name="PERSONS",
        pool_pre_ping=True,
    )
    Base.metadata.create_all(ENGINE)
    SESSION_MAKER = sessionmaker(ENGINE, future=True)
    logger.info("Database initialised at %s", ENGINE.url.render_as_string(hide_password=True))


def dispose() -> None:
    global ENGINE  # pylint: disable=global-statement
    ENGINE.dispose()


def open_session() -> Iterator[Session]:
    global SESSION_MAKER  # pylint: disable=global-statement
    with SESSION_MAKER() as session:  # pylint: disable=not-callable
        yield session


def begin_session() -> Iterator[Session]:
    global SESSION_MAKER  # pylint: disable=global-statement
    # commits when the request finishes, rolls back if it raised
    with SESSION_MAKER.begin() as session:  # type: ignore # pylint: disable=no-member
        yield session
