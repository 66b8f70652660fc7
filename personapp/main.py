import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI
from sqlalchemy.exc import SQLAlchemyError

from personapp import __version__, database, error_handlers
from personapp.endpoints import persons
from personapp.settings import Environment, get_environment


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def create_app(env: Optional[Environment] = None) -> FastAPI:
    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        current_env = env or get_environment()
        configure_logging(current_env.log_level)
        database.init_from_env(current_env)
        yield
        database.dispose()

    application = FastAPI(title="persons", version=__version__, lifespan=lifespan)
    application.include_router(persons.router)
    application.add_exception_handler(SQLAlchemyError, error_handlers.sqlalchemy_error_exception)  # type: ignore[arg-type]
    return application


app = create_app()
