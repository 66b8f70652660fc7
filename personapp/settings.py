from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseEnvironment(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="PERSONS_", extra="ignore")


class Environment(BaseEnvironment):
    database_url: str = "sqlite+pysqlite:///persons.sqlite3"
    echo_sql: bool = False
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8080


@lru_cache
def get_environment() -> Environment:
    return Environment()
