import uvicorn

from personapp.settings import get_environment


def main() -> None:
    env = get_environment()
    uvicorn.run("personapp.main:app", host=env.host, port=env.port, log_level=env.log_level.lower())


if __name__ == "__main__":
    main()
