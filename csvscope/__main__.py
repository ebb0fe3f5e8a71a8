import uvicorn

from csvscope.config import settings


def main() -> None:
    uvicorn.run("csvscope.main:app", host="127.0.0.1", port=8000, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
