import uvicorn

from catalog import settings
from catalog.api import create_app


def main() -> None:
    settings.configure_logging()
    uvicorn.run(create_app(), host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
