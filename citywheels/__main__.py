# citywheels/__main__.py
import uvicorn

from .config import settings


def main() -> None:
    # python -m citywheels  (или скрипт citywheels после pip install)
    uvicorn.run(
        "citywheels.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
