"""
Run the Portico API with uvicorn.

    python -m portico
"""

import uvicorn

from portico.config.settings import settings


def main() -> None:
    uvicorn.run(
        "portico.api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.is_development and settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
