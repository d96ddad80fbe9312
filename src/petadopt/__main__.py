"""Run the API with uvicorn: ``python -m petadopt``.

Importing the settings fails fast when PORT or DATABASE_URL is missing.
"""

import uvicorn

from petadopt.config import settings


def main() -> None:
    uvicorn.run(
        "petadopt.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.environment == "development",
        log_config=None,  # keep the structlog configuration
    )


if __name__ == "__main__":
    main()
