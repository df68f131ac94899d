"""Run the API server with ``python -m studyhub``."""

import uvicorn

from studyhub.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "studyhub.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
