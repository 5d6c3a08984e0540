"""Run the Fake Braspag service with uvicorn."""

import uvicorn

from fake_braspag.config import settings


def main() -> None:
    uvicorn.run(
        "fake_braspag.api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
