"""Console entrypoint: configure logging and serve the API with uvicorn."""

from __future__ import annotations

import uvicorn

from payments_service.config import get_settings
from payments_service.entrypoints.api import create_app
from payments_service.infrastructure.logging_config import setup_logging


def main() -> None:
    settings = get_settings()
    setup_logging(settings)
    uvicorn.run(
        create_app(settings=settings),
        host=settings.api_host,
        port=settings.api_port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
