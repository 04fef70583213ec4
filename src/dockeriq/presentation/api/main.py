"""Run the API with uvicorn."""

import uvicorn

from dockeriq.presentation.api.app import create_app
from dockeriq_config.settings import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        create_app(settings),
        host=settings.api_host,
        port=settings.api_port,
        reload=False,
    )


if __name__ == "__main__":
    main()
