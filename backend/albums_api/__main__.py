"""Run the Albums API with uvicorn on the configured host/port."""

import uvicorn

from albums_api.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "albums_api.main:app", host=settings.host, port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
