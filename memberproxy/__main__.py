"""Run the proxy with uvicorn: ``python -m memberproxy``."""

import uvicorn

from memberproxy.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "memberproxy.api.app:create_app",
        factory=True,
        host=settings.api.host,
        port=settings.api.port,
        log_level=settings.observability.logging.level.lower(),
    )


if __name__ == "__main__":
    main()
