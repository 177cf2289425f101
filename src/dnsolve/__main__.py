"""Entry point for running the application directly."""

import uvicorn

from dnsolve.core.config import get_settings


def main():
    """Run the application."""
    settings = get_settings()

    uvicorn.run(
        "dnsolve.app:app",
        host=settings.api_host,
        port=settings.api_port,
        log_level="warning",
    )


if __name__ == "__main__":
    main()
