"""Run the storefront API: ``python -m storefront``."""
from __future__ import annotations

import uvicorn

from storefront.app import create_app
from storefront.config import load_settings
from storefront.observability.logging import JsonLoggerFactory


def main() -> None:
    settings = load_settings()
    JsonLoggerFactory.configure(settings.log_level_number)
    uvicorn.run(create_app(settings), host="0.0.0.0", port=settings.port, log_config=None)  # noqa: S104


if __name__ == "__main__":
    main()
