from __future__ import annotations

import argparse
from typing import Optional

from quini_scraper.service import configure_logging

from .app import create_app
from .config import load_settings


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Quini 6 results API")
    parser.add_argument("--env-file", type=str, default=None, help="Path to .env file with overrides")
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging (default INFO)."
    )
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> None:
    args = parse_args(argv)
    settings = load_settings(args.env_file)
    configure_logging(args.verbose)

    app = create_app(settings)
    app.logger.info("Quini 6 API listening on port %s", settings.server.port)
    app.logger.info("URL: http://localhost:%s", settings.server.port)
    app.run(host=settings.server.host, port=settings.server.port, debug=settings.server.debug)


if __name__ == "__main__":
    main()
