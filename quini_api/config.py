from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv

from quini_scraper.config import ScraperSettings, load_from_environment


@dataclass(frozen=True)
class ServerSettings:
    host: str = "0.0.0.0"
    port: int = 5000
    debug: bool = False


@dataclass(frozen=True)
class AppSettings:
    server: ServerSettings
    scraper: ScraperSettings


@lru_cache(maxsize=1)
def load_settings(dotenv_path: Optional[str] = None) -> AppSettings:
    if dotenv_path:
        load_dotenv(dotenv_path)
    else:
        load_dotenv()

    port = os.getenv("PORT")
    server = ServerSettings(
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(port) if port else 5000,
        debug=os.getenv("FLASK_DEBUG", "0") == "1",
    )
    return AppSettings(server=server, scraper=load_from_environment())
