from __future__ import annotations

import os
import pathlib
from dataclasses import dataclass, field, replace
from functools import lru_cache
from typing import Optional, Tuple

from dotenv import load_dotenv

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)
DEFAULT_ACCEPT = "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8"
DEFAULT_ACCEPT_LANGUAGE = "es-AR,es;q=0.9"

STRATEGY_SELECTOR_SCAN = "selector_scan"
STRATEGY_FIXED_TABLE_ROW = "fixed_table_row"
STRATEGY_PERMISSIVE_DEDUP = "permissive_dedup"


def _int_from_env(value: Optional[str], default: int) -> int:
    if value is None or value == "":
        return default
    return int(value)


@dataclass(frozen=True)
class SourceSettings:
    name: str
    url: str
    strategy: str
    selectors: Tuple[str, ...] = ()


DEFAULT_SOURCES: Tuple[SourceSettings, ...] = (
    SourceSettings(
        name="Quini-6-Resultados",
        url="https://www.quini-6-resultados.com.ar/",
        strategy=STRATEGY_FIXED_TABLE_ROW,
    ),
    SourceSettings(
        name="LotoFacil",
        url="https://www.lotofacil.com.ar/quini-6",
        strategy=STRATEGY_SELECTOR_SCAN,
        selectors=(".ball", ".numero", ".number", ".bola"),
    ),
    SourceSettings(
        name="TuJugada",
        url="https://www.tujugada.com.ar/quini6.asp",
        strategy=STRATEGY_PERMISSIVE_DEDUP,
    ),
)

# Environment prefixes used to override each default source URL.
_SOURCE_ENV_KEYS = {
    "Quini-6-Resultados": "SOURCES__QUINI6_RESULTADOS__URL",
    "LotoFacil": "SOURCES__LOTOFACIL__URL",
    "TuJugada": "SOURCES__TUJUGADA__URL",
}


@dataclass(frozen=True)
class ScraperSettings:
    user_agent: str = DEFAULT_USER_AGENT
    accept: str = DEFAULT_ACCEPT
    accept_language: str = DEFAULT_ACCEPT_LANGUAGE
    timeout_seconds: int = 10
    sources: Tuple[SourceSettings, ...] = field(default=DEFAULT_SOURCES)

    def headers(self) -> dict:
        return {
            "User-Agent": self.user_agent,
            "Accept": self.accept,
            "Accept-Language": self.accept_language,
        }


def load_from_environment() -> ScraperSettings:
    sources = tuple(
        replace(source, url=os.getenv(_SOURCE_ENV_KEYS[source.name], source.url))
        for source in DEFAULT_SOURCES
    )
    return ScraperSettings(
        user_agent=os.getenv("SCRAPER__USER_AGENT", DEFAULT_USER_AGENT),
        accept_language=os.getenv("SCRAPER__ACCEPT_LANGUAGE", DEFAULT_ACCEPT_LANGUAGE),
        timeout_seconds=_int_from_env(os.getenv("SCRAPER__TIMEOUT_SECONDS"), 10),
        sources=sources,
    )


@lru_cache(maxsize=1)
def load_config(dotenv_path: Optional[str] = None) -> ScraperSettings:
    if dotenv_path:
        load_dotenv(dotenv_path)
    else:
        default_path = pathlib.Path(".env")
        if default_path.exists():
            load_dotenv(default_path)
    return load_from_environment()
