from __future__ import annotations

import argparse
import asyncio
import dataclasses
import json
import logging
import sys
from typing import List, Optional

from .config import (
    STRATEGY_FIXED_TABLE_ROW,
    STRATEGY_PERMISSIVE_DEDUP,
    STRATEGY_SELECTOR_SCAN,
    ScraperSettings,
    SourceSettings,
    load_config,
)
from .datasource import (
    FixedTableRowSource,
    PermissiveDedupSource,
    ResultSource,
    SelectorScanSource,
)
from .fallback import FallbackOrchestrator
from .fetcher import PageFetcher


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        stream=sys.stdout,
    )


def build_source(
    source: SourceSettings,
    fetcher: PageFetcher,
    timeout_seconds: Optional[float] = None,
) -> ResultSource:
    if source.strategy == STRATEGY_SELECTOR_SCAN:
        if source.selectors:
            return SelectorScanSource(
                source.name, source.url, fetcher,
                selectors=source.selectors, timeout_seconds=timeout_seconds,
            )
        return SelectorScanSource(source.name, source.url, fetcher, timeout_seconds=timeout_seconds)
    if source.strategy == STRATEGY_FIXED_TABLE_ROW:
        return FixedTableRowSource(source.name, source.url, fetcher, timeout_seconds=timeout_seconds)
    if source.strategy == STRATEGY_PERMISSIVE_DEDUP:
        return PermissiveDedupSource(source.name, source.url, fetcher, timeout_seconds=timeout_seconds)
    raise ValueError(f"Unknown extraction strategy for {source.name}: {source.strategy}")


def build_sources(settings: ScraperSettings, fetcher: Optional[PageFetcher] = None) -> List[ResultSource]:
    fetcher = fetcher or PageFetcher(settings)
    return [
        build_source(source, fetcher, timeout_seconds=settings.timeout_seconds)
        for source in settings.sources
    ]


async def run(args: argparse.Namespace) -> int:
    settings = load_config(args.env_file)
    configure_logging(args.verbose)
    logger = logging.getLogger("quini6.scraper")

    sources = build_sources(settings)
    if args.source:
        sources = [s for s in sources if s.name.lower() == args.source.lower()]
        if not sources:
            logger.error("Unknown source %s", args.source)
            return 2

    orchestrator = FallbackOrchestrator(sources, logger=logger)
    try:
        result = await orchestrator.collect()
    finally:
        await orchestrator.close()
    print(json.dumps(dataclasses.asdict(result), ensure_ascii=False, indent=2))
    return 0


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Fetch the latest Quini 6 results once")
    parser.add_argument("--env-file", type=str, default=None, help="Path to .env file with overrides")
    parser.add_argument("--source", type=str, default=None, help="Only query the named source.")
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging (default INFO)."
    )
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> None:
    args = parse_args(argv)
    try:
        sys.exit(asyncio.run(run(args)))
    except KeyboardInterrupt:
        print("Interrupted by user.")


if __name__ == "__main__":
    main()
