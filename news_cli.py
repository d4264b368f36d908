#!/usr/bin/env python3
"""
Print today's top headlines to the terminal.

Usage:
    python news_cli.py                 # async fetch, US top headlines
    python news_cli.py --sync          # blocking fetch
    python news_cli.py --no-color      # plain text output

The API key is read from the API_KEY environment variable (or a .env file).
"""

import argparse
import asyncio
import sys

from clinews import Country, Endpoint, NewsApi, NewsApiError
from clinews.config import Config
from clinews.logger import LEVELS, setup_logger
from clinews.render import render_articles
from clinews.theme import default as default_theme


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Show top headlines from NewsAPI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--country", choices=[c.value for c in Country], default=Country.US.value)
    parser.add_argument("--endpoint", choices=[e.value for e in Endpoint], default=Endpoint.TOP_HEADLINES.value)
    parser.add_argument("--sync", action="store_true", help="Use the blocking HTTP transport")
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI styling")
    parser.add_argument("--log-level", type=str.upper, choices=LEVELS, default=None, help="Override LOG_LEVEL")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logger = setup_logger("clinews", args.log_level or "WARNING")

    try:
        settings = Config.load()
        if args.log_level is None:
            logger = setup_logger("clinews", settings.log_level)

        api = NewsApi(settings.api_key, base_url=settings.base_url, timeout=settings.timeout)
        api.endpoint(Endpoint(args.endpoint)).country(Country(args.country))

        if args.sync:
            articles = api.fetch()
        else:
            articles = asyncio.run(api.fetch_async())
    except NewsApiError as e:
        logger.error("%s", e)
        return 1

    render_articles(articles, default_theme(color=False if args.no_color else None))
    return 0


if __name__ == "__main__":
    sys.exit(main())
