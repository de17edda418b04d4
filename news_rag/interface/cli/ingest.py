"""Refresh the news corpus from RSS feeds."""

import argparse
import asyncio
import logging

from dotenv import load_dotenv

from news_rag.config.composition import build_refresh_request, build_refresh_use_case
from news_rag.config.settings import AppSettings


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser("news-rag-ingest")
    ap.add_argument(
        "--feeds",
        default="",
        help="Comma-separated feed URLs (default: FEED_URLS or the built-in list)",
    )
    ap.add_argument("--target", type=int, default=None, help="Maximum number of articles")
    ap.add_argument("--per-feed", type=int, default=None, help="Maximum articles per feed")
    return ap


def main(argv: list[str] | None = None) -> None:
    load_dotenv()
    args = build_parser().parse_args(argv)
    settings = AppSettings()
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    feeds = tuple(url.strip() for url in args.feeds.split(",") if url.strip())
    req = build_refresh_request(
        settings,
        feed_urls=feeds or None,
        target_count=args.target,
        per_feed_max=args.per_feed,
    )
    uc = build_refresh_use_case(settings)
    report = asyncio.run(uc.execute(req))
    print(f"Saved {report.chunks} chunks to {settings.corpus_path}")


if __name__ == "__main__":
    main()
