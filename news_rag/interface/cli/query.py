"""Rank corpus chunks for a question and print them with their scores."""

import argparse
import asyncio

from dotenv import load_dotenv

from news_rag.config.composition import build_retrieve_use_case
from news_rag.config.settings import AppSettings
from news_rag.domain.errors import DomainError


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser("news-rag-query")
    ap.add_argument("--question", required=True)
    ap.add_argument("--k", type=int, default=None, help="Number of chunks (default: DEFAULT_TOP_K)")
    return ap


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    settings = AppSettings()
    top_k = args.k if args.k is not None else settings.default_top_k

    uc = build_retrieve_use_case(settings)
    try:
        results = asyncio.run(uc.execute(args.question, top_k=top_k))
    except DomainError as err:
        print(f"[ERROR] {type(err).__name__}: {err}")
        return 1

    if not results:
        print("No matching chunks (is the corpus empty? run news-rag-ingest)")
        return 0
    for i, r in enumerate(results, 1):
        print(f"[{i}] score={r.score:.3f} {r.title}")
        print(f"    {r.source}")
        print(f"    {r.text[:200]}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
