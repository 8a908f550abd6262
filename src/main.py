"""CLI entry point: batch scrape, pasted-data import and the web service."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import os
import sys

from config import settings
from core.async_http import FetchError
from core.filesystem import WriteError
from core.logging_setup import setup_logging
from parsing.errors import ParsingError
from services import pipeline

logger = logging.getLogger(__name__)


def _report(result: dict, as_json: bool) -> None:
    if as_json:
        print(json.dumps(result, indent=2, ensure_ascii=False))
    else:
        print(f"Wrote {result['output_path']} with {result['players']} players.")


def cmd_scrape(args: argparse.Namespace) -> int:
    try:
        result = asyncio.run(
            pipeline.run_batch(
                args.club_id,
                season=args.season,
                gen=args.generation,
                output_path=args.out,
                min_games=args.min_games,
                concurrency=args.concurrency,
            )
        )
    except (FetchError, WriteError, pipeline.PipelineTimeout) as e:
        logger.error("Scrape failed: %s", e)
        return 1
    _report(result, args.json)
    return 0


def cmd_import_paste(args: argparse.Namespace) -> int:
    if args.file:
        try:
            with open(args.file, "r", encoding="utf-8") as fh:
                raw = fh.read()
        except OSError as e:
            logger.error("Import failed: cannot read %s: %s", args.file, e)
            return 1
    else:
        raw = os.environ.get(settings.PASTE_ENV_VAR, "")
    try:
        result = pipeline.run_paste_import(raw, output_path=args.out)
    except (ParsingError, WriteError) as e:
        logger.error("Import failed: %s", e)
        return 1
    _report(result, args.json)
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    import uvicorn

    from api import create_app

    uvicorn.run(create_app(snapshot_path=args.snapshot), host=args.host, port=args.port)
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ga-leaderboard")
    p.add_argument("--log-level", default=settings.LOG_LEVEL, help="Logging level")
    p.add_argument("--log-dir", default=None, help="Also log to a rotating file in this directory")
    sub = p.add_subparsers(dest="command", required=True)

    scrape = sub.add_parser("scrape", help="Scrape the club and write the snapshot")
    scrape.add_argument("--club-id", default=settings.CLUB_ID, help="Club ID")
    scrape.add_argument("--season", default=settings.SEASON, help="Season path segment")
    scrape.add_argument("--generation", default=settings.GENERATION, help="Platform generation")
    scrape.add_argument("--out", default=None, help="Snapshot output path")
    scrape.add_argument("--min-games", type=int, default=0, help="Drop players below this")
    scrape.add_argument(
        "--concurrency",
        type=int,
        default=settings.DEFAULT_CONCURRENCY,
        help="Maximum player pages fetched at once",
    )
    scrape.add_argument("--json", action="store_true", help="Output JSON summary")
    scrape.set_defaults(func=cmd_scrape)

    paste = sub.add_parser("import-paste", help="Rank a pasted members JSON export")
    paste.add_argument(
        "--file", default=None, help=f"JSON file (defaults to ${settings.PASTE_ENV_VAR})"
    )
    paste.add_argument("--out", default=None, help="Snapshot output path")
    paste.add_argument("--json", action="store_true", help="Output JSON summary")
    paste.set_defaults(func=cmd_import_paste)

    serve = sub.add_parser("serve", help="Run the web service")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)
    serve.add_argument("--snapshot", default=None, help="Snapshot file served as /stats.json")
    serve.set_defaults(func=cmd_serve)

    return p


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level, args.log_dir)
    return args.func(args)


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
