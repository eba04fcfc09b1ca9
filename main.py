"""Main CLI entry-point."""
from __future__ import annotations

import argparse
import asyncio
import sys

from core.logging import bootstrap_logging, shutdown_logging
from config import settings
from domain.exceptions import TimelineError
from presentation.cli import TimelineCommand


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="timeline",
        description="Merged League of Legends match timeline for tracked accounts.",
    )
    parser.add_argument(
        "puuids", nargs="*",
        help="account puuids to aggregate (default: every tracked account)",
    )
    parser.add_argument("--streamer", type=int, default=None, help="only accounts owned by this streamer id")
    parser.add_argument("--limit", type=int, default=settings.DEFAULT_PAGE_SIZE, help="matches per page")
    parser.add_argument("--pages", type=int, default=1, help="pages to load (load more)")
    parser.add_argument("--queue", type=int, default=None, help="only matches from this queue id")
    parser.add_argument("--json", action="store_true", help="print display records as JSON")
    parser.add_argument("--no-color", action="store_true")
    parser.add_argument("--log-level", default=settings.LOG_LEVEL)
    parser.add_argument("--verbose", "-v", action="store_true", help="also log to the console")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    bootstrap_logging(
        service="timeline",
        level=args.log_level,
        log_dir=settings.LOG_DIR,
        log_file_name="timeline.jsonl",
        console=True if args.verbose else None,
    )

    command = TimelineCommand(
        args.puuids,
        streamer_id=args.streamer,
        limit=args.limit,
        pages=args.pages,
        queue_id=args.queue,
        json_out=args.json,
        color=not args.no_color,
    )
    try:
        return asyncio.run(command.run())
    except (TimelineError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130
    finally:
        shutdown_logging()


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
