"""Command-line entry point: ``committee-search [--host H] [--port N]``."""

from __future__ import annotations

import argparse

import uvicorn

from . import config as cfg


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Serve the parliamentary committee search page.",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=cfg.PORT,
        help=f"HTTP port to listen on (default: {cfg.PORT}).",
    )
    parser.add_argument(
        "--host",
        default=cfg.HOST,
        help=f"Interface to bind (default: {cfg.HOST}).",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    # Committees are fetched in the app lifespan; a failed refresh aborts startup.
    uvicorn.run(
        "committee_search.main:app",
        host=args.host,
        port=args.port,
        log_level=cfg.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
