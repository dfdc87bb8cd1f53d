#!/usr/bin/env python3
"""Fetch committees and run one search from the terminal.

Usage::

    python scripts/search.py meier
    python scripts/search.py SVP
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Ensure the project is importable
ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT / "src"))

from rich.console import Console  # noqa: E402

from committee_search.client import ParlamentClient  # noqa: E402
from committee_search.errors import RefreshError  # noqa: E402
from committee_search.index import build_index  # noqa: E402
from committee_search.report import results_table  # noqa: E402
from committee_search.search import search  # noqa: E402


def main() -> None:
    parser = argparse.ArgumentParser(description="Search committees by member.")
    parser.add_argument("query", help="Name, party or canton fragment.")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger = logging.getLogger("search")
    console = Console()

    client = ParlamentClient()
    try:
        index = build_index(client)
    except RefreshError as exc:
        logger.error("Refresh failed: %s", exc)
        sys.exit(1)
    finally:
        client.close()

    results = search(index, args.query, base_url=client.base_url)
    if not results:
        console.print(f"[dim]No committees match {args.query!r}.[/]")
        return
    console.print(results_table(args.query, results))


if __name__ == "__main__":
    main()
