#!/usr/bin/env python3
"""Fetch every active committee and its roster, then print a summary table.

Usage::

    python scripts/fetch.py
    PARL_BASE_URL=http://localhost:9000/ python scripts/fetch.py
"""

from __future__ import annotations

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
from committee_search.report import committee_table  # noqa: E402


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger = logging.getLogger("fetch")
    console = Console()

    client = ParlamentClient()
    try:
        index = build_index(client)
    except RefreshError as exc:
        logger.error("Refresh failed: %s", exc)
        sys.exit(1)
    finally:
        client.close()

    console.print(committee_table(index))


if __name__ == "__main__":
    main()
