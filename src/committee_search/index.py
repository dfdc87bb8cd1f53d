"""Building and holding the in-memory committee index.

``build_index`` is all-or-nothing: either every active committee has its
roster, or ``RefreshError`` is raised and nothing is produced.  ``IndexStore``
publishes a finished snapshot with a single reference assignment, so readers
never see a half-built index.
"""

from __future__ import annotations

import logging
import time

from .client import ParlamentClient
from .errors import DecodeError, FetchError, RefreshError
from .fetcher import fetch_all_active_committees, fetch_details
from .models import CommitteeDetails, CommitteeIndex

LOGGER = logging.getLogger(__name__)

EMPTY_INDEX = CommitteeIndex()


def build_index(client: ParlamentClient) -> CommitteeIndex:
    t0 = time.perf_counter()
    try:
        committees = fetch_all_active_committees(client)
    except (FetchError, DecodeError) as exc:
        raise RefreshError(f"committee listing failed: {exc}") from exc

    details: dict[int, CommitteeDetails] = {}
    for committee in committees:
        try:
            details[committee.id] = fetch_details(client, committee.id)
        except (FetchError, DecodeError) as exc:
            raise RefreshError(f"details for committee {committee.id} failed: {exc}") from exc

    index = CommitteeIndex(committees=tuple(committees), details=details)
    LOGGER.info(
        "Built index: %d committees, %d members (%.2fs).",
        len(index),
        sum(len(d.members) for d in details.values()),
        time.perf_counter() - t0,
    )
    return index


class IndexStore:
    """Holds the current committee index snapshot."""

    def __init__(self, index: CommitteeIndex | None = None) -> None:
        self._index = index if index is not None else EMPTY_INDEX
        self._populated = index is not None

    @property
    def current(self) -> CommitteeIndex:
        return self._index

    @property
    def populated(self) -> bool:
        return self._populated

    def install(self, index: CommitteeIndex) -> None:
        self._index = index
        self._populated = True

    def refresh(self, client: ParlamentClient) -> CommitteeIndex:
        """Build a fresh index and install it; on failure the store is unchanged."""
        index = build_index(client)
        self.install(index)
        return index
