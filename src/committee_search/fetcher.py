"""Committee listing and roster retrieval.

The listing endpoint has no total-count field: pages are requested one after
another until the service stops returning content.  ``CommitteePages`` models
that walk as a finite iterable; every ``iter()`` starts over at page 1.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from typing import Any

from .client import ParlamentClient
from .errors import DecodeError
from .models import Committee, CommitteeDetails

LOGGER = logging.getLogger(__name__)

FIRST_PAGE = 1


def _decode_json(blob: bytes, resource_path: str) -> Any:
    try:
        return json.loads(blob)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise DecodeError(f"{resource_path}: malformed JSON ({exc})") from exc


def committees_path(page_number: int) -> str:
    return f"committees?pageNumber={page_number}"


def committee_details_path(committee_id: int) -> str:
    return f"committees/{committee_id}?pageNumber=1"


def decode_committee_page(blob: bytes, resource_path: str) -> list[Committee]:
    payload = _decode_json(blob, resource_path)
    if not isinstance(payload, list):
        raise DecodeError(f"{resource_path}: expected a JSON array of committees")
    return [Committee.from_dict(d) for d in payload]


class CommitteePages:
    """Iterable over decoded listing pages, stopping at the first empty one.

    A page counts as empty when the client returns no content (non-200), the
    body is empty, or it decodes to an empty array.
    """

    def __init__(self, client: ParlamentClient, *, start: int = FIRST_PAGE) -> None:
        self.client = client
        self.start = start

    def __iter__(self) -> Iterator[list[Committee]]:
        page_number = self.start
        while True:
            path = committees_path(page_number)
            blob = self.client.fetch(path)
            if not blob:
                LOGGER.debug("no content for page %d, listing exhausted", page_number)
                return
            page = decode_committee_page(blob, path)
            if not page:
                return
            yield page
            page_number += 1


def fetch_all_active_committees(client: ParlamentClient) -> list[Committee]:
    """Return every active committee across all listing pages, in page order."""
    result: list[Committee] = []
    pages = 0
    for page in CommitteePages(client):
        pages += 1
        result.extend(c for c in page if c.is_active)
    LOGGER.info("Fetched %d active committees from %d pages.", len(result), pages)
    return result


def fetch_details(client: ParlamentClient, committee_id: int) -> CommitteeDetails:
    """Fetch the member roster of one committee.

    Rosters are read from page 1 only.  Unlike the listing, a response without
    content here is an error, not "no members".
    """
    path = committee_details_path(committee_id)
    blob = client.fetch(path)
    if blob is None:
        raise DecodeError(f"{path}: no content for committee {committee_id}")
    payload = _decode_json(blob, path)
    if not isinstance(payload, dict):
        raise DecodeError(f"{path}: expected a JSON object")
    return CommitteeDetails.from_dict(payload)
