from __future__ import annotations

import logging
from dataclasses import dataclass, field
from urllib.parse import urljoin

import requests
from requests.adapters import HTTPAdapter

from .config import BASE_URL, TIMEOUT_SECONDS
from .errors import FetchError

LOGGER = logging.getLogger(__name__)

ACCEPT_HEADER = "application/json;q=0.9,*/*;q=0.8"
FORMAT_SELECTOR = "format=json"


@dataclass
class ParlamentClient:
    """Thin GET client for the parliament web service.

    ``fetch`` returns the body of a 200 response and ``None`` for any other
    status; the listing endpoint signals "no more pages" that way.  Only
    transport failures raise.
    """

    base_url: str = BASE_URL
    timeout_seconds: float = TIMEOUT_SECONDS
    _session: requests.Session = field(default_factory=requests.Session, repr=False)

    def __post_init__(self) -> None:
        self.base_url = self.base_url.rstrip("/") + "/"
        # One attempt per request; a failure at startup is final.
        adapter = HTTPAdapter(max_retries=0, pool_connections=1, pool_maxsize=1)
        self._session.mount("https://", adapter)
        self._session.mount("http://", adapter)

    def url_for(self, resource_path: str) -> str:
        separator = "&" if "?" in resource_path else "?"
        return urljoin(self.base_url, resource_path) + separator + FORMAT_SELECTOR

    def fetch(self, resource_path: str) -> bytes | None:
        LOGGER.info("fetching %s", resource_path)
        url = self.url_for(resource_path)
        try:
            resp = self._session.get(
                url,
                headers={"Accept": ACCEPT_HEADER},
                timeout=self.timeout_seconds,
            )
        except requests.RequestException as exc:
            raise FetchError(resource_path, str(exc)) from exc

        if resp.status_code == 200:
            return resp.content
        LOGGER.debug("%s answered %d, treating as no content", resource_path, resp.status_code)
        return None

    def close(self) -> None:
        self._session.close()
