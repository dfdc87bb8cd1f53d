from __future__ import annotations

import json

import pytest

from committee_search.client import ParlamentClient
from committee_search.models import Committee, CommitteeDetails, CommitteeIndex, Member

BASE = "http://ws.test/"

# ── Fake HTTP session ─────────────────────────────────────────────────────────


class FakeResponse:
    def __init__(self, status_code: int, content: bytes) -> None:
        self.status_code = status_code
        self.content = content


class FakeSession:
    """Stand-in for ``requests.Session`` serving canned responses by URL.

    Values are ``(status, body)`` tuples or an exception instance to raise.
    Unknown URLs answer 404.
    """

    def __init__(self, routes: dict[str, object] | None = None) -> None:
        self.routes = dict(routes or {})
        self.calls: list[tuple[str, dict, object]] = []
        self.closed = False

    def mount(self, prefix: str, adapter: object) -> None:
        pass

    def get(self, url: str, headers: dict | None = None, timeout: object = None) -> FakeResponse:
        self.calls.append((url, dict(headers or {}), timeout))
        route = self.routes.get(url, (404, b""))
        if isinstance(route, Exception):
            raise route
        status, body = route
        return FakeResponse(status, body)

    def close(self) -> None:
        self.closed = True


def page_url(n: int) -> str:
    return f"{BASE}committees?pageNumber={n}&format=json"


def details_url(committee_id: int) -> str:
    return f"{BASE}committees/{committee_id}?pageNumber=1&format=json"


def as_json(payload: object) -> tuple[int, bytes]:
    return (200, json.dumps(payload).encode("utf-8"))


def make_client(routes: dict[str, object]) -> tuple[ParlamentClient, FakeSession]:
    session = FakeSession(routes)
    return ParlamentClient(base_url=BASE, timeout_seconds=5, _session=session), session


@pytest.fixture
def fake_service() -> dict[str, object]:
    """Two listing pages (one inactive committee) and three rosters."""
    return {
        page_url(1): as_json(
            [
                {"id": 1, "isActive": True, "name": "Finance"},
                {"id": 2, "isActive": False, "name": "Old Committee"},
            ]
        ),
        page_url(2): as_json([{"id": 3, "isActive": True, "name": "Security"}]),
        details_url(1): as_json(
            {
                "id": 1,
                "members": [
                    {"id": 10, "firstName": "Anna", "lastName": "Meier",
                     "canton": "ZH", "party": "SP"},
                    {"id": 11, "firstName": "Ben", "lastName": "Keller",
                     "canton": "BE", "party": "SVP"},
                ],
            }
        ),
        details_url(2): as_json({"id": 2, "members": []}),
        details_url(3): as_json(
            {
                "id": 3,
                "members": [
                    {"id": 12, "firstName": "Claudia", "lastName": "Frei",
                     "canton": "GE", "party": "FDP"},
                ],
            }
        ),
    }


# ── Model fixtures ────────────────────────────────────────────────────────────


@pytest.fixture
def anna() -> Member:
    return Member(id=10, first_name="Anna", last_name="Meier", canton="ZH", party="SP")


@pytest.fixture
def ben() -> Member:
    return Member(id=11, first_name="Ben", last_name="Keller", canton="BE", party="SVP")


@pytest.fixture
def sample_index(anna: Member, ben: Member) -> CommitteeIndex:
    claudia = Member(id=12, first_name="Claudia", last_name="Frei", canton="GE", party="FDP")
    hans = Member(id=13, first_name="Hans", last_name="Anderegg", canton="AG", party="SVP")
    committees = (
        Committee(id=1, is_active=True, name="Finance"),
        Committee(id=3, is_active=True, name="Security"),
        Committee(id=5, is_active=True, name="Transport"),
    )
    details = {
        1: CommitteeDetails(id=1, members=(anna, ben)),
        3: CommitteeDetails(id=3, members=(claudia,)),
        5: CommitteeDetails(id=5, members=(hans, ben, anna)),
    }
    return CommitteeIndex(committees=committees, details=details)
