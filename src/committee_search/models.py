from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from .errors import DecodeError, IndexIntegrityError


def _require_id(d: Any, kind: str) -> int:
    if not isinstance(d, dict):
        raise DecodeError(f"{kind} record must be an object, got {type(d).__name__}")
    raw = d.get("id")
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise DecodeError(f"{kind} record has no integer id: {raw!r}")
    return raw


def _optional_str(d: dict, key: str, kind: str) -> str:
    raw = d.get(key)
    if raw is None:
        return ""
    if not isinstance(raw, str):
        raise DecodeError(f"{kind} field {key!r} must be a string, got {type(raw).__name__}")
    return raw


def _optional_bool(d: dict, key: str, kind: str) -> bool:
    raw = d.get(key)
    if raw is None:
        return False
    if not isinstance(raw, bool):
        raise DecodeError(f"{kind} field {key!r} must be a boolean, got {type(raw).__name__}")
    return raw


@dataclass(frozen=True)
class Member:
    id: int
    first_name: str
    last_name: str
    canton: str  # e.g. "ZH"
    party: str  # e.g. "SP"

    @classmethod
    def from_dict(cls, d: Any) -> Member:
        member_id = _require_id(d, "member")
        return cls(
            id=member_id,
            first_name=_optional_str(d, "firstName", "member"),
            last_name=_optional_str(d, "lastName", "member"),
            canton=_optional_str(d, "canton", "member"),
            party=_optional_str(d, "party", "member"),
        )


@dataclass(frozen=True)
class Committee:
    id: int
    is_active: bool
    name: str

    @classmethod
    def from_dict(cls, d: Any) -> Committee:
        committee_id = _require_id(d, "committee")
        return cls(
            id=committee_id,
            is_active=_optional_bool(d, "isActive", "committee"),
            name=_optional_str(d, "name", "committee"),
        )


@dataclass(frozen=True)
class CommitteeDetails:
    id: int
    members: tuple[Member, ...] = ()

    @classmethod
    def from_dict(cls, d: Any) -> CommitteeDetails:
        committee_id = _require_id(d, "committee details")
        members_raw = d.get("members")
        if members_raw is None:
            members_raw = []
        if not isinstance(members_raw, list):
            raise DecodeError(f"committee {committee_id}: 'members' must be an array")
        return cls(
            id=committee_id,
            members=tuple(Member.from_dict(m) for m in members_raw),
        )


@dataclass(frozen=True)
class CommitteeIndex:
    """Snapshot of the active committees and their rosters.

    ``committees`` keeps fetch order (page order).  Every committee listed
    must have an entry in ``details``.
    """

    committees: tuple[Committee, ...] = ()
    details: Mapping[int, CommitteeDetails] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def __post_init__(self) -> None:
        missing = [c.id for c in self.committees if c.id not in self.details]
        if missing:
            raise IndexIntegrityError(f"no details for committees {missing}")
        # Freeze both containers so readers can share the snapshot without locks.
        object.__setattr__(self, "committees", tuple(self.committees))
        object.__setattr__(self, "details", MappingProxyType(dict(self.details)))

    def __len__(self) -> int:
        return len(self.committees)

    def roster(self, committee_id: int) -> tuple[Member, ...]:
        return self.details[committee_id].members


@dataclass(frozen=True)
class SearchResult:
    """One committee row on the search page."""

    index: int  # 1-based position in the filtered output
    id: int
    committee_name: str
    members: int  # roster size
    match: int  # members matching the query
    url: str
