"""In-memory committee search over member rosters.

A committee matches when at least one of its members has the query as a
case-insensitive substring of their first name, last name, party or canton.
Each matching member counts once, however many of those fields match.
Results keep index order (the order committees were fetched in) and are not
re-sorted by match count.

No external dependencies: a few hundred committees with a few dozen members
each is well within linear-scan territory.
"""

from __future__ import annotations

from .models import CommitteeIndex, Member, SearchResult

# ── Matching ──────────────────────────────────────────────────────────────────


def _contains(value: str, query_lower: str) -> bool:
    return query_lower in value.lower()


def member_matches(member: Member, query: str) -> bool:
    """True if any searchable field of *member* contains *query*."""
    q = query.lower()
    return (
        _contains(member.first_name, q)
        or _contains(member.last_name, q)
        or _contains(member.party, q)
        or _contains(member.canton, q)
    )


def count_matches(members: tuple[Member, ...], query: str) -> int:
    return sum(1 for m in members if member_matches(m, query))


# ── Public entry point ───────────────────────────────────────────────────────


def search(index: CommitteeIndex, query: str, *, base_url: str) -> list[SearchResult]:
    """Return committees with at least one matching member.

    An empty query returns nothing rather than every committee.
    ``base_url`` is the service address used to build each result's link.
    """
    if query == "":
        return []

    base = base_url.rstrip("/")
    results: list[SearchResult] = []
    for committee in index.committees:
        roster = index.roster(committee.id)
        cnt = count_matches(roster, query)
        if cnt == 0:
            continue
        results.append(
            SearchResult(
                index=len(results) + 1,
                id=committee.id,
                committee_name=committee.name,
                members=len(roster),
                match=cnt,
                url=f"{base}/committees/{committee.id}",
            )
        )
    return results
