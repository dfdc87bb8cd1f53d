"""Terminal tables for the operator scripts (``scripts/fetch.py``, ``scripts/search.py``)."""

from __future__ import annotations

from rich.table import Table

from .models import CommitteeIndex, SearchResult


def committee_table(index: CommitteeIndex) -> Table:
    table = Table(title=f"Active committees ({len(index)})")
    table.add_column("ID", justify="right")
    table.add_column("Committee", style="bold")
    table.add_column("Members", justify="right")
    for committee in index.committees:
        table.add_row(
            str(committee.id),
            committee.name,
            str(len(index.roster(committee.id))),
        )
    return table


def results_table(query: str, results: list[SearchResult]) -> Table:
    table = Table(title=f"Committees matching {query!r}")
    table.add_column("#", justify="right")
    table.add_column("Committee", style="bold")
    table.add_column("Members", justify="right")
    table.add_column("Matches", justify="right", style="green")
    table.add_column("URL", style="dim")
    for r in results:
        table.add_row(str(r.index), r.committee_name, str(r.members), str(r.match), r.url)
    return table
