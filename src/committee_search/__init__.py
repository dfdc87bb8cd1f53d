"""Search Swiss parliamentary committees by member name, party or canton.

Committee rosters are fetched once from ``ws.parlament.ch`` at startup, held
in memory, and searched by the web app in :mod:`committee_search.main`.

Run the server with: ``committee-search --port 8080``
"""
