"""
Dex Viewer: a read-only, server-rendered browser front-end over PokeAPI.

The ``catalog`` subpackage holds the pure formatting helpers, the
PokeAPI client and the view controllers; ``main`` wires them into a
FastAPI application.
"""

__version__ = "1.0.0"
