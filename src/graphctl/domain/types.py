"""Algorithm selector enum.

The first line of an edge list names the algorithm. Matching is
case-insensitive and accepts both the typographic and the ASCII
apostrophe in ``Prim's``.
"""

from __future__ import annotations

from enum import StrEnum


class Algorithm(StrEnum):
    """Algorithms an edge list can select."""

    BELLMAN_FORD = "bellman-ford"
    PRIM = "prim's"

    @property
    def directed(self) -> bool:
        """Whether edges are read as directed (``u→v``) or undirected (``u-v``)."""
        return self is Algorithm.BELLMAN_FORD

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES: dict[Algorithm, str] = {
    Algorithm.BELLMAN_FORD: "Bellman-Ford",
    Algorithm.PRIM: "Prim's",
}


def normalize_selector(selector: str) -> str:
    """Lower-case *selector*, trim it, and fold ``’`` into ``'``."""
    return selector.strip().replace("’", "'").lower()


def resolve_algorithm(selector: str) -> Algorithm | None:
    """Return the Algorithm named by *selector*, or None if unrecognized."""
    try:
        return Algorithm(normalize_selector(selector))
    except ValueError:
        return None
