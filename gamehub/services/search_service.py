# gamehub/services/search_service.py

"""Search service: the live catalog filter.

Filtering is a pure function of ``(games, query)``. Results are never
cached; callers recompute them whenever the query changes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from gamehub.core.game import GameRecord

__all__ = ["SearchService"]


class SearchService:
    """Service handling game search logic."""

    @staticmethod
    def filter_games(games: Sequence[GameRecord], query: str) -> list[GameRecord]:
        """Filters games by a case-insensitive substring of title or description.

        The query is used exactly as typed: whitespace is not trimmed, so
        ``" "`` only matches games whose text contains a space.

        Args:
            games: Games to filter, in display order.
            query: The search string.

        Returns:
            The matching games in their original relative order. An empty
            query returns every game.
        """
        if not query:
            return list(games)

        needle = query.lower()
        return [g for g in games if g.matches(needle)]
