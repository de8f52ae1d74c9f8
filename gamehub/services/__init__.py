from __future__ import annotations

from gamehub.services.search_service import SearchService

__all__: list[str] = [
    "SearchService",
]
