"""Paged listing of network names for a small display."""

from __future__ import annotations

from typing import Sequence

TITLE = "Networks"
FIRST_ROW_Y = 15
ROW_HEIGHT = 10


class SsidPager:
    """Splits SSIDs into fixed-size pages and cycles through them."""

    def __init__(self, per_page: int = 4) -> None:
        if per_page < 1:
            raise ValueError("per_page must be at least 1")
        self.per_page = per_page
        self.page = 0

    def render(self, ssids: Sequence[str]) -> list[tuple[int, int, str]]:
        """Text items (x, y, text) for the current page, title first."""
        start = self.page * self.per_page
        items = [(0, 0, TITLE)]
        items.extend(
            (0, FIRST_ROW_Y + row * ROW_HEIGHT, ssid)
            for row, ssid in enumerate(ssids[start:start + self.per_page])
        )
        return items

    def advance(self, count: int) -> int:
        """Move to the next page, wrapping once past the last of count entries."""
        self.page += 1
        if self.page * self.per_page >= count:
            self.page = 0
        return self.page