"""Bounded navigation history for replay-based backward paging.

Every backend only hands out a pointer to the *next* page. Going back is
therefore implemented by re-issuing the request that produced an earlier
page, which requires remembering the options of each visited page.

The history keeps a sliding window of at most ``max_entries`` options.
Positions are tracked in absolute terms: ``history_start_index`` is the
absolute position of ``entries[0]`` and ``current_page_index`` is the
absolute position of the page currently loaded. Once the window slides
past an entry, that page can no longer be reached backwards.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from translate_sdk.core.exceptions import NoEarlierPageRetainedError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from translate_sdk.core.pagination.options import PageOptions

DEFAULT_MAX_NAVIGATION_HISTORY = 10


class NavigationHistory:
    """Ordered, size-bounded log of the options of visited pages.

    Invariant: ``entries[i]`` is exactly the options that produced the page
    at absolute position ``history_start_index + i``.

    Example:
        history = NavigationHistory(max_entries=3)
        history.append(first)
        history.append(second)
        history.previous_options()  # -> first
    """

    def __init__(self, max_entries: int = DEFAULT_MAX_NAVIGATION_HISTORY) -> None:
        if max_entries < 1:
            msg = f"max_entries must be at least 1, got {max_entries}"
            raise ValueError(msg)
        self.max_entries = max_entries
        self._entries: list[PageOptions] = []
        self._history_start_index = 0
        self._current_page_index = -1

    @classmethod
    def from_entries(
        cls,
        entries: Sequence[PageOptions],
        *,
        current_index: int,
        history_start_index: int = 0,
        max_entries: int = DEFAULT_MAX_NAVIGATION_HISTORY,
    ) -> NavigationHistory:
        """Rebuild a history from a serialized window.

        Args:
            entries: Retained options, oldest first.
            current_index: Position of the current page within ``entries``.
            history_start_index: Absolute position of ``entries[0]``.
            max_entries: Window size for the rebuilt history.

        Raises:
            ValueError: If ``current_index`` does not address ``entries``.
        """
        if not 0 <= current_index < len(entries):
            msg = f"current_index {current_index} outside history of {len(entries)} entries"
            raise ValueError(msg)

        history = cls(max_entries=max_entries)
        # Entries after the current page describe a forward branch that the
        # next fetch will replace, so only the path up to it is restored.
        window = list(entries[: current_index + 1])
        start = history_start_index
        overflow = len(window) - max_entries
        if overflow > 0:
            window = window[overflow:]
            start += overflow

        history._entries = window
        history._history_start_index = start
        history._current_page_index = start + len(window) - 1
        return history

    @property
    def entries(self) -> list[PageOptions]:
        """Retained options, oldest first."""
        return list(self._entries)

    @property
    def history_start_index(self) -> int:
        return self._history_start_index

    @property
    def current_page_index(self) -> int:
        """Absolute position of the current page (-1 while empty)."""
        return self._current_page_index

    @property
    def local_index(self) -> int:
        """Position of the current page inside ``entries``."""
        return self._current_page_index - self._history_start_index

    @property
    def current(self) -> PageOptions | None:
        if not self._entries:
            return None
        return self._entries[self.local_index]

    @property
    def can_go_back(self) -> bool:
        """Whether the entry before the current page is still retained."""
        return self.local_index > 0

    def __len__(self) -> int:
        return len(self._entries)

    def append(self, options: PageOptions) -> None:
        """Record a newly loaded page and make it current.

        Entries after the current position are dropped first, so replaying
        forward after stepping back rewrites the forward branch. When the
        window overflows, the oldest entry is evicted and
        ``history_start_index`` advances by one.
        """
        del self._entries[self.local_index + 1 :]
        self._entries.append(options)
        self._current_page_index += 1

        while len(self._entries) > self.max_entries:
            self._entries.pop(0)
            self._history_start_index += 1

    def step_forward(self, options: PageOptions) -> None:
        self.append(options)

    def previous_options(self) -> PageOptions:
        """Return the options of the page before the current one.

        Raises:
            NoEarlierPageRetainedError: If that entry was evicted or never existed.
        """
        if not self.can_go_back:
            raise NoEarlierPageRetainedError(
                extra={
                    "current_page_index": self._current_page_index,
                    "history_start_index": self._history_start_index,
                },
            )
        return self._entries[self.local_index - 1]

    def step_back(self) -> PageOptions:
        """Move the current position one page back and return its options.

        Raises:
            NoEarlierPageRetainedError: If the earlier entry is not retained.
        """
        options = self.previous_options()
        self._current_page_index -= 1
        return options

    def next_options(self) -> PageOptions | None:
        """Options of the retained page after the current one, if any."""
        index = self.local_index + 1
        if index < len(self._entries):
            return self._entries[index]
        return None


__all__ = ["DEFAULT_MAX_NAVIGATION_HISTORY", "NavigationHistory"]
