"""FIFO buffers feeding the page flow: queued lines/markers and raw page blocks."""

from __future__ import annotations

from collections import deque
from typing import Deque, Optional

from .models import DocText


class ContentQueue:
    """Lines and control markers in the order they were requested."""

    def __init__(self) -> None:
        self._items: Deque[DocText] = deque()

    def append(self, doc_text: DocText) -> None:
        self._items.append(doc_text)

    def poll(self) -> Optional[DocText]:
        """Removes and returns the head, or None when the queue is empty."""
        if not self._items:
            return None
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)


class PageInsertQueue:
    """

    Raw pre-rendered page blocks.

    Entry N belongs to the N-th INSERT_PAGE marker of the content queue; the
    pairing is purely positional.

    """

    def __init__(self) -> None:
        self._blocks: Deque[bytes] = deque()

    def append(self, block: bytes) -> None:
        self._blocks.append(bytes(block))

    def poll(self) -> Optional[bytes]:
        if not self._blocks:
            return None
        return self._blocks.popleft()

    def __len__(self) -> int:
        return len(self._blocks)

    def __bool__(self) -> bool:
        return bool(self._blocks)
