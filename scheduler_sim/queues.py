from __future__ import annotations

import heapq
from collections import deque
from typing import Callable, Deque, Iterator, List, Optional, Sequence, Tuple

from .models import Process

# A process paired with its position in the caller's list; the position is
# the final tie-breaker everywhere.
Entry = Tuple[int, Process]


class PendingArrivals:
    """
    Processes that have not reached the ready queue yet, in arrival order
    (ties by input position).
    """

    def __init__(self, processes: Sequence[Process]):
        entries = list(enumerate(processes))
        entries.sort(key=lambda e: (e[1].arrival_time, e[0]))
        self._entries: Deque[Entry] = deque(entries)

    def __len__(self) -> int:
        return len(self._entries)

    def admit_until(self, time: int) -> Iterator[Entry]:
        while self._entries and self._entries[0][1].arrival_time <= time:
            yield self._entries.popleft()

    def next_arrival(self) -> Optional[int]:
        return self._entries[0][1].arrival_time if self._entries else None


class ReadyQueue:
    """FIFO ready queue used by Round Robin."""

    def __init__(self) -> None:
        self._items: Deque[Entry] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def push(self, entry: Entry) -> None:
        self._items.append(entry)

    def pop(self) -> Entry:
        return self._items.popleft()


class PriorityReadyQueue:
    """
    Ready queue that always pops the entry with the smallest key.

    ``key`` maps a process to a sortable tuple; the input position is
    appended so equal keys pop in the order the caller listed them.
    """

    def __init__(self, key: Callable[[Process], tuple]):
        self._key = key
        self._heap: List[Tuple[tuple, int, Process]] = []

    def __len__(self) -> int:
        return len(self._heap)

    def push(self, entry: Entry) -> None:
        index, process = entry
        heapq.heappush(self._heap, (self._key(process), index, process))

    def pop(self) -> Entry:
        _, index, process = heapq.heappop(self._heap)
        return index, process
