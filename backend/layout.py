"""Row layout: how many residues fit per row, and how sequences wrap."""
import logging
import math
from typing import Callable, Optional

from schemas import RowChunk

logger = logging.getLogger(__name__)

# One residue cell: 24px box plus 2px of border/padding
CELL_WIDTH = 26


def row_capacity(width: float, cell_width: float = CELL_WIDTH) -> int:
    """Residue columns that fit in `width`, never less than one."""
    return max(math.floor(width / cell_width), 1)


def partition(seq_a: str, seq_b: str, capacity: Optional[int]) -> list[RowChunk]:
    """
    Split two aligned sequences into synchronized row chunks.

    Chunks tile the shared length in strides of `capacity`; the last one
    may be shorter. If the sequences differ in length only the common prefix
    is laid out. An unset or non-positive capacity yields no rows.
    """
    if capacity is None or capacity <= 0:
        return []

    length = min(len(seq_a), len(seq_b))
    seq_a, seq_b = seq_a[:length], seq_b[:length]
    return [
        RowChunk(
            offset=offset,
            top=seq_a[offset:offset + capacity],
            bottom=seq_b[offset:offset + capacity],
        )
        for offset in range(0, length, capacity)
    ]


CapacityListener = Callable[[int], None]


class LayoutObserver:
    """
    Tracks the width of the rendering surface and publishes row capacity.

    The capacity is None until the first measurement. Every call to
    `measure` republishes the recomputed capacity to all subscribers, so the
    latest width always wins.
    """

    def __init__(self, cell_width: float = CELL_WIDTH):
        if cell_width <= 0:
            raise ValueError(f"cell_width must be positive, got {cell_width}")
        self.cell_width = cell_width
        self._width: Optional[float] = None
        self._capacity: Optional[int] = None
        self._listeners: list[CapacityListener] = []

    @property
    def width(self) -> Optional[float]:
        return self._width

    @property
    def capacity(self) -> Optional[int]:
        return self._capacity

    def subscribe(self, listener: CapacityListener) -> Callable[[], None]:
        """Register a listener; returns a callable that removes it again."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def measure(self, width) -> Optional[int]:
        """Record a new surface width and notify subscribers."""
        try:
            width = float(width)
        except (TypeError, ValueError):
            logger.warning("Ignoring non-numeric width %r", width)
            return self._capacity
        if not math.isfinite(width):
            logger.warning("Ignoring non-finite width %r", width)
            return self._capacity

        self._width = width
        self._capacity = row_capacity(width, self.cell_width)
        logger.debug("Width %.1f -> %d residues per row", width, self._capacity)

        for listener in list(self._listeners):
            listener(self._capacity)
        return self._capacity
