"""
Fixed-capacity history of a particle's recent screen positions.

Backed by a preallocated (capacity, 2) float64 array with a head index, so
pushes never reallocate and the oldest point is overwritten once full.
"""

from typing import Iterator, Optional, Sequence, Tuple

import numpy as np

MAX_TRAIL_LENGTH: int = 100


class TrailBuffer:
    """
    Ring buffer of 2D points, oldest first.

    The first point pushed into an empty buffer is stored twice, so a trail
    is always drawable as a line once it holds anything. After k >= 1 pushes
    ``len(trail) == min(k + 1, capacity)``.
    """

    def __init__(self, capacity: int = MAX_TRAIL_LENGTH):
        if capacity < 1:
            raise ValueError(f"Trail capacity must be positive, got {capacity}")
        self._points = np.zeros((capacity, 2), dtype=np.float64)
        self._head = 0  # index of the oldest point
        self._size = 0

    @property
    def capacity(self) -> int:
        return self._points.shape[0]

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Tuple[float, float]]:
        for row in self.points():
            yield float(row[0]), float(row[1])

    def push(self, point: Sequence[float]) -> None:
        if self._size == 0 and self.capacity > 1:
            self._append(point)
        self._append(point)

    def _append(self, point: Sequence[float]) -> None:
        cap = self.capacity
        self._points[(self._head + self._size) % cap] = point
        if self._size < cap:
            self._size += 1
        else:
            self._head = (self._head + 1) % cap

    def points(self) -> np.ndarray:
        """Copy of the stored points as an (n, 2) array, oldest first."""
        idx = (self._head + np.arange(self._size)) % self.capacity
        return self._points[idx]

    def latest(self) -> Optional[Tuple[float, float]]:
        if self._size == 0:
            return None
        row = self._points[(self._head + self._size - 1) % self.capacity]
        return float(row[0]), float(row[1])
