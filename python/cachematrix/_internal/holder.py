from __future__ import annotations

from typing import Any

import numpy as np


def _shape_of(value: Any) -> tuple[int, ...] | None:
    shape = getattr(value, "shape", None)
    if isinstance(shape, tuple):
        return shape
    try:
        return np.shape(value)
    except Exception:
        return None


class CacheMatrix:
    """A matrix paired with a single cache slot for its inverse.

    The holder stores values only. It never computes the inverse and never
    checks that a cached value belongs to the current matrix; that is left to
    :func:`cachematrix.cache_solve`.

    ``set`` is the only way the cache gets invalidated: every call clears the
    slot, even when the new matrix equals the old one.
    """

    def __init__(self, x: Any = None) -> None:
        if x is None:
            x = np.empty((0, 0), dtype=np.float64)
        self._x = x
        self._inverse: Any | None = None

    def set(self, value: Any) -> None:
        """Replace the primary matrix and clear the cached inverse."""
        self._x = value
        self._inverse = None

    def get(self) -> Any:
        return self._x

    def set_inverse(self, value: Any) -> None:
        """Store ``value`` as the cached inverse. ``None`` clears the slot."""
        self._inverse = value

    def get_inverse(self) -> Any | None:
        """Return the cached inverse, or ``None`` if it was not computed yet."""
        return self._inverse

    @property
    def has_inverse(self) -> bool:
        return self._inverse is not None

    def __repr__(self) -> str:
        return f"CacheMatrix(shape={_shape_of(self._x)}, cached={self.has_inverse})"


def make_cache_matrix(x: Any = None) -> CacheMatrix:
    return CacheMatrix(x)
