from __future__ import annotations

import logging
from typing import Any, Callable

from .holder import CacheMatrix
from .linalg import solve as _default_solver

logger = logging.getLogger(__name__)

MISS_NOTICE = "Drat, having to compute the inverse.  Please hold..."


def cache_solve(
    x: CacheMatrix,
    /,
    *args: Any,
    solver: Callable[..., Any] | None = None,
    **kwargs: Any,
) -> Any:
    """Return the inverse of ``x.get()``, computing it only on a cache miss.

    Extra positional and keyword arguments are handed to ``solver`` untouched
    (by default :func:`cachematrix._internal.linalg.solve`, which takes a
    right-hand side ``b`` and a ``tol``). The one keyword that is never
    forwarded is ``solver`` itself. Solver errors propagate as-is and leave
    the cache empty, so the next call retries.
    """
    inverse = x.get_inverse()
    if inverse is not None:
        return inverse

    logger.info(MISS_NOTICE)
    if solver is None:
        solver = _default_solver
    data = x.get()
    inverse = solver(data, *args, **kwargs)
    x.set_inverse(inverse)
    logger.debug("Stored computed inverse on %r", x)
    return inverse
