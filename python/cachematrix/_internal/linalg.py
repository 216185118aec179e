from __future__ import annotations

from typing import Any

import numpy as np

DEFAULT_TOL = float(np.finfo(np.float64).eps)


def solve(a: Any, b: Any | None = None, *, tol: float = DEFAULT_TOL) -> np.ndarray:
    """Invert ``a``, or solve ``a @ x = b`` when a right-hand side is given.

    ``a`` is rejected as computationally singular when the reciprocal of its
    1-norm condition number falls below ``tol``. Non-square and singular
    inputs raise ``numpy.linalg.LinAlgError``.
    """
    a_np = np.asarray(a)
    if a_np.size:
        rcond = 1.0 / np.linalg.cond(a_np, 1)
        if not rcond >= tol:
            raise np.linalg.LinAlgError(
                f"system is computationally singular: reciprocal condition number = {rcond:g}"
            )
    if b is None:
        return np.linalg.inv(a_np)
    return np.linalg.solve(a_np, np.asarray(b))
