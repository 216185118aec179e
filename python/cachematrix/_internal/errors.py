"""Error categories surfaced by cachematrix.

Inversion errors come straight from NumPy. The alias exists so callers can
catch them without importing ``numpy.linalg`` themselves.
"""
from __future__ import annotations

import numpy as np

InversionFailure = np.linalg.LinAlgError

__all__ = ["InversionFailure"]
