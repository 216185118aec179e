"""Memoized matrix inversion: compute an inverse once, reuse it until the matrix changes."""
from __future__ import annotations

try:
    from ._version import version as __version__
except ImportError:
    __version__ = "unknown"

from ._internal.holder import CacheMatrix, make_cache_matrix
from ._internal.solve import cache_solve
from ._internal.errors import InversionFailure
from . import logging_setup

__all__ = [
    "CacheMatrix",
    "make_cache_matrix",
    "cache_solve",
    "InversionFailure",
    "logging_setup",
]
