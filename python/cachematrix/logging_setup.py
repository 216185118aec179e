"""Console logging for interactive use.

The library itself only creates loggers. Call :func:`setup` to see the
cache-miss notice on stderr.
"""
from __future__ import annotations

import logging
import logging.config
import os

ENV_VAR = "CACHEMATRIX_VERBOSE"
_TRUTHY = frozenset({"1", "true", "yes", "on"})

did_logging_setup: bool = False
is_verbose: bool | None = None


def _verbose_from_env() -> bool:
    return os.environ.get(ENV_VAR, "").strip().lower() in _TRUTHY


def setup(*, verbose: bool | None = None) -> None:
    global did_logging_setup, is_verbose
    if did_logging_setup:
        return
    if verbose is None:
        verbose = _verbose_from_env()
    is_verbose = verbose

    logging.config.dictConfig(
        {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {
                'simple': {
                    'format': '{message}',
                    'style': '{',
                },
            },
            'handlers': {
                'console': {
                    'class': 'logging.StreamHandler',
                    'stream': 'ext://sys.stderr',
                    'level': 'DEBUG' if verbose else 'INFO',
                    'formatter': 'simple',
                },
            },
            'loggers': {
                'cachematrix': {
                    'handlers': ('console',),
                    'level': 'DEBUG' if verbose else 'INFO',
                    'propagate': False,
                },
            },
        }
    )
    did_logging_setup = True
