"""Logging utilities for the freeze-drying calculator.

Every module logs through ``get_logger(__name__)`` so records fall under the
``lyocalc`` hierarchy. Integrator runs tag their lines with the calculation
id from ``generate_calculation_id`` in ``lyocalc.simulation.sublimation``
so repeated runs of the same inputs can be matched up in the log.
"""

from __future__ import annotations

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

_LOGGERS: dict[str, logging.Logger] = {}


def get_logger(name: str = "lyocalc", level: int = logging.INFO) -> logging.Logger:
    """Return a cached logger with one stream handler.

    Loggers do not propagate, so a module logs once even when the Streamlit
    script reruns and asks for its logger again.
    """
    if name in _LOGGERS:
        return _LOGGERS[name]

    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False

    _LOGGERS[name] = logger
    return logger


def reset_logger(name: str) -> None:
    """Drop a cached logger and close its handlers (used by tests)."""
    existing: Optional[logging.Logger] = _LOGGERS.pop(name, None)
    if existing:
        for handler in list(existing.handlers):
            existing.removeHandler(handler)
            handler.close()
