"""Package loggers for the simulator.

Every module logs through a child of ``quantum_sim``. Records go to stderr
as ``[LEVEL] name: message`` and do not propagate to the root logger, so
an application that embeds the simulator keeps its own handlers quiet
unless it opts in with ``configure_logging``.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

_DEFAULT_LEVEL = logging.WARNING
_DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

_loggers: dict[str, logging.Logger] = {}


def _coerce_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the ``quantum_sim`` logger for ``name``.

    Names outside the package are nested under ``quantum_sim.``, so
    ``get_logger("bench")`` yields ``quantum_sim.bench``. The stderr handler
    is attached the first time a name is seen; later calls hand back the
    cached logger untouched.

    Example:
        >>> log = get_logger(__name__)
        >>> log.debug("sampling %d shots", 1024)
    """
    if name is None:
        name = "quantum_sim"

    if name == "quantum_sim" or name.startswith("quantum_sim."):
        logger_name = name
    else:
        logger_name = f"quantum_sim.{name}"

    if logger_name in _loggers:
        return _loggers[logger_name]

    logger = logging.getLogger(logger_name)

    if not logger.handlers:
        logger.setLevel(_DEFAULT_LEVEL)
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(_DEFAULT_LEVEL)
        handler.setFormatter(logging.Formatter(_DEFAULT_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False

    _loggers[logger_name] = logger
    return logger


def set_log_level(level: int | str) -> None:
    """Change the threshold for simulator logs.

    Loggers created later start at the same level. Unknown level names
    fall back to WARNING.
    """
    global _DEFAULT_LEVEL
    level = _coerce_level(level)

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)

    _DEFAULT_LEVEL = level


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[object] = None,
) -> None:
    """Route every existing simulator logger to ``stream``.

    Each logger's handlers are replaced by one ``StreamHandler`` using
    ``format_string``. Useful for capturing gate-level debug output from
    a circuit run into a buffer.

    Args:
        level: Threshold for records and handlers.
        format_string: ``logging.Formatter`` pattern; the package default if None.
        stream: Destination; stderr if None.
    """
    global _DEFAULT_LEVEL
    level = _coerce_level(level)

    if stream is None:
        stream = sys.stderr
    formatter = logging.Formatter(format_string or _DEFAULT_FORMAT)

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        handler = logging.StreamHandler(stream)
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    _DEFAULT_LEVEL = level
