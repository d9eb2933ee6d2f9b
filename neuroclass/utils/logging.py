"""A print-based logger for notebooks and `panel serve` sessions.

Standard Python logging disappears in Jupyter notebooks and in Panel's
server console unless carefully configured. This module prints to stdout
with timestamps and level labels instead. Unsophisticated, but visible.

Messages below the threshold in $NEUROCLASS_LOG_LEVEL (default INFO) are
dropped. An unknown value there falls back to INFO; logging never raises.

Usage:
    from neuroclass.utils import get_logger
    log = get_logger("catalog")
    log.info("Loaded %d neurotransmitters", 6)
"""

import os
import sys
from datetime import datetime

LEVELS = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40}

LEVEL_ENV = "NEUROCLASS_LOG_LEVEL"
DEFAULT_LEVEL = "INFO"

_reported_env_values = set()


def _env_threshold():
    """Threshold from $NEUROCLASS_LOG_LEVEL; unknown names warn once, use INFO."""
    name = (os.environ.get(LEVEL_ENV) or DEFAULT_LEVEL).upper()
    if name in LEVELS:
        return LEVELS[name]
    if name not in _reported_env_values:
        _reported_env_values.add(name)
        print(f"neuroclass:logging WARNING: unknown {LEVEL_ENV}={name!r}, "
              f"using {DEFAULT_LEVEL}. Available: {list(LEVELS)}",
              file=sys.stdout)
    return LEVELS[DEFAULT_LEVEL]


def get_logger(name, out=None, level=None):
    """Create a print-based logger.

    Parameters
    ----------
    name : str
        Logger name, displayed in every message header.
    out : file-like, optional
        Additional output stream (e.g., an open log file).
    level : str, optional
        Lowest level printed. Read from $NEUROCLASS_LOG_LEVEL at each
        call when not given.

    Returns
    -------
    callable
        A log function with .debug, .info, .warning, .error methods.

    Raises
    ------
    ValueError
        If `level` is given and is not a known level name.
    """
    if level is not None:
        if level.upper() not in LEVELS:
            raise ValueError(f"Unknown log level '{level}'. Available: {list(LEVELS)}")
        fixed_threshold = LEVELS[level.upper()]
    else:
        fixed_threshold = None

    prefix = f"neuroclass:{name}"
    line_length = 72
    outputs = [sys.stdout] + ([out] if out else [])

    def _header(level_name):
        now = datetime.now().strftime("%H:%M:%S")
        for dest in outputs:
            print(f"{'_' * line_length}", file=dest)
            print(f"{prefix} {level_name} [{now}]", file=dest)

    def log(level_name, msg, args):
        threshold = fixed_threshold if fixed_threshold is not None else _env_threshold()
        if LEVELS[level_name] < threshold:
            return
        _header(level_name)
        for dest in outputs:
            try:
                print(msg % args, file=dest)
            except TypeError:
                print(msg, file=dest)

    log.debug = lambda msg, *args: log("DEBUG", msg, args)
    log.info = lambda msg, *args: log("INFO", msg, args)
    log.warning = lambda msg, *args: log("WARNING", msg, args)
    log.error = lambda msg, *args: log("ERROR", msg, args)

    return log
