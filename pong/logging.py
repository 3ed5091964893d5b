"""
Pong Logging

Per-module console logger. The match runs at 60 FPS, so most per-frame
detail is logged at TRACE and stays silent unless that one module is
turned up.

Usage:
    from pong.logging import get_logger

    log = get_logger('game_mode')
    log.info("paused -> playing")
    if log.is_enabled_for(LogLevel.TRACE):
        log.trace("Events: %s", expensive_summary())

Configuration:
    Environment variables (read once at import):
        PONG_LOG_LEVEL=DEBUG          # Default level for every module
        PONG_LOG_GAME_MODE=TRACE      # Level for one module
        PONG_LOG_AUDIO=OFF

    CLI:
        pong --log-level DEBUG

    Code:
        configure_logging(level='DEBUG', modules={'audio': 'WARNING'})
"""

import os
from enum import IntEnum
from functools import lru_cache, partialmethod
from typing import Any, Dict, Mapping, Optional


class LogLevel(IntEnum):
    """Log levels; the numeric values match Python's logging module."""
    TRACE = 5      # Per-frame detail (hits, event batches)
    DEBUG = 10
    INFO = 20      # State transitions, points, wins
    WARNING = 30
    ERROR = 40
    OFF = 100


_LABELS = {
    LogLevel.TRACE: 'TRACE',
    LogLevel.DEBUG: 'DEBUG',
    LogLevel.INFO: 'INFO',
    LogLevel.WARNING: 'WARN',
    LogLevel.ERROR: 'ERROR',
}

_ENV_PREFIX = 'PONG_LOG_'
_ENV_DEFAULT = 'PONG_LOG_LEVEL'

_config: Dict[str, Any] = {
    'default_level': LogLevel.INFO,
    'module_levels': {},
}


def _level_from_string(name: str) -> LogLevel:
    """Parse a level name; WARN is accepted and unknown names mean INFO."""
    name = name.strip().upper()
    if name == 'WARN':
        return LogLevel.WARNING
    return LogLevel.__members__.get(name, LogLevel.INFO)


def configure_logging(
    level: str = 'INFO',
    modules: Optional[Dict[str, str]] = None,
) -> None:
    """
    Set the default level and, optionally, per-module levels.

    Args:
        level: Default level name (TRACE, DEBUG, INFO, WARNING, ERROR, OFF)
        modules: Module name -> level name overrides
    """
    _config['default_level'] = _level_from_string(level)
    for module, module_level in (modules or {}).items():
        _config['module_levels'][module.lower()] = _level_from_string(module_level)


def _load_env_config(environ: Mapping[str, str] = os.environ) -> None:
    """Apply PONG_LOG_LEVEL and PONG_LOG_<MODULE> from the environment."""
    if _ENV_DEFAULT in environ:
        _config['default_level'] = _level_from_string(environ[_ENV_DEFAULT])

    for key, value in environ.items():
        if key.startswith(_ENV_PREFIX) and key != _ENV_DEFAULT:
            module = key[len(_ENV_PREFIX):].lower()
            _config['module_levels'][module] = _level_from_string(value)


_load_env_config()


class PongLogger:
    """Console logger bound to one module name.

    Output is a single line, ``[module] LEVEL: message``, with
    printf-style arguments applied only when the line is emitted.
    """

    def __init__(self, module: str):
        self.module = module
        self._key = module.lower()

    @property
    def level(self) -> LogLevel:
        """Effective level: the module override, else the default."""
        return _config['module_levels'].get(self._key, _config['default_level'])

    def is_enabled_for(self, level: LogLevel) -> bool:
        return level >= self.level

    def log(self, level: LogLevel, msg: str, *args) -> None:
        """Emit msg at level if this module's level allows it."""
        if not self.is_enabled_for(level):
            return
        if args:
            try:
                msg = msg % args
            except (TypeError, ValueError):
                msg = f"{msg} {args}"
        print(f"[{self.module}] {_LABELS[level]}: {msg}")

    trace = partialmethod(log, LogLevel.TRACE)
    debug = partialmethod(log, LogLevel.DEBUG)
    info = partialmethod(log, LogLevel.INFO)
    warning = partialmethod(log, LogLevel.WARNING)
    error = partialmethod(log, LogLevel.ERROR)


@lru_cache(maxsize=None)
def get_logger(module: str) -> PongLogger:
    """
    Get the logger for a module (one shared instance per name).

    Args:
        module: Short module name, e.g. 'game_mode' or 'audio'
    """
    return PongLogger(module)
