"""
Arcade Logging

Per-module console logging for the platform and its games.

Usage:
    from arcade_core.logging import get_logger

    log = get_logger('spawner')
    log.trace("Dropped %s at x=%.1f", kind, x)
    log.info("Game started")

Output goes to stdout as one line per message:

    [spawner] TRACE: Dropped fruit at x=412.0

Configuration:
    Environment variables (read once on import):
        ARCADE_LOG_LEVEL=DEBUG        # Default for every module
        ARCADE_LOG_SPAWNER=TRACE      # One module (name upper-cased)

    Or programmatically:
        from arcade_core.logging import configure_logging
        configure_logging(level='DEBUG', modules={'input': 'WARNING'})
"""

import os
import sys
import traceback
from dataclasses import dataclass, field
from enum import IntEnum
from functools import lru_cache
from typing import Dict, Optional


class LogLevel(IntEnum):
    """Severity levels; values line up with the stdlib logging module."""
    TRACE = 5      # Per-tick detail (drops, knife throws)
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50
    OFF = 100

    @classmethod
    def parse(cls, name: str, default: Optional['LogLevel'] = None) -> 'LogLevel':
        """Level from its name, case-insensitive. WARN is accepted for WARNING."""
        key = name.strip().upper()
        if key == 'WARN':
            key = 'WARNING'
        try:
            return cls[key]
        except KeyError:
            return default if default is not None else cls.INFO


# Short tags printed in place of the full level name
_TAGS = {
    LogLevel.TRACE: 'TRACE',
    LogLevel.DEBUG: 'DEBUG',
    LogLevel.INFO: 'INFO',
    LogLevel.WARNING: 'WARN',
    LogLevel.ERROR: 'ERROR',
    LogLevel.CRITICAL: 'CRIT',
}

ENV_PREFIX = 'ARCADE_LOG_'
ENV_GLOBAL = ENV_PREFIX + 'LEVEL'


@dataclass
class LoggingConfig:
    """Process-wide logging settings shared by every ArcadeLogger."""
    default_level: LogLevel = LogLevel.INFO
    module_levels: Dict[str, LogLevel] = field(default_factory=dict)

    def level_for(self, module_key: str) -> LogLevel:
        return self.module_levels.get(module_key, self.default_level)


_config = LoggingConfig()


def _module_key(module: str) -> str:
    """Normalise a module name: 'FruitFall.Spawner' -> 'fruitfall_spawner'."""
    return module.lower().replace('.', '_').replace('/', '_')


def configure_logging(
    level: str = 'INFO',
    modules: Optional[Dict[str, str]] = None,
) -> None:
    """Set the default level and, optionally, per-module levels.

    Module levels given here are added to (or replace) existing ones;
    modules not mentioned keep their current override.

    Args:
        level: Default level name for all modules
        modules: module name -> level name
    """
    _config.default_level = LogLevel.parse(level)
    for module, module_level in (modules or {}).items():
        _config.module_levels[_module_key(module)] = LogLevel.parse(module_level)


def load_env_config(environ=None) -> None:
    """Apply ARCADE_LOG_* variables from the environment."""
    environ = os.environ if environ is None else environ
    if ENV_GLOBAL in environ:
        _config.default_level = LogLevel.parse(environ[ENV_GLOBAL])

    for key, value in environ.items():
        if key.startswith(ENV_PREFIX) and key != ENV_GLOBAL:
            _config.module_levels[_module_key(key[len(ENV_PREFIX):])] = LogLevel.parse(value)


load_env_config()


class ArcadeLogger:
    """Logger bound to one module name.

    Level checks happen before any formatting, so disabled TRACE calls in
    the tick loop cost one comparison.
    """

    def __init__(self, module: str):
        self.module = module
        self._key = _module_key(module)

    @property
    def level(self) -> LogLevel:
        """Effective level: module override, else the global default."""
        return _config.level_for(self._key)

    def is_enabled_for(self, level: LogLevel) -> bool:
        return level >= self.level

    def log(self, level: LogLevel, msg: str, *args) -> None:
        """Log msg % args at the given level."""
        if level < self.level:
            return
        if args:
            try:
                msg = msg % args
            except (TypeError, ValueError):
                msg = f"{msg} {args}"
        print(f"[{self.module}] {_TAGS.get(level, level.name)}: {msg}", file=sys.stdout)

    def trace(self, msg: str, *args) -> None:
        self.log(LogLevel.TRACE, msg, *args)

    def debug(self, msg: str, *args) -> None:
        self.log(LogLevel.DEBUG, msg, *args)

    def info(self, msg: str, *args) -> None:
        self.log(LogLevel.INFO, msg, *args)

    def warning(self, msg: str, *args) -> None:
        self.log(LogLevel.WARNING, msg, *args)

    warn = warning

    def error(self, msg: str, *args) -> None:
        self.log(LogLevel.ERROR, msg, *args)

    def critical(self, msg: str, *args) -> None:
        self.log(LogLevel.CRITICAL, msg, *args)

    def exception(self, msg: str, *args) -> None:
        """Log at ERROR followed by the active traceback, if any."""
        self.log(LogLevel.ERROR, msg, *args)
        tb = traceback.format_exc()
        if tb.strip() != 'NoneType: None':
            for line in tb.rstrip().splitlines():
                self.log(LogLevel.ERROR, line)


@lru_cache(maxsize=64)
def get_logger(module: str) -> ArcadeLogger:
    """Cached logger for a module name (e.g. 'fruitfall', 'input')."""
    return ArcadeLogger(module)


def enable_all_logging() -> None:
    """TRACE everywhere."""
    configure_logging(level='TRACE')


def disable_logging() -> None:
    """Silence every module, dropping per-module overrides."""
    _config.default_level = LogLevel.OFF
    _config.module_levels.clear()
