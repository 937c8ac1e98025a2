"""
Bearwatch Logging

Module-scoped console logging with per-module levels, plus structured record
logging routed through sinks.

Structured Record Logging:
    Games can emit structured records (session lifecycle, alert transitions)
    that are written by a sink registered for the module:
    - FileSink writes JSONL to disk, one file per module
    - NullSink drops everything (the default when a module is not enabled)

Usage:
    from bearwatch.logging import get_logger

    log = get_logger('fishguard')
    log.debug("Selected target %d", index)
    log.info("Session started")

    from bearwatch.logging import emit_record
    emit_record('fishguard', {'type': 'alert', 'state': 'alert', 'tick': 120})

Configuration:
    Environment variables:
        BEARWATCH_LOG_LEVEL=DEBUG              # Global default level
        BEARWATCH_LOG_FISHGUARD=DEBUG          # Module-specific level
        BEARWATCH_LOG_DIR=~/fishguard-logs     # Where FileSink writes

        # Module-specific structured logging
        BEARWATCH_LOGGING_FISHGUARD_ENABLED=true

    Or programmatically:
        from bearwatch.logging import configure_logging
        configure_logging(level='DEBUG', modules={'registry': 'WARNING'})
"""

import json
import os
import sys
import time
from abc import ABC, abstractmethod
from enum import IntEnum
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

ENV_PREFIX = 'BEARWATCH_LOG_'
SETTINGS_PREFIX = 'BEARWATCH_LOGGING_'


class LogLevel(IntEnum):
    """Log levels matching Python's logging module."""
    TRACE = 5
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50
    OFF = 100


# =============================================================================
# Sink-Based Structured Logging
# =============================================================================

class LogSink(ABC):
    """
    Abstract base class for structured record sinks.

    Sinks receive JSON-serializable records and write them to their
    destination.
    """

    @abstractmethod
    def emit(self, module: str, record: Dict[str, Any]) -> None:
        """
        Emit a structured log record.

        Args:
            module: Module name (e.g., 'fishguard')
            record: Structured data to log (must be JSON-serializable)
        """
        pass

    @abstractmethod
    def flush(self) -> None:
        """Flush any buffered records."""
        pass

    @abstractmethod
    def close(self) -> None:
        """Close the sink and release resources."""
        pass

    def __enter__(self) -> 'LogSink':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


class FileSink(LogSink):
    """
    Writes structured records to one JSONL file per module.

    Args:
        log_dir: Directory for log files (default: from get_log_dir())
        session_name: Session identifier for file naming (default: timestamp)
    """

    def __init__(
        self,
        log_dir: Optional[str] = None,
        session_name: Optional[str] = None,
    ):
        self._log_dir = Path(log_dir) if log_dir else None
        self._session_name = session_name or time.strftime("%Y%m%d_%H%M%S")
        self._files: Dict[str, Any] = {}

    def _ensure_dir(self) -> Path:
        if self._log_dir is None:
            self._log_dir = Path(get_log_dir())
        self._log_dir.mkdir(parents=True, exist_ok=True)
        return self._log_dir

    def _path_for(self, module: str) -> Path:
        return self._ensure_dir() / f"{self._session_name}_{module}.jsonl"

    def _get_file(self, module: str):
        if module not in self._files:
            handle = open(self._path_for(module), 'a')
            handle.write(json.dumps({
                "type": "header",
                "module": module,
                "session_name": self._session_name,
                "start_time": time.time(),
            }) + "\n")
            self._files[module] = handle
        return self._files[module]

    def emit(self, module: str, record: Dict[str, Any]) -> None:
        """Append record to the module's JSONL file."""
        if 'wall_time' not in record:
            record = {'wall_time': time.time(), **record}
        self._get_file(module).write(json.dumps(record) + "\n")

    def flush(self) -> None:
        for handle in self._files.values():
            handle.flush()

    def close(self) -> None:
        """Write a footer to every open file and close it."""
        for module, handle in self._files.items():
            handle.write(json.dumps({
                "type": "footer",
                "module": module,
                "end_time": time.time(),
            }) + "\n")
            handle.close()
        self._files.clear()

    @property
    def log_paths(self) -> Dict[str, Path]:
        """Paths of all files opened so far, keyed by module."""
        return {module: self._path_for(module) for module in self._files}


class NullSink(LogSink):
    """No-op sink when structured logging is disabled."""

    def emit(self, module: str, record: Dict[str, Any]) -> None:
        pass

    def flush(self) -> None:
        pass

    def close(self) -> None:
        pass


_sinks: Dict[str, LogSink] = {}
_default_sink: Optional[LogSink] = None


def register_sink(module: str, sink: LogSink) -> None:
    """Register a sink for a specific module, replacing any previous one."""
    previous = _sinks.get(module)
    if previous is not None and previous is not sink:
        previous.close()
    _sinks[module] = sink


def set_default_sink(sink: Optional[LogSink]) -> None:
    """Set the sink used by modules without a specific one."""
    global _default_sink
    _default_sink = sink


def get_sink(module: str) -> Optional[LogSink]:
    """Get the sink for a module, or the default sink."""
    return _sinks.get(module, _default_sink)


def emit_record(module: str, record: Dict[str, Any]) -> bool:
    """
    Emit a structured record to the module's sink.

    Returns:
        True if a sink received the record, False if none is registered
    """
    sink = get_sink(module)
    if sink is None:
        return False
    sink.emit(module, record)
    return True


def close_all_sinks() -> None:
    """Close and forget every registered sink."""
    global _default_sink
    for sink in _sinks.values():
        sink.close()
    _sinks.clear()
    if _default_sink is not None:
        _default_sink.close()
        _default_sink = None


def create_sink_for_environment(
    module: str,
    session_name: Optional[str] = None,
) -> LogSink:
    """
    Create the sink configured for a module.

    Returns a FileSink when BEARWATCH_LOGGING_<MODULE>_ENABLED is truthy,
    otherwise a NullSink.
    """
    if not get_module_config(module).get('enabled', False):
        return NullSink()
    return FileSink(session_name=session_name)


# =============================================================================
# Global configuration
# =============================================================================

_config: Dict[str, Any] = {
    'default_level': LogLevel.INFO,
    'module_levels': {},
    'log_dir': None,
    'modules': {},
}


def get_log_dir() -> str:
    """Get the log directory.

    Priority:
    1. Configured log_dir (BEARWATCH_LOG_DIR or configure_logging)
    2. Platform user data directory:
       - macOS: ~/Library/Application Support/Bearwatch/logs
       - Windows: %APPDATA%/Bearwatch/logs
       - Linux: $XDG_DATA_HOME/bearwatch/logs
    """
    if _config.get('log_dir'):
        return str(Path(_config['log_dir']).expanduser())

    if sys.platform == 'darwin':
        user_data = Path.home() / 'Library' / 'Application Support' / 'Bearwatch'
    elif sys.platform == 'win32':
        user_data = Path(os.environ.get('APPDATA', str(Path.home()))) / 'Bearwatch'
    else:
        xdg_data = os.environ.get('XDG_DATA_HOME', str(Path.home() / '.local' / 'share'))
        user_data = Path(xdg_data) / 'bearwatch'

    return str(user_data / 'logs')


def get_module_config(module: str) -> Dict[str, Any]:
    """Get structured-logging settings for a module.

    BEARWATCH_LOGGING_FISHGUARD_ENABLED=true maps to {'enabled': True}.
    """
    return _config['modules'].get(module.lower(), {})


def _set_nested(d: Dict, keys: list, value: Any) -> None:
    for key in keys[:-1]:
        d = d.setdefault(key, {})
    d[keys[-1]] = value


def _parse_env_value(value: str) -> Any:
    lower = value.lower()
    if lower in ('true', '1', 'yes', 'on'):
        return True
    if lower in ('false', '0', 'no', 'off'):
        return False
    for cast in (int, float):
        try:
            return cast(value)
        except ValueError:
            pass
    return value


def _level_from_string(level_str: str) -> LogLevel:
    mapping = {
        'TRACE': LogLevel.TRACE,
        'DEBUG': LogLevel.DEBUG,
        'INFO': LogLevel.INFO,
        'WARNING': LogLevel.WARNING,
        'WARN': LogLevel.WARNING,
        'ERROR': LogLevel.ERROR,
        'CRITICAL': LogLevel.CRITICAL,
        'OFF': LogLevel.OFF,
    }
    return mapping.get(level_str.upper(), LogLevel.INFO)


def configure_logging(
    level: str = 'INFO',
    modules: Optional[Dict[str, str]] = None,
    log_dir: Optional[str] = None,
) -> None:
    """
    Configure the logging system.

    Args:
        level: Default log level for all modules
        modules: Dict of module_name -> level for per-module configuration
        log_dir: Directory for FileSink output
    """
    _config['default_level'] = _level_from_string(level)
    if modules:
        for mod, mod_level in modules.items():
            _config['module_levels'][mod.lower()] = _level_from_string(mod_level)
    if log_dir is not None:
        _config['log_dir'] = log_dir


def enable_module_records(module: str, enabled: bool = True) -> None:
    """Turn structured records for a module on or off programmatically."""
    _config['modules'].setdefault(module.lower(), {})['enabled'] = enabled


def _load_env_config() -> None:
    """Load configuration from BEARWATCH_LOG_* and BEARWATCH_LOGGING_* vars."""
    if 'BEARWATCH_LOG_LEVEL' in os.environ:
        _config['default_level'] = _level_from_string(os.environ['BEARWATCH_LOG_LEVEL'])

    if 'BEARWATCH_LOG_DIR' in os.environ:
        _config['log_dir'] = os.environ['BEARWATCH_LOG_DIR']

    reserved = ('BEARWATCH_LOG_LEVEL', 'BEARWATCH_LOG_DIR')
    for key, value in os.environ.items():
        if key.startswith(ENV_PREFIX) and key not in reserved:
            _config['module_levels'][key[len(ENV_PREFIX):].lower()] = _level_from_string(value)

    for key, value in os.environ.items():
        if key.startswith(SETTINGS_PREFIX):
            parts = key[len(SETTINGS_PREFIX):].lower().split('_')
            if len(parts) >= 2:
                module_settings = _config['modules'].setdefault(parts[0], {})
                _set_nested(module_settings, parts[1:], _parse_env_value(value))


_load_env_config()


class BearwatchLogger:
    """Logger for a specific module."""

    def __init__(self, module: str):
        self.module = module
        self._module_key = module.lower().replace('.', '_').replace('/', '_')

    @property
    def level(self) -> LogLevel:
        """Effective log level for this module."""
        return _config['module_levels'].get(self._module_key, _config['default_level'])

    def is_enabled_for(self, level: LogLevel) -> bool:
        return level >= self.level

    def _log(self, level: LogLevel, level_name: str, msg: str, *args) -> None:
        if not self.is_enabled_for(level):
            return
        if args:
            try:
                msg = msg % args
            except (TypeError, ValueError):
                msg = f"{msg} {args}"
        print(f"[{self.module}] {level_name}: {msg}")

    def trace(self, msg: str, *args) -> None:
        self._log(LogLevel.TRACE, 'TRACE', msg, *args)

    def debug(self, msg: str, *args) -> None:
        self._log(LogLevel.DEBUG, 'DEBUG', msg, *args)

    def info(self, msg: str, *args) -> None:
        self._log(LogLevel.INFO, 'INFO', msg, *args)

    def warning(self, msg: str, *args) -> None:
        self._log(LogLevel.WARNING, 'WARN', msg, *args)

    def warn(self, msg: str, *args) -> None:
        """Alias for warning()."""
        self.warning(msg, *args)

    def error(self, msg: str, *args) -> None:
        self._log(LogLevel.ERROR, 'ERROR', msg, *args)

    def critical(self, msg: str, *args) -> None:
        self._log(LogLevel.CRITICAL, 'CRIT', msg, *args)

    def exception(self, msg: str, *args) -> None:
        """Log an error followed by the current exception's traceback."""
        import traceback

        self._log(LogLevel.ERROR, 'ERROR', msg, *args)
        tb = traceback.format_exc()
        if tb and tb.strip() != 'NoneType: None':
            for line in tb.strip().split('\n'):
                self._log(LogLevel.ERROR, 'TRACE', line)


@lru_cache(maxsize=64)
def get_logger(module: str) -> BearwatchLogger:
    """
    Get a logger for the specified module.

    Loggers are cached, so get_logger('foo') always returns the same
    instance.
    """
    return BearwatchLogger(module)


def disable_logging() -> None:
    """Silence every console logger."""
    _config['default_level'] = LogLevel.OFF
