# ------------------------------------------------------------------------------
#  fluid-data
#  Copyright (c) 2025 Fabio Oddi
#
#  This file is part of fluid-data, released under the BSD 3-Clause License.
#  You may use, modify, and redistribute this file according to the terms of the
#  license. Attribution is required if this code is used in other works.
# ------------------------------------------------------------------------------

"""
Utilities to configure and retrieve the package loggers.

Every logger lives under the ``fluid`` namespace. File logging can be
enabled from the ``logging`` section of the JSON config; the log file is
only created once the first record is emitted.
"""
from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional, TextIO

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
LOG_NAMESPACE = "fluid"
LOG_DIRNAME = "logs"

def _coerce_level(value: Any) -> int:
    """
    Return a valid logging level from either a string or an integer.
    Defaults to logging.INFO when the input is not recognised.
    """
    if isinstance(value, bool):
        return logging.INFO
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        level = getattr(logging, value.upper(), logging.INFO)
        return level if isinstance(level, int) else logging.INFO
    return logging.INFO

def configure_logging(
    settings: Optional[Dict[str, Any]] = None,
    project_root: Optional[str | Path] = None,
) -> Optional[Path]:
    """
    Configure Python logging based on the configuration dictionary.

    Parameters
    ----------
    settings:
        Dictionary coming from the config file. Supported keys:
        - enabled (bool): turn file logging on/off (default: False)
        - level (str|int): logging level for console (default: "INFO" when
          enabled, "WARNING" otherwise)
        - file_level (str|int): logging level for the log file (default: level)
        - to_console (bool): echo logs to stderr (default: enabled)
    project_root:
        Directory under which the ``logs`` folder is created.

    Returns
    -------
    The path the log file will be written to, or None when file logging is
    disabled.
    """
    if settings is None:
        settings = {}
    enabled = settings.get("enabled", False)
    console_level = _coerce_level(settings.get("level", "INFO" if enabled else "WARNING"))
    file_level = _coerce_level(settings.get("file_level", settings.get("level", "WARNING")))

    handlers: list[logging.Handler] = []
    to_console = settings.get("to_console", bool(enabled))
    if to_console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(console_level)
        handlers.append(console_handler)

    log_path = None
    if enabled:
        log_path = _log_file_path(project_root)
        handlers.append(_DeferredFileHandler(log_path, level=file_level))

    if not handlers:
        null_handler = logging.NullHandler()
        null_handler.setLevel(console_level)
        handlers.append(null_handler)

    effective_level = min(handler.level for handler in handlers)

    formatter = logging.Formatter(LOG_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)

    logging.basicConfig(level=effective_level, handlers=handlers, force=True)
    logging.getLogger(LOG_NAMESPACE).setLevel(effective_level)
    return log_path

def _log_file_path(project_root: Optional[str | Path]) -> Path:
    """Compute the timestamped log path without creating anything on disk."""
    root = Path(project_root).resolve() if project_root else Path.cwd()
    timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    return root / LOG_DIRNAME / f"{timestamp}.log"

def get_logger(component: str) -> logging.Logger:
    """
    Return a namespaced logger for the given component.
    """
    component = component.strip(".")
    name = f"{LOG_NAMESPACE}.{component}" if component else LOG_NAMESPACE
    return logging.getLogger(name)

class _DeferredFileHandler(logging.Handler):
    """
    File handler that creates its directory and file only when the first
    record arrives, so runs that never log leave nothing behind.
    """

    terminator = "\n"

    def __init__(self, path: Path, level: int) -> None:
        super().__init__(level)
        self.path = path
        self._stream: Optional[TextIO] = None

    def emit(self, record: logging.LogRecord) -> None:
        try:
            stream = self._ensure_stream()
            msg = self.format(record)
            stream.write(msg + self.terminator)
            stream.flush()
        except Exception:
            self.handleError(record)

    def _ensure_stream(self) -> TextIO:
        if self._stream is None:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._stream = self.path.open("a", encoding="utf-8")
        return self._stream

    def flush(self) -> None:
        if self._stream:
            self._stream.flush()

    def close(self) -> None:
        try:
            if self._stream:
                self._stream.close()
        finally:
            self._stream = None
        super().close()
