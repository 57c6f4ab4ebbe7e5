"""Structured logging and the per-run log stream."""

import logging
import queue
import sys
import threading
from pathlib import Path
from typing import Callable, Iterator, List, Optional

from .colors import Colors


class ColoredFormatter(logging.Formatter):
    """
    Formatter that adds ANSI colors to console output.

    File output uses a plain formatter so log files stay free of escape codes.
    """

    LEVEL_COLORS = {
        logging.DEBUG: Colors.OKCYAN,
        logging.INFO: Colors.OKGREEN,
        logging.WARNING: Colors.WARNING,
        logging.ERROR: Colors.FAIL,
        logging.CRITICAL: Colors.FAIL + Colors.BOLD,
    }

    def __init__(self, fmt: Optional[str] = None, use_colors: bool = True):
        """
        Initialize the formatter.

        Args:
            fmt: Format string for log messages
            use_colors: Whether to use ANSI colors
        """
        super().__init__(fmt)
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with colors if enabled."""
        message = super().format(record)

        if self.use_colors:
            color = self.LEVEL_COLORS.get(record.levelno, '')
            message = f"{color}{message}{Colors.ENDC}"

        return message


class Logger:
    """
    Main logger for localization extractor.

    Wraps the ``localization_extractor`` stdlib logger with a colored
    console handler and an optional file handler. Modules get child
    loggers through :meth:`get_logger`.
    """

    _instance: Optional['Logger'] = None
    _initialized: bool = False

    def __new__(cls) -> 'Logger':
        """Singleton pattern to ensure single logger instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """Initialize the logger (only once due to singleton)."""
        if Logger._initialized:
            return

        self._logger = logging.getLogger('localization_extractor')
        self._logger.setLevel(logging.DEBUG)
        self._logger.handlers = []

        self._console_handler = self._create_console_handler()
        self._logger.addHandler(self._console_handler)

        self._file_handler: Optional[logging.FileHandler] = None

        Logger._initialized = True

    def _create_console_handler(
        self,
        level: int = logging.INFO,
        use_colors: bool = True
    ) -> logging.StreamHandler:
        """
        Create a console handler with optional colors.

        Args:
            level: Minimum log level for console output
            use_colors: Whether to use ANSI colors

        Returns:
            Configured StreamHandler
        """
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(level)
        handler.setFormatter(ColoredFormatter(fmt='%(message)s', use_colors=use_colors))
        return handler

    def _create_file_handler(
        self,
        file_path: Path,
        level: int = logging.DEBUG
    ) -> logging.FileHandler:
        """
        Create a file handler for logging to file.

        Args:
            file_path: Path to log file
            level: Minimum log level for file output

        Returns:
            Configured FileHandler
        """
        file_path.parent.mkdir(parents=True, exist_ok=True)

        handler = logging.FileHandler(file_path, encoding='utf-8')
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(
            fmt='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        return handler

    def configure(
        self,
        verbose: bool = False,
        quiet: bool = False,
        log_file: Optional[Path] = None,
        use_colors: bool = True
    ) -> None:
        """
        Configure the logger settings.

        Args:
            verbose: Enable verbose (DEBUG) console output
            quiet: Enable quiet mode (WARNING+ only)
            log_file: Optional file path for logging
            use_colors: Whether to use colors in console
        """
        if quiet:
            console_level = logging.WARNING
        elif verbose:
            console_level = logging.DEBUG
        else:
            console_level = logging.INFO

        self._logger.removeHandler(self._console_handler)
        self._console_handler = self._create_console_handler(
            level=console_level,
            use_colors=use_colors
        )
        self._logger.addHandler(self._console_handler)

        if log_file:
            if self._file_handler:
                self._logger.removeHandler(self._file_handler)
                self._file_handler.close()
            self._file_handler = self._create_file_handler(log_file)
            self._logger.addHandler(self._file_handler)

    def get_logger(self, name: Optional[str] = None) -> logging.Logger:
        """
        Get a logger instance.

        Args:
            name: Optional module name for hierarchical logging

        Returns:
            Logger instance
        """
        if name:
            return logging.getLogger(f'localization_extractor.{name}')
        return self._logger

    def debug(self, msg: str, *args, **kwargs) -> None:
        """Log debug message."""
        self._logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs) -> None:
        """Log info message."""
        self._logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs) -> None:
        """Log warning message."""
        self._logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs) -> None:
        """Log error message."""
        self._logger.error(msg, *args, **kwargs)


_logger: Optional[Logger] = None


def get_logger() -> Logger:
    """Get the global logger instance."""
    global _logger
    if _logger is None:
        _logger = Logger()
    return _logger


def configure_logging(
    verbose: bool = False,
    quiet: bool = False,
    log_file: Optional[Path] = None,
    use_colors: bool = True
) -> None:
    """
    Configure the global logger.

    Args:
        verbose: Enable verbose (DEBUG) console output
        quiet: Enable quiet mode (WARNING+ only)
        log_file: Optional file path for logging
        use_colors: Whether to use colors in console
    """
    get_logger().configure(
        verbose=verbose,
        quiet=quiet,
        log_file=log_file,
        use_colors=use_colors
    )


def reset_logger() -> None:
    """Reset the global logger (mainly for testing)."""
    global _logger
    if _logger is not None:
        for handler in _logger._logger.handlers[:]:
            handler.close()
            _logger._logger.removeHandler(handler)
    _logger = None
    Logger._instance = None
    Logger._initialized = False


_CLOSED = object()


class LogStream:
    """
    Ordered, non-blocking message channel for one extraction run.

    The engine emits progress messages; a caller (CLI, UI, test) either
    iterates the stream until the run closes it, or drains whatever has
    arrived so far. ``emit`` never blocks the engine.

    Usage:
        stream = LogStream()
        future = engine.run_in_background(request, stream)
        for message in stream:
            print(message)
    """

    def __init__(
        self,
        callback: Optional[Callable[[str], None]] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Args:
            callback: Called with every message, for callback-style callers
            logger: Stdlib logger each message is forwarded to
        """
        self._queue: 'queue.SimpleQueue' = queue.SimpleQueue()
        self._history: List[str] = []
        self._lock = threading.Lock()
        self._closed = False
        self.callback = callback
        self.logger = logger

    def emit(self, message: str, level: int = logging.INFO) -> None:
        """Publish a message. Messages emitted after close are dropped."""
        with self._lock:
            if self._closed:
                return
            self._history.append(message)
            self._queue.put(message)

        if self.logger is not None:
            self.logger.log(level, message)
        if self.callback is not None:
            self.callback(message)

    def warning(self, message: str) -> None:
        self.emit(message, logging.WARNING)

    def error(self, message: str) -> None:
        self.emit(message, logging.ERROR)

    def debug(self, message: str) -> None:
        self.emit(message, logging.DEBUG)

    def close(self) -> None:
        """Mark the end of the run; iterators stop after the last message."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            self._queue.put(_CLOSED)

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def messages(self) -> List[str]:
        """Every message emitted so far, in order."""
        with self._lock:
            return list(self._history)

    def drain(self) -> List[str]:
        """Return queued messages without waiting for more."""
        drained = []
        while True:
            try:
                item = self._queue.get_nowait()
            except queue.Empty:
                break
            if item is _CLOSED:
                # keep the marker so a later iterator still terminates
                self._queue.put(_CLOSED)
                break
            drained.append(item)
        return drained

    def __iter__(self) -> Iterator[str]:
        while True:
            item = self._queue.get()
            if item is _CLOSED:
                self._queue.put(_CLOSED)
                return
            yield item
