import logging
import sys
from typing import Optional

from chain_ping.const import LOG_DATE_FORMAT, LOG_FORMAT
from .config import Config


class LoggingManager:
    """Manager for logging setup and logger retrieval."""

    _handler: Optional[logging.Handler] = None

    @classmethod
    def setup_logging(cls, level: str = "INFO", config: Optional[Config] = None) -> None:
        """Setup structured logging for the application.

        Log records go to stderr so that machine-readable output on stdout
        is never interleaved with them.

        Args:
            level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            config: Settings holding the library log levels. Loaded when omitted.
        """
        # Convert string level to logging level
        numeric_level = getattr(logging, level.upper(), logging.INFO)

        # Create formatter
        formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

        # Setup console handler
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        console_handler.setLevel(numeric_level)

        # Configure root logger, replacing a handler from a previous call
        root_logger = logging.getLogger()
        root_logger.setLevel(numeric_level)
        if cls._handler is not None:
            root_logger.removeHandler(cls._handler)
        root_logger.addHandler(console_handler)
        cls._handler = console_handler

        # Set levels for noisy libraries
        config = config or Config()
        for logger_name, library_level in config.library_log_levels.items():
            logging.getLogger(logger_name).setLevel(getattr(logging, library_level.upper(), logging.WARNING))

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """Get a logger instance.

        Args:
            name: Logger name, typically __name__

        Returns:
            Configured logger instance
        """
        return logging.getLogger(name)
