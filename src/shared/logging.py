import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class LoggingManager:
    """Manager for logging setup and logger retrieval."""

    _handler = None

    @classmethod
    def setup_logging(cls, level: str = "INFO") -> None:
        """Setup structured logging for the application.

        Args:
            level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        """
        # Convert string level to logging level
        numeric_level = getattr(logging, level.upper(), logging.INFO)
        if not isinstance(numeric_level, int):
            numeric_level = logging.INFO

        # Create formatter
        formatter = logging.Formatter(
            fmt=LOG_FORMAT,
            datefmt=LOG_DATE_FORMAT
        )

        # Setup console handler
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        console_handler.setLevel(numeric_level)

        # Configure root logger, replacing the handler from a previous setup
        root_logger = logging.getLogger()
        root_logger.setLevel(numeric_level)
        if cls._handler is not None:
            root_logger.removeHandler(cls._handler)
        root_logger.addHandler(console_handler)
        cls._handler = console_handler

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """Get a logger instance.

        Args:
            name: Logger name, typically __name__

        Returns:
            Configured logger instance
        """
        return logging.getLogger(name)
