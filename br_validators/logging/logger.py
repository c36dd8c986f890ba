import logging
import sys


class Log:
    """Centralized logging with structured format.

    Raw document values are PII: log document types, error codes and
    lengths, never the value itself.
    """

    _logger: logging.Logger = logging.getLogger("br_validators")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Configure the logger with the specified level and stdout handler."""
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(name)s %(message)s")
            )
            cls._logger.addHandler(handler)

    @classmethod
    def rejected(cls, document_type: str, code: str, length: int) -> None:
        """Record a validation failure without the offending value."""
        cls._logger.debug(f"{document_type} rejected: {code} (length={length})")

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        """Log a debug message."""
        cls._logger.debug(message, extra=kwargs)
