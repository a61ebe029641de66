import logging
import sys
from typing import ClassVar


class Log:
    """Client-wide logging. Registered secrets are masked in every message."""

    _logger: logging.Logger = logging.getLogger("onfido")
    _secrets: ClassVar[set[str]] = set()

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Configure the logger with the specified level and stdout handler."""
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] onfido: %(message)s")
            )
            cls._logger.addHandler(handler)

    @classmethod
    def mask(cls, secret: str) -> None:
        """Never emit secret verbatim; it is replaced with '***'."""
        if secret:
            cls._secrets.add(secret)

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        cls._logger.info(cls._redact(message), extra=kwargs)

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        cls._logger.error(cls._redact(message), extra=kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        cls._logger.warning(cls._redact(message), extra=kwargs)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        cls._logger.debug(cls._redact(message), extra=kwargs)

    @classmethod
    def _redact(cls, message: str) -> str:
        for secret in cls._secrets:
            message = message.replace(secret, "***")
        return message
