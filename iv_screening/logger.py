"""
Logging for IV Screening

All package modules log through child loggers of ``iv_screening``; only the
package logger owns handlers. The ``verbose`` flag of ``compute_iv`` and the
CLI decides which messages reach the console and never changes results.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Dict, TYPE_CHECKING
from datetime import datetime

if TYPE_CHECKING:
    from .config import IVScreeningConfig


PACKAGE_LOGGER = 'iv_screening'

CONSOLE_FORMAT = '%(levelname)s: %(message)s'
FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class IVLogger:
    """
    Registry of configured loggers.

    Loggers named ``iv_screening.<module>`` carry no handlers and pass their
    records up to the package logger. Any other name gets its own console
    and file handlers.

    Example:
        >>> from iv_screening.logger import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("Calling NumericBinner for variable: duration")
    """

    _loggers: Dict[str, logging.Logger] = {}

    @staticmethod
    def setup_logger(
        name: str = PACKAGE_LOGGER,
        level: int = logging.INFO,
        log_file: Optional[str] = None,
        verbose: bool = True,
        log_format: Optional[str] = None
    ) -> logging.Logger:
        """
        Setup or retrieve a configured logger.

        Args:
            name: Logger name (typically __name__ of calling module)
            level: Logging level
            log_file: Optional path to log file for persistent logging
            verbose: If False, suppress console output (only log to file)
            log_format: Optional format string for both handlers

        Returns:
            Configured logger instance
        """
        if name in IVLogger._loggers:
            return IVLogger._loggers[name]

        logger = logging.getLogger(name)
        logger.handlers = []

        if name.startswith(PACKAGE_LOGGER + '.'):
            if PACKAGE_LOGGER not in IVLogger._loggers:
                IVLogger.setup_logger(PACKAGE_LOGGER, level, log_file, verbose, log_format)
            logger.propagate = True
        else:
            logger.setLevel(level)
            logger.propagate = False
            IVLogger._attach_handlers(logger, level, log_file, verbose, log_format)

        IVLogger._loggers[name] = logger
        return logger

    @staticmethod
    def _attach_handlers(
        logger: logging.Logger,
        level: int,
        log_file: Optional[str],
        verbose: bool,
        log_format: Optional[str]
    ) -> None:
        if verbose:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(level)
            console_handler.setFormatter(logging.Formatter(log_format or CONSOLE_FORMAT))
            logger.addHandler(console_handler)

        if log_file:
            Path(log_file).parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
            file_handler.setLevel(level)
            file_handler.setFormatter(logging.Formatter(log_format or FILE_FORMAT))
            logger.addHandler(file_handler)

            # Session banner goes to the file only
            file_handler.handle(logger.makeRecord(
                logger.name, logging.INFO, __file__, 0,
                f"Logging session started: {datetime.now().isoformat()}", None, None
            ))

    @staticmethod
    def reset_loggers() -> None:
        """Close all handlers and forget every configured logger."""
        for logger in IVLogger._loggers.values():
            for handler in logger.handlers:
                handler.close()
            logger.handlers = []
        IVLogger._loggers = {}


def get_logger(
    name: str = PACKAGE_LOGGER,
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    verbose: bool = True
) -> logging.Logger:
    """
    Convenience function to get a configured logger.

    Example:
        >>> logger = get_logger(__name__, log_file='output/iv.log')
        >>> logger.info("Screening started")
    """
    return IVLogger.setup_logger(name, level, log_file, verbose)


def configure_logging_from_config(config: 'IVScreeningConfig') -> logging.Logger:
    """
    Configure the package logger from an IVScreeningConfig.

    Level and log file come from ``config.logging``, console output from
    ``config.verbose``.
    """
    return get_logger(
        name=PACKAGE_LOGGER,
        level=getattr(logging, config.logging.level.upper(), logging.INFO),
        log_file=config.logging.log_file,
        verbose=config.verbose
    )
