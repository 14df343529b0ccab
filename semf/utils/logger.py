"""Logging configuration for the SEMF scoring service.

This module provides structured logging with different handlers for development,
test and production environments, including JSON formatting for log shipping.
"""

import logging
import logging.handlers
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

from pythonjsonlogger import jsonlogger


class SemfFormatter(jsonlogger.JsonFormatter):
    """JSON formatter for SEMF application logs."""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        """Add custom fields to log record.

        Args:
            log_record: The log record dictionary to modify
            record: The original logging record
            message_dict: Additional message data
        """
        super().add_fields(log_record, record, message_dict)

        log_record['timestamp'] = datetime.now(timezone.utc).isoformat()
        log_record['level'] = record.levelname
        log_record['logger'] = record.name
        log_record['module'] = record.module
        log_record['function'] = record.funcName
        log_record['line'] = record.lineno

        log_record['application'] = 'semf'
        log_record['service'] = 'scoring-api'

        if record.exc_info:
            log_record['exception'] = self.formatException(record.exc_info)


class ContextFilter(logging.Filter):
    """Filter to add contextual information to log records."""

    def __init__(self, context: Optional[Dict[str, Any]] = None):
        """Initialize context filter.

        Args:
            context: Additional context to add to all log records
        """
        super().__init__()
        self.context = context or {}

    def filter(self, record: logging.LogRecord) -> bool:
        """Add context to log record.

        Args:
            record: The log record to modify

        Returns:
            bool: Always True to allow all records
        """
        for key, value in self.context.items():
            setattr(record, key, value)

        return True


class RequestContextFilter(logging.Filter):
    """Filter to attach the current request id, when there is one."""

    def filter(self, record: logging.LogRecord) -> bool:
        # Imported lazily; the middleware module imports this one.
        from semf.api.middleware.request_id import get_request_id

        request_id = get_request_id()
        if request_id and not hasattr(record, 'request_id'):
            record.request_id = request_id

        return True


class LoggerConfig:
    """Logger configuration manager."""

    # Component loggers
    COMPONENTS = {
        'api': 'semf.api',
        'scoring': 'semf.scoring',
    }

    def __init__(
        self,
        environment: str = 'development',
        log_level: str = 'INFO',
        log_dir: Optional[str] = None
    ):
        """Initialize logger configuration.

        Args:
            environment: Environment name (development, test, staging, production)
            log_level: Default log level
            log_dir: Directory for rotating log files, disabled when None
        """
        self.environment = environment
        self.log_level = getattr(logging, log_level.upper())
        self.log_dir = Path(log_dir) if log_dir else None
        if self.log_dir:
            self.log_dir.mkdir(parents=True, exist_ok=True)

        self._configure_root_logger()
        self._configure_component_loggers()

    def _configure_root_logger(self) -> None:
        """Configure the root logger."""
        root_logger = logging.getLogger()
        root_logger.setLevel(self.log_level)

        root_logger.handlers.clear()

        if self.environment in ('production', 'staging'):
            self._add_production_handlers(root_logger)
        elif self.environment == 'test':
            self._add_test_handlers(root_logger)
        else:
            self._add_development_handlers(root_logger)

    def _add_production_handlers(self, logger: logging.Logger) -> None:
        """Add production-grade handlers.

        Args:
            logger: Logger to configure
        """
        json_formatter = SemfFormatter(
            fmt='%(timestamp)s %(level)s %(logger)s %(message)s'
        )

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.INFO)
        console_handler.setFormatter(json_formatter)
        console_handler.addFilter(RequestContextFilter())

        logger.addHandler(console_handler)

        if self.log_dir:
            app_handler = logging.handlers.RotatingFileHandler(
                filename=self.log_dir / "application.log",
                maxBytes=50 * 1024 * 1024,  # 50MB
                backupCount=10,
                encoding='utf-8'
            )
            app_handler.setLevel(logging.INFO)
            app_handler.setFormatter(json_formatter)
            app_handler.addFilter(RequestContextFilter())

            logger.addHandler(app_handler)

    def _add_development_handlers(self, logger: logging.Logger) -> None:
        """Add development-friendly handlers.

        Args:
            logger: Logger to configure
        """
        dev_formatter = logging.Formatter(
            fmt='%(asctime)s | %(levelname)-8s | %(name)-20s | %(funcName)-15s:%(lineno)-3d | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.DEBUG)
        console_handler.setFormatter(dev_formatter)

        logger.addHandler(console_handler)

        if self.log_dir:
            debug_handler = logging.FileHandler(
                filename=self.log_dir / "debug.log",
                mode='a',
                encoding='utf-8'
            )
            debug_handler.setLevel(logging.DEBUG)
            debug_handler.setFormatter(dev_formatter)

            logger.addHandler(debug_handler)

    def _add_test_handlers(self, logger: logging.Logger) -> None:
        """Add test environment handlers.

        Args:
            logger: Logger to configure
        """
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.WARNING)

        test_formatter = logging.Formatter(
            fmt='TEST | %(levelname)s | %(name)s | %(message)s'
        )
        console_handler.setFormatter(test_formatter)

        logger.addHandler(console_handler)

    def _configure_component_loggers(self) -> None:
        """Configure individual component loggers."""
        for component, logger_name in self.COMPONENTS.items():
            logger = logging.getLogger(logger_name)
            logger.setLevel(self.log_level)
            logger.filters.clear()
            logger.addFilter(ContextFilter({'component': component}))

    @classmethod
    def get_component_logger(cls, component: str) -> logging.Logger:
        """Get a component-specific logger.

        Args:
            component: Component name (api, scoring)

        Returns:
            logging.Logger: Component logger

        Raises:
            ValueError: If component is not recognized
        """
        if component not in cls.COMPONENTS:
            raise ValueError(f"Unknown component: {component}. Available: {list(cls.COMPONENTS.keys())}")

        return logging.getLogger(cls.COMPONENTS[component])


def setup_logging(
    environment: str = 'development',
    log_level: str = 'INFO',
    log_dir: Optional[str] = None
) -> LoggerConfig:
    """Setup application logging.

    Replaces the root logger handlers. The logger getters below never install
    handlers; this is the only entry point that does.

    Args:
        environment: Environment name
        log_level: Log level
        log_dir: Optional directory for log files

    Returns:
        LoggerConfig: Configured logger instance
    """
    return LoggerConfig(environment, log_level, log_dir)


def get_logger(name: str = __name__) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Logger name, defaults to caller's module name

    Returns:
        logging.Logger: Logger instance
    """
    return logging.getLogger(name)


def get_component_logger(component: str) -> logging.Logger:
    """Get a component-specific logger.

    Args:
        component: Component name

    Returns:
        logging.Logger: Component logger
    """
    return LoggerConfig.get_component_logger(component)


def get_api_logger() -> logging.Logger:
    """Get API component logger."""
    return get_component_logger('api')


def get_scoring_logger() -> logging.Logger:
    """Get scoring engine logger."""
    return get_component_logger('scoring')


def log_api_request(method: str, path: str, logger: Optional[logging.Logger] = None) -> None:
    """Log API request.

    Args:
        method: HTTP method
        path: Request path
        logger: Logger instance
    """
    if logger is None:
        logger = get_api_logger()

    logger.info(f"{method} {path}", extra={
        'http_method': method,
        'request_path': path,
        'event_type': 'api_request'
    })


def log_api_response(method: str, path: str, status_code: int, duration_ms: float, logger: Optional[logging.Logger] = None) -> None:
    """Log API response.

    Args:
        method: HTTP method
        path: Request path
        status_code: HTTP status code
        duration_ms: Request duration in milliseconds
        logger: Logger instance
    """
    if logger is None:
        logger = get_api_logger()

    level = logging.WARNING if status_code >= 400 else logging.INFO

    logger.log(level, f"{method} {path} - {status_code}", extra={
        'http_method': method,
        'request_path': path,
        'status_code': status_code,
        'duration_ms': duration_ms,
        'event_type': 'api_response'
    })


class PerformanceLogger:
    """Context manager for performance logging."""

    def __init__(self, operation: str, logger: Optional[logging.Logger] = None, extra: Optional[Dict[str, Any]] = None):
        """Initialize performance logger.

        Args:
            operation: Operation name
            logger: Logger instance
            extra: Additional fields to log
        """
        self.operation = operation
        self.logger = logger or get_logger()
        self.extra = extra or {}
        self.start_time: Optional[datetime] = None
        self.duration_ms: Optional[float] = None

    def __enter__(self) -> 'PerformanceLogger':
        """Start timing."""
        self.start_time = datetime.now(timezone.utc)
        self.logger.debug(f"Starting {self.operation}", extra={
            'operation': self.operation,
            'event_type': 'performance_start',
            **self.extra
        })
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """End timing and log result."""
        if self.start_time:
            duration = datetime.now(timezone.utc) - self.start_time
            self.duration_ms = duration.total_seconds() * 1000

            level = logging.WARNING if self.duration_ms > 1000 else logging.DEBUG

            self.logger.log(level, f"Completed {self.operation}", extra={
                'operation': self.operation,
                'duration_ms': self.duration_ms,
                'event_type': 'performance_end',
                'success': exc_type is None,
                **self.extra
            })
