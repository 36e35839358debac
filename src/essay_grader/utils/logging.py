"""
Logging Configuration

Centralized logging setup with configurable levels, file rotation,
and structured logging for the essay grader.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional
import json
from datetime import datetime, timezone

from ..core.config import get_config


class JSONFormatter(logging.Formatter):
    """Custom JSON formatter for structured logging."""
    
    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_entry = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno
        }
        
        # Add extra fields if present
        if hasattr(record, 'content_id'):
            log_entry['content_id'] = record.content_id
        if hasattr(record, 'state_id'):
            log_entry['state_id'] = record.state_id
            
        if record.exc_info:
            log_entry['exception'] = self.formatException(record.exc_info)
        
        return json.dumps(log_entry)


class SessionLoggerAdapter(logging.LoggerAdapter):
    """Logger adapter that adds grading session context to log records."""
    
    def process(self, msg: str, kwargs: dict) -> tuple:
        """Add extra context to log record."""
        extra = kwargs.get('extra', {})
        extra.update(self.extra)
        kwargs['extra'] = extra
        return msg, kwargs


def setup_logging(config=None, enable_json: bool = False) -> None:
    """
    Set up logging configuration for the application.
    
    Args:
        config: Optional configuration object (uses default if None)
        enable_json: Enable JSON formatted logging
    """
    if config is None:
        config = get_config()
    
    log_file = Path(config.logging.file)
    log_file.parent.mkdir(parents=True, exist_ok=True)
    
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, config.logging.level.upper()))
    root_logger.handlers.clear()
    
    # Console handler goes to stderr so command output stays parseable
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(getattr(logging, config.logging.console_level.upper()))
    
    file_handler = logging.handlers.RotatingFileHandler(
        filename=log_file,
        maxBytes=_parse_size(config.logging.max_size),
        backupCount=config.logging.backup_count,
        encoding='utf-8'
    )
    file_handler.setLevel(getattr(logging, config.logging.level.upper()))
    
    if enable_json:
        json_formatter = JSONFormatter()
        console_handler.setFormatter(json_formatter)
        file_handler.setFormatter(json_formatter)
    else:
        console_handler.setFormatter(logging.Formatter(config.logging.format))
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(module)s:%(funcName)s:%(lineno)d - %(message)s'
        ))
    
    root_logger.addHandler(console_handler)
    root_logger.addHandler(file_handler)
    
    _configure_third_party_loggers()
    
    logger = logging.getLogger(__name__)
    logger.info(f"Logging configured - Console: {config.logging.console_level}, File: {config.logging.level}, Path: {log_file}")


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the given name.
    
    Args:
        name: Logger name (typically __name__)
        
    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)


def get_session_logger(content_id: str, state_id: Optional[str] = None) -> SessionLoggerAdapter:
    """
    Get a logger adapter with grading session context.
    
    Args:
        content_id: Identifier of the essay content being answered
        state_id: Optional identifier of the persisted answer snapshot
        
    Returns:
        Logger adapter with session context
    """
    logger = get_logger('essay_grader.session')
    extra = {'content_id': content_id}
    
    if state_id:
        extra['state_id'] = state_id
    
    return SessionLoggerAdapter(logger, extra)


def _parse_size(size_str: str) -> int:
    """
    Parse size string (e.g., '10MB') to bytes.
    
    Args:
        size_str: Size string like '10MB', '1GB', etc.
        
    Returns:
        Size in bytes
    """
    size_str = size_str.upper().strip()
    
    # Longest suffix first so 'MB' is not read as 'B'
    multipliers = {
        'GB': 1024 ** 3,
        'MB': 1024 ** 2,
        'KB': 1024,
        'B': 1,
    }
    
    for unit, multiplier in multipliers.items():
        if size_str.endswith(unit):
            number_str = size_str[:-len(unit)].strip()
            try:
                return int(float(number_str) * multiplier)
            except ValueError:
                break
    
    # Default to 10MB if parsing fails
    return 10 * 1024 * 1024


def _configure_third_party_loggers() -> None:
    """Configure third-party library loggers."""
    logging.getLogger('fuzzywuzzy').setLevel(logging.ERROR)


class PerformanceTimer:
    """Context manager for timing operations."""
    
    def __init__(self, operation: str, logger: logging.Logger = None):
        self.operation = operation
        self.logger = logger or get_logger(__name__)
        self.start_time = None
        self.duration = None
    
    def __enter__(self):
        self.start_time = datetime.now()
        self.logger.debug(f"Started {self.operation}")
        return self
    
    def __exit__(self, exc_type, exc_val, exc_tb):
        self.duration = (datetime.now() - self.start_time).total_seconds()
        
        if exc_type is None:
            self.logger.debug(f"Completed {self.operation} in {self.duration:.3f}s")
        else:
            self.logger.error(f"Failed {self.operation} after {self.duration:.3f}s: {exc_val}")
