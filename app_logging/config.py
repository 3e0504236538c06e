"""
Unified logging configuration using structlog.

This module provides a single source of truth for logging configuration
across the Django web app, Celery workers and management commands.

All logs go to one unified file (django.jsonl) with structured JSON output
and colored console output.
"""

# Import stdlib logging explicitly to avoid shadowing issues
import logging as stdlib_logging
import structlog
from pathlib import Path
from logging.handlers import TimedRotatingFileHandler

# Ensure we use stdlib logging, not our local module
logging = stdlib_logging


class DjangoTimedRotatingFileHandler(TimedRotatingFileHandler):
    """
    Custom TimedRotatingFileHandler that accepts suffix in constructor.

    This allows Django's LOGGING configuration to set the suffix directly.
    """
    def __init__(self, filename, when='h', interval=1, backupCount=0, encoding=None,
                 delay=False, utc=False, atTime=None, suffix=None):
        super().__init__(filename, when, interval, backupCount, encoding, delay, utc, atTime)
        if suffix is not None:
            self.suffix = suffix


def _shared_processors():
    """Processors applied to both structlog and foreign (stdlib) log records."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO
            ]
        ),
    ]


def setup_logging(base_dir=None):
    """
    Configure structlog and return Django LOGGING dict.

    This function is idempotent - safe to call multiple times.
    It configures structlog processors and returns a LOGGING dict
    that Django will use to set up handlers.

    Args:
        base_dir: Base directory for log files (defaults to current working directory)

    Returns:
        dict: Django LOGGING configuration dictionary
    """
    if base_dir is None:
        base_dir = Path.cwd()
    elif isinstance(base_dir, str):
        base_dir = Path(base_dir)

    logs_dir = base_dir / "logs"
    logs_dir.mkdir(exist_ok=True)

    # Only configure structlog once, but always return the full LOGGING dict
    if not structlog.is_configured():
        structlog.configure(
            processors=_shared_processors() + [
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            context_class=dict,
            cache_logger_on_first_use=True,
        )

    return {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'console': {
                '()': structlog.stdlib.ProcessorFormatter,
                'processor': structlog.dev.ConsoleRenderer(colors=True),
                'foreign_pre_chain': _shared_processors(),
            },
            'json': {
                '()': structlog.stdlib.ProcessorFormatter,
                'processor': structlog.processors.JSONRenderer(),
                'foreign_pre_chain': _shared_processors(),
            },
        },
        'handlers': {
            'console': {
                'class': 'logging.StreamHandler',
                'formatter': 'console',
                'level': 'INFO',
            },
            'file': {
                '()': 'app_logging.config.DjangoTimedRotatingFileHandler',
                'filename': str(logs_dir / 'django.jsonl'),
                'when': 'midnight',
                'interval': 1,
                'backupCount': 30,
                'encoding': 'utf-8',
                'utc': True,
                'suffix': '%Y-%m-%d.jsonl',
                'formatter': 'json',
                'level': 'DEBUG',
            },
        },
        'root': {
            'handlers': ['console', 'file'],
            'level': 'DEBUG',
        },
        'loggers': {
            'django': {
                'handlers': ['console', 'file'],
                'level': 'INFO',
                'propagate': False,
            },
            'django.request': {
                'handlers': ['console', 'file'],
                'level': 'WARNING',
                'propagate': False,
            },
            'django.server': {
                'handlers': ['console', 'file'],
                'level': 'INFO',
                'propagate': False,
            },
            'apps.inquiries': {
                'handlers': ['console', 'file'],
                'level': 'DEBUG',
                'propagate': False,
            },
            'celery': {
                'handlers': ['console', 'file'],
                'level': 'INFO',
                'propagate': False,
            },
            'httpx': {
                'handlers': ['console', 'file'],
                'level': 'WARNING',
                'propagate': False,
            },
        },
    }
