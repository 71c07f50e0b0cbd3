"""
Structured logging configuration for the Material Inventory Service.
Provides application logging plus a dedicated audit trail.
"""
import json
import logging
import logging.config
import os
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional


class JSONFormatter(logging.Formatter):
    """Custom JSON formatter for structured logging."""

    def format(self, record):
        # Create structured log entry
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno
        }

        # Add exception information if present
        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        # Add extra fields if present
        for field in ("category", "action", "target_id", "details"):
            if hasattr(record, field):
                log_entry[field] = getattr(record, field)

        return json.dumps(log_entry, default=str)


def build_logging_config(log_dir: str = "logs", level: str = "INFO") -> Dict[str, Any]:
    """Logging configuration for dictConfig, with files under ``log_dir``."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
            },
            "detailed": {
                "format": "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d: %(message)s"
            },
            "json": {
                "()": JSONFormatter
            }
        },
        "handlers": {
            "console": {
                "level": level,
                "class": "logging.StreamHandler",
                "formatter": "standard",
                "stream": sys.stdout
            },
            "file": {
                "level": "DEBUG",
                "class": "logging.handlers.RotatingFileHandler",
                "formatter": "detailed",
                "filename": os.path.join(log_dir, "application.log"),
                "maxBytes": 10485760,  # 10MB
                "backupCount": 5
            },
            "error_file": {
                "level": "ERROR",
                "class": "logging.handlers.RotatingFileHandler",
                "formatter": "detailed",
                "filename": os.path.join(log_dir, "error.log"),
                "maxBytes": 10485760,  # 10MB
                "backupCount": 5
            },
            "audit_file": {
                "level": "INFO",
                "class": "logging.handlers.RotatingFileHandler",
                "formatter": "json",
                "filename": os.path.join(log_dir, "audit.log"),
                "maxBytes": 10485760,  # 10MB
                "backupCount": 10
            }
        },
        "loggers": {
            "inventory": {
                "level": "DEBUG",
                "handlers": ["console", "file", "error_file"],
                "propagate": False
            },
            "inventory.audit": {
                "level": "INFO",
                "handlers": ["audit_file"],
                "propagate": False
            },
            "sqlalchemy.engine": {
                "level": "WARNING",
                "handlers": ["file"],
                "propagate": False
            }
        },
        "root": {
            "level": "INFO",
            "handlers": ["console"]
        }
    }


def setup_logging(log_dir: Optional[str] = None, level: Optional[str] = None) -> logging.Logger:
    """Initialize logging configuration."""
    log_dir = log_dir or os.environ.get("LOG_DIR", "logs")
    level = (level or os.environ.get("LOG_LEVEL", "INFO")).upper()
    os.makedirs(log_dir, exist_ok=True)

    logging.config.dictConfig(build_logging_config(log_dir, level))

    logger = logging.getLogger("inventory")
    logger.debug("Logging system initialized (dir=%s)", log_dir)
    return logger


class AuditLogger:
    """Specialized logger for audit events."""

    def __init__(self):
        self.logger = logging.getLogger("inventory.audit")

    def log_service_action(
        self,
        category: str,
        message: str,
        details: Dict[str, Any] = None
    ):
        """Mirror an audit log entry to the audit file."""
        extra = {
            "category": category,
            "action": message,
            "details": details or {}
        }
        self.logger.info(f"[{category}] {message}", extra=extra)


# Global instances
audit_logger = AuditLogger()


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the specified name."""
    return logging.getLogger(f"inventory.{name}")


# Initialize logging when module is imported
if not logging.getLogger("inventory").handlers:
    setup_logging()
