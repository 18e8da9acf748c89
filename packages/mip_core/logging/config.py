import logging
import logging.config
import os


# Relative to the working directory unless LOG_DIR is set
LOG_DIR = os.path.abspath(os.environ.get("LOG_DIR", "logs"))


def build_logging_config(log_dir: str = LOG_DIR) -> dict:
    """Return the dictConfig payload for the given log directory."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": "[%(asctime)s] [%(levelname)s] [%(name)s] [%(filename)s:%(lineno)d] %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "level": "INFO",
                "class": "logging.StreamHandler",
                "formatter": "standard",
            },
            "file_app": {
                "level": "DEBUG",
                "class": "logging.handlers.TimedRotatingFileHandler",
                "filename": os.path.join(log_dir, "mip.log"),
                "when": "midnight",
                "interval": 1,
                "backupCount": 30,
                "encoding": "utf-8",
                "formatter": "standard",
            },
            "file_error": {
                "level": "ERROR",
                "class": "logging.handlers.TimedRotatingFileHandler",
                "filename": os.path.join(log_dir, "mip.error.log"),
                "when": "midnight",
                "interval": 1,
                "backupCount": 30,
                "encoding": "utf-8",
                "formatter": "standard",
            },
        },
        "root": {
            "handlers": ["console", "file_app", "file_error"],
            "level": "DEBUG",
        },
    }


_configured = False


def setup_logging(log_dir: str = LOG_DIR):
    """Apply default logging configuration."""
    global _configured
    os.makedirs(log_dir, exist_ok=True)
    logging.config.dictConfig(build_logging_config(log_dir))
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with standard configuration."""
    # Ensure configuration is applied at least once
    if not _configured:
        setup_logging()

    return logging.getLogger(name)
