import logging
import logging.handlers
import os

from src.core.utils.config import Config

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL
}

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

class SensitiveDataFilter(logging.Filter):
    """Replaces the bot token with a placeholder in every log record"""

    def __init__(self, config: Config):
        super().__init__()
        self.config = config

    def filter(self, record):
        if hasattr(record, "msg") and isinstance(record.msg, str):
            token = self.config.get_token() if hasattr(self.config, "get_token") else None
            if token:
                record.msg = record.msg.replace(token, "[REDACTED_TOKEN]")
        return True

def setup_logging(config: Config):
    """Set up logging based on configuration

    Args:
        config: Config instance
    """
    log_level = LOG_LEVELS.get(
        str(config.get_setting("logging", "logging_level", "INFO")).upper(), logging.INFO
    )
    log_format = config.get_setting("logging", "log_format", DEFAULT_LOG_FORMAT)
    log_file_path = config.get_setting("logging", "log_file_path", "logs/message_store.log")
    max_log_size = config.get_setting("logging", "max_log_size", 5 * 1024 * 1024)
    backup_count = config.get_setting("logging", "backup_count", 3)

    formatter = logging.Formatter(log_format)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    log_dir = os.path.dirname(log_file_path)

    if log_dir and not os.path.exists(log_dir):
        os.makedirs(log_dir)

    file_handler = logging.handlers.RotatingFileHandler(
        log_file_path,
        maxBytes=max_log_size,
        backupCount=backup_count
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    logging.info(f"Log file created at {log_file_path}")

    # Console only gets critical errors, the file has everything else
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.CRITICAL)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    sensitive_filter = SensitiveDataFilter(config)
    for handler in root_logger.handlers:
        handler.addFilter(sensitive_filter)

    logging.debug("Logging system initialized")
