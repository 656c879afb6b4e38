import logging
import os


def setup_logging(log_level=logging.INFO, log_file=None):
    """
    Set up logging for the application.

    Args:
        log_level: The logging level, as an int or a level name (default: INFO)
        log_file: Path to log file (optional, defaults to console only)
    """
    if isinstance(log_level, str):
        log_level = logging.getLevelName(log_level.upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Replace only the handlers installed by an earlier call
    for handler in [h for h in root_logger.handlers if getattr(h, "_app_handler", False)]:
        root_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler._app_handler = True
    root_logger.addHandler(console_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)

        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        file_handler._app_handler = True
        root_logger.addHandler(file_handler)

    return root_logger

def get_logger(name):
    """Get a logger instance with the specified name."""
    return logging.getLogger(name)

def _with_data(message, data):
    if data:
        return f"{message} | Data: {data}"
    return message

def log_info(logger, message, **kwargs):
    """Log an info message with optional structured data."""
    logger.info(_with_data(message, kwargs))

def log_warning(logger, message, **kwargs):
    """Log a warning message with optional structured data."""
    logger.warning(_with_data(message, kwargs))

def log_error(logger, message, exc_info=False, **kwargs):
    """Log an error message with optional structured data."""
    logger.error(_with_data(message, kwargs), exc_info=exc_info)
