import os
import logging
from typing import Optional

from notetime.config import get_data_dir, load_config

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

def get_log_level(value) -> int:
    """Map a level name such as "info" to its logging constant"""
    level = logging.getLevelName(str(value).upper())
    return level if isinstance(level, int) else logging.DEBUG

def get_log_file(config: dict) -> str:
    log_file = config.get('log_file') or 'notetime.log'
    if not os.path.isabs(log_file):
        log_file = os.path.join(get_data_dir(), log_file)
    return os.path.abspath(log_file)

def attach_file_handler(log_file: str, level: int) -> Optional[logging.FileHandler]:
    """Attach a file handler to the root logger unless one writes there already"""
    for handler in logging.root.handlers:
        if isinstance(handler, logging.FileHandler) and handler.baseFilename == log_file:
            return None

    handler = logging.FileHandler(log_file)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logging.root.addHandler(handler)
    logging.root.setLevel(level)
    logging.getLogger('notetime').info(f"Logging to {log_file} at {logging.getLevelName(level)}")
    return handler

def setup_logger(name, testing=False, config: Optional[dict] = None):
    """Get a named logger; in testing mode every logger writes to the shared log file"""
    logger = logging.getLogger(name)
    if testing:
        config = config if config is not None else load_config()
        attach_file_handler(get_log_file(config), get_log_level(config.get('log_level', 'DEBUG')))
    return logger
