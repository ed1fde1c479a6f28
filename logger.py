# snowflake_sfmc_sync/logger.py

import logging
from config import APP_CONFIG

LOGGER_NAME = 'snowflake_sfmc_sync'


def configure_logger(app_config=None):
    app_config = app_config or APP_CONFIG
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, app_config['log_level'].upper(), logging.INFO))

    # Clear any existing handlers
    if logger.handlers:
        logger.handlers.clear()

    formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')

    # Serverless filesystems are usually read-only, so the file handler is opt-in
    if app_config.get('log_file'):
        file_handler = logging.FileHandler(app_config['log_file'])
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    return logger
