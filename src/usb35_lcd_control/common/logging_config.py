# SPDX-License-Identifier: Apache-2.0
# Copyright © 2025 Rejeb Ben Rejeb

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

import colorlog

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'


class LoggerConfig:
    """Centralised logger configuration for the project"""

    SERVICE_LOG_FILE = os.path.expanduser('~/.local/share/usb35-lcd-control/logs/usb35-lcd-control.log')
    LOGGER_NAME = 'usb35.device_controller'

    _logger = None

    @staticmethod
    def is_development_mode():
        """
        Detect if running in development mode by checking various indicators.

        Returns:
            bool: True if in development mode
        """
        # Check if running from source directory
        current_file = Path(__file__).resolve()
        if 'src' in current_file.parts:
            return True

        # Check if installed in system directories
        system_paths = ['/usr', '/opt', '/var']
        if any(str(current_file).startswith(path) for path in system_paths):
            return False

        return os.getenv('USB35_DEV_MODE', '').lower() in ('1', 'true', 'yes')

    @staticmethod
    def _create_console_handler():
        handler = colorlog.StreamHandler(sys.stdout)
        handler.setFormatter(colorlog.ColoredFormatter(
            '%(log_color)s' + LOG_FORMAT,
            log_colors={
                'DEBUG': 'cyan',
                'INFO': 'green',
                'WARNING': 'yellow',
                'ERROR': 'red',
                'CRITICAL': 'red,bg_white',
            }
        ))
        return handler

    @staticmethod
    def _create_file_handler(log_file_path):
        """Create a rotating file handler, console if the file is not writable"""
        log_file = Path(log_file_path)

        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            handler = RotatingFileHandler(
                log_file,
                maxBytes=10 * 1024 * 1024,  # 10MB
                backupCount=5
            )
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            return handler
        except (PermissionError, OSError):
            return LoggerConfig._create_console_handler()

    @classmethod
    def setup_service_logger(cls):
        if cls._logger is not None:
            return cls._logger

        logger = logging.getLogger(cls.LOGGER_NAME)
        logger.handlers.clear()

        log_level = os.getenv('LOG_LEVEL', 'INFO').upper()
        logger.setLevel(getattr(logging, log_level, logging.INFO))

        if cls.is_development_mode():
            handler = cls._create_console_handler()
            logger.addHandler(handler)
            logger.info("Device controller logger configured for development mode (console)")
        else:
            handler = cls._create_file_handler(cls.SERVICE_LOG_FILE)
            logger.addHandler(handler)
            logger.info(f"Device controller logger configured for production mode (file: {cls.SERVICE_LOG_FILE})")

        logger.propagate = False  # Prevent duplicate logs

        cls._logger = logger
        return logger


def get_service_logger():
    """Get the device controller logger instance"""
    return LoggerConfig.setup_service_logger()
