"""
Resolver configuration.

Profile defaults and logging settings, read from the environment and an
optional .env file.
"""

import os
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Defaults from the working directory's .env, never overriding the real environment
load_dotenv()


def load_environment(env_file: Optional[str] = None):
    """
    Load environment variables from a .env file, overriding current values.

    Args:
        env_file: Path to the file; None reloads the default .env
    """
    if not env_file:
        load_dotenv(override=True)
        return

    env_path = Path(env_file)
    if not env_path.exists():
        logger.warning(f"Environment file not found: {env_file}")
        return

    load_dotenv(env_path, override=True)
    logger.info(f"Loaded environment from: {env_file}")


class ProfileDefaults:
    """
    Defaults applied to profiles built outside a settings store.

    Values are read from the environment on every call, so an env file
    loaded after import still takes effect.
    """

    @classmethod
    def port(cls) -> int:
        """Remote port used when none is given (DAEMON_PORT)"""
        return int(os.getenv("DAEMON_PORT", "9091"))

    @classmethod
    def timeout_seconds(cls) -> int:
        """Connection timeout in seconds (DAEMON_TIMEOUT_SECONDS)"""
        return int(os.getenv("DAEMON_TIMEOUT_SECONDS", "8"))

    @classmethod
    def os_name(cls) -> str:
        """Operating system name of the daemon host (DAEMON_OS)"""
        return os.getenv("DAEMON_OS", "Linux")

    @classmethod
    def current_network(cls) -> Optional[str]:
        """Get the network the host is attached to, as reported by CURRENT_NETWORK"""
        network = os.getenv("CURRENT_NETWORK", "")
        return network or None


class LogConfig:
    """Logging settings (LOG_LEVEL, LOG_FILE)"""

    LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"
    LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

    LOG_FILE = os.getenv("LOG_FILE")
    LOG_FILE_MAX_BYTES = 1048576  # 1MB
    LOG_FILE_BACKUP_COUNT = 3


def setup_logging(verbose: bool = False, log_file: Optional[str] = None):
    """
    Configure logging for the resolver.

    Verbose mode logs the package at DEBUG, which includes the local network
    decision made for every resolved profile.

    Args:
        verbose: Log daemon_profiles at DEBUG with file/line details
        log_file: Optional rotating log file (defaults to LOG_FILE)
    """
    log_level = getattr(logging, LogConfig.LOG_LEVEL, logging.WARNING)
    log_format = LogConfig.DETAILED_FORMAT if verbose else LogConfig.LOG_FORMAT
    logging.basicConfig(level=log_level, format=log_format, datefmt=LogConfig.LOG_DATE_FORMAT)

    package_level = logging.DEBUG if verbose else log_level
    logging.getLogger("daemon_profiles").setLevel(package_level)
    # Adapter sessions would otherwise log every connection
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    file_path = log_file or LogConfig.LOG_FILE
    if file_path:
        file_handler = RotatingFileHandler(
            file_path,
            maxBytes=LogConfig.LOG_FILE_MAX_BYTES,
            backupCount=LogConfig.LOG_FILE_BACKUP_COUNT
        )
        file_handler.setLevel(min(log_level, package_level))
        file_handler.setFormatter(logging.Formatter(log_format, LogConfig.LOG_DATE_FORMAT))
        logging.getLogger().addHandler(file_handler)
        logger.info(f"Logging to file: {file_path}")


__all__ = [
    'ProfileDefaults',
    'LogConfig',
    'load_environment',
    'setup_logging',
]
