import logging

from ..env import EnvironmentVariables
from ..exceptions import ConfigurationError


LOG_FORMAT = "%(message)s"

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


def setup_logger(log_level=None):
    """
    Configure the root logger for the command line.

    The level comes from the command line when given, otherwise from
    the ``PYTHON_LOG`` environment variable.

    Raises:
        ConfigurationError: when the level isn't one of ``LOG_LEVELS``.
    """
    if not log_level:
        log_level = EnvironmentVariables().PYTHON_LOG

    if log_level.upper() not in LOG_LEVELS:
        raise ConfigurationError(
            "Invalid log level {!r}, expected one of {}".format(
                log_level, ", ".join(LOG_LEVELS)
            )
        )

    root_logger = logging.getLogger()

    if not root_logger.handlers:
        logging.basicConfig(format=LOG_FORMAT)

    root_logger.setLevel(log_level.upper())
