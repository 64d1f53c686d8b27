"""This provides logging functionality for geogrid.

It is modeled on the default `logging approach that comes with Python <https://docs.python.org/library/logging.html>`_.

Every module gets its own logger, named after the module, beneath a shared
root logger (``GEOGRID``). Nothing is emitted unless the application
configures a handler, for example through :func:`log_to_stderr`.
"""

import inspect
import logging
from functools import wraps
from logging import DEBUG, INFO

__all__ = [
    "DEBUG",
    "DEFAULT_LEVEL",
    "INFO",
    "LOGGER_NAME",
    "create_module_logger",
    "function_logger",
    "get_module_logger",
    "get_rootlogger",
    "log_to_stderr",
    "method_logger",
]
LOGGER_NAME = "GEOGRID"
DEFAULT_LEVEL = DEBUG


def create_module_logger(name: str | None = None):
    """Helper function for creating a module logger.

    Args:
        name (str): The name to be given to the logger. If the name is None, the name defaults to the name of the module.

    """
    if name is None:
        frm = inspect.stack()[1]
        mod = inspect.getmodule(frm[0])
        name = mod.__name__
    logger = logging.getLogger(f"{LOGGER_NAME}.{name}")

    _module_loggers[name] = logger
    return logger


def get_module_logger(name: str):
    """Helper function for getting the module logger.

    Args:
        name (str): The name of the module in which the method being decorated is located

    """
    try:
        logger = _module_loggers[name]
    except KeyError:
        logger = create_module_logger(name)

    return logger


_rootlogger = None
_module_loggers = {}
_logger = get_module_logger(__name__)


def method_logger(name: str):
    """Decorator for adding logging to a method.

    Args:
        name (str): The name of the module in which the method being decorated is located

    """
    logger = get_module_logger(name)
    classname = inspect.getouterframes(inspect.currentframe())[1][3]

    def real_decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            # hack, because log is applied to methods, we can exclude
            # the first arg
            logger.debug(
                f"calling {classname}.{func.__name__} with {args[1::]} and {kwargs}"
            )
            return func(*args, **kwargs)

        return wrapper

    return real_decorator


def function_logger(name):
    """Decorator for adding logging to a Function.

    Args:
        name (str): The name of the module in which the function being decorated is located

    """
    logger = get_module_logger(name)

    def real_decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            logger.debug(f"calling {func.__name__} with {args} and {kwargs}")
            return func(*args, **kwargs)

        return wrapper

    return real_decorator


def get_rootlogger():
    """Returns root logger used by geogrid.

    Returns:
        the root logger of geogrid

    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.propagate = False
    return logger


def log_to_stderr(level: int | None = None, pass_root_logger_level: bool = False):
    """Set up geogrid logging to stderr.

    Args:
        level: The minimum level of the messages that will be logged
        pass_root_logger_level: bool, optional. Default False
            if True, all module loggers will be set to the same logging level as the root logger.

    Returns:
        the root logger of geogrid

    """
    global _rootlogger

    if not level:
        level = DEFAULT_LEVEL

    logger = get_rootlogger()

    # avoid creating multiple handlers when this method is called twice
    logger.setLevel(level)
    if pass_root_logger_level:
        for _, mod_logger in _module_loggers.items():
            mod_logger.setLevel(level)

    if not logger.handlers:
        formatter = logging.Formatter(
            "[%(levelname)s] [%(name)s] %(message)s",
        )
        handler = logging.StreamHandler()
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        _rootlogger = logger

    _logger.info("geogrid logging to stderr enabled")

    return logger
