# Copyright 2025 Canonical Ltd.
# See LICENSE file for licensing details.

"""This module defines utility functions to use by the password shell."""
import logging
import typing
from functools import wraps

from exceptions import AttemptsExhaustedError, InputExhaustedError, ShellConfigInvalidError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INPUT_EXHAUSTED = 1
EXIT_CONFIG_INVALID = 2
EXIT_ATTEMPTS_EXHAUSTED = 3

P = typing.ParamSpec("P")


def exit_code_on_error(method: typing.Callable[P, int]) -> typing.Callable[P, int]:
    """Create a decorator that turns the shell errors into process exit codes.

    Args:
        method: entry point to wrap.

    Returns:
        the function wrapper
    """

    @wraps(method)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> int:
        """Run the entry point and map its errors to an exit code.

        Args:
            args: positional arguments of the entry point.
            kwargs: keyword arguments of the entry point.

        Returns:
            The exit code of the entry point, or the one matching the error raised.
        """
        try:
            return method(*args, **kwargs)
        except ShellConfigInvalidError:
            logger.exception("Wrong Shell Configuration")
            return EXIT_CONFIG_INVALID
        except InputExhaustedError as exc:
            logger.error("Input ended early: %s", exc.msg)
            return EXIT_INPUT_EXHAUSTED
        except AttemptsExhaustedError as exc:
            logger.error(exc.msg)
            return EXIT_ATTEMPTS_EXHAUSTED

    return wrapper
