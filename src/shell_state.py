# Copyright 2025 Canonical Ltd.
# See LICENSE file for licensing details.

"""State of the password shell."""

import dataclasses
import itertools
import os
import typing
from enum import Enum

from pydantic import BaseModel, NonNegativeInt, PositiveInt, ValidationError

from exceptions import ShellConfigInvalidError

ENV_PREFIX = "PASSWORD_STRENGTH_"


class LogLevelEnum(str, Enum):
    """Represent the log levels accepted in the configuration.

    Attributes:
        DEBUG: Debug level.
        INFO: Info level.
        WARNING: Warning level.
        ERROR: Error level.
        CRITICAL: Critical level.
    """

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class ShellConfig(BaseModel):
    """Represent the password shell configuration values.

    Attributes:
        max_input_length: Longest token accepted from the input.
        max_attempts: Number of weak passwords allowed before giving up, 0 for no limit.
        show_failed_rules: Whether to list the failed rules after a weak password.
        log_level: One of LogLevelEnum.
    """

    max_input_length: PositiveInt = 99
    max_attempts: NonNegativeInt = 0
    show_failed_rules: bool = False
    log_level: LogLevelEnum = LogLevelEnum.WARNING


@dataclasses.dataclass(frozen=True)
class ShellState:
    """State of the password shell.

    Attributes:
        shell_config: An instance of ShellConfig.
    """

    shell_config: ShellConfig

    @classmethod
    def from_environ(cls, environ: typing.Mapping[str, str] | None = None) -> "ShellState":
        """Initialize a new instance of the ShellState class from environment variables.

        Args:
            environ: The environment to read. Defaults to the process environment.

        Returns: An instance of the ShellState object.

        Raises:
            ShellConfigInvalidError: For any validation error in the configuration.
        """
        environ = os.environ if environ is None else environ
        mapped_config = {
            field: environ[f"{ENV_PREFIX}{field.upper()}"]
            for field in ShellConfig.model_fields
            if f"{ENV_PREFIX}{field.upper()}" in environ
        }
        if "log_level" in mapped_config:
            mapped_config["log_level"] = mapped_config["log_level"].upper()

        try:
            validated_shell_config = ShellConfig.model_validate(mapped_config)
        except ValidationError as exc:
            error_fields = set(
                itertools.chain.from_iterable(error["loc"] for error in exc.errors())
            )
            error_field_str = " ".join(f"{f}" for f in error_fields)
            raise ShellConfigInvalidError(f"invalid configuration: {error_field_str}") from exc

        return cls(shell_config=validated_shell_config)

    def attempts_limited(self) -> bool:
        """Check if the number of password attempts is capped.

        Returns: Whether a maximum number of attempts is configured.
        """
        return self.shell_config.max_attempts > 0
