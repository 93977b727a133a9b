#!/usr/bin/env python3

# Copyright 2025 Canonical Ltd.
# See LICENSE file for licensing details.

"""Interactive shell creating a default password and an optional strong password."""

import collections
import logging
import random
import sys
import typing

from tabulate import tabulate

from exceptions import AttemptsExhaustedError, InputExhaustedError, InputTooLongError
from password import generate_default_password
from policy import PolicyEnum, failed_rules, is_strong
from shell_decorator import EXIT_OK, exit_code_on_error
from shell_state import ShellState

logger = logging.getLogger(__name__)

USERNAME_PROMPT = "Enter username: "
CHANGE_PASSWORD_PROMPT = "Manually change password? (y/n): "
NEW_PASSWORD_PROMPT = "Enter new password: "

GENERATING_MESSAGE = "Generating a default password..."
STRONG_PASSWORD_MESSAGE = "Strong password!"
WEAK_PASSWORD_MESSAGE = "Your password is weak. Try again!"
UNCHANGED_PASSWORD_MESSAGE = "You chose not to change your password."

CONFIRM_CHOICES = ("y", "Y")


class TokenReader:
    """Read whitespace delimited tokens from a text stream.

    Tokens are read across lines; the rest of a line is kept for the next reads.
    """

    def __init__(self, stream: typing.TextIO, max_length: int):
        """Construct the reader.

        Args:
            stream: The text stream to read from.
            max_length: The longest token accepted.
        """
        self._stream = stream
        self._max_length = max_length
        self._pending: collections.deque[str] = collections.deque()

    def read_token(self) -> str:
        """Read the next token.

        Returns: The next token of the stream.

        Raises:
            InputExhaustedError: If the stream ends before a token is found.
            InputTooLongError: If the token is longer than the accepted length.
        """
        while not self._pending:
            line = self._stream.readline()
            if not line:
                raise InputExhaustedError("no more input available")
            self._pending.extend(line.split())

        token = self._pending.popleft()
        if len(token) > self._max_length:
            raise InputTooLongError(
                f"Input is too long (maximum {self._max_length} characters).", self._max_length
            )
        return token


class PasswordShell:
    """Dialogue creating the password of a user."""

    def __init__(
        self,
        state: ShellState,
        stdin: typing.TextIO,
        stdout: typing.TextIO,
        rng: random.Random | None = None,
    ):
        """Construct the shell.

        Args:
            state: The validated shell state.
            stdin: Stream the answers are read from.
            stdout: Stream the prompts and results are written to.
            rng: Randomness source for the default password, the system one if None.
        """
        self._state = state
        self._reader = TokenReader(stdin, state.shell_config.max_input_length)
        self._stdout = stdout
        self._rng = rng

    def run(self) -> int:
        """Run the whole dialogue.

        Returns: The exit code of the dialogue.
        """
        username = self._prompt_token(USERNAME_PROMPT)

        default_password = generate_default_password(username, rng=self._rng)
        self._write_line(GENERATING_MESSAGE)
        self._write_line(f"Generated default password: {default_password}")

        choice = self._prompt_token(CHANGE_PASSWORD_PROMPT)
        if choice not in CONFIRM_CHOICES:
            self._write_line(UNCHANGED_PASSWORD_MESSAGE)
            return EXIT_OK

        custom_password = self._prompt_for_strong_password(username)
        self._write_line(f"Successfully created password: {custom_password}")
        return EXIT_OK

    def _prompt_for_strong_password(self, username: str) -> str:
        """Prompt for a new password until a strong one is entered.

        Args:
            username: The username the password belongs to.

        Returns: The strong password entered.

        Raises:
            AttemptsExhaustedError: If the configured number of attempts is reached.
        """
        config = self._state.shell_config
        attempts = 0
        while True:
            candidate = self._prompt_token(NEW_PASSWORD_PROMPT)
            if is_strong(username, candidate):
                self._write_line(STRONG_PASSWORD_MESSAGE)
                return candidate

            self._write_line(WEAK_PASSWORD_MESSAGE)
            if config.show_failed_rules:
                self._write_failed_rules(username, candidate)

            attempts += 1
            logger.info("Weak password entered, attempt %d", attempts)
            if self._state.attempts_limited() and attempts >= config.max_attempts:
                raise AttemptsExhaustedError(f"no strong password after {attempts} attempts")

    def _prompt_token(self, prompt: str) -> str:
        """Print a prompt and read one token, asking again while the token is too long.

        Args:
            prompt: The prompt to print.

        Returns: The token read.
        """
        while True:
            self._stdout.write(prompt)
            self._stdout.flush()
            try:
                return self._reader.read_token()
            except InputTooLongError as exc:
                logger.info("Rejected a token longer than %d characters", exc.max_length)
                self._write_line(exc.msg)

    def _write_failed_rules(self, username: str, candidate: str) -> None:
        rows = [
            (rule.name, rule.description)
            for rule in failed_rules(PolicyEnum.STRONG, username, candidate)
        ]
        self._write_line(tabulate(rows, headers=["Rule", "Requirement"], tablefmt="grid"))

    def _write_line(self, text: str) -> None:
        self._stdout.write(f"{text}\n")


@exit_code_on_error
def main(
    stdin: typing.TextIO | None = None,
    stdout: typing.TextIO | None = None,
    environ: typing.Mapping[str, str] | None = None,
) -> int:
    """Run the password shell on the process streams.

    Args:
        stdin: Input stream, sys.stdin if None.
        stdout: Output stream, sys.stdout if None.
        environ: Environment holding the configuration, os.environ if None.

    Returns: The process exit code.
    """
    state = ShellState.from_environ(environ)
    logging.basicConfig(level=state.shell_config.log_level.value)
    shell = PasswordShell(state, stdin or sys.stdin, stdout or sys.stdout)
    return shell.run()


if __name__ == "__main__":  # pragma: nocover
    sys.exit(main())
