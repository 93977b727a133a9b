# Copyright 2025 Canonical Ltd.
# See LICENSE file for licensing details.

"""pytest fixtures for the unit test."""

# pylint: disable=too-few-public-methods, protected-access


import io
import random
import typing

import pytest
from unit.constants import RANDOM_SEED

from shell import PasswordShell
from shell_state import ShellConfig, ShellState


@pytest.fixture(name="seeded_random")
def seeded_random_fixture() -> random.Random:
    """Fixture providing a deterministic randomness source."""
    return random.Random(RANDOM_SEED)


@pytest.fixture(name="make_shell")
def make_shell_fixture(
    seeded_random: random.Random,
) -> typing.Callable[..., tuple[PasswordShell, io.StringIO]]:
    """Fixture building a shell reading the given text and writing to a buffer."""

    def _make_shell(text: str, **config: typing.Any) -> tuple[PasswordShell, io.StringIO]:
        state = ShellState(shell_config=ShellConfig(**config))
        stdout = io.StringIO()
        return PasswordShell(state, io.StringIO(text), stdout, rng=seeded_random), stdout

    return _make_shell
