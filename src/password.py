# Copyright 2025 Canonical Ltd.
# See LICENSE file for licensing details.

"""Password helpers."""

import logging
import random
import secrets
import string

from policy import is_strong_default

logger = logging.getLogger(__name__)

ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits
MIN_GENERATED_LENGTH = 1
MAX_GENERATED_LENGTH = 15

# Created once per process, never reseeded.
_SYSTEM_RANDOM = secrets.SystemRandom()


def generate_default_password(identity: str, rng: random.Random | None = None) -> str:
    """Generate a password matching the default policy.

    A random length and random characters are drawn until the result is
    accepted by the default policy.

    Args:
        identity: The username the password is generated for.
        rng: The randomness source. Defaults to the process wide system source.

    Return:
        The generated password.
    """
    rng = rng or _SYSTEM_RANDOM
    rejected = 0
    while True:
        length = rng.randint(MIN_GENERATED_LENGTH, MAX_GENERATED_LENGTH)
        password = "".join(rng.choice(ALPHABET) for _ in range(length))
        if is_strong_default(identity, password):
            break
        rejected += 1

    logger.debug("Default password generated after %d rejected draws", rejected)
    return password
