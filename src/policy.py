# Copyright 2025 Canonical Ltd.
# See LICENSE file for licensing details.

"""Password policies built on top of the character predicates."""

import dataclasses
import typing
from enum import Enum

from predicates import (
    contains_substring_ci,
    has_consecutive_letters,
    has_digit,
    has_lower,
    has_maximum_length,
    has_minimum_length,
    has_upper,
    is_alphanumeric_only,
)

STRONG_MIN_LENGTH = 8
STRONG_LETTER_RUN = 4
DEFAULT_MAX_LENGTH = 15


class PolicyEnum(str, Enum):
    """Represent the password policies supported.

    Attributes:
        STRONG: Policy required for a password chosen by the user.
        DEFAULT: Policy satisfied by a generated default password.
    """

    STRONG = "strong"
    DEFAULT = "default"


@dataclasses.dataclass(frozen=True)
class Rule:
    """A single named requirement of a policy.

    Attributes:
        name: Short identifier of the rule.
        description: Human readable explanation of the requirement.
        check: Predicate over (identity, candidate), True when satisfied.
    """

    name: str
    description: str
    check: typing.Callable[[str, str], bool]


_MIXED_CHARACTERS_RULES = (
    Rule("uppercase", "At least one uppercase letter", lambda _, pwd: has_upper(pwd)),
    Rule("lowercase", "At least one lowercase letter", lambda _, pwd: has_lower(pwd)),
    Rule("digit", "At least one digit", lambda _, pwd: has_digit(pwd)),
    Rule("alphanumeric", "Only letters and digits", lambda _, pwd: is_alphanumeric_only(pwd)),
)

POLICY_RULES: dict[PolicyEnum, tuple[Rule, ...]] = {
    PolicyEnum.STRONG: (
        Rule(
            "minimum-length",
            f"At least {STRONG_MIN_LENGTH} characters",
            lambda _, pwd: has_minimum_length(pwd, STRONG_MIN_LENGTH),
        ),
        *_MIXED_CHARACTERS_RULES,
        Rule(
            "letter-run",
            f"At least {STRONG_LETTER_RUN} consecutive letters",
            lambda _, pwd: has_consecutive_letters(pwd, STRONG_LETTER_RUN),
        ),
        Rule(
            "no-username",
            "Does not contain the username",
            lambda username, pwd: not contains_substring_ci(pwd, username),
        ),
    ),
    # The username is accepted but none of these rules look at it.
    PolicyEnum.DEFAULT: (
        Rule(
            "maximum-length",
            f"At most {DEFAULT_MAX_LENGTH} characters",
            lambda _, pwd: has_maximum_length(pwd, DEFAULT_MAX_LENGTH),
        ),
        *_MIXED_CHARACTERS_RULES,
    ),
}


def evaluate(policy: PolicyEnum, identity: str, candidate: str) -> bool:
    """Decide whether a candidate password satisfies a policy.

    Rules are checked in order and the evaluation stops at the first failure.

    Args:
        policy: The policy to apply.
        identity: The username the password belongs to.
        candidate: The password to evaluate.

    Returns: True if every rule of the policy is satisfied.
    """
    return all(rule.check(identity, candidate) for rule in POLICY_RULES[policy])


def failed_rules(policy: PolicyEnum, identity: str, candidate: str) -> list[Rule]:
    """List the rules of a policy that a candidate password does not satisfy.

    Unlike evaluate, every rule is checked.

    Args:
        policy: The policy to apply.
        identity: The username the password belongs to.
        candidate: The password to evaluate.

    Returns: The failing rules, in policy order. Empty if the password is accepted.
    """
    return [rule for rule in POLICY_RULES[policy] if not rule.check(identity, candidate)]


def is_strong(identity: str, candidate: str) -> bool:
    """Check a user chosen password against the strong policy."""
    return evaluate(PolicyEnum.STRONG, identity, candidate)


def is_strong_default(identity: str, candidate: str) -> bool:
    """Check a password against the default policy.

    Args:
        identity: The username, kept so both policies share one signature. Unused.
        candidate: The password to evaluate.

    Returns: True if the password is accepted as a default password.
    """
    return evaluate(PolicyEnum.DEFAULT, identity, candidate)
