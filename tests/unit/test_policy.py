# Copyright 2025 Canonical Ltd.
# See LICENSE file for licensing details.
"""Test the password policies."""

import pytest
from unit.constants import PASSWORD_WITH_USERNAME, STRONG_PASSWORD, USERNAME, WEAK_PASSWORD

from policy import PolicyEnum, evaluate, failed_rules, is_strong, is_strong_default


@pytest.mark.parametrize(
    "identity, candidate, expected",
    [
        pytest.param("amy", "Passw0rd", True, id="Minimal strong password"),
        pytest.param(USERNAME, STRONG_PASSWORD, True, id="Strong password"),
        pytest.param(USERNAME, PASSWORD_WITH_USERNAME, False, id="Contains the username"),
        pytest.param("", "Passw0rd", True, id="Empty username"),
        pytest.param(USERNAME, "", False, id="Empty password"),
        pytest.param(USERNAME, "Pas0wrd", False, id="Seven characters"),
        pytest.param(USERNAME, "PASSW0RD", False, id="No lowercase"),
        pytest.param(USERNAME, "passw0rd", False, id="No uppercase"),
        pytest.param(USERNAME, "Password", False, id="No digit"),
        pytest.param(USERNAME, "Passw0rd!", False, id="Special character"),
        pytest.param(USERNAME, "Ab1cD2eF3g", False, id="No run of four letters"),
        pytest.param(USERNAME, "Passw0rdPassw0rdPassw0rd", True, id="Long password"),
    ],
)
def test_is_strong(identity: str, candidate: str, expected: bool) -> None:
    """
    act: Evaluate a password against the strong policy.
    assert: The password is only accepted when every rule is satisfied.
    """
    assert is_strong(identity, candidate) is expected


@pytest.mark.parametrize(
    "candidate, expected",
    [
        pytest.param("Ab1", True, id="Shortest default password"),
        pytest.param("Abcdefghijklm12", True, id="Fifteen characters"),
        pytest.param("Abcdefghijklm123", False, id="Sixteen characters"),
        pytest.param("", False, id="Empty"),
        pytest.param("ab1", False, id="No uppercase"),
        pytest.param("AB1", False, id="No lowercase"),
        pytest.param("Abc", False, id="No digit"),
        pytest.param("Ab 1", False, id="Space"),
    ],
)
def test_is_strong_default(candidate: str, expected: bool) -> None:
    """
    act: Evaluate a password against the default policy.
    assert: The password is accepted when short enough and mixed.
    """
    assert is_strong_default("anything", candidate) is expected


def test_default_policy_ignores_identity() -> None:
    """
    act: Evaluate a password containing the username against the default policy.
    assert: The username has no effect on the result.
    """
    assert is_strong_default(USERNAME, PASSWORD_WITH_USERNAME)
    assert is_strong_default("", PASSWORD_WITH_USERNAME)


@pytest.mark.parametrize("identity", ["", "a", USERNAME, "x" * 200])
def test_empty_password_is_never_strong(identity: str) -> None:
    """
    act: Evaluate an empty password against the strong policy.
    assert: It is refused whatever the username.
    """
    assert not is_strong(identity, "")


@pytest.mark.parametrize("policy", list(PolicyEnum))
@pytest.mark.parametrize("candidate", [STRONG_PASSWORD, WEAK_PASSWORD, "", "Ab1"])
def test_evaluate_is_idempotent(policy: PolicyEnum, candidate: str) -> None:
    """
    act: Evaluate the same password twice under the same policy.
    assert: Both verdicts are identical.
    """
    assert evaluate(policy, USERNAME, candidate) == evaluate(policy, USERNAME, candidate)


def test_failed_rules_strong() -> None:
    """
    act: List the failed strong rules for a short lowercase password with a symbol.
    assert: Every failing rule is returned in policy order.
    """
    rules = failed_rules(PolicyEnum.STRONG, USERNAME, "john!")

    assert [rule.name for rule in rules] == [
        "minimum-length",
        "uppercase",
        "digit",
        "alphanumeric",
        "no-username",
    ]


def test_failed_rules_empty_for_accepted_password() -> None:
    """
    act: List the failed rules for passwords accepted by their policy.
    assert: No rule is returned.
    """
    assert not failed_rules(PolicyEnum.STRONG, USERNAME, STRONG_PASSWORD)
    assert not failed_rules(PolicyEnum.DEFAULT, USERNAME, "Ab1")


def test_failed_rules_matches_evaluate() -> None:
    """
    act: Compare failed_rules and evaluate on a weak password.
    assert: A password is refused exactly when a rule failed.
    """
    for policy in PolicyEnum:
        assert evaluate(policy, USERNAME, WEAK_PASSWORD) is not bool(
            failed_rules(policy, USERNAME, WEAK_PASSWORD)
        )
