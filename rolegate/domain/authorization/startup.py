"""Startup validation for the policy set."""

import logging

from rolegate.domain.authorization.policy_set import PolicySet
from rolegate.domain.shared.error import ConfigurationError

logger = logging.getLogger(__name__)


def validate_policy_set(policy_set: PolicySet) -> None:
    """Run every policy-set check, reporting all violations at once.

    Raises ConfigurationError listing each failed check.
    """
    violations: list[str] = []

    for check in (policy_set.validate_coverage, policy_set.validate_cascade):
        try:
            check()
        except ConfigurationError as e:
            violations.append(str(e))

    if violations:
        raise ConfigurationError(
            f"Policy validation failed with {len(violations)} problem(s):\n"
            + "\n".join(f"  - {v}" for v in violations)
        )

    logger.info("Policy validation passed for %d rule(s)", len(policy_set.rules))
