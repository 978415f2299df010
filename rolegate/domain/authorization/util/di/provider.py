"""DI provider for the authorization domain."""

import logging

from dishka import Provider, from_context, provide

from rolegate.config import Config
from rolegate.domain.auth.model.identity import Identity
from rolegate.domain.authorization.policy_set import PolicySet, build_policy_set
from rolegate.domain.authorization.service import Authorizer
from rolegate.domain.authorization.startup import validate_policy_set
from rolegate.util.di.scope import Scope

logger = logging.getLogger(__name__)


class AuthorizationProvider(Provider):
    """DI provider for the policy set and per-request authorizer."""

    config = from_context(provides=Config, scope=Scope.APP)
    identity = from_context(provides=Identity, scope=Scope.UOW)

    @provide(scope=Scope.APP)
    def get_policy_set(self, config: Config) -> PolicySet:
        """Build the rule table once and validate it before first use."""
        logger.info("Building policy set: moderator_delete=%s", config.policy.moderator_delete)
        policy_set = build_policy_set(config.policy)
        validate_policy_set(policy_set)
        return policy_set

    @provide(scope=Scope.UOW)
    def get_authorizer(self, identity: Identity, policy_set: PolicySet) -> Authorizer:
        """Provide an Authorizer bound to the request's subject."""
        return Authorizer(subject=identity, policy_set=policy_set)  # type: ignore[arg-type]
