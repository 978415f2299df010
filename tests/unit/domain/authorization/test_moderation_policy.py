"""Tests for the configurable moderator delete policy."""

import pytest

from rolegate.config import PolicyConfig
from rolegate.domain.auth.model.principal import Principal
from rolegate.domain.auth.model.role import Role
from rolegate.domain.authorization.action import Action
from rolegate.domain.authorization.policy_set import PolicySet, build_policy_set
from rolegate.domain.shared.error import InvalidRequestError

MODERATOR = Principal(user_id=5, role=Role.MODERATOR)
ADMIN = Principal(user_id=9, role=Role.ADMIN)


class Post:
    def __init__(self, owner_id: int, owner_role: Role | str | None = None) -> None:
        self.owner_id = owner_id
        if owner_role is not None:
            self.owner_role = owner_role


@pytest.fixture
def lower_roles() -> PolicySet:
    return build_policy_set(PolicyConfig(moderator_delete="lower_roles"))


class TestAnyPolicy:
    @pytest.mark.parametrize("owner_role", [Role.NORMAL, Role.MODERATOR, Role.ADMIN])
    def test_moderator_deletes_anything(self, owner_role: Role) -> None:
        policy_set = build_policy_set(PolicyConfig())
        assert policy_set.can(MODERATOR, Action.DELETE, Post(owner_id=6, owner_role=owner_role))

    def test_owner_role_not_required(self) -> None:
        policy_set = build_policy_set(PolicyConfig())
        assert policy_set.can(MODERATOR, Action.DELETE, Post(owner_id=6))


class TestLowerRolesPolicy:
    def test_moderator_deletes_normal_users_post(self, lower_roles: PolicySet) -> None:
        assert lower_roles.can(MODERATOR, Action.DELETE, Post(owner_id=6, owner_role=Role.NORMAL))

    def test_moderator_cannot_delete_other_moderators_post(self, lower_roles: PolicySet) -> None:
        post = Post(owner_id=6, owner_role=Role.MODERATOR)
        assert lower_roles.can(MODERATOR, Action.DELETE, post) is False

    def test_moderator_cannot_delete_admins_post(self, lower_roles: PolicySet) -> None:
        post = Post(owner_id=9, owner_role="admin")
        assert lower_roles.can(MODERATOR, Action.DELETE, post) is False

    def test_moderator_deletes_own_post(self, lower_roles: PolicySet) -> None:
        # Ownership is checked first, so owner_role is not needed
        assert lower_roles.can(MODERATOR, Action.DELETE, Post(owner_id=5))

    def test_foreign_post_without_owner_role(self, lower_roles: PolicySet) -> None:
        with pytest.raises(InvalidRequestError, match="owner_role"):
            lower_roles.can(MODERATOR, Action.DELETE, Post(owner_id=6))

    def test_update_is_unaffected(self, lower_roles: PolicySet) -> None:
        post = Post(owner_id=9, owner_role=Role.ADMIN)
        assert lower_roles.can(MODERATOR, Action.UPDATE, post)

    def test_admin_deletes_admins_post(self, lower_roles: PolicySet) -> None:
        post = Post(owner_id=10, owner_role=Role.ADMIN)
        assert lower_roles.can(ADMIN, Action.DELETE, post)

    def test_normal_still_cannot_delete(self, lower_roles: PolicySet) -> None:
        normal = Principal(user_id=6, role=Role.NORMAL)
        assert lower_roles.can(normal, Action.DELETE, Post(owner_id=6, owner_role=Role.NORMAL)) is False
