"""Tests for Role hierarchy — numeric ordering and parsing."""

import pytest

from rolegate.domain.auth.model.principal import Principal
from rolegate.domain.auth.model.role import Role
from rolegate.domain.shared.error import InvalidRequestError


class TestRoleHierarchy:
    def test_ordering(self) -> None:
        assert Role.GUEST < Role.NORMAL < Role.MODERATOR < Role.ADMIN

    def test_guest_is_lowest(self) -> None:
        for role in Role:
            assert role >= Role.GUEST

    def test_admin_gt_all(self) -> None:
        for role in Role:
            if role != Role.ADMIN:
                assert Role.ADMIN > role

    def test_normal_lt_moderator(self) -> None:
        assert not (Role.NORMAL >= Role.MODERATOR)


class TestRoleParse:
    def test_parse_name_is_case_insensitive(self) -> None:
        assert Role.parse("Moderator") is Role.MODERATOR
        assert Role.parse("admin") is Role.ADMIN

    def test_parse_passes_role_through(self) -> None:
        assert Role.parse(Role.NORMAL) is Role.NORMAL

    def test_parse_unknown_name(self) -> None:
        with pytest.raises(InvalidRequestError, match="Unknown role"):
            Role.parse("owner")

    def test_parse_rejects_non_string(self) -> None:
        with pytest.raises(InvalidRequestError):
            Role.parse(10)  # type: ignore[arg-type]


class TestPrincipalHasRole:
    def test_has_role_uses_hierarchy(self) -> None:
        principal = Principal(user_id=1, role=Role.MODERATOR)

        assert principal.has_role(Role.GUEST) is True
        assert principal.has_role(Role.NORMAL) is True
        assert principal.has_role(Role.MODERATOR) is True
        assert principal.has_role(Role.ADMIN) is False

    def test_has_role_normal(self) -> None:
        principal = Principal(user_id=1, role=Role.NORMAL)

        assert principal.has_role(Role.NORMAL) is True
        assert principal.has_role(Role.MODERATOR) is False
