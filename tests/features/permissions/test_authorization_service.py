"""Tests for the authorization service."""

import pytest

from neo_access.config.constants import MatchMode
from neo_access.core.exceptions import ConfigurationError, InvalidPermissionError, PermissionDeniedError
from neo_access.features.permissions.services.authorization_service import AuthorizationService


class TestRoleSetChecks:
    """Test checks against an explicit set of roles."""

    @pytest.fixture
    def service(self, settings):
        return AuthorizationService(settings=settings)

    def test_exact_mode_is_default(self, service, teacher_role):
        """Test grade:manage does not imply grade:read in exact mode."""
        result = service.check([teacher_role], "grade:read")

        assert not result.granted
        assert result.mode is MatchMode.EXACT
        assert result.matched_role_id is None

    def test_wildcard_mode_understands_manage(self, service, teacher_role):
        result = service.check([teacher_role], "grade:read", mode="wildcard")

        assert result.granted
        assert result.matched_role_name == "teacher"

    def test_configured_wildcard_mode(self, wildcard_settings, teacher_role):
        service = AuthorizationService(settings=wildcard_settings)
        assert service.is_authorized([teacher_role], "grade:update:class_1")

    def test_or_across_roles_first_match_wins(self, service, teacher_role, student_role):
        result = service.check([student_role, teacher_role], "class:read")

        assert result
        assert result.matched_role_id == student_role.id

    def test_no_roles_is_denied(self, service):
        assert not service.is_authorized([], "class:read")

    def test_inactive_roles_are_skipped(self, service, teacher_role):
        teacher_role.deactivate()
        assert not service.is_authorized([teacher_role], "class:read")

    def test_inactive_roles_counted_when_configured(self, teacher_role):
        from neo_access.config.settings import AccessSettings

        service = AuthorizationService(settings=AccessSettings(_env_file=None, skip_inactive_roles=False))
        teacher_role.deactivate()

        assert service.is_authorized([teacher_role], "class:read")

    def test_wildcard_mode_rejects_malformed_requirement(self, service, teacher_role):
        with pytest.raises(InvalidPermissionError):
            service.check([teacher_role], "grade", mode=MatchMode.WILDCARD)

    def test_wildcard_mode_normalizes_empty_scope(self, service, make_role):
        role = make_role("viewer", ["user:read"])
        result = service.check([role], "user:read:", mode="wildcard")

        assert result.granted
        assert result.required == "user:read"

    def test_has_any_permission(self, service, student_role):
        assert service.has_any_permission([student_role], ["user:delete", "grade:read"])
        assert not service.has_any_permission([student_role], ["user:delete"])
        assert not service.has_any_permission([student_role], [])

    def test_has_all_permissions(self, service, teacher_role, student_role):
        roles = [teacher_role, student_role]

        assert service.has_all_permissions(roles, ["grade:manage", "grade:read"])
        assert not service.has_all_permissions(roles, ["grade:manage", "user:delete"])
        assert service.has_all_permissions(roles, [])

    def test_has_all_permissions_accepts_generator_roles(self, service, teacher_role):
        roles = (role for role in [teacher_role])
        assert service.has_all_permissions(roles, ["class:read", "student:read"])

    def test_require_returns_result(self, service, teacher_role):
        result = service.require([teacher_role], "class:read")
        assert result.matched_role_id == teacher_role.id

    def test_require_raises_permission_denied(self, service, student_role):
        with pytest.raises(PermissionDeniedError) as exc_info:
            service.require([student_role], "grade:update")

        assert exc_info.value.message == "Permission denied: grade:update"
        assert exc_info.value.details == {"required": "grade:update", "mode": "exact"}


class TestUserChecks:
    """Test checks that resolve a user's roles from the repository."""

    @pytest.mark.asyncio
    async def test_user_checks_need_repository(self, settings):
        service = AuthorizationService(settings=settings)

        with pytest.raises(ConfigurationError):
            await service.get_user_roles("user-1")

    @pytest.mark.asyncio
    async def test_tenant_roles_apply_only_in_their_tenant(self, settings, role_repository, make_role):
        """Test global roles apply everywhere and tenant roles only in their tenant."""
        platform = make_role("auditor", ["report:read"])
        school = make_role("teacher", ["grade:manage"], tenant_id="tenant-1")
        for role in (platform, school):
            await role_repository.save(role)
            await role_repository.assign_role("user-1", role.id)
        service = AuthorizationService(role_repository=role_repository, settings=settings)

        assert [r.name for r in await service.get_user_roles("user-1", "tenant-1")] == ["auditor", "teacher"]
        assert [r.name for r in await service.get_user_roles("user-1", "tenant-2")] == ["auditor"]
        assert [r.name for r in await service.get_user_roles("user-1")] == ["auditor"]

    @pytest.mark.asyncio
    async def test_user_has_permission(self, settings, role_repository, teacher_role):
        await role_repository.save(teacher_role)
        await role_repository.assign_role("user-1", teacher_role.id)
        service = AuthorizationService(role_repository=role_repository, settings=settings)

        assert await service.user_has_permission("user-1", "grade:manage")
        assert not await service.user_has_permission("user-1", "grade:read")
        assert await service.user_has_permission("user-1", "grade:read", mode="wildcard")
        assert not await service.user_has_permission("user-2", "grade:manage")

    @pytest.mark.asyncio
    async def test_check_user_with_mocked_repository(self, settings, teacher_role, mocker):
        repository = mocker.AsyncMock()
        repository.find_by_user_id.return_value = [teacher_role]
        service = AuthorizationService(role_repository=repository, settings=settings)

        result = await service.check_user("user-1", "class:read")

        assert result.granted
        repository.find_by_user_id.assert_awaited_once_with("user-1")
