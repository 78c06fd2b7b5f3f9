"""Tests for FastAPI authorization dependencies and exception handlers."""

import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from neo_access.api import (
    get_authorization_service,
    get_current_roles,
    register_exception_handlers,
    require_all_permissions,
    require_any_permission,
    require_permission,
)
from neo_access.core.exceptions import InvalidPermissionError, PermissionDeniedError, RoleNotFoundError
from neo_access.features.permissions.services.authorization_service import AuthorizationService


@pytest.fixture
def app(settings):
    app = FastAPI()
    register_exception_handlers(app)
    app.dependency_overrides[get_authorization_service] = lambda: AuthorizationService(settings=settings)

    @app.get("/grades", dependencies=[Depends(require_permission("grade:read"))])
    async def read_grades():
        return {"ok": True}

    @app.get("/grades/wildcard", dependencies=[Depends(require_permission("grade:read", mode="wildcard"))])
    async def read_grades_wildcard():
        return {"ok": True}

    @app.get("/reports")
    async def read_reports(roles=Depends(require_any_permission(["report:read", "grade:manage"]))):
        return {"roles": [role.name for role in roles]}

    @app.get("/classes", dependencies=[Depends(require_all_permissions(["class:read", "student:read"]))])
    async def read_classes():
        return {"ok": True}

    @app.get("/errors/denied")
    async def denied():
        raise PermissionDeniedError("Permission denied: user:delete")

    @app.get("/errors/missing")
    async def missing():
        raise RoleNotFoundError("Role with ID r-1 not found", details={"role_id": "r-1"})

    return app


def client_with_roles(app, roles):
    app.dependency_overrides[get_current_roles] = lambda: roles
    return TestClient(app)


class TestRequirePermission:
    """Test single permission dependency."""

    def test_granted(self, app, student_role):
        response = client_with_roles(app, [student_role]).get("/grades")
        assert response.status_code == 200

    def test_denied(self, app, teacher_role):
        """Test exact mode does not expand grade:manage."""
        response = client_with_roles(app, [teacher_role]).get("/grades")

        assert response.status_code == 403
        assert response.json() == {"detail": "Permission denied: grade:read"}

    def test_wildcard_mode(self, app, teacher_role):
        response = client_with_roles(app, [teacher_role]).get("/grades/wildcard")
        assert response.status_code == 200

    def test_invalid_permission_fails_at_declaration(self):
        with pytest.raises(InvalidPermissionError):
            require_permission("grades:read")

    def test_unconfigured_role_resolution(self):
        with pytest.raises(NotImplementedError):
            get_current_roles()


class TestRequireAnyAndAll:
    """Test multi-permission dependencies."""

    def test_any_returns_roles(self, app, teacher_role):
        response = client_with_roles(app, [teacher_role]).get("/reports")

        assert response.status_code == 200
        assert response.json() == {"roles": ["teacher"]}

    def test_any_denied(self, app, student_role):
        response = client_with_roles(app, [student_role]).get("/reports")
        assert response.status_code == 403

    def test_all_granted_across_roles(self, app, teacher_role):
        response = client_with_roles(app, [teacher_role]).get("/classes")
        assert response.status_code == 200

    def test_all_denied(self, app, student_role):
        response = client_with_roles(app, [student_role]).get("/classes")
        assert response.status_code == 403

    def test_invalid_permission_in_list(self):
        with pytest.raises(InvalidPermissionError):
            require_all_permissions(["class:read", "class"])


class TestExceptionHandlers:
    """Test library exceptions rendered as JSON responses."""

    def test_permission_denied_is_403(self, app):
        response = TestClient(app).get("/errors/denied")

        assert response.status_code == 403
        assert response.json()["error"]["code"] == "PermissionDeniedError"

    def test_role_not_found_is_404(self, app):
        response = TestClient(app).get("/errors/missing")

        assert response.status_code == 404
        assert response.json() == {
            "error": {
                "code": "RoleNotFoundError",
                "message": "Role with ID r-1 not found",
                "details": {"role_id": "r-1"},
                "type": "RoleNotFoundError",
            }
        }
