"""Tests for the exception hierarchy and HTTP mapping."""

import pytest

from neo_access.core.exceptions import http_mapping
from neo_access.core.exceptions import (
    HTTP_STATUS_MAP,
    AuthorizationError,
    ConfigurationError,
    DuplicateRoleError,
    InvalidPermissionActionError,
    InvalidPermissionError,
    InvalidPermissionFormatError,
    InvalidRoleError,
    NeoAccessError,
    PermissionDeniedError,
    RoleError,
    RoleNotFoundError,
    ValidationError,
    create_error_response,
    get_http_status_code,
)


class TestExceptionHierarchy:
    """Test base class behavior."""

    def test_defaults(self):
        error = NeoAccessError("Something failed")

        assert error.message == "Something failed"
        assert error.error_code == "NeoAccessError"
        assert error.details == {}
        assert str(error) == "Something failed"

    def test_custom_code_and_details(self):
        error = RoleError("Broken", error_code="ROLE_BROKEN", details={"role_id": "r-1"})

        assert error.error_code == "ROLE_BROKEN"
        assert error.details == {"role_id": "r-1"}

    def test_positional_code_and_details(self):
        error = NeoAccessError("Failed", "ACCESS_FAILED", {"role_id": "r-1"})

        assert error.error_code == "ACCESS_FAILED"
        assert error.details == {"role_id": "r-1"}
        assert error.args == ("Failed",)

    def test_unknown_keyword_is_rejected(self):
        with pytest.raises(TypeError):
            NeoAccessError("Failed", status_code=400)

    def test_permission_errors_are_validation_errors(self):
        assert issubclass(InvalidPermissionError, ValidationError)
        assert issubclass(InvalidPermissionActionError, InvalidPermissionError)
        assert issubclass(PermissionDeniedError, AuthorizationError)
        assert issubclass(RoleNotFoundError, RoleError)

    def test_format_error_default_message(self):
        error = InvalidPermissionFormatError("user")

        assert error.message == 'Invalid permission format. Expected "resource:action" or "resource:action:scope"'
        assert error.permission == "user"


class TestHttpMapping:
    """Test status code resolution."""

    @pytest.mark.parametrize("error, status", [
        (InvalidPermissionFormatError("x"), 400),
        (InvalidRoleError("bad"), 400),
        (PermissionDeniedError("no"), 403),
        (RoleNotFoundError("missing"), 404),
        (DuplicateRoleError("dup"), 409),
        (ConfigurationError("bad config"), 500),
        (NeoAccessError("generic"), 500),
    ])
    def test_status_codes(self, error, status):
        assert get_http_status_code(error) == status

    def test_unmapped_subclass_uses_closest_ancestor(self):
        class RoleLockedError(RoleNotFoundError):
            pass

        assert RoleLockedError not in HTTP_STATUS_MAP
        assert get_http_status_code(RoleLockedError("locked")) == 404

    def test_package_exports_mapping_function(self):
        assert get_http_status_code is http_mapping.get_http_status_code

    def test_foreign_exception_is_500(self):
        assert get_http_status_code(KeyError("x")) == 500

    def test_create_error_response(self):
        response = create_error_response(DuplicateRoleError("Role exists", details={"name": "teacher"}))

        assert response == {
            "error": {
                "code": "DuplicateRoleError",
                "message": "Role exists",
                "details": {"name": "teacher"},
                "type": "DuplicateRoleError",
            }
        }
