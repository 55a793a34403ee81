"""Unit tests for JWTService."""

from uuid import uuid4

import pytest

from ratings.config import AuthSettings
from ratings.domain.service import JWTService
from ratings.domain.value import CallerId
from ratings.util.jwt import JWTError

SETTINGS = AuthSettings(jwt_secret="unit-test-secret")


class TestJWTService:
    """Tests for token issue and caller resolution."""

    def test_issued_token_resolves_to_caller(self, caller_id):
        """A token the service issues should resolve back to its caller."""
        service = JWTService(SETTINGS)

        token = service.create_token(str(caller_id))

        assert service.verify_token(token).user_id == str(caller_id)
        assert service.resolve_caller(token) == caller_id

    def test_token_from_other_secret_rejected(self, caller_id):
        """Tokens signed with another secret should not verify."""
        token = JWTService(AuthSettings(jwt_secret="other")).create_token(
            str(caller_id)
        )
        service = JWTService(SETTINGS)

        with pytest.raises(JWTError):
            service.verify_token(token)
        assert service.resolve_caller(token) is None

    @pytest.mark.parametrize("token", [None, "", "not-a-jwt"])
    def test_missing_or_garbage_token_is_anonymous(self, token):
        """Missing or malformed tokens should resolve to no caller."""
        assert JWTService(SETTINGS).resolve_caller(token) is None

    def test_non_uuid_subject_is_anonymous(self):
        """A valid token whose subject is not a UUID should be anonymous."""
        service = JWTService(SETTINGS)
        token = service.create_token("not-a-uuid")

        assert service.resolve_caller(token) is None
        assert service.resolve_caller(
            service.create_token(str(CallerId(uuid4())))
        ) is not None
