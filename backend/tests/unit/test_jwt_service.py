"""
Unit tests for JWT service.
"""

import jwt
from datetime import timedelta

from core.config import JWT_SECRET_KEY
from services.jwt_service import JWTService


class TestJWTService:
    """Test access token creation and verification."""

    def test_round_trip_user_id(self):
        token = JWTService.create_access_token(42)

        payload = JWTService.verify_token(token)

        assert payload is not None
        assert payload.user_id == 42
        assert payload.exp is not None

    def test_expired_token_is_rejected(self):
        token = JWTService.create_access_token(42, expires_delta=timedelta(seconds=-1))

        assert JWTService.verify_token(token) is None

    def test_token_signed_with_other_key_is_rejected(self):
        token = jwt.encode({"user_id": 42}, "some-other-secret", algorithm="HS256")

        assert JWTService.verify_token(token) is None

    def test_garbage_token_is_rejected(self):
        assert JWTService.verify_token("not-a-jwt") is None

    def test_token_without_user_id_is_rejected(self):
        token = jwt.encode({"sub": "someone"}, JWT_SECRET_KEY, algorithm="HS256")

        assert JWTService.verify_token(token) is None
