import time

import jwt
import pytest

from app.core.config import settings
from app.services.jwt_service import JwtService, TOKEN_ISSUER
from atams.exceptions import BadRequestException


@pytest.fixture
def service():
    return JwtService()


def test_token_round_trip_carries_user_and_unique_jti(service):
    first = service.generate_attendance_token(7)
    second = service.generate_attendance_token(7)

    payload = service.verify_token(first["token"])

    assert payload["uid"] == 7
    assert payload["sub"] == "7"
    assert payload["iss"] == TOKEN_ISSUER
    assert first["expires_in"] == settings.QR_TOKEN_TTL_SECONDS
    assert payload["jti"] != service.verify_token(second["token"])["jti"]


def test_expired_token_is_rejected(service):
    now = int(time.time())
    token = jwt.encode(
        {"iss": TOKEN_ISSUER, "sub": "7", "uid": 7, "jti": "abc", "iat": now - 120, "exp": now - 60},
        settings.QR_JWT_SECRET,
        algorithm=settings.QR_JWT_ALG
    )

    with pytest.raises(BadRequestException, match="expired"):
        service.verify_token(token)


def test_wrong_secret_is_rejected(service):
    now = int(time.time())
    token = jwt.encode(
        {"iss": TOKEN_ISSUER, "sub": "7", "uid": 7, "jti": "abc", "iat": now, "exp": now + 60},
        "another-secret",
        algorithm="HS256"
    )

    with pytest.raises(BadRequestException):
        service.verify_token(token)


def test_mismatched_subject_is_rejected(service):
    now = int(time.time())
    token = jwt.encode(
        {"iss": TOKEN_ISSUER, "sub": "8", "uid": 7, "jti": "abc", "iat": now, "exp": now + 60},
        settings.QR_JWT_SECRET,
        algorithm=settings.QR_JWT_ALG
    )

    with pytest.raises(BadRequestException, match="subject"):
        service.verify_token(token)
