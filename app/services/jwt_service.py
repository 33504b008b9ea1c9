"""
JWT Service for employee QR attendance tokens
"""
import jwt
import uuid
from datetime import datetime, timedelta, timezone
from typing import Dict, Any

from app.core.config import settings
from atams.exceptions import BadRequestException

TOKEN_ISSUER = "hris-attendance"


class JwtService:
    def __init__(self) -> None:
        self.secret = settings.QR_JWT_SECRET
        self.algorithm = settings.QR_JWT_ALG
        self.ttl_seconds = settings.QR_TOKEN_TTL_SECONDS

    def generate_attendance_token(self, user_id: int) -> Dict[str, Any]:
        """
        Generate a short-lived JWT identifying the employee shown on a QR code

        Returns:
            dict: {token: str, expires_in: int}
        """
        now = datetime.now(timezone.utc)
        exp = now + timedelta(seconds=self.ttl_seconds)

        payload = {
            "iss": TOKEN_ISSUER,
            "sub": str(user_id),
            "uid": user_id,
            "jti": str(uuid.uuid4()),
            "iat": int(now.timestamp()),
            "exp": int(exp.timestamp()),
        }

        token = jwt.encode(payload, self.secret, algorithm=self.algorithm)

        return {
            "token": token,
            "expires_in": self.ttl_seconds
        }

    def verify_token(self, token: str) -> Dict[str, Any]:
        """
        Verify and decode a scanned QR token

        Args:
            token: JWT string from QR code

        Returns:
            dict: Decoded payload

        Raises:
            BadRequestException: If token is invalid or expired
        """
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                issuer=TOKEN_ISSUER,
                options={"require": ["iss", "sub", "jti", "iat", "exp"]}
            )
        except jwt.ExpiredSignatureError:
            raise BadRequestException("Token expired")
        except jwt.InvalidTokenError as e:
            raise BadRequestException(f"Invalid token: {str(e)}")

        if not isinstance(payload.get("uid"), int) or str(payload["uid"]) != payload["sub"]:
            raise BadRequestException("Invalid token subject")

        return payload
