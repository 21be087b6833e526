from datetime import datetime, timedelta, timezone

from jose import jwt, JWTError

from ..config import settings
from ..domain.entities import Role, TokenClaims, User
from ..domain.errors import InvalidTokenError


class TokenCodec:
    """Issues and verifies signed, time-bounded access tokens."""

    def __init__(self, secret_key: str, algorithm: str = "HS256", minutes: int = 60):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.minutes = minutes

    def issue(self, user: User) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            "id": user.id,
            "username": user.username,
            "role": user.role.value,
            "iat": now,
            "exp": now + timedelta(minutes=self.minutes),
        }
        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenClaims:
        """Returns the embedded claims or raises InvalidTokenError."""
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError as e:
            raise InvalidTokenError(str(e))

        user_id, username = payload.get("id"), payload.get("username")
        if not isinstance(user_id, int) or isinstance(user_id, bool):
            raise InvalidTokenError("Malformed id claim")
        if not isinstance(username, str) or not username:
            raise InvalidTokenError("Malformed username claim")
        try:
            role = Role(payload.get("role"))
        except ValueError:
            raise InvalidTokenError("Unknown role claim")
        iat, exp = payload.get("iat"), payload.get("exp")
        if not isinstance(iat, (int, float)) or not isinstance(exp, (int, float)):
            raise InvalidTokenError("Missing timestamps")

        return TokenClaims(
            id=user_id,
            username=username,
            role=role,
            issued_at=datetime.fromtimestamp(iat, tz=timezone.utc),
            expires_at=datetime.fromtimestamp(exp, tz=timezone.utc),
        )


def get_token_codec() -> TokenCodec:
    return TokenCodec(settings.SECRET_KEY, settings.JWT_ALGORITHM, settings.ACCESS_TOKEN_MINUTES)
