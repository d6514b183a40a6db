"""Bearer token issuance and verification."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from uuid import UUID

import jwt

from calorie_tracker.domain.models import UserRecord
from calorie_tracker.services.errors import InvalidTokenError

_ALGORITHM = "HS256"


@dataclass(frozen=True)
class TokenClaims:
    """Identity carried by a verified token."""

    user_id: UUID
    email: str
    expires_at: datetime


@dataclass
class TokenService:
    """Issues and verifies signed JWT bearer tokens."""

    secret: str
    ttl_days: int = 7

    def issue(self, user: UserRecord, now: datetime | None = None) -> str:
        """Return a signed token for a user."""
        issued_at = now or datetime.now(tz=UTC)
        claims = {
            "sub": str(user.id),
            "email": user.email,
            "iat": issued_at,
            "exp": issued_at + timedelta(days=self.ttl_days),
        }
        return jwt.encode(claims, self.secret, algorithm=_ALGORITHM)

    def verify(self, token: str) -> TokenClaims:
        """Decode a token, raising InvalidTokenError when it is not usable."""
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[_ALGORITHM],
                options={"require": ["sub", "exp"]},
            )
            user_id = UUID(str(payload["sub"]))
        except (jwt.PyJWTError, ValueError) as exc:
            raise InvalidTokenError(str(exc)) from exc
        return TokenClaims(
            user_id=user_id,
            email=str(payload.get("email", "")),
            expires_at=datetime.fromtimestamp(int(payload["exp"]), tz=UTC),
        )
