from datetime import UTC, datetime, timedelta
from typing import Optional, Tuple
from uuid import UUID

from jose import JWTError, jwt

from config import ApplicationConfig


def create_access_token(
    principal_id: UUID, email: str, expires_delta: Optional[timedelta] = None
) -> Tuple[str, datetime]:
    """
    Create JWT access token

    Args:
        principal_id: Credential UUID
        email: Credential email
        expires_delta: Token lifetime (defaults to SESSION_TTL_MINUTES)

    Returns:
        (JWT token string (HS256), expiry timestamp)
    """
    if expires_delta is None:
        expires_delta = timedelta(minutes=ApplicationConfig.SESSION_TTL_MINUTES)

    now = datetime.now(UTC)
    expires_at = now + expires_delta
    payload = {
        "sub": str(principal_id),
        "email": email,
        "exp": expires_at,
        "iat": now,
    }
    token = jwt.encode(payload, ApplicationConfig.JWT_SECRET, algorithm="HS256")
    return token, expires_at


def verify_jwt(token: str) -> Optional[dict]:
    """
    Verify and decode JWT token

    Args:
        token: JWT token string

    Returns:
        Decoded payload dict or None if invalid
    """
    try:
        payload = jwt.decode(
            token, ApplicationConfig.JWT_SECRET, algorithms=["HS256"]
        )
        return payload
    except JWTError:
        return None
