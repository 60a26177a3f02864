"""Password hashing and session token primitives."""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt
from passlib.context import CryptContext

from orgboard.config import settings
from orgboard.models.enums import Role

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


@dataclass(frozen=True)
class AuthContext:
    """Verified caller identity decoded from a session token."""

    id: str
    role: Role
    org_id: str


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, hashed: str) -> bool:
    try:
        return pwd_context.verify(password, hashed)
    except (ValueError, TypeError):
        # Unrecognized or corrupt stored hash
        return False


def create_access_token(user_id: str, role: Role | str, org_id: str) -> str:
    """Sign a token carrying {id, role, org_id} with the configured expiry."""
    now = datetime.now(timezone.utc)
    payload = {
        "id": user_id,
        "role": str(role),
        "org_id": org_id,
        "iss": settings.jwt_issuer,
        "aud": settings.jwt_audience,
        "iat": now,
        "exp": now + timedelta(minutes=settings.jwt_expire_minutes),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> AuthContext:
    """Verify signature, expiry, issuer and audience and return the caller.

    Raises:
        ValueError: if the token is malformed, expired, or lacks the claims.
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience,
            issuer=settings.jwt_issuer,
            options={"require_exp": True, "require_aud": True, "require_iss": True},
        )
    except JWTError as exc:
        logger.debug("JWT decode failed: %s", exc)
        raise ValueError(f"Invalid token: {exc}") from exc

    user_id = payload.get("id")
    org_id = payload.get("org_id")
    if not user_id or not org_id:
        raise ValueError("Token is missing identity claims")
    try:
        role = Role(payload.get("role"))
    except ValueError as exc:
        raise ValueError(f"Unknown role claim: {payload.get('role')!r}") from exc
    return AuthContext(id=user_id, role=role, org_id=org_id)
