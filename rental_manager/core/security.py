"""
Password hashing and the access token carried by every authenticated call.

A token holds ``sub`` (user id as a string), ``email`` and ``isAdmin``; the
claims are trusted as signed and never re-checked against the users table.
"""
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt
from passlib.context import CryptContext
from pydantic import ValidationError

from rental_manager.core.config import settings
from rental_manager.schemas.auth import TokenClaims

TOKEN_TYPE = "access"

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


# ─── Password hashing ──────────────────────────────────
def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain: str, hashed: str) -> bool:
    return pwd_context.verify(plain, hashed)


# ─── Access tokens ─────────────────────────────────────
def create_access_token(
    user_id: int,
    email: str,
    is_admin: bool,
    expires_delta: timedelta | None = None,
) -> str:
    lifetime = expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    claims = {
        "sub": str(user_id),
        "email": email,
        "isAdmin": is_admin,
        "type": TOKEN_TYPE,
        "exp": datetime.now(timezone.utc) + lifetime,
    }
    return jwt.encode(claims, settings.signing_key, algorithm=settings.algorithm)


def decode_token(token: str) -> dict | None:
    """Signature- and expiry-checked payload, or None."""
    try:
        return jwt.decode(token, settings.signing_key, algorithms=[settings.algorithm])
    except JWTError:
        return None


def read_access_claims(token: str) -> TokenClaims | None:
    payload = decode_token(token)
    if payload is None or payload.get("type") != TOKEN_TYPE:
        return None
    try:
        return TokenClaims(
            id=payload.get("sub"),
            email=payload.get("email"),
            is_admin=bool(payload.get("isAdmin", False)),
        )
    except ValidationError:
        return None
