from datetime import datetime, timedelta, timezone

import jwt

from harmonic.core import config


class AuthError(Exception):
    """Base class for token verification failures."""


class InvalidToken(AuthError):
    pass


class ExpiredToken(AuthError):
    pass


def normalize_email(email: str) -> str:
    return email.strip().lower()


def create_access_token(subject: str, expires_minutes: int | None = None) -> str:
    expire_minutes = expires_minutes or config.JWT_EXPIRES_MINUTES
    now = datetime.now(timezone.utc)
    expire = now + timedelta(minutes=expire_minutes)
    payload = {"sub": normalize_email(subject), "exp": expire, "iat": now}
    return jwt.encode(payload, config.JWT_SECRET_KEY, algorithm=config.JWT_ALGORITHM)


def decode_access_token(token: str) -> dict:
    try:
        payload = jwt.decode(token, config.JWT_SECRET_KEY, algorithms=[config.JWT_ALGORITHM])
    except jwt.ExpiredSignatureError as exc:
        raise ExpiredToken("Token has expired") from exc
    except jwt.InvalidTokenError as exc:
        raise InvalidToken("Invalid token") from exc

    if not payload.get("sub"):
        raise InvalidToken("Invalid token subject")
    return payload


def verify_identity(token: str) -> str:
    return decode_access_token(token)["sub"]
