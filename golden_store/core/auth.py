import logging
import time
from typing import Dict, Any, Optional

import bcrypt
from fastapi import Header
from jose import jwt, JWTError

from golden_store.core import config
from golden_store.core.errors import Unauthorized

logger = logging.getLogger(__name__)


BCRYPT_MAX_BYTES = 72


def _secret(password: str) -> bytes:
    # bcrypt only reads the first 72 bytes; newer releases raise instead of truncating
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str) -> str:
    return bcrypt.hashpw(_secret(password), bcrypt.gensalt(rounds=10)).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(_secret(password), password_hash.encode("utf-8"))
    except ValueError:
        # malformed stored hash
        return False


def create_access_token(admin, ttl: Optional[int] = None) -> str:
    """Sign a token for an admin record (anything with id, username and role)."""
    now = int(time.time())
    exp = now + (ttl if ttl is not None else config.ACCESS_TOKEN_EXPIRE_MINUTES * 60)
    to_encode = {
        "sub": str(admin.id),
        "username": admin.username,
        "role": admin.role,
        "iat": now,
        "exp": exp,
    }
    return jwt.encode(to_encode, config.JWT_SECRET, algorithm=config.JWT_ALGO)


def verify_token(token: str) -> Dict[str, Any]:
    return jwt.decode(token, config.JWT_SECRET, algorithms=[config.JWT_ALGO])


def get_current_admin(authorization: Optional[str] = Header(None)) -> Dict[str, Any]:
    if not authorization:
        raise Unauthorized("Authorization header missing or malformed.")
    scheme, _, token = authorization.partition(" ")
    token = token.strip()
    if scheme != "Bearer" or not token:
        raise Unauthorized("Authorization header missing or malformed.")
    try:
        claims = verify_token(token)
    except JWTError as e:
        logger.debug("Rejected bearer token: %s", e)
        raise Unauthorized("Token is invalid or has expired.")
    if not claims.get("sub"):
        raise Unauthorized("Token is invalid or has expired.")
    return claims
