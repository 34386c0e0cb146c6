"""
Password hashing, bearer tokens and the admin gate.

Tokens use the JWT compact form (``header.payload.signature``, each
part base64url encoded) signed with HMAC-SHA256 and the application's
``secret_key``.  The ``sub`` claim holds the username and ``exp`` the
expiry as a UNIX timestamp.  Passwords are hashed with PBKDF2-HMAC-
SHA256 and a random 16 byte salt, stored as ``salthex$hashhex``.

Route protection is expressed as dependencies:

* :func:`get_current_user` resolves the ``Authorization: Bearer``
  header to a stored user, or ``None`` for anonymous callers.
* :func:`require_user` rejects anonymous callers with 401.
* :func:`require_admin` rejects anyone who is not an administrator with
  403.  FastAPI resolves it before the request body is validated and
  before the handler runs, so a rejected call never reaches the store.
"""

import base64
import binascii
import hashlib
import hmac
import json
import logging
import os
import time
from typing import Any, Dict, Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from club_site_api.app.core.config import Settings
from club_site_api.app.core.storage import ClubStorage
from club_site_api.app.dependencies import get_app_settings, get_storage
from club_site_api.app.schemas.user import User

logger = logging.getLogger(__name__)

PBKDF2_ITERATIONS = 100_000


def _b64_url_encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("utf-8")


def _b64_url_decode(data: str) -> bytes:
    padding = "=" * (-len(data) % 4)
    return base64.urlsafe_b64decode(data + padding)


def _sign(message: bytes, secret: str) -> bytes:
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).digest()


def create_access_token(claims: Dict[str, Any], secret_key: str, expires_in: int) -> str:
    """Return a signed token carrying ``claims`` plus an ``exp`` claim.

    Parameters
    ----------
    claims : dict
        Claims to embed, normally ``{"sub": username}``.
    secret_key : str
        HMAC key; must match the key later given to
        :func:`decode_access_token`.
    expires_in : int
        Lifetime in seconds.
    """
    payload = dict(claims)
    payload["exp"] = int(time.time()) + expires_in
    header = {"alg": "HS256", "typ": "JWT"}
    header_b64 = _b64_url_encode(json.dumps(header, separators=(",", ":")).encode("utf-8"))
    payload_b64 = _b64_url_encode(json.dumps(payload, separators=(",", ":")).encode("utf-8"))
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    signature_b64 = _b64_url_encode(_sign(signing_input, secret_key))
    return f"{header_b64}.{payload_b64}.{signature_b64}"


def decode_access_token(token: str, secret_key: str) -> Optional[Dict[str, Any]]:
    """Verify ``token`` and return its claims.

    Returns ``None`` when the token is malformed, the signature does not
    match or the ``exp`` claim is missing or in the past.
    """
    parts = token.split(".")
    if len(parts) != 3:
        return None
    header_b64, payload_b64, signature_b64 = parts
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    try:
        actual_sig = _b64_url_decode(signature_b64)
        if not hmac.compare_digest(_sign(signing_input, secret_key), actual_sig):
            return None
        claims = json.loads(_b64_url_decode(payload_b64).decode("utf-8"))
    except (binascii.Error, UnicodeDecodeError, ValueError):
        return None
    if not isinstance(claims, dict):
        return None
    try:
        expires_at = int(claims["exp"])
    except (KeyError, TypeError, ValueError):
        return None
    if expires_at < int(time.time()):
        return None
    return claims


def issue_user_token(user: User, settings: Settings) -> str:
    """Create an access token for ``user`` using the app's settings."""
    return create_access_token(
        {"sub": user.username},
        secret_key=settings.secret_key,
        expires_in=settings.access_token_expire_minutes * 60,
    )


def hash_password(password: str) -> str:
    salt = os.urandom(16)
    digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, PBKDF2_ITERATIONS)
    return f"{salt.hex()}${digest.hex()}"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check ``plain_password`` against a ``salthex$hashhex`` string."""
    try:
        salt_hex, hash_hex = hashed_password.split("$", 1)
        salt = bytes.fromhex(salt_hex)
        stored_hash = bytes.fromhex(hash_hex)
    except ValueError:
        return False
    digest = hashlib.pbkdf2_hmac("sha256", plain_password.encode("utf-8"), salt, PBKDF2_ITERATIONS)
    return hmac.compare_digest(digest, stored_hash)


bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    storage: ClubStorage = Depends(get_storage),
    settings: Settings = Depends(get_app_settings),
) -> Optional[User]:
    """Resolve the bearer token to a stored user.

    The static admin token, when configured, maps to the configured
    admin account.  Any other token is decoded and its ``sub`` looked up
    among stored users.  Missing, invalid or expired tokens and tokens
    for deleted accounts all resolve to ``None``.
    """
    if credentials is None:
        return None
    token = credentials.credentials

    static_token = settings.admin_static_token
    if static_token and hmac.compare_digest(token.encode("utf-8"), static_token.encode("utf-8")):
        username = settings.admin_username
    else:
        claims = decode_access_token(token, settings.secret_key)
        if claims is None:
            return None
        username = claims.get("sub")
    if not username:
        return None
    return storage.users.find(lambda user: user.username == username)


def require_user(current_user: Optional[User] = Depends(get_current_user)) -> User:
    if current_user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return current_user


def require_admin(
    request: Request,
    current_user: Optional[User] = Depends(get_current_user),
) -> User:
    """Admin gate for mutating and sensitive routes."""
    if current_user is None or not current_user.is_admin:
        logger.warning(
            "Rejected %s %s for %s",
            request.method,
            request.url.path,
            current_user.username if current_user else "anonymous caller",
        )
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Access denied")
    return current_user
