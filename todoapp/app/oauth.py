"""JWT validation for identity-provider session tokens."""

import os
import time
import logging
from typing import Optional, Dict, Any

import jwt
from jwt import PyJWKClient
from fastapi import HTTPException, status, Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from todoapp.models.context import RequestContext
from todoapp.models.user import Role

logger = logging.getLogger(__name__)
oauth_scheme = HTTPBearer(auto_error=False)

# JWKS client cache
_jwks_client: Optional[PyJWKClient] = None
_jwks_cache_time: float = 0
JWKS_CACHE_DURATION = 3600  # 1 hour

KNOWN_ROLES: tuple[Role, ...] = ("admin", "moderator")


def get_identity_provider_url() -> str:
    """Get identity provider base URL (the token issuer) from environment."""
    url = os.getenv("IDENTITY_PROVIDER_URL", "http://localhost:8080")
    return url.rstrip("/")


def get_jwt_audience() -> Optional[str]:
    """Get the expected JWT audience, if the provider is configured to set one."""
    return os.getenv("JWT_AUDIENCE") or None


def get_jwks_client() -> PyJWKClient:
    """Get or refresh JWKS client for JWT validation."""
    global _jwks_client, _jwks_cache_time

    current_time = time.time()
    if _jwks_client is None or (current_time - _jwks_cache_time) > JWKS_CACHE_DURATION:
        identity_url = get_identity_provider_url()
        jwks_url = f"{identity_url}/.well-known/jwks.json"
        _jwks_client = PyJWKClient(
            jwks_url, cache_keys=True, lifespan=JWKS_CACHE_DURATION
        )
        _jwks_cache_time = current_time
        logger.info(f"Refreshed JWKS client from {jwks_url}")

    return _jwks_client


def validate_jwt_token(token: str) -> Optional[Dict[str, Any]]:
    """Validate a session token locally using JWKS.

    Returns decoded claims if valid, None if invalid.
    """
    try:
        jwks_client = get_jwks_client()
        signing_key = jwks_client.get_signing_key_from_jwt(token)

        identity_url = get_identity_provider_url()
        audience = get_jwt_audience()

        decoded = jwt.decode(
            token,
            signing_key.key,
            algorithms=["RS256"],
            issuer=identity_url,
            audience=audience,
            options={
                "require": ["exp", "iss", "sub"],
                "verify_aud": audience is not None,
            },
        )
        return decoded
    except jwt.ExpiredSignatureError:
        logger.warning("JWT token expired")
        return None
    except jwt.InvalidTokenError as e:
        logger.warning(f"Invalid JWT token: {e}")
        return None
    except Exception as e:
        logger.error(f"JWT validation error: {e}")
        return None


def role_from_claims(claims: Dict[str, Any]) -> Optional[Role]:
    """Read the caller's role from the session's public metadata claim.

    The provider copies public metadata into the `metadata` claim; anything
    other than a known role is treated as no role.
    """
    metadata = claims.get("metadata")
    if not isinstance(metadata, dict):
        return None
    role = metadata.get("role")
    if role in KNOWN_ROLES:
        return role
    return None


async def get_request_context(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(oauth_scheme),
) -> RequestContext:
    """FastAPI dependency resolving the authenticated caller.

    Raises:
        HTTPException 401 if the token is missing, invalid or has no subject.
    """
    if not credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing authorization header",
            headers={"WWW-Authenticate": "Bearer"},
        )

    claims = validate_jwt_token(credentials.credentials)
    if not claims:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    sub = claims.get("sub")
    if not sub or not isinstance(sub, str):
        logger.error(f"JWT missing sub claim: {claims}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token missing required claims",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return RequestContext(user_id=sub, role=role_from_claims(claims), claims=claims)
