import logging
from dataclasses import dataclass

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from harmonic.auth import jwt_handler
from harmonic.auth.policy import OWNER_PATH_PARAM, AccessPolicy, policy_for

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class Identity:
    email: str


def _unauthenticated(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def authenticate(credentials: HTTPAuthorizationCredentials | None) -> Identity:
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise _unauthenticated("Not authenticated")

    try:
        email = jwt_handler.verify_identity(credentials.credentials)
    except jwt_handler.ExpiredToken as exc:
        logger.warning("Rejected expired bearer token")
        raise _unauthenticated("Token has expired") from exc
    except jwt_handler.AuthError as exc:
        logger.warning("Rejected invalid bearer token")
        raise _unauthenticated("Invalid token") from exc

    return Identity(email=email)


def check_ownership(identity: Identity, owner_email: str | None) -> None:
    if owner_email is None or jwt_handler.normalize_email(owner_email) != identity.email:
        logger.warning("Identity %s denied access to records of %s", identity.email, owner_email)
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden access")


def enforce_route_policy(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> Identity | None:
    route = request.scope.get("route")
    policy = policy_for(request.method, route.path) if route is not None else None
    if policy is None:
        # Unlisted routes are never served; create_app refuses to start with one.
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden access")

    if policy is AccessPolicy.PUBLIC:
        return None

    identity = authenticate(credentials)
    if policy is AccessPolicy.OWNER:
        check_ownership(identity, request.path_params.get(OWNER_PATH_PARAM))

    request.state.identity = identity
    return identity


def get_current_identity(
    request: Request,
    _guarded: Identity | None = Depends(enforce_route_policy),
) -> Identity:
    """Identity the route guard verified for this request."""
    identity = getattr(request.state, "identity", None)
    if identity is None:
        raise _unauthenticated("Not authenticated")
    return identity
