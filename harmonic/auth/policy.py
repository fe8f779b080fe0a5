"""Declarative access policy for every HTTP route.

Each API route is looked up by ``(method, path template)`` and gated the same
way, so a personal-data route can never be registered without saying whether
it is public, needs a signed-in caller, or needs the caller to own the
``{email}`` in its path.
"""

import enum


class AccessPolicy(str, enum.Enum):
    PUBLIC = "public"
    AUTHENTICATED = "authenticated"
    OWNER = "owner"


OWNER_PATH_PARAM = "email"

ROUTE_POLICIES: dict[tuple[str, str], AccessPolicy] = {
    ("GET", "/"): AccessPolicy.PUBLIC,
    ("POST", "/jwt"): AccessPolicy.PUBLIC,
    ("POST", "/create-payment-intent"): AccessPolicy.PUBLIC,
    # users
    ("PUT", "/users/{email}"): AccessPolicy.PUBLIC,
    ("GET", "/users"): AccessPolicy.AUTHENTICATED,
    ("GET", "/users/{email}"): AccessPolicy.PUBLIC,
    ("GET", "/topInstructor"): AccessPolicy.PUBLIC,
    ("GET", "/topInstructor/{role}"): AccessPolicy.PUBLIC,
    # classes
    ("GET", "/classes"): AccessPolicy.AUTHENTICATED,
    ("GET", "/classes/approved"): AccessPolicy.PUBLIC,
    ("GET", "/classes/{email}"): AccessPolicy.OWNER,
    ("GET", "/popularClasses"): AccessPolicy.PUBLIC,
    ("POST", "/classes"): AccessPolicy.PUBLIC,
    ("PATCH", "/classes/{class_id}"): AccessPolicy.PUBLIC,
    # cart
    ("GET", "/selected/{email}"): AccessPolicy.OWNER,
    ("POST", "/selected"): AccessPolicy.PUBLIC,
    ("DELETE", "/selected/{selection_id}"): AccessPolicy.PUBLIC,
    # enrollments
    ("POST", "/enrolledClass"): AccessPolicy.PUBLIC,
    ("GET", "/enrolledClasses/{email}"): AccessPolicy.OWNER,
    ("GET", "/enrolledClass/{class_id}"): AccessPolicy.PUBLIC,
}


def policy_for(method: str, path: str) -> AccessPolicy | None:
    return ROUTE_POLICIES.get((method.upper(), path))


def missing_policies(routes) -> list[tuple[str, str]]:
    """Return ``(method, path)`` pairs of API routes absent from the table."""
    missing = []
    for route in routes:
        methods = getattr(route, "methods", None)
        if not methods or not getattr(route, "include_in_schema", False):
            continue
        for method in sorted(methods):
            if method == "HEAD":
                continue
            if policy_for(method, route.path) is None:
                missing.append((method, route.path))
    return missing
