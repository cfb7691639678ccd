from .config import settings, get_settings
from .exceptions import (
    ImobrasError,
    ValidationError,
    AuthError,
    StoreError,
    PermissionDeniedError,
    NotFoundError
)
from .policy import (
    Role,
    Decision,
    DenialReason,
    GateResult,
    Principal,
    decide,
    has_admin_role
)
from .security import (
    create_access_token,
    verify_access_token,
    verify_password,
    get_password_hash,
    validate_credentials
)

__all__ = [
    "settings",
    "get_settings",
    "ImobrasError",
    "ValidationError",
    "AuthError",
    "StoreError",
    "PermissionDeniedError",
    "NotFoundError",
    "Role",
    "Decision",
    "DenialReason",
    "GateResult",
    "Principal",
    "decide",
    "has_admin_role",
    "create_access_token",
    "verify_access_token",
    "verify_password",
    "get_password_hash",
    "validate_credentials"
]
