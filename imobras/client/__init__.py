from .backend import ApiBackend, raise_for_response
from .session import (
    SessionStore,
    SessionState,
    Identity,
    FileTokenStore,
    MemoryTokenStore,
    RoleResolver
)
from .gate import AuthorizationGate, GateBlockedError

__all__ = [
    "ApiBackend",
    "raise_for_response",
    "SessionStore",
    "SessionState",
    "Identity",
    "FileTokenStore",
    "MemoryTokenStore",
    "RoleResolver",
    "AuthorizationGate",
    "GateBlockedError"
]
