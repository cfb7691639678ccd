"""
Imobras - Access Policy
Tabela de decisão de autorização, compartilhada entre servidor e cliente
"""
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional


class Role(str, Enum):
    """Papéis de autorização"""
    ADMIN = "admin"
    USER = "user"


class Decision(str, Enum):
    """Resultado da avaliação de acesso"""
    ALLOWED = "allowed"
    DENIED = "denied"
    PENDING = "pending"


class DenialReason(str, Enum):
    """Motivo da negação"""
    UNAUTHENTICATED = "unauthenticated"
    INSUFFICIENT_PRIVILEGE = "insufficient_privilege"


@dataclass(frozen=True)
class GateResult:
    decision: Decision
    reason: Optional[DenialReason] = None

    @property
    def allowed(self) -> bool:
        return self.decision == Decision.ALLOWED


@dataclass(frozen=True)
class Principal:
    """Identidade autenticada já com o papel resolvido"""
    identity_id: str
    email: str
    is_admin: bool = False


def has_admin_role(roles: Iterable[str]) -> bool:
    """True se ao menos uma atribuição for admin (sem atribuição = usuário comum)"""
    return any(role == Role.ADMIN.value for role in roles)


def decide(
    loading: bool,
    identity: Optional[object],
    requires_admin: bool,
    is_admin: bool = False
) -> GateResult:
    """
    Avalia a tabela de decisão:

    | loading | identity | requires_admin | is_admin | resultado |
    |---------|----------|----------------|----------|-----------|
    | sim     | -        | -              | -        | PENDING   |
    | não     | nenhuma  | -              | -        | DENIED    |
    | não     | sim      | não            | -        | ALLOWED   |
    | não     | sim      | sim            | não      | DENIED    |
    | não     | sim      | sim            | sim      | ALLOWED   |
    """
    if loading:
        return GateResult(Decision.PENDING)
    if identity is None:
        return GateResult(Decision.DENIED, DenialReason.UNAUTHENTICATED)
    if requires_admin and not is_admin:
        return GateResult(Decision.DENIED, DenialReason.INSUFFICIENT_PRIVILEGE)
    return GateResult(Decision.ALLOWED)
