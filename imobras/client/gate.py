"""
Imobras - Authorization Gate
Protege ações e telas consultando a sessão e o papel do usuário.
É conveniência de interface: a API aplica as mesmas regras no servidor.
"""
from typing import Awaitable, Callable, TypeVar

from imobras.core.exceptions import ImobrasError
from imobras.core.policy import Decision, DenialReason, GateResult, decide
from .session import SessionStore

T = TypeVar("T")

MESSAGES = {
    Decision.PENDING: "Carregando...",
    DenialReason.UNAUTHENTICATED: "Você precisa estar logado para acessar esta página",
    DenialReason.INSUFFICIENT_PRIVILEGE: "Apenas administradores autorizados podem acessar esta área",
}


class GateBlockedError(ImobrasError):
    """Ação não executada: sessão carregando ou acesso negado"""

    def __init__(self, result: GateResult):
        key = result.reason or result.decision
        super().__init__(
            MESSAGES[key],
            status_code=401 if result.reason == DenialReason.UNAUTHENTICATED else 403
        )
        self.result = result


class AuthorizationGate:

    def __init__(self, session: SessionStore):
        self.session = session

    async def guard(self, requires_admin: bool = False) -> GateResult:
        """Avalia ALLOWED / DENIED / PENDING sem efeitos colaterais"""
        if self.session.loading:
            return decide(True, None, requires_admin)

        identity = self.session.current_identity()
        admin = False
        if identity is not None and requires_admin:
            admin = await self.session.is_admin()

        return decide(False, identity, requires_admin, admin)

    async def run(self, action: Callable[[], Awaitable[T]], requires_admin: bool = False) -> T:
        """Executa a ação somente se liberada; caso contrário GateBlockedError"""
        result = await self.guard(requires_admin)
        if not result.allowed:
            raise GateBlockedError(result)
        return await action()
