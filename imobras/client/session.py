"""
Imobras - Session Store
Estado da sessão no cliente: identidade atual, carregamento e token persistido
"""
import asyncio
import logging
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, Optional

from imobras.core import settings
from imobras.core.exceptions import AuthError, ImobrasError, StoreError, ValidationError
from imobras.core.policy import has_admin_role
from imobras.core.security import validate_credentials

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    """Estados da sessão: UNKNOWN -> AUTHENTICATED | ANONYMOUS"""
    UNKNOWN = "unknown"
    AUTHENTICATED = "authenticated"
    ANONYMOUS = "anonymous"


@dataclass(frozen=True)
class Identity:
    id: str
    email: str
    display_name: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict) -> "Identity":
        return cls(
            id=data["id"],
            email=data["email"],
            display_name=data.get("full_name")
        )


class FileTokenStore:
    """Persiste o token de acesso em arquivo para restaurar a sessão"""

    def __init__(self, path: Optional[str] = None):
        self.path = Path(path or settings.SESSION_FILE)

    def load(self) -> Optional[str]:
        if self.path.exists():
            return self.path.read_text().strip() or None
        return None

    def save(self, token: str):
        self.path.write_text(token)
        os.chmod(self.path, 0o600)

    def clear(self):
        if self.path.exists():
            self.path.unlink()


class MemoryTokenStore:
    def __init__(self, token: Optional[str] = None):
        self.token = token

    def load(self) -> Optional[str]:
        return self.token

    def save(self, token: str):
        self.token = token

    def clear(self):
        self.token = None


class RoleResolver:
    """Consulta as atribuições de papel e responde se há alguma admin"""

    def __init__(self, backend):
        self.backend = backend

    async def is_admin(self, token: str, identity_id: str) -> bool:
        rows = await self.backend.list_roles(token, identity_id)
        return has_admin_role(row["role"] for row in rows or [])


class SessionStore:
    """
    Máquina de estados da sessão.

    - Começa em UNKNOWN (loading) e resolve uma única vez via initialize(),
      limitada por SESSION_RESOLVE_TIMEOUT_SECONDS; timeout ou falha resolvem
      para ANONYMOUS.
    - sign_in leva a AUTHENTICATED, sign_out a ANONYMOUS.
    - O papel (admin) fica em cache enquanto a identidade não mudar.

    Cada troca de identidade incrementa _generation; respostas que chegam
    depois de uma troca são descartadas.
    """

    def __init__(
        self,
        backend,
        token_store=None,
        role_resolver: Optional[RoleResolver] = None,
        resolve_timeout: Optional[float] = None
    ):
        self.backend = backend
        self.token_store = token_store or FileTokenStore()
        self.role_resolver = role_resolver or RoleResolver(backend)
        self.resolve_timeout = resolve_timeout or settings.SESSION_RESOLVE_TIMEOUT_SECONDS

        self.state = SessionState.UNKNOWN
        self._identity: Optional[Identity] = None
        self._token: Optional[str] = None
        self._admin: Optional[bool] = None
        self._generation = 0
        self._init_task: Optional[asyncio.Task] = None

    @property
    def loading(self) -> bool:
        return self.state == SessionState.UNKNOWN

    @property
    def token(self) -> Optional[str]:
        return self._token

    def current_identity(self) -> Optional[Identity]:
        return self._identity

    async def initialize(self) -> SessionState:
        """Restaura a sessão persistida (executa uma única vez)"""
        if self._init_task is None:
            self._init_task = asyncio.ensure_future(self._resolve())
        return await self._init_task

    async def _resolve(self) -> SessionState:
        generation = self._generation
        token = None
        identity = None

        try:
            token = self.token_store.load()
            if token:
                data = await asyncio.wait_for(self.backend.me(token), timeout=self.resolve_timeout)
                identity = Identity.from_dict(data)
        except asyncio.TimeoutError:
            logger.warning(f"Sessão não resolvida em {self.resolve_timeout}s - seguindo como anônimo")
        except AuthError:
            logger.info("Token persistido expirado ou revogado")
            self.token_store.clear()
        except ImobrasError as e:
            logger.warning(f"Falha ao restaurar sessão: {e}")
        except Exception as e:
            # Resposta inesperada ou token ilegível: segue como anônimo
            logger.exception(f"Erro inesperado ao restaurar sessão: {e}")

        if generation != self._generation:
            # Login/logout aconteceu durante a resolução
            return self.state

        if identity:
            self._set_authenticated(token, identity)
        else:
            self._set_anonymous()
        return self.state

    async def sign_in(self, email: str, password: str) -> Identity:
        email = validate_credentials(email, password)

        token, user = await self.backend.sign_in(email, password)
        identity = Identity.from_dict(user)

        self.token_store.save(token)
        self._set_authenticated(token, identity)
        logger.info(f"Sessão iniciada: {identity.email}")
        return identity

    async def sign_up(self, email: str, password: str, full_name: str) -> Identity:
        """Cria a conta; não altera a sessão atual (login é um passo separado)"""
        email = validate_credentials(email, password)
        if len((full_name or "").strip()) < 2:
            raise ValidationError("Nome deve ter no mínimo 2 caracteres")

        data = await self.backend.sign_up(email, password, full_name.strip())
        return Identity.from_dict(data)

    async def sign_out(self):
        if self.state != SessionState.AUTHENTICATED:
            return

        try:
            await self.backend.sign_out(self._token)
        except AuthError:
            # Token já inválido no servidor: a sessão já terminou lá
            logger.info("Token já inválido no servidor")
        except StoreError as e:
            raise AuthError(f"Não foi possível encerrar a sessão: {e.message}")

        self.token_store.clear()
        self._set_anonymous()
        logger.info("Sessão encerrada")

    async def is_admin(self) -> bool:
        """Papel da identidade atual, com cache por identidade"""
        if self.state != SessionState.AUTHENTICATED:
            return False
        if self._admin is not None:
            return self._admin

        generation = self._generation
        try:
            result = await self.role_resolver.is_admin(self._token, self._identity.id)
        except StoreError as e:
            logger.warning(f"Falha ao consultar papéis: {e}")
            return False

        if generation != self._generation:
            return False

        self._admin = result
        return result

    def _set_authenticated(self, token: str, identity: Identity):
        self._generation += 1
        self._token = token
        self._identity = identity
        self._admin = None
        self.state = SessionState.AUTHENTICATED

    def _set_anonymous(self):
        self._generation += 1
        self._token = None
        self._identity = None
        self._admin = None
        self.state = SessionState.ANONYMOUS
