"""
Imobras - Row Access
Aplica a política de acesso na fronteira com o banco: admin enxerga todas as
linhas, usuário comum apenas as próprias (user_id).
"""
import logging
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from imobras.core.exceptions import NotFoundError, PermissionDeniedError
from imobras.core.policy import Principal

logger = logging.getLogger(__name__)


def scope_query(query, model, principal: Principal):
    """Restringe a query às linhas visíveis para o principal"""
    if principal.is_admin:
        return query
    return query.where(model.user_id == principal.identity_id)


def require_admin(principal: Principal, action: str = "esta operação"):
    """Levanta PermissionDeniedError se o principal não for admin"""
    if not principal.is_admin:
        logger.warning(f"Acesso negado a {principal.email}: {action} exige administrador")
        raise PermissionDeniedError(f"Apenas administradores podem executar {action}")


async def get_scoped(
    db: AsyncSession,
    model,
    row_id: str,
    principal: Principal,
    not_found_message: str = "Registro não encontrado"
):
    """
    Busca uma linha pelo id dentro do escopo do principal.
    Linha de outro usuário é tratada como inexistente.
    """
    query = scope_query(select(model).where(model.id == row_id), model, principal)
    result = await db.execute(query)
    row = result.scalar_one_or_none()

    if not row:
        raise NotFoundError(not_found_message)

    return row
