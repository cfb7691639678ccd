"""
Imobras - Revenue Service
Receitas: inclusão e exclusão (não há edição)
"""
import logging
from typing import Dict, Iterable, List, Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from imobras.core.exceptions import NotFoundError, ValidationError
from imobras.core.policy import Principal
from imobras.models import Contract, Revenue
from imobras.schemas import RevenueCreate
from .access import scope_query, get_scoped
from .contracts import ContractService

logger = logging.getLogger(__name__)


class RevenueService:

    def __init__(self, db: AsyncSession, principal: Principal):
        self.db = db
        self.principal = principal

    async def list(
        self,
        month: Optional[int] = None,
        year: Optional[int] = None
    ) -> List[Revenue]:
        """Receitas visíveis, mais recentes primeiro, com filtro opcional de período"""
        query = scope_query(select(Revenue), Revenue, self.principal)

        if month is not None:
            query = query.where(Revenue.month == month)
        if year is not None:
            query = query.where(Revenue.year == year)

        query = query.order_by(Revenue.created_at.desc())
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def get(self, revenue_id: str) -> Revenue:
        return await get_scoped(
            self.db, Revenue, revenue_id, self.principal, "Receita não encontrada"
        )

    async def contract_names(self, revenues: Iterable[Revenue]) -> Dict[str, str]:
        """
        Nomes dos contratos referenciados. Contratos excluídos simplesmente
        não aparecem no dicionário.
        """
        ids = {r.contract_id for r in revenues}
        if not ids:
            return {}

        result = await self.db.execute(
            select(Contract.id, Contract.name).where(Contract.id.in_(ids))
        )
        return {row[0]: row[1] for row in result.all()}

    async def create(self, request: RevenueCreate) -> Revenue:
        # O contrato precisa existir (e estar visível) no momento da inclusão
        try:
            await ContractService(self.db, self.principal).get(request.contract_id)
        except NotFoundError:
            raise ValidationError("Contrato não encontrado")

        revenue = Revenue(**request.model_dump(), user_id=self.principal.identity_id)
        self.db.add(revenue)
        await self.db.commit()
        await self.db.refresh(revenue)

        logger.info(f"Receita {revenue.id} criada por {self.principal.email}")
        return revenue

    async def delete(self, revenue_id: str):
        revenue = await self.get(revenue_id)

        await self.db.delete(revenue)
        await self.db.commit()

        logger.info(f"Receita {revenue_id} removida por {self.principal.email}")
