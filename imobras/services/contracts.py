"""
Imobras - Contract Service
CRUD de contratos de locação
"""
import logging
from typing import List, Optional
from sqlalchemy import select, delete, or_
from sqlalchemy.ext.asyncio import AsyncSession

from imobras.core import settings
from imobras.core.exceptions import ValidationError
from imobras.core.policy import Principal
from imobras.models import Contract, Revenue
from imobras.schemas import ContractCreate, ContractUpdate
from .access import scope_query, get_scoped

logger = logging.getLogger(__name__)


def _check_period(start_date, end_date):
    if start_date and end_date and end_date < start_date:
        raise ValidationError("A data de término deve ser posterior à data de início")


class ContractService:

    def __init__(self, db: AsyncSession, principal: Principal):
        self.db = db
        self.principal = principal

    async def list(self, search: Optional[str] = None) -> List[Contract]:
        """Contratos visíveis, mais recentes primeiro"""
        query = scope_query(select(Contract), Contract, self.principal)

        if search:
            query = query.where(
                or_(
                    Contract.name.ilike(f"%{search}%"),
                    Contract.owner_name.ilike(f"%{search}%"),
                    Contract.tenant_name.ilike(f"%{search}%")
                )
            )

        query = query.order_by(Contract.created_at.desc())
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def get(self, contract_id: str) -> Contract:
        return await get_scoped(
            self.db, Contract, contract_id, self.principal, "Contrato não encontrado"
        )

    async def create(self, request: ContractCreate) -> Contract:
        _check_period(request.start_date, request.end_date)

        contract = Contract(**request.model_dump(), user_id=self.principal.identity_id)
        self.db.add(contract)
        await self.db.commit()
        await self.db.refresh(contract)

        logger.info(f"Contrato {contract.id} criado por {self.principal.email}")
        return contract

    async def update(self, contract_id: str, request: ContractUpdate) -> Contract:
        contract = await self.get(contract_id)

        update_data = request.model_dump(exclude_unset=True)
        _check_period(
            update_data.get("start_date", contract.start_date),
            update_data.get("end_date", contract.end_date)
        )

        for field, value in update_data.items():
            if value is not None:
                setattr(contract, field, value)

        await self.db.commit()
        await self.db.refresh(contract)

        logger.info(f"Contrato {contract.id} atualizado por {self.principal.email}")
        return contract

    async def delete(self, contract_id: str):
        """
        Remove o contrato. Por padrão as receitas vinculadas são mantidas
        (referência pendente); com CASCADE_REVENUES_ON_CONTRACT_DELETE elas
        são removidas na mesma transação.
        """
        contract = await self.get(contract_id)

        if settings.CASCADE_REVENUES_ON_CONTRACT_DELETE:
            await self.db.execute(delete(Revenue).where(Revenue.contract_id == contract.id))

        await self.db.delete(contract)
        await self.db.commit()

        logger.info(f"Contrato {contract_id} removido por {self.principal.email}")
