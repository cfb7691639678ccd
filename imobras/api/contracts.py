"""
Imobras - Contracts API
CRUD de contratos de locação
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from imobras.database import get_db
from imobras.core import Principal
from imobras.schemas import ContractCreate, ContractUpdate, ContractResponse
from imobras.services import ContractService
from imobras.api.auth import get_current_principal

router = APIRouter(prefix="/contracts", tags=["Contracts"])


def get_service(
    db: AsyncSession = Depends(get_db),
    principal: Principal = Depends(get_current_principal)
) -> ContractService:
    return ContractService(db, principal)


@router.get("", response_model=List[ContractResponse])
async def list_contracts(
    search: Optional[str] = Query(None),
    service: ContractService = Depends(get_service)
):
    """Lista contratos (admin: todos; usuário: apenas os próprios)"""
    contracts = await service.list(search=search)
    return [c.to_dict() for c in contracts]


@router.get("/{contract_id}", response_model=ContractResponse)
async def get_contract(contract_id: str, service: ContractService = Depends(get_service)):
    """Retorna um contrato específico"""
    contract = await service.get(contract_id)
    return contract.to_dict()


@router.post("", response_model=ContractResponse, status_code=status.HTTP_201_CREATED)
async def create_contract(request: ContractCreate, service: ContractService = Depends(get_service)):
    """Cria novo contrato"""
    contract = await service.create(request)
    return contract.to_dict()


@router.put("/{contract_id}", response_model=ContractResponse)
async def update_contract(
    contract_id: str,
    request: ContractUpdate,
    service: ContractService = Depends(get_service)
):
    """Atualiza contrato"""
    contract = await service.update(contract_id, request)
    return contract.to_dict()


@router.delete("/{contract_id}")
async def delete_contract(contract_id: str, service: ContractService = Depends(get_service)):
    """Remove contrato (receitas vinculadas são mantidas)"""
    await service.delete(contract_id)
    return {"message": "Contrato excluído com sucesso"}
