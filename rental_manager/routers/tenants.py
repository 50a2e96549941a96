from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from rental_manager.core.database import get_db
from rental_manager.core.deps import get_current_claims
from rental_manager.models.tenant import Tenant
from rental_manager.schemas.auth import TokenClaims
from rental_manager.schemas.common import CreatedResponse, MessageResponse
from rental_manager.schemas.tenant import TenantFields, TenantResponse
from rental_manager.services.scoped import create_owned, list_owned, scoped_delete, scoped_update

router = APIRouter(prefix="/tenants", tags=["tenants"])

NOT_FOUND = "Tenant not found or you are not authorized"


@router.get("", response_model=list[TenantResponse])
async def list_tenants(
    claims: TokenClaims = Depends(get_current_claims),
    db: AsyncSession = Depends(get_db),
):
    return await list_owned(db, Tenant, claims.id)


@router.post("", response_model=CreatedResponse, status_code=201)
async def create_tenant(
    payload: TenantFields,
    claims: TokenClaims = Depends(get_current_claims),
    db: AsyncSession = Depends(get_db),
):
    # property_id is stored as given, without checking the property exists.
    new_id = await create_owned(db, Tenant, claims.id, payload.model_dump())
    await db.commit()
    return {"id": new_id}


@router.put("/{tenant_id}", response_model=MessageResponse)
async def update_tenant(
    tenant_id: int,
    payload: TenantFields,
    claims: TokenClaims = Depends(get_current_claims),
    db: AsyncSession = Depends(get_db),
):
    if not await scoped_update(db, Tenant, tenant_id, claims.id, payload.model_dump()):
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    await db.commit()
    return {"message": "Tenant updated successfully"}


@router.delete("/{tenant_id}", response_model=MessageResponse)
async def delete_tenant(
    tenant_id: int,
    claims: TokenClaims = Depends(get_current_claims),
    db: AsyncSession = Depends(get_db),
):
    if not await scoped_delete(db, Tenant, tenant_id, claims.id):
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    await db.commit()
    return {"message": "Tenant deleted successfully"}
