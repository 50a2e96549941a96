from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from rental_manager.core.config import settings
from rental_manager.core.database import get_db
from rental_manager.core.deps import get_current_claims
from rental_manager.models.property import Property
from rental_manager.schemas.auth import TokenClaims
from rental_manager.schemas.common import CreatedResponse, MessageResponse
from rental_manager.schemas.property import PropertyFields, PropertyResponse
from rental_manager.services.scoped import (
    create_owned,
    list_all,
    list_owned,
    scoped_delete,
    scoped_update,
)

router = APIRouter(tags=["properties"])

NOT_FOUND = "Property not found or you are not authorized"


@router.get("/properties", response_model=list[PropertyResponse])
async def list_properties(
    claims: TokenClaims = Depends(get_current_claims),
    db: AsyncSession = Depends(get_db),
):
    return await list_owned(db, Property, claims.id)


@router.get("/all-properties", response_model=list[PropertyResponse])
async def list_all_properties(
    claims: TokenClaims = Depends(get_current_claims),
    db: AsyncSession = Depends(get_db),
):
    """Every owner's properties. Admin-only when ALL_PROPERTIES_ADMIN_ONLY is set."""
    if settings.all_properties_admin_only and not claims.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Access denied. Admin role required.",
        )
    return await list_all(db, Property)


@router.post("/properties", response_model=CreatedResponse, status_code=201)
async def create_property(
    payload: PropertyFields,
    claims: TokenClaims = Depends(get_current_claims),
    db: AsyncSession = Depends(get_db),
):
    new_id = await create_owned(db, Property, claims.id, payload.model_dump())
    await db.commit()
    return {"id": new_id}


@router.put("/properties/{property_id}", response_model=MessageResponse)
async def update_property(
    property_id: int,
    payload: PropertyFields,
    claims: TokenClaims = Depends(get_current_claims),
    db: AsyncSession = Depends(get_db),
):
    if not await scoped_update(db, Property, property_id, claims.id, payload.model_dump()):
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    await db.commit()
    return {"message": "Property updated successfully"}


@router.delete("/properties/{property_id}", response_model=MessageResponse)
async def delete_property(
    property_id: int,
    claims: TokenClaims = Depends(get_current_claims),
    db: AsyncSession = Depends(get_db),
):
    # Tenants pointing at this property are left as they are.
    if not await scoped_delete(db, Property, property_id, claims.id):
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    await db.commit()
    return {"message": "Property deleted successfully"}
