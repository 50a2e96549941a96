from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from rental_manager.core.database import get_db
from rental_manager.core.deps import get_current_claims
from rental_manager.models.expense import Expense
from rental_manager.schemas.auth import TokenClaims
from rental_manager.schemas.common import CreatedResponse, MessageResponse
from rental_manager.schemas.expense import ExpenseFields, ExpenseResponse
from rental_manager.services.scoped import create_owned, list_owned, scoped_delete, scoped_update

router = APIRouter(prefix="/expenses", tags=["expenses"])

NOT_FOUND = "Expense not found or you are not authorized"


@router.get("", response_model=list[ExpenseResponse])
async def list_expenses(
    claims: TokenClaims = Depends(get_current_claims),
    db: AsyncSession = Depends(get_db),
):
    return await list_owned(db, Expense, claims.id)


@router.post("", response_model=CreatedResponse, status_code=201)
async def create_expense(
    payload: ExpenseFields,
    claims: TokenClaims = Depends(get_current_claims),
    db: AsyncSession = Depends(get_db),
):
    new_id = await create_owned(db, Expense, claims.id, payload.model_dump())
    await db.commit()
    return {"id": new_id}


@router.put("/{expense_id}", response_model=MessageResponse)
async def update_expense(
    expense_id: int,
    payload: ExpenseFields,
    claims: TokenClaims = Depends(get_current_claims),
    db: AsyncSession = Depends(get_db),
):
    if not await scoped_update(db, Expense, expense_id, claims.id, payload.model_dump()):
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    await db.commit()
    return {"message": "Expense updated successfully"}


@router.delete("/{expense_id}", response_model=MessageResponse)
async def delete_expense(
    expense_id: int,
    claims: TokenClaims = Depends(get_current_claims),
    db: AsyncSession = Depends(get_db),
):
    if not await scoped_delete(db, Expense, expense_id, claims.id):
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    await db.commit()
    return {"message": "Expense deleted successfully"}
