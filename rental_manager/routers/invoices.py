from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from rental_manager.core.database import get_db
from rental_manager.core.deps import get_current_claims
from rental_manager.models.invoice import INVOICE_STATUS_PENDING, Invoice
from rental_manager.schemas.auth import TokenClaims
from rental_manager.schemas.common import CreatedResponse, MessageResponse
from rental_manager.schemas.invoice import InvoiceCreate, InvoiceResponse, InvoiceUpdate
from rental_manager.services.scoped import create_owned, list_owned, scoped_delete, scoped_update

router = APIRouter(prefix="/invoices", tags=["invoices"])

NOT_FOUND = "Invoice not found or you are not authorized"


@router.get("", response_model=list[InvoiceResponse])
async def list_invoices(
    claims: TokenClaims = Depends(get_current_claims),
    db: AsyncSession = Depends(get_db),
):
    return await list_owned(db, Invoice, claims.id)


@router.post("", response_model=CreatedResponse, status_code=201)
async def create_invoice(
    payload: InvoiceCreate,
    claims: TokenClaims = Depends(get_current_claims),
    db: AsyncSession = Depends(get_db),
):
    fields = payload.model_dump()
    fields["status"] = INVOICE_STATUS_PENDING
    new_id = await create_owned(db, Invoice, claims.id, fields)
    await db.commit()
    return {"id": new_id}


@router.put("/{invoice_id}", response_model=MessageResponse)
async def update_invoice(
    invoice_id: int,
    payload: InvoiceUpdate,
    claims: TokenClaims = Depends(get_current_claims),
    db: AsyncSession = Depends(get_db),
):
    # Marking paid is just status="paid" plus a paid_date; status is not a closed set.
    if not await scoped_update(db, Invoice, invoice_id, claims.id, payload.model_dump()):
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    await db.commit()
    return {"message": "Invoice updated successfully"}


@router.delete("/{invoice_id}", response_model=MessageResponse)
async def delete_invoice(
    invoice_id: int,
    claims: TokenClaims = Depends(get_current_claims),
    db: AsyncSession = Depends(get_db),
):
    if not await scoped_delete(db, Invoice, invoice_id, claims.id):
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    await db.commit()
    return {"message": "Invoice deleted successfully"}
