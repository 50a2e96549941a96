import datetime

from pydantic import BaseModel, ConfigDict


class InvoiceCreate(BaseModel):
    tenant_id: int | None = None
    amount: float | None = None
    due_date: datetime.date | None = None


class InvoiceUpdate(BaseModel):
    """Full replacement; omitted fields are stored as null."""
    tenant_id: int | None = None
    amount: float | None = None
    due_date: datetime.date | None = None
    status: str | None = None  # pending | paid | overdue | ...
    paid_date: datetime.date | None = None


class InvoiceResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    tenant_id: int | None
    amount: float | None
    due_date: datetime.date | None
    paid_date: datetime.date | None
    status: str | None
