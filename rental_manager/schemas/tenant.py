import datetime

from pydantic import BaseModel, ConfigDict


class TenantFields(BaseModel):
    property_id: int | None = None
    full_name: str | None = None
    phone: str | None = None
    address: str | None = None
    start_date: datetime.date | None = None
    rent_amount: float | None = None


class TenantResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    property_id: int | None
    full_name: str | None
    phone: str | None
    address: str | None
    start_date: datetime.date | None
    rent_amount: float | None
