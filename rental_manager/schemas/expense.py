import datetime

from pydantic import BaseModel, ConfigDict


class ExpenseFields(BaseModel):
    description: str | None = None
    amount: float | None = None
    date: datetime.date | None = None


class ExpenseResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    description: str | None
    amount: float | None
    date: datetime.date | None
