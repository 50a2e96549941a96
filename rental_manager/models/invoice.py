from datetime import date

from sqlalchemy import Date, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from rental_manager.core.database import Base

INVOICE_STATUS_PENDING = "pending"
INVOICE_STATUS_PAID = "paid"


class Invoice(Base):
    """Rent charge issued to a tenant. Only ``paid`` invoices count as income."""
    __tablename__ = "invoices"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.id"), index=True)
    tenant_id: Mapped[int | None] = mapped_column(Integer, ForeignKey("tenants.id"))
    amount: Mapped[float | None] = mapped_column(Numeric(12, 2, asdecimal=False))
    due_date: Mapped[date | None] = mapped_column(Date)
    paid_date: Mapped[date | None] = mapped_column(Date)
    # Free-form: pending | paid | overdue | ...
    status: Mapped[str | None] = mapped_column(String(50), default=INVOICE_STATUS_PENDING)
