from datetime import date

from sqlalchemy import Date, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from rental_manager.core.database import Base


class Tenant(Base):
    """A person renting at one of the owner's properties."""
    __tablename__ = "tenants"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.id"), index=True)
    # Not checked against the caller's properties; may dangle after a property delete.
    property_id: Mapped[int | None] = mapped_column(Integer, ForeignKey("properties.id"))
    full_name: Mapped[str | None] = mapped_column(String(255))
    phone: Mapped[str | None] = mapped_column(String(50))
    address: Mapped[str | None] = mapped_column(String(500))
    start_date: Mapped[date | None] = mapped_column(Date)
    rent_amount: Mapped[float | None] = mapped_column(Numeric(12, 2, asdecimal=False))
