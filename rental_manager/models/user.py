from sqlalchemy import Boolean, Integer, String, false
from sqlalchemy.orm import Mapped, mapped_column

from rental_manager.core.database import Base


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    email: Mapped[str] = mapped_column(String(320), unique=True, index=True)
    password: Mapped[str] = mapped_column(String(255))  # bcrypt hash
    role: Mapped[str] = mapped_column(String(20), default="user")  # user | admin
    is_approved: Mapped[bool] = mapped_column(Boolean, default=False, server_default=false())

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"
