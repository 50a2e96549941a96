import logging

from sqlalchemy import select

from rental_manager.core.config import settings
from rental_manager.core.database import async_session_maker, init_db
from rental_manager.core.security import hash_password
from rental_manager.models.user import User

logger = logging.getLogger(__name__)


async def seed_admin() -> bool:
    """Insert the approved admin account if its email is not taken. Returns True if created."""
    async with async_session_maker() as db:
        existing = await db.execute(select(User.id).where(User.email == settings.admin_email))
        if existing.scalar_one_or_none() is not None:
            return False

        db.add(User(
            email=settings.admin_email,
            password=hash_password(settings.admin_password),
            role="admin",
            is_approved=True,
        ))
        await db.commit()
    logger.info("Admin user %s created", settings.admin_email)
    return True


async def bootstrap() -> None:
    await init_db()
    logger.info("Database ready at %s", settings.database_path)
    await seed_admin()
