"""
Ownership-scoped data access shared by the resource routers.

Every model handled here has ``id`` and ``user_id`` columns. Mutations filter
on both in a single statement, so "does not exist" and "belongs to someone
else" both come back as zero affected rows.
"""
from typing import Any

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession


async def list_owned(db: AsyncSession, model: Any, owner_id: int) -> list:
    result = await db.execute(
        select(model).where(model.user_id == owner_id).order_by(model.id)
    )
    return list(result.scalars().all())


async def list_all(db: AsyncSession, model: Any) -> list:
    result = await db.execute(select(model).order_by(model.id))
    return list(result.scalars().all())


async def create_owned(db: AsyncSession, model: Any, owner_id: int, fields: dict) -> int:
    """Insert one row owned by ``owner_id`` and return its generated id."""
    row = model(user_id=owner_id, **fields)
    db.add(row)
    await db.flush()
    return row.id


async def scoped_update(
    db: AsyncSession, model: Any, row_id: int, owner_id: int, fields: dict
) -> int:
    """Replace ``fields`` on the row matching id AND owner. Returns rows affected."""
    result = await db.execute(
        update(model)
        .where(model.id == row_id, model.user_id == owner_id)
        .values(**fields)
        .execution_options(synchronize_session=False)
    )
    return result.rowcount


async def scoped_delete(db: AsyncSession, model: Any, row_id: int, owner_id: int) -> int:
    result = await db.execute(
        delete(model)
        .where(model.id == row_id, model.user_id == owner_id)
        .execution_options(synchronize_session=False)
    )
    return result.rowcount
