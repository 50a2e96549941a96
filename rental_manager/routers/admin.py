import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from rental_manager.core.database import get_db
from rental_manager.core.deps import require_admin
from rental_manager.models.user import User
from rental_manager.schemas.auth import PendingUsersResponse, TokenClaims
from rental_manager.schemas.common import MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin/users", tags=["admin"])


@router.get("/pending", response_model=PendingUsersResponse)
async def list_pending_users(
    admin: TokenClaims = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    result = await db.execute(
        select(User).where(User.is_approved.is_(False)).order_by(User.id)
    )
    return {"users": result.scalars().all()}


@router.post("/{user_id}/approve", response_model=MessageResponse)
async def approve_user(
    user_id: int,
    admin: TokenClaims = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    result = await db.execute(
        update(User).where(User.id == user_id).values(is_approved=True)
    )
    if result.rowcount == 0:
        raise HTTPException(status_code=404, detail="User not found.")
    await db.commit()
    logger.info("User %s approved by %s", user_id, admin.email)
    return {"message": "User approved successfully."}


@router.delete("/{user_id}/deny", response_model=MessageResponse)
async def deny_user(
    user_id: int,
    admin: TokenClaims = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    """Denial deletes the account; there is no retained rejected state."""
    result = await db.execute(delete(User).where(User.id == user_id))
    if result.rowcount == 0:
        raise HTTPException(status_code=404, detail="User not found.")
    await db.commit()
    logger.info("User %s denied and deleted by %s", user_id, admin.email)
    return {"message": "User denied and deleted successfully."}
