import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from rental_manager.core.database import get_db
from rental_manager.core.security import create_access_token, hash_password, verify_password
from rental_manager.models.user import User
from rental_manager.schemas.auth import LoginRequest, LoginResponse, RegisterRequest
from rental_manager.schemas.common import MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.post("/register", response_model=MessageResponse, status_code=201)
async def register(payload: RegisterRequest, db: AsyncSession = Depends(get_db)):
    # Uniqueness is left to the unique index on users.email.
    db.add(User(
        email=payload.email,
        password=hash_password(payload.password),
        role="user",
        is_approved=False,
    ))
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Email already exists",
        )

    logger.info("Registered %s, awaiting approval", payload.email)
    return {"message": "User registered successfully. Your account is awaiting admin approval."}


@router.post("/login", response_model=LoginResponse)
async def login(payload: LoginRequest, db: AsyncSession = Depends(get_db)):
    result = await db.execute(select(User).where(User.email == payload.email))
    user = result.scalar_one_or_none()

    # One message for both cases so the response does not reveal which emails exist.
    if user is None or not verify_password(payload.password, user.password):
        logger.warning("Failed login for %s", payload.email)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid credentials",
        )

    if not user.is_approved:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Your account is awaiting admin approval.",
        )

    token = create_access_token(user.id, user.email, user.is_admin)
    return LoginResponse(token=token, is_admin=user.is_admin)
