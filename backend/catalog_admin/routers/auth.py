from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from catalog_admin.db import get_db
from catalog_admin.models import AdminUser, UserRole, UserStatus
from catalog_admin.schemas.user import UserRegister, UserLogin, UserRead
from catalog_admin.security import hash_password, verify_password, token_for
from catalog_admin.deps.auth import get_current_user
from catalog_admin.repositories.user_repo import UserRepository

router = APIRouter(prefix="/auth", tags=["auth"])

@router.post("/register", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def register(payload: UserRegister, db: Session = Depends(get_db)):
    """Self sign-up always lands as a viewer; an admin promotes from the users page."""
    repo = UserRepository(db)
    if repo.get_by_email(payload.email):
        raise HTTPException(status_code=400, detail="email already registered")
    try:
        user = repo.create(
            email=payload.email,
            name=payload.name,
            password_hash=hash_password(payload.password),
            role=UserRole.viewer,
        )
    except ValueError as e:
        if str(e) == "email_already_exists":
            raise HTTPException(status_code=400, detail="email already registered")
        raise
    return user

@router.post("/login")
def login(payload: UserLogin, db: Session = Depends(get_db)):
    repo = UserRepository(db)
    user = repo.get_by_email(payload.email)
    if not user or not verify_password(payload.password, user.password_hash):
        raise HTTPException(status_code=401, detail="invalid credentials")
    if user.status != UserStatus.active:
        raise HTTPException(status_code=403, detail="Account suspended")
    return {"access_token": token_for(user), "token_type": "bearer"}

@router.get("/me", response_model=UserRead)
def me(current_user: AdminUser = Depends(get_current_user)):
    return current_user
