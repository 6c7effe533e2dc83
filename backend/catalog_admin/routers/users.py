from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session
from catalog_admin.db import get_db
from catalog_admin.deps.auth import require_admin
from catalog_admin.models import AdminUser
from catalog_admin.repositories.user_repo import UserRepository
from catalog_admin.routers.common import PageQuery, SearchQuery, table_page
from catalog_admin.schemas.table import TablePage
from catalog_admin.schemas.user import UserCreate, UserRead, UserUpdate

router = APIRouter(prefix="/users", tags=["users"], dependencies=[Depends(require_admin)])

SEARCH_FIELDS = ("name", "email", "role", "status")

def not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

@router.get("", response_model=TablePage[UserRead])
def list_users(q: str = SearchQuery, page: int = PageQuery, db: Session = Depends(get_db)):
    return table_page(UserRead, UserRepository(db).rows(), q=q, page=page, fields=SEARCH_FIELDS)

@router.get("/all", response_model=list[UserRead])
def all_users(db: Session = Depends(get_db)):
    return UserRepository(db).rows()

@router.get("/{user_id}", response_model=UserRead)
def get_user(user_id: int, db: Session = Depends(get_db)):
    user = UserRepository(db).get(user_id)
    if not user:
        raise not_found()
    return user

# Accounts made here have no password until one is set out of band
@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def create_user(payload: UserCreate, db: Session = Depends(get_db)):
    repo = UserRepository(db)
    if repo.get_by_email(payload.email):
        raise HTTPException(status_code=400, detail="email already registered")
    try:
        user = repo.create(email=payload.email, name=payload.name,
                           role=payload.role, status=payload.status)
    except ValueError as e:
        if str(e) == "email_already_exists":
            raise HTTPException(status_code=400, detail="email already registered")
        raise
    return user

@router.put("/{user_id}", response_model=UserRead)
def update_user(
    user_id: int,
    payload: UserUpdate,
    db: Session = Depends(get_db),
    current_user: AdminUser = Depends(require_admin),
):
    if user_id == current_user.id and payload.role != current_user.role:
        raise HTTPException(status_code=400, detail="cannot change your own role")
    user = UserRepository(db).update(user_id, **payload.model_dump())
    if not user:
        raise not_found()
    return user

@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: AdminUser = Depends(require_admin),
):
    if user_id == current_user.id:
        raise HTTPException(status_code=400, detail="cannot delete your own account")
    if not UserRepository(db).delete(user_id):
        raise not_found()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
