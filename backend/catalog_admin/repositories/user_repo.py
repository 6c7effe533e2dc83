# catalog_admin/repositories/user_repo.py
from __future__ import annotations
from typing import Any, Optional

from sqlalchemy import select, func
from sqlalchemy.exc import IntegrityError

from catalog_admin.models import AdminUser, UserRole, UserStatus
from catalog_admin.repositories.base import CatalogRepository

class UserRepository(CatalogRepository[AdminUser]):
    model = AdminUser
    columns = ("id", "name", "email", "role", "status", "created_at")

    # READS
    def get_by_email(self, email: str) -> Optional[AdminUser]:
        stmt = select(AdminUser).where(func.lower(AdminUser.email) == email.lower())
        return self.db.execute(stmt).scalar_one_or_none()

    # WRITES
    def create(
        self,
        *,
        email: str,
        name: str,
        password_hash: str = "",
        role: UserRole | str = UserRole.viewer,
        status: UserStatus | str = UserStatus.active,
    ) -> AdminUser:
        user = AdminUser(email=email, name=name, password_hash=password_hash, role=role, status=status)
        try:
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)
            return user
        except IntegrityError:
            self.db.rollback()
            # Re-raise a clean marker your router can map to 400
            raise ValueError("email_already_exists")

    def update(self, item_id: Any, **values: Any) -> Optional[AdminUser]:
        """Name, role and status; email is fixed once registered."""
        values.pop("email", None)
        return super().update(item_id, **values)

    def set_role(self, user_id: int, *, role: UserRole | str) -> Optional[AdminUser]:
        """Use from an admin-only route; DB enum validates role values."""
        return self.update(user_id, role=role)
