from typing import List, Optional

from sqlalchemy import ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from chemquiz.core.models import Base, BigId


class Access(Base):
    """A named capability, e.g. 'CreateQuestions'."""
    __tablename__ = "access"

    id: Mapped[int] = mapped_column(BigId, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), unique=True, index=True, nullable=False)
    # Minimum level a grant must carry, if any.
    permission_level: Mapped[Optional[str]] = mapped_column(String(100))

    grants: Mapped[List["UserAccess"]] = relationship(
        back_populates="access", cascade="all, delete-orphan", passive_deletes=True
    )

    def __repr__(self):
        return f"<Access(name='{self.name}')>"


class UserAccess(Base):
    """A grant: user ``user_id`` holds access ``access_id``."""
    __tablename__ = "user_access"

    permission_id: Mapped[int] = mapped_column(BigId, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        BigId, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False
    )
    access_id: Mapped[int] = mapped_column(
        BigId, ForeignKey("access.id", ondelete="CASCADE"), index=True, nullable=False
    )
    permission_level: Mapped[Optional[str]] = mapped_column(String(100))

    __table_args__ = (
        # At most one live grant per (user, access) pair
        UniqueConstraint("user_id", "access_id", name="uq_user_access_user_access"),
    )

    user: Mapped["User"] = relationship(back_populates="grants")
    access: Mapped["Access"] = relationship(back_populates="grants")

    def __repr__(self):
        return f"<UserAccess(user_id='{self.user_id}', access_id='{self.access_id}')>"
