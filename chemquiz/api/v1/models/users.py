from typing import List, Optional

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from chemquiz.core.models import Base, BigId


class User(Base):
    """Someone who can hold access grants and take quizzes."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(BigId, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)
    banner_id: Mapped[int] = mapped_column(Integer, index=True, nullable=False)
    email: Mapped[Optional[str]] = mapped_column(String(255))

    grants: Mapped[List["UserAccess"]] = relationship(
        back_populates="user", cascade="all, delete-orphan", passive_deletes=True
    )

    def __repr__(self):
        return f"<User(id='{self.id}', banner_id='{self.banner_id}')>"
