"""SQLAlchemy model for the users table."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from groupkeeper.infrastructure.persistence.database import Base


class UserModel(Base):
    """SQLAlchemy model for the users table.

    User lifecycle is managed elsewhere; only the id is used here.
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        comment="User email address",
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email})>"
