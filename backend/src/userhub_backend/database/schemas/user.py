"""User database schema."""

from datetime import datetime
from uuid import uuid4

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column

from userhub_backend.database.base import BaseSchema

USER_ID_LENGTH = 36
USER_TEXT_LENGTH = 255


def generate_user_id() -> str:
    """Return a fresh opaque identifier for a user row."""
    return str(uuid4())


class UserSchema(BaseSchema):
    """SQLAlchemy model for stored users."""

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(
        String(USER_ID_LENGTH), primary_key=True, default=generate_user_id
    )
    name: Mapped[str] = mapped_column(String(USER_TEXT_LENGTH), nullable=False)
    email: Mapped[str] = mapped_column(
        String(USER_TEXT_LENGTH), nullable=False, index=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"UserSchema(id={self.id!r}, name={self.name!r}, email={self.email!r})"
