"""User and theme models.

A user is both a viewer and (optionally) a streamer. Every user owns
exactly one theme row.
"""

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from isupipe.stores.postgres import Base


class User(Base):
    """Registered user."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True)

    # Login name, also used in URLs (/api/user/{username}/...)
    name: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    display_name: Mapped[str] = mapped_column(String(255))
    description: Mapped[str] = mapped_column(Text, default="")

    # bcrypt hash
    password: Mapped[str] = mapped_column(String(255))

    def __repr__(self) -> str:
        return f"<User {self.name}>"


class Theme(Base):
    """Per-user streamer theme."""

    __tablename__ = "themes"

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), unique=True, index=True)
    dark_mode: Mapped[bool] = mapped_column(default=False)

    def __repr__(self) -> str:
        return f"<Theme user={self.user_id} dark={self.dark_mode}>"
