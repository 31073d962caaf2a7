"""Tag models.

`tags` is a small reference table loaded once into the in-memory tag
cache; `livestream_tags` links livestreams to tags.
"""

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from isupipe.stores.postgres import Base


class Tag(Base):
    """Reference tag (immutable after seeding)."""

    __tablename__ = "tags"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(255), unique=True)

    def __repr__(self) -> str:
        return f"<Tag {self.id}:{self.name}>"


class LivestreamTag(Base):
    __tablename__ = "livestream_tags"

    id: Mapped[int] = mapped_column(primary_key=True)
    livestream_id: Mapped[int] = mapped_column(ForeignKey("livestreams.id"), index=True)
    tag_id: Mapped[int] = mapped_column(ForeignKey("tags.id"), index=True)
