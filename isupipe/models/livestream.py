"""Livestream models.

Times are stored as unix epoch seconds, the same shape the API returns.
"""

from sqlalchemy import BigInteger, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from isupipe.stores.postgres import Base


class Livestream(Base):
    """A scheduled or running livestream owned by a user."""

    __tablename__ = "livestreams"

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), index=True)

    title: Mapped[str] = mapped_column(String(255))
    description: Mapped[str] = mapped_column(Text, default="")
    playlist_url: Mapped[str] = mapped_column(String(255))
    thumbnail_url: Mapped[str] = mapped_column(String(255))

    start_at: Mapped[int] = mapped_column(BigInteger)
    end_at: Mapped[int] = mapped_column(BigInteger)

    def __repr__(self) -> str:
        return f"<Livestream {self.id} {self.title!r}>"


class LivestreamViewersHistory(Base):
    """One row per viewer entering a livestream."""

    __tablename__ = "livestream_viewers_history"

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), index=True)
    livestream_id: Mapped[int] = mapped_column(ForeignKey("livestreams.id"), index=True)
    created_at: Mapped[int] = mapped_column(BigInteger)
