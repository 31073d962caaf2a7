"""Reaction model (emoji reactions on a livestream)."""

from sqlalchemy import BigInteger, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from isupipe.stores.postgres import Base


class Reaction(Base):
    __tablename__ = "reactions"

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), index=True)
    livestream_id: Mapped[int] = mapped_column(ForeignKey("livestreams.id"), index=True)
    emoji_name: Mapped[str] = mapped_column(String(255))
    created_at: Mapped[int] = mapped_column(BigInteger, index=True)

    def __repr__(self) -> str:
        return f"<Reaction {self.id} {self.emoji_name} on {self.livestream_id}>"
