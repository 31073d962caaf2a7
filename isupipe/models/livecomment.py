"""Live comment and spam report models.

A live comment may carry a tip; tips feed the statistics ranking score.
"""

from sqlalchemy import BigInteger, ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column

from isupipe.stores.postgres import Base


class Livecomment(Base):
    __tablename__ = "livecomments"

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), index=True)
    livestream_id: Mapped[int] = mapped_column(ForeignKey("livestreams.id"), index=True)
    comment: Mapped[str] = mapped_column(Text)
    tip: Mapped[int] = mapped_column(BigInteger, default=0)
    created_at: Mapped[int] = mapped_column(BigInteger)


class LivecommentReport(Base):
    """Spam report filed against a live comment."""

    __tablename__ = "livecomment_reports"

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"))
    livestream_id: Mapped[int] = mapped_column(ForeignKey("livestreams.id"), index=True)
    livecomment_id: Mapped[int] = mapped_column(ForeignKey("livecomments.id"))
    created_at: Mapped[int] = mapped_column(BigInteger)
