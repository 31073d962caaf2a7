"""SQLAlchemy ORM models.

Models represent database tables:
- users / themes: accounts and streamer theme
- tags / livestream_tags: reference tags and their livestream links
- livestreams / livestream_viewers_history: streams and who watched them
- reactions: emoji reactions on a livestream
- livecomments / livecomment_reports: comments (with tips) and spam reports
"""

from isupipe.models.user import Theme, User
from isupipe.models.tag import LivestreamTag, Tag
from isupipe.models.livestream import Livestream, LivestreamViewersHistory
from isupipe.models.reaction import Reaction
from isupipe.models.livecomment import Livecomment, LivecommentReport

__all__ = [
    "Livecomment",
    "LivecommentReport",
    "Livestream",
    "LivestreamTag",
    "LivestreamViewersHistory",
    "Reaction",
    "Tag",
    "Theme",
    "User",
]
