from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from tracker_app.database.connection import Base


class TrackingLink(Base):
    """
    A shareable tracking link.
    
    The token is the public handle used in /track/{token}; the id is only
    used by the management API.
    """
    __tablename__ = "tracking_links"
    # Emit SQLite AUTOINCREMENT so ids of deleted links are never handed out again
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    # unique=True is what rejects a colliding token on insert
    token = Column(String, unique=True, nullable=False, index=True)
    name = Column(String, nullable=True)
    tracking_id = Column(String, nullable=True, index=True)
    created_at = Column(DateTime, server_default=func.now())
    clicks = Column(Integer, nullable=False, default=0, server_default="0")
