from sqlalchemy import Column, Integer, String, DateTime, Float, ForeignKey
from sqlalchemy.sql import func
from tracker_app.database.connection import Base


class Location(Base):
    """A location sample reported by a visitor's browser"""
    __tablename__ = "locations"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    link_id = Column(Integer, ForeignKey("tracking_links.id"), nullable=False, index=True)
    ip_address = Column(String, nullable=True)  # Peer address, or the raw X-Forwarded-For header
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)
    accuracy = Column(Float, nullable=True)  # Meters
    timestamp = Column(DateTime, server_default=func.now())

    def __repr__(self):
        return f"<Location {self.id} for link {self.link_id}>"
