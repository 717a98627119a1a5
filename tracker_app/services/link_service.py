import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from tracker_app.models import TrackingLink, Location
from tracker_app.schemas.link import LinkDetail, LinkResponse, LocationResponse
from tracker_app.services.token_factory import TokenFactory
from tracker_app.services.token_strategies import TokenStrategy

logger = logging.getLogger(__name__)


class LinkService:
    """
    CRUD operations over tracking links and their location samples.
    
    The database session is injected; the token strategy comes from the
    factory unless one is passed in (tests pass a fixed one to force
    collisions).
    
    Methods are synchronous: routes calling them are plain `def`, so
    FastAPI runs them in its threadpool.
    
    Storage errors are not caught here beyond rolling the session back:
    they propagate to the application's SQLAlchemyError handler.
    """
    
    def __init__(self, db: Session, token_strategy: Optional[TokenStrategy] = None):
        self.db = db
        self.token_strategy = token_strategy or TokenFactory.create_strategy()

    def create_link(self, name: Optional[str], tracking_id: Optional[str]) -> TrackingLink:
        """Create a new tracking link with a fresh token and zero clicks
        
        A token collision is rejected by the UNIQUE constraint and raised
        as IntegrityError; there is no retry.
        """
        link = TrackingLink(
            token=self.token_strategy.generate(),
            name=name,
            tracking_id=tracking_id,
            clicks=0,
        )
        self.db.add(link)
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        self.db.refresh(link)
        logger.info("Created tracking link %s (id=%s)", link.token, link.id)
        return link

    def list_links(self) -> List[TrackingLink]:
        """All links, newest first"""
        return (
            self.db.query(TrackingLink)
            .order_by(TrackingLink.created_at.desc(), TrackingLink.id.desc())
            .all()
        )

    def get_link(self, link_id: int) -> Optional[LinkDetail]:
        """Get a link together with its location samples, or None"""
        link = self.db.query(TrackingLink).filter(TrackingLink.id == link_id).first()
        if not link:
            return None

        locations = self.list_locations(link_id)
        return LinkDetail(
            **LinkResponse.model_validate(link).model_dump(),
            locations=[LocationResponse.model_validate(loc) for loc in locations],
        )

    def list_locations(self, link_id: int) -> List[Location]:
        """Location samples for a link, newest first (empty if the link doesn't exist)"""
        return (
            self.db.query(Location)
            .filter(Location.link_id == link_id)
            .order_by(Location.timestamp.desc(), Location.id.desc())
            .all()
        )

    def search_links(self, tracking_id: str) -> List[TrackingLink]:
        """
        Links whose tracking_id contains the given substring.
        
        Matching is a SQL LIKE, so case sensitivity follows the database
        (SQLite: case-insensitive for ASCII).
        """
        return (
            self.db.query(TrackingLink)
            .filter(TrackingLink.tracking_id.contains(tracking_id))
            .order_by(TrackingLink.created_at.desc(), TrackingLink.id.desc())
            .all()
        )

    def delete_link(self, link_id: int) -> None:
        """
        Delete a link and all of its location samples.
        
        Both deletes are committed together. Deleting an id that doesn't
        exist is not an error.
        """
        try:
            self.db.query(Location).filter(Location.link_id == link_id).delete(synchronize_session=False)
            self.db.query(TrackingLink).filter(TrackingLink.id == link_id).delete(synchronize_session=False)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        logger.info("Deleted tracking link id=%s", link_id)
