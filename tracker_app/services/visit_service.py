"""
Visit handling for /track/{token}.

A visit always counts a click. It records a location sample only when the
request carries a valid lat/lng pair, which the visit page supplies on its
second request once the browser has granted geolocation.
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional

from sqlalchemy import update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from tracker_app.models import TrackingLink, Location

logger = logging.getLogger(__name__)


@dataclass
class ResolvedLink:
    """The parts of a tracking link a visit needs"""
    id: int
    name: Optional[str] = None


def parse_coordinate(raw: Optional[str]) -> Optional[float]:
    """Parse a query value as a finite float, or None if it isn't one"""
    if raw is None:
        return None
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value):
        return None
    return value


class VisitService:
    """
    Resolves tokens and records visit side effects.
    
    Click and location writes are fire-and-forget: a failure is rolled back
    and logged, never raised, so the visitor always gets the page.
    """
    
    def __init__(self, db: Session):
        self.db = db

    def resolve_token(self, token: str) -> Optional[ResolvedLink]:
        """Find the link for a token; database errors propagate"""
        link = self.db.query(TrackingLink).filter(TrackingLink.token == token).first()
        if not link:
            return None
        return ResolvedLink(id=link.id, name=link.name)

    def record_click(self, link_id: int) -> bool:
        """Increment the click counter in a single UPDATE statement"""
        try:
            self.db.execute(
                update(TrackingLink)
                .where(TrackingLink.id == link_id)
                .values(clicks=TrackingLink.clicks + 1)
            )
            self.db.commit()
            return True
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Error updating click count for link %s", link_id)
            return False

    def record_location(
        self,
        link_id: int,
        ip_address: Optional[str],
        latitude: float,
        longitude: float,
        accuracy: Optional[float] = None
    ) -> Optional[Location]:
        """Insert a location sample; returns None if the insert failed"""
        location = Location(
            link_id=link_id,
            ip_address=ip_address,
            latitude=latitude,
            longitude=longitude,
            accuracy=accuracy,
        )
        try:
            self.db.add(location)
            self.db.commit()
            return location
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Error saving location for link %s", link_id)
            return None

    def visit(
        self,
        token: str,
        ip_address: Optional[str] = None,
        lat: Optional[str] = None,
        lng: Optional[str] = None,
        acc: Optional[str] = None
    ) -> Optional[ResolvedLink]:
        """
        Handle one visit to a tracking link.
        
        Returns the resolved link, or None if the token is unknown (in which
        case nothing is recorded). Raw query strings are parsed here;
        anything that isn't a finite number counts as absent.
        """
        link = self.resolve_token(token)
        if link is None:
            return None

        self.record_click(link.id)

        latitude = parse_coordinate(lat)
        longitude = parse_coordinate(lng)
        if latitude is not None and longitude is not None:
            location = self.record_location(
                link.id,
                ip_address,
                latitude,
                longitude,
                parse_coordinate(acc),
            )
            if location is not None:
                logger.info("Location recorded for link %s", link.id)

        return link
