"""
FastAPI dependencies for dependency injection.

Services are built per request around the request's database session.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from tracker_app.database.connection import get_db
from tracker_app.services.link_service import LinkService
from tracker_app.services.visit_service import VisitService


def get_link_service(db: Session = Depends(get_db)) -> LinkService:
    """Get LinkService with its session injected"""
    return LinkService(db=db)


def get_visit_service(db: Session = Depends(get_db)) -> VisitService:
    """Get VisitService with its session injected"""
    return VisitService(db=db)
