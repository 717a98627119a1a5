import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError
from tracker_app.services.visit_service import VisitService
from tracker_app.dependencies import get_visit_service
from tracker_app.pages import render_visit_page
from tracker_app.config import settings

logger = logging.getLogger(__name__)

router = APIRouter(tags=["track"])


def get_client_ip(request: Request) -> Optional[str]:
    """
    Best-effort caller address.
    
    With trust_forwarded_for enabled the X-Forwarded-For header is stored
    exactly as received, every hop included, without checking which proxy
    set it.
    """
    if settings.trust_forwarded_for:
        forwarded = request.headers.get("x-forwarded-for")
        if forwarded:
            return forwarded
    return request.client.host if request.client else None


@router.get("/track/{token}", name="track_visit")
def track_visit(
    token: str,
    request: Request,
    lat: Optional[str] = None,
    lng: Optional[str] = None,
    acc: Optional[str] = None,
    visit_service: VisitService = Depends(get_visit_service)
):
    """Count a visit and serve the location page (errors are plain text)"""
    try:
        link = visit_service.visit(
            token,
            ip_address=get_client_ip(request),
            lat=lat,
            lng=lng,
            acc=acc,
        )
    except SQLAlchemyError:
        logger.exception("Error resolving tracking token %s", token)
        return PlainTextResponse("Server error", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    if link is None:
        return PlainTextResponse("Tracking link not found", status_code=status.HTTP_404_NOT_FOUND)

    return HTMLResponse(
        content=render_visit_page(link.name),
        headers={"Cache-Control": "no-store"},
    )
