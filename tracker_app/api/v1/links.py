from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, status
from tracker_app.schemas.link import (
    LinkCreate,
    LinkCreated,
    LinkDetail,
    LinkResponse,
    LocationResponse,
    MessageResponse,
)
from tracker_app.services.link_service import LinkService
from tracker_app.dependencies import get_link_service
from tracker_app.config import settings

router = APIRouter(prefix="/links", tags=["links"])


def build_visit_url(request: Request, token: str) -> str:
    """Public URL of /track/{token}, from settings or from the incoming request"""
    if settings.public_base_url:
        return f"{settings.public_base_url.rstrip('/')}/track/{token}"
    return str(request.url_for("track_visit", token=token))


@router.post("", response_model=LinkCreated)
def create_link(
    link_data: LinkCreate,
    request: Request,
    link_service: LinkService = Depends(get_link_service)
):
    """Create a new tracking link"""
    link = link_service.create_link(link_data.name, link_data.tracking_id)
    return LinkCreated(
        **LinkResponse.model_validate(link).model_dump(),
        url=build_visit_url(request, link.token),
    )


@router.get("", response_model=List[LinkResponse])
def list_links(link_service: LinkService = Depends(get_link_service)):
    """List all tracking links, newest first"""
    return link_service.list_links()


# Declared before /{link_id} routes so "search" is never parsed as an id
@router.get("/search/{tracking_id}", response_model=List[LinkResponse])
def search_links(
    tracking_id: str,
    link_service: LinkService = Depends(get_link_service)
):
    """Find links whose tracking id contains the given text"""
    return link_service.search_links(tracking_id)


@router.get("/{link_id}", response_model=LinkDetail)
def get_link(
    link_id: int,
    link_service: LinkService = Depends(get_link_service)
):
    """Get a tracking link with its recorded locations"""
    link = link_service.get_link(link_id)
    if not link:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Link not found"
        )
    return link


@router.get("/{link_id}/locations", response_model=List[LocationResponse])
def list_locations(
    link_id: int,
    link_service: LinkService = Depends(get_link_service)
):
    """List recorded locations for a link"""
    return link_service.list_locations(link_id)


@router.delete("/{link_id}", response_model=MessageResponse)
def delete_link(
    link_id: int,
    link_service: LinkService = Depends(get_link_service)
):
    """Delete a tracking link and its locations"""
    link_service.delete_link(link_id)
    return MessageResponse(message="Link deleted successfully")
