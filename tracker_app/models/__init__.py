"""
Database models for the link tracker.

Two tables: tracking_links (one row per shareable link) and locations
(browser-reported samples recorded on visits).
"""

from .link import TrackingLink
from .location import Location

__all__ = ["TrackingLink", "Location"]
