"""
HTML rendering for the visit page.

The page lives in templates/visit.html as a string.Template. Values dropped
into HTML are escaped; values dropped into the script are JSON-encoded.
"""

import html
import json
from functools import lru_cache
from pathlib import Path
from string import Template
from typing import Optional

from tracker_app.config import settings

TEMPLATES_DIR = Path(__file__).parent / "templates"


@lru_cache()
def _load_template(name: str) -> Template:
    return Template((TEMPLATES_DIR / name).read_text(encoding="utf-8"))


def render_visit_page(link_name: Optional[str] = None) -> str:
    """
    Render the page returned by /track/{token}.
    
    The script asks the browser for a fresh, high-accuracy position. On
    success it replaces the current history entry with the same path plus
    lat/lng/acc, which is the request that records a location sample. On
    denial, timeout or missing geolocation support it shows a loading
    message and moves on to the fallback URL.
    """
    title = link_name or "Shared link"
    return _load_template("visit.html").safe_substitute(
        title=html.escape(title),
        site_name=html.escape(settings.app_name),
        fallback_url_js=json.dumps(settings.fallback_url),
        fallback_delay_ms=int(settings.fallback_delay_ms),
        geolocation_timeout_ms=int(settings.geolocation_timeout_ms),
    )
