from tracker_app.config import settings
from tracker_app.pages import render_visit_page


class TestVisitPage:

    def test_geolocation_options(self):
        page = render_visit_page("promo")

        assert "enableHighAccuracy: true" in page
        assert "timeout: 5000" in page
        assert "maximumAge: 0" in page

    def test_success_replaces_location_with_coordinates(self):
        page = render_visit_page()

        assert "window.location.replace(" in page
        assert "'?lat='" in page
        assert "'&lng='" in page
        assert "'&acc='" in page

    def test_fallback_navigation(self, monkeypatch):
        monkeypatch.setattr(settings, "fallback_url", "https://example.org/landing")
        monkeypatch.setattr(settings, "fallback_delay_ms", 1500)

        page = render_visit_page()

        assert 'var fallbackUrl = "https://example.org/landing";' in page
        assert "}, 1500);" in page
        assert "Loading..." in page

    def test_preview_metadata(self):
        page = render_visit_page("Spring promo")

        assert '<meta property="og:title" content="Spring promo">' in page
        assert f'<meta property="og:site_name" content="{settings.app_name}">' in page
        assert '<meta name="twitter:card" content="summary">' in page

    def test_default_title(self):
        page = render_visit_page()
        assert "<title>Shared link</title>" in page

    def test_no_unfilled_placeholders(self):
        page = render_visit_page("promo")
        assert "$" not in page

    def test_redirect_uses_current_path(self):
        page = render_visit_page("promo")
        assert "window.location.pathname" in page
        assert "data-token" not in page
