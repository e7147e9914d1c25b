"""
Tests for path-to-page resolution and document titles.
"""

import pytest

from app.client.pages import find_job, find_post, resolve_page
from app.client.store import initial_state

SITE_TITLE = "Jobtica - Your Gateway to Government Jobs"


@pytest.fixture
def data():
    return initial_state()


class TestResolvePage:

    @pytest.mark.parametrize("path,name,title", [
        ("/", "home", SITE_TITLE),
        ("/blog", "blog", f"Blog | {SITE_TITLE}"),
        ("/preparation", "preparation", f"Exam Preparation | {SITE_TITLE}"),
        ("/privacy", "privacy", f"Privacy Policy | {SITE_TITLE}"),
        ("/terms", "terms", f"Terms & Conditions | {SITE_TITLE}"),
        ("/about", "about", f"About Us | {SITE_TITLE}"),
        ("/disclaimer", "disclaimer", f"Disclaimer | {SITE_TITLE}"),
        ("/CONTACT", "contact", f"Contact Us | {SITE_TITLE}"),
        ("/nowhere", "not-found", f"404 - Page Not Found | {SITE_TITLE}"),
    ])
    def test_static_routes(self, data, path, name, title):
        view = resolve_page(path, data, is_logged_in=False)

        assert view.name == name
        assert view.title == title

    def test_job_detail_keeps_slug(self, data):
        view = resolve_page("/job/Bank-Clerk-2024", data, is_logged_in=False)

        assert view.name == "job-detail"
        assert view.param == "Bank-Clerk-2024"
        assert view.title == f"Job Details | {SITE_TITLE}"

    def test_blog_detail(self, data):
        view = resolve_page("/blog/abc-123", data, is_logged_in=False)

        assert view.name == "blog-detail"
        assert view.param == "abc-123"

    @pytest.mark.parametrize("logged_in,name", [(True, "admin-panel"), (False, "admin-login")])
    def test_admin(self, data, logged_in, name):
        view = resolve_page("/admin/jobs", data, is_logged_in=logged_in)

        assert view.name == name
        assert view.title == f"Admin Panel | {SITE_TITLE}"

    def test_maintenance_mode_hides_public_pages_only(self, data):
        data["generalSettings"]["maintenanceMode"] = True

        assert resolve_page("/blog", data, is_logged_in=False).name == "maintenance"
        assert resolve_page("/job/x", data, is_logged_in=False).name == "maintenance"
        assert resolve_page("/admin", data, is_logged_in=False).name == "admin-login"

    def test_title_follows_seo_settings(self, data):
        data["seoSettings"]["global"]["siteTitle"] = "Naukri Hub"

        assert resolve_page("/about", data, is_logged_in=False).title == "About Us | Naukri Hub"


def test_find_job_by_slug(data):
    data["jobs"] = [{"id": "1", "title": "Bank  Clerk – 2024!"}, {"id": "2", "title": "Railway"}]

    assert find_job(data, "bank-clerk-2024")["id"] == "1"
    assert find_job(data, "missing") is None


def test_find_post_by_id(data):
    data["posts"] = [{"id": "p1", "title": "Result Out"}, {"id": "p2", "title": "Exam Notice"}]

    assert find_post(data, "p2")["title"] == "Exam Notice"
    assert find_post(data, "p3") is None
