"""
Tests for the client-side data store, driven through the real API via
the FastAPI test client.
"""

import httpx
import pytest

from app.client.store import PortalAPIError, PortalDataStore, SERVER_ERROR_MESSAGE
from conftest import ADMIN_PASSWORD, ADMIN_USERNAME


@pytest.fixture
def store(client):
    return PortalDataStore(client)


@pytest.fixture
def admin_store(admin_client):
    store = PortalDataStore(admin_client)
    store.refresh()
    return store


class TestSnapshot:

    def test_initial_state_is_complete(self, store):
        assert store.state["jobs"] == []
        assert store.state["seoSettings"]["global"]["siteTitle"]

    def test_refresh_loads_server_data(self, store):
        state = store.refresh()

        assert state["subscribers"] == []
        assert "adSettings" in state


class TestMutators:

    def test_add_job_refetches(self, admin_store, sample_job_data):
        created = admin_store.add_job(sample_job_data)

        assert [job["id"] for job in admin_store["jobs"]] == [created["id"]]

    def test_bulk_jobs(self, admin_store, sample_job_data):
        created = admin_store.add_multiple_jobs([sample_job_data, dict(sample_job_data, title="Second")])
        assert len(admin_store["jobs"]) == 2

        admin_store.delete_multiple_jobs([job["id"] for job in created])
        assert admin_store["jobs"] == []

    def test_error_surfaces_server_message(self, admin_store):
        with pytest.raises(PortalAPIError) as exc_info:
            admin_store.delete_quick_link("never-issued")

        assert exc_info.value.status_code == 404
        assert exc_info.value.message == "Quick Link with ID never-issued not found."

    def test_add_subscriber_reports_instead_of_raising(self, store):
        assert store.add_subscriber("reader@example.com") == (True, "Thank you for subscribing!")

        success, message = store.add_subscriber("reader@example.com")

        assert success is False
        assert message == "This email is already subscribed."

    def test_track_click_does_not_refetch(self, admin_store):
        ad = admin_store.add_sponsored_ad({"imageUrl": "https://x/ad.png", "destinationUrl": "https://x"})

        admin_store.track_sponsored_ad_click(ad["id"])

        assert admin_store["sponsoredAds"][0]["clicks"] == 0
        assert admin_store.refresh()["sponsoredAds"][0]["clicks"] == 1

    def test_login_through_store(self, store, admin_user):
        store.login(ADMIN_USERNAME, ADMIN_PASSWORD)

        assert store.auth_status()["isLoggedIn"] is True
        store.add_upcoming_exam({"name": "UPSC CSE", "deadline": "2025-02-11", "notificationLink": "https://upsc"})
        assert store["upcomingExams"][0]["name"] == "UPSC CSE"


class TestToggleAdTest:

    def test_toggle_on_and_off(self, admin_store):
        admin_store.toggle_ad_test("headerAd")
        assert admin_store["adSettings"]["activeTests"] == ["headerAd"]

        admin_store.toggle_ad_test("headerAd")
        assert admin_store["adSettings"]["activeTests"] == []

    def test_unknown_placement(self, admin_store):
        with pytest.raises(ValueError):
            admin_store.toggle_ad_test("popupAd")

    def test_failed_write_restores_server_state(self, store):
        """Anonymous callers cannot write settings; the local patch is undone"""
        store.refresh()

        with pytest.raises(PortalAPIError) as exc_info:
            store.toggle_ad_test("footerAd")

        assert exc_info.value.status_code == 401
        assert store["adSettings"]["activeTests"] == []


class TestServerErrors:

    def test_5xx_gets_generic_message(self):
        def handler(request):
            return httpx.Response(500, json={"message": "psycopg2 stack trace"})

        http = httpx.Client(transport=httpx.MockTransport(handler), base_url="http://portal")
        store = PortalDataStore(http)

        with pytest.raises(PortalAPIError) as exc_info:
            store.refresh()

        assert exc_info.value.status_code == 500
        assert exc_info.value.message == SERVER_ERROR_MESSAGE
        assert store.loading is False
