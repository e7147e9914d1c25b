"""
Client-side data store for the portal API.

Holds one snapshot of GET /api/data and keeps it fresh: every mutator calls
the API and then refetches the whole snapshot, so the state is always what
the server has. Works over any httpx.Client (a FastAPI TestClient included);
cookies set by /api/auth are kept on the client between calls.
"""

import copy
import logging
from typing import Any, Dict, List, Optional, Tuple

import httpx

from app.schemas.settings import PLACEMENT_KEYS, default_settings

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = "The server encountered an error. Please try again later."

COLLECTION_KEYS = (
    "jobs", "quickLinks", "posts", "breakingNews", "sponsoredAds",
    "preparationCourses", "preparationBooks", "upcomingExams",
    "subscribers", "activityLogs", "contacts", "emailNotifications",
    "customEmails", "emailTemplates",
)


class PortalAPIError(Exception):
    """Non-2xx response from the portal API."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


def initial_state() -> Dict[str, Any]:
    """Complete state for a fresh install: default settings, empty collections."""
    state = default_settings()
    for key in COLLECTION_KEYS:
        state[key] = []
    return state


class PortalDataStore:
    """
    Snapshot of the site data plus the mutations the admin panel performs.

    Args:
        http_client: Client pointed at the portal (base_url set)
        api_prefix: Path prefix of the API routes
    """

    def __init__(self, http_client: httpx.Client, api_prefix: str = "/api"):
        self.http = http_client
        self.api_prefix = api_prefix
        self.state: Dict[str, Any] = initial_state()
        self.loading = False

    # --- Transport ---

    def _request(self, method: str, path: str, json: Any = None) -> Any:
        """
        Call the API and decode the JSON body.

        Returns:
            Decoded body, or None for an empty (204) response

        Raises:
            PortalAPIError: Non-2xx status
        """
        response = self.http.request(method, f"{self.api_prefix}{path}", json=json)

        if response.status_code >= 400:
            raise self._error_for(response)

        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    def _error_for(self, response: httpx.Response) -> PortalAPIError:
        if response.status_code >= 500:
            logger.error(f"Portal API {response.status_code}: {response.text}")
            return PortalAPIError(response.status_code, SERVER_ERROR_MESSAGE)

        try:
            message = response.json().get("message")
        except ValueError:
            message = None
        return PortalAPIError(response.status_code, message or response.reason_phrase)

    def _mutate(self, method: str, path: str, json: Any = None) -> Any:
        """Perform a write, then refetch the snapshot."""
        result = self._request(method, path, json=json)
        self.refresh()
        return result

    # --- Snapshot ---

    def refresh(self) -> Dict[str, Any]:
        """Reload /api/data over the complete default state."""
        self.loading = True
        try:
            data = self._request("GET", "/data") or {}
        finally:
            self.loading = False

        state = initial_state()
        state.update(data)
        self.state = state
        return self.state

    def __getitem__(self, key: str) -> Any:
        return self.state[key]

    # --- Auth ---

    def auth_status(self) -> Dict[str, Any]:
        return self._request("GET", "/auth/status")

    def login(self, username: str, password: str) -> Dict[str, Any]:
        return self._mutate("POST", "/auth", {"action": "login", "username": username, "password": password})

    def login_demo(self) -> Dict[str, Any]:
        return self._mutate("POST", "/auth", {"action": "login", "isDemo": True})

    def logout(self) -> Dict[str, Any]:
        return self._mutate("POST", "/auth", {"action": "logout"})

    # --- Jobs ---

    def add_job(self, job: Dict[str, Any]) -> Dict[str, Any]:
        return self._mutate("POST", "/content/jobs", job)

    def add_multiple_jobs(self, jobs: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        return self._mutate("POST", "/content/jobs", jobs)

    def update_job(self, job: Dict[str, Any]) -> Dict[str, Any]:
        return self._mutate("PUT", "/content/jobs", job)

    def delete_job(self, job_id: str) -> None:
        self._mutate("DELETE", "/content/jobs", {"id": job_id})

    def delete_multiple_jobs(self, job_ids: List[str]) -> None:
        self._mutate("DELETE", "/content/jobs", {"ids": job_ids})

    # --- Posts ---

    def add_post(self, post: Dict[str, Any]) -> Dict[str, Any]:
        return self._mutate("POST", "/content/posts", post)

    def update_post(self, post: Dict[str, Any]) -> Dict[str, Any]:
        return self._mutate("PUT", "/content/posts", post)

    def delete_post(self, post_id: str) -> None:
        self._mutate("DELETE", "/content/posts", {"id": post_id})

    def delete_multiple_posts(self, post_ids: List[str]) -> None:
        self._mutate("DELETE", "/content/posts", {"ids": post_ids})

    # --- Breaking news, quick links, exams ---

    def add_breaking_news(self, item: Dict[str, Any]) -> Dict[str, Any]:
        return self._mutate("POST", "/content/breaking-news", item)

    def update_breaking_news(self, item: Dict[str, Any]) -> Dict[str, Any]:
        return self._mutate("PUT", "/content/breaking-news", item)

    def delete_breaking_news(self, item_id: str) -> None:
        self._mutate("DELETE", "/content/breaking-news", {"id": item_id})

    def add_quick_link(self, link: Dict[str, Any]) -> Dict[str, Any]:
        return self._mutate("POST", "/content/quick-links", link)

    def update_quick_link(self, link: Dict[str, Any]) -> Dict[str, Any]:
        return self._mutate("PUT", "/content/quick-links", link)

    def delete_quick_link(self, link_id: str) -> None:
        self._mutate("DELETE", "/content/quick-links", {"id": link_id})

    def add_upcoming_exam(self, exam: Dict[str, Any]) -> Dict[str, Any]:
        return self._mutate("POST", "/content/upcoming-exams", exam)

    def update_upcoming_exam(self, exam: Dict[str, Any]) -> Dict[str, Any]:
        return self._mutate("PUT", "/content/upcoming-exams", exam)

    def delete_upcoming_exam(self, exam_id: str) -> None:
        self._mutate("DELETE", "/content/upcoming-exams", {"id": exam_id})

    # --- Preparation ---

    def add_preparation_book(self, book: Dict[str, Any]) -> Dict[str, Any]:
        return self._mutate("POST", "/preparation/books", book)

    def update_preparation_book(self, book: Dict[str, Any]) -> Dict[str, Any]:
        return self._mutate("PUT", "/preparation/books", book)

    def delete_preparation_book(self, book_id: str) -> None:
        self._mutate("DELETE", "/preparation/books", {"id": book_id})

    def add_preparation_course(self, course: Dict[str, Any]) -> Dict[str, Any]:
        return self._mutate("POST", "/preparation/courses", course)

    def update_preparation_course(self, course: Dict[str, Any]) -> Dict[str, Any]:
        return self._mutate("PUT", "/preparation/courses", course)

    def delete_preparation_course(self, course_id: str) -> None:
        self._mutate("DELETE", "/preparation/courses", {"id": course_id})

    # --- Audience ---

    def add_subscriber(self, email: str) -> Tuple[bool, str]:
        """
        Newsletter signup for the public site.

        Returns:
            (success, message) instead of raising, for inline form feedback
        """
        try:
            self._request("POST", "/audience/subscribers", {"email": email})
        except PortalAPIError as e:
            return False, e.message
        self.refresh()
        return True, "Thank you for subscribing!"

    def delete_subscriber(self, subscriber_id: str) -> None:
        self._mutate("DELETE", "/audience/subscribers", {"id": subscriber_id})

    def add_contact(self, submission: Dict[str, Any]) -> Dict[str, Any]:
        return self._mutate("POST", "/audience/contacts", submission)

    def delete_contact(self, contact_id: str) -> None:
        self._mutate("DELETE", "/audience/contacts", {"id": contact_id})

    # --- Marketing ---

    def add_sponsored_ad(self, ad: Dict[str, Any]) -> Dict[str, Any]:
        return self._mutate("POST", "/marketing/sponsored-ads", ad)

    def update_sponsored_ad(self, ad: Dict[str, Any]) -> Dict[str, Any]:
        return self._mutate("PUT", "/marketing/sponsored-ads", ad)

    def delete_sponsored_ad(self, ad_id: str) -> None:
        self._mutate("DELETE", "/marketing/sponsored-ads", {"id": ad_id})

    def track_sponsored_ad_click(self, ad_id: str) -> None:
        """Fire-and-forget counter bump; the snapshot is not refetched."""
        self._request("PUT", "/marketing/sponsored-ads", {"id": ad_id, "trackClick": True})

    def send_custom_email(self, subject: str, body: str) -> Dict[str, Any]:
        return self._mutate("POST", "/marketing/custom-emails", {"subject": subject, "body": body})

    def delete_custom_email(self, email_id: str) -> None:
        self._mutate("DELETE", "/marketing/custom-emails", {"id": email_id})

    def add_email_template(self, template: Dict[str, Any]) -> Dict[str, Any]:
        return self._mutate("POST", "/marketing/email-templates", template)

    def update_email_template(self, template: Dict[str, Any]) -> Dict[str, Any]:
        return self._mutate("PUT", "/marketing/email-templates", template)

    def delete_email_template(self, template_id: str) -> None:
        self._mutate("DELETE", "/marketing/email-templates", {"id": template_id})

    # --- System ---

    def update_settings(self, key: str, value: Any) -> Dict[str, Any]:
        return self._mutate("POST", "/system/settings", {"key": key, "value": value})

    def toggle_ad_test(self, placement: str) -> None:
        """
        Flip A/B testing for one ad placement.

        The local snapshot is patched before the request goes out; a failed
        write refetches to undo the patch and re-raises.
        """
        if placement not in PLACEMENT_KEYS:
            raise ValueError(f"Unknown ad placement: {placement}")

        ad_settings = copy.deepcopy(self.state["adSettings"])
        active: List[str] = list(ad_settings.get("activeTests") or [])
        if placement in active:
            active.remove(placement)
        else:
            active.append(placement)
        ad_settings["activeTests"] = active
        self.state["adSettings"] = ad_settings

        try:
            self.update_settings("adSettings", ad_settings)
        except PortalAPIError:
            self.refresh()
            raise

    def add_activity_log(self, action: str, details: Optional[str] = None) -> Dict[str, Any]:
        return self._mutate("POST", "/system/activity-logs", {"action": action, "details": details})

    def clear_activity_logs(self) -> None:
        self._mutate("DELETE", "/system/activity-logs", {"clearAll": True})

    def delete_email_notification(self, notification_id: str) -> None:
        self._mutate("DELETE", "/system/email-notifications", {"id": notification_id})

    def clear_email_notifications(self) -> None:
        self._mutate("DELETE", "/system/email-notifications", {"clearAll": True})

    def db_status(self) -> Dict[str, Any]:
        return self._request("GET", "/system/db-status")
