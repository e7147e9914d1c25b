"""
Tests for posts, breaking news, quick links, upcoming exams and
preparation resources.
"""

import pytest

from app.models.content import ContentPost, QuickLink
from app.models.system import ActivityLog


def _actions(db_session):
    return [log.action for log in db_session.query(ActivityLog).all()]


class TestPosts:
    URL = "/api/content/posts"

    def test_create_post(self, admin_client, db_session, sample_post_data):
        response = admin_client.post(self.URL, json=sample_post_data)

        assert response.status_code == 201
        data = response.json()
        assert data["title"] == sample_post_data["title"]
        assert data["publishedDate"] == "2024-11-20"
        assert data["examDate"] is None
        assert "Post Created" in _actions(db_session)

    @pytest.mark.parametrize("field,value,message", [
        ("type", "news", "Invalid post type: news"),
        ("status", "archived", "Invalid post status: archived"),
        ("publishedDate", "someday", "Invalid date format for publishedDate. Use YYYY-MM-DD."),
        ("examDate", "31/12/2024", "Invalid date format for examDate. Use YYYY-MM-DD."),
    ])
    def test_invalid_values(self, admin_client, sample_post_data, field, value, message):
        sample_post_data[field] = value

        response = admin_client.post(self.URL, json=sample_post_data)

        assert response.status_code == 400
        assert response.json()["message"] == f"Validation Error: {message}"

    def test_missing_title(self, admin_client, sample_post_data):
        del sample_post_data["title"]

        response = admin_client.post(self.URL, json=sample_post_data)

        assert response.status_code == 400
        assert response.json()["message"] == "Validation Error: Missing required field: title"

    def test_exam_notice_with_exam_date(self, admin_client, sample_post_data):
        sample_post_data.update({"type": "exam-notices", "examDate": "2025-01-15T00:00:00.000Z"})

        response = admin_client.post(self.URL, json=sample_post_data)

        assert response.status_code == 201
        assert response.json()["examDate"] == "2025-01-15"

    def test_update_post(self, admin_client, sample_post_data):
        post_id = admin_client.post(self.URL, json=sample_post_data).json()["id"]

        response = admin_client.put(self.URL, json=dict(sample_post_data, id=post_id, status="draft"))

        assert response.status_code == 200
        assert response.json()["status"] == "draft"

    def test_update_unknown_post(self, admin_client, sample_post_data):
        response = admin_client.put(self.URL, json=dict(sample_post_data, id="missing"))

        assert response.status_code == 404
        assert response.json()["message"] == "Post with ID missing not found."

    def test_bulk_delete_posts(self, admin_client, db_session, sample_post_data):
        ids = [admin_client.post(self.URL, json=sample_post_data).json()["id"] for _ in range(2)]

        response = admin_client.request("DELETE", self.URL, json={"ids": ids})

        assert response.status_code == 204
        assert db_session.query(ContentPost).count() == 0
        log = db_session.query(ActivityLog).filter(ActivityLog.action == "Bulk Post Deletion").one()
        assert log.details == "2 posts deleted."


class TestBreakingNews:
    URL = "/api/content/breaking-news"

    def test_status_must_be_known(self, admin_client):
        response = admin_client.post(self.URL, json={"text": "Results out", "status": "live"})

        assert response.status_code == 400
        assert response.json()["message"] == "Validation Error: Invalid or missing field: status"

    def test_create_update_delete(self, admin_client, db_session):
        created = admin_client.post(
            self.URL, json={"text": "SSC CGL result declared", "link": "/blog/1", "status": "active"}
        )
        assert created.status_code == 201
        news_id = created.json()["id"]

        updated = admin_client.put(self.URL, json={"id": news_id, "text": "SSC CGL result", "status": "inactive"})
        assert updated.status_code == 200
        assert updated.json()["status"] == "inactive"

        deleted = admin_client.request("DELETE", self.URL, json={"id": news_id})
        assert deleted.status_code == 204

        actions = _actions(db_session)
        assert "Breaking News Added" in actions
        assert "Breaking News Updated" in actions
        assert "Breaking News Deleted" in actions


class TestQuickLinks:
    URL = "/api/content/quick-links"

    def test_delete_never_issued_id(self, admin_client):
        """Deleting an id that was never issued is a 404"""
        response = admin_client.request("DELETE", self.URL, json={"id": "never-issued"})

        assert response.status_code == 404
        assert response.json()["message"] == "Quick Link with ID never-issued not found."

    def test_create_requires_url(self, admin_client):
        response = admin_client.post(self.URL, json={"title": "Admit Card", "status": "active"})

        assert response.status_code == 400
        assert response.json()["message"] == "Validation Error: Missing required field: url"

    def test_create_and_delete(self, admin_client, db_session):
        response = admin_client.post(
            self.URL,
            json={"title": "Admit Card", "url": "https://example.com/admit", "status": "active", "category": "Exams"},
        )
        assert response.status_code == 201
        link_id = response.json()["id"]

        response = admin_client.request("DELETE", self.URL, json={"id": link_id})

        assert response.status_code == 204
        assert db_session.query(QuickLink).count() == 0


class TestUpcomingExams:
    URL = "/api/content/upcoming-exams"

    @pytest.mark.parametrize("payload,message", [
        ({"deadline": "2025-01-01", "notificationLink": "x"}, "Missing required field: name"),
        ({"name": "UPSC CSE", "notificationLink": "x"}, "Invalid or missing field: deadline"),
        ({"name": "UPSC CSE", "deadline": "2025-01-01"}, "Missing required field: notificationLink"),
    ])
    def test_validation_order(self, admin_client, payload, message):
        response = admin_client.post(self.URL, json=payload)

        assert response.status_code == 400
        assert response.json()["message"] == f"Validation Error: {message}"

    def test_listed_by_deadline(self, admin_client):
        for name, deadline in [("Later", "2025-06-01"), ("Sooner", "2025-02-01")]:
            admin_client.post(self.URL, json={"name": name, "deadline": deadline, "notificationLink": "https://x"})

        exams = admin_client.get("/api/data").json()["upcomingExams"]

        assert [exam["name"] for exam in exams] == ["Sooner", "Later"]


class TestPreparation:

    def test_books_and_courses(self, admin_client, db_session):
        book = admin_client.post(
            "/api/preparation/books",
            json={"title": "Quantitative Aptitude", "author": "R.S. Aggarwal", "url": "https://example.com/qa"},
        )
        course = admin_client.post(
            "/api/preparation/courses",
            json={"platform": "Testbook", "title": "SSC Pass", "url": "https://example.com/ssc"},
        )
        assert book.status_code == 201
        assert course.status_code == 201
        assert book.json()["author"] == "R.S. Aggarwal"

        data = admin_client.get("/api/data").json()
        assert len(data["preparationBooks"]) == 1
        assert len(data["preparationCourses"]) == 1

        actions = _actions(db_session)
        assert "Prep Book Added" in actions
        assert "Prep Course Added" in actions

    def test_book_requires_url(self, admin_client):
        response = admin_client.post("/api/preparation/books", json={"title": "No link"})

        assert response.status_code == 400
        assert response.json()["message"] == "Validation Error: Missing required field: url"

    def test_update_unknown_course(self, admin_client):
        response = admin_client.put(
            "/api/preparation/courses", json={"id": "nope", "title": "x", "url": "https://x"}
        )

        assert response.status_code == 404
        assert response.json()["message"] == "Course with ID nope not found."

    def test_requires_admin(self, client):
        response = client.post("/api/preparation/books", json={"title": "x", "url": "https://x"})

        assert response.status_code == 401
