"""
Tests for sponsored ads, custom email campaigns and email templates.
"""

from app.models.marketing import CustomEmail, EmailNotification, EmailTemplate, SponsoredAd

ADS_URL = "/api/marketing/sponsored-ads"
CUSTOM_EMAILS_URL = "/api/marketing/custom-emails"
TEMPLATES_URL = "/api/marketing/email-templates"

AD = {"imageUrl": "https://cdn.example.com/ad.png", "destinationUrl": "https://sponsor.example.com"}


class TestSponsoredAds:

    def test_create_defaults(self, admin_client):
        response = admin_client.post(ADS_URL, json=AD)

        assert response.status_code == 201
        data = response.json()
        assert data["clicks"] == 0
        assert data["placement"] == "sidebar-top"
        assert data["status"] == "active"

    def test_track_click_is_public(self, admin_client, db_session):
        ad_id = admin_client.post(ADS_URL, json=AD).json()["id"]
        admin_client.cookies.clear()

        for _ in range(2):
            response = admin_client.put(ADS_URL, json={"id": ad_id, "trackClick": True})
            assert response.status_code == 200
            assert response.json() == {"message": "Click tracked"}

        db_session.expire_all()
        assert db_session.get(SponsoredAd, ad_id).clicks == 2

    def test_track_click_unknown_ad(self, client):
        response = client.put(ADS_URL, json={"id": "ghost", "trackClick": True})

        assert response.status_code == 404
        assert response.json()["message"] == "Ad with ID ghost not found."

    def test_update_requires_admin(self, client):
        response = client.put(ADS_URL, json=dict(AD, id="any"))

        assert response.status_code == 401

    def test_update_keeps_clicks(self, admin_client):
        ad_id = admin_client.post(ADS_URL, json=AD).json()["id"]
        admin_client.put(ADS_URL, json={"id": ad_id, "trackClick": True})

        response = admin_client.put(ADS_URL, json=dict(AD, id=ad_id, placement="header", clicks=99))

        assert response.status_code == 200
        assert response.json()["placement"] == "header"
        assert response.json()["clicks"] == 1


class TestCustomEmails:

    def test_send_campaign_stores_email(self, admin_client, db_session):
        response = admin_client.post(CUSTOM_EMAILS_URL, json={"subject": "Weekly jobs", "body": "New listings"})

        assert response.status_code == 201
        assert response.json()["subject"] == "Weekly jobs"
        assert db_session.query(CustomEmail).count() == 1
        # Delivery is disabled by default
        assert db_session.query(EmailNotification).count() == 0

    def test_demo_cannot_send(self, demo_client, db_session):
        response = demo_client.post(CUSTOM_EMAILS_URL, json={"subject": "Hi", "body": "There"})

        assert response.status_code == 403
        assert response.json()["message"] == "Action not allowed in demo mode."
        assert db_session.query(CustomEmail).count() == 0

    def test_body_required(self, admin_client):
        response = admin_client.post(CUSTOM_EMAILS_URL, json={"subject": "Hi"})

        assert response.status_code == 400
        assert response.json()["message"] == "Validation Error: Missing required field: body"

    def test_delete_unknown(self, admin_client):
        response = admin_client.request("DELETE", CUSTOM_EMAILS_URL, json={"id": "ghost"})

        assert response.status_code == 404
        assert response.json()["message"] == "Custom Email with ID ghost not found."


class TestEmailTemplates:

    def test_template_lifecycle(self, admin_client, db_session):
        created = admin_client.post(TEMPLATES_URL, json={"name": "Welcome", "subject": "Hello", "body": "Hi!"})
        assert created.status_code == 201
        template_id = created.json()["id"]

        updated = admin_client.put(TEMPLATES_URL, json={"id": template_id, "name": "Welcome", "subject": "Hey"})
        assert updated.status_code == 200
        assert updated.json()["subject"] == "Hey"

        deleted = admin_client.request("DELETE", TEMPLATES_URL, json={"id": template_id})
        assert deleted.status_code == 204
        assert db_session.query(EmailTemplate).count() == 0

    def test_demo_cannot_create(self, demo_client):
        response = demo_client.post(TEMPLATES_URL, json={"name": "x", "subject": "y"})

        assert response.status_code == 403

    def test_anonymous_gets_401_not_403(self, client):
        response = client.post(TEMPLATES_URL, json={"name": "x", "subject": "y"})

        assert response.status_code == 401
