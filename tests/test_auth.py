"""
Unit tests for authentication endpoints.

Tests:
- Singleton admin signup
- Login (real and demo), logout
- Status reporting
- Credential update
- Password reset flow
"""

from app.core.config import settings
from app.core.security import verify_password
from app.models.system import ActivityLog
from app.models.user import User
from conftest import ADMIN_EMAIL, ADMIN_PASSWORD, ADMIN_USERNAME

AUTH_URL = "/api/auth"


class TestSignup:

    def test_first_signup_creates_admin(self, client, db_session):
        response = client.post(
            AUTH_URL,
            json={"action": "signup", "username": "owner", "password": "pw123456", "email": "o@example.com"},
        )

        assert response.status_code == 201
        assert response.json() == {"message": "Admin created."}
        user = db_session.query(User).one()
        assert user.password_hash != "pw123456"
        assert verify_password("pw123456", user.password_hash)

    def test_second_signup_forbidden(self, client, admin_user):
        """Signup is refused once any admin exists"""
        response = client.post(AUTH_URL, json={"action": "signup", "username": "intruder", "password": "x"})

        assert response.status_code == 403
        assert response.json()["message"] == "Admin account already exists."

    def test_signup_requires_password(self, client):
        response = client.post(AUTH_URL, json={"action": "signup", "username": "owner"})

        assert response.status_code == 400

    def test_second_signup_forbidden_for_any_credentials(self, client, admin_user):
        """The admin check runs before the submitted fields are looked at"""
        for body in (
            {"action": "signup", "username": "intruder", "password": "p" * 80},
            {"action": "signup", "username": 42, "password": ["x"]},
        ):
            response = client.post(AUTH_URL, json=body)

            assert response.status_code == 403
            assert response.json()["message"] == "Admin account already exists."

    def test_signup_with_long_password(self, client, db_session):
        password = "p" * 80
        response = client.post(AUTH_URL, json={"action": "signup", "username": "owner", "password": password})

        assert response.status_code == 201
        assert verify_password(password, db_session.query(User).one().password_hash)


class TestLogin:

    def test_login_sets_session_cookie(self, client, admin_user, db_session):
        response = client.post(
            AUTH_URL, json={"action": "login", "username": ADMIN_USERNAME, "password": ADMIN_PASSWORD}
        )

        assert response.status_code == 200
        assert response.json() == {"user": {"username": ADMIN_USERNAME, "email": ADMIN_EMAIL, "isDemo": False}}
        assert settings.SESSION_COOKIE_NAME in response.cookies
        assert "httponly" in response.headers["set-cookie"].lower()
        assert db_session.query(ActivityLog).filter(ActivityLog.action == "Admin Login").count() == 1

    def test_wrong_password(self, client, admin_user):
        response = client.post(AUTH_URL, json={"action": "login", "username": ADMIN_USERNAME, "password": "nope"})

        assert response.status_code == 401
        assert response.json()["message"] == "Invalid credentials."

    def test_unknown_user(self, client, admin_user):
        response = client.post(AUTH_URL, json={"action": "login", "username": "ghost", "password": "x"})

        assert response.status_code == 401
        assert response.json()["message"] == "Invalid credentials."

    def test_long_password_is_invalid_credentials(self, client, admin_user):
        response = client.post(AUTH_URL, json={"action": "login", "username": ADMIN_USERNAME, "password": "p" * 80})

        assert response.status_code == 401
        assert response.json()["message"] == "Invalid credentials."

    def test_non_string_password_is_invalid_credentials(self, client, admin_user):
        response = client.post(AUTH_URL, json={"action": "login", "username": ADMIN_USERNAME, "password": 12345})

        assert response.status_code == 401
        assert response.json()["message"] == "Invalid credentials."

    def test_demo_login(self, client, db_session):
        response = client.post(AUTH_URL, json={"action": "login", "isDemo": True})

        assert response.status_code == 200
        assert response.json()["user"] == {"username": "Demo User", "email": "demo@example.com", "isDemo": True}
        assert db_session.query(ActivityLog).filter(ActivityLog.action == "Demo Login").count() == 1

        status = client.get(f"{AUTH_URL}/status").json()
        assert status["isLoggedIn"] is True
        assert status["user"]["isDemo"] is True

    def test_demo_login_disabled(self, admin_client):
        admin_client.post(
            "/api/system/settings",
            json={"key": "securitySettings", "value": {"demoModeEnabled": False}},
        )
        admin_client.cookies.clear()

        response = admin_client.post(AUTH_URL, json={"action": "login", "isDemo": True})

        assert response.status_code == 403

    def test_tampered_cookie_is_anonymous(self, admin_client):
        admin_client.cookies.clear()
        admin_client.cookies.set(settings.SESSION_COOKIE_NAME, "not-a-valid-token")

        response = admin_client.get("/api/data")

        assert response.status_code == 200
        assert response.json()["subscribers"] == []

    def test_invalid_action(self, client):
        response = client.post(AUTH_URL, json={"action": "dance"})

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid action."


class TestStatusAndLogout:

    def test_status_anonymous_without_admin(self, client):
        response = client.get(f"{AUTH_URL}/status")

        assert response.json() == {"isLoggedIn": False, "adminExists": False}

    def test_status_anonymous_with_admin(self, client, admin_user):
        response = client.get(f"{AUTH_URL}/status")

        assert response.json() == {"isLoggedIn": False, "adminExists": True}

    def test_status_logged_in(self, admin_client):
        response = admin_client.get(f"{AUTH_URL}/status")

        assert response.json() == {
            "isLoggedIn": True,
            "user": {"username": ADMIN_USERNAME, "email": ADMIN_EMAIL, "isDemo": False},
        }

    def test_logout_clears_session(self, admin_client, db_session):
        response = admin_client.post(AUTH_URL, json={"action": "logout"})

        assert response.status_code == 200
        assert response.json() == {"message": "Logged out."}
        assert admin_client.get(f"{AUTH_URL}/status").json()["isLoggedIn"] is False
        assert admin_client.post("/api/content/jobs", json={}).status_code == 401
        assert db_session.query(ActivityLog).filter(ActivityLog.action == "Admin Logout").count() == 1


class TestUpdateCredentials:

    def test_update_credentials(self, admin_client, db_session):
        response = admin_client.put(
            AUTH_URL,
            json={
                "action": "update_credentials",
                "currentPassword": ADMIN_PASSWORD,
                "newUsername": "chief",
                "newPassword": "brand-new-pass",
            },
        )

        assert response.status_code == 200
        assert response.json()["user"]["username"] == "chief"
        user = db_session.query(User).one()
        assert verify_password("brand-new-pass", user.password_hash)

    def test_wrong_current_password(self, admin_client):
        response = admin_client.put(
            AUTH_URL,
            json={"action": "update_credentials", "currentPassword": "wrong", "newUsername": "x", "newPassword": "y"},
        )

        assert response.status_code == 401
        assert response.json()["message"] == "Incorrect current password."

    def test_requires_session(self, client):
        response = client.put(AUTH_URL, json={"action": "update_credentials", "currentPassword": "x"})

        assert response.status_code == 401

    def test_demo_rejected(self, demo_client):
        response = demo_client.put(
            AUTH_URL,
            json={"action": "update_credentials", "currentPassword": "x", "newUsername": "y", "newPassword": "z"},
        )

        assert response.status_code == 403


class TestPasswordReset:

    def test_reset_without_prior_request(self, client, admin_user):
        """reset_password without reset state in the session is a 401"""
        response = client.put(AUTH_URL, json={"action": "reset_password", "newPassword": "whatever"})

        assert response.status_code == 401
        assert response.json()["message"] == "Invalid reset request."

    def test_unknown_email(self, client, admin_user):
        response = client.post(AUTH_URL, json={"action": "request_password_reset", "email": "who@example.com"})

        assert response.status_code == 404
        assert response.json()["message"] == "Email not found."

    def test_full_reset_flow(self, client, admin_user, db_session):
        requested = client.post(AUTH_URL, json={"action": "request_password_reset", "email": ADMIN_EMAIL})
        assert requested.status_code == 200
        assert requested.json() == {"message": "Proceed to reset."}

        reset = client.put(AUTH_URL, json={"action": "reset_password", "newPassword": "fresh-password"})
        assert reset.status_code == 200
        assert reset.json() == {"message": "Password has been reset. Please log in again."}

        db_session.expire_all()
        assert verify_password("fresh-password", db_session.query(User).one().password_hash)

        # The session is destroyed, so a second reset is refused
        again = client.put(AUTH_URL, json={"action": "reset_password", "newPassword": "another"})
        assert again.status_code == 401

        login = client.post(
            AUTH_URL, json={"action": "login", "username": ADMIN_USERNAME, "password": "fresh-password"}
        )
        assert login.status_code == 200
