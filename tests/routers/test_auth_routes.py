from datetime import timedelta

from jose import jwt

from rental_manager.core.config import settings
from rental_manager.core.security import create_access_token

ADMIN_EMAIL = settings.admin_email
ADMIN_PASSWORD = settings.admin_password


# ── register ─────────────────────────────────────────────────────────────────

class TestRegister:
    async def test_register_creates_pending_account(self, client, admin_headers):
        response = await client.post("/register", json={"email": "a@x.com", "password": "pw1"})
        assert response.status_code == 201
        assert "awaiting admin approval" in response.json()["message"]
        assert "token" not in response.json()

        pending = await client.get("/admin/users/pending", headers=admin_headers)
        users = pending.json()["users"]
        assert [u["email"] for u in users] == ["a@x.com"]
        assert users[0]["role"] == "user"

    async def test_duplicate_email_conflicts(self, client, admin_headers):
        first = await client.post("/register", json={"email": "a@x.com", "password": "pw1"})
        second = await client.post("/register", json={"email": "a@x.com", "password": "other"})
        assert first.status_code == 201
        assert second.status_code == 409
        assert second.json() == {"error": "Email already exists"}

        pending = await client.get("/admin/users/pending", headers=admin_headers)
        assert len(pending.json()["users"]) == 1

    async def test_admin_email_is_taken(self, client):
        response = await client.post("/register", json={"email": ADMIN_EMAIL, "password": "x"})
        assert response.status_code == 409

    async def test_missing_password_is_bad_request(self, client):
        response = await client.post("/register", json={"email": "a@x.com"})
        assert response.status_code == 400
        assert "password" in response.json()["error"]

    async def test_empty_password_is_bad_request(self, client):
        response = await client.post("/register", json={"email": "a@x.com", "password": ""})
        assert response.status_code == 400

    async def test_missing_email_is_bad_request(self, client):
        response = await client.post("/register", json={"password": "pw1"})
        assert response.status_code == 400
        assert "email" in response.json()["error"]

    async def test_empty_email_is_bad_request(self, client):
        response = await client.post("/register", json={"email": "", "password": "pw1"})
        assert response.status_code == 400

    async def test_email_is_stored_as_sent(self, client, admin_headers):
        for email in ("Bob@Example.COM", "landlord@localhost"):
            response = await client.post("/register", json={"email": email, "password": "pw1"})
            assert response.status_code == 201, response.text

        pending = await client.get("/admin/users/pending", headers=admin_headers)
        assert sorted(u["email"] for u in pending.json()["users"]) == ["Bob@Example.COM", "landlord@localhost"]


# ── login ────────────────────────────────────────────────────────────────────

class TestLogin:
    async def test_admin_login(self, client):
        response = await client.post("/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
        assert response.status_code == 200
        body = response.json()
        assert body["isAdmin"] is True
        assert body["token"]

    async def test_unknown_email_and_wrong_password_look_the_same(self, client):
        await client.post("/register", json={"email": "a@x.com", "password": "pw1"})
        unknown = await client.post("/login", json={"email": "nobody@x.com", "password": "pw1"})
        wrong = await client.post("/login", json={"email": ADMIN_EMAIL, "password": "nope"})
        assert unknown.status_code == wrong.status_code == 400
        assert unknown.json() == wrong.json() == {"error": "Invalid credentials"}

    async def test_unapproved_account_is_forbidden(self, client):
        await client.post("/register", json={"email": "a@x.com", "password": "pw1"})
        response = await client.post("/login", json={"email": "a@x.com", "password": "pw1"})
        assert response.status_code == 403
        assert "token" not in response.json()
        assert response.json()["error"] == "Your account is awaiting admin approval."

    async def test_unapproved_account_with_wrong_password_is_bad_request(self, client):
        await client.post("/register", json={"email": "a@x.com", "password": "pw1"})
        response = await client.post("/login", json={"email": "a@x.com", "password": "bad"})
        assert response.status_code == 400

    async def test_approved_landlord_is_not_admin(self, client, approved_user):
        await approved_user("a@x.com", "pw1")
        response = await client.post("/login", json={"email": "a@x.com", "password": "pw1"})
        assert response.status_code == 200
        assert response.json()["isAdmin"] is False

    async def test_mixed_case_email_logs_in_as_registered(self, client, approved_user):
        await approved_user("Bob@Example.COM", "pw1")

        response = await client.post("/login", json={"email": "Bob@Example.COM", "password": "pw1"})
        assert response.status_code == 200, response.text

    async def test_email_is_matched_exactly(self, client, approved_user):
        await approved_user("Bob@Example.COM", "pw1")
        response = await client.post("/login", json={"email": "bob@example.com", "password": "pw1"})
        assert response.status_code == 400


# ── bearer authentication ────────────────────────────────────────────────────

class TestBearerAuth:
    async def test_missing_header_is_unauthorized(self, client):
        response = await client.get("/properties")
        assert response.status_code == 401
        assert "error" in response.json()

    async def test_non_bearer_scheme_is_unauthorized(self, client):
        response = await client.get("/properties", headers={"Authorization": "Basic abc"})
        assert response.status_code == 401

    async def test_garbage_token_is_forbidden(self, client):
        response = await client.get("/properties", headers={"Authorization": "Bearer nonsense"})
        assert response.status_code == 403
        assert response.json() == {"error": "Invalid or expired token"}

    async def test_expired_token_is_forbidden(self, client):
        token = create_access_token(1, ADMIN_EMAIL, True, expires_delta=timedelta(seconds=-5))
        response = await client.get("/properties", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 403

    async def test_token_without_subject_is_forbidden(self, client):
        token = jwt.encode({"email": ADMIN_EMAIL, "type": "access"}, settings.signing_key, algorithm=settings.algorithm)
        response = await client.get("/properties", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 403

    async def test_valid_token_passes(self, client, landlord):
        response = await client.get("/properties", headers=landlord)
        assert response.status_code == 200
        assert response.json() == []
