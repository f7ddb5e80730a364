import pytest

from inkpost.core.config.settings import settings
from inkpost.domain.value_objects.verified_identity import VerifiedIdentity
from tests.feature.helpers import fetch_user

SIGNUP = {"fullName": "Jane Doe", "email": "jane@x.com", "password": "Abcde1f"}


def test_signup_returns_auth_payload(client, db_url, token_service):
    response = client.post("/signup", json=SIGNUP)

    assert response.status_code == 200
    body = response.json()
    assert set(body) == {"profile_img", "username", "fullname", "access_token"}
    assert body["username"] == "jane"
    assert body["fullname"] == "Jane Doe"

    stored = fetch_user(db_url, "jane@x.com")
    assert token_service.verify(body["access_token"]) == stored.id
    assert stored.password != SIGNUP["password"]
    assert stored.google_auth is False


def test_second_signup_with_same_email_conflicts(client):
    assert client.post("/signup", json=SIGNUP).status_code == 200

    response = client.post("/signup", json={**SIGNUP, "email": "JANE@x.com"})

    assert response.status_code == 403
    assert response.json() == {"error": "Email already exists"}


def test_taken_username_gets_suffix(client):
    client.post("/signup", json=SIGNUP)

    response = client.post("/signup", json={**SIGNUP, "email": "jane@y.com"})

    assert response.status_code == 200
    username = response.json()["username"]
    assert username.startswith("jane") and len(username) == 9


@pytest.mark.parametrize(
    "payload, message",
    [
        ({}, "Fullname must be at least 3 letters long"),
        ({**SIGNUP, "fullName": "Jo"}, "Fullname must be at least 3 letters long"),
        ({**SIGNUP, "email": ""}, "Enter email"),
        ({**SIGNUP, "email": "jane@@x"}, "Email is invalid"),
        (
            {**SIGNUP, "password": "abcdefg"},
            "Password should be 6 to 20 characters long with a numeric, 1 lowercase and 1 uppercase letter",
        ),
    ],
)
def test_signup_validation(client, payload, message):
    response = client.post("/signup", json=payload)
    assert response.status_code == 403
    assert response.json() == {"error": message}


def test_malformed_body_uses_error_envelope(client):
    response = client.post("/signup", json={**SIGNUP, "email": 123})
    assert response.status_code == 403
    assert "error" in response.json()


def test_signin_round_trip(client, token_service):
    signup = client.post("/signup", json=SIGNUP).json()

    response = client.post("/signin", json={"email": "Jane@X.com", "password": "Abcde1f"})

    assert response.status_code == 200
    body = response.json()
    assert body["username"] == signup["username"]
    assert token_service.verify(body["access_token"]) == token_service.verify(signup["access_token"])


def test_signin_wrong_password(client):
    client.post("/signup", json=SIGNUP)

    response = client.post("/signin", json={"email": "jane@x.com", "password": "Wrong1pass"})

    assert response.status_code == 403
    assert response.json() == {"error": "Incorrect password"}


def test_signin_unknown_email(client):
    response = client.post("/signin", json={"email": "nobody@x.com", "password": "Abcde1f"})
    assert response.status_code == 403
    assert response.json() == {"error": "Email not found"}


def test_google_signin_creates_account_then_blocks_password_signin(client, db_url, identity_verifier):
    identity_verifier.register(
        "google-token",
        VerifiedIdentity(
            email="gina@x.com",
            name="Gina Gee",
            picture="https://lh3.googleusercontent.com/a/abc=s96-c",
        ),
    )

    response = client.post("/google-auth", json={"access_token": "google-token"})

    assert response.status_code == 200
    body = response.json()
    assert body["username"] == "gina"
    assert body["fullname"] == "Gina Gee"
    assert body["profile_img"] == "https://lh3.googleusercontent.com/a/abc=s384-c"

    stored = fetch_user(db_url, "gina@x.com")
    assert stored.google_auth is True
    assert stored.password is None

    again = client.post("/google-auth", json={"access_token": "google-token"})
    assert again.status_code == 200
    assert again.json()["username"] == "gina"

    signin = client.post("/signin", json={"email": "gina@x.com", "password": "Abcde1f"})
    assert signin.status_code == 403
    assert signin.json() == {"error": "Account was created using google. Try logging in with google."}


def test_google_signin_with_rejected_token(client):
    response = client.post("/google-auth", json={"access_token": "forged"})

    assert response.status_code == 500
    assert response.json() == {
        "error": "Failed to authenticate you with google. Try with some other google account"
    }


def test_google_signin_links_password_account_by_default(client, identity_verifier):
    signup = client.post("/signup", json=SIGNUP).json()
    identity_verifier.register("jane-token", VerifiedIdentity(email="jane@x.com", name="Jane G"))

    response = client.post("/google-auth", json={"access_token": "jane-token"})

    assert response.status_code == 200
    assert response.json()["username"] == signup["username"]


def test_google_signin_refused_for_password_account_when_linking_disabled(client, identity_verifier, monkeypatch):
    monkeypatch.setattr(settings, "GOOGLE_AUTH_LINK_PASSWORD_ACCOUNTS", False)
    client.post("/signup", json=SIGNUP)
    identity_verifier.register("jane-token", VerifiedIdentity(email="jane@x.com", name="Jane G"))

    response = client.post("/google-auth", json={"access_token": "jane-token"})

    assert response.status_code == 403
    assert response.json() == {
        "error": "This email was signed up without google. Please log in with password to access the account"
    }
