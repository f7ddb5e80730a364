import re

import pytest

from tests.factories.blog import create_fake_blog_payload
from tests.feature.helpers import count_blogs, fetch_user

SIGNUP = {"fullName": "Jane Doe", "email": "jane@x.com", "password": "Abcde1f"}


@pytest.fixture
def auth_headers(client):
    token = client.post("/signup", json=SIGNUP).json()["access_token"]
    return {"Authorization": f"Bearer {token}"}


def test_latest_blogs_empty(client):
    response = client.get("/latest-blogs")
    assert response.status_code == 200
    assert response.json() == {"blogs": []}


def test_create_blog_requires_token(client):
    response = client.post("/create-blog", json=create_fake_blog_payload())
    assert response.status_code == 401
    assert response.json() == {"error": "No access token"}


def test_create_blog_rejects_invalid_token(client):
    response = client.post(
        "/create-blog",
        json=create_fake_blog_payload(),
        headers={"Authorization": "Bearer forged.token.value"},
    )
    assert response.status_code == 403
    assert response.json() == {"error": "Access token is invalid"}


def test_publish_then_read_latest(client, db_url, auth_headers):
    payload = create_fake_blog_payload(title="Hello, World!", tags=["Python", "FastAPI"])

    response = client.post("/create-blog", json=payload, headers=auth_headers)

    assert response.status_code == 200
    blog_id = response.json()["id"]
    assert re.fullmatch(r"Hello-World-[A-Za-z0-9_-]+", blog_id)

    author = fetch_user(db_url, "jane@x.com")
    assert author.total_posts == 1

    blogs = client.get("/latest-blogs").json()["blogs"]
    assert len(blogs) == 1
    blog = blogs[0]
    assert blog["blog_id"] == blog_id
    assert blog["title"] == "Hello, World!"
    assert blog["tags"] == ["python", "fastapi"]
    assert blog["activity"] == {
        "total_likes": 0,
        "total_comments": 0,
        "total_reads": 0,
        "total_parent_comments": 0,
    }
    assert "publishedAt" in blog
    assert blog["author"] == {
        "personal_info": {
            "profile_img": author.profile_img,
            "username": "jane",
            "fullname": "Jane Doe",
        }
    }


def test_draft_is_stored_but_not_counted_or_listed(client, db_url, auth_headers):
    response = client.post(
        "/create-blog",
        json={"title": "Half done", "draft": True},
        headers=auth_headers,
    )

    assert response.status_code == 200
    author = fetch_user(db_url, "jane@x.com")
    assert author.total_posts == 0
    assert count_blogs(db_url, author.id) == 1
    assert client.get("/latest-blogs").json() == {"blogs": []}


@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"title": ""}, "You must provide a title"),
        ({"des": "x" * 201}, "You must provide blog description under 200 characters"),
        ({"banner": ""}, "You must provide blog banner to publish it"),
        ({"content": []}, "There must be some blog content to publish it"),
        ({"tags": [f"t{i}" for i in range(11)]}, "Provide tags in order to publish the blog, Maximum 10"),
    ],
)
def test_incomplete_blog_is_rejected_and_nothing_changes(client, db_url, auth_headers, overrides, message):
    response = client.post("/create-blog", json=create_fake_blog_payload(**overrides), headers=auth_headers)

    assert response.status_code == 403
    assert response.json() == {"error": message}
    author = fetch_user(db_url, "jane@x.com")
    assert author.total_posts == 0
    assert count_blogs(db_url, author.id) == 0


def test_total_posts_tracks_published_blogs(client, db_url, auth_headers):
    for _ in range(3):
        client.post("/create-blog", json=create_fake_blog_payload(), headers=auth_headers)
    client.post("/create-blog", json=create_fake_blog_payload(draft=True), headers=auth_headers)

    author = fetch_user(db_url, "jane@x.com")
    assert author.total_posts == 3
    assert count_blogs(db_url, author.id, include_drafts=False) == 3


def test_latest_blogs_returns_five_newest(client, auth_headers):
    titles = [f"Post number {i}" for i in range(7)]
    for title in titles:
        assert client.post(
            "/create-blog", json=create_fake_blog_payload(title=title), headers=auth_headers
        ).status_code == 200

    blogs = client.get("/latest-blogs").json()["blogs"]

    assert [blog["title"] for blog in blogs] == list(reversed(titles))[:5]


def test_author_is_taken_from_token_not_body(client, db_url, auth_headers):
    payload = create_fake_blog_payload(author="someone-else", author_id=999)

    response = client.post("/create-blog", json=payload, headers=auth_headers)

    assert response.status_code == 200
    author = fetch_user(db_url, "jane@x.com")
    assert count_blogs(db_url, author.id) == 1
    assert count_blogs(db_url, 999) == 0


def test_token_for_unknown_author_stores_nothing(client, token_service):
    headers = {"Authorization": f"Bearer {token_service.issue(9999)}"}

    response = client.post("/create-blog", json=create_fake_blog_payload(), headers=headers)

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to update total posts number"}
    assert client.get("/latest-blogs").json() == {"blogs": []}
