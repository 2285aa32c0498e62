from concurrent.futures import ThreadPoolExecutor

import pytest
from conftest import BLOG_POST, build
from fastapi.testclient import TestClient

from app.api.blog import slugify
from app.core.config import settings
from app.core.database import close_database_connection, init_db
from app.main import app
from app.models import BlogPost

CONCURRENT_LIKES = 20


def test_slugify():
    assert slugify("Top 10 Hidden Gems in Southeast Asia!") == "top-10-hidden-gems-in-southeast-asia"
    assert slugify("  Café & Croissants -- Paris  ") == "caf-croissants-paris"


def test_create_post_derives_slug_from_title(client):
    response = client.post("/api/blog", json=BLOG_POST)

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["slug"] == "top-10-hidden-gems-in-southeast-asia"
    assert data["tags"] == ["asia", "hidden gems"]
    assert data["viewCount"] == 0
    assert data["likesCount"] == 0
    assert data["seo"]["metaTitle"] == BLOG_POST["seo"]["metaTitle"]


def test_blank_slug_is_derived(client):
    response = client.post("/api/blog", json=build(BLOG_POST, slug="   "))

    assert response.status_code == 201
    assert response.json()["data"]["slug"] == "top-10-hidden-gems-in-southeast-asia"


def test_invalid_slug_is_rejected(client):
    for slug in ("Hidden-Gems", "hidden_gems", "hidden gems!"):
        response = client.post("/api/blog", json=build(BLOG_POST, slug=slug))
        assert response.status_code == 400
        assert any(d.startswith("slug:") for d in response.json()["details"])


def test_duplicate_slug_conflicts(client, create_post):
    create_post(slug="asia-gems")

    response = client.post("/api/blog", json=build(BLOG_POST, title="Another post", slug="asia-gems"))

    assert response.status_code == 409
    assert response.json()["error"] == "A blog post with this slug already exists"


def test_too_many_tags(client):
    response = client.post("/api/blog", json=build(BLOG_POST, tags=[f"tag{i}" for i in range(11)]))

    assert response.status_code == 400


def test_reading_a_post_counts_views(client, create_post):
    slug = create_post()["slug"]

    client.get(f"/api/blog/{slug}")
    response = client.get(f"/api/blog/{slug}")

    assert response.status_code == 200
    assert response.json()["data"]["viewCount"] == 2


def test_post_can_be_read_by_id(client, create_post):
    post = create_post()

    response = client.get(f"/api/blog/{post['id']}")

    assert response.json()["data"]["slug"] == post["slug"]


def test_liking_twice_adds_two(client, create_post):
    slug = create_post()["slug"]

    first = client.patch(f"/api/blog/{slug}/like")
    second = client.patch(f"/api/blog/{slug}")

    assert first.json() == {
        "success": True,
        "data": {"likesCount": 1},
        "message": "Blog post liked successfully",
    }
    assert second.json()["data"]["likesCount"] == 2


@pytest.fixture
def file_database(tmp_path, monkeypatch):
    # one connection per thread, which a shared in-memory database cannot give
    close_database_connection()
    monkeypatch.setattr(settings, "database_url", f"sqlite:///{tmp_path / 'blog.db'}")
    init_db()
    yield
    close_database_connection()


def test_concurrent_likes_are_all_counted(file_database):
    slug = TestClient(app).post("/api/blog", json=BLOG_POST).json()["data"]["slug"]

    def like(_):
        # a client per thread, each request runs on its own event loop
        return TestClient(app).patch(f"/api/blog/{slug}/like").status_code

    with ThreadPoolExecutor(max_workers=8) as pool:
        statuses = list(pool.map(like, range(CONCURRENT_LIKES)))

    assert statuses == [200] * CONCURRENT_LIKES
    post = TestClient(app).get(f"/api/blog/{slug}").json()["data"]
    assert post["likesCount"] == CONCURRENT_LIKES


def test_like_unknown_post(client):
    response = client.patch("/api/blog/no-such-post/like")

    assert response.status_code == 404
    assert response.json()["error"] == "Blog post not found"


def test_update_post_revalidates_slug(client, create_post):
    slug = create_post()["slug"]

    response = client.put(f"/api/blog/{slug}", json={"slug": "Not Valid"})
    assert response.status_code == 400

    response = client.put(f"/api/blog/{slug}", json={"readTime": 12, "slug": "asia-hidden-gems"})
    assert response.status_code == 200
    assert response.json()["data"]["readTime"] == 12
    assert client.get("/api/blog/asia-hidden-gems").status_code == 200


def test_update_keeps_counters(client, create_post):
    slug = create_post()["slug"]
    client.patch(f"/api/blog/{slug}/like")

    response = client.put(f"/api/blog/{slug}", json={"likesCount": 500, "excerpt": "New excerpt"})

    assert response.json()["data"]["likesCount"] == 1
    assert response.json()["data"]["excerpt"] == "New excerpt"


def test_soft_delete_hides_post_but_keeps_row(client, create_post, db):
    slug = create_post()["slug"]

    response = client.delete(f"/api/blog/{slug}")

    assert response.status_code == 200
    assert response.json()["message"] == "Blog post deleted successfully"
    assert client.get(f"/api/blog/{slug}").status_code == 404
    assert client.get("/api/blog").json()["data"] == []
    assert client.delete(f"/api/blog/{slug}").status_code == 404

    post = db.query(BlogPost).filter(BlogPost.slug == slug).one()
    assert post.is_active is False


def test_list_filters(client, create_post):
    create_post(title="Street Food in Bangkok", category="Food", tags=["thailand", "food"], featured=True)
    create_post(title="Packing Light", category="Travel Tips", tags=["packing"])

    def titles(**params):
        return [p["title"] for p in client.get("/api/blog", params=params).json()["data"]]

    assert titles(category="Food") == ["Street Food in Bangkok"]
    assert titles(featured="true") == ["Street Food in Bangkok"]
    assert titles(tags="packing") == ["Packing Light"]
    assert titles(search="bangkok") == ["Street Food in Bangkok"]
    assert titles(search="Sarah") == ["Packing Light", "Street Food in Bangkok"]


def test_list_sorted_by_newest_first(client, create_post):
    create_post(title="Older", publishedAt="2024-01-01T00:00:00Z")
    create_post(title="Newer", publishedAt="2025-01-01T00:00:00Z")

    response = client.get("/api/blog")

    data = response.json()["data"]
    assert [p["title"] for p in data] == ["Newer", "Older"]
    assert data[0]["publishedAt"] == "2025-01-01"


def test_search_matches_author_name_only(client, create_post):
    create_post(
        title="Street Food in Bangkok",
        author={"name": "Kenji Sato", "avatar": "/images/authors/kenji.jpg", "bio": "Food writer."},
    )
    create_post(title="Packing Light")

    def titles(term):
        return [p["title"] for p in client.get("/api/blog", params={"search": term}).json()["data"]]

    assert titles("kenji") == ["Street Food in Bangkok"]
    assert titles("avatar") == []
    assert titles("bio") == []
    assert titles("photographer") == []
    assert titles("gems") == ["Packing Light", "Street Food in Bangkok"]
