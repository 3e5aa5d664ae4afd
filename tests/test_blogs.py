"""Integration tests for public and admin blog endpoints."""


def _create(client, headers, title, published):
    response = client.post(
        "/api/admin/blogs",
        json={
            "title": title,
            "excerpt": f"{title} excerpt",
            "content": f"{title} content",
            "author": "Editor",
            "published": published,
        },
        headers=headers,
    )
    assert response.status_code == 201
    return response.json()


class TestPublicBlogs:
    def test_only_published_are_listed(self, client, admin_headers):
        _create(client, admin_headers, "Draft", published=False)
        live = _create(client, admin_headers, "Live", published=True)

        response = client.get("/api/blogs")
        assert response.status_code == 200
        assert [b["id"] for b in response.json()] == [live["id"]]

    def test_draft_is_not_found_publicly(self, client, admin_headers):
        draft = _create(client, admin_headers, "Draft", published=False)

        response = client.get(f"/api/blogs/{draft['id']}")
        assert response.status_code == 404
        assert response.json() == {"error": "Blog not found"}

    def test_published_is_readable_without_token(self, client, admin_headers):
        live = _create(client, admin_headers, "Live", published=True)

        response = client.get(f"/api/blogs/{live['id']}")
        assert response.status_code == 200
        assert response.json()["content"] == "Live content"


class TestAdminBlogs:
    def test_admin_sees_drafts(self, client, admin_headers):
        draft = _create(client, admin_headers, "Draft", published=False)
        _create(client, admin_headers, "Live", published=True)

        listed = client.get("/api/admin/blogs", headers=admin_headers).json()
        assert len(listed) == 2
        assert client.get(f"/api/admin/blogs/{draft['id']}", headers=admin_headers).status_code == 200

    def test_publishing_makes_blog_public(self, client, admin_headers):
        draft = _create(client, admin_headers, "Draft", published=False)

        response = client.put(
            f"/api/admin/blogs/{draft['id']}",
            json={"title": "Draft", "author": "Editor", "content": "Final", "published": True},
            headers=admin_headers,
        )
        assert response.status_code == 200
        assert client.get(f"/api/blogs/{draft['id']}").json()["content"] == "Final"

    def test_missing_author_is_400(self, client, admin_headers):
        response = client.post("/api/admin/blogs", json={"title": "No author"}, headers=admin_headers)
        assert response.status_code == 400

    def test_delete_hides_blog_everywhere(self, client, admin_headers):
        live = _create(client, admin_headers, "Live", published=True)

        assert client.delete(f"/api/admin/blogs/{live['id']}", headers=admin_headers).status_code == 200
        assert client.get(f"/api/blogs/{live['id']}").status_code == 404
        assert client.get(f"/api/admin/blogs/{live['id']}", headers=admin_headers).status_code == 404
        assert client.get("/api/admin/blogs", headers=admin_headers).json() == []
