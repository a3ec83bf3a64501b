from decimal import Decimal

import redis


class TestAuthRoutes:

    def test_register_then_login_sets_session_cookie(self, client, login):
        resp = client.post("/register", json={"username": "erin", "password": "pw"}, follow_redirects=False)
        assert resp.status_code == 303
        assert resp.headers["location"] == "/login"

        resp = login("erin", "pw")
        assert resp.status_code == 303
        assert "session_id" in resp.cookies

    def test_register_duplicate_username(self, client, alice):
        resp = client.post("/register", json={"username": "alice", "password": "x"}, follow_redirects=False)

        assert resp.status_code == 400
        assert "alice" in resp.json()["detail"]

    def test_bad_login_gives_generic_error(self, client, alice, login):
        wrong_password = login("alice", "wrong")
        unknown_user = login("mallory", "wrong")

        assert wrong_password.status_code == unknown_user.status_code == 401
        assert wrong_password.json() == unknown_user.json()

    def test_logout_destroys_session(self, client, alice, login):
        login("alice", "alice-secret")
        assert client.get("/profile", follow_redirects=False).status_code == 200

        resp = client.get("/logout", follow_redirects=False)
        assert resp.status_code == 303

        assert client.get("/profile", follow_redirects=False).status_code == 303

    def test_profile_update_changes_username_in_session(self, client, alice, login):
        login("alice", "alice-secret")

        resp = client.post("/profile", json={"username": "alicia"})
        assert resp.status_code == 200
        assert resp.json()["username"] == "alicia"

        assert client.get("/profile").json()["username"] == "alicia"


class TestCartRoutes:

    def test_anonymous_cart_page_redirects_to_login(self, client):
        resp = client.get("/cart", follow_redirects=False)

        assert resp.status_code == 303
        assert resp.headers["location"] == "/login"

    def test_anonymous_add_returns_failure_payload(self, client, tours):
        resp = client.post(f"/cart/add/{tours['a']}", follow_redirects=False)

        assert resp.status_code == 401
        assert resp.json()["success"] is False

    def test_add_view_and_remove(self, client, alice, tours, login):
        login("alice", "alice-secret")

        first = client.post(f"/cart/add/{tours['a']}").json()
        second = client.post(f"/cart/add/{tours['a']}").json()
        client.post(f"/cart/add/{tours['b']}")

        assert first["success"] is True
        assert second["quantity"] == 2
        assert second["line_id"] == first["line_id"]

        cart = client.get("/cart").json()
        assert Decimal(cart["total"]) == Decimal("250")
        assert len(cart["lines"]) == 2

        resp = client.post(f"/cart/remove/{first['line_id']}")
        assert resp.json() == {"success": True, "message": "Tour removed from cart"}
        assert Decimal(client.get("/cart").json()["total"]) == Decimal("50")

    def test_add_unknown_tour(self, client, alice, login):
        login("alice", "alice-secret")

        resp = client.post("/cart/add/424242")

        assert resp.status_code == 404
        assert resp.json()["success"] is False

    def test_cannot_remove_line_of_another_user(self, client, alice, bob, tours, login):
        login("alice", "alice-secret")
        line_id = client.post(f"/cart/add/{tours['a']}").json()["line_id"]

        login("bob", "bob-secret")
        resp = client.post(f"/cart/remove/{line_id}")
        assert resp.status_code == 403
        assert resp.json()["success"] is False

        login("alice", "alice-secret")
        assert len(client.get("/cart").json()["lines"]) == 1

    def test_remove_missing_line(self, client, alice, login):
        login("alice", "alice-secret")

        resp = client.post("/cart/remove/999")

        assert resp.status_code == 404
        assert resp.json()["success"] is False

    def test_malformed_ids_get_failure_payload(self, client, alice, login):
        login("alice", "alice-secret")

        for url in ("/cart/add/abc", "/cart/remove/abc", "/cart/add/-1"):
            resp = client.post(url)
            assert resp.status_code == 404
            assert resp.json()["success"] is False
            assert resp.json()["message"]

    def test_session_store_outage_gets_failure_payload(self, client, alice, tours, login, session_store, monkeypatch):
        login("alice", "alice-secret")

        def redis_down(*args, **kwargs):
            raise redis.ConnectionError("connection refused")

        monkeypatch.setattr(session_store.redis, "get", redis_down)

        resp = client.post(f"/cart/add/{tours['a']}")
        assert resp.status_code == 503
        assert resp.json()["success"] is False

        resp = client.post("/cart/remove/1")
        assert resp.status_code == 503
        assert resp.json()["success"] is False


class TestCatalogRoutes:

    def tour_payload(self, tours, **overrides):
        payload = {
            "name": "Tour C",
            "description": "Weekend",
            "price": "75.50",
            "duration": 2,
            "city_id": tours["city"],
            "hotel_id": tours["hotel"],
        }
        payload.update(overrides)
        return payload

    def test_catalog_is_public(self, client, tours):
        resp = client.get("/")

        assert resp.status_code == 200
        assert [t["name"] for t in resp.json()] == ["Tour A", "Tour B"]
        assert resp.json()[0]["city"]["name"] == "Paris"

    def test_client_cannot_create_tour(self, client, alice, tours, login):
        login("alice", "alice-secret")

        assert client.post("/tours", json=self.tour_payload(tours)).status_code == 403

    def test_anonymous_cannot_create_tour(self, client, tours):
        assert client.post("/tours", json=self.tour_payload(tours)).status_code == 401

    def test_admin_manages_tours(self, client, admin, tours, login):
        login("boss", "boss-secret")

        created = client.post("/tours", json=self.tour_payload(tours))
        assert created.status_code == 201
        tour_id = created.json()["id"]

        updated = client.put(f"/tours/{tour_id}", json=self.tour_payload(tours, price="80.00"))
        assert Decimal(updated.json()["price"]) == Decimal("80")

        assert client.delete(f"/tours/{tour_id}").json()["success"] is True
        assert client.get(f"/tours/{tour_id}").status_code == 404

    def test_tour_with_unknown_city_is_rejected(self, client, admin, tours, login):
        login("boss", "boss-secret")

        resp = client.post("/tours", json=self.tour_payload(tours, city_id=999))

        assert resp.status_code == 400

    def test_admin_adds_reference_data(self, client, admin, login):
        login("boss", "boss-secret")

        assert client.post("/cities", json={"name": "Rome", "country": "Italy"}).status_code == 201
        assert client.post("/hotels", json={"name": "Roma", "stars": 3}).status_code == 201
        assert client.post("/clients", json={"name": "Ivan", "email": "ivan@example.com"}).status_code == 201

        assert [c["name"] for c in client.get("/cities").json()] == ["Rome"]

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "ok"}
