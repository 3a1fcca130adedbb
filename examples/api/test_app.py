"""Tests for the api example."""

from muxer.testing import TestClient


class TestApiApp:
    async def test_profile(self, example_mux) -> None:
        async with TestClient(example_mux) as client:
            response = await client.get("/api/users/42")
            assert response.status == 200
            assert response.json() == {"id": "42"}

    async def test_first_registered_wins(self, example_mux) -> None:
        async with TestClient(example_mux) as client:
            response = await client.get("/api/users/me")
            assert response.json() == {"id": "me"}

    async def test_products_link_to_built_paths(self, example_mux) -> None:
        async with TestClient(example_mux) as client:
            response = await client.get("/api/products")
            assert response.json() == {
                "products": ["/api/products/pxyz/do", "/api/products/pabc/do"]
            }

    async def test_product_action(self, example_mux) -> None:
        async with TestClient(example_mux) as client:
            response = await client.put("/api/products/pxyz/do")
            assert response.json() == {"id": "pxyz", "done": True}

    async def test_unknown_product(self, example_mux) -> None:
        async with TestClient(example_mux) as client:
            response = await client.put("/api/products/nope/do")
            assert response.status == 404
            assert "nope" in response.text

    async def test_score_round_trip(self, example_mux) -> None:
        async with TestClient(example_mux) as client:
            missing = await client.get("/api/scores/7")
            assert missing.status == 404

            saved = await client.put("/api/scores/7", json={"score": 10})
            assert saved.status == 303
            assert saved.header("location") == "/api/scores/7"

            response = await client.get("/api/scores/7")
            assert response.json() == {"id": "7", "score": 10}

    async def test_generic_route(self, example_mux) -> None:
        async with TestClient(example_mux) as client:
            response = await client.get("/api/users/show/alex")
            assert response.status == 200
            assert "action=show" in response.text
            assert "id=alex" in response.text

    async def test_whatever(self, example_mux) -> None:
        async with TestClient(example_mux) as client:
            response = await client.post("/api/somedomain/true/23.45")
            assert response.status == 201
            assert response.json() == {"domain": "somedomain", "action": "true", "id": "23.45"}

    async def test_outside_base(self, example_mux) -> None:
        async with TestClient(example_mux) as client:
            response = await client.get("/something/else")
            assert response.status == 404

    def test_build_paths(self, example_mux) -> None:
        assert example_mux.build_path("profile", 123) == "/api/users/123"
        assert example_mux.build_path("list") == "/api/products"
        assert example_mux.build_path("product", "pxyz") == "/api/products/pxyz/do"
        assert (
            example_mux.build_path("whatever", "somedomain", True, 23.45)
            == "/api/somedomain/true/23.45"
        )
