"""Tests for card API endpoints."""

from fastapi.testclient import TestClient


class TestListCards:
    """Tests for GET /cards."""

    def test_initial_cards(self, client: TestClient):
        response = client.get("/cards")

        assert response.status_code == 200
        assert response.json() == [
            {"id": 1, "suit": "Hearts", "value": "Ace"},
            {"id": 2, "suit": "Spades", "value": "King"},
            {"id": 3, "suit": "Diamonds", "value": "Queen"},
        ]


class TestGetCard:
    """Tests for GET /cards/{id}."""

    def test_get_card(self, client: TestClient):
        response = client.get("/cards/2")

        assert response.status_code == 200
        assert response.json() == {"id": 2, "suit": "Spades", "value": "King"}

    def test_get_card_not_found(self, client: TestClient):
        response = client.get("/cards/99")

        assert response.status_code == 404
        assert response.json() == {"message": "Card not found"}

    def test_non_numeric_id_not_found(self, client: TestClient):
        response = client.get("/cards/ace")

        assert response.status_code == 404
        assert response.json() == {"message": "Card not found"}


class TestCreateCard:
    """Tests for POST /cards."""

    def test_create_card(self, client: TestClient):
        response = client.post("/cards", json={"suit": "Clubs", "value": "Jack"})

        assert response.status_code == 201
        assert response.json() == {"id": 4, "suit": "Clubs", "value": "Jack"}
        assert len(client.get("/cards").json()) == 4

    def test_missing_fields_rejected(self, client: TestClient):
        for payload in ({"suit": "Clubs"}, {"value": "Jack"}, {"suit": "", "value": "2"}):
            response = client.post("/cards", json=payload)

            assert response.status_code == 400
            assert response.json() == {"message": "Suit and value are required."}

    def test_ids_are_not_reused(self, client: TestClient):
        client.delete("/cards/3")

        response = client.post("/cards", json={"suit": "Clubs", "value": "Two"})

        assert response.json()["id"] == 4


class TestDeleteCard:
    """Tests for DELETE /cards/{id}."""

    def test_delete_card(self, client: TestClient):
        response = client.delete("/cards/1")

        assert response.status_code == 200
        assert response.json() == {"message": "Card deleted successfully"}
        assert client.get("/cards/1").status_code == 404
        assert [c["id"] for c in client.get("/cards").json()] == [2, 3]

    def test_delete_card_not_found(self, client: TestClient):
        response = client.delete("/cards/42")

        assert response.status_code == 404
        assert response.json() == {"message": "Card not found"}
