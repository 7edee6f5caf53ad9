import asyncio

import pytest
from fastapi.testclient import TestClient
from uuid6 import uuid7

from game2048.main import app
from game2048.models.schemas import GameState
from game2048.routers.game import get_rng


@pytest.fixture
def client(session_factory, scripted_random):
    app.dependency_overrides[get_rng] = lambda: scripted_random()
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


def _assert_error(response, status, error):
    body = response.json()
    assert response.status_code == status
    assert body["status"] == status
    assert body["error"] == error
    assert body["message"]
    assert body["timestamp"]


def test_start_new_game(client):
    response = client.post("/api/games")
    assert response.status_code == 200
    body = response.json()
    assert set(body) == {"id", "board", "score", "gameOver", "won"}
    # both tiles land on the first empty cells with the scripted random source
    assert body["board"] == [[2, 2, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]]
    assert body["score"] == 0
    assert body["gameOver"] is False
    assert body["won"] is False


def test_start_new_game_with_board_size(client):
    response = client.post("/api/games", params={"boardSize": 3})
    assert response.status_code == 200
    assert len(response.json()["board"]) == 3


@pytest.mark.parametrize("board_size", ["0", "-2", "four"])
def test_start_new_game_with_bad_board_size(client, board_size):
    response = client.post("/api/games", params={"boardSize": board_size})
    _assert_error(response, 400, "Bad Request")


def test_play(client):
    game_id = client.post("/api/games").json()["id"]

    response = client.post(f"/api/games/{game_id}/move", params={"direction": "LEFT"})
    assert response.status_code == 200
    body = response.json()
    assert body["board"][0] == [4, 2, 0, 0]
    assert body["score"] == 4

    response = client.get(f"/api/games/{game_id}")
    assert response.status_code == 200
    assert response.json() == body


def test_unchanged_move_keeps_state(client):
    game_id = client.post("/api/games").json()["id"]
    before = client.get(f"/api/games/{game_id}").json()

    response = client.post(f"/api/games/{game_id}/move", params={"direction": "UP"})
    assert response.status_code == 200
    assert response.json() == before


def test_move_with_bad_direction(client):
    game_id = client.post("/api/games").json()["id"]
    response = client.post(f"/api/games/{game_id}/move", params={"direction": "DIAGONAL"})
    _assert_error(response, 400, "Bad Request")


def test_move_without_direction(client):
    game_id = client.post("/api/games").json()["id"]
    response = client.post(f"/api/games/{game_id}/move")
    _assert_error(response, 400, "Bad Request")


def test_unknown_game(client):
    game_id = uuid7()
    _assert_error(client.get(f"/api/games/{game_id}"), 404, "Not Found")
    _assert_error(
        client.post(f"/api/games/{game_id}/move", params={"direction": "UP"}), 404, "Not Found"
    )


def test_malformed_game_id(client):
    _assert_error(client.get("/api/games/not-a-uuid"), 400, "Bad Request")


def test_corrupt_game_hides_details(client, session_factory):
    game_id = uuid7()

    async def _add():
        async with session_factory() as session:
            async with session.begin():
                session.add(
                    GameState(game_id=game_id, board="2,?;0,0", board_size=2, score=0, game_over=False, won=False)
                )

    asyncio.run(_add())

    response = client.get(f"/api/games/{game_id}")
    _assert_error(response, 500, "Internal Server Error")
    assert "?" not in response.json()["message"]
