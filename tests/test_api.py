# tests/test_api.py

import copy
import unittest

from backend.config import DEFAULTS
from frontend import api
from frontend.app import create_app


class TestApi(unittest.TestCase):

    def setUp(self):
        api.sessions.clear()
        self.addCleanup(api.sessions.clear)
        self.client = create_app(copy.deepcopy(DEFAULTS)).test_client()

    def new_game(self, **payload):
        response = self.client.post("/api/new_game", json=payload)
        return response, response.get_json()

    def test_new_game(self):
        response, data = self.new_game(size=4, num_mines=3, seed=1)
        self.assertEqual(response.status_code, 201)
        self.assertIn(data["game_id"], api.sessions)
        self.assertEqual(data["size"], 4)
        self.assertEqual(data["board"], [[None] * 4 for _ in range(4)])

    def test_new_game_defaults(self):
        _, data = self.new_game()
        self.assertEqual(data["size"], DEFAULTS["game"]["default_size"])
        self.assertEqual(data["num_mines"], DEFAULTS["game"]["default_mines"])

    def test_invalid_parameters(self):
        invalid = [
            {"size": 1},
            {"size": 3, "num_mines": 9},
            {"size": 3, "num_mines": "2"},
            {"size": 3, "num_mines": 1, "seed": [1]},
        ]
        for payload in invalid:
            response, data = self.new_game(**payload)
            self.assertEqual(response.status_code, 400)
            self.assertIn("error", data)
        self.assertEqual(api.sessions, {})

    def test_body_must_be_an_object(self):
        response = self.client.post("/api/new_game", json=[1, 2])
        self.assertEqual(response.status_code, 400)
        self.assertIn("error", response.get_json())

        response = self.client.post("/api/reveal", json=[1, 2])
        self.assertEqual(response.status_code, 400)
        self.assertEqual(api.sessions, {})

    def test_size_limit(self):
        max_size = DEFAULTS["api"]["max_size"]
        response, data = self.new_game(size=max_size + 1, num_mines=1)
        self.assertEqual(response.status_code, 400)
        self.assertIn(str(max_size), data["error"])
        self.assertEqual(api.sessions, {})

        response, _ = self.new_game(size=max_size, num_mines=1, seed=3)
        self.assertEqual(response.status_code, 201)

    def test_reveal_and_win(self):
        _, data = self.new_game(size=2, num_mines=0)
        response = self.client.post("/api/reveal", json={"game_id": data["game_id"], "row": 0, "col": 1})
        result = response.get_json()
        self.assertEqual(response.status_code, 200)
        self.assertTrue(result["won"])
        self.assertEqual(result["outcome"], "win")
        self.assertEqual(result["board"], [[0, 0], [0, 0]])

    def test_reveal_errors(self):
        _, data = self.new_game(size=3, num_mines=1)
        game_id = data["game_id"]

        response = self.client.post("/api/reveal", json={"game_id": game_id, "row": 0})
        self.assertEqual(response.status_code, 400)

        response = self.client.post("/api/reveal", json={"game_id": game_id, "row": 3, "col": 0})
        self.assertEqual(response.status_code, 400)
        self.assertIn("outside", response.get_json()["error"])

        response = self.client.post("/api/reveal", json={"game_id": "missing", "row": 0, "col": 0})
        self.assertEqual(response.status_code, 404)

        response = self.client.post("/api/reveal", json={"game_id": game_id, "row": True, "col": False})
        self.assertEqual(response.status_code, 400)

        response = self.client.post("/api/reveal", json={"game_id": [game_id], "row": 0, "col": 0})
        self.assertEqual(response.status_code, 404)

    def test_sessions_are_independent(self):
        _, first = self.new_game(size=2, num_mines=0)
        _, second = self.new_game(size=2, num_mines=0)
        self.client.post("/api/reveal", json={"game_id": first["game_id"], "row": 0, "col": 0})

        state = self.client.get(f"/api/state/{second['game_id']}").get_json()
        self.assertEqual(state["revealed_count"], 0)
        self.assertFalse(state["game_over"])

    def test_end_game(self):
        _, data = self.new_game(size=2, num_mines=1)
        game_id = data["game_id"]
        self.assertEqual(self.client.delete(f"/api/game/{game_id}").status_code, 204)
        self.assertEqual(self.client.get(f"/api/state/{game_id}").status_code, 404)
        self.assertEqual(self.client.delete(f"/api/game/{game_id}").status_code, 404)


if __name__ == "__main__":
    unittest.main()
