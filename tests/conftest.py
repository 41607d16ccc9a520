"""
Shared payload builders for the Scoresnake tests.
"""

import pytest


def coord(x, y):
    return {"x": x, "y": y}


def snake_json(snake_id, body):
    """Battlesnake JSON for a snake whose body is a list of (x, y) tuples."""
    cells = [coord(x, y) for x, y in body]
    return {"id": snake_id, "head": cells[0], "body": cells}


def game_state(you_body, width=11, height=11, food=(), others=(), game_id="game-1", turn=3):
    """
    Build a full /move payload. ``you`` is always part of board.snakes,
    like the real Battlesnake engine sends it.
    """
    you = snake_json("you", you_body)
    snakes = [you] + [snake_json(f"enemy-{i}", body) for i, body in enumerate(others)]
    return {
        "game": {"id": game_id},
        "turn": turn,
        "board": {
            "width": width,
            "height": height,
            "food": [coord(x, y) for x, y in food],
            "snakes": snakes,
        },
        "you": you,
    }


class LogRecorder:
    """Collects log lines instead of printing them."""

    def __init__(self):
        self.lines = []

    def __call__(self, msg):
        self.lines.append(msg)


@pytest.fixture
def log():
    return LogRecorder()
