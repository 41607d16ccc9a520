"""
Tests for Scoresnake/strategy.py - move selection and the /move handler.
"""

import pytest

from Scoresnake.game import Direction, Game, InvalidGameState
from Scoresnake.scoring import ScoreMap
from Scoresnake.strategy import (
    FALLBACK_MOVE,
    NO_SAFE_MOVE_SHOUT,
    choose_move,
    move,
    select_move,
)

from conftest import game_state


def quiet(msg):
    pass


class TestSelectMove:
    """Tests for picking the best surviving direction."""

    def test_picks_highest_score(self):
        scores = ScoreMap()
        scores.adjust(Direction.LEFT, 3)
        scores.adjust(Direction.UP, -1)
        assert select_move(scores) == (Direction.LEFT, 3)

    def test_empty_candidates_give_none(self):
        scores = ScoreMap()
        for direction in Direction:
            scores.remove(direction)
        assert select_move(scores) is None

    @pytest.mark.parametrize("tied,expected", [
        ((Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT), Direction.UP),
        ((Direction.RIGHT, Direction.DOWN, Direction.LEFT), Direction.RIGHT),
        ((Direction.DOWN, Direction.LEFT), Direction.DOWN),
        ((Direction.LEFT, Direction.UP), Direction.UP),
    ])
    def test_ties_follow_up_right_down_left(self, tied, expected):
        scores = ScoreMap()
        for direction in Direction:
            if direction not in tied:
                scores.adjust(direction, -10)
        assert select_move(scores)[0] is expected

    def test_removed_direction_is_never_selected(self):
        scores = ScoreMap()
        scores.adjust(Direction.DOWN, 50)
        scores.remove(Direction.DOWN)
        assert select_move(scores)[0] is not Direction.DOWN


class TestChooseMove:
    """End-to-end decisions on concrete boards."""

    def test_food_directly_above_goes_up(self, log):
        """11x11, head (5, 5), food (5, 6), only self on the board."""
        game = Game.from_json(game_state([(5, 5), (5, 4), (5, 3)], food=[(5, 6)]))
        assert choose_move(game, log) is Direction.UP
        assert log.lines[0] == "head position: (5, 5)"
        assert log.lines[-1] == "game-1 MOVE up, SCORE 15"

    def test_single_segment_self_with_food_above_goes_up(self):
        game = Game.from_json(game_state([(5, 5)], food=[(5, 6)]))
        assert choose_move(game, quiet) is Direction.UP

    def test_separately_supplied_self_never_turns_into_its_neck(self):
        """Self only under 'self', board.snakes empty, food behind the neck."""
        state = game_state([(5, 5), (5, 4)], food=[(5, 2)])
        state["board"]["snakes"] = []
        state["self"] = state.pop("you")
        assert choose_move(Game.from_json(state), quiet) is not Direction.DOWN

    def test_fully_boxed_in_returns_none(self, log):
        """Neighbours (4,5), (6,5), (5,4), (5,6) all occupied."""
        game = Game.from_json(game_state(
            [(5, 5), (5, 4)],
            others=[[(4, 5), (4, 6), (5, 6), (6, 6), (6, 5)]],
        ))
        assert choose_move(game, log) is None
        assert log.lines[-1] == NO_SAFE_MOVE_SHOUT

    def test_trapped_in_corner_returns_none(self):
        game = Game.from_json(game_state([(0, 0), (1, 0)], others=[[(0, 1), (0, 2)]]))
        assert choose_move(game, quiet) is None

    def test_attractive_but_occupied_direction_is_skipped(self):
        """Plenty of food to the right, but an enemy sits right next to the head."""
        game = Game.from_json(game_state([(5, 5)], food=[(7, 5), (8, 5), (9, 5)], others=[[(6, 5)]]))
        assert choose_move(game, quiet) is Direction.UP

    @pytest.mark.parametrize("y", range(7))
    def test_left_edge_never_moves_left(self, y):
        game = Game.from_json(game_state([(0, y)], width=7, height=7, food=[(0, 3)]))
        assert choose_move(game, quiet) is not Direction.LEFT

    @pytest.mark.parametrize("head,forbidden", [
        ((6, 3), Direction.RIGHT),
        ((3, 0), Direction.DOWN),
        ((3, 6), Direction.UP),
    ])
    def test_other_edges_are_never_crossed(self, head, forbidden):
        game = Game.from_json(game_state([head], width=7, height=7))
        assert choose_move(game, quiet) is not forbidden

    def test_same_input_gives_same_move(self):
        state = game_state([(3, 3), (3, 2), (2, 2)], food=[(8, 8), (1, 6)], others=[[(6, 4), (6, 5), (7, 5)]])
        first = choose_move(Game.from_json(state), quiet)
        for _ in range(5):
            assert choose_move(Game.from_json(state), quiet) is first


class TestMoveHandler:
    """Tests for the dict-level /move handler."""

    def test_returns_wire_name(self):
        assert move(game_state([(5, 5), (5, 4)], food=[(5, 6)]), quiet) == {"move": "up"}

    def test_no_safe_move_sends_fallback_with_shout(self):
        state = game_state([(5, 5), (5, 4)], others=[[(4, 5), (4, 6), (5, 6), (6, 6), (6, 5)]])
        assert move(state, quiet) == {"move": FALLBACK_MOVE, "shout": NO_SAFE_MOVE_SHOUT}

    def test_invalid_payload_raises(self):
        with pytest.raises(InvalidGameState):
            move({"turn": 1}, quiet)
