"""Tests for the per-frame round update."""

from __future__ import annotations

import pytest

from whack.constants import HOLE_POSITIONS
from whack.hammer import Hammer
from whack.holes import HolePool
from whack.logger import GameLogger
from whack.models import CollisionEvent, Sfx
from whack.round import FrameInput, RoundState
from whack.spawner import Spawner


def names(output):
    return [r.name for r in output.records]


class TestRoundSetup:
    """Test suite for building a round."""

    def test_initial_state(self, round_state):
        """5 holes, 4 hidden enemies, 3 lives, no score."""
        assert len(round_state.holes) == 5
        assert len(round_state.spawners) == 4
        assert [s.name for s in round_state.spawners] == ["enemy_0", "enemy_1", "enemy_2", "enemy_3"]
        assert not any(s.showing for s in round_state.spawners)
        assert (round_state.score, round_state.lives) == (0, 3)
        assert round_state.texts == {"score": "Score: 0", "lives": "Lives: 3"}

    def test_initial_scene_has_holes_and_player(self, round_state):
        """Hidden enemies are not in the scene."""
        assert sorted(r.name for r in round_state.scene) == [
            "hole_0", "hole_1", "hole_2", "hole_3", "hole_4", "player",
        ]

    def test_too_many_enemies(self):
        """There must be a hole for every enemy."""
        with pytest.raises(ValueError):
            RoundState.new(hole_positions=[(0.0, 0.0)], enemy_count=2)


class TestFrame:
    """Test suite for RoundState.update."""

    def test_cursor_and_press(self, round_state):
        """Input moves the hammer and drives its state."""
        out = round_state.update(FrameInput(delta=0.1, cursor=(12.0, -8.0), pressed=True))
        player = next(r for r in out.records if r.name == "player")
        assert player.position == (12.0, -8.0)
        assert player.collidable

    def test_missing_cursor_keeps_position(self, round_state):
        """Without a cursor the hammer stays put but still reads the button."""
        round_state.update(FrameInput(delta=0.1, cursor=(5.0, 5.0)))
        out = round_state.update(FrameInput(delta=0.1, cursor=None, pressed=True))
        player = next(r for r in out.records if r.name == "player")
        assert player.position == (5.0, 5.0)
        assert player.collidable

    def test_timers_pop_enemies_up(self, round_state):
        """Expired timers bring every enemy up and occupy their holes."""
        out = round_state.update(FrameInput(delta=1.0))
        enemies = [r for r in out.records if r.name.startswith("enemy_")]
        assert len(enemies) == 4
        assert round_state.holes.free_count() == 1
        occupied = {h.pos for h in round_state.holes if not h.is_free}
        assert {r.position for r in enemies} == occupied

    def test_records_sorted_by_layer(self, round_state):
        """Holes below enemies below the hammer."""
        out = round_state.update(FrameInput(delta=1.0))
        layers = [r.layer for r in out.records]
        assert layers == sorted(layers)
        assert names(out)[-1] == "player"

    def test_occupied_holes_not_collidable(self, round_state):
        """Hole records track hole state every frame."""
        out = round_state.update(FrameInput(delta=1.0))
        holes = {r.name: r for r in out.records if r.name.startswith("hole_")}
        for hole in round_state.holes:
            assert holes[hole.name].collidable == hole.is_free

    def test_enemy_hit_scenario(self, scripted_rng):
        """An enemy up at (0, 200) is struck: score 1, enemy gone, hole free."""
        state = RoundState.new(rng=scripted_rng([(0.0, 200.0)]), enemy_count=4)
        state.spawners[0].timer.duration = 0.5
        out = state.update(FrameInput(delta=0.5))
        assert "enemy_0" in names(out)
        assert state.spawners[0].state.position == (0.0, 200.0)

        out = state.update(FrameInput(
            delta=0.1,
            collisions=[CollisionEvent.begin("player", "enemy_0")],
        ))
        assert out.sounds == [Sfx.IMPACT]
        assert out.texts["score"] == "Score: 1"
        assert not state.spawners[0].showing
        assert state.holes.find("hole_1").is_free

        out = state.update(FrameInput(delta=0.1))
        assert "enemy_0" not in names(out)

    def test_miss_scenario(self, round_state):
        """Striking a free hole costs a life and is published."""
        out = round_state.update(FrameInput(
            delta=0.1,
            collisions=[CollisionEvent.begin("player", "hole_2")],
        ))
        assert out.sounds == [Sfx.MISS]
        assert out.texts["lives"] == "Lives: 2"

    def test_end_events_do_nothing(self, round_state):
        """Overlap-end events never change the round."""
        round_state.update(FrameInput(delta=1.0))
        before = [(s.name, s.state) for s in round_state.spawners]
        out = round_state.update(FrameInput(delta=0.1, collisions=[
            CollisionEvent.end("player", "hole_0"),
            CollisionEvent.end("player", "enemy_0"),
        ]))
        assert out.sounds == []
        assert (round_state.score, round_state.lives) == (0, 3)
        assert [(s.name, s.state) for s in round_state.spawners] == before


class TestGameOver:
    """Test suite for the terminal condition."""

    def lose(self, state):
        misses = [CollisionEvent.begin("player", "hole_4") for _ in range(3)]
        return state.update(FrameInput(delta=0.1, collisions=misses))

    def test_round_freezes(self, round_state):
        """After lives hit zero nothing moves any more."""
        out = self.lose(round_state)
        assert out.texts["lives"] == "Lives: 0"
        assert out.game_over
        assert "game_over" not in out.texts

        frozen = round_state.update(FrameInput(delta=0.1))
        for _ in range(5):
            out = round_state.update(FrameInput(
                delta=5.0,
                cursor=(100.0, 100.0),
                pressed=True,
                collisions=[CollisionEvent.begin("player", "enemy_0"), CollisionEvent.begin("player", "hole_0")],
            ))
            assert out.records == frozen.records
            assert out.texts == frozen.texts
            assert out.sounds == []
        assert (round_state.score, round_state.lives) == (0, 0)
        assert round_state.hammer.position == (0.0, 0.0)

    def test_message_added_once(self, round_state):
        """The game-over text appears on the first frozen frame and stays."""
        self.lose(round_state)
        outs = [round_state.update(FrameInput(delta=0.1)) for _ in range(3)]
        for out in outs:
            assert out.texts["game_over"] == "GAME OVER: The UN condemn you"
            assert out.texts["score"] == "Score: 0"
            assert out.texts["lives"] == "Lives: 0"

    def test_game_over_logged_once(self, tmp_path, scripted_rng):
        """The log gets one game-over row no matter how many frozen frames run."""
        log_file = tmp_path / "log.md"
        state = RoundState.new(rng=scripted_rng(), logger=GameLogger(str(log_file)))
        self.lose(state)
        for _ in range(4):
            state.update(FrameInput(delta=0.1))
        content = log_file.read_text(encoding="utf-8")
        assert content.count("| GAME OVER |") == 1
        assert content.count("| MISS |") == 3


class TestSpawnerLookup:
    """Test suite for matching enemy events to spawners by name."""

    def test_out_of_order_names(self, scripted_rng):
        """A hit on enemy_0 lands on the spawner named enemy_0, wherever it sits."""
        rng = scripted_rng([(0.0, 200.0)])
        holes = HolePool(HOLE_POSITIONS, rng=rng)
        state = RoundState(Hammer(), holes, [Spawner("enemy_2", rng=rng), Spawner("enemy_0", rng=rng)])
        state.spawners[1].reset(holes)

        out = state.update(FrameInput(
            delta=0.1,
            collisions=[CollisionEvent.begin("player", "enemy_0")],
        ))
        assert out.sounds == [Sfx.IMPACT]
        assert state.score == 1
        assert not state.spawners[1].showing
        assert state.find_spawner("enemy_2") is state.spawners[0]
        assert state.find_spawner("enemy_1") is None


class TestLivesValidation:
    """Test suite for the starting lives."""

    def test_negative_lives_rejected(self):
        """Lives are a non-negative counter."""
        with pytest.raises(ValueError):
            RoundState.new(lives=-1)

    def test_zero_lives_starts_over(self):
        """A round with no lives is over from the first frame."""
        state = RoundState.new(lives=0)
        out = state.update(FrameInput(delta=0.1))
        assert out.game_over
        assert out.texts["game_over"] == "GAME OVER: The UN condemn you"
