"""Tests for match state, configuration validation and lifecycle helpers."""
from __future__ import annotations

import random

import pytest
from arcduel import MatchConfig, Phase, check_winner, new_match, restart
from arcduel.match import Avatar, random_color


def _match(seed: int = 0):
    return new_match(MatchConfig(), random.Random(seed))


class TestMatchConfig:
    def test_defaults(self) -> None:
        config = MatchConfig()
        assert config.gravity == 0.3
        assert config.max_force == 20.0
        assert config.drag_scale == 0.1
        assert config.floor_y == 600.0
        assert config.turn_time_limit == 15.0
        assert config.spawn_points == ((200.0, 580.0), (600.0, 580.0))

    def test_frozen(self) -> None:
        config = MatchConfig()
        with pytest.raises(AttributeError):
            config.gravity = 1.0  # type: ignore[misc]

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"max_force": 0.0},
            {"drag_scale": -0.1},
            {"avatar_radius": 0.0},
            {"restitution": 1.5},
            {"camera_smoothing": 0.0},
            {"trajectory_steps": 0},
            {"get_ready_duration": -1.0},
            {"spawn_points": ((0.0, 0.0),)},
        ],
    )
    def test_invalid_values_rejected(self, kwargs) -> None:
        with pytest.raises(ValueError):
            MatchConfig(**kwargs)


class TestNewMatch:
    def test_initial_state(self) -> None:
        match = _match()
        assert match.phase is Phase.GET_READY
        assert match.current_player == 0
        assert match.turn_time_left == 15.0
        assert match.game_over is False
        assert match.winner is None
        assert match.camera == (0.0, 0.0)

    def test_avatars_at_spawn_points(self) -> None:
        first, second = _match().avatars
        assert first.position == (200.0, 580.0)
        assert second.position == (600.0, 580.0)
        for avatar in (first, second):
            assert avatar.velocity == (0.0, 0.0)
            assert avatar.radius == 20.0
            assert avatar.health == avatar.max_health == 100.0
            assert not (avatar.aiming or avatar.launched or avatar.frozen)
            assert not (avatar.air_jump_used or avatar.arc_set)

    def test_active_and_other_roles(self) -> None:
        match = _match()
        assert match.active is match.avatars[0]
        assert match.other is match.avatars[1]
        match.current_player = 1
        assert match.active is match.avatars[1]
        assert match.other is match.avatars[0]


class TestAvatarFlags:
    def test_in_flight_and_settled(self) -> None:
        avatar = Avatar((0.0, 0.0), (0.0, 0.0), 20.0, 100.0, 100.0)
        assert avatar.settled and not avatar.in_flight
        avatar.launched = True
        assert avatar.in_flight and not avatar.settled
        avatar.frozen = True
        assert avatar.settled and not avatar.in_flight

    def test_airborne_is_strict(self) -> None:
        avatar = Avatar((0.0, 580.0), (0.0, 0.0), 20.0, 100.0, 100.0)
        assert not avatar.airborne(600.0)
        avatar.position = (0.0, 579.0)
        assert avatar.airborne(600.0)


class TestRandomColor:
    def test_channels_in_range(self) -> None:
        rng = random.Random(3)
        for _ in range(50):
            color = random_color(rng)
            assert all(0 <= c <= 255 for c in color)

    def test_repeatable_with_seed(self) -> None:
        assert random_color(random.Random(9)) == random_color(random.Random(9))


class TestRestart:
    def test_restart_after_game_over(self) -> None:
        match = _match()
        first, second = match.avatars
        first.health = 0.0
        second.health = 37.0
        second.position = (420.0, 100.0)
        second.velocity = (3.0, -4.0)
        second.launched = True
        second.air_jump_used = True
        match.phase = Phase.EXECUTING
        match.current_player = 1
        match.turn_time_left = 0.5
        match.camera = (120.0, -40.0)
        check_winner(match)
        assert match.game_over

        restart(match, MatchConfig(), random.Random(1))

        assert match.phase is Phase.GET_READY
        assert match.game_over is False
        assert match.winner is None
        assert match.current_player == 0
        assert match.turn_time_left == 15.0
        assert match.get_ready_elapsed == 0.0
        assert match.camera == (0.0, 0.0)
        for avatar in match.avatars:
            assert avatar.health == 100.0
            assert avatar.velocity == (0.0, 0.0)
            assert not (avatar.launched or avatar.air_jump_used)
        assert match.avatars[1].position == (600.0, 580.0)

    def test_restart_builds_new_avatars(self) -> None:
        match = _match()
        old = match.avatars
        restart(match, MatchConfig(), random.Random(1))
        assert match.avatars[0] is not old[0]


class TestCheckWinner:
    def test_no_winner_while_both_alive(self) -> None:
        match = _match()
        assert check_winner(match) is None
        assert match.game_over is False

    def test_winner_is_the_other_avatar(self) -> None:
        match = _match()
        match.avatars[1].health = 0.0
        assert check_winner(match) == 0
        assert match.game_over is True

        match = _match()
        match.avatars[0].health = 0.0
        assert check_winner(match) == 1

    def test_double_knockout_goes_to_player_one(self) -> None:
        match = _match()
        match.avatars[0].health = 0.0
        match.avatars[1].health = 0.0
        assert check_winner(match) == 1
