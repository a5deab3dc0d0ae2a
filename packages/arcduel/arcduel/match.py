"""Match state: the two avatars, the turn phase and the lifecycle helpers."""
from __future__ import annotations

import colorsys
import random
from dataclasses import dataclass, field
from enum import Enum

from arcduel.config import MatchConfig
from arcduel.types import Point

Color = tuple[int, int, int]


class Phase(Enum):
    """Turn macro-state."""

    GET_READY = "getReady"
    AIMING = "aiming"
    EXECUTING = "executing"


@dataclass
class Avatar:
    """A player's circular body.

    ``launched`` bodies integrate under gravity unless ``frozen``.
    ``air_jump_used`` is cleared on landing, so each flight gets one full
    air correction.
    """

    position: Point
    velocity: Point
    radius: float
    max_health: float
    health: float
    color: Color = (255, 255, 255)
    aiming: bool = False
    launched: bool = False
    frozen: bool = False
    air_jump_used: bool = False
    arc_set: bool = False

    @property
    def x(self) -> float:
        return self.position[0]

    @property
    def y(self) -> float:
        return self.position[1]

    @property
    def in_flight(self) -> bool:
        return self.launched and not self.frozen

    @property
    def settled(self) -> bool:
        return not self.launched or self.frozen

    def airborne(self, floor_y: float) -> bool:
        return self.position[1] < floor_y - self.radius


@dataclass
class Match:
    """Everything the tick loop owns. Exactly two avatars, never resized."""

    avatars: tuple[Avatar, Avatar]
    turn_time_left: float
    current_player: int = 0
    phase: Phase = Phase.GET_READY
    get_ready_elapsed: float = 0.0
    game_over: bool = False
    winner: int | None = None
    camera: Point = field(default=(0.0, 0.0))

    @property
    def active(self) -> Avatar:
        return self.avatars[self.current_player]

    @property
    def other(self) -> Avatar:
        return self.avatars[1 - self.current_player]

    @property
    def any_launched(self) -> bool:
        return any(a.launched for a in self.avatars)

    @property
    def all_settled(self) -> bool:
        return all(a.settled for a in self.avatars)


def random_color(rng: random.Random) -> Color:
    """Bright random hue (80% saturation, 60% lightness)."""
    r, g, b = colorsys.hls_to_rgb(rng.random(), 0.6, 0.8)
    return (round(r * 255), round(g * 255), round(b * 255))


def _fresh_avatar(spawn: Point, config: MatchConfig, rng: random.Random) -> Avatar:
    return Avatar(
        position=(float(spawn[0]), float(spawn[1])),
        velocity=(0.0, 0.0),
        radius=config.avatar_radius,
        max_health=config.max_health,
        health=config.max_health,
        color=random_color(rng),
    )


def new_match(config: MatchConfig, rng: random.Random) -> Match:
    first, second = config.spawn_points
    return Match(
        avatars=(
            _fresh_avatar(first, config, rng),
            _fresh_avatar(second, config, rng),
        ),
        turn_time_left=config.turn_time_limit,
    )


def restart(match: Match, config: MatchConfig, rng: random.Random) -> None:
    """Reset *match* in place to the start of a new game."""
    fresh = new_match(config, rng)
    match.avatars = fresh.avatars
    match.turn_time_left = fresh.turn_time_left
    match.current_player = 0
    match.phase = Phase.GET_READY
    match.get_ready_elapsed = 0.0
    match.game_over = False
    match.winner = None
    match.camera = (0.0, 0.0)


def check_winner(match: Match) -> int | None:
    """End the match if an avatar has no health left.

    Player 0 is checked first, so a double knockout goes to player 1.
    """
    first, second = match.avatars
    if first.health <= 0:
        match.game_over = True
        match.winner = 1
    elif second.health <= 0:
        match.game_over = True
        match.winner = 0
    return match.winner
