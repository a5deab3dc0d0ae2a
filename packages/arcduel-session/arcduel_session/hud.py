"""Read-only view of a match for HUD text."""
from __future__ import annotations

from dataclasses import dataclass

from arcduel import Match, Phase

_LABELS = {
    Phase.GET_READY: "GET READY",
    Phase.EXECUTING: "EXECUTING",
}


def phase_label(match: Match, player: int) -> str:
    if match.phase is Phase.AIMING:
        return "AIMING" if match.current_player == player else "WAITING"
    return _LABELS[match.phase]


@dataclass(frozen=True)
class Hud:
    phase: Phase
    current_player: int
    time_left: float
    health: tuple[float, float]
    max_health: tuple[float, float]
    labels: tuple[str, str]
    game_over: bool
    winner: int | None
    paused: bool

    @classmethod
    def of(cls, match: Match, paused: bool = False) -> Hud:
        first, second = match.avatars
        return cls(
            phase=match.phase,
            current_player=match.current_player,
            time_left=max(0.0, match.turn_time_left),
            health=(first.health, second.health),
            max_health=(first.max_health, second.max_health),
            labels=(phase_label(match, 0), phase_label(match, 1)),
            game_over=match.game_over,
            winner=match.winner,
            paused=paused,
        )
