"""Session - one duel: engine, systems in tick order, and input routing."""
from __future__ import annotations

import logging
from typing import Any, Callable

from arcduel import Clock, Engine, Match, MatchConfig, Phase, Point, TickContext
from arcduel_aim import Launch, PointerController
from arcduel_camera import Viewport, make_camera_system
from arcduel_physics import Impact, make_flight_system, make_impact_system
from arcduel_signal import SignalBus, cues, make_signal_system
from arcduel_turns import make_settle_system, make_turn_system

from arcduel_session.hud import Hud

logger = logging.getLogger(__name__)


class Session:
    """Everything a renderer needs to drive a duel.

    Tick order is fixed: turn timers, camera, flight, impacts, round settle,
    then signal delivery. Pointer and pause input may arrive between ticks.
    """

    def __init__(
        self,
        config: MatchConfig | None = None,
        seed: int | None = None,
        viewport: Viewport | None = None,
        clock: Clock | None = None,
    ) -> None:
        self._engine = Engine(config=config, seed=seed, clock=clock)
        self._bus = SignalBus()
        self._viewport = viewport if viewport is not None else Viewport()
        self._pointer = PointerController(self._engine.match, self._engine.config, self._bus)

        cfg = self._engine.config
        self._engine.add_system(make_turn_system(cfg, self._bus, self._on_transition))
        self._engine.add_system(make_camera_system(cfg, self._viewport))
        self._engine.add_system(make_flight_system(cfg, self._bus))
        self._engine.add_system(make_impact_system(cfg, self._bus, self._on_impact))
        self._engine.add_system(make_settle_system(cfg, self._bus, self._on_transition))
        self._engine.add_system(make_signal_system(self._bus))
        logger.debug("session created with seed %d", self._engine.seed)

    @property
    def engine(self) -> Engine:
        return self._engine

    @property
    def match(self) -> Match:
        return self._engine.match

    @property
    def config(self) -> MatchConfig:
        return self._engine.config

    @property
    def bus(self) -> SignalBus:
        return self._bus

    @property
    def viewport(self) -> Viewport:
        return self._viewport

    @property
    def pointer(self) -> PointerController:
        return self._pointer

    @property
    def paused(self) -> bool:
        return self._engine.paused

    def subscribe(self, signal_name: str, handler: Callable[[str, dict[str, Any]], None]) -> None:
        self._bus.subscribe(signal_name, handler)

    # -- Ticking --

    def tick(self, dt: float) -> bool:
        return self._engine.step(dt)

    def frame(self, now: float | None = None) -> bool:
        return self._engine.frame(now)

    # -- Input --

    def pointer_down(self, x: float, y: float) -> bool:
        if self.paused:
            return False
        return self._pointer.pointer_down((x, y))

    def pointer_move(self, x: float, y: float) -> None:
        if self.paused:
            return
        self._pointer.pointer_move((x, y))

    def pointer_up(self) -> Launch | None:
        if self.paused:
            return None
        player = self.match.current_player
        launch = self._pointer.pointer_up()
        if launch is not None:
            logger.debug(
                "player %d %s launch, velocity (%.2f, %.2f)",
                player + 1, launch.kind.value, *launch.velocity,
            )
        return launch

    def toggle_pause(self, now: float | None = None) -> bool:
        paused = self._engine.toggle_pause(now)
        logger.info("paused" if paused else "resumed")
        return paused

    def restart(self) -> None:
        """Start a new game: fresh avatars, GET_READY, camera at the origin."""
        self._pointer.cancel()
        self._bus.clear()
        self._engine.restart()
        self._bus.publish(cues.CLICK)
        logger.info("match restarted")

    def resize(self, width: float, height: float) -> None:
        self._viewport.resize(width, height)

    # -- Views --

    def preview(self) -> list[Point]:
        trajectory = self._pointer.preview()
        if trajectory is None:
            return []
        return trajectory.points()

    def hud(self) -> Hud:
        return Hud.of(self.match, self.paused)

    # -- Hooks --

    def _on_transition(self, match: Match, ctx: TickContext, old: Phase, new: Phase) -> None:
        logger.debug("tick %d: %s -> %s", ctx.tick_number, old.value, new.value)

    def _on_impact(self, match: Match, ctx: TickContext, impact: Impact) -> None:
        logger.debug(
            "tick %d: impact %.2f, damage (%.2f, %.2f)",
            ctx.tick_number, impact.base_damage, *impact.damage,
        )
        if match.game_over:
            logger.info("game over, player %d wins", match.winner + 1)
