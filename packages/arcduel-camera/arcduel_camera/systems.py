"""System factory for the follow camera."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from arcduel_camera.camera import Viewport, camera_target, smooth_toward

if TYPE_CHECKING:
    from arcduel import Match, MatchConfig, TickContext


def make_camera_system(
    config: MatchConfig,
    viewport: Viewport,
) -> Callable[[Match, TickContext], None]:
    """Ease ``match.camera`` toward the current focus once per tick.

    The step is per tick, like the flight integrator. The camera never
    snaps and nothing else on the match is touched.
    """

    def camera_system(match: Match, ctx: TickContext) -> None:
        target = camera_target(match, viewport)
        match.camera = smooth_toward(match.camera, target, config.camera_smoothing)

    return camera_system
