"""PointerController - turns pointer events into aim gestures and launches."""
from __future__ import annotations

from typing import TYPE_CHECKING

from arcduel import Phase
from arcduel_camera import screen_to_world
from arcduel_physics import Trajectory, vec
from arcduel_signal import cues

from arcduel_aim.launch import AimGesture, Launch, LaunchKind, plan_release, resolve_release

if TYPE_CHECKING:
    from arcduel import Avatar, Match, MatchConfig, Point
    from arcduel_signal import SignalBus

_DRAG_PHASES = (Phase.AIMING, Phase.EXECUTING)


class PointerController:
    """Routes pointer-down/move/up to the active avatar.

    Events may arrive at any time between ticks. Anything out of phase, or
    aimed at something other than the active avatar, is dropped silently.
    Coordinates are screen coordinates; the match camera maps them into
    the world.
    """

    def __init__(
        self,
        match: Match,
        config: MatchConfig,
        bus: SignalBus | None = None,
    ) -> None:
        self._match = match
        self._config = config
        self._bus = bus
        self._gesture: AimGesture | None = None
        self._avatar: Avatar | None = None

    @property
    def dragging(self) -> bool:
        return self._live_gesture() is not None

    @property
    def gesture(self) -> AimGesture | None:
        return self._gesture

    def _live_gesture(self) -> AimGesture | None:
        """The current gesture, unless a timeout or turn change took it away."""
        avatar = self._avatar
        if avatar is None or avatar is not self._match.active or not avatar.aiming:
            return None
        return self._gesture

    def pointer_down(self, screen: Point) -> bool:
        """Start a drag if *screen* lands on the active avatar. Returns True if it did."""
        match = self._match
        if match.game_over or match.phase not in _DRAG_PHASES:
            return False
        avatar = match.active
        if any(a.aiming for a in match.avatars):
            return False
        point = screen_to_world(screen, match.camera)
        if vec.distance(point, avatar.position) >= avatar.radius:
            return False
        self.cancel()
        avatar.aiming = True
        self._avatar = avatar
        self._gesture = AimGesture(start=avatar.position, end=point)
        return True

    def pointer_move(self, screen: Point) -> None:
        if self._gesture is not None:
            self._gesture.end = screen_to_world(screen, self._match.camera)

    def pointer_up(self) -> Launch | None:
        """Finish the drag and launch. Returns the applied launch, if any."""
        gesture = self._live_gesture()
        if gesture is None:
            self.cancel()
            return None
        self._gesture = None
        self._avatar = None
        launch = resolve_release(self._match, gesture, self._config)
        if launch is not None and launch.kind is not LaunchKind.NUDGE:
            if self._bus is not None:
                self._bus.publish(cues.LAUNCH)
        return launch

    def cancel(self) -> None:
        if self._avatar is not None:
            self._avatar.aiming = False
        self._gesture = None
        self._avatar = None

    def preview(self) -> Trajectory | None:
        """Predicted path for releasing the current drag right now."""
        gesture = self._live_gesture()
        if gesture is None:
            return None
        avatar = self._match.active
        launch = plan_release(self._match, avatar, gesture, self._config)
        if launch is None:
            return None
        return Trajectory(
            avatar.position,
            launch.velocity,
            self._config.gravity,
            self._config.floor_y,
            self._config.trajectory_steps,
        )
