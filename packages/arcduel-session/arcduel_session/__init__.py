"""arcduel-session - Wires the duel engine together for a renderer."""
from __future__ import annotations

from arcduel_session.hud import Hud, phase_label
from arcduel_session.session import Session

__all__ = ["Hud", "Session", "phase_label"]
