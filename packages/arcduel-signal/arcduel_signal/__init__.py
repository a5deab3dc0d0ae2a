"""arcduel-signal - Audio cues and effect requests for the duel engine."""
from __future__ import annotations

from arcduel_signal import cues
from arcduel_signal.bus import SignalBus
from arcduel_signal.systems import make_signal_system

__all__ = ["SignalBus", "cues", "make_signal_system"]
