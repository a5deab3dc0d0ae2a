"""Signal names published by the simulation.

Audio cues carry no payload.  ``PARTICLES`` carries a spawn request for the
effects layer: ``x``, ``y``, ``count`` and the emission ranges
``speed_min``/``speed_max`` (units per tick) and ``life_min``/``life_max``
(ticks).
"""
from __future__ import annotations

LAUNCH = "launch"
COLLISION = "collision"
LAND = "land"
DAMAGE = "damage"
GAMEOVER = "gameover"
CLICK = "click"
START = "start"

AUDIO_CUES: tuple[str, ...] = (LAUNCH, COLLISION, LAND, DAMAGE, GAMEOVER, CLICK, START)

PARTICLES = "particles"

SPARK_SPEED = (2.0, 4.0)
SPARK_LIFE = (20.0, 30.0)
