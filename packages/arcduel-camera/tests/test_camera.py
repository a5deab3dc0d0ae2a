"""Tests for focus selection, smoothing and the camera system."""
from __future__ import annotations

import math

import pytest
from arcduel import Engine
from arcduel_camera import (
    Viewport,
    camera_target,
    focus_point,
    make_camera_system,
    screen_to_world,
    smooth_toward,
    world_to_screen,
)


class TestFocusPoint:
    def test_active_avatar_when_grounded(self) -> None:
        match = Engine(seed=1).match
        assert focus_point(match) == (200.0, 580.0)
        match.current_player = 1
        assert focus_point(match) == (600.0, 580.0)

    def test_midpoint_when_anyone_launched(self) -> None:
        match = Engine(seed=1).match
        match.avatars[1].launched = True
        match.avatars[1].position = (600.0, 380.0)
        assert focus_point(match) == (400.0, 480.0)

    def test_target_centres_focus(self) -> None:
        match = Engine(seed=1).match
        assert camera_target(match, Viewport(800.0, 600.0)) == (-200.0, 280.0)


class TestSmoothing:
    def test_moves_fraction_of_gap(self) -> None:
        assert smooth_toward((0.0, 0.0), (100.0, -40.0), 0.05) == (5.0, -2.0)

    def test_never_overshoots(self) -> None:
        camera = (0.0, 0.0)
        for _ in range(200):
            camera = smooth_toward(camera, (100.0, 0.0), 0.05)
            assert camera[0] < 100.0

    def test_converges(self) -> None:
        camera = (0.0, 0.0)
        for _ in range(500):
            camera = smooth_toward(camera, (100.0, 50.0), 0.05)
        assert math.isclose(camera[0], 100.0, abs_tol=1e-6)
        assert math.isclose(camera[1], 50.0, abs_tol=1e-6)


class TestCoordinates:
    def test_screen_world_round_trip(self) -> None:
        camera = (-150.0, 40.0)
        world = screen_to_world((10.0, 20.0), camera)
        assert world == (-140.0, 60.0)
        assert world_to_screen(world, camera) == (10.0, 20.0)


class TestViewport:
    def test_resize(self) -> None:
        viewport = Viewport()
        viewport.resize(1024.0, 768.0)
        assert (viewport.width, viewport.height) == (1024.0, 768.0)

    def test_resize_rejects_empty(self) -> None:
        with pytest.raises(ValueError):
            Viewport().resize(0.0, 600.0)


class TestCameraSystem:
    def test_one_step(self) -> None:
        engine = Engine(seed=1)
        engine.add_system(make_camera_system(engine.config, Viewport(800.0, 600.0)))
        engine.step(0.016)
        # target (-200, 280), 5% of the way from the origin
        assert engine.match.camera == (-10.0, 14.0)

    def test_does_not_touch_avatars(self) -> None:
        engine = Engine(seed=1)
        engine.add_system(make_camera_system(engine.config, Viewport()))
        before = [(a.position, a.velocity) for a in engine.match.avatars]
        engine.run(10, 0.016)
        after = [(a.position, a.velocity) for a in engine.match.avatars]
        assert before == after

    def test_follows_resized_viewport(self) -> None:
        engine = Engine(seed=1)
        viewport = Viewport(800.0, 600.0)
        engine.add_system(make_camera_system(engine.config, viewport))
        viewport.resize(400.0, 600.0)
        engine.step(0.016)
        assert engine.match.camera == (0.0, 14.0)
