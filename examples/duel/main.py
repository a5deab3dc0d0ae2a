"""
arcduel Duel
Two-player hot-seat artillery duel: drag your avatar to fling it, correct
once in the air, and knock the other player out.
"""

import logging
import math
import random
import sys
from dataclasses import dataclass

import pygame

from arcduel import Phase
from arcduel_camera import world_to_screen
from arcduel_session import Session
from arcduel_signal import cues

# --- Configuration ---
WIDTH, HEIGHT = 800, 600
FPS = 60
TITLE = "arcduel"

# Colors
BG_COLOR = (20, 22, 38)
FLOOR_COLOR = (70, 74, 96)
HUD_COLOR = (220, 220, 235)
PREVIEW_COLOR = (255, 255, 255)
BAR_BG = (60, 20, 20)
BAR_FG = (80, 220, 110)
SPARK_COLOR = (255, 210, 90)
OVERLAY_COLOR = (0, 0, 0, 160)
BUTTON_COLOR = (90, 140, 255)

BAR_WIDTH = 200
BAR_HEIGHT = 14

log = logging.getLogger("arcduel.demo")


# --- Sparks (rendering only, fed by particle requests) ---
@dataclass
class Spark:
    x: float
    y: float
    vx: float
    vy: float
    life: float


def make_spark_sink(sparks: list[Spark]):
    def on_particles(name, data):
        for _ in range(data["count"]):
            angle = random.uniform(0, 2 * math.pi)
            speed = random.uniform(data["speed_min"], data["speed_max"])
            sparks.append(Spark(
                x=data["x"],
                y=data["y"],
                vx=math.cos(angle) * speed,
                vy=math.sin(angle) * speed,
                life=random.uniform(data["life_min"], data["life_max"]),
            ))

    return on_particles


def update_sparks(sparks: list[Spark]) -> None:
    for spark in sparks:
        spark.x += spark.vx
        spark.y += spark.vy
        spark.life -= 1
    sparks[:] = [s for s in sparks if s.life > 0]


def on_cue(name, data):
    # No audio backend; cues are just logged.
    log.debug("cue: %s", name)


def draw_health_bar(screen, font, x, y, label, health, max_health, color):
    pygame.draw.rect(screen, BAR_BG, pygame.Rect(x, y, BAR_WIDTH, BAR_HEIGHT))
    filled = int(BAR_WIDTH * health / max_health)
    pygame.draw.rect(screen, BAR_FG, pygame.Rect(x, y, filled, BAR_HEIGHT))
    pygame.draw.rect(screen, color, pygame.Rect(x, y, BAR_WIDTH, BAR_HEIGHT), 1)
    surf = font.render(label, True, HUD_COLOR)
    screen.blit(surf, (x, y + BAR_HEIGHT + 4))


def main():
    logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")

    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT), pygame.RESIZABLE)
    pygame.display.set_caption(TITLE)
    pg_clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 14)
    big_font = pygame.font.SysFont("monospace", 36, bold=True)

    # --- Session setup ---
    session = Session()
    session.resize(float(WIDTH), float(HEIGHT))

    sparks: list[Spark] = []
    session.subscribe(cues.PARTICLES, make_spark_sink(sparks))
    session.bus.subscribe_many(cues.AUDIO_CUES, on_cue)

    restart_button = pygame.Rect(0, 0, 160, 44)
    running = True

    while running:
        pg_clock.tick(FPS)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.VIDEORESIZE:
                session.resize(float(event.w), float(event.h))
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_p:
                    session.toggle_pause()
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                mx, my = event.pos
                if session.match.game_over and restart_button.collidepoint(mx, my):
                    session.restart()
                    sparks.clear()
                else:
                    session.pointer_down(float(mx), float(my))
            elif event.type == pygame.MOUSEMOTION:
                mx, my = event.pos
                session.pointer_move(float(mx), float(my))
            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                session.pointer_up()

        # --- Update ---
        if session.frame():
            update_sparks(sparks)

        # --- Draw ---
        match = session.match
        camera = match.camera
        width, height = screen.get_size()
        screen.fill(BG_COLOR)

        _, floor_top = world_to_screen((0.0, session.config.floor_y), camera)
        pygame.draw.rect(
            screen, FLOOR_COLOR,
            pygame.Rect(0, int(floor_top), width, max(0, height - int(floor_top))),
        )

        points = session.preview()
        for i, point in enumerate(points):
            if i % 3:
                continue
            sx, sy = world_to_screen(point, camera)
            pygame.draw.circle(screen, PREVIEW_COLOR, (int(sx), int(sy)), 2)

        for avatar in match.avatars:
            sx, sy = world_to_screen(avatar.position, camera)
            radius = int(avatar.radius)
            pygame.draw.circle(screen, avatar.color, (int(sx), int(sy)), radius)
            if avatar is match.active and match.phase is not Phase.GET_READY:
                pygame.draw.circle(screen, PREVIEW_COLOR, (int(sx), int(sy)), radius + 3, 1)

        for spark in sparks:
            sx, sy = world_to_screen((spark.x, spark.y), camera)
            pygame.draw.circle(screen, SPARK_COLOR, (int(sx), int(sy)), 2)

        # --- HUD ---
        hud = session.hud()
        for i, avatar in enumerate(match.avatars):
            x = 10 if i == 0 else width - BAR_WIDTH - 10
            label = f"P{i + 1}  {hud.labels[i]}"
            draw_health_bar(
                screen, font, x, 10, label, hud.health[i], hud.max_health[i], avatar.color
            )

        status = f"{hud.phase.value.upper()}  P{hud.current_player + 1}  {hud.time_left:4.1f}s"
        if hud.paused:
            status += "  [PAUSED]"
        surf = font.render(status, True, HUD_COLOR)
        screen.blit(surf, ((width - surf.get_width()) // 2, 10))
        surf = font.render("Drag=Aim  P=Pause  Esc=Quit", True, HUD_COLOR)
        screen.blit(surf, (10, height - 24))

        if hud.game_over:
            overlay = pygame.Surface((width, height), pygame.SRCALPHA)
            overlay.fill(OVERLAY_COLOR)
            screen.blit(overlay, (0, 0))
            surf = big_font.render(f"PLAYER {hud.winner + 1} WINS", True, HUD_COLOR)
            screen.blit(surf, ((width - surf.get_width()) // 2, height // 2 - 70))
            restart_button.center = (width // 2, height // 2 + 10)
            pygame.draw.rect(screen, BUTTON_COLOR, restart_button, border_radius=6)
            surf = font.render("RESTART", True, HUD_COLOR)
            screen.blit(surf, surf.get_rect(center=restart_button.center))

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
