"""
tick-chase Arcade
Playable pygame frontend for tick-chase: arrows steer, Space starts, P pauses.
"""

import logging
import sys

import pygame

from tick_chase import Session, SessionState, events
from tick_chase.types import CellKind, Direction

# --- Configuration ---
FPS = 60
TITLE = "tick-chase Arcade"
HUD_HEIGHT = 48

# Colors
BG_COLOR = (0, 0, 0)
WALL_COLOR = (33, 33, 222)
WALL_EDGE_COLOR = (26, 26, 201)
HOME_COLOR = (40, 40, 70)
STANDARD_COLOR = (255, 184, 174)
BONUS_COLOR = (255, 184, 255)
AGENT_COLOR = (255, 255, 0)
EVADE_COLOR = (40, 40, 255)
RETURNING_COLOR = (255, 255, 255)
HUD_COLOR = (220, 220, 220)
ADVERSARY_COLORS = {
    "direct": (255, 0, 0),
    "ambush": (255, 184, 255),
    "flank": (0, 255, 255),
    "shy": (255, 184, 82),
}

KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}

BANNERS = {
    SessionState.IDLE: "Press SPACE to start",
    SessionState.PAUSED: "PAUSED",
    SessionState.GAME_OVER: "GAME OVER - SPACE to play again",
    SessionState.VICTORY: "YOU WIN - SPACE to play again",
}

logger = logging.getLogger("arcade")


def draw_maze(screen, session):
    maze = session.maze
    cs = maze.cell_size
    for row in range(maze.rows):
        for col in range(maze.cols):
            kind = maze.cell_kind(col, row)
            rect = pygame.Rect(col * cs, HUD_HEIGHT + row * cs, cs, cs)
            if kind is CellKind.WALL:
                pygame.draw.rect(screen, WALL_COLOR, rect)
                pygame.draw.rect(screen, WALL_EDGE_COLOR, rect, 1)
            elif kind is CellKind.HOME:
                pygame.draw.rect(screen, HOME_COLOR, rect)


def draw_actors(screen, snap, config, blink):
    for item in snap["collectibles"]:
        if item["consumed"]:
            continue
        x, y = item["position"]
        if item["tier"] == "bonus":
            if blink:
                pygame.draw.circle(screen, BONUS_COLOR, (int(x), int(y) + HUD_HEIGHT),
                                   int(config.bonus_radius))
        else:
            pygame.draw.circle(screen, STANDARD_COLOR, (int(x), int(y) + HUD_HEIGHT),
                               int(config.standard_radius))

    agent = snap["agent"]
    x, y = agent["position"]
    radius = int(config.agent_radius)
    if not agent["alive"]:
        # Shrink over the death delay.
        left = 1.0 - agent["death_elapsed"] / max(config.death_delay, 1.0)
        radius = max(1, int(radius * max(left, 0.0)))
    pygame.draw.circle(screen, AGENT_COLOR, (int(x), int(y) + HUD_HEIGHT), radius)

    for adv in snap["adversaries"]:
        x, y = adv["position"]
        if adv["mode"] == "evade":
            color = EVADE_COLOR
        elif adv["mode"] == "returning":
            color = RETURNING_COLOR
        else:
            color = ADVERSARY_COLORS.get(adv["name"], (200, 0, 0))
        center = (int(x), int(y) + HUD_HEIGHT)
        if adv["mode"] == "returning":
            pygame.draw.circle(screen, color, center, int(config.adversary_radius), 1)
        else:
            pygame.draw.circle(screen, color, center, int(config.adversary_radius))


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    session = Session()
    config = session.config
    logger.info("Session seed %d", session.seed)

    def on_signal(name, data):
        if name in (events.AGENT_DIED, events.GAME_OVER, events.VICTORY):
            logger.info("%s %s", name, data)

    session.bus.subscribe("*", on_signal)

    pygame.init()
    width = session.maze.pixel_width
    height = session.maze.pixel_height + HUD_HEIGHT
    screen = pygame.display.set_mode((width, height))
    pygame.display.set_caption(TITLE)
    pg_clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 16)

    running = True
    frame = 0

    while running:
        pg_clock.tick(FPS)
        frame += 1

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    session.start()
                elif event.key == pygame.K_p:
                    session.toggle_pause()
                elif event.key in KEY_DIRECTIONS:
                    session.request_direction(KEY_DIRECTIONS[event.key])

        # --- Update ---
        session.step()

        # --- Draw ---
        snap = session.snapshot()
        screen.fill(BG_COLOR)
        draw_maze(screen, session)
        draw_actors(screen, snap, config, blink=(frame // 15) % 2 == 0)

        # --- HUD ---
        hud = f"Score: {snap['score']}   Lives: {snap['lives']}   FPS: {pg_clock.get_fps():.0f}"
        screen.blit(font.render(hud, True, HUD_COLOR), (10, 6))
        screen.blit(
            font.render("Arrows=Steer  Space=Start  P=Pause  Esc=Quit", True, HUD_COLOR),
            (10, 26),
        )
        banner = BANNERS.get(session.state)
        if banner:
            surf = font.render(banner, True, AGENT_COLOR)
            screen.blit(surf, surf.get_rect(center=(width // 2, height // 2)))

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
