# main.py
import logging
from typing import Optional, Tuple

import pygame # type: ignore

from .config import (
    Config,
    BG, CHECKER_A, CHECKER_B, FOOD, SNAKE_HEAD, SNAKE_BODY, TEXT,
    UP, DOWN, LEFT, RIGHT,
)
from .game import SnakeEngine, Status
from .pacing import StepAccumulator

logger = logging.getLogger(__name__)

KEY_DIRECTIONS = {
    pygame.K_UP: UP, pygame.K_w: UP,
    pygame.K_DOWN: DOWN, pygame.K_s: DOWN,
    pygame.K_LEFT: LEFT, pygame.K_a: LEFT,
    pygame.K_RIGHT: RIGHT, pygame.K_d: RIGHT,
}


# ---------- Input ----------
def handle_input(engine: SnakeEngine, ticker: StepAccumulator) -> bool:
    """Process events and forward them to the engine. Return False to quit."""
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return False
        if event.type != pygame.KEYDOWN:
            continue
        if event.key == pygame.K_ESCAPE:
            return False
        if event.key == pygame.K_p:
            engine.toggle_pause()
        elif event.key == pygame.K_r:
            engine.restart()
            ticker.reset()
        elif event.key in KEY_DIRECTIONS:
            engine.request_direction(KEY_DIRECTIONS[event.key])
    return True


# ---------- Draw ----------
def draw_cell(screen: pygame.Surface, cell: Tuple[int, int], size: int,
              color: Tuple[int, int, int], inset: int = 1) -> None:
    gx, gy = cell
    rect = pygame.Rect(gx * size + inset, gy * size + inset, size - 2 * inset, size - 2 * inset)
    pygame.draw.rect(screen, color, rect)


def draw_board(screen: pygame.Surface, engine: SnakeEngine) -> None:
    size = engine.cfg.cell_size
    cols, rows = engine.grid_dimensions
    screen.fill(BG)
    # faint checker
    for x in range(cols):
        for y in range(rows):
            color = CHECKER_A if (x + y) % 2 == 0 else CHECKER_B
            pygame.draw.rect(screen, color, pygame.Rect(x * size, y * size, size - 1, size - 1))

    if engine.food_position is not None:
        draw_cell(screen, engine.food_position, size, FOOD)
    for i, cell in enumerate(engine.snake_segments):
        draw_cell(screen, cell, size, SNAKE_HEAD if i == 0 else SNAKE_BODY)


def draw_hud(screen: pygame.Surface, font: pygame.font.Font,
             big_font: pygame.font.Font, engine: SnakeEngine) -> None:
    width, height = screen.get_size()
    screen.blit(font.render(f"Score: {engine.score}", True, TEXT), (8, 4))

    if engine.status is Status.PAUSED:
        info = "[P] Resume  [R] Restart  [Esc] Quit  (Paused)"
    elif engine.status is Status.ENDED:
        # Dim with translucent overlay
        overlay = pygame.Surface((width, height), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 140))
        screen.blit(overlay, (0, 0))
        title = big_font.render("Game Over", True, TEXT)
        screen.blit(title, title.get_rect(center=(width // 2, height // 2 - 20)))
        info = "[R] Restart  [Esc] Quit"
    else:
        info = "[Arrows / WASD] Move  [P] Pause  [R] Restart  [Esc] Quit"
    screen.blit(font.render(info, True, TEXT), (8, height - 28))


# ---------- Loop ----------
def main(cfg: Optional[Config] = None) -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    cfg = cfg if cfg is not None else Config()
    engine = SnakeEngine(cfg)
    ticker = StepAccumulator()

    pygame.init()
    screen = pygame.display.set_mode((cfg.cols * cfg.cell_size, cfg.rows * cfg.cell_size))
    pygame.display.set_caption("Snake")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 48)
    clock = pygame.time.Clock()

    running = True
    while running:
        # 1) input
        running = handle_input(engine, ticker)
        if not running:
            break

        # 2) update at fixed interval
        dt = clock.tick(120) / 1000.0
        ticker.advance(engine, dt)

        # 3) render
        draw_board(screen, engine)
        draw_hud(screen, font, big_font, engine)
        pygame.display.flip()

    logger.info("Quitting with score %d", engine.score)
    pygame.quit()


if __name__ == "__main__":
    main()
