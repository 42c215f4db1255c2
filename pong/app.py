"""Window, drawing and the main loop."""

import argparse
from pathlib import Path

import pygame

from .audio import load_sounds
from .game import Game
from .paddle import Direction
from .settings import (
    HALF_SCREEN_HEIGHT,
    HALF_SCREEN_WIDTH,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    GameState,
)

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
FRAMES_PER_SECOND = 60
SCORE_FONT_SIZE = 76
RESULT_FONT_SIZE = 18
DEFAULT_ASSETS = Path(__file__).resolve().parent / "assets"

_KEY_DIRECTIONS = {pygame.K_UP: Direction.UP, pygame.K_DOWN: Direction.DOWN}


class Hud:
    """Fonts used for the score and the final result."""

    def __init__(self, font_path=None):
        if font_path is not None and not Path(font_path).is_file():
            raise FileNotFoundError(f"font file not found: {font_path}")
        pygame.font.init()
        source = None if font_path is None else str(font_path)
        self.score_font = pygame.font.Font(source, SCORE_FONT_SIZE)
        self.result_font = pygame.font.Font(source, RESULT_FONT_SIZE)


def _draw_text(surface, text, font, x, baseline) -> None:
    rendered = font.render(text, False, WHITE)
    surface.blit(rendered, (x, baseline - font.get_ascent()))


def draw_game(surface, game, hud) -> None:
    """Render one frame of the game onto surface."""
    surface.fill(BLACK)

    for y in range(0, SCREEN_HEIGHT, 100):
        pygame.draw.line(surface, WHITE, (HALF_SCREEN_WIDTH, y), (HALF_SCREEN_WIDTH, y + 60), 10)

    for obj in game.objects:
        obj.draw(surface)

    _draw_text(surface, str(game.score.enemy), hud.score_font, HALF_SCREEN_WIDTH - 360, 120)
    _draw_text(surface, str(game.score.player), hud.score_font, HALF_SCREEN_WIDTH + 360 - 75, 120)

    if game.state is GameState.PAUSED:
        _draw_text(
            surface, "PAUSED", hud.score_font, HALF_SCREEN_WIDTH - 100, HALF_SCREEN_HEIGHT - 100
        )

    if game.state is GameState.GAME_OVER:
        if game.score.player > game.score.enemy:
            winner_x, loser_x = HALF_SCREEN_WIDTH + 450, HALF_SCREEN_WIDTH - 450
        else:
            winner_x, loser_x = HALF_SCREEN_WIDTH - 450, HALF_SCREEN_WIDTH + 350
        _draw_text(surface, "WINNER", hud.result_font, winner_x, HALF_SCREEN_HEIGHT)
        _draw_text(surface, "LOSER", hud.result_font, loser_x, HALF_SCREEN_HEIGHT)


def _handle_event(event, game) -> bool:
    """Apply one event; return False when the window should close."""
    if event.type == pygame.QUIT:
        return False
    if game.state is not GameState.PLAYING:
        return True
    direction = _KEY_DIRECTIONS.get(getattr(event, "key", None))
    if direction is None:
        return True
    if event.type == pygame.KEYDOWN:
        game.player.paddle.key_down(direction)
    elif event.type == pygame.KEYUP:
        game.player.paddle.key_up(direction)
    return True


def _play(game, font_path) -> None:
    pygame.init()
    try:
        surface = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption("Pong")
        hud = Hud(font_path)
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if not _handle_event(event, game):
                    running = False
            game.update()
            draw_game(surface, game, hud)
            pygame.display.flip()
            clock.tick(FRAMES_PER_SECOND)
    finally:
        pygame.quit()


def run(game) -> None:
    """Open the window and play until it is closed."""
    _play(game, None)


def main(argv=None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(prog="pong", description="Play Pong against the computer.")
    parser.add_argument("--assets", type=Path, help="directory holding wall.ogg, paddle.ogg, score.ogg")
    parser.add_argument("--font", type=Path, help="TrueType font for the score and result")
    args = parser.parse_args(argv)

    if args.font is not None and not args.font.is_file():
        raise FileNotFoundError(f"font file not found: {args.font}")

    sounds = {}
    if args.assets is not None:
        sounds = load_sounds(args.assets)
    elif DEFAULT_ASSETS.is_dir():
        sounds = load_sounds(DEFAULT_ASSETS)

    game = Game(sounds)
    _play(game, args.font)
    return 0