import pygame
import pytest

from pong.app import Hud, draw_game, main
from pong.game import Game
from pong.settings import HALF_SCREEN_HEIGHT, HALF_SCREEN_WIDTH, SCREEN_HEIGHT, SCREEN_WIDTH, GameState

WHITE = (255, 255, 255)


@pytest.fixture
def hud():
    return Hud()


@pytest.fixture
def surface():
    return pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))


def _white_pixels(surface, left, top, width, height):
    return sum(
        1
        for x in range(left, left + width)
        for y in range(top, top + height)
        if tuple(surface.get_at((x, y)))[:3] == WHITE
    )


def test_hud_font_heights_follow_sizes(hud):
    assert hud.score_font.get_height() > hud.result_font.get_height()


def test_hud_missing_font_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Hud(tmp_path / "missing.ttf")


def test_draw_game_draws_objects_and_dashes(surface, hud):
    game = Game()
    draw_game(surface, game, hud)
    assert tuple(surface.get_at((game.ball.position.x + 2, game.ball.position.y + 2)))[:3] == WHITE
    enemy = game.enemy.paddle.position
    assert tuple(surface.get_at((enemy.x + 5, enemy.center_y)))[:3] == WHITE
    player = game.player.paddle.position
    assert tuple(surface.get_at((player.x + 5, player.center_y)))[:3] == WHITE
    assert tuple(surface.get_at((HALF_SCREEN_WIDTH, 30)))[:3] == WHITE
    assert tuple(surface.get_at((HALF_SCREEN_WIDTH, 80)))[:3] != WHITE


def test_draw_game_clears_background(surface, hud):
    surface.fill(WHITE)
    draw_game(surface, Game(), hud)
    assert tuple(surface.get_at((300, SCREEN_HEIGHT - 20)))[:3] != WHITE


def test_draw_game_shows_scores(surface, hud):
    game = Game()
    draw_game(surface, game, hud)
    assert _white_pixels(surface, HALF_SCREEN_WIDTH - 360, 30, 80, 95) > 0


def test_draw_game_shows_result_only_when_over(surface, hud):
    game = Game()
    game.score.player = 10
    game.score.enemy = 3
    game.state = GameState.PLAYING
    draw_game(surface, game, hud)
    region = (HALF_SCREEN_WIDTH + 450, HALF_SCREEN_HEIGHT - 25, 90, 30)
    assert _white_pixels(surface, *region) == 0
    game.state = GameState.GAME_OVER
    draw_game(surface, game, hud)
    assert _white_pixels(surface, *region) > 0


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit):
        main(["--bogus"])


def test_main_missing_sounds_raise(tmp_path):
    with pytest.raises(FileNotFoundError):
        main(["--assets", str(tmp_path)])