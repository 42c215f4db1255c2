import random

import pygame
import pytest

from pong.ball import Ball
from pong.paddle import (
    ENEMY_SPEED,
    PADDLE_HEIGHT,
    USER_MOVEMENT_SPEED,
    Direction,
    Enemy,
    Player,
)
from pong.settings import HALF_SCREEN_HEIGHT, SCREEN_HEIGHT, SCREEN_WIDTH


def test_player_placement():
    player = Player()
    assert player.paddle.position.right == SCREEN_WIDTH - 70
    assert player.paddle.position.center_y == HALF_SCREEN_HEIGHT


def test_enemy_placement():
    enemy = Enemy()
    assert enemy.paddle.position.left == 70
    assert enemy.paddle.speed == ENEMY_SPEED


def test_key_press_and_release_cancel_out():
    player = Player()
    player.paddle.key_down(Direction.UP)
    assert player.paddle.velocity.y == -USER_MOVEMENT_SPEED
    player.paddle.key_down(Direction.DOWN)
    assert player.paddle.velocity.y == 0.0
    player.paddle.key_up(Direction.UP)
    player.paddle.key_up(Direction.DOWN)
    assert player.paddle.velocity.y == 0.0


def test_player_update_moves_up():
    player = Player()
    y = player.paddle.position.y
    player.paddle.key_down(Direction.UP)
    player.update()
    assert player.paddle.position.y == y - USER_MOVEMENT_SPEED


def test_player_clamped_to_top():
    player = Player()
    player.paddle.position.top = 5
    player.paddle.key_down(Direction.UP)
    player.update()
    assert player.paddle.position.top == 0


def test_enemy_clamped_to_bottom():
    enemy = Enemy()
    enemy.paddle.position.bottom = SCREEN_HEIGHT - 3
    enemy.paddle.velocity.y = ENEMY_SPEED
    enemy.update()
    assert enemy.paddle.position.bottom == SCREEN_HEIGHT


def test_player_bounce_top_part():
    player = Player()
    ball = Ball()
    ball.velocity.x = 10.0
    ball.position.top = player.paddle.position.top
    player.bounce(ball, 0)
    assert ball.velocity.x == -10.0
    assert ball.velocity.y == ball.at_angle(-135)


def test_enemy_bounce_middle_is_flat():
    enemy = Enemy()
    ball = Ball()
    ball.velocity.x = -10.0
    ball.velocity.y = 5.0
    ball.position.top = enemy.paddle.position.center_y - 10
    enemy.bounce(ball, 0)
    assert ball.velocity.x == 10.0
    assert ball.velocity.y == 0.0


def test_bounce_below_paddle_keeps_vertical_speed():
    enemy = Enemy()
    ball = Ball()
    ball.velocity.x = -10.0
    ball.velocity.y = 5.0
    ball.position.top = enemy.paddle.position.bottom + 50
    enemy.bounce(ball, 9)
    assert ball.velocity.y == 5.0


def test_patrol_moves_towards_target():
    enemy = Enemy()
    enemy.random_position = enemy.paddle.position.center_y + 100
    enemy.patrol()
    assert enemy.paddle.velocity.y == ENEMY_SPEED
    enemy.random_position = enemy.paddle.position.center_y - 100
    enemy.patrol()
    assert enemy.paddle.velocity.y == -ENEMY_SPEED


def test_patrol_stops_near_target():
    enemy = Enemy()
    enemy.paddle.velocity.y = ENEMY_SPEED
    enemy.random_position = enemy.paddle.position.center_y + 5
    enemy.patrol()
    assert enemy.paddle.velocity.y == 0.0
    assert enemy.random_position == 0


def test_patrol_snaps_when_closer_than_speed():
    enemy = Enemy()
    target = enemy.paddle.position.center_y + 12
    enemy.random_position = target
    enemy.patrol()
    assert enemy.paddle.position.center_y == target
    assert enemy.random_position == 0


@pytest.mark.parametrize("seed", range(10))
def test_patrol_picks_target_on_screen(seed):
    enemy = Enemy(rng=random.Random(seed))
    enemy.patrol()
    half = PADDLE_HEIGHT // 2
    if enemy.random_position:
        assert half <= enemy.random_position < SCREEN_HEIGHT - half
    else:
        assert enemy.paddle.velocity.y == 0.0


def test_paddle_draw():
    surface = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))
    enemy = Enemy()
    enemy.draw(surface)
    pos = enemy.paddle.position
    assert surface.get_at((pos.center_x, pos.center_y))[:3] == (255, 255, 255)
    assert surface.get_at((pos.right + 5, pos.center_y))[:3] == (0, 0, 0)