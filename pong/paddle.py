"""Paddles: the keyboard-driven player and the computer enemy."""

from dataclasses import dataclass, field
from enum import Enum

import pygame

from .geometry import Rect, Vector2D, rand_int, round_half_away
from .settings import HALF_SCREEN_HEIGHT, SCREEN_HEIGHT, SCREEN_WIDTH

PADDLE_WIDTH = 20
PADDLE_HEIGHT = 110
PADDLE_MARGIN = 70
ENEMY_SPEED = 13
USER_MOVEMENT_SPEED = 15.0
PATROL_OFFSET = 10
WHITE = (255, 255, 255)

_PLAYER_ANGLES = (
    (-135, -150, -165, -180, -180, 165, 150, 135),
    (-150, -165, -180, -180, 165, 150, 135, 120),
    (-165, -180, -180, 165, 150, 135, 120, 105),
)
_ENEMY_ANGLES = (
    (-45, -30, -15, 0, 0, 15, 30, 45),
    (-60, -45, -30, -15, 0, 0, 15, 30),
    (-75, -60, -45, -30, -15, 0, 15, 30),
)


class Direction(Enum):
    """Vertical movement direction of a key."""

    UP = -1
    DOWN = 1


@dataclass
class Paddle:
    """A paddle rectangle with its velocity and speed."""

    position: Rect
    velocity: Vector2D = field(default_factory=Vector2D)
    speed: float = 0.0

    def draw(self, surface) -> None:
        pygame.draw.rect(
            surface,
            WHITE,
            pygame.Rect(self.position.x, self.position.y, self.position.width, self.position.height),
        )

    def key_down(self, direction: Direction) -> None:
        """A movement key was pressed."""
        self.velocity.y += direction.value * USER_MOVEMENT_SPEED

    def key_up(self, direction: Direction) -> None:
        """A movement key was released."""
        self.velocity.y -= direction.value * USER_MOVEMENT_SPEED

    def _clamp_to_screen(self) -> None:
        if self.position.top < 0:
            self.position.top = 0
        if self.position.bottom > SCREEN_HEIGHT:
            self.position.bottom = SCREEN_HEIGHT


def _angle_table(tables, volley_count: int):
    if volley_count < 4:
        return tables[0]
    if volley_count < 8:
        return tables[1]
    return tables[2]


def _bounce(paddle: Paddle, ball, volley_count: int, tables) -> None:
    ball.velocity.x *= -1
    part = paddle.position.height // 8
    for i, angle in enumerate(_angle_table(tables, volley_count), start=1):
        if ball.position.top < paddle.position.top + part * i:
            ball.velocity.y = ball.at_angle(angle)
            break


class Player:
    """The user's paddle on the right side of the screen."""

    def __init__(self):
        self.paddle = Paddle(
            Rect(
                SCREEN_WIDTH - PADDLE_MARGIN - PADDLE_WIDTH,
                HALF_SCREEN_HEIGHT - PADDLE_HEIGHT // 2,
                PADDLE_WIDTH,
                PADDLE_HEIGHT,
            )
        )

    def draw(self, surface) -> None:
        self.paddle.draw(surface)

    def update(self) -> None:
        """Move vertically by the velocity and stay on screen."""
        self.paddle.position.y += round_half_away(self.paddle.velocity.y)
        self.paddle._clamp_to_screen()

    def bounce(self, ball, volley_count: int) -> None:
        """Send the ball back at an angle chosen by where it hit the paddle."""
        _bounce(self.paddle, ball, volley_count, _PLAYER_ANGLES)


class Enemy:
    """The computer's paddle on the left side of the screen."""

    def __init__(self, rng=None):
        self.paddle = Paddle(
            Rect(PADDLE_MARGIN, HALF_SCREEN_HEIGHT - PADDLE_HEIGHT // 2, PADDLE_WIDTH, PADDLE_HEIGHT),
            speed=ENEMY_SPEED,
        )
        self.random_position = 0
        self.rng = rng

    def draw(self, surface) -> None:
        self.paddle.draw(surface)

    def update(self) -> None:
        """Move by the velocity and stay on screen."""
        self.paddle.position.x += round_half_away(self.paddle.velocity.x)
        self.paddle.position.y += round_half_away(self.paddle.velocity.y)
        self.paddle._clamp_to_screen()

    def bounce(self, ball, volley_count: int) -> None:
        """Send the ball back at an angle chosen by where it hit the paddle."""
        _bounce(self.paddle, ball, volley_count, _ENEMY_ANGLES)

    def patrol(self) -> None:
        """Wander towards a random height, picking a new one on arrival."""
        position = self.paddle.position
        if self.random_position == 0:
            half = position.height // 2
            self.random_position = rand_int(half, SCREEN_HEIGHT - half, self.rng)

        target = self.random_position
        if target - PATROL_OFFSET <= position.center_y <= target + PATROL_OFFSET:
            self.paddle.velocity.y = 0.0
            self.random_position = 0
        elif abs(target - position.center_y) < self.paddle.speed:
            position.center_y = target
            self.random_position = 0
        elif position.center_y < target:
            self.paddle.velocity.y = self.paddle.speed
        else:
            self.paddle.velocity.y = -self.paddle.speed