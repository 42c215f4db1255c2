"""The ball: movement, wall bounces, serve and speed control."""

import math

import pygame

from .geometry import Rect, Vector2D, rand_float, random_choice, round_half_away
from .settings import HALF_SCREEN_HEIGHT, HALF_SCREEN_WIDTH, SCREEN_HEIGHT

MAX_BALL_SPEED = 15
BALL_SIZE = 20
WHITE = (255, 255, 255)


class Ball:
    """A square ball moving with a velocity in pixels per frame."""

    def __init__(self, sounds=None, rng=None):
        self.position = Rect(
            HALF_SCREEN_WIDTH - BALL_SIZE // 2,
            HALF_SCREEN_HEIGHT - BALL_SIZE // 2,
            BALL_SIZE,
            BALL_SIZE,
        )
        self.velocity = Vector2D(0.0, 0.0)
        self.sounds = dict(sounds or {})
        self.rng = rng

    def draw(self, surface) -> None:
        pygame.draw.rect(
            surface,
            WHITE,
            pygame.Rect(self.position.x, self.position.y, self.position.width, self.position.height),
        )

    def update(self) -> None:
        """Move the ball by its velocity."""
        self.position.x += round_half_away(self.velocity.x)
        self.position.y += round_half_away(self.velocity.y)

    def handle_wall_collision(self) -> None:
        """Bounce off the top or bottom edge of the screen."""
        if self.position.top < 0 or self.position.bottom > SCREEN_HEIGHT:
            try:
                self.play_sound("wall")
            except pygame.error:
                return
            if self.position.bottom >= SCREEN_HEIGHT:
                self.position.bottom = SCREEN_HEIGHT
            else:
                self.position.top = 0
            self.velocity.y *= -1

    def set_initial_velocity(self) -> None:
        """Serve the ball in a random direction at reduced speed."""
        direction_x = random_choice(
            rand_float(-2, -1, self.rng), rand_float(1, 2, self.rng), self.rng
        )
        direction_y = rand_float(-2, 2, self.rng)
        reducer = 0.25
        self.velocity.x = MAX_BALL_SPEED * reducer * direction_x
        self.velocity.y = MAX_BALL_SPEED * reducer * direction_y

    def normalize_speed(self) -> None:
        """Scale the velocity down so the speed does not exceed the maximum."""
        speed = math.hypot(self.velocity.x, self.velocity.y)
        if speed > MAX_BALL_SPEED:
            factor = MAX_BALL_SPEED / speed
            self.velocity.x *= factor
            self.velocity.y *= factor

    def at_angle(self, angle: float) -> float:
        """Vertical speed that sends the ball off at angle degrees."""
        radians = angle * math.pi / 180
        return float(round_half_away(math.tan(radians) * self.velocity.x))

    def accelerate(self, amount: float) -> None:
        """Set both velocity components to the maximum speed times amount."""
        sign_x = -1.0 if self.velocity.x < 0 else 1.0
        sign_y = -1.0 if self.velocity.y < 0 else 1.0
        self.velocity.x = sign_x * MAX_BALL_SPEED * amount
        self.velocity.y = sign_y * MAX_BALL_SPEED * amount

    def play_sound(self, name: str) -> None:
        """Play the named sound if it is loaded."""
        sound = self.sounds.get(name)
        if sound is not None:
            sound.play()