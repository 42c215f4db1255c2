"""Game rules: serving, collisions, scoring and the enemy's attack."""

from .ball import Ball
from .geometry import rand_float, rand_int
from .paddle import Enemy, Player
from .settings import (
    HALF_SCREEN_WIDTH,
    POINTS_TO_WIN,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    GameState,
    PlayerTurn,
    Score,
)

ATTACK_OFFSET = 10
SERVE_MARGIN = 20


class Game:
    """The whole match: ball, both paddles, score and current phase."""

    def __init__(self, sounds=None, rng=None):
        self.rng = rng
        self.score = Score()
        self.state = GameState.FIRST_SERVICE
        self.turn = PlayerTurn.USER
        self.volley_count = 0
        self.ball = Ball(sounds, rng)
        self.player = Player()
        self.enemy = Enemy(rng)
        self.objects = [self.ball, self.player, self.enemy]

    def start_new_round(self) -> None:
        """Put the ball back on the centre line and serve it slowly."""
        self.volley_count = 0
        self.ball.velocity.x = 0.0
        self.ball.velocity.y = 0.0
        self.ball.position.move_center(
            HALF_SCREEN_WIDTH,
            rand_int(SERVE_MARGIN, SCREEN_HEIGHT - SERVE_MARGIN, self.rng),
        )
        self.ball.set_initial_velocity()

    def check_win_condition(self) -> None:
        """End the game if someone reached the winning score, else start a new round."""
        if self.is_game_over():
            self.state = GameState.GAME_OVER
        else:
            self.start_new_round()

    def is_game_over(self) -> bool:
        return self.score.player == POINTS_TO_WIN or self.score.enemy == POINTS_TO_WIN

    def handle_enemy_attack(self) -> None:
        """Steer the enemy paddle towards where the ball is predicted to arrive."""
        ball = self.ball
        paddle = self.enemy.paddle
        if ball.velocity.x == 0:
            paddle.velocity.y = 0.0
            return

        slope = ball.velocity.y / ball.velocity.x
        y_intercept = ball.position.y - slope * ball.position.x
        predicted_y = int(slope * paddle.position.x + y_intercept)

        if predicted_y - ATTACK_OFFSET <= paddle.position.center_x <= predicted_y + ATTACK_OFFSET:
            paddle.velocity.y = 0.0
            return

        center_y = paddle.position.center_y
        speed = paddle.speed
        if center_y > predicted_y:
            if center_y - predicted_y < int(speed):
                paddle.velocity.y = 0.0
                return
            paddle.velocity.y = rand_float(-speed / 2, -speed, self.rng)

        center_y = paddle.position.center_y
        if center_y < predicted_y:
            if predicted_y - center_y < int(speed):
                paddle.velocity.y = 0.0
                return
            paddle.velocity.y = rand_float(speed / 2, speed, self.rng)

    def handle_paddle_collision(self, paddle) -> None:
        """Bounce the ball off the given paddle (or the holder of a paddle)."""
        paddle = getattr(paddle, "paddle", paddle)
        self.ball.play_sound("paddle")

        self.volley_count += 1
        self.ball.accelerate(1)

        if paddle is self.player.paddle:
            self.turn = PlayerTurn.COMPUTER
            self.ball.position.right = self.player.paddle.position.left
            self.player.bounce(self.ball, self.volley_count)
        elif paddle is self.enemy.paddle:
            self.turn = PlayerTurn.USER
            self.ball.position.left = self.enemy.paddle.position.right
            self.enemy.bounce(self.ball, self.volley_count)

    def handle_first_service(self) -> None:
        """Serve a resting ball and start playing."""
        if self.ball.velocity.x == 0 and self.ball.velocity.y == 0:
            self.volley_count = 0
            self.ball.set_initial_velocity()
            self.state = GameState.PLAYING

    def handle_score(self) -> None:
        """Award a point when the ball leaves the screen on either side."""
        if self.ball.position.left <= 0:
            self.ball.play_sound("score")
            self.score.player += 1
            self.check_win_condition()

        if self.ball.position.right >= SCREEN_WIDTH:
            self.ball.play_sound("score")
            self.score.enemy += 1
            self.check_win_condition()

    def update(self) -> None:
        """Advance the game by one frame."""
        if self.state in (GameState.PAUSED, GameState.GAME_OVER):
            return

        if self.state is GameState.FIRST_SERVICE:
            self.handle_first_service()
            return

        self.turn = PlayerTurn.COMPUTER if self.ball.velocity.x < 0.0 else PlayerTurn.USER

        if self.volley_count < 4:
            self.ball.normalize_speed()

        if self.ball.position.collides_with(self.player.paddle.position):
            self.handle_paddle_collision(self.player.paddle)
        elif self.ball.position.collides_with(self.enemy.paddle.position):
            self.handle_paddle_collision(self.enemy.paddle)
        else:
            self.ball.handle_wall_collision()

        self.handle_score()

        if self.turn is PlayerTurn.COMPUTER:
            self.handle_enemy_attack()
        else:
            self.enemy.patrol()

        for obj in self.objects:
            obj.update()