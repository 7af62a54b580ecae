"""
GameLoop - owns the snake, food, score and status and drives the periodic tick.

Presentation is reduced to three sinks:
  - render_sink(GameState): after every reset and every applied tick
  - score_sink(int): after every score change
  - status_sink(PlayButtonState): on play / stop / finish
"""

import logging
import random
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Union

from wrapsnake.domain.config import GameConfig, ValidationResult
from wrapsnake.domain.constants import (
    KEY_DIRECTIONS,
    OPPOSITE,
    START_DIRECTION,
    VALID_MOVES,
    LABEL_START,
    LABEL_STOP,
    LABEL_GAME_OVER,
    RESULT_WON,
    RESULT_LOST,
    VALID_RESULTS,
)
from wrapsnake.domain.food import Food
from wrapsnake.domain.game_state import GameState
from wrapsnake.domain.point import Point
from wrapsnake.domain.score import Score
from wrapsnake.domain.snake import Snake
from wrapsnake.domain.status import Status
from wrapsnake.services.tick_scheduler import TickScheduler

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlayButtonState:
    label: str
    disabled: bool = False


class GameLoop:
    """
    A single game instance. Construct as many as needed; nothing is shared.

    init() must succeed before the game can be played. Until then the status
    is idle and no snake, food or config exists.
    """

    def __init__(
        self,
        render_sink: Optional[Callable[[GameState], None]] = None,
        score_sink: Optional[Callable[[int], None]] = None,
        status_sink: Optional[Callable[[PlayButtonState], None]] = None,
        rng: Optional[random.Random] = None,
        ticker: Optional[TickScheduler] = None
    ):
        self.render_sink = render_sink
        self.status_sink = status_sink
        self.rng = rng or random.Random()
        self.ticker = ticker or TickScheduler()

        self.config: Optional[GameConfig] = None
        self.width: Optional[int] = None
        self.height: Optional[int] = None
        self.snake: Optional[Snake] = None
        self.food = Food()
        self.score = Score(score_sink)
        self.status = Status()
        self.outcome: Optional[str] = None
        self.tick_number = 0

    def init(self, settings: Union[GameConfig, Mapping[str, Any], None] = None) -> ValidationResult:
        """
        Validate the settings and, if they are valid, set up a fresh game.

        On invalid settings every error is logged and nothing else is created.
        """
        config = settings if isinstance(settings, GameConfig) else GameConfig.init(settings)

        validation = config.validate()
        if not validation.is_valid:
            for err in validation.errors:
                logger.error(err)
            return validation

        self.config = config
        self.width = config.cols_count
        self.height = config.rows_count
        logger.info(
            f"Game initialised: {self.width}x{self.height}, speed={config.speed}, "
            f"win_food_count={config.win_food_count}"
        )

        self.reset()
        return validation

    @property
    def is_initialized(self) -> bool:
        return self.config is not None

    def _require_init(self) -> None:
        if not self.is_initialized:
            raise RuntimeError("Game is not initialised; call init() with valid settings first.")

    def reset(self) -> None:
        """Put the game back in its starting position, stopped."""
        self._require_init()
        # Forced from any state, including finished
        self.status.set_stopped()
        self.ticker.cancel()
        self.set_play_button(LABEL_START)
        self.score.drop()
        self.outcome = None
        self.tick_number = 0
        self.snake = Snake(self.get_start_snake_body_position(), START_DIRECTION, self.width, self.height)
        self.food.set_coordinates(self.get_random_free_coordinates())
        logger.info(f"Game reset: snake at {self.snake.head}, food at {self.food.get_coordinates()}")
        self.render()

    def play(self) -> None:
        self._require_init()
        if not self.status.is_stopped():
            logger.debug(f"Ignoring play() while {self.status.condition.value}")
            return
        self.status.set_playing()
        self.ticker.start(self.config.tick_interval, self.tick)
        self.set_play_button(LABEL_STOP)
        logger.info("Game playing")

    def stop(self) -> None:
        """Pause a playing game; resumable with play()."""
        if not self.status.is_playing():
            logger.debug(f"Ignoring stop() while {self.status.condition.value}")
            return
        self.status.set_stopped()
        self.ticker.cancel()
        self.set_play_button(LABEL_START)
        logger.info("Game stopped")

    def finish(self, outcome: str) -> None:
        """End a playing game with RESULT_WON or RESULT_LOST; terminal until reset()."""
        if outcome not in VALID_RESULTS:
            raise ValueError(f"Unknown outcome: {outcome!r}")
        if not self.status.is_playing():
            logger.debug(f"Ignoring finish() while {self.status.condition.value}")
            return
        self.status.set_finished()
        self.ticker.cancel()
        self.outcome = outcome
        self.set_play_button(LABEL_GAME_OVER, disabled=True)
        logger.info(f"Game over: {outcome} with score {self.score.count} after {self.tick_number} ticks")

    def set_play_button(self, label: str, disabled: bool = False) -> None:
        if self.status_sink is not None:
            self.status_sink(PlayButtonState(label, disabled))

    def tick(self) -> None:
        """
        Advance the game by one step:
          1) Stop with a loss if the next head point is on the body
          2) On food: score, grow, move the food; finish with a win past the threshold
          3) Step the snake and render
        """
        if not self.status.is_playing():
            logger.debug(f"Ignoring tick while {self.status.condition.value}")
            return

        if not self.can_make_step():
            self.finish(RESULT_LOST)
            return

        if self.food.is_on_point(self.snake.next_step_point()):
            self.score.increment()
            self.snake.grow_up()
            self.food.set_coordinates(self.get_random_free_coordinates())

            if self.is_game_won():
                self.finish(RESULT_WON)

        self.snake.make_step()
        self.tick_number += 1
        logger.debug(f"Tick {self.tick_number}: head at {self.snake.head}, length {len(self.snake)}")
        self.render()

    def is_game_won(self) -> bool:
        return len(self.snake) > self.config.win_food_count

    def can_make_step(self) -> bool:
        # No bounds check: movement wraps around the board
        return not self.snake.is_on_point(self.snake.next_step_point())

    def get_start_snake_body_position(self):
        return [Point(self.width // 2, self.height // 2)]

    def get_random_free_coordinates(self) -> Point:
        """
        Return a random cell not occupied by the snake or the current food.
        We'll do a simple rejection loop; the board is mostly empty in practice.
        """
        exclude = set(self.snake.positions)
        food = self.food.get_coordinates()
        if food is not None:
            exclude.add(food)

        if len(exclude) >= self.width * self.height:
            raise RuntimeError("No free cell left on the board.")

        while True:
            point = Point(self.rng.randrange(self.width), self.rng.randrange(self.height))
            if point not in exclude:
                return point

    def is_direction_valid(self, direction: str) -> bool:
        """A direction is valid unless it reverses the last step."""
        if direction not in VALID_MOVES:
            return False
        return OPPOSITE[direction] != self.snake.last_step_direction

    def request_direction(self, direction: str) -> bool:
        """Apply a direction change if the game is playing and it is legal."""
        if not self.status.is_playing():
            return False

        if not self.is_direction_valid(direction):
            logger.debug(f"Rejected direction {direction!r} after {self.snake.last_step_direction!r}")
            return False

        self.snake.set_direction(direction)
        return True

    def handle_key(self, code: str) -> bool:
        direction = KEY_DIRECTIONS.get(code)
        if direction is None:
            return False
        return self.request_direction(direction)

    def toggle(self) -> None:
        """Start/Stop button."""
        if self.status.is_playing():
            self.stop()
        elif self.status.is_stopped():
            self.play()

    def new_game(self) -> None:
        """New game button."""
        self.reset()

    def run_pending(self) -> None:
        self.ticker.run_pending()

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        self._require_init()
        return GameState(
            tick_number=self.tick_number,
            snake_body=self.snake.body,
            food=self.food.get_coordinates(),
            score=self.score.count,
            status=self.status.condition,
            width=self.width,
            height=self.height,
            outcome=self.outcome,
            last_step_direction=self.snake.last_step_direction
        )

    def render(self) -> None:
        if self.render_sink is not None:
            self.render_sink(self.get_current_state())
